"""JSON Web Token value object."""
from __future__ import annotations

import re
from dataclasses import dataclass, field

from .errors import ErrorCode, ValidateError

TOKEN_PATTERN = re.compile(r"[a-zA-Z0-9\-_=]+\.[a-zA-Z0-9\-_=]+\.[a-zA-Z0-9\-_=]+")


def has_valid_structure(token: str) -> bool:
    return isinstance(token, str) and TOKEN_PATTERN.fullmatch(token) is not None


@dataclass(frozen=True)
class Jwt:
    """A raw token string paired with the secret used to sign it.

    Construction only checks the three segment shape; the signature is
    verified by :class:`~simplejwt.validate.Validate`.
    """

    token: str
    secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not has_valid_structure(self.token):
            raise ValidateError("Token has an invalid structure.", ErrorCode.INVALID_STRUCTURE)

    def get_token(self) -> str:
        return self.token

    def get_secret(self) -> str:
        return self.secret

    def __str__(self) -> str:
        return self.token


__all__ = ["Jwt", "TOKEN_PATTERN", "has_valid_structure"]
