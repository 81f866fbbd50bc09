"""Exception types raised by the strict token APIs."""
from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    INVALID_STRUCTURE = 1
    AUDIENCE_MISMATCH = 2
    INVALID_SIGNATURE = 3
    EXPIRATION_EXPIRED = 4
    NOT_BEFORE_NOT_ELAPSED = 5
    EXPIRATION_NOT_SET = 6
    NOT_BEFORE_NOT_SET = 7
    INVALID_CLAIM = 8
    INVALID_SECRET = 9
    INVALID_AUDIENCE = 10
    AUDIENCE_NOT_SET = 11
    ALGORITHM_NOT_ALLOWED = 12
    ALGORITHM_NOT_SET = 13
    ALGORITHM_IS_NONE = 14


_TIMING_CODES = frozenset(
    {
        ErrorCode.EXPIRATION_EXPIRED,
        ErrorCode.NOT_BEFORE_NOT_ELAPSED,
        ErrorCode.EXPIRATION_NOT_SET,
        ErrorCode.NOT_BEFORE_NOT_SET,
    }
)


class JwtError(Exception):
    """Base error carrying a stable numeric ``code`` callers can branch on."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.message = message
        self.code = ErrorCode(code)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={int(self.code)})"


class BuildError(JwtError):
    """Raised while assembling a token."""


class ParseError(JwtError):
    """Raised when a required claim cannot be read from a token."""


class ValidateError(JwtError):
    """Raised when a token fails a structural, signature or claim check."""


class TokensError(JwtError):
    """Raised by the convenience facade for invalid input."""


class SecretError(JwtError):
    """Raised when a signing secret does not meet the strength policy."""

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message, ErrorCode.INVALID_SECRET)
        self.reason = reason


def is_expiration_error(code: int) -> bool:
    """Return ``True`` when ``code`` relates to the ``exp`` or ``nbf`` claims."""

    try:
        return ErrorCode(code) in _TIMING_CODES
    except ValueError:
        return False


__all__ = [
    "BuildError",
    "ErrorCode",
    "JwtError",
    "ParseError",
    "SecretError",
    "TokensError",
    "ValidateError",
    "is_expiration_error",
]
