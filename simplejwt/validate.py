"""Strict, chainable validation of a parsed token."""
from __future__ import annotations

from typing import Iterable

from .encoders import Encoder
from .errors import ErrorCode, ValidateError
from .parse import Parse
from .validator import Validator


class Validate:
    """Run signature and claim checks against a token.

    Each method returns ``self`` on success and raises :class:`ValidateError`
    on failure. Missing claims surface as the :class:`~simplejwt.errors.ParseError`
    raised by :class:`Parse`. No check is mandatory, but a token must pass
    :meth:`signature` before any of its claims are trusted.
    """

    def __init__(self, parse: Parse, encoder: Encoder, validator: Validator) -> None:
        self.parse = parse
        self.encoder = encoder
        self.validator = validator

    def structure(self) -> "Validate":
        if not self.validator.structure(self.parse.get_token()):
            raise ValidateError("Token is invalid.", ErrorCode.INVALID_STRUCTURE)
        return self

    def signature(self) -> "Validate":
        generated = self.encoder.signature(
            self.parse.get_decoded_header(),
            self.parse.get_decoded_payload(),
            self.parse.get_secret(),
        )
        if not self.validator.signature(generated, self.parse.get_signature()):
            raise ValidateError("Signature is invalid.", ErrorCode.INVALID_SIGNATURE)
        return self

    def expiration(self) -> "Validate":
        if not self.validator.expiration(self.parse.get_expiration()):
            raise ValidateError("Expiration claim has expired.", ErrorCode.EXPIRATION_EXPIRED)
        return self

    def not_before(self) -> "Validate":
        if not self.validator.not_before(self.parse.get_not_before()):
            raise ValidateError(
                "Not Before claim has not elapsed.", ErrorCode.NOT_BEFORE_NOT_ELAPSED
            )
        return self

    def audience(self, check: str) -> "Validate":
        if not self.validator.audience(self.parse.get_audience(), check):
            raise ValidateError(
                "Audience claim does not contain provided StringOrURI.",
                ErrorCode.AUDIENCE_MISMATCH,
            )
        return self

    def algorithm(self, valid_algorithms: Iterable[str]) -> "Validate":
        if not self.validator.algorithm(self.parse.get_algorithm(), valid_algorithms):
            raise ValidateError(
                "Algorithm claim is not valid.", ErrorCode.ALGORITHM_NOT_ALLOWED
            )
        return self

    def algorithm_not_none(self) -> "Validate":
        algorithm = str(self.parse.get_algorithm()).lower()
        if self.validator.algorithm(algorithm, ["none"]):
            raise ValidateError(
                "Algorithm claim should not be none.", ErrorCode.ALGORITHM_IS_NONE
            )
        return self


__all__ = ["Validate"]
