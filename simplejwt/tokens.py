"""Factory and convenience facade over the strict token APIs.

The ``validate*`` and ``get_*`` helpers never raise on a bad token: they
return ``False`` or an empty mapping so callers can use them as simple
predicates. Use :meth:`Tokens.builder`, :meth:`Tokens.parser` and
:meth:`Tokens.validator` when the precise failure matters.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .build import Build, is_valid_claim_key
from .clock import Clock, SystemClock
from .config import Settings, get_settings
from .decoders import DecodeHS256
from .encoders import EncodeHS256
from .errors import ErrorCode, JwtError, TokensError
from .jwt import Jwt
from .parse import Parse
from .secret import Secret
from .validate import Validate
from .validator import Validator

logger = logging.getLogger(__name__)


class Tokens:
    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.clock = clock or SystemClock()

    # Factories ---------------------------------------------------------------
    def builder(self) -> Build:
        return Build(self.settings.token_type, Validator(self.clock), Secret(), EncodeHS256())

    def parser(self, token: str, secret: str) -> Parse:
        return Parse(Jwt(token, secret), DecodeHS256(), clock=self.clock)

    def validator(self, token: str, secret: str) -> Validate:
        return Validate(self.parser(token, secret), EncodeHS256(), Validator(self.clock))

    # Creation ----------------------------------------------------------------
    def create(
        self,
        user_key: str,
        user_id: Union[str, int],
        secret: str,
        expiration: int,
        issuer: str,
    ) -> Jwt:
        """Create a token identifying a user, with ``exp``, ``iss`` and ``iat`` set."""

        return (
            self.builder()
            .set_payload_claim(user_key, user_id)
            .set_secret(secret)
            .set_expiration(expiration)
            .set_issuer(issuer)
            .set_issued_at(self.clock.now())
            .build()
        )

    def custom_payload(self, payload: Mapping[Any, Any], secret: str) -> Jwt:
        builder = self.builder()
        for key, value in payload.items():
            if not is_valid_claim_key(key):
                raise TokensError("Invalid payload claim.", ErrorCode.INVALID_CLAIM)
            builder.set_payload_claim(key, value)
        return builder.set_secret(secret).build()

    # Lenient accessors -------------------------------------------------------
    def get_header(self, token: str, secret: str) -> Dict[str, Any]:
        try:
            return self.parser(token, secret).parse().get_header()
        except JwtError as exc:
            logger.debug("Unable to read token header: %s (code=%s)", exc, int(exc.code))
            return {}

    def get_payload(self, token: str, secret: str) -> Dict[str, Any]:
        try:
            return self.parser(token, secret).parse().get_payload()
        except JwtError as exc:
            logger.debug("Unable to read token payload: %s (code=%s)", exc, int(exc.code))
            return {}

    # Lenient validation ------------------------------------------------------
    def validate(self, token: str, secret: str) -> bool:
        """Check the structure and signature, rejecting the ``none`` algorithm."""

        return self._passes(
            token,
            secret,
            lambda validate: validate.structure().algorithm_not_none().signature(),
        )

    def validate_expiration(self, token: str, secret: str) -> bool:
        return self._passes(token, secret, lambda validate: validate.expiration())

    def validate_not_before(self, token: str, secret: str) -> bool:
        return self._passes(token, secret, lambda validate: validate.not_before())

    def validate_audience(self, token: str, secret: str, audience: Optional[str] = None) -> bool:
        check = audience if audience is not None else self.settings.audience
        if check is None:
            return False
        return self._passes(token, secret, lambda validate: validate.audience(check))

    def validate_algorithm(self, token: str, secret: str) -> bool:
        allowed = list(self.settings.allowed_algorithms)
        return self._passes(token, secret, lambda validate: validate.algorithm(allowed))

    def _passes(self, token: str, secret: str, checks: Callable[[Validate], Validate]) -> bool:
        try:
            checks(self.validator(token, secret))
        except JwtError as exc:
            logger.debug("Token rejected: %s (code=%s)", exc, int(exc.code))
            return False
        return True


# Module level shortcuts returning plain strings and booleans.

def _lenient_tokens() -> Tokens:
    """Facade for the lenient shortcuts, on library defaults if settings do not load."""

    try:
        return Tokens()
    except ValueError as exc:
        logger.warning("Invalid simplejwt settings, using defaults: %s", exc)
        return Tokens(settings=Settings())


def create(
    user_id: Union[str, int],
    secret: str,
    expiration: int,
    issuer: str,
    user_key: Optional[str] = None,
) -> str:
    tokens = Tokens()
    key = user_key if user_key is not None else tokens.settings.user_key
    return tokens.create(key, user_id, secret, expiration, issuer).get_token()


def custom_payload(payload: Mapping[Any, Any], secret: str) -> str:
    return Tokens().custom_payload(payload, secret).get_token()


def validate(token: str, secret: str) -> bool:
    return _lenient_tokens().validate(token, secret)


def get_header(token: str, secret: str) -> Dict[str, Any]:
    return _lenient_tokens().get_header(token, secret)


def get_payload(token: str, secret: str) -> Dict[str, Any]:
    return _lenient_tokens().get_payload(token, secret)


def validate_expiration(token: str, secret: str) -> bool:
    return _lenient_tokens().validate_expiration(token, secret)


def validate_not_before(token: str, secret: str) -> bool:
    return _lenient_tokens().validate_not_before(token, secret)


__all__ = [
    "Tokens",
    "create",
    "custom_payload",
    "get_header",
    "get_payload",
    "validate",
    "validate_expiration",
    "validate_not_before",
]
