"""Fluent builder for signed tokens."""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Sequence, Union

from .encoders import Encoder
from .errors import BuildError, ErrorCode, SecretError
from .jwt import Jwt
from .secret import Secret
from .validator import Validator

logger = logging.getLogger(__name__)

_NUMERIC_KEY = re.compile(r"-?\d+")


def is_valid_claim_key(key: Any) -> bool:
    """Claim keys must be strings that do not look like integers."""

    return isinstance(key, str) and _NUMERIC_KEY.fullmatch(key) is None


class Build:
    """Accumulate header and payload claims and produce a signed :class:`Jwt`.

    Every setter returns the builder so calls can be chained. A builder keeps
    state between calls and must not be shared between threads; call
    :meth:`reset` to reuse it for another token.
    """

    def __init__(self, token_type: str, validator: Validator, secret: Secret, encoder: Encoder) -> None:
        self.type = token_type
        self.validator = validator
        self.secret_policy = secret
        self.encoder = encoder
        self._header: Dict[str, Any] = {}
        self._payload: Dict[str, Any] = {}
        self._secret: Optional[str] = None

    # Header claims -----------------------------------------------------------
    def set_content_type(self, content_type: str) -> "Build":
        self._header["cty"] = content_type
        return self

    def set_header_claim(self, key: str, value: Any) -> "Build":
        """Add a custom header claim. ``alg`` and ``typ`` are reserved and always overwritten."""

        self._check_key(key, "header")
        self._header[key] = value
        return self

    def get_header(self) -> Dict[str, Any]:
        header = dict(self._header)
        header.update({"alg": self.encoder.get_algorithm(), "typ": self.type})
        return header

    # Payload claims ----------------------------------------------------------
    def set_issuer(self, issuer: str) -> "Build":
        self._payload["iss"] = issuer
        return self

    def set_subject(self, subject: str) -> "Build":
        self._payload["sub"] = subject
        return self

    def set_audience(self, audience: Union[str, Sequence[str]]) -> "Build":
        """Set ``aud`` to a single recipient or a list of recipients."""

        if isinstance(audience, str):
            self._payload["aud"] = audience
            return self
        if isinstance(audience, (list, tuple)) and all(isinstance(item, str) for item in audience):
            self._payload["aud"] = list(audience)
            return self
        raise BuildError(
            "Invalid audience claim, expected a string or a list of strings.",
            ErrorCode.INVALID_AUDIENCE,
        )

    def set_expiration(self, timestamp: int) -> "Build":
        timestamp = int(timestamp)
        if not self.validator.expiration(timestamp):
            raise BuildError("Expiration claim has expired.", ErrorCode.EXPIRATION_EXPIRED)
        self._payload["exp"] = timestamp
        return self

    def set_not_before(self, timestamp: int) -> "Build":
        self._payload["nbf"] = int(timestamp)
        return self

    def set_issued_at(self, timestamp: int) -> "Build":
        self._payload["iat"] = int(timestamp)
        return self

    def set_jwt_id(self, jwt_id: str) -> "Build":
        self._payload["jti"] = jwt_id
        return self

    def set_payload_claim(self, key: str, value: Any) -> "Build":
        self._check_key(key, "payload")
        self._payload[key] = value
        return self

    def get_payload(self) -> Dict[str, Any]:
        return dict(self._payload)

    # Signing -----------------------------------------------------------------
    def set_secret(self, secret: str) -> "Build":
        self._secret = self._enforce_secret(secret)
        return self

    def build(self) -> Jwt:
        secret = self._enforce_secret(self._secret if self._secret is not None else "")
        header = self.get_header()
        payload = self.get_payload()
        token = ".".join(
            (
                self.encoder.encode(header),
                self.encoder.encode(payload),
                self.encoder.signature(header, payload, secret),
            )
        )
        logger.debug("Built %s token with claims: %s", header["alg"], ", ".join(payload) or "<empty>")
        return Jwt(token, secret)

    def reset(self) -> "Build":
        self._header = {}
        self._payload = {}
        self._secret = None
        return self

    # Internal ----------------------------------------------------------------
    def _enforce_secret(self, secret: str) -> str:
        try:
            return self.secret_policy.enforce(secret)
        except SecretError as exc:
            raise BuildError(exc.message, ErrorCode.INVALID_SECRET) from exc

    @staticmethod
    def _check_key(key: Any, section: str) -> None:
        if not is_valid_claim_key(key):
            raise BuildError(
                f"Invalid {section} claim key {key!r}, keys must be non-numeric strings.",
                ErrorCode.INVALID_CLAIM,
            )


__all__ = ["Build", "is_valid_claim_key"]
