"""Read-only view over a decoded token."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from .clock import Clock, SystemClock
from .jwt import Jwt
from .validator import is_timestamp


class Parsed:
    """Decoded header and payload of a token.

    Claim accessors never raise: missing string claims read as ``""`` and
    missing or non-integer timestamps as ``0``.
    """

    def __init__(
        self,
        jwt: Jwt,
        header: Dict[str, Any],
        payload: Dict[str, Any],
        signature: str,
        clock: Optional[Clock] = None,
    ) -> None:
        self._jwt = jwt
        self._header = dict(header)
        self._payload = dict(payload)
        self._signature = signature
        self._clock = clock or SystemClock()

    def get_jwt(self) -> Jwt:
        return self._jwt

    def get_header(self) -> Dict[str, Any]:
        return dict(self._header)

    def get_payload(self) -> Dict[str, Any]:
        return dict(self._payload)

    def get_signature(self) -> str:
        return self._signature

    def get_header_claim(self, claim: str, default: Any = None) -> Any:
        return self._header.get(claim, default)

    def get_payload_claim(self, claim: str, default: Any = None) -> Any:
        return self._payload.get(claim, default)

    # Header ------------------------------------------------------------------
    def get_algorithm(self) -> str:
        return self.get_header_claim("alg", "")

    def get_type(self) -> str:
        return self.get_header_claim("typ", "")

    def get_content_type(self) -> str:
        return self.get_header_claim("cty", "")

    # Payload -----------------------------------------------------------------
    def get_issuer(self) -> str:
        return self.get_payload_claim("iss", "")

    def get_subject(self) -> str:
        return self.get_payload_claim("sub", "")

    def get_audience(self) -> Union[str, List[str]]:
        return self.get_payload_claim("aud", "")

    def get_jwt_id(self) -> str:
        return self.get_payload_claim("jti", "")

    def get_expiration(self) -> int:
        return self._timestamp_claim("exp")

    def get_not_before(self) -> int:
        return self._timestamp_claim("nbf")

    def get_issued_at(self) -> int:
        return self._timestamp_claim("iat")

    def get_expires_in(self) -> int:
        """Seconds until the token expires, ``0`` if expired or ``exp`` is unset."""

        expires_in = self.get_expiration() - self._clock.now()
        return expires_in if expires_in > 0 else 0

    def get_usable_in(self) -> int:
        """Seconds until the ``nbf`` time is reached, ``0`` when already usable."""

        usable_in = self.get_not_before() - self._clock.now()
        return usable_in if usable_in > 0 else 0

    def _timestamp_claim(self, claim: str) -> int:
        value = self.get_payload_claim(claim, 0)
        return value if is_timestamp(value) else 0


__all__ = ["Parsed"]
