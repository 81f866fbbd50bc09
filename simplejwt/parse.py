"""Split a token into its segments and decode the claims."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .clock import Clock
from .decoders import Decoder
from .errors import ErrorCode, ParseError
from .jwt import Jwt
from .parsed import Parsed


class Parse:
    """Read access to the header, payload and signature of a :class:`Jwt`.

    The ``get_*`` claim accessors raise :class:`ParseError` when the claim is
    missing; :meth:`parse` never does and leaves defaulting to :class:`Parsed`.
    """

    def __init__(self, jwt: Jwt, decoder: Decoder, clock: Optional[Clock] = None) -> None:
        self.jwt = jwt
        self.decoder = decoder
        self.clock = clock

    def parse(self) -> Parsed:
        return Parsed(
            self.jwt,
            self.get_decoded_header(),
            self.get_decoded_payload(),
            self.get_signature(),
            clock=self.clock,
        )

    def get_token(self) -> str:
        return self.jwt.get_token()

    def get_secret(self) -> str:
        return self.jwt.get_secret()

    def get_signature(self) -> str:
        return self._split_token()[2]

    def get_decoded_header(self) -> Dict[str, Any]:
        return self.decoder.decode(self._split_token()[0])

    def get_decoded_payload(self) -> Dict[str, Any]:
        return self.decoder.decode(self._split_token()[1])

    def get_expiration(self) -> int:
        return self._payload_claim("exp", "Expiration", ErrorCode.EXPIRATION_NOT_SET)

    def get_not_before(self) -> int:
        return self._payload_claim("nbf", "Not Before", ErrorCode.NOT_BEFORE_NOT_SET)

    def get_audience(self) -> Any:
        return self._payload_claim("aud", "Audience", ErrorCode.AUDIENCE_NOT_SET)

    def get_algorithm(self) -> str:
        header = self.get_decoded_header()
        if "alg" not in header:
            raise ParseError("Algorithm claim is not set.", ErrorCode.ALGORITHM_NOT_SET)
        return header["alg"]

    def _payload_claim(self, key: str, label: str, code: ErrorCode) -> Any:
        payload = self.get_decoded_payload()
        if key not in payload:
            raise ParseError(f"{label} claim is not set.", code)
        return payload[key]

    def _split_token(self) -> Tuple[str, str, str]:
        parts: List[str] = self.jwt.get_token().split(".")
        if len(parts) != 3:
            raise ParseError(
                "Token must contain exactly three segments separated by dots.",
                ErrorCode.INVALID_STRUCTURE,
            )
        return parts[0], parts[1], parts[2]


__all__ = ["Parse"]
