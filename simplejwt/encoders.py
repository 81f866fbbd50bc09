"""Token segment encoders."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from .utils import hmac_hash, json_encode, urlsafe_encode


class Encoder(ABC):
    """Capability used by the builder and validator to produce token segments.

    Alternative signing schemes can be plugged into :class:`~simplejwt.build.Build`
    and :class:`~simplejwt.validate.Validate` by implementing this interface.
    """

    @abstractmethod
    def get_algorithm(self) -> str:
        """Value written to the ``alg`` header claim."""

    @abstractmethod
    def encode(self, claims: Mapping[str, Any]) -> str:
        """Encode a header or payload mapping into a token segment."""

    @abstractmethod
    def signature(self, header: Mapping[str, Any], payload: Mapping[str, Any], secret: str) -> str:
        """Return the signature segment for ``header`` and ``payload``."""


class EncodeHS256(Encoder):
    ALGORITHM = "HS256"
    HASH_ALGORITHM = "sha256"

    def get_algorithm(self) -> str:
        return self.ALGORITHM

    def encode(self, claims: Mapping[str, Any]) -> str:
        return urlsafe_encode(json_encode(claims).encode("utf-8"))

    def signature(self, header: Mapping[str, Any], payload: Mapping[str, Any], secret: str) -> str:
        signing_input = f"{self.encode(header)}.{self.encode(payload)}"
        return urlsafe_encode(hmac_hash(self.HASH_ALGORITHM, signing_input, secret))


__all__ = ["EncodeHS256", "Encoder"]
