"""Token segment decoders."""
from __future__ import annotations

import binascii
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from .utils import json_decode, urlsafe_decode

logger = logging.getLogger(__name__)


class Decoder(ABC):
    @abstractmethod
    def decode(self, segment: str) -> Dict[str, Any]:
        """Decode a header or payload segment into a mapping."""


class DecodeHS256(Decoder):
    """Lenient decoder: undecodable segments yield an empty mapping.

    Missing claims are reported by the accessors that need them, not here.
    """

    def decode(self, segment: str) -> Dict[str, Any]:
        try:
            text = urlsafe_decode(segment).decode("utf-8")
        except (binascii.Error, ValueError) as exc:
            logger.debug("Unable to decode token segment: %s", exc)
            text = ""
        return json_decode(text)


__all__ = ["DecodeHS256", "Decoder"]
