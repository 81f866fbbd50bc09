"""Stateless encoding helpers shared by the encoders and decoders."""
from __future__ import annotations

from .base64url import add_padding, to_base64, to_base64url, urlsafe_decode, urlsafe_encode
from .hmac_signer import hmac_hash
from .json_codec import json_decode, json_encode

__all__ = [
    "add_padding",
    "hmac_hash",
    "json_decode",
    "json_encode",
    "to_base64",
    "to_base64url",
    "urlsafe_decode",
    "urlsafe_encode",
]
