"""HMAC digest helper."""
from __future__ import annotations

import hmac
from typing import Union

BytesLike = Union[str, bytes]


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def hmac_hash(algorithm: str, message: BytesLike, secret: BytesLike) -> bytes:
    """Return the raw HMAC digest of ``message`` keyed with ``secret``."""

    return hmac.new(_as_bytes(secret), _as_bytes(message), algorithm).digest()
