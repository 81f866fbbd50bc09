"""Conversions between standard base64 and the URL safe alphabet."""
from __future__ import annotations

import base64


def to_base64url(base64_string: str) -> str:
    return base64_string.replace("+", "-").replace("/", "_").replace("=", "")


def to_base64(url_string: str) -> str:
    return url_string.replace("-", "+").replace("_", "/")


def add_padding(base64_string: str) -> str:
    """Append ``=`` until the length is a multiple of four."""

    missing = -len(base64_string) % 4
    return base64_string + "=" * missing


def urlsafe_encode(data: bytes) -> str:
    return to_base64url(base64.b64encode(data).decode("ascii"))


def urlsafe_decode(segment: str) -> bytes:
    """Decode a base64url segment.

    Characters outside the base64 alphabet raise ``binascii.Error`` instead of
    being silently discarded.
    """

    return base64.b64decode(add_padding(to_base64(segment)), validate=True)
