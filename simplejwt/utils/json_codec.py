"""Compact JSON serialisation for header and payload claims."""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping


def json_encode(claims: Mapping[str, Any]) -> str:
    return json.dumps(dict(claims), separators=(",", ":"))


def json_decode(text: str) -> Dict[str, Any]:
    """Decode ``text`` into a dictionary.

    Empty input, malformed JSON and JSON values that are not objects all
    produce an empty dictionary.
    """

    if not text:
        return {}
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError:
        return {}
    if not isinstance(decoded, dict):
        return {}
    return decoded
