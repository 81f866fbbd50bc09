"""Stateless predicates used to check token claims."""
from __future__ import annotations

import hmac
from typing import Any, Iterable, Optional, Sequence, Union

from .clock import Clock, SystemClock
from .jwt import has_valid_structure

Audience = Union[str, Sequence[str]]


def is_timestamp(value: Any) -> bool:
    """Timestamps are plain integers; ``bool`` does not count."""

    return isinstance(value, int) and not isinstance(value, bool)


class Validator:
    """Claim checks that return booleans.

    The clock is read on every call, so a chain of checks may observe
    different values of "now".
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock = clock or SystemClock()

    def expiration(self, expiration: int) -> bool:
        """``False`` once the current time reaches ``expiration``."""

        return is_timestamp(expiration) and expiration > self.clock.now()

    def not_before(self, not_before: int) -> bool:
        """``True`` once ``not_before`` has passed. An unset (zero) value never passes."""

        return is_timestamp(not_before) and not_before != 0 and not_before <= self.clock.now()

    def audience(self, audience: Audience, check: str) -> bool:
        """Match a single audience or membership in a list of audiences.

        Any other claim shape never matches.
        """

        if isinstance(audience, str):
            return audience == check
        if isinstance(audience, list) and all(isinstance(item, str) for item in audience):
            return check in audience
        return False

    def signature(self, generated: str, actual: str) -> bool:
        return hmac.compare_digest(generated.encode("utf-8"), actual.encode("utf-8"))

    def algorithm(self, algorithm: str, valid_algorithms: Iterable[str]) -> bool:
        valid = list(valid_algorithms)
        # An empty allow-list accepts the literal "none" algorithm.
        if not valid and algorithm == "none":
            return True
        return algorithm in valid

    def structure(self, token: str) -> bool:
        return has_valid_structure(token)


__all__ = ["Audience", "Validator", "is_timestamp"]
