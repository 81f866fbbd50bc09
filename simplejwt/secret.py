"""Strength policy for signing secrets."""
from __future__ import annotations

import string
from typing import Callable, List, Tuple

from .errors import SecretError

MIN_LENGTH = 12
SPECIAL_CHARACTERS = "*&!@%^#$"


def _has_any(characters: str) -> Callable[[str], bool]:
    return lambda secret: any(char in characters for char in secret)


_RULES: Tuple[Tuple[str, Callable[[str], bool], str], ...] = (
    (
        "length",
        lambda secret: len(secret) >= MIN_LENGTH,
        f"Secret must be at least {MIN_LENGTH} characters long.",
    ),
    ("digit", _has_any(string.digits), "Secret must contain at least one digit."),
    (
        "uppercase",
        _has_any(string.ascii_uppercase),
        "Secret must contain at least one uppercase letter.",
    ),
    (
        "lowercase",
        _has_any(string.ascii_lowercase),
        "Secret must contain at least one lowercase letter.",
    ),
    (
        "special",
        _has_any(SPECIAL_CHARACTERS),
        f"Secret must contain at least one of the special characters {SPECIAL_CHARACTERS}.",
    ),
)


class Secret:
    """Validate that a secret is long and varied enough to sign tokens.

    Subclass and override :meth:`failures` to apply a different policy.
    """

    def failures(self, secret: str) -> List[Tuple[str, str]]:
        """Return ``(reason, message)`` pairs for every unmet rule, in order."""

        return [(reason, message) for reason, check, message in _RULES if not check(secret)]

    def validate(self, secret: str) -> bool:
        return not self.failures(secret)

    def enforce(self, secret: str) -> str:
        failures = self.failures(secret)
        if failures:
            reason, message = failures[0]
            raise SecretError(f"Invalid secret. {message}", reason)
        return secret


__all__ = ["MIN_LENGTH", "SPECIAL_CHARACTERS", "Secret"]
