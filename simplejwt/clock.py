"""Sources of the current Unix timestamp."""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import UTC, datetime


class Clock(ABC):
    @abstractmethod
    def now(self) -> int:
        ...


class SystemClock(Clock):
    def now(self) -> int:
        return int(datetime.now(UTC).timestamp())


class FixedClock(Clock):
    """Clock frozen at a given timestamp, moved forward explicitly."""

    def __init__(self, timestamp: int) -> None:
        self._timestamp = int(timestamp)

    def now(self) -> int:
        return self._timestamp

    def advance(self, seconds: int) -> None:
        self._timestamp += int(seconds)


__all__ = ["Clock", "FixedClock", "SystemClock"]
