"""Closed and open real intervals."""

from __future__ import annotations

from dataclasses import dataclass

from rendray.util import INFINITY


@dataclass(frozen=True, slots=True)
class Interval:
    """A range of real numbers from ``min`` to ``max``; empty by default."""

    min: float = INFINITY
    max: float = -INFINITY

    def contains(self, x: float) -> bool:
        """Return True if ``min <= x <= max``."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """Return True if ``min < x < max``."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        """Limit ``x`` to the interval."""
        if self.min > x:
            return self.min
        if self.max < x:
            return self.max
        return x