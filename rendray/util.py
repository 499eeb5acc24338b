"""Numeric constants and small helpers shared by the renderer."""

from __future__ import annotations

import math
import random

INFINITY: float = math.inf
PI: float = 3.1415926535897932385


def deg_to_rad(deg: float) -> float:
    """Convert an angle from degrees to radians."""
    return (deg * PI) / 180.0


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random real number in ``[low, high)``."""
    return low + (high - low) * random.random()