"""Rays with an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass, field

from rendray.vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line ``origin + t * direction``."""

    origin: Point3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)

    def at(self, t: float) -> Point3:
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + self.direction * t