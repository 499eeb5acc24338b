"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from rendray.util import random_double

_NEAR_ZERO = 1e-8


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, t: float) -> Vec3:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return (1 / t) * self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{self.x:g} {self.y:g} {self.z:g}"

    def length_squared(self) -> float:
        """Return the squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.length_squared())

    def near_zero(self) -> bool:
        """Return True if every component is very close to zero."""
        return all(abs(c) < _NEAR_ZERO for c in self)


Point3 = Vec3
Color = Vec3


def random_vec(low: float = 0.0, high: float = 1.0) -> Vec3:
    """Return a vector whose components are random in ``[low, high)``."""
    return Vec3(random_double(low, high), random_double(low, high), random_double(low, high))


def dot(u: Vec3, v: Vec3) -> float:
    """Return the dot product of two vectors."""
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    """Return the cross product ``u x v``."""
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """Return ``v`` scaled to unit length."""
    return v / v.length()


def random_in_unit_disk() -> Vec3:
    """Return a random point strictly inside the unit disk in the xy-plane."""
    while True:
        p = Vec3(random_double(-1, 1), random_double(-1, 1), 0.0)
        if p.length_squared() < 1:
            return p


def random_in_unit_sphere() -> Vec3:
    """Return a random point strictly inside the unit sphere."""
    while True:
        p = random_vec(-1, 1)
        if p.length_squared() < 1:
            return p


def random_unit_vector() -> Vec3:
    """Return a random direction of unit length."""
    return unit_vector(random_in_unit_sphere())


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """Return a random unit vector in the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    if dot(on_unit_sphere, normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect ``v`` about the surface normal ``n``."""
    return v - 2 * dot(v, n) * n


def refract(uv: Vec3, n: Vec3, eta_ratio: float) -> Vec3:
    """Refract the unit vector ``uv`` through a surface with normal ``n``."""
    cos_theta = min(dot(-uv, n), 1.0)
    r_perp = eta_ratio * (uv + cos_theta * n)
    r_para = -math.sqrt(abs(1.0 - r_perp.length_squared())) * n
    return r_perp + r_para