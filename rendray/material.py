"""Surface materials that decide how rays scatter."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

from rendray.hittable import HitRecord
from rendray.ray import Ray
from rendray.util import random_double
from rendray.vec3 import Color, dot, random_unit_vector, reflect, refract, unit_vector

ScatterResult = tuple[Color, Ray]


class Material(ABC):
    """Base class for materials."""

    @abstractmethod
    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        """Return ``(attenuation, scattered_ray)``, or None if the ray is absorbed."""


class Lambertian(Material):
    """A diffuse surface."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return self.albedo, Ray(rec.p, direction)


class Metal(Material):
    """A reflective surface with optional fuzz, capped at 1."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        reflected = reflect(unit_vector(ray_in.direction), rec.normal)
        scattered = Ray(rec.p, reflected + self.fuzz * random_unit_vector())
        if dot(scattered.direction, rec.normal) > 0:
            return self.albedo, scattered
        return None


def reflectance(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of reflectance."""
    r0 = (1 - ref_idx) / (1 + ref_idx)
    r0 = r0 * r0
    return r0 + (1 - r0) * (1 - cosine) ** 5


class Dielectric(Material):
    """A clear material that refracts or reflects."""

    def __init__(self, index_of_refraction: float) -> None:
        self.ir = index_of_refraction

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterResult]:
        attenuation = Color(1.0, 1.0, 1.0)
        ratio = (1.0 / self.ir) if rec.front_face else self.ir

        unit_dir = unit_vector(ray_in.direction)
        cos_theta = min(dot(-unit_dir, rec.normal), 1.0)
        sin_theta = math.sqrt(1 - cos_theta * cos_theta)

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ratio) > random_double():
            direction = reflect(unit_dir, rec.normal)
        else:
            direction = refract(unit_dir, rec.normal, ratio)
        return attenuation, Ray(rec.p, direction)