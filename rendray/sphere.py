"""Spheres."""

from __future__ import annotations

import math
from typing import Optional

from rendray.hittable import HitRecord, Hittable
from rendray.interval import Interval
from rendray.material import Material
from rendray.ray import Ray
from rendray.vec3 import Point3, dot


class Sphere(Hittable):
    """A sphere with a centre, a radius and a material."""

    def __init__(self, centre: Point3, radius: float, material: Material) -> None:
        self.centre = centre
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        oc = ray.origin - self.centre
        a = ray.direction.length_squared()
        half_b = dot(oc, ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (-half_b - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = ray.at(root)
        rec = HitRecord(p=p, t=root, material=self.material)
        rec.set_face_normal(ray, (p - self.centre) / self.radius)
        return rec