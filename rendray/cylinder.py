"""Open unit-radius cylinders along the z axis."""

from __future__ import annotations

import math
from typing import Optional

from rendray.hittable import HitRecord, Hittable
from rendray.interval import Interval
from rendray.material import Material
from rendray.ray import Ray
from rendray.vec3 import Vec3


class Cylinder(Hittable):
    """An uncapped cylinder of radius 1 around the z axis, open between two z values."""

    def __init__(self, z_min: float, z_max: float, material: Material) -> None:
        self.z_range = Interval(z_min, z_max)
        self.material = material

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        origin, direction = ray.origin, ray.direction
        a = direction.x ** 2 + direction.y ** 2
        if a == 0:
            return None
        b = 2 * origin.x * direction.x + 2 * origin.y * direction.y
        c = origin.x ** 2 + origin.y ** 2 - 1
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        t1 = (-b - sqrtd) / (2 * a)
        t2 = (-b + sqrtd) / (2 * a)

        in1 = self.z_range.surrounds(ray.at(t1).z)
        in2 = self.z_range.surrounds(ray.at(t2).z)

        if not in1 and not in2:
            return None
        if not in1:
            root = t2
        elif not in2:
            root = t1
        elif t1 > 0 and t2 > 0:
            root = min(t1, t2)
        elif t1 > 0:
            root = t1
        elif t2 > 0:
            root = t2
        else:
            return None

        if not ray_t.surrounds(root):
            return None

        p = ray.at(root)
        radial = math.hypot(p.x, p.y)
        rec = HitRecord(p=p, t=root, material=self.material)
        rec.set_face_normal(ray, Vec3(p.x / radial, p.y / radial, 0.0))
        return rec