"""Ray intersection records and collections of hittable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Union

from rendray.interval import Interval
from rendray.ray import Ray
from rendray.vec3 import Point3, Vec3, dot

if TYPE_CHECKING:
    from rendray.material import Material


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    p: Point3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    material: Optional["Material"] = None
    t: float = 0.0
    front_face: bool = False

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Store the normal so that it always points against the ray.

        ``outward_normal`` is expected to have unit length.
        """
        self.front_face = dot(ray.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Something a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Return the hit strictly inside ``ray_t``, or None if there is none."""


class HittableList(Hittable):
    """A group of hittable objects that reports the closest hit."""

    def __init__(self, objects: Union[Hittable, Iterable[Hittable], None] = None) -> None:
        if objects is None:
            self._objects: list[Hittable] = []
        elif isinstance(objects, Hittable):
            self._objects = [objects]
        else:
            self._objects = list(objects)

    def add(self, obj: Hittable) -> None:
        """Append an object to the group."""
        self._objects.append(obj)

    def clear(self) -> None:
        """Remove every object."""
        self._objects.clear()

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Return the nearest hit among all objects, or None."""
        closest: Optional[HitRecord] = None
        closest_so_far = ray_t.max
        for obj in self._objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest = rec
                closest_so_far = rec.t
        return closest