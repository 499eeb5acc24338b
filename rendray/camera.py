"""A positionable camera that renders a scene to a plain PPM image."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import TextIO

from rendray.hittable import Hittable
from rendray.interval import Interval
from rendray.ray import Ray
from rendray.util import INFINITY, deg_to_rad, random_double
from rendray.vec3 import Color, Point3, Vec3, cross, random_in_unit_disk, unit_vector

_INTENSITY = Interval(0.000, 0.999)
_SKY_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)
_BLACK = Color(0.0, 0.0, 0.0)


def linear_to_gamma(value: float) -> float:
    """Apply a gamma-2 transform to a linear colour component."""
    return math.sqrt(value)


@dataclass
class Camera:
    """Camera settings plus the view geometry derived from them by ``initialize``."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 50
    vfov: float = 90.0
    lookfrom: Point3 = field(default_factory=lambda: Point3(0, 0, -1))
    lookat: Point3 = field(default_factory=lambda: Point3(0, 0, 0))
    vup: Vec3 = field(default_factory=lambda: Vec3(0, 1, 0))
    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    image_height: int = field(init=False, default=0, repr=False)
    centre: Point3 = field(init=False, default_factory=Vec3, repr=False)
    pixel00_location: Point3 = field(init=False, default_factory=Vec3, repr=False)
    pixel_delta_u: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    pixel_delta_v: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    u: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    v: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    w: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    defocus_disk_u: Vec3 = field(init=False, default_factory=Vec3, repr=False)
    defocus_disk_v: Vec3 = field(init=False, default_factory=Vec3, repr=False)

    def initialize(self) -> None:
        """Compute the image height, camera frame and pixel grid from the settings."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))

        h = math.tan(deg_to_rad(self.vfov) / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)
        self.centre = self.lookfrom

        self.w = unit_vector(self.lookfrom - self.lookat)
        self.u = unit_vector(cross(self.vup, self.w))
        self.v = cross(self.w, self.u)

        viewport_u = viewport_width * self.u
        viewport_v = viewport_height * -self.v

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        upper_left = self.centre - self.focus_dist * self.w - viewport_u / 2 - viewport_v / 2
        self.pixel00_location = upper_left + 0.5 * (self.pixel_delta_u + self.pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(deg_to_rad(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def ray_color(self, ray: Ray, world: Hittable, depth: int = 0) -> Color:
        """Trace ``ray`` through ``world``; ``depth`` counts bounces made so far."""
        if depth >= self.max_depth:
            return _BLACK

        rec = world.hit(ray, Interval(0.001, INFINITY))
        if rec is not None:
            scattered = rec.material.scatter(ray, rec) if rec.material is not None else None
            if scattered is None:
                return _BLACK
            attenuation, next_ray = scattered
            return attenuation * self.ray_color(next_ray, world, depth + 1)

        unit_dir = unit_vector(ray.direction)
        a = 0.5 * (unit_dir.y + 1.0)
        return (1.0 - a) * _SKY_WHITE + a * _SKY_BLUE

    def _defocus_disk_sample(self) -> Point3:
        p = random_in_unit_disk()
        return self.centre + p[0] * self.defocus_disk_u + p[1] * self.defocus_disk_v

    def _pixel_sample_square(self) -> Vec3:
        px = -0.5 + random_double()
        py = -0.5 + random_double()
        return px * self.pixel_delta_u + py * self.pixel_delta_v

    def get_ray(self, i: int, j: int) -> Ray:
        """Return a jittered ray through column ``i`` and row ``j`` of the image."""
        pixel_centre = self.pixel00_location + i * self.pixel_delta_u + j * self.pixel_delta_v
        pixel_sample = pixel_centre + self._pixel_sample_square()
        origin = self.centre if self.defocus_angle <= 0 else self._defocus_disk_sample()
        return Ray(origin, pixel_sample - origin)

    def write_color(self, out: TextIO, pixel_color: Color, samples_per_pixel: int) -> None:
        """Write one averaged, gamma-corrected pixel as a PPM text triple."""
        scale = 1.0 / samples_per_pixel
        components = (
            int(256 * _INTENSITY.clamp(linear_to_gamma(c * scale))) for c in pixel_color
        )
        out.write(" ".join(str(c) for c in components) + "\n")

    def render(
        self, world: Hittable, out: TextIO | None = None, log: TextIO | None = None
    ) -> None:
        """Render ``world`` as a P3 image to ``out``, reporting progress to ``log``."""
        out = sys.stdout if out is None else out
        log = sys.stderr if log is None else log
        self.initialize()

        out.write(f"P3\n{self.image_width} {self.image_height}\n255\n")
        out.flush()
        for row in range(self.image_height):
            log.write(f"\rScanlines remaining: {self.image_height - row} ")
            log.flush()
            for col in range(self.image_width):
                pixel = Color(0.0, 0.0, 0.0)
                for _ in range(self.samples_per_pixel):
                    pixel += self.ray_color(self.get_ray(col, row), world, 0)
                self.write_color(out, pixel, self.samples_per_pixel)
        log.write("Done\n")
        log.flush()