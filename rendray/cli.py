"""Command that renders the demonstration scene to standard output."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

from rendray.camera import Camera
from rendray.cylinder import Cylinder
from rendray.hittable import HittableList
from rendray.material import Lambertian, Metal
from rendray.sphere import Sphere
from rendray.vec3 import Color, Point3, Vec3


def build_scene() -> HittableList:
    """Return the demonstration scene: a red sphere, a metal cylinder and the ground."""
    metal = Metal(Color(0.5, 0.5, 0.5), 0.0)
    solid = Lambertian(Color(0.8, 0.2, 0.2))
    ground = Lambertian(Color(0.4, 0.4, 0.4))
    return HittableList(
        [
            Sphere(Point3(2.4, 0, 0), 1, solid),
            Cylinder(-1, 1, metal),
            Sphere(Point3(0, -110, 0), 109, ground),
        ]
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rendray", description="Render the demonstration scene as a PPM image to stdout."
    )
    parser.add_argument("--width", type=int, default=400, help="image width in pixels")
    parser.add_argument("--samples", type=int, default=500, help="samples per pixel")
    args = parser.parse_args(argv)
    if args.width < 1:
        parser.error("--width must be at least 1")
    if args.samples < 1:
        parser.error("--samples must be at least 1")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Render the scene, writing the image to stdout and timing to stderr."""
    args = _parse_args(argv)
    world = build_scene()
    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=args.width,
        samples_per_pixel=args.samples,
        vfov=50.0,
        lookfrom=Point3(6, 1, -4),
        lookat=Point3(0, 0, 0),
        vup=Vec3(0, 1, 0),
    )

    start = time.perf_counter()
    camera.render(world, sys.stdout, sys.stderr)
    elapsed = time.perf_counter() - start
    sys.stderr.write(f"{int(elapsed)}s\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())