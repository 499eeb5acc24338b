import math

import pytest

from rendray.cylinder import Cylinder
from rendray.interval import Interval
from rendray.material import Metal
from rendray.ray import Ray
from rendray.util import INFINITY
from rendray.vec3 import Color, Vec3, dot

MAT = Metal(Color(0.5, 0.5, 0.5), 0.0)
FULL = Interval(0.001, INFINITY)


def _radius(p):
    return math.hypot(p.x, p.y)


def test_hit_from_outside():
    cyl = Cylinder(-1, 1, MAT)
    ray = Ray(Vec3(-5, 0, 0), Vec3(1, 0, 0))
    rec = cyl.hit(ray, FULL)
    assert rec.t == pytest.approx(4.0)
    assert _radius(rec.p) == pytest.approx(1.0)
    assert rec.front_face is True
    assert rec.material is MAT
    assert rec.normal.z == 0.0
    assert dot(rec.normal, ray.direction) < 0


def test_oblique_hit_lies_on_surface():
    cyl = Cylinder(-1, 1, MAT)
    ray = Ray(Vec3(6, 1, -4), Vec3(-6, -1, 4))
    rec = cyl.hit(ray, FULL)
    assert _radius(rec.p) == pytest.approx(1.0)
    assert -1 < rec.p.z < 1
    assert rec.normal.length() == pytest.approx(1.0)


def test_miss_sideways():
    cyl = Cylinder(-1, 1, MAT)
    assert cyl.hit(Ray(Vec3(-5, 2, 0), Vec3(1, 0, 0)), FULL) is None


def test_miss_outside_z_range():
    cyl = Cylinder(-1, 1, MAT)
    assert cyl.hit(Ray(Vec3(-5, 0, 2), Vec3(1, 0, 0)), FULL) is None


def test_parallel_to_axis_misses():
    cyl = Cylinder(-1, 1, MAT)
    assert cyl.hit(Ray(Vec3(0.5, 0, -5), Vec3(0, 0, 1)), FULL) is None


def test_from_inside_hits_far_wall_back_face():
    cyl = Cylinder(-1, 1, MAT)
    ray = Ray(Vec3(0, 0, 0), Vec3(1, 0, 0))
    rec = cyl.hit(ray, FULL)
    assert rec.t > 0
    assert rec.p.x > 0
    assert _radius(rec.p) == pytest.approx(1.0)
    assert rec.front_face is False
    assert dot(rec.normal, ray.direction) < 0


def test_root_outside_ray_interval():
    cyl = Cylinder(-1, 1, MAT)
    ray = Ray(Vec3(-5, 0, 0), Vec3(1, 0, 0))
    assert cyl.hit(ray, Interval(0.001, 2.0)) is None