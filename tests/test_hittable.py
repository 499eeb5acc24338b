import pytest

from rendray.hittable import HitRecord, Hittable, HittableList
from rendray.interval import Interval
from rendray.ray import Ray
from rendray.util import INFINITY
from rendray.vec3 import Vec3


class _FixedHit(Hittable):
    """Reports a hit at a fixed parameter whenever it lies in the interval."""

    def __init__(self, t, tag):
        self.t = t
        self.tag = tag
        self.seen = []

    def hit(self, ray, ray_t):
        self.seen.append(ray_t)
        if ray_t.surrounds(self.t):
            rec = HitRecord(t=self.t, p=ray.at(self.t))
            rec.material = self.tag
            return rec
        return None


RAY = Ray(Vec3(0, 0, 0), Vec3(0, 0, 1))


def test_face_normal_front():
    rec = HitRecord()
    outward = Vec3(0, 0, -1)
    rec.set_face_normal(RAY, outward)
    assert rec.front_face is True
    assert rec.normal == outward


def test_face_normal_back():
    rec = HitRecord()
    outward = Vec3(0, 0, 1)
    rec.set_face_normal(RAY, outward)
    assert rec.front_face is False
    assert rec.normal == -outward


def test_empty_list_misses():
    world = HittableList()
    assert len(world) == 0
    assert world.hit(RAY, Interval(0.001, INFINITY)) is None


def test_closest_hit_wins_regardless_of_order():
    far = _FixedHit(5.0, "far")
    near = _FixedHit(2.0, "near")
    world = HittableList([far, near])
    rec = world.hit(RAY, Interval(0.001, INFINITY))
    assert rec.material == "near"
    assert rec.t == near.t

    world2 = HittableList([near, far])
    rec2 = world2.hit(RAY, Interval(0.001, INFINITY))
    assert rec2.material == "near"


def test_interval_shrinks_after_hit():
    near = _FixedHit(2.0, "near")
    far = _FixedHit(5.0, "far")
    world = HittableList([near, far])
    world.hit(RAY, Interval(0.001, INFINITY))
    assert far.seen[-1].max == near.t


def test_hits_outside_interval_ignored():
    world = HittableList([_FixedHit(5.0, "far")])
    assert world.hit(RAY, Interval(0.001, 3.0)) is None


def test_single_object_constructor_add_and_clear():
    world = HittableList(_FixedHit(1.0, "a"))
    assert len(world) == 1
    world.add(_FixedHit(2.0, "b"))
    assert len(world) == 2
    world.clear()
    assert len(world) == 0
    assert world.hit(RAY, Interval(0.001, INFINITY)) is None


def test_hittable_is_abstract():
    with pytest.raises(TypeError):
        Hittable()