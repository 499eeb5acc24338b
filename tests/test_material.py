import random

import pytest

from rendray.hittable import HitRecord
from rendray.material import Dielectric, Lambertian, Material, Metal, reflectance
from rendray.ray import Ray
from rendray.vec3 import Color, Vec3, reflect, unit_vector


def _record(normal, front_face=True, p=Vec3(1, 2, 3)):
    return HitRecord(p=p, normal=normal, t=1.0, front_face=front_face)


def _approx(v):
    return pytest.approx(tuple(v))


def test_lambertian_scatters_from_hit_point():
    random.seed(1)
    albedo = Color(0.8, 0.2, 0.2)
    rec = _record(Vec3(0, 1, 0))
    for _ in range(20):
        attenuation, scattered = Lambertian(albedo).scatter(Ray(Vec3(), Vec3(0, -1, 0)), rec)
        assert attenuation == albedo
        assert scattered.origin == rec.p
        assert (scattered.direction - rec.normal).length() == pytest.approx(1.0)


def test_metal_without_fuzz_reflects_exactly():
    albedo = Color(0.5, 0.5, 0.5)
    rec = _record(Vec3(0, 1, 0))
    ray_in = Ray(Vec3(0, 1, 0), Vec3(1, -1, 0))
    result = Metal(albedo, 0.0).scatter(ray_in, rec)
    assert result is not None
    attenuation, scattered = result
    assert attenuation == albedo
    assert tuple(scattered.direction) == _approx(reflect(unit_vector(ray_in.direction), rec.normal))
    assert scattered.origin == rec.p


def test_metal_absorbs_when_reflection_goes_into_surface():
    rec = _record(Vec3(0, 0, 1))
    ray_in = Ray(Vec3(), Vec3(0, 0, 1))
    assert Metal(Color(1, 1, 1), 0.0).scatter(ray_in, rec) is None


def test_metal_fuzz_is_capped():
    assert Metal(Color(1, 1, 1), 5.0).fuzz == 1
    assert Metal(Color(1, 1, 1), 0.3).fuzz == 0.3


def test_reflectance_limits():
    assert reflectance(0.0, 1.5) == pytest.approx(1.0)
    assert reflectance(1.0, 1.0) == pytest.approx(0.0)
    assert reflectance(0.5, 1.5) < reflectance(0.1, 1.5)


def test_dielectric_total_internal_reflection():
    rec = _record(Vec3(0, 0, -1), front_face=False)
    ray_in = Ray(Vec3(), Vec3(1, 0, 0.1))
    attenuation, scattered = Dielectric(1.5).scatter(ray_in, rec)
    assert attenuation == Color(1.0, 1.0, 1.0)
    assert tuple(scattered.direction) == _approx(reflect(unit_vector(ray_in.direction), rec.normal))


def test_dielectric_matching_index_passes_straight_through():
    random.seed(3)
    rec = _record(Vec3(0, 0, -1), front_face=True)
    ray_in = Ray(Vec3(), Vec3(0.3, 0.2, 1.0))
    _, scattered = Dielectric(1.0).scatter(ray_in, rec)
    assert tuple(scattered.direction) == _approx(unit_vector(ray_in.direction))
    assert scattered.origin == rec.p


def test_material_is_abstract():
    with pytest.raises(TypeError):
        Material()