import math

import pytest

from ironoxide.vec3 import Vec3


def test_zero_and_one():
    assert Vec3.zero() == Vec3(0.0, 0.0, 0.0)
    assert Vec3.one() == Vec3(1.0, 1.0, 1.0)


def test_length_matches_dot():
    v = Vec3(1.0, -2.0, 3.5)
    assert v.length() ** 2 == pytest.approx(v.dot(v))
    assert v.magnitude() == v.length()


def test_cross_of_unit_axes():
    x = Vec3(1.0, 0.0, 0.0)
    y = Vec3(0.0, 1.0, 0.0)
    assert x.cross(y) == Vec3(0.0, 0.0, 1.0)


def test_cross_is_orthogonal_and_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert b.cross(a) == -c


def test_distance_is_length_of_difference():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, -1.0, 0.5)
    assert a.distance(b) == pytest.approx((a - b).length())
    assert a.distance(a) == 0.0


def test_normalize_gives_unit_length():
    v = Vec3(3.0, -7.0, 2.0)
    assert v.normalize().length() == pytest.approx(1.0)


def test_normalize_zero_returns_copy():
    z = Vec3.zero()
    n = z.normalize()
    assert n == z
    assert n is not z


def test_lerp_endpoints_and_midpoint():
    a = Vec3(0.0, 2.0, 4.0)
    b = Vec3(2.0, 4.0, 8.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
    assert a.lerp(b, 0.5) == (a + b) / 2.0


def test_arithmetic_round_trips():
    a = Vec3(1.5, -2.0, 3.0)
    b = Vec3(2.0, 4.0, 8.0)
    assert (a + b) - b == a
    assert (a * b) / b == a
    assert (a - 1.0) + 1.0 == a


def test_in_place_ops_mutate():
    a = Vec3(1.0, 2.0, 3.0)
    original = a
    a += Vec3(1.0, 1.0, 1.0)
    a *= Vec3(2.0, 2.0, 2.0)
    a -= Vec3(2.0, 2.0, 2.0)
    a /= Vec3(2.0, 2.0, 2.0)
    assert a is original
    assert a == Vec3(1.0, 2.0, 3.0)


def test_division_by_zero():
    r = Vec3(1.0, -1.0, 0.0) / 0.0
    assert r.x == math.inf
    assert r.y == -math.inf
    assert math.isnan(r.z)


def test_ordering_uses_x_and_y_only():
    assert Vec3(2.0, 2.0, -10.0) > Vec3(1.0, 1.0, 10.0)
    assert Vec3(1.0, 1.0, 0.0) < Vec3(2.0, 2.0, 0.0)
    assert not (Vec3(1.0, 1.0, 0.0) <= Vec3(1.0, 1.0, 5.0))
    assert Vec3(1.0, 1.0, 5.0) >= Vec3(1.0, 1.0, 5.0)