import math

import pytest

from ironoxide.vec4 import Vec4


def test_zero_and_one():
    assert Vec4.zero() == Vec4(0.0, 0.0, 0.0, 0.0)
    assert Vec4.one() == Vec4(1.0, 1.0, 1.0, 1.0)


def test_length_matches_dot():
    v = Vec4(1.0, -2.0, 3.0, 0.5)
    assert v.length() ** 2 == pytest.approx(v.dot(v))
    assert v.magnitude() == v.length()


def test_cross_zeroes_w_and_is_orthogonal():
    a = Vec4(1.0, 2.0, 3.0, 9.0)
    b = Vec4(-1.0, 0.5, 4.0, 7.0)
    c = a.cross(b)
    assert c.w == 0.0
    assert c.x * a.x + c.y * a.y + c.z * a.z == pytest.approx(0.0)
    assert c.x * b.x + c.y * b.y + c.z * b.z == pytest.approx(0.0)


def test_distance_is_length_of_difference():
    a = Vec4(1.0, 2.0, 3.0, 4.0)
    b = Vec4(0.0, -1.0, 5.0, 2.0)
    assert a.distance(b) == pytest.approx((a - b).length())


def test_normalize():
    v = Vec4(1.0, 2.0, -2.0, 4.0)
    assert v.normalize().length() == pytest.approx(1.0)
    assert Vec4.zero().normalize() == Vec4.zero()


def test_lerp_endpoints():
    a = Vec4(0.0, 1.0, 2.0, 3.0)
    b = Vec4(4.0, 5.0, 6.0, 7.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_arithmetic_round_trips():
    a = Vec4(1.5, -2.0, 3.0, 0.25)
    b = Vec4(2.0, 4.0, 8.0, 16.0)
    assert (a + b) - b == a
    assert (a * b) / b == a
    assert (a * 2.0) / 2.0 == a
    assert -(-a) == a


def test_in_place_add_leaves_w():
    a = Vec4(1.0, 1.0, 1.0, 1.0)
    a += Vec4(1.0, 1.0, 1.0, 1.0)
    assert (a.x, a.y, a.z) == (2.0, 2.0, 2.0)
    assert a.w == 1.0


def test_in_place_ops_mutate():
    a = Vec4(2.0, 4.0, 6.0, 8.0)
    original = a
    a *= Vec4(2.0, 2.0, 2.0, 2.0)
    a /= 2.0
    a -= Vec4(1.0, 1.0, 1.0, 1.0)
    a /= Vec4(1.0, 1.0, 1.0, 1.0)
    assert a is original
    assert a == Vec4(1.0, 3.0, 5.0, 7.0)


def test_division_by_zero():
    r = Vec4(1.0, -1.0, 0.0, 2.0) / 0.0
    assert r.x == math.inf and r.y == -math.inf
    assert math.isnan(r.z)


def test_ordering():
    assert Vec4(2.0, 2.0, 0.0, 0.0) > Vec4(1.0, 1.0, 5.0, 5.0)
    assert Vec4(0.0, 0.0, 0.0, 0.0) < Vec4(1.0, 1.0, 0.0, 0.0)
    assert not (Vec4(1.0, 0.0, 0.0, 0.0) < Vec4(1.0, 1.0, 0.0, 0.0))
    assert Vec4.one() <= Vec4.one()