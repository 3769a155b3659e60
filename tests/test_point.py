from ironoxide.point import Matrix4, Point
from ironoxide.vec4 import Vec4


def test_point_equality():
    assert Point(1.0, 2.0) == Point(1.0, 2.0)
    assert not (Point(1.0, 2.0) == Point(2.0, 1.0))


def test_point_ordering_is_lexicographic():
    assert Point(1.0, 5.0) < Point(2.0, 0.0)
    assert Point(1.0, 1.0) < Point(1.0, 2.0)
    assert Point(3.0, 0.0) >= Point(3.0, 0.0)


def test_point_sorting():
    points = [Point(2.0, 1.0), Point(1.0, 3.0), Point(1.0, 2.0)]
    assert sorted(points) == [Point(1.0, 2.0), Point(1.0, 3.0), Point(2.0, 1.0)]


def _identity():
    return Matrix4(
        Vec4(1.0, 0.0, 0.0, 0.0),
        Vec4(0.0, 1.0, 0.0, 0.0),
        Vec4(0.0, 0.0, 1.0, 0.0),
        Vec4(0.0, 0.0, 0.0, 1.0),
    )


def test_matrix_rows_are_kept():
    m = _identity()
    assert m.w.w == 1.0
    assert m.x == Vec4(1.0, 0.0, 0.0, 0.0)


def test_matrix_equality_follows_rows():
    a = _identity()
    b = _identity()
    assert a == b
    b.z.z = 2.0
    assert not (a == b)