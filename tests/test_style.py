from ironoxide.style import OutArea
from ironoxide.ui_unit import UiUnit
from ironoxide.vec2 import Vec2

SPACE = Vec2(30.0, 70.0)


def test_default_is_zero():
    assert OutArea() == OutArea.zero()
    assert OutArea.zero().size(SPACE) == Vec2(0.0, 0.0)


def test_uniform_start():
    area = OutArea.uniform(5.0)
    assert area.start(SPACE) == Vec2(5.0, 5.0)
    assert area.left == UiUnit.px(5.0)


def test_uniform_extent_is_symmetric():
    area = OutArea.uniform(5.0)
    assert area.x(SPACE) == area.y(SPACE)
    assert area.size(SPACE) == Vec2(area.x(SPACE), area.y(SPACE))


def test_horizontal_only_sets_sides():
    area = OutArea.horizontal(UiUnit.px(4.0))
    assert area.start(SPACE) == Vec2(4.0, 0.0)
    assert area.top == UiUnit.zero()
    assert area.y(SPACE) == 0.0


def test_vertical_only_sets_top_and_bottom():
    area = OutArea.vertical(UiUnit.px(4.0))
    assert area.start(SPACE) == Vec2(0.0, 4.0)
    assert area.x(SPACE) == 0.0


def test_size_resolves_bottom_horizontally():
    area = OutArea(bottom=UiUnit.relative(1.0))
    assert area.y(SPACE) == SPACE.y
    assert area.size(SPACE).y == SPACE.x


def test_relative_sides_resolve_against_space():
    area = OutArea.horizontal(UiUnit.relative(1.0))
    assert area.x(SPACE) == SPACE.x * 2
    assert area.start(SPACE) == Vec2(SPACE.x, 0.0)