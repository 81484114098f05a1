import math

import pytest

from sceneshapes.base import MouseButton, MouseRegion, ShapeType
from sceneshapes.circle import Circle, GraphicsCircleItem
from sceneshapes.geometry import Point, Rect, distance

SCENE = Rect(0, 0, 1000, 1000)
CENTER = Point(500, 500)
RADIUS = 100.0


def make_item():
    return GraphicsCircleItem(SCENE, Circle(CENTER, RADIUS))


def on_circle(radius, degrees):
    rad = math.radians(degrees)
    return Point(CENTER.x + radius * math.cos(rad), CENTER.y + radius * math.sin(rad))


def test_circle_validity():
    assert not Circle(CENTER, 0).is_valid()
    assert Circle(CENTER, -3).is_valid()


def test_circle_bounding_rect():
    rect = Circle(CENTER, RADIUS).bounding_rect()
    assert rect.center() == CENTER
    assert rect.width == pytest.approx(2 * RADIUS)
    assert rect.height == pytest.approx(2 * RADIUS)
    assert Circle(CENTER, 0).bounding_rect() == Rect()


def test_check_circle_requires_radius_above_margin():
    assert not GraphicsCircleItem.check_circle(Circle(CENTER, 10), 10)
    assert GraphicsCircleItem.check_circle(Circle(CENTER, 11), 10)


def test_constructor_builds_anchor_points():
    item = make_item()
    assert item.is_valid()
    assert item.item_type() == ShapeType.CIRCLE
    assert len(item.cache) == 4
    for p in item.cache:
        assert distance(p, CENTER) == pytest.approx(RADIUS)


def test_small_circle_is_ignored():
    item = GraphicsCircleItem(SCENE, Circle(CENTER, 5))
    assert not item.is_valid()
    assert item.cache == []


def test_three_presses_fit_circle():
    item = GraphicsCircleItem(SCENE)
    points = [Point(100, 200), Point(200, 100), Point(300, 200)]
    for p in points:
        item.press(p, MouseButton.LEFT)
    assert item.is_valid()
    for p in points:
        assert distance(p, item.circle.center) == pytest.approx(item.circle.radius)


def test_collinear_points_are_rejected():
    item = GraphicsCircleItem(SCENE)
    for p in (Point(100, 100), Point(200, 100), Point(300, 100)):
        item.press(p, MouseButton.LEFT)
    assert not item.is_valid()
    assert len(item.cache) == 2


def test_circle_leaving_scene_is_rejected():
    item = GraphicsCircleItem(SCENE)
    for p in (Point(100, 900), Point(500, 500), Point(900, 900)):
        item.press(p, MouseButton.LEFT)
    assert not item.is_valid()
    assert len(item.cache) == 2


def test_hover_with_two_points_sets_preview():
    item = GraphicsCircleItem(SCENE)
    points = [Point(100, 200), Point(200, 100)]
    for p in points:
        item.press(p, MouseButton.LEFT)
    third = Point(300, 200)
    item.hover_move(third)
    for p in [*points, third]:
        assert distance(p, item.temp_circle.center) == pytest.approx(item.temp_circle.radius)


def test_shape_contains():
    item = make_item()
    assert item.shape_contains(CENTER)
    assert not item.shape_contains(on_circle(RADIUS + item.margin + 5, 30))


def test_edge_drag_changes_radius():
    item = make_item()
    start = on_circle(RADIUS, 45)
    item.hover_move(start)
    assert item.mouse_region is MouseRegion.EDGE
    item.press(start, MouseButton.LEFT)
    item.drag(on_circle(150, 45), MouseButton.LEFT)
    assert item.circle.radius == pytest.approx(150)
    assert item.circle.center == CENTER


def test_anchor_drag_changes_radius():
    item = make_item()
    anchor = item.cache[0]
    item.hover_move(anchor)
    assert item.mouse_region is MouseRegion.DOT_REGION
    assert item.hovered_dot_index == 0
    item.press(anchor, MouseButton.LEFT)
    item.drag(anchor + Point(20, 0), MouseButton.LEFT)
    assert item.circle.radius == pytest.approx(RADIUS + 20)


def test_drag_moves_circle():
    item = make_item()
    start = CENTER + Point(30, 0)
    item.hover_move(start)
    assert item.mouse_region is MouseRegion.ALL
    item.press(start, MouseButton.LEFT)
    offset = Point(10, -5)
    item.drag(start + offset, MouseButton.LEFT)
    assert item.circle.center == CENTER + offset
    assert item.circle.radius == RADIUS


def test_drag_out_of_scene_is_rejected():
    item = make_item()
    start = CENTER + Point(30, 0)
    item.hover_move(start)
    item.press(start, MouseButton.LEFT)
    item.drag(start + Point(450, 0), MouseButton.LEFT)
    assert item.circle == Circle(CENTER, RADIUS)