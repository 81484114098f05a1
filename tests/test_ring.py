import pytest

from sceneshapes.base import MouseButton, MouseRegion, ShapeType
from sceneshapes.geometry import Point, Rect
from sceneshapes.ring import GraphicsRingItem, Ring, RingEdge, check_ring

SCENE = Rect(0, 0, 1000, 1000)


def make_item():
    return GraphicsRingItem(SCENE, Ring(Point(500, 500), 50, 100))


def test_ring_validity_and_bounds():
    ring = Ring(Point(500, 500), 50, 100)
    assert ring.is_valid()
    assert ring.bounding_rect() == Rect.from_points(Point(400, 400), Point(600, 600))
    assert ring.min_bounding_rect() == Rect.from_points(Point(450, 450), Point(550, 550))
    assert not Ring(Point(0, 0), 100, 50).is_valid()
    assert Ring(Point(0, 0), 0, 50).bounding_rect() == Rect()


def test_check_ring():
    assert check_ring(Ring(Point(500, 500), 50, 100), 10)
    assert not check_ring(Ring(Point(500, 500), 5, 100), 10)
    assert not check_ring(Ring(Point(500, 500), 50, 55), 10)


def test_set_ring_builds_eight_anchors():
    item = make_item()
    assert item.is_valid()
    assert item.item_type() is ShapeType.RING
    assert len(item.cache) == 8
    assert item.cache[0].x == pytest.approx(600)
    assert item.cache[0].y == pytest.approx(500)
    for p in item.cache[4:]:
        assert ((p.x - 500) ** 2 + (p.y - 500) ** 2) ** 0.5 == pytest.approx(50)


def test_invalid_ring_rejected():
    item = GraphicsRingItem(SCENE)
    item.set_ring(Ring(Point(500, 500), 5, 100))
    assert not item.is_valid()
    assert item.cache == []


def test_draw_ring_with_four_clicks():
    item = GraphicsRingItem(SCENE)
    for p in (Point(600, 500), Point(500, 600), Point(400, 500)):
        item.press(p, MouseButton.LEFT)
    assert len(item.cache) == 3
    assert item.max_circle.radius == pytest.approx(100)
    item.hover_move(Point(550, 500))
    assert item.temp_ring.min_radius == pytest.approx(50)
    item.press(Point(550, 500), MouseButton.LEFT)
    assert item.is_valid()
    assert item.ring.center.x == pytest.approx(500)
    assert item.ring.center.y == pytest.approx(500)
    assert item.ring.min_radius == pytest.approx(50)
    assert item.ring.max_radius == pytest.approx(100)


def test_shape_contains():
    item = make_item()
    assert item.shape_contains(Point(500, 500))
    assert not item.shape_contains(Point(700, 700))


def test_drag_inner_edge():
    item = make_item()
    item.hover_move(Point(500, 551))
    assert item.edge is RingEdge.INNER
    assert item.mouse_region is MouseRegion.NONE
    item.press(Point(500, 551), MouseButton.LEFT)
    item.drag(Point(500, 571), MouseButton.LEFT)
    assert item.ring.min_radius == pytest.approx(71)
    assert item.ring.max_radius == pytest.approx(100)


def test_drag_whole_ring():
    item = make_item()
    item.hover_move(Point(500, 575))
    assert item.mouse_region is MouseRegion.ALL
    item.press(Point(500, 575), MouseButton.LEFT)
    item.drag(Point(510, 575), MouseButton.LEFT)
    assert item.ring.center == Point(510, 500)
    assert item.ring.min_radius == pytest.approx(50)


def test_drag_outside_scene_rejected():
    item = make_item()
    item.hover_move(Point(500, 575))
    item.press(Point(500, 575), MouseButton.LEFT)
    item.drag(Point(1000, 575), MouseButton.LEFT)
    assert item.ring == Ring(Point(500, 500), 50, 100)