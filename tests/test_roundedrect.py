import pytest

from sceneshapes.base import MouseButton, MouseRegion, ShapeType
from sceneshapes.geometry import Point, Rect
from sceneshapes.roundedrect import (
    GraphicsRoundedRectItem,
    RoundedRect,
    check_rect,
    polygon_from_rect,
)

SCENE = Rect(0, 0, 1000, 1000)


def make_item():
    return GraphicsRoundedRectItem(SCENE, RoundedRect(Rect(100, 100, 200, 100), 10, 10))


def test_rounded_rect_validity():
    assert RoundedRect(Rect(10, 10, 100, 50), 0, 0).is_valid()
    assert not RoundedRect(Rect(10, 10, 100, 50), 30, 0).is_valid()
    assert not RoundedRect(Rect(10, 10, 100, 50), -1, 0).is_valid()
    assert not RoundedRect(Rect(), 0, 0).is_valid()


def test_rounded_rect_defaults():
    rr = RoundedRect()
    assert rr.x_radius == 10
    assert rr.y_radius == 10


def test_check_rect():
    assert check_rect(Rect(10, 10, 100, 100), 10)
    assert not check_rect(Rect(0, 10, 100, 100), 10)
    assert not check_rect(Rect(10, 10, 5, 100), 10)
    assert not check_rect(Rect(10, 10, 100, 10), 10)


def test_polygon_from_rect_is_clockwise_corners():
    rect = Rect(1, 2, 3, 4)
    assert polygon_from_rect(rect) == [
        rect.top_left(),
        rect.top_right(),
        rect.bottom_right(),
        rect.bottom_left(),
    ]


def test_set_rounded_rect_updates_cache_and_notifies():
    item = GraphicsRoundedRectItem(SCENE)
    seen = []
    item.rounded_rect_changed_callbacks.append(seen.append)
    rr = RoundedRect(Rect(100, 100, 200, 100), 5, 5)
    item.set_rounded_rect(rr)
    assert item.rounded_rect == rr
    assert item.cache == [rr.rect.top_left(), rr.rect.bottom_right()]
    assert seen == [rr]
    assert item.is_valid()
    assert item.item_type() is ShapeType.ROUNDEDRECT


def test_invalid_rounded_rect_is_ignored():
    item = GraphicsRoundedRectItem(SCENE)
    item.set_rounded_rect(RoundedRect(Rect(100, 100, 5, 5), 0, 0))
    assert not item.is_valid()
    assert item.cache == []


def test_draw_with_two_clicks():
    item = GraphicsRoundedRectItem(SCENE)
    item.press(Point(100, 100), MouseButton.LEFT)
    assert item.cache == [Point(100, 100)]
    item.hover_move(Point(200, 150))
    assert item.temp_rounded_rect.rect == Rect.from_points(Point(100, 100), Point(200, 150))
    item.press(Point(300, 200), MouseButton.LEFT)
    assert item.is_valid()
    assert item.rounded_rect.rect == Rect.from_points(Point(100, 100), Point(300, 200))
    assert item.rounded_rect.x_radius == 10


def test_press_outside_scene_ignored():
    item = GraphicsRoundedRectItem(SCENE)
    item.press(Point(2000, 100), MouseButton.LEFT)
    assert item.cache == []


def test_right_button_does_not_draw():
    item = GraphicsRoundedRectItem(SCENE)
    item.press(Point(100, 100), MouseButton.RIGHT)
    assert item.cache == []


def test_drag_top_edge():
    item = make_item()
    item.hover_move(Point(200, 101))
    assert item.line_hovered
    item.press(Point(200, 101), MouseButton.LEFT)
    item.drag(Point(200, 121), MouseButton.LEFT)
    rect = item.rounded_rect.rect
    assert rect.top() == pytest.approx(120)
    assert rect.bottom() == pytest.approx(200)
    assert rect.left() == pytest.approx(100)


def test_drag_whole_rect():
    item = make_item()
    original = item.rounded_rect.rect
    item.hover_move(Point(200, 150))
    assert item.mouse_region is MouseRegion.ALL
    assert not item.line_hovered
    item.press(Point(200, 150), MouseButton.LEFT)
    item.drag(Point(210, 160), MouseButton.LEFT)
    rect = item.rounded_rect.rect
    assert rect.x == pytest.approx(original.x + 10)
    assert rect.y == pytest.approx(original.y + 10)
    assert rect.width == pytest.approx(original.width)
    assert item.selected


def test_drag_corner():
    item = make_item()
    item.hover_move(Point(300, 200))
    assert item.mouse_region is MouseRegion.DOT_REGION
    assert item.hovered_dot_index == 1
    item.press(Point(300, 200), MouseButton.LEFT)
    item.drag(Point(350, 260), MouseButton.LEFT)
    assert item.rounded_rect.rect.bottom_right() == Point(350, 260)
    assert item.rounded_rect.rect.top_left() == Point(100, 100)


def test_drag_without_left_button_does_nothing():
    item = make_item()
    before = item.rounded_rect
    item.hover_move(Point(200, 150))
    item.press(Point(200, 150), MouseButton.LEFT)
    item.drag(Point(250, 190), MouseButton.NONE)
    assert item.rounded_rect == before