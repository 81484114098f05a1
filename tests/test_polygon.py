from sceneshapes.base import MouseButton, MouseRegion, ShapeType
from sceneshapes.geometry import Point, Rect, translate_points
from sceneshapes.polygon import GraphicsPolygonItem, check_polygon

SCENE = Rect(0, 0, 1000, 1000)
TRIANGLE = [Point(100, 100), Point(300, 100), Point(300, 300)]


def make_item():
    return GraphicsPolygonItem(SCENE, TRIANGLE)


def test_check_polygon():
    assert check_polygon(TRIANGLE, 10)
    assert not check_polygon(TRIANGLE[:2], 10)
    assert not check_polygon([Point(0, 0), Point(100, 2), Point(200, 0)], 10)


def test_constructor_sets_polygon():
    item = make_item()
    assert item.is_valid()
    assert item.polygon == TRIANGLE
    assert item.cache == TRIANGLE
    assert item.item_type() == ShapeType.POLYGON


def test_invalid_polygon_is_ignored():
    item = GraphicsPolygonItem(SCENE, TRIANGLE[:2])
    assert not item.is_valid()
    assert item.polygon == []


def test_presses_close_polygon_near_first_point():
    item = GraphicsPolygonItem(SCENE)
    for p in TRIANGLE:
        item.press(p, MouseButton.LEFT)
    assert not item.is_valid()
    assert item.cache == TRIANGLE
    item.press(TRIANGLE[0] + Point(2, 2), MouseButton.LEFT)
    assert item.is_valid()
    assert item.polygon == TRIANGLE


def test_press_far_from_first_point_adds_vertex():
    item = GraphicsPolygonItem(SCENE)
    points = [*TRIANGLE, Point(100, 300)]
    for p in points:
        item.press(p, MouseButton.LEFT)
    assert item.cache == points
    assert not item.is_valid()


def test_press_outside_scene_is_ignored():
    item = GraphicsPolygonItem(SCENE)
    item.press(Point(-5, 100), MouseButton.LEFT)
    assert item.cache == []


def test_hover_sets_preview():
    item = GraphicsPolygonItem(SCENE)
    item.press(TRIANGLE[0], MouseButton.LEFT)
    pos = Point(250, 50)
    item.hover_move(pos)
    assert item.temp_polygon == [TRIANGLE[0], pos]


def test_drag_moves_polygon():
    item = make_item()
    start = Point(200, 150)
    item.hover_move(start)
    assert item.mouse_region is MouseRegion.ALL
    item.press(start, MouseButton.LEFT)
    offset = Point(40, 25)
    item.drag(start + offset, MouseButton.LEFT)
    assert item.polygon == translate_points(TRIANGLE, offset)


def test_drag_vertex():
    item = make_item()
    item.hover_move(TRIANGLE[2])
    assert item.mouse_region is MouseRegion.DOT_REGION
    assert item.hovered_dot_index == 2
    item.press(TRIANGLE[2], MouseButton.LEFT)
    target = Point(320, 310)
    item.drag(target, MouseButton.LEFT)
    assert item.polygon == [TRIANGLE[0], TRIANGLE[1], target]


def test_drag_out_of_scene_is_rejected():
    item = make_item()
    start = Point(200, 150)
    item.hover_move(start)
    item.press(start, MouseButton.LEFT)
    item.drag(start + Point(800, 0), MouseButton.LEFT)
    assert item.polygon == TRIANGLE


def test_drag_without_left_button_does_nothing():
    item = make_item()
    start = Point(200, 150)
    item.hover_move(start)
    item.press(start, MouseButton.LEFT)
    item.drag(start + Point(10, 10), MouseButton.RIGHT)
    assert item.polygon == TRIANGLE