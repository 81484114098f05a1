from sceneshapes.base import MouseButton, ShapeType
from sceneshapes.geometry import Point, Rect
from sceneshapes.rect import GraphicsRectItem

SCENE = Rect(0, 0, 1000, 1000)


def test_set_rect_round_trip():
    item = GraphicsRectItem(SCENE, Rect(100, 100, 200, 100))
    assert item.rect() == Rect(100, 100, 200, 100)
    assert item.rounded_rect.x_radius == 0
    assert item.rounded_rect.y_radius == 0
    assert item.is_valid()


def test_item_type():
    item = GraphicsRectItem(SCENE)
    assert item.item_type() is ShapeType.RECT


def test_rect_changed_callback():
    item = GraphicsRectItem(SCENE)
    seen = []
    item.rect_changed_callbacks.append(seen.append)
    item.set_rect(Rect(50, 60, 100, 80))
    assert seen == [Rect(50, 60, 100, 80)]


def test_too_small_rect_ignored():
    item = GraphicsRectItem(SCENE)
    item.set_rect(Rect(50, 60, 5, 80))
    assert not item.is_valid()
    assert item.rect() == Rect()


def test_draw_with_two_clicks_has_square_corners():
    item = GraphicsRectItem(SCENE)
    item.press(Point(100, 100), MouseButton.LEFT)
    item.press(Point(140, 130), MouseButton.LEFT)
    assert item.is_valid()
    assert item.rect() == Rect.from_points(Point(100, 100), Point(140, 130))
    assert item.rounded_rect.x_radius == 0


def test_drag_moves_rect():
    item = GraphicsRectItem(SCENE, Rect(100, 100, 200, 100))
    item.hover_move(Point(200, 150))
    item.press(Point(200, 150), MouseButton.LEFT)
    item.drag(Point(220, 150), MouseButton.LEFT)
    assert item.rect().x == 120
    assert item.rect().width == 200