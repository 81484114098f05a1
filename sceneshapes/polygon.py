"""Editable closed polygon."""

from __future__ import annotations

from typing import Sequence

from sceneshapes.base import BasicGraphicsItem, MouseButton, MouseRegion, ShapeType
from sceneshapes.geometry import Point, Rect, bounding_rect, distance, translate_points

POLYGON_MIN_POINTS = 3


def check_polygon(points: Sequence[Point], margin: float) -> bool:
    """A usable polygon has three points and extends beyond ``margin`` both ways."""
    rect = bounding_rect(points)
    return len(points) >= POLYGON_MIN_POINTS and rect.width > margin and rect.height > margin


class GraphicsPolygonItem(BasicGraphicsItem):
    """A polygon drawn click by click, closed by clicking near its first point."""

    def __init__(self, scene_rect: Rect, polygon: Sequence[Point] | None = None) -> None:
        super().__init__(scene_rect)
        self.polygon: list[Point] = []
        self.temp_polygon: list[Point] = []
        if polygon is not None:
            self.set_polygon(polygon)

    def set_polygon(self, polygon: Sequence[Point]) -> None:
        if not check_polygon(polygon, self.margin):
            return
        self.polygon = list(polygon)
        self.cache = list(polygon)

    def is_valid(self) -> bool:
        return check_polygon(self.polygon, self.margin)

    def item_type(self) -> ShapeType:
        return ShapeType.POLYGON

    def press(self, pos: Point, button: MouseButton) -> None:
        if button != MouseButton.LEFT:
            return
        self.clicked_pos = pos
        if self.is_valid():
            return
        self._points_changed([*self.cache, pos])

    def drag(self, pos: Point, buttons: MouseButton) -> None:
        """Move a vertex or the whole polygon while the left button is held."""
        if not (buttons & MouseButton.LEFT) or not self.is_valid():
            return
        self.selected = True
        points = list(self.cache)

        if self.mouse_region is MouseRegion.DOT_REGION:
            points[self.hovered_dot_index] = pos
        elif self.mouse_region is MouseRegion.ALL:
            dp = pos - self.clicked_pos
            self.clicked_pos = pos
            points = translate_points(points, dp)
        else:
            return

        if self.scene_rect.contains_rect(bounding_rect(points)) and check_polygon(
            points, self.margin
        ):
            self.set_polygon(points)

    def hover_move(self, pos: Point) -> None:
        if self.cache:
            self.temp_polygon = [*self.cache, pos]
        super().hover_move(pos)

    def _points_changed(self, points: list[Point]) -> None:
        if not self.scene_rect.contains_point(points[-1]):
            return
        if len(points) < POLYGON_MIN_POINTS:
            self.cache = points
        elif distance(points[0], points[-1]) < self.margin and check_polygon(
            points, self.margin
        ):
            self.set_polygon(points[:-1])
        else:
            self.cache = points