"""Editable straight line segment."""

from __future__ import annotations

from typing import Callable

from sceneshapes.base import BasicGraphicsItem, MouseButton, MouseRegion, ShapeType
from sceneshapes.geometry import Line, Point, Rect, translate_points


def check_line(line: Line, margin: float) -> bool:
    """A usable line is not degenerate and is longer than ``margin``."""
    return not line.is_null() and line.length() > margin


class GraphicsLineItem(BasicGraphicsItem):
    """A line drawn with two clicks and edited by its end points or moved whole."""

    def __init__(self, scene_rect: Rect, line: Line | None = None) -> None:
        super().__init__(scene_rect)
        self.line = Line()
        self.temp_line = Line()
        self.line_changed_callbacks: list[Callable[[Line], None]] = []
        if line is not None:
            self.set_line(line)

    def set_line(self, line: Line) -> None:
        """Adopt ``line`` if it is long enough; otherwise keep the current one."""
        if not check_line(line, self.margin):
            return
        self.line = line
        self.cache = [line.p1, line.p2]
        for callback in self.line_changed_callbacks:
            callback(line)

    def is_valid(self) -> bool:
        return check_line(self.line, self.margin)

    def item_type(self) -> ShapeType:
        return ShapeType.LINE

    def press(self, pos: Point, button: MouseButton) -> None:
        """Handle a mouse press; while drawing, each left click adds a point."""
        if button != MouseButton.LEFT:
            return
        self.clicked_pos = pos
        if self.is_valid():
            return
        self._points_changed([*self.cache, pos])

    def drag(self, pos: Point, buttons: MouseButton) -> None:
        """Move an end point or the whole line while the left button is held."""
        if not (buttons & MouseButton.LEFT) or not self.is_valid():
            return
        self.selected = True
        points = list(self.cache)
        dp = pos - self.clicked_pos
        self.clicked_pos = pos

        if self.mouse_region is MouseRegion.DOT_REGION:
            points[self.hovered_dot_index] = pos
        elif self.mouse_region is MouseRegion.ALL:
            points = translate_points(points, dp)
        else:
            return
        self._points_changed(points)

    def hover_move(self, pos: Point) -> None:
        if len(self.cache) == 1:
            self.temp_line = Line(self.cache[0], pos)
        super().hover_move(pos)

    def _points_changed(self, points: list[Point]) -> None:
        if not self.scene_rect.contains_point(points[-1]):
            return
        if len(points) == 1:
            self.cache = points
        elif len(points) == 2:
            line = Line(points[0], points[1])
            if check_line(line, self.margin):
                self.set_line(line)