"""Editable axis-aligned rectangle with rounded corners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from sceneshapes.base import BasicGraphicsItem, MouseButton, MouseRegion, ShapeType
from sceneshapes.geometry import (
    Line,
    Point,
    Rect,
    bounding_from_line,
    cursor_from_angle,
    polygon_contains,
    translate_points,
)

_VERTICAL_TOLERANCE = 0.0001


def check_rect(rect: Rect, margin: float) -> bool:
    """A usable rectangle lies at positive coordinates and is wider and taller than ``margin``."""
    return (
        rect.is_valid()
        and rect.x > 0
        and rect.y > 0
        and rect.width > margin
        and rect.height > margin
    )


def polygon_from_rect(rect: Rect) -> list[Point]:
    """Corners clockwise from the top-left one."""
    return [rect.top_left(), rect.top_right(), rect.bottom_right(), rect.bottom_left()]


@dataclass(frozen=True)
class RoundedRect:
    rect: Rect = Rect()
    x_radius: float = 10.0
    y_radius: float = 10.0

    def is_valid(self) -> bool:
        return (
            self.rect.is_valid()
            and self.x_radius >= 0
            and self.y_radius >= 0
            and self.x_radius < self.rect.width / 2
            and self.y_radius < self.rect.height / 2
        )


class GraphicsRoundedRectItem(BasicGraphicsItem):
    """A rounded rectangle drawn with two clicks, edited by corners, edges or as a whole."""

    def __init__(self, scene_rect: Rect, rounded_rect: RoundedRect | None = None) -> None:
        super().__init__(scene_rect)
        self.rounded_rect = RoundedRect()
        self.temp_rounded_rect = RoundedRect()
        self.line_hovered = False
        self.hovered_line = Line()
        self.rounded_rect_changed_callbacks: list[Callable[[RoundedRect], None]] = []
        if rounded_rect is not None:
            self.set_rounded_rect(rounded_rect)

    def set_rounded_rect(self, rounded_rect: RoundedRect) -> None:
        """Adopt ``rounded_rect`` if it is valid and large enough."""
        if not rounded_rect.is_valid() or not check_rect(rounded_rect.rect, self.margin):
            return
        self.rounded_rect = rounded_rect
        self.cache = [rounded_rect.rect.top_left(), rounded_rect.rect.bottom_right()]
        for callback in self.rounded_rect_changed_callbacks:
            callback(rounded_rect)

    def is_valid(self) -> bool:
        return self.rounded_rect.is_valid() and check_rect(self.rounded_rect.rect, self.margin)

    def item_type(self) -> ShapeType:
        return ShapeType.ROUNDEDRECT

    def press(self, pos: Point, button: MouseButton) -> None:
        if button != MouseButton.LEFT:
            return
        self.clicked_pos = pos
        if self.is_valid():
            return
        self._points_changed([*self.cache, pos])

    def drag(self, pos: Point, buttons: MouseButton) -> None:
        """Move an edge, a corner or the whole rectangle while the left button is held."""
        if not (buttons & MouseButton.LEFT) or not self.is_valid():
            return
        self.selected = True
        points = list(self.cache)
        dp = pos - self.clicked_pos
        self.clicked_pos = pos

        if self.line_hovered:
            p1, p2 = self.hovered_line.p1, self.hovered_line.p2
            corners = polygon_from_rect(self.rounded_rect.rect)
            if p1 not in corners or p2 not in corners:
                return
            index0, index1 = corners.index(p1), corners.index(p2)
            if abs(p1.x - p2.x) < _VERTICAL_TOLERANCE:
                shift = Point(dp.x, 0)
            else:
                shift = Point(0, dp.y)
            p1, p2 = p1 + shift, p2 + shift
            corners[index0] = p1
            corners[index1] = p2
            self.hovered_line = Line(p1, p2)
            points = [corners[0], corners[2]]
        elif self.mouse_region is MouseRegion.DOT_REGION:
            points[self.hovered_dot_index] = pos
        elif self.mouse_region is MouseRegion.ALL:
            points = translate_points(points, dp)
        else:
            return
        self._points_changed(points)

    def hover_move(self, pos: Point) -> None:
        if len(self.cache) == 1:
            self._show_hover_rect([*self.cache, pos])
        if not self.is_valid():
            return
        super().hover_move(pos)
        if self.mouse_region is MouseRegion.DOT_REGION:
            return
        corners = polygon_from_rect(self.rounded_rect.rect)
        for start, end in zip(corners, corners[1:] + corners[:1]):
            edge = Line(start, end)
            if polygon_contains(bounding_from_line(edge, self.margin / 4), pos):
                self.line_hovered = True
                self.hovered_line = edge
                self.cursor = cursor_from_angle(edge.angle())
                return
        self.line_hovered = False

    def _points_changed(self, points: list[Point]) -> None:
        if not self.scene_rect.contains_point(points[-1]):
            return
        if len(points) == 1:
            self.cache = points
        elif len(points) == 2:
            rect = Rect.from_points(points[0], points[1])
            if check_rect(rect, self.margin):
                self.set_rounded_rect(
                    RoundedRect(rect, self.rounded_rect.x_radius, self.rounded_rect.y_radius)
                )

    def _show_hover_rect(self, points: list[Point]) -> None:
        if len(points) != 2:
            return
        self.temp_rounded_rect = RoundedRect(
            Rect.from_points(points[0], points[1]),
            self.temp_rounded_rect.x_radius,
            self.temp_rounded_rect.y_radius,
        )