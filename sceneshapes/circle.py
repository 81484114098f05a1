"""Editable circle defined by three clicked points."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sceneshapes.base import BasicGraphicsItem, MouseButton, MouseRegion, ShapeType
from sceneshapes.geometry import Point, Rect, calculate_circle, distance


@dataclass(frozen=True)
class Circle:
    center: Point = Point()
    radius: float = 0.0

    def is_valid(self) -> bool:
        return abs(self.radius) > 0

    def bounding_rect(self) -> Rect:
        if not self.is_valid():
            return Rect()
        offset = Point(self.radius, self.radius)
        return Rect.from_points(self.center - offset, self.center + offset)


def _anchor_points(circle: Circle) -> list[Point]:
    return [
        Point(
            circle.radius * math.cos(math.radians(deg)) + circle.center.x,
            circle.radius * math.sin(math.radians(deg)) + circle.center.y,
        )
        for deg in (0, 90, 180, 270)
    ]


def _ellipse_contains(rect: Rect, point: Point) -> bool:
    a = rect.width / 2
    b = rect.height / 2
    if a <= 0 or b <= 0:
        return False
    c = rect.center()
    return ((point.x - c.x) / a) ** 2 + ((point.y - c.y) / b) ** 2 <= 1


class GraphicsCircleItem(BasicGraphicsItem):
    """A circle drawn through three clicks and edited by radius or position."""

    def __init__(self, scene_rect: Rect, circle: Circle | None = None) -> None:
        super().__init__(scene_rect)
        self.circle = Circle()
        self.temp_circle = Circle()
        self._shape_rect = Rect()
        if circle is not None:
            self.set_circle(circle)

    @staticmethod
    def check_circle(circle: Circle, margin: float) -> bool:
        return abs(circle.radius) > margin

    def set_circle(self, circle: Circle) -> None:
        """Adopt ``circle`` if its radius exceeds the margin."""
        if not self.check_circle(circle, self.margin):
            return
        self.circle = circle
        self.cache = _anchor_points(circle)
        m = self.margin
        self._shape_rect = circle.bounding_rect().adjusted(-m, -m, m, m)

    def is_valid(self) -> bool:
        return self.check_circle(self.circle, self.margin)

    def item_type(self) -> ShapeType:
        return ShapeType.CIRCLE

    def shape_contains(self, point: Point) -> bool:
        if self.is_valid():
            return _ellipse_contains(self._shape_rect, point)
        return super().shape_contains(point)

    def press(self, pos: Point, button: MouseButton) -> None:
        if button != MouseButton.LEFT:
            return
        self.clicked_pos = pos
        if self.is_valid():
            return
        self._points_changed([*self.cache, pos])

    def drag(self, pos: Point, buttons: MouseButton) -> None:
        """Resize through an anchor or the edge, or move the whole circle."""
        if not (buttons & MouseButton.LEFT) or not self.is_valid():
            return
        self.selected = True
        dp = pos - self.clicked_pos
        self.clicked_pos = pos

        radius = self.circle.radius
        center = self.circle.center
        if self.mouse_region is MouseRegion.DOT_REGION:
            index = self.hovered_dot_index
            if index == 0:
                radius += dp.x
            elif index == 1:
                radius += dp.y
            elif index == 2:
                radius -= dp.x
            elif index == 3:
                radius -= dp.y
        elif self.mouse_region is MouseRegion.EDGE:
            self.set_cursor_from_points(self.circle.center, pos)
            radius = distance(pos, self.circle.center)
        elif self.mouse_region is MouseRegion.ALL:
            center = center + dp
        else:
            return

        circle = Circle(center, radius)
        if self.check_circle(circle, self.margin) and self.scene_rect.contains_rect(
            circle.bounding_rect()
        ):
            self.set_circle(circle)

    def hover_move(self, pos: Point) -> None:
        if len(self.cache) == 2:
            self._show_hover_circle([*self.cache, pos])
        if not self.is_valid():
            return
        super().hover_move(pos)
        if self.mouse_region is MouseRegion.DOT_REGION:
            return
        if abs(distance(pos, self.circle.center) - self.circle.radius) < self.margin / 3:
            self.mouse_region = MouseRegion.EDGE
            self.set_cursor_from_points(self.circle.center, pos)

    def _points_changed(self, points: list[Point]) -> None:
        if not self.scene_rect.contains_point(points[-1]):
            return
        if len(points) in (1, 2):
            self.cache = points
        elif len(points) == 3:
            try:
                center, radius = calculate_circle(points)
            except ValueError:
                return
            circle = Circle(center, radius)
            if self.scene_rect.contains_rect(circle.bounding_rect()) and self.check_circle(
                circle, self.margin
            ):
                self.set_circle(circle)

    def _show_hover_circle(self, points: list[Point]) -> None:
        if len(points) != 3:
            return
        try:
            center, radius = calculate_circle(points)
        except ValueError:
            return
        self.temp_circle = Circle(center, radius)