"""Editable ring (annulus) between two concentric circles."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from sceneshapes.base import BasicGraphicsItem, MouseButton, MouseRegion, ShapeType
from sceneshapes.circle import Circle, GraphicsCircleItem
from sceneshapes.geometry import CursorShape, Point, Rect, calculate_circle, distance


class RingEdge(enum.Enum):
    """Which circle of the ring the pointer rests on."""

    INNER = "inner"
    OUTER = "outer"
    NONE = "none"


@dataclass(frozen=True)
class Ring:
    center: Point = Point()
    min_radius: float = 0.0
    max_radius: float = 0.0

    def bounding_rect(self) -> Rect:
        if not self.is_valid():
            return Rect()
        offset = Point(self.max_radius, self.max_radius)
        return Rect.from_points(self.center - offset, self.center + offset)

    def min_bounding_rect(self) -> Rect:
        if not self.is_valid():
            return Rect()
        offset = Point(self.min_radius, self.min_radius)
        return Rect.from_points(self.center - offset, self.center + offset)

    def is_valid(self) -> bool:
        return self.min_radius > 0 and self.max_radius > self.min_radius


def check_ring(ring: Ring, margin: float) -> bool:
    """A usable ring has an inner radius and a width both greater than ``margin``."""
    return ring.min_radius > margin and ring.max_radius - ring.min_radius > margin


def _points_on_circle(center: Point, radius: float, degrees: tuple[int, ...]) -> list[Point]:
    return [
        Point(
            radius * math.cos(math.radians(deg)) + center.x,
            radius * math.sin(math.radians(deg)) + center.y,
        )
        for deg in degrees
    ]


def _anchor_points(ring: Ring) -> list[Point]:
    return _points_on_circle(ring.center, ring.max_radius, (0, 90, 180, 270)) + _points_on_circle(
        ring.center, ring.min_radius, (45, 135, 225, 315)
    )


class GraphicsRingItem(BasicGraphicsItem):
    """A ring drawn as three points on the outer circle plus one for the inner radius."""

    def __init__(self, scene_rect: Rect, ring: Ring | None = None) -> None:
        super().__init__(scene_rect)
        self.ring = Ring()
        self.temp_ring = Ring()
        self.max_circle = Circle()
        self.edge = RingEdge.NONE
        self._shape_rect = Rect()
        if ring is not None:
            self.set_ring(ring)

    def set_ring(self, ring: Ring) -> None:
        if not check_ring(ring, self.margin):
            return
        self.ring = ring
        self.cache = _anchor_points(ring)
        m = self.margin
        self._shape_rect = ring.bounding_rect().adjusted(-m, -m, m, m)

    def is_valid(self) -> bool:
        return check_ring(self.ring, self.margin)

    def item_type(self) -> ShapeType:
        return ShapeType.RING

    def shape_contains(self, point: Point) -> bool:
        if not self.is_valid():
            return super().shape_contains(point)
        rect = self._shape_rect
        a, b = rect.width / 2, rect.height / 2
        if a <= 0 or b <= 0:
            return False
        c = rect.center()
        return ((point.x - c.x) / a) ** 2 + ((point.y - c.y) / b) ** 2 <= 1

    def press(self, pos: Point, button: MouseButton) -> None:
        if button != MouseButton.LEFT:
            return
        self.clicked_pos = pos
        if self.is_valid():
            return
        self._points_changed([*self.cache, pos])

    def drag(self, pos: Point, buttons: MouseButton) -> None:
        """Resize through anchors or edges, or move the ring, while the left button is held."""
        if not (buttons & MouseButton.LEFT) or not self.is_valid():
            return
        self.selected = True
        dp = pos - self.clicked_pos
        self.clicked_pos = pos

        center = self.ring.center
        min_radius = self.ring.min_radius
        max_radius = self.ring.max_radius
        if self.mouse_region is MouseRegion.DOT_REGION:
            index = self.hovered_dot_index
            if index == 0:
                max_radius += dp.x
            elif index == 1:
                max_radius += dp.y
            elif index == 2:
                max_radius -= dp.x
            elif index == 3:
                max_radius -= dp.y
            elif index == 4:
                min_radius += dp.x
            elif index == 5:
                min_radius += dp.y
            elif index == 6:
                min_radius -= dp.x
            elif index == 7:
                min_radius -= dp.y
        elif self.mouse_region is MouseRegion.ALL:
            center = center + dp
        elif self.mouse_region is MouseRegion.NONE:
            if self.edge is RingEdge.INNER:
                self.set_cursor_from_points(center, pos)
                min_radius = distance(center, pos)
            elif self.edge is RingEdge.OUTER:
                self.set_cursor_from_points(center, pos)
                max_radius = distance(center, pos)

        ring = Ring(center, min_radius, max_radius)
        if self.scene_rect.contains_rect(ring.bounding_rect()) and check_ring(ring, self.margin):
            self.set_ring(ring)

    def hover_move(self, pos: Point) -> None:
        if len(self.cache) in (2, 3):
            self._show_hover_ring([*self.cache, pos])
        if not self.is_valid():
            return
        super().hover_move(pos)
        if self.mouse_region is MouseRegion.DOT_REGION:
            return
        self.mouse_region = MouseRegion.NONE

        gap = distance(pos, self.ring.center)
        if abs(gap - self.ring.min_radius) < self.margin / 3:
            self.edge = RingEdge.INNER
            self.set_cursor_from_points(self.ring.center, pos)
        elif abs(gap - self.ring.max_radius) < self.margin / 3:
            self.edge = RingEdge.OUTER
            self.set_cursor_from_points(self.ring.center, pos)
        elif self.shape_contains(pos):
            self.mouse_region = MouseRegion.ALL
            self.cursor = CursorShape.SIZE_ALL
        else:
            self.cursor = None

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
            self.max_circle = Circle(center, radius)
            if self.scene_rect.contains_rect(
                self.max_circle.bounding_rect()
            ) and GraphicsCircleItem.check_circle(self.max_circle, self.margin):
                self.cache = points
        elif len(points) == 4:
            min_radius = distance(self.max_circle.center, points[3])
            ring = Ring(self.max_circle.center, min_radius, self.max_circle.radius)
            if check_ring(ring, self.margin):
                self.set_ring(ring)

    def _show_hover_ring(self, points: list[Point]) -> None:
        if len(points) == 3:
            try:
                center, radius = calculate_circle(points)
            except ValueError:
                return
            self.max_circle = Circle(center, radius)
        elif len(points) == 4:
            min_radius = distance(self.max_circle.center, points[3])
            if min_radius >= self.max_circle.radius:
                return
            self.temp_ring = Ring(self.max_circle.center, min_radius, self.max_circle.radius)