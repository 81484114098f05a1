"""Editable rectangle that can be rotated about its center."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Sequence

from sceneshapes.base import BasicGraphicsItem, MouseButton, MouseRegion, ShapeType
from sceneshapes.geometry import (
    Line,
    Point,
    Rect,
    bounding_from_line,
    bounding_rect,
    convert_to_360,
    cursor_from_angle,
    polygon_contains,
)

_HANDLE_FRACTION = 0.9


@dataclass(frozen=True)
class RotatedRect:
    """A rectangle of ``width`` by ``height`` around ``center``, turned by ``angle`` degrees."""

    center: Point = Point()
    width: float = 0.0
    height: float = 0.0
    angle: float = 0.0

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0


def check_rotated_rect(rotated_rect: RotatedRect, margin: float) -> bool:
    """A usable rotated rectangle is wider and taller than ``margin``."""
    return rotated_rect.width > margin and rotated_rect.height > margin


def rotate(point: Point, angle: float) -> Point:
    """Rotate a vector about the origin by ``angle`` degrees."""
    rad = math.radians(convert_to_360(angle))
    cos, sin = math.cos(rad), math.sin(rad)
    return Point(cos * point.x - sin * point.y, sin * point.x + cos * point.y)


def corners_from_rotated(rotated: RotatedRect) -> list[Point]:
    """The four corners, starting with the one rotated from the top-left."""
    hw, hh = rotated.width / 2, rotated.height / 2
    offsets = [Point(-hw, -hh), Point(hw, -hh), Point(hw, hh), Point(-hw, hh)]
    return [rotated.center + rotate(p, rotated.angle) for p in offsets]


def rotated_from_points(points: Sequence[Point]) -> RotatedRect:
    """Rectangle spanned by three consecutive corners; empty for fewer points."""
    if len(points) < 3:
        return RotatedRect()
    top = Line(points[0], points[1])
    return RotatedRect(
        center=(points[0] + points[2]) / 2,
        width=top.length(),
        height=Line(points[1], points[2]).length(),
        angle=convert_to_360(top.angle()),
    )


class GraphicsRotatedRectItem(BasicGraphicsItem):
    """A rotated rectangle drawn with three clicks; edges stretch, a handle rotates it."""

    def __init__(self, scene_rect: Rect, rotated_rect: RotatedRect | None = None) -> None:
        super().__init__(scene_rect)
        self.rotated_rect = RotatedRect()
        self.rotated_hovered = False
        self.line_hovered = False
        self.hovered_line = Line()
        if rotated_rect is not None:
            self.set_rotated_rect(rotated_rect)

    def set_rotated_rect(self, rotated_rect: RotatedRect) -> None:
        """Adopt ``rotated_rect`` if it is large enough."""
        if not check_rotated_rect(rotated_rect, self.margin):
            return
        self.rotated_rect = rotated_rect
        self.cache = corners_from_rotated(rotated_rect)

    def is_valid(self) -> bool:
        return check_rotated_rect(self.rotated_rect, self.margin)

    def item_type(self) -> ShapeType:
        return ShapeType.ROTATEDRECT

    def _rotation_handle(self) -> Line:
        center = self.rotated_rect.center
        edge_middle = (self.cache[1] + self.cache[2]) / 2
        return Line(center, Line(center, edge_middle).point_at(_HANDLE_FRACTION))

    def press(self, pos: Point, button: MouseButton) -> None:
        if button != MouseButton.LEFT:
            return
        self.clicked_pos = pos
        if self.is_valid():
            return
        self._points_changed([*self.cache, pos])

    def drag(self, pos: Point, buttons: MouseButton) -> None:
        """Rotate, stretch an edge or move the rectangle while the left button is held."""
        if not (buttons & MouseButton.LEFT) or not self.is_valid():
            return
        self.selected = True
        dp = pos - self.clicked_pos

        rrt = self.rotated_rect
        center = rrt.center
        points = list(self.cache)
        l0 = Line(center, pos)
        l1 = Line(center, self.clicked_pos)
        step = math.hypot(dp.x, dp.y)

        if self.rotated_hovered:
            angle = convert_to_360(rrt.angle + l0.angle_to(l1))
            rrt = replace(rrt, angle=angle)
            self.cursor = cursor_from_angle(360 - angle)
        elif self.line_hovered:
            normal = self.hovered_line.normal_vector()
            p1, p2 = self.hovered_line.p1, self.hovered_line.p2
            if p1 not in points or p2 not in points:
                return
            index0, index1 = points.index(p1), points.index(p2)
            sign = 1 if l0.length() > l1.length() else -1
            shift = Point(normal.dx() * step, normal.dy() * step) / normal.length() * sign
            p3, p4 = p1 + shift, p2 + shift
            points[index0] = p3
            points[index1] = p4
            self.hovered_line = Line(p3, p4)
            rrt = replace(
                rrt,
                width=Line(points[0], points[1]).length(),
                height=Line(points[0], points[3]).length(),
                center=(points[0] + points[2]) / 2,
            )
        elif self.mouse_region is MouseRegion.ALL:
            rrt = replace(rrt, center=rrt.center + dp)
        elif self.mouse_region is not MouseRegion.DOT_REGION:
            return

        corners = corners_from_rotated(rrt)
        if self.scene_rect.contains_rect(bounding_rect(corners)) and check_rotated_rect(
            rrt, self.margin
        ):
            self.set_rotated_rect(rrt)
        self.clicked_pos = pos

    def hover_move(self, pos: Point) -> None:
        if not self.is_valid():
            return
        handle = self._rotation_handle()
        if polygon_contains(bounding_from_line(handle, self.margin / 4), pos):
            self.rotated_hovered = True
            self.cursor = cursor_from_angle(handle.angle())
            return

        corners = self.cache
        for start, end in zip(corners, corners[1:] + corners[:1]):
            edge = Line(start, end)
            if polygon_contains(bounding_from_line(edge, self.margin / 4), pos):
                self.line_hovered = True
                self.hovered_line = edge
                self.cursor = cursor_from_angle(edge.angle())
                return

        self.rotated_hovered = False
        self.line_hovered = False
        super().hover_move(pos)

    def _points_changed(self, points: list[Point]) -> None:
        if not self.scene_rect.contains_point(points[-1]):
            return
        if len(points) in (1, 2):
            self.cache = points
        elif len(points) == 3:
            base = Line(points[0], points[1])
            foot = base.intersection(base.normal_vector())
            if foot is None:
                return
            width = base.length()
            height = Line(foot, points[2]).length()
            if width < self.margin or height < self.margin:
                return
            rotated = rotated_from_points(points)
            if not check_rotated_rect(rotated, self.margin):
                return
            self.set_rotated_rect(rotated)