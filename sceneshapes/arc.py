"""Editable arc band: a ring sector between two radii and two angles."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace
from typing import Sequence

from sceneshapes.base import BasicGraphicsItem, MouseButton, MouseRegion, ShapeType
from sceneshapes.geometry import (
    CursorShape,
    Line,
    Point,
    Rect,
    bounding_from_line,
    bounding_rect,
    calculate_circle,
    cursor_from_angle,
    distance,
    polygon_contains,
    translate_points,
)

_OUTLINE_STEPS = 64
_MIN_SWEEP = 0.00001
_MAX_SWEEP = 355.99999


class ArcRegion(enum.Enum):
    """Which edge of the arc band the pointer rests on."""

    INNER_EDGE = "inner_edge"
    OUTER_EDGE = "outer_edge"
    NONE = "none"
    START_EDGE = "start_edge"
    END_EDGE = "end_edge"


@dataclass(frozen=True)
class Arc:
    center: Point = Point()
    min_radius: float = 0.0
    max_radius: float = 0.0
    start_angle: float = 0.0
    end_angle: float = 0.0

    def is_valid(self) -> bool:
        return self.max_radius > self.min_radius


@dataclass(frozen=True)
class _OpenArc:
    """A circular arc swept ``span`` degrees (negative: clockwise) from ``start``."""

    center: Point
    radius: float
    start: float
    span: float

    def outline(self) -> list[Point]:
        return [
            Line.from_polar(
                self.center, self.radius, self.start + self.span * i / _OUTLINE_STEPS
            ).p2
            for i in range(_OUTLINE_STEPS + 1)
        ]


@dataclass(frozen=True)
class _Sector:
    """A pie sector of radius ``outer`` with a disk of radius ``inner`` cut out."""

    center: Point
    inner: float
    outer: float
    start: float
    span: float

    def contains(self, point: Point) -> bool:
        d = distance(point, self.center)
        if d > self.outer or d <= self.inner:
            return False
        if self.span >= 360:
            return True
        if d == 0:
            return False
        relative = (Line(self.center, point).angle() - self.start) % 360
        return relative <= self.span

    def outline(self) -> list[Point]:
        outer = _OpenArc(self.center, self.outer, self.start, self.span).outline()
        inner = _OpenArc(self.center, self.inner, self.start, self.span).outline()
        return outer + inner[::-1]


def in_top(line_pt0: Point, line_pt1: Point, pt: Point) -> bool:
    """Whether ``pt`` lies on the upper side of the line through the two points."""
    if line_pt0.x - line_pt1.x == 0.0:
        return not pt.x > line_pt0.x
    k = (line_pt0.y - line_pt1.y) / (line_pt0.x - line_pt1.x)
    b = line_pt0.y - k * line_pt0.x
    return not (pt.x * k + b - pt.y) < 0


def calculate_arc(
    center: Point, radius: float, p1: Point, p2: Point, is_in_top: bool
) -> tuple[float, float, float]:
    """Start angle, end angle and sweep of the arc from ``p1`` to ``p2``.

    The point with the larger x is the start; the sweep is negative (clockwise)
    when the arc runs below the chord.
    """
    start_point, end_point = (p1, p2) if p1.x > p2.x else (p2, p1)
    start_angle = Line(center, start_point).angle()
    end_angle = Line(center, end_point).angle()
    if start_angle > end_angle:
        end_angle += 360
    delta = end_angle - start_angle if is_in_top else end_angle - start_angle - 360
    return start_angle, end_angle, delta


def _calculate_all_arc(points: Sequence[Point], margin: float) -> tuple[_Sector, _Sector] | None:
    """Drawn band and its grab shape from four points, or None if too small."""
    if len(points) != 4:
        return None
    end_pt = points[3]
    is_top = in_top(points[0], points[1], end_pt)
    try:
        center, radius0 = calculate_circle(points[:3])
    except ValueError:
        return None
    if not math.isfinite(radius0):
        return None
    start_angle, end_angle, delta = calculate_arc(center, radius0, points[0], points[1], is_top)
    if delta <= 0:
        if end_angle < 0:
            end_angle += 360
            start_angle += 360
        start_angle, end_angle = end_angle, start_angle
        delta = -delta
    radius1 = distance(end_pt, center)

    radius_in = min(radius0, radius1)
    radius_out = max(radius0, radius1)
    num = margin * math.sqrt(2) / 2
    if radius_in < num or radius_out - radius_in < num:
        return None
    path = _Sector(center, radius_in, radius_out, start_angle, delta)

    add_angle = math.degrees(math.asin(num / radius_in))
    shape = _Sector(
        center, radius_in - num, radius_out + num, start_angle - add_angle, delta + 2 * add_angle
    )
    return path, shape


def _calculate_half_arc(points: Sequence[Point]) -> _OpenArc | None:
    if len(points) != 3:
        return None
    is_top = in_top(points[0], points[1], points[2])
    try:
        center, radius = calculate_circle(points)
    except ValueError:
        return None
    if not math.isfinite(radius):
        return None
    start_angle, _, delta = calculate_arc(center, radius, points[0], points[1], is_top)
    return _OpenArc(center, radius, start_angle, delta)


def find_point_on_ray(base: Point, radius: float, angle: float) -> Point:
    """Point ``radius`` away from ``base`` in direction ``angle`` degrees."""
    return Line.from_polar(base, radius, angle).p2


def calculate_cache(arc: Arc) -> list[Point]:
    """Anchor points: both ends and the middle on the inner circle, the middle on the outer."""
    middle = (arc.start_angle + arc.end_angle) / 2.0
    return [
        find_point_on_ray(arc.center, arc.min_radius, arc.start_angle),
        find_point_on_ray(arc.center, arc.min_radius, arc.end_angle),
        find_point_on_ray(arc.center, arc.min_radius, middle),
        find_point_on_ray(arc.center, arc.max_radius, middle),
    ]


def check_arc(arc: Arc, margin: float) -> bool:
    """A usable arc has inner radius and width of at least half a diagonal of ``margin``."""
    min_len = margin * math.sqrt(2) / 2
    return arc.min_radius >= min_len and arc.max_radius - arc.min_radius >= min_len


def calculate_final_arc(points: Sequence[Point]) -> Arc:
    """Arc from three points on the inner (or outer) circle and one setting the other radius."""
    if len(points) != 4:
        raise ValueError("four points are needed to define an arc")
    end_pt = points[3]
    is_top = in_top(points[0], points[1], end_pt)
    center, radius0 = calculate_circle(points[:3])
    start_angle, _, delta = calculate_arc(center, radius0, points[0], points[1], is_top)
    radius1 = distance(end_pt, center)

    end_angle = start_angle + delta
    if delta > 0:
        final_start, final_end = start_angle, end_angle
    else:
        final_start, final_end = end_angle + 360, start_angle + 360
    return Arc(center, min(radius0, radius1), max(radius0, radius1), final_start, final_end)


def _line_set_length(p1: Point, p2: Point, length: float) -> Point:
    return Line(p1, p2).with_length(length).p2


class GraphicsArcItem(BasicGraphicsItem):
    """An arc band drawn with four clicks, edited by its radii, its ends or moved whole."""

    def __init__(self, scene_rect: Rect, arc: Arc | None = None) -> None:
        super().__init__(scene_rect)
        self.arc = Arc()
        self.arc_region = ArcRegion.NONE
        self._arc_path: _Sector | None = None
        self._shape: _Sector | None = None
        self._preview: _OpenArc | _Sector | None = None
        if arc is not None:
            self.set_arc(arc)
            result = _calculate_all_arc(self.cache, self.margin)
            if result is not None:
                self._arc_path, self._shape = result

    def set_arc(self, arc: Arc) -> None:
        """Adopt ``arc`` if it is large enough."""
        if not check_arc(arc, self.margin):
            return
        self.arc = arc
        self.cache = calculate_cache(arc)

    def is_valid(self) -> bool:
        return check_arc(self.arc, self.margin)

    def item_type(self) -> ShapeType:
        return ShapeType.ARC

    def bounding_rect(self) -> Rect:
        if not self.is_valid():
            return super().bounding_rect()
        outline = self._arc_path.outline() if self._arc_path is not None else []
        rect = bounding_rect(outline + list(self.cache))
        add = self.margin * math.sqrt(2) / 2
        return rect.adjusted(-add, -add, add, add)

    def shape_contains(self, point: Point) -> bool:
        if self.is_valid() and self._shape is not None:
            return self._shape.contains(point)
        return super().shape_contains(point)

    def press(self, pos: Point, button: MouseButton) -> None:
        if button != MouseButton.LEFT:
            return
        self.clicked_pos = pos
        if self.is_valid():
            return
        self._points_changed([*self.cache, pos])

    def drag(self, pos: Point, buttons: MouseButton) -> None:
        """Change radii or end angles, move an anchor or the whole arc.

        ``buttons`` is accepted like for the other items; any button drags.
        """
        if not self.is_valid():
            return
        dp = pos - self.clicked_pos
        self.clicked_pos = pos
        points = list(self.cache)
        center = self.arc.center
        dist = distance(center, pos)

        if self.mouse_region is MouseRegion.ALL:
            points = translate_points(points, dp)
        elif self.mouse_region is MouseRegion.NONE:
            if self.arc_region is ArcRegion.INNER_EDGE:
                self.set_cursor_from_points(center, pos)
                points[:3] = [_line_set_length(center, p, dist) for p in points[:3]]
            elif self.arc_region is ArcRegion.OUTER_EDGE:
                self.set_cursor_from_points(center, pos)
                points[3] = _line_set_length(center, points[3], dist)
            elif self.arc_region in (ArcRegion.START_EDGE, ArcRegion.END_EDGE):
                arc = self.arc
                angle = Line(center, pos).angle()
                if self.arc_region is ArcRegion.START_EDGE:
                    arc = replace(arc, start_angle=angle)
                else:
                    arc = replace(arc, end_angle=angle)
                self.cursor = cursor_from_angle(angle)
                end_angle = arc.end_angle
                while arc.start_angle > end_angle:
                    end_angle += 360
                if end_angle - arc.start_angle > 360:
                    end_angle -= 360
                points = calculate_cache(replace(arc, end_angle=end_angle))
            else:
                return
        elif self.mouse_region is MouseRegion.DOT_REGION:
            index = self.hovered_dot_index
            points[index] = points[index] + dp
        else:
            return
        self._points_changed(points)

    def hover_move(self, pos: Point) -> None:
        if len(self.cache) in (2, 3):
            self._show_hover_arc([*self.cache, pos])
        if not self.is_valid():
            return
        super().hover_move(pos)
        if self.mouse_region is MouseRegion.DOT_REGION:
            return
        self.mouse_region = MouseRegion.NONE

        arc = self.arc
        p1 = find_point_on_ray(arc.center, arc.max_radius, arc.start_angle)
        p2 = find_point_on_ray(arc.center, arc.max_radius, arc.end_angle)
        line1 = Line(p1, self.cache[0])
        line2 = Line(p2, self.cache[1])
        gap = distance(pos, arc.center)
        if abs(gap - arc.min_radius) < self.margin / 3:
            self.arc_region = ArcRegion.INNER_EDGE
            self.set_cursor_from_points(arc.center, pos)
        elif abs(gap - arc.max_radius) < self.margin / 3:
            self.arc_region = ArcRegion.OUTER_EDGE
            self.set_cursor_from_points(arc.center, pos)
        elif self._near(line1, pos):
            self.arc_region = ArcRegion.START_EDGE
            self.cursor = cursor_from_angle(line1.angle())
        elif self._near(line2, pos):
            self.arc_region = ArcRegion.END_EDGE
            self.cursor = cursor_from_angle(line2.angle())
        elif self._arc_path is not None and self._arc_path.contains(pos):
            self.mouse_region = MouseRegion.ALL
            self.cursor = CursorShape.SIZE_ALL
        else:
            self.cursor = None

    def _near(self, line: Line, pos: Point) -> bool:
        if line.length() == 0:
            return False
        return polygon_contains(bounding_from_line(line, self.margin / 4), pos)

    def _points_changed(self, points: list[Point]) -> None:
        rect = self.scene_rect
        if not rect.contains_point(points[-1]):
            return
        if len(points) > 2:
            sweep = Line(points[0], points[1]).angle_to(Line(points[0], points[2]))
            if sweep < _MIN_SWEEP or sweep > _MAX_SWEEP:
                return

        if len(points) in (1, 2):
            self.cache = points
        elif len(points) == 3:
            half = _calculate_half_arc(points)
            if half is None:
                return
            self._preview = half
            if not rect.contains_rect(bounding_rect(half.outline() + points)):
                return
            self.cache = points
        elif len(points) == 4:
            result = _calculate_all_arc(points, self.margin)
            if result is None:
                return
            self._arc_path, self._shape = result
            if not rect.contains_rect(bounding_rect(self._shape.outline() + points)):
                return
            try:
                arc = calculate_final_arc(points)
            except ValueError:
                return
            if not check_arc(arc, self.margin):
                return
            self.set_arc(arc)

    def _show_hover_arc(self, points: list[Point]) -> None:
        if len(points) == 3:
            if distance(points[1], points[2]) < self.margin:
                return
            half = _calculate_half_arc(points)
            if half is not None:
                self._preview = half
        elif len(points) == 4:
            result = _calculate_all_arc(points, self.margin)
            if result is not None:
                self._preview, self._shape = result