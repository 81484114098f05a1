"""Plane geometry primitives and helpers shared by the interactive shape items.

Angles follow screen conventions: the y axis points down and angles are
measured in degrees counter-clockwise from the positive x axis.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, Sequence


def _fuzzy_compare(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> Point:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(self.x / factor, self.y / factor)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)


@dataclass(frozen=True)
class Line:
    """A directed segment from ``p1`` to ``p2``."""

    p1: Point = Point()
    p2: Point = Point()

    def dx(self) -> float:
        return self.p2.x - self.p1.x

    def dy(self) -> float:
        return self.p2.y - self.p1.y

    def length(self) -> float:
        return math.hypot(self.dx(), self.dy())

    def is_null(self) -> bool:
        return _fuzzy_compare(self.p1.x, self.p2.x) and _fuzzy_compare(self.p1.y, self.p2.y)

    def angle(self) -> float:
        """Direction of the line in degrees, in the range [0, 360)."""
        theta = math.degrees(math.atan2(-self.dy(), self.dx()))
        if theta < 0:
            theta += 360
        if _fuzzy_compare(theta, 360.0):
            return 0.0
        return theta

    def angle_to(self, other: Line) -> float:
        """Counter-clockwise angle from this line to ``other``."""
        if self.is_null() or other.is_null():
            return 0.0
        delta = other.angle() - self.angle()
        if _fuzzy_compare(delta, 360.0):
            return 0.0
        return delta + 360 if delta < 0 else delta

    def normal_vector(self) -> Line:
        """A line of the same length starting at ``p1``, perpendicular to this one."""
        return Line(self.p1, self.p1 + Point(self.dy(), -self.dx()))

    def point_at(self, t: float) -> Point:
        return self.p1 + (self.p2 - self.p1) * t

    def with_length(self, length: float) -> Line:
        """The same line with ``p2`` moved so the length becomes ``length``."""
        old = self.length()
        if old <= 0:
            return self
        return Line(
            self.p1,
            Point(self.p1.x + length * (self.dx() / old), self.p1.y + length * (self.dy() / old)),
        )

    @staticmethod
    def from_polar(p1: Point, length: float, angle: float) -> Line:
        rad = math.radians(angle)
        return Line(p1, Point(p1.x + math.cos(rad) * length, p1.y - math.sin(rad) * length))

    def intersection(self, other: Line) -> Point | None:
        """Crossing point of the two infinite lines, or None if they are parallel."""
        a = self.p2 - self.p1
        b = other.p1 - other.p2
        c = self.p1 - other.p1
        denominator = a.y * b.x - a.x * b.y
        if denominator == 0 or not math.isfinite(denominator):
            return None
        na = (b.y * c.x - b.x * c.y) / denominator
        return self.p1 + a * na


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @staticmethod
    def from_points(p1: Point, p2: Point) -> Rect:
        """Rectangle with ``p1`` as top-left and ``p2`` as bottom-right corner."""
        return Rect(p1.x, p1.y, p2.x - p1.x, p2.y - p1.y)

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def _is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def left(self) -> float:
        return self.x

    def top(self) -> float:
        return self.y

    def right(self) -> float:
        return self.x + self.width

    def bottom(self) -> float:
        return self.y + self.height

    def top_left(self) -> Point:
        return Point(self.left(), self.top())

    def top_right(self) -> Point:
        return Point(self.right(), self.top())

    def bottom_left(self) -> Point:
        return Point(self.left(), self.bottom())

    def bottom_right(self) -> Point:
        return Point(self.right(), self.bottom())

    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def corners(self) -> list[Point]:
        """Corners clockwise from the top-left one."""
        return [self.top_left(), self.top_right(), self.bottom_right(), self.bottom_left()]

    def adjusted(self, dx1: float, dy1: float, dx2: float, dy2: float) -> Rect:
        return Rect(self.x + dx1, self.y + dy1, self.width + dx2 - dx1, self.height + dy2 - dy1)

    def _bounds(self) -> tuple[float, float, float, float]:
        left, right = sorted((self.x, self.x + self.width))
        top, bottom = sorted((self.y, self.y + self.height))
        return left, top, right, bottom

    def contains_point(self, point: Point) -> bool:
        left, top, right, bottom = self._bounds()
        if left == right or top == bottom:
            return False
        return left <= point.x <= right and top <= point.y <= bottom

    def contains_rect(self, other: Rect) -> bool:
        l1, t1, r1, b1 = self._bounds()
        if l1 == r1 or t1 == b1:
            return False
        l2, t2, r2, b2 = other._bounds()
        if l2 == r2 or t2 == b2:
            return False
        return l1 <= l2 and r2 <= r1 and t1 <= t2 and b2 <= b1

    def united(self, other: Rect) -> Rect:
        if self._is_null():
            return other
        if other._is_null():
            return self
        l1, t1, r1, b1 = self._bounds()
        l2, t2, r2, b2 = other._bounds()
        left, top = min(l1, l2), min(t1, t2)
        return Rect(left, top, max(r1, r2) - left, max(b1, b2) - top)


class CursorShape(enum.Enum):
    """Mouse cursor shapes an item can ask for."""

    SIZE_VER = "size_ver"
    SIZE_HOR = "size_hor"
    SIZE_F_DIAG = "size_f_diag"
    SIZE_B_DIAG = "size_b_diag"
    SIZE_ALL = "size_all"
    POINTING_HAND = "pointing_hand"


def bounding_rect(points: Sequence[Point]) -> Rect:
    """Smallest rectangle holding all points; an empty rectangle for no points."""
    if not points:
        return Rect()
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def translate_points(points: Iterable[Point], offset: Point) -> list[Point]:
    return [p + offset for p in points]


def _crossing(p1: Point, p2: Point, pos: Point) -> int:
    x1, y1, x2, y2 = p1.x, p1.y, p2.x, p2.y
    if _fuzzy_compare(y1, y2):
        return 0
    direction = 1
    if y2 < y1:
        x1, x2, y1, y2 = x2, x1, y2, y1
        direction = -1
    if y1 <= pos.y < y2:
        x = x1 + ((x2 - x1) / (y2 - y1)) * (pos.y - y1)
        if x <= pos.x:
            return direction
    return 0


def polygon_contains(points: Sequence[Point], point: Point) -> bool:
    """Whether ``point`` lies inside the closed polygon, using the odd-even rule."""
    if not points:
        return False
    winding = sum(_crossing(a, b, point) for a, b in zip(points, points[1:]))
    if points[-1] != points[0]:
        winding += _crossing(points[-1], points[0], point)
    return winding % 2 != 0


def calculate_circle(points: Sequence[Point]) -> tuple[Point, float]:
    """Least-squares circle through the points, returned as (center, radius)."""
    if len(points) < 3:
        raise ValueError("at least three points are needed to fit a circle")
    x1 = sum(p.x for p in points)
    y1 = sum(p.y for p in points)
    x2 = sum(p.x * p.x for p in points)
    y2 = sum(p.y * p.y for p in points)
    x3 = sum(p.x ** 3 for p in points)
    y3 = sum(p.y ** 3 for p in points)
    x1y1 = sum(p.x * p.y for p in points)
    x1y2 = sum(p.x * p.y * p.y for p in points)
    x2y1 = sum(p.x * p.x * p.y for p in points)

    n = len(points)
    c = n * x2 - x1 * x1
    d = n * x1y1 - x1 * y1
    e = n * x3 + n * x1y2 - (x2 + y2) * x1
    g = n * y2 - y1 * y1
    h = n * x2y1 + n * y3 - (x2 + y2) * y1
    denominator = c * g - d * d
    if denominator == 0:
        raise ValueError("points are collinear")
    a = (h * d - e * g) / denominator
    b = (h * c - e * d) / -denominator
    cc = -(a * x1 + b * y1 + x2 + y2) / n

    square = a * a + b * b - 4 * cc
    radius = math.sqrt(square) / 2 if square >= 0 else math.nan
    return Point(a / -2, b / -2), radius


def cursor_from_angle(angle: float) -> CursorShape:
    """Resize cursor best matching a direction given in degrees."""
    if 0 <= angle < 15:
        return CursorShape.SIZE_VER
    if 15 <= angle < 75:
        return CursorShape.SIZE_F_DIAG
    if 75 <= angle < 105:
        return CursorShape.SIZE_HOR
    if 105 <= angle < 165:
        return CursorShape.SIZE_B_DIAG
    if 165 <= angle < 195:
        return CursorShape.SIZE_VER
    if 195 <= angle < 255:
        return CursorShape.SIZE_F_DIAG
    if 255 <= angle < 285:
        return CursorShape.SIZE_HOR
    if 285 <= angle < 345:
        return CursorShape.SIZE_B_DIAG
    return CursorShape.SIZE_VER


def bounding_from_line(line: Line, margin: float) -> list[Point]:
    """Quadrilateral around a segment, ``margin`` wide on each side."""
    normal = line.normal_vector()
    length = normal.length()
    if length == 0:
        raise ValueError("line has zero length")
    dp = Point(normal.dx() * margin, normal.dy() * margin) / length
    return [line.p1 + dp, line.p1 - dp, line.p2 - dp, line.p2 + dp]


def distance(pos: Point, center: Point) -> float:
    return Line(center, pos).length()


def convert_to_360(angle: float) -> float:
    """Normalise an angle in degrees to the range [0, 360)."""
    if not math.isfinite(angle):
        raise ValueError(f"angle must be finite, got {angle!r}")
    result = math.fmod(angle, 360.0)
    if result < 0:
        result += 360.0
    if result >= 360.0:
        result -= 360.0
    return result