"""Common state and hover handling for editable shape items in a scene."""

from __future__ import annotations

import abc
import enum

from sceneshapes.geometry import (
    CursorShape,
    Line,
    Point,
    Rect,
    bounding_rect,
    convert_to_360,
    cursor_from_angle,
)

LINE_COLOR = (57, 163, 255)
ANCHOR_COLOR = (242, 80, 86)


class ShapeType(enum.IntEnum):
    LINE = 1
    RECT = 2
    ROUNDEDRECT = 3
    ROTATEDRECT = 4
    CIRCLE = 5
    POLYGON = 6
    RING = 7
    ARC = 8


class MouseRegion(enum.Enum):
    DOT_REGION = "dot_region"
    ALL = "all"
    EDGE = "edge"
    NONE = "none"


class MouseButton(enum.Flag):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 4


class BasicGraphicsItem(abc.ABC):
    """A shape drawn point by point and edited through its anchor points.

    ``cache`` holds the anchor points of the shape; ``scene_rect`` bounds
    where the shape may be placed.
    """

    def __init__(self, scene_rect: Rect) -> None:
        self.scene_rect = scene_rect
        self.name = ""
        self.cache: list[Point] = []
        self.clicked_pos = Point()
        self.mouse_region = MouseRegion.NONE
        self.hovered_dot_index = -1
        self.show_bounding_rect = False
        self.accept_hover = True
        self.selected = False
        self.cursor: CursorShape | None = None
        self._margin = 10.0

    @abc.abstractmethod
    def is_valid(self) -> bool:
        """Whether the item holds a complete, usable shape."""

    @abc.abstractmethod
    def item_type(self) -> ShapeType:
        """The kind of shape this item edits."""

    @property
    def margin(self) -> float:
        """Size of anchor handles and tolerance of edge hits, in scene units."""
        return self._margin

    def bounding_rect(self) -> Rect:
        if not self.is_valid():
            return self.scene_rect
        half = self._margin / 2
        return bounding_rect(self.cache).adjusted(-half, -half, half, half)

    def shape_contains(self, point: Point) -> bool:
        return self.bounding_rect().contains_point(point)

    def set_margin(self, scale: float) -> None:
        """Adapt the handle size to the view's zoom ``scale``."""
        self._margin = min(max(1.5 * 10 / scale, 3.0), 100.0)

    def set_item_editable(self, editable: bool) -> None:
        self.accept_hover = editable

    def hover_move(self, pos: Point) -> None:
        """Track which part of the item lies under the pointer at ``pos``."""
        if not self.is_valid():
            return
        self.mouse_region = MouseRegion.NONE
        self.hovered_dot_index = -1

        if self.shape_contains(pos):
            self.mouse_region = MouseRegion.ALL
            self.cursor = CursorShape.SIZE_ALL

        half = Point(self._margin / 2, self._margin / 2)
        for p in self.cache:
            if Rect.from_points(p - half, p + half).contains_point(pos):
                self.hovered_dot_index = self.cache.index(p)
                self.mouse_region = MouseRegion.DOT_REGION
                self.cursor = CursorShape.POINTING_HAND
                return

    def hover_leave(self) -> None:
        self.cursor = None
        self.mouse_region = MouseRegion.NONE

    def anchor_rects(self) -> list[Rect]:
        """Handle squares around the anchor points; none when not editable."""
        if not self.accept_hover:
            return []
        m = self._margin
        return [Rect(p.x - m / 2, p.y - m / 2, m, m) for p in self.cache]

    def set_cursor_from_points(self, center: Point, pos: Point) -> None:
        """Pick a resize cursor perpendicular to the direction from center to pos."""
        angle = Line(center, pos).angle()
        self.cursor = cursor_from_angle(convert_to_360(angle - 90))