"""Editable axis-aligned rectangle with square corners."""

from __future__ import annotations

from typing import Callable

from sceneshapes.base import ShapeType
from sceneshapes.geometry import Rect
from sceneshapes.roundedrect import GraphicsRoundedRectItem, RoundedRect


class GraphicsRectItem(GraphicsRoundedRectItem):
    """A rounded-rectangle item whose corners have zero radius."""

    def __init__(self, scene_rect: Rect, rect: Rect | None = None) -> None:
        super().__init__(scene_rect)
        self.rect_changed_callbacks: list[Callable[[Rect], None]] = []
        self.rounded_rect_changed_callbacks.append(self._on_rounded_rect_changed)
        if rect is None:
            self.rounded_rect = self.temp_rounded_rect = RoundedRect(Rect(), 0, 0)
        else:
            self.set_rect(rect)

    def set_rect(self, rect: Rect) -> None:
        self.set_rounded_rect(RoundedRect(rect, 0, 0))

    def rect(self) -> Rect:
        return self.rounded_rect.rect

    def is_valid(self) -> bool:
        return super().is_valid()

    def item_type(self) -> ShapeType:
        return ShapeType.RECT

    def _on_rounded_rect_changed(self, rounded_rect: RoundedRect) -> None:
        for callback in self.rect_changed_callbacks:
            callback(rounded_rect.rect)