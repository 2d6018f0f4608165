"""Rect: an axis-aligned rectangle described by origin and size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic

from ..core.units import T, U
from .point import Point2D
from .size import Size2D

if TYPE_CHECKING:
    from ..box2d import Box2D


@dataclass(frozen=True)
class Rect(Generic[T, U]):
    """An axis-aligned rectangle anchored at ``origin``."""

    origin: Point2D[T, U]
    size: Size2D[T, U]

    @property
    def min_x(self) -> T:
        return self.origin.x

    @property
    def min_y(self) -> T:
        return self.origin.y

    @property
    def max_x(self) -> T:
        return self.origin.x + self.size.width

    @property
    def max_y(self) -> T:
        return self.origin.y + self.size.height

    def to_box2d(self) -> Box2D[T, U]:
        from ..box2d import Box2D

        return Box2D(self.origin, Point2D(self.max_x, self.max_y))

    def to_dict(self) -> dict:
        return {
            "x": self.origin.x,
            "y": self.origin.y,
            "width": self.size.width,
            "height": self.size.height,
        }
