"""Points, vectors, sizes, offsets, scales and rectangles used by Box2D."""

from .point import Point2D, point2
from .rect import Rect
from .scale import Scale
from .side_offsets import SideOffsets2D
from .size import Size2D, size2
from .vector import Vector2D, vec2

__all__ = [
    "Point2D",
    "Rect",
    "Scale",
    "SideOffsets2D",
    "Size2D",
    "Vector2D",
    "point2",
    "size2",
    "vec2",
]
