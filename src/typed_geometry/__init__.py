"""typed-geometry: axis-aligned 2D boxes with phantom units over any numeric type."""

from ._version import __version__
from .box2d import Box2D
from .core.units import UnknownUnit
from .primitives import (
    Point2D,
    Rect,
    Scale,
    SideOffsets2D,
    Size2D,
    Vector2D,
    point2,
    size2,
    vec2,
)

__all__ = [
    "__version__",
    "Box2D",
    "Point2D",
    "Rect",
    "Scale",
    "SideOffsets2D",
    "Size2D",
    "UnknownUnit",
    "Vector2D",
    "point2",
    "size2",
    "vec2",
]
