"""Phantom unit tags.

Units exist only for static type checkers: ``Box2D[float, DevicePixel]`` and
``Box2D[float, CssPixel]`` are different types, but nothing about the unit is
stored at runtime.
"""

from __future__ import annotations

from typing import TypeVar


class UnknownUnit:
    """Unit of values that have not been tagged with a real unit."""


T = TypeVar("T")
U = TypeVar("U")
Src = TypeVar("Src")
Dst = TypeVar("Dst")
