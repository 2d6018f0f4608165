"""Numeric capabilities shared by every geometry type.

Coordinates are plain Python numbers or NumPy scalars. The helpers here keep
the coordinate type stable: integers stay integers under division and
rounding, and ``np.float32`` stays ``np.float32``.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np


# Targets of the convenience casts on Box2D.
CAST_DTYPES: dict[str, np.dtype] = {
    "f32": np.dtype(np.float32),
    "f64": np.dtype(np.float64),
    "u32": np.dtype(np.uint32),
    "i32": np.dtype(np.int32),
    "i64": np.dtype(np.int64),
    "usize": np.dtype(np.uintp),
}


def is_integral(value: Any) -> bool:
    """True for Python ints and NumPy integer scalars (bool excluded)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def like(template: Any, value: Any) -> Any:
    """Convert ``value`` to the numeric type of ``template``."""
    if isinstance(template, np.generic):
        return template.dtype.type(value)
    return type(template)(value)


def div(a: Any, b: Any) -> Any:
    """Divide, truncating toward zero when both operands are integers."""
    if is_integral(a) and is_integral(b):
        q = abs(int(a)) // abs(int(b))
        if (a < 0) != (b < 0):
            q = -q
        return like(a, q)
    return a / b


def round_half_away(value: Any) -> Any:
    """Round to the nearest integer, halves away from zero.

    Integers are returned unchanged.
    """
    if is_integral(value):
        return value
    truncated = np.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += np.copysign(1, value)
    return like(value, truncated)


def floor(value: Any) -> Any:
    if is_integral(value):
        return value
    return like(value, np.floor(value))


def ceil(value: Any) -> Any:
    if is_integral(value):
        return value
    return like(value, np.ceil(value))


def resolve_dtype(dtype: Any) -> np.dtype:
    """Turn a dtype-like (``np.int32``, ``"f4"``, ``float``...) into a numeric dtype."""
    try:
        resolved = np.dtype(dtype)
    except TypeError:
        raise TypeError(
            f"Cannot cast coordinates to {dtype!r}: not a NumPy dtype. "
            "Use e.g. np.float32, np.int64 or 'f8'."
        ) from None
    if resolved.kind not in "iuf":
        raise TypeError(
            f"Cannot cast coordinates to {resolved}: only integer and "
            "floating-point dtypes are supported."
        )
    return resolved


def try_cast(value: Any, dtype: Any) -> Any | None:
    """Cast a single coordinate, or return None if the target cannot hold it.

    Float to integer truncates toward zero. NaN and infinities never convert to
    integers, and finite values that overflow a narrower float type are
    rejected rather than turned into infinities.
    """
    target = resolve_dtype(dtype)
    if target.kind in "iu":
        if is_integral(value):
            whole = int(value)
        else:
            as_float = float(value)
            if not math.isfinite(as_float):
                return None
            whole = math.trunc(as_float)
        info = np.iinfo(target)
        if not info.min <= whole <= info.max:
            return None
        return target.type(whole)

    try:
        as_float = float(value)
    except OverflowError:
        return None
    with np.errstate(over="ignore"):
        result = target.type(as_float)
    if math.isfinite(as_float) and not np.isfinite(result):
        return None
    return result


def cast(value: Any, dtype: Any) -> Any:
    """Cast a single coordinate, raising ValueError if the target cannot hold it."""
    result = try_cast(value, dtype)
    if result is None:
        raise ValueError(
            f"Coordinate {value!r} cannot be represented as {resolve_dtype(dtype)}. "
            "Use try_cast() to handle this case, or round the value first."
        )
    return result
