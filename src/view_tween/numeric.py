"""Numeric primitives shared by the scroll arithmetic."""

from __future__ import annotations

import math
import time
from typing import TypeVar

Number = TypeVar("Number", int, float)


def clamp(value: Number, minimum: Number, maximum: Number) -> Number:
    """Restrict ``value`` to ``[minimum, maximum]``.

    Callers must pass ``minimum <= maximum``; otherwise ``minimum`` wins for
    values below it and ``maximum`` for everything else.
    """

    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity.

    Unlike the builtin ``round`` (banker's rounding) ``2.5`` becomes ``3`` and
    ``-2.5`` becomes ``-2``, so a fractional animation progress always maps
    to the same line.
    """

    return int(math.floor(value + 0.5))


def sign(value: float) -> int:
    return (value > 0) - (value < 0)


def now_ms() -> float:
    """Monotonic clock in milliseconds."""

    return time.monotonic() * 1000.0


__all__ = ["clamp", "round_half_up", "sign", "now_ms"]
