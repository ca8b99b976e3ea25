"""
Response curve helpers.

Building blocks shared by the domain subscore functions. Every helper is total
over the reals: floors and clamps give a defined output for zero, negative and
extreme inputs.
"""

import math
from typing import Sequence, Tuple

from ..core import constants


def clamp(value: float, lower: float = constants.MIN_SCORE, upper: float = constants.MAX_SCORE) -> float:
    """Clamp a value into [lower, upper] (defaults to the score range)."""
    return max(lower, min(upper, value))


def interpolate(x: float, x0: float, x1: float, y0: float, y1: float) -> float:
    """
    Linear interpolation between two breakpoints.

    Args:
        x: Input value
        x0: Lower breakpoint
        x1: Upper breakpoint
        y0: Output at x0
        y1: Output at x1

    Returns:
        Interpolated output (not clamped to the segment)
    """
    if x1 == x0:
        return y0
    return y0 + (x - x0) / (x1 - x0) * (y1 - y0)


def piecewise_linear(x: float, breakpoints: Sequence[Tuple[float, float]]) -> float:
    """
    Evaluate a piecewise linear curve.

    Breakpoints are (x, y) pairs in ascending x order. Inputs outside the
    first/last breakpoint take the end value.

    Args:
        x: Input value
        breakpoints: Ascending (x, y) pairs, at least one

    Returns:
        Curve output
    """
    if x <= breakpoints[0][0]:
        return breakpoints[0][1]

    for (x0, y0), (x1, y1) in zip(breakpoints, breakpoints[1:]):
        if x < x1:
            return interpolate(x, x0, x1, y0, y1)

    return breakpoints[-1][1]


def log_growth(x: float, base: float, scale: float) -> float:
    """
    Logarithmic growth: 100 * log(x / base) / log(scale).

    Reaches 100 at x = base * scale. Inputs at or below base give 0.
    """
    if x <= base:
        return 0.0
    return 100.0 * math.log(x / base) / math.log(scale)


def asymptotic(x: float, floor: float, rate: float, start: float = 0.0, ceiling: float = 100.0) -> float:
    """
    Exponential approach from start towards ceiling.

    start + (ceiling - start) * (1 - exp(-(x - floor) / rate)); never reaches
    the ceiling for finite x.

    Args:
        x: Input value
        floor: Value at which the curve equals start
        rate: Rate constant (larger is slower)
        start: Output at the floor
        ceiling: Asymptote

    Returns:
        Curve output (start for x <= floor)
    """
    if x <= floor:
        return start
    return start + (ceiling - start) * (1 - math.exp(-(x - floor) / rate))
