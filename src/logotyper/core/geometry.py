"""Geometric helpers for the percentage coordinate space.

All composition coordinates are percentages of the editing surface, so the
helpers here are concerned with clamping, midpoints and mapping pointer
positions from pixels into percent space.

All functions are pure and stateless.
"""

import math

from logotyper.domain import ControlPoint
from logotyper.domain.mutations import PERCENT


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clip a value into [minimum, maximum].

    Examples:
        >>> clamp(120.0, 0.0, 100.0)
        100.0
        >>> clamp(-3.0, 0.0, 100.0)
        0.0
    """
    return max(minimum, min(maximum, value))


def clamp_percent(value: float) -> float:
    """Clip a value into the 0-100 percent range."""
    return PERCENT.clamp(value)


def to_percent(offset: float, extent: float) -> float:
    """Map a pixel offset along an extent to a clamped percentage.

    Args:
        offset: Pixel offset from the surface origin
        extent: Surface width or height in pixels (must be positive)

    Returns:
        Percentage in [0, 100]

    Examples:
        >>> to_percent(50.0, 200.0)
        25.0
        >>> to_percent(250.0, 200.0)
        100.0
    """
    return clamp_percent(offset / extent * 100.0)


def midpoint(a: ControlPoint, b: ControlPoint) -> ControlPoint:
    """Return the point halfway between two points.

    Examples:
        >>> midpoint(ControlPoint(0.0, 0.0), ControlPoint(10.0, 20.0))
        ControlPoint(x=5.0, y=10.0)
    """
    return ControlPoint((a.x + b.x) / 2, (a.y + b.y) / 2)


def distance(a: ControlPoint, b: ControlPoint) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)
