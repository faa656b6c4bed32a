"""Internal quadratic Bezier flattening.

This is an internal module containing the helper used by flatten_path.
Not intended for public use.
"""

import math

from logotyper.domain import ControlPoint


def flatten_quadratic(
    p0: ControlPoint, p1: ControlPoint, p2: ControlPoint, tolerance: float
) -> list[ControlPoint]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        p0: Start anchor
        p1: Control point
        p2: End anchor
        tolerance: Maximum distance from true curve

    Returns:
        List of points approximating the curve, including both anchors
    """
    # Actual curve midpoint (at t=0.5)
    curve_mid_x = 0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x
    curve_mid_y = 0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y

    # Chord midpoint
    chord_mid_x = (p0.x + p2.x) / 2
    chord_mid_y = (p0.y + p2.y) / 2

    if math.hypot(curve_mid_x - chord_mid_x, curve_mid_y - chord_mid_y) <= tolerance:
        return [p0, p2]

    # Subdivide at t=0.5
    mid = ControlPoint(curve_mid_x, curve_mid_y)
    left_ctrl = ControlPoint((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)
    right_ctrl = ControlPoint((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)

    left = flatten_quadratic(p0, left_ctrl, mid, tolerance)
    right = flatten_quadratic(mid, right_ctrl, p2, tolerance)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
