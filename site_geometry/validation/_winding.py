"""Exterior-ring winding order.

Longitude / latitude are treated as a flat Cartesian (x, y) plane.  At the
scale of a single site or zone this agrees with RFC 7946's right-hand
rule, but it is an approximation: the sphere-based rule and this planar
one can disagree for very large rings or rings close to the poles.

The enforcer never reverses a ring; correcting orientation is the
caller's job.
"""

from __future__ import annotations

from collections.abc import Sequence

from site_geometry.core.constants import DEFAULT_INTERSECTION_EPSILON
from site_geometry.validation._issues import ErrorKind, ValidationIssue


def signed_area(ring: Sequence[Sequence[float]]) -> float:
    """Planar shoelace area in square degrees, positive when counter-clockwise.

    ``A = 0.5 * sum(x_i * y_(i+1) - x_(i+1) * y_i)`` over consecutive
    vertices of the closed ring.  Coordinates are taken relative to the
    first vertex, which leaves ``A`` unchanged and keeps the products small.
    """
    if not ring:
        return 0.0
    x0, y0 = ring[0][0], ring[0][1]
    total = 0.0
    for i in range(len(ring) - 1):
        x1, y1 = ring[i][0] - x0, ring[i][1] - y0
        x2, y2 = ring[i + 1][0] - x0, ring[i + 1][1] - y0
        total += x1 * y2 - x2 * y1
    return total / 2.0


def is_counter_clockwise(
    ring: Sequence[Sequence[float]],
    *,
    epsilon: float = DEFAULT_INTERSECTION_EPSILON,
) -> bool:
    return signed_area(ring) > epsilon


def validate_winding_order(
    ring: Sequence[Sequence[float]],
    *,
    epsilon: float = DEFAULT_INTERSECTION_EPSILON,
) -> ValidationIssue | None:
    """Require a counter-clockwise exterior ring.

    Returns:
        ``None`` when the signed area is positive, otherwise an
        ``INVALID_WINDING`` issue.  A signed area within ``epsilon`` of
        zero is degenerate and has no orientation, so it is rejected too.
    """
    area = signed_area(ring)
    if abs(area) <= epsilon:
        return ValidationIssue(
            ErrorKind.INVALID_WINDING,
            "Polygon exterior ring has zero area; no winding order can be determined.",
        )
    if area < 0:
        return ValidationIssue(
            ErrorKind.INVALID_WINDING,
            "Polygon exterior ring must be counter-clockwise (RFC 7946). "
            "Ring is currently clockwise.",
        )
    return None
