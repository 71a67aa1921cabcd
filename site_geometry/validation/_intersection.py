"""Self-intersection detection for a single closed ring.

The ring is treated as N ordered segments, closing segment included.
Every pair of non-adjacent segments is tested with the orientation-sign
method; collinear overlap counts as an intersection.  Adjacent segments
share a vertex by construction and are skipped.

The pairwise test is O(n^2).  Callers bound ``n`` with the configured
vertex cap before calling ``check_self_intersection``.
"""

from __future__ import annotations

from collections.abc import Sequence

from site_geometry.core.constants import DEFAULT_INTERSECTION_EPSILON
from site_geometry.validation._issues import ErrorKind, ValidationIssue

Point = Sequence[float]


def orientation(a: Point, b: Point, c: Point, *, epsilon: float = DEFAULT_INTERSECTION_EPSILON) -> int:
    """Sign of the turn a -> b -> c.

    Returns:
        ``1`` for counter-clockwise, ``-1`` for clockwise, ``0`` when the
        cross product is within ``epsilon`` of zero (collinear).
    """
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if abs(cross) <= epsilon:
        return 0
    return 1 if cross > 0 else -1


def _on_segment(a: Point, b: Point, p: Point) -> bool:
    """Whether ``p`` (known collinear with a-b) lies within the a-b extent."""
    return (
        min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
        and min(a[1], b[1]) <= p[1] <= max(a[1], b[1])
    )


def segments_intersect(
    a: Point,
    b: Point,
    c: Point,
    d: Point,
    *,
    epsilon: float = DEFAULT_INTERSECTION_EPSILON,
) -> bool:
    """Whether segment AB meets segment CD.

    Proper crossings, touching and collinear overlap all count.
    """
    o1 = orientation(a, b, c, epsilon=epsilon)
    o2 = orientation(a, b, d, epsilon=epsilon)
    o3 = orientation(c, d, a, epsilon=epsilon)
    o4 = orientation(c, d, b, epsilon=epsilon)

    if o1 != o2 and o3 != o4:
        return True

    # Collinear cases: an endpoint of one segment lies on the other
    if o1 == 0 and _on_segment(a, b, c):
        return True
    if o2 == 0 and _on_segment(a, b, d):
        return True
    if o3 == 0 and _on_segment(c, d, a):
        return True
    return o4 == 0 and _on_segment(c, d, b)


def count_self_intersections(
    ring: Sequence[Point],
    *,
    epsilon: float = DEFAULT_INTERSECTION_EPSILON,
) -> int:
    """Number of intersecting non-adjacent segment pairs in a closed ring."""
    n = len(ring) - 1  # segments; ring[n] repeats ring[0]
    count = 0
    for i in range(n):
        for j in range(i + 2, n):
            # First and closing segments share ring[0]
            if i == 0 and j == n - 1:
                continue
            if segments_intersect(ring[i], ring[i + 1], ring[j], ring[j + 1], epsilon=epsilon):
                count += 1
    return count


def check_self_intersection(
    ring: Sequence[Point],
    *,
    epsilon: float = DEFAULT_INTERSECTION_EPSILON,
) -> ValidationIssue | None:
    """Reject rings whose non-adjacent edges cross.

    Returns:
        ``None`` or a ``SELF_INTERSECTING`` issue stating how many crossing
        points were found.
    """
    crossings = count_self_intersections(ring, epsilon=epsilon)
    if crossings:
        return ValidationIssue(
            ErrorKind.SELF_INTERSECTING,
            f"Polygon self-intersects at {crossings} point(s)",
        )
    return None
