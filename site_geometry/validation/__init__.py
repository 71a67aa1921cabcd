"""Polygon validation pipeline.

A submitted geometry passes through the stages in order, and the first
failing stage's issue is returned; later stages never run:

- **_structure**: Polygon tag, ring length, closure, numeric pairs
- **_bounds**: WGS 84 longitude / latitude ranges
- vertex cap: bounds the cost of the next stage
- **_intersection**: non-adjacent edges must not cross
- **_winding**: exterior ring must be counter-clockwise

Every function here is pure and synchronous.  Validators return a
``ValidationIssue`` or ``None``; they do not raise for bad input.
"""

from __future__ import annotations

from typing import Any

from site_geometry.core.constants import DEFAULT_INTERSECTION_EPSILON, DEFAULT_MAX_RING_VERTICES
from site_geometry.validation._bounds import validate_fits_within, validate_wgs84_bounds
from site_geometry.validation._intersection import (
    check_self_intersection,
    count_self_intersections,
    orientation,
    segments_intersect,
)
from site_geometry.validation._issues import ErrorKind, PolygonValidationError, ValidationIssue
from site_geometry.validation._structure import exterior_ring, validate_polygon_structure
from site_geometry.validation._winding import (
    is_counter_clockwise,
    signed_area,
    validate_winding_order,
)

__all__ = [
    "ErrorKind",
    "PolygonValidationError",
    "ValidationIssue",
    "check_self_intersection",
    "count_self_intersections",
    "exterior_ring",
    "is_counter_clockwise",
    "orientation",
    "segments_intersect",
    "signed_area",
    "validate_fits_within",
    "validate_polygon",
    "validate_polygon_structure",
    "validate_vertex_count",
    "validate_wgs84_bounds",
    "validate_winding_order",
]


def validate_vertex_count(ring: Any, max_vertices: int) -> ValidationIssue | None:
    """Reject rings longer than ``max_vertices`` entries."""
    if len(ring) > max_vertices:
        return ValidationIssue(
            ErrorKind.TOO_MANY_POINTS,
            f"Polygon exterior ring has {len(ring)} points; maximum allowed is {max_vertices}",
        )
    return None


def validate_polygon(
    geometry: Any,
    *,
    max_vertices: int = DEFAULT_MAX_RING_VERTICES,
    epsilon: float = DEFAULT_INTERSECTION_EPSILON,
) -> ValidationIssue | None:
    """Run every validation stage and return the first failure.

    Args:
        geometry: A GeoJSON-shaped Polygon mapping or a ``Polygon`` model.
        max_vertices: Vertex cap applied before self-intersection detection.
        epsilon: Cross-product tolerance for the intersection and winding
            checks (square degrees).

    Returns:
        ``None`` if the geometry is acceptable, otherwise the issue from
        the first failing stage.
    """
    issue = validate_polygon_structure(geometry)
    if issue is not None:
        return issue

    ring = exterior_ring(geometry)

    issue = validate_wgs84_bounds(ring)
    if issue is not None:
        return issue

    issue = validate_vertex_count(ring, max_vertices)
    if issue is not None:
        return issue

    issue = check_self_intersection(ring, epsilon=epsilon)
    if issue is not None:
        return issue

    return validate_winding_order(ring, epsilon=epsilon)
