"""Structural validation: is the value a well-formed single-ring polygon?

Rules, checked in order (first failure wins):
- the value is present, tagged ``Polygon`` and carries a non-empty
  coordinate list
- the exterior ring has at least ``MIN_RING_POINTS`` entries
- the ring is closed (first pair equals last, coordinate-wise)
- every entry is a finite numeric ``[lon, lat]`` pair

Total over its input: any value yields either ``None`` or an issue.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from typing import Any

from site_geometry.core.constants import MIN_RING_POINTS
from site_geometry.models.polygon import Polygon
from site_geometry.validation._issues import ErrorKind, ValidationIssue


def validate_polygon_structure(geometry: Any) -> ValidationIssue | None:
    """Check that ``geometry`` is a closed ring of numeric coordinate pairs.

    Args:
        geometry: A GeoJSON-shaped mapping, a ``Polygon`` model, or any
            other value (which is rejected).

    Returns:
        ``None`` when the structure is sound, otherwise an
        ``INVALID_POLYGON`` or ``INSUFFICIENT_POINTS`` issue.
    """
    if geometry is None:
        return ValidationIssue(ErrorKind.INVALID_POLYGON, "Geometry is required")

    if isinstance(geometry, Polygon):
        geometry = geometry.to_dict()

    if not isinstance(geometry, Mapping) or geometry.get("type") != "Polygon":
        return ValidationIssue(ErrorKind.INVALID_POLYGON, "Geometry must be a Polygon")

    coordinates = geometry.get("coordinates")
    if not _is_sequence(coordinates) or len(coordinates) == 0:
        return ValidationIssue(
            ErrorKind.INVALID_POLYGON,
            "Polygon coordinates must be a non-empty array",
        )

    exterior = coordinates[0]
    if not _is_sequence(exterior) or len(exterior) < MIN_RING_POINTS:
        return ValidationIssue(
            ErrorKind.INSUFFICIENT_POINTS,
            f"Polygon exterior ring must have at least {MIN_RING_POINTS} points "
            "(3 unique + 1 closing)",
        )

    if not _same_position(exterior[0], exterior[-1]):
        return ValidationIssue(
            ErrorKind.INVALID_POLYGON,
            "Polygon ring must be closed (first point == last point)",
        )

    for idx, coord in enumerate(exterior):
        if not _is_sequence(coord) or len(coord) != 2:
            return ValidationIssue(
                ErrorKind.INVALID_POLYGON,
                f"Point {idx} is not a valid [longitude, latitude] pair",
            )
        lon, lat = coord
        if not (_is_number(lon) and _is_number(lat)):
            return ValidationIssue(
                ErrorKind.INVALID_POLYGON,
                f"Point {idx} contains non-numeric coordinates",
            )
        if not (_is_finite(lon) and _is_finite(lat)):
            return ValidationIssue(
                ErrorKind.INVALID_POLYGON,
                f"Point {idx} contains non-finite coordinates",
            )

    return None


def exterior_ring(geometry: Any) -> Sequence[Sequence[float]]:
    """Return the exterior ring of a structurally valid geometry."""
    if isinstance(geometry, Polygon):
        return geometry.exterior
    return geometry["coordinates"][0]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_finite(value: numbers.Real) -> bool:
    """Finite and representable as a float (huge JSON integers are not)."""
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _same_position(first: object, last: object) -> bool:
    """Coordinate-wise equality of the first two components.

    Malformed entries fall back to plain equality; the per-entry check
    reports them with their index afterwards.
    """
    if _is_sequence(first) and _is_sequence(last) and len(first) >= 2 and len(last) >= 2:  # type: ignore[arg-type]
        return first[0] == last[0] and first[1] == last[1]  # type: ignore[index]
    return first == last
