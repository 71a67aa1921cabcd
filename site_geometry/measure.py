"""Measurement engine: area, perimeter and centroid of an accepted ring.

Area and perimeter use one shared equirectangular projection: every
vertex is projected to metres relative to the ring's first vertex,
scaling longitude differences by ``111320 * cos(latitude_at_point)`` and
latitude differences by ``111320``.  Using the same projection for both
metrics keeps them consistent with each other; the approximation is
adequate at the scale of a single site or zone.

The centroid is the area-weighted polygon centroid computed in degrees
from the same signed area the winding enforcer uses.

Rounding: area and perimeter (metric and imperial) are rounded to two
decimals with round-half-up, applied once, to the unrounded metric value
and its unrounded conversion.

All functions are total for rings that passed the validation pipeline.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from site_geometry.core.constants import (
    FEET_PER_METRE,
    MEASUREMENT_DECIMALS,
    METRES_PER_DEGREE,
    MIN_RING_POINTS,
    SQ_FEET_PER_SQ_METRE,
)
from site_geometry.core.exceptions import ValidationError
from site_geometry.models.measurement import Measurement
from site_geometry.models.polygon import Coordinate, Polygon
from site_geometry.validation import signed_area

logger = logging.getLogger("site_geometry.measure")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class MeasurementError(ValidationError):
    """Raised when a ring cannot be measured (too few points, zero area)."""

    default_stage = "measurement"
    default_code = "MEASUREMENT_FAILED"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def measure_polygon(polygon: Polygon) -> Measurement:
    """Compute area, perimeter and centroid for a validated polygon.

    Args:
        polygon: A polygon that passed the validation pipeline.

    Returns:
        A ``Measurement`` with rounded area / perimeter and the
        area-weighted centroid.

    Raises:
        MeasurementError: If the ring has too few points or zero area.
    """
    ring = polygon.exterior
    area_m2, area_ft2 = compute_area(ring)
    perimeter_m, perimeter_ft = compute_perimeter(ring)
    centroid = compute_centroid(ring)

    logger.debug(
        "Polygon measured | area_m2=%.2f | perimeter_m=%.2f | centroid=(%.6f, %.6f) | vertices=%d",
        area_m2,
        perimeter_m,
        *centroid,
        len(ring),
    )

    return Measurement(
        area_m2=area_m2,
        area_ft2=area_ft2,
        perimeter_m=perimeter_m,
        perimeter_ft=perimeter_ft,
        centroid=centroid,
    )


# ---------------------------------------------------------------------------
# Area
# ---------------------------------------------------------------------------


def compute_area(ring: Sequence[Sequence[float]]) -> tuple[float, float]:
    """Planar area of the projected ring.

    Returns:
        ``(area_m2, area_ft2)``, each rounded to 2 decimals (half-up).

    Raises:
        MeasurementError: If the ring has too few points.
    """
    area_m2 = area_m2_unrounded(ring)
    return (
        round_half_up(area_m2),
        round_half_up(area_m2 * SQ_FEET_PER_SQ_METRE),
    )


def area_m2_unrounded(ring: Sequence[Sequence[float]]) -> float:
    """Absolute shoelace area of the projected ring in square metres."""
    _validate_coords(ring, "area computation")
    projected = _project_ring(ring)
    total = 0.0
    for (x1, y1), (x2, y2) in zip(projected, projected[1:]):
        total += x1 * y2 - x2 * y1
    return abs(total) / 2.0


# ---------------------------------------------------------------------------
# Perimeter
# ---------------------------------------------------------------------------


def compute_perimeter(ring: Sequence[Sequence[float]]) -> tuple[float, float]:
    """Sum of edge lengths in the projected plane.

    Returns:
        ``(perimeter_m, perimeter_ft)``, each rounded to 2 decimals (half-up).

    Raises:
        MeasurementError: If the ring has too few points.
    """
    _validate_coords(ring, "perimeter computation")
    projected = _project_ring(ring)
    perimeter_m = sum(
        math.hypot(x2 - x1, y2 - y1) for (x1, y1), (x2, y2) in zip(projected, projected[1:])
    )
    return (
        round_half_up(perimeter_m),
        round_half_up(perimeter_m * FEET_PER_METRE),
    )


# ---------------------------------------------------------------------------
# Centroid
# ---------------------------------------------------------------------------


def compute_centroid(ring: Sequence[Sequence[float]]) -> Coordinate:
    """Area-weighted centroid of the ring in degrees.

    ``Cx = (1 / 6A) * sum((x_i + x_(i+1)) * (x_i * y_(i+1) - x_(i+1) * y_i))``
    and likewise for ``Cy``, with ``A`` the signed planar area.  Terms are
    computed relative to the first vertex and shifted back at the end.

    Returns:
        Centroid as ``(lon, lat)``.

    Raises:
        MeasurementError: If the ring has too few points or zero area.
    """
    _validate_coords(ring, "centroid computation")

    area = signed_area(ring)
    if area == 0:
        msg = "Cannot compute centroid of a zero-area ring"
        raise MeasurementError(msg)

    x0, y0 = ring[0][0], ring[0][1]
    cx = 0.0
    cy = 0.0
    for i in range(len(ring) - 1):
        x1, y1 = ring[i][0] - x0, ring[i][1] - y0
        x2, y2 = ring[i + 1][0] - x0, ring[i + 1][1] - y0
        cross = x1 * y2 - x2 * y1
        cx += (x1 + x2) * cross
        cy += (y1 + y2) * cross

    factor = 1.0 / (6.0 * area)
    return (x0 + cx * factor, y0 + cy * factor)


# ---------------------------------------------------------------------------
# Bounding box
# ---------------------------------------------------------------------------


def compute_bbox(ring: Sequence[Sequence[float]]) -> tuple[float, float, float, float]:
    """Tight bounding box of the ring.

    Returns:
        ``(min_lon, min_lat, max_lon, max_lat)``

    Raises:
        MeasurementError: If coordinates are empty or insufficient.
    """
    _validate_coords(ring, "bbox computation")
    lons = [c[0] for c in ring]
    lats = [c[1] for c in ring]
    return (min(lons), min(lats), max(lons), max(lats))


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_area(area_m2: float, *, imperial: bool = False) -> str:
    """Display string for an area, e.g. ``"7,140.00 m²"``."""
    if imperial:
        return f"{round_half_up(area_m2 * SQ_FEET_PER_SQ_METRE):,.2f} ft²"
    return f"{area_m2:,.2f} m²"


def format_perimeter(perimeter_m: float, *, imperial: bool = False) -> str:
    """Display string for a length, e.g. ``"346.00 m"``."""
    if imperial:
        return f"{round_half_up(perimeter_m * FEET_PER_METRE):,.2f} ft"
    return f"{perimeter_m:,.2f} m"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def round_half_up(value: float, places: int = MEASUREMENT_DECIMALS) -> float:
    """Round to ``places`` decimals, halves away from zero.

    Works on the shortest decimal representation of ``value`` so results
    do not depend on binary floating-point artefacts.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _project_ring(ring: Sequence[Sequence[float]]) -> list[tuple[float, float]]:
    """Equirectangular projection to metres, anchored at the first vertex."""
    lon0, lat0 = ring[0][0], ring[0][1]
    return [
        (
            (lon - lon0) * METRES_PER_DEGREE * math.cos(math.radians(lat)),
            (lat - lat0) * METRES_PER_DEGREE,
        )
        for lon, lat in ((c[0], c[1]) for c in ring)
    ]


def _validate_coords(coords: Sequence[Sequence[float]], context: str) -> None:
    """Validate that coordinates are non-empty and sufficient for a ring.

    Raises:
        MeasurementError: If coordinates are empty or too few for a ring.
    """
    if not coords:
        msg = f"Empty coordinates: no coordinates provided for {context}"
        raise MeasurementError(msg)
    if len(coords) < MIN_RING_POINTS:
        msg = (
            f"Insufficient coordinates for {context}: "
            f"need at least {MIN_RING_POINTS}, got {len(coords)}"
        )
        raise MeasurementError(msg)
