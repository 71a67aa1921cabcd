"""Template geometry generator.

Builds a rectangular ring from a centre point, physical dimensions and a
rotation, and recovers an approximate centre / size from an existing
polygon.

The generator's output is never trusted on its own: every ring it
produces is put through the full validation pipeline before it is
returned, so callers can hand it straight to the authoritative boundary.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from site_geometry.core.config import EngineConfig
from site_geometry.core.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LONGITUDE
from site_geometry.core.exceptions import ValidationError
from site_geometry.models.polygon import Polygon
from site_geometry.models.template import Dimensions, RectangleBounds
from site_geometry.templates._conversion import (
    degrees_lat_to_metres,
    degrees_lon_to_metres,
    metres_to_degrees_lat,
    metres_to_degrees_lon,
    rotate_point,
)
from site_geometry.validation import PolygonValidationError, signed_area, validate_polygon

if TYPE_CHECKING:
    from site_geometry.templates.catalog import TemplateCatalog

logger = logging.getLogger("site_geometry.templates.generator")


class TemplateGeometryError(ValidationError):
    """Raised when generator inputs cannot describe a rectangle."""

    default_stage = "template"
    default_code = "TEMPLATE_GEOMETRY_INVALID"


# ---------------------------------------------------------------------------
# Rectangle generation
# ---------------------------------------------------------------------------


def generate_rectangle(
    center_lat: float,
    center_lon: float,
    dimensions: Dimensions,
    rotation: float = 0.0,
    *,
    config: EngineConfig | None = None,
) -> Polygon:
    """Generate a closed, counter-clockwise rectangle.

    Args:
        center_lat: Centre latitude (WGS 84 degrees).
        center_lon: Centre longitude (WGS 84 degrees).
        dimensions: Width / length in metres.  At rotation 0 the length
            axis runs north-south.
        rotation: Rotation in degrees, counter-clockwise about the centre,
            applied to the corner offsets in metres before they are
            converted to degrees, so the rectangle keeps its true shape.
        config: Engine limits for the output check (defaults if ``None``).

    Returns:
        A 5-entry ring (4 corners + closing repeat) that passes validation.

    Raises:
        TemplateGeometryError: If the centre, dimensions or rotation are
            not usable.
        PolygonValidationError: If the generated ring fails validation
            (e.g. it extends past the antimeridian).
    """
    config = config or EngineConfig()
    _validate_inputs(center_lat, center_lon, dimensions, rotation)

    half_width_m = dimensions.width_m / 2
    half_length_m = dimensions.length_m / 2

    # Offsets in metres: x east, y north
    corners = [
        (-half_width_m, -half_length_m),  # bottom-left
        (half_width_m, -half_length_m),  # bottom-right
        (half_width_m, half_length_m),  # top-right
        (-half_width_m, half_length_m),  # top-left
    ]

    if rotation != 0:
        corners = [rotate_point(x, y, rotation) for x, y in corners]

    ring = [
        (
            center_lon + metres_to_degrees_lon(x, center_lat),
            center_lat + metres_to_degrees_lat(y),
        )
        for x, y in corners
    ]
    ring.append(ring[0])

    if signed_area(ring) < 0:
        logger.debug("Reversing clockwise template ring | rotation=%.2f", rotation)
        ring.reverse()

    polygon = Polygon.from_coords(ring)

    issue = validate_polygon(
        polygon,
        max_vertices=config.max_ring_vertices,
        epsilon=config.intersection_epsilon,
    )
    if issue is not None:
        logger.warning(
            "Generated rectangle rejected | kind=%s | center=(%.6f, %.6f) | "
            "width_m=%.2f | length_m=%.2f | rotation=%.2f",
            issue.kind.value,
            center_lat,
            center_lon,
            dimensions.width_m,
            dimensions.length_m,
            rotation,
        )
        raise PolygonValidationError(issue, stage="template")

    return polygon


def generate_from_template(
    catalog: TemplateCatalog,
    template_id: str,
    center_lat: float,
    center_lon: float,
    *,
    dimensions: Dimensions | None = None,
    rotation: float | None = None,
    config: EngineConfig | None = None,
) -> Polygon:
    """Generate a template's rectangle, using its defaults where not overridden.

    Raises:
        TemplateNotFoundError: If ``template_id`` is not in ``catalog``.
        TemplateGeometryError: If the inputs cannot describe a rectangle.
        PolygonValidationError: If the generated ring fails validation.
    """
    template = catalog.get(template_id)
    return generate_rectangle(
        center_lat,
        center_lon,
        dimensions or template.default_dimensions,
        template.default_rotation_deg if rotation is None else rotation,
        config=config,
    )


# ---------------------------------------------------------------------------
# Bounds recovery
# ---------------------------------------------------------------------------


def calculate_bounds(polygon: Polygon) -> RectangleBounds:
    """Recover an approximate centre and axis-aligned size from a polygon.

    Takes the longitude / latitude extrema, uses their midpoint as the
    centre, and reverses the metres-per-degree conversion at the centre
    latitude.  Exact (to floating-point tolerance) for unrotated
    rectangles from ``generate_rectangle``; for anything else the
    dimensions are those of the bounding box.  A ``w`` x ``l`` rectangle
    rotated by ``theta`` comes back as ``w|cos| + l|sin|`` wide and
    ``w|sin| + l|cos|`` long, so neither side is shorter than ``min(w, l)``.

    Raises:
        TemplateGeometryError: If the polygon has no coordinates.
    """
    ring = polygon.exterior
    if not ring:
        msg = "Cannot calculate bounds of an empty polygon"
        raise TemplateGeometryError(msg)

    lons = [c[0] for c in ring]
    lats = [c[1] for c in ring]
    min_lon, max_lon = min(lons), max(lons)
    min_lat, max_lat = min(lats), max(lats)

    center_lat = (min_lat + max_lat) / 2
    center_lon = (min_lon + max_lon) / 2

    return RectangleBounds(
        center_lat=center_lat,
        center_lon=center_lon,
        dimensions=Dimensions(
            width_m=degrees_lon_to_metres(max_lon - min_lon, center_lat),
            length_m=degrees_lat_to_metres(max_lat - min_lat),
        ),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validate_inputs(
    center_lat: float,
    center_lon: float,
    dimensions: Dimensions,
    rotation: float,
) -> None:
    """Reject centres, sizes and rotations no rectangle can be built from.

    Raises:
        TemplateGeometryError: On the first unusable value.
    """
    for name, value in (
        ("center_lat", center_lat),
        ("center_lon", center_lon),
        ("width_m", dimensions.width_m),
        ("length_m", dimensions.length_m),
        ("rotation", rotation),
    ):
        if not math.isfinite(value):
            msg = f"{name} must be a finite number, got {value!r}"
            raise TemplateGeometryError(msg)

    # cos(latitude) vanishes at the poles
    if not -MAX_LATITUDE < center_lat < MAX_LATITUDE:
        msg = f"center_lat {center_lat} must be strictly between -90 and 90"
        raise TemplateGeometryError(msg)

    if not MIN_LONGITUDE <= center_lon <= MAX_LONGITUDE:
        msg = f"center_lon {center_lon} is outside WGS84 range [-180, 180]"
        raise TemplateGeometryError(msg)

    if dimensions.width_m <= 0 or dimensions.length_m <= 0:
        msg = (
            f"Dimensions must be positive, got width_m={dimensions.width_m}, "
            f"length_m={dimensions.length_m}"
        )
        raise TemplateGeometryError(msg)
