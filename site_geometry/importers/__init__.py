"""Import a site boundary from an uploaded GeoJSON or KML document.

Modules:
- **_geojson**: FeatureCollection / Feature / bare geometry extraction
- **_kml**: lxml-based Placemark polygon extraction
- **_checks**: pyproj geodesic area, shapely validity and WKT
- **_errors**: ``GeometryImportError``

``import_geometry`` is the single entry point.  It normalises what a
file export commonly gets wrong (unclosed ring, altitude values,
clockwise winding), records each repair as a warning, and then holds the
ring to exactly the same validation pipeline as any hand-drawn polygon.
"""

from __future__ import annotations

import logging
from typing import Any

from site_geometry.core.config import EngineConfig
from site_geometry.core.constants import MIN_IMPORT_AREA_M2
from site_geometry.importers._checks import (
    geodesic_area_m2,
    ring_to_wkt,
    shapely_validity_warning,
)
from site_geometry.importers._errors import GeometryImportError
from site_geometry.importers._geojson import extract_geojson_polygons
from site_geometry.importers._kml import extract_kml_polygons, parse_coordinates_text
from site_geometry.measure import compute_bbox, measure_polygon
from site_geometry.models.import_result import ImportResult
from site_geometry.models.polygon import Polygon
from site_geometry.service import check_polygon
from site_geometry.validation import (
    PolygonValidationError,
    signed_area,
    validate_polygon_structure,
)

logger = logging.getLogger("site_geometry.importers")

__all__ = [
    "GeometryImportError",
    "detect_format",
    "extract_geojson_polygons",
    "extract_kml_polygons",
    "geodesic_area_m2",
    "import_geometry",
    "parse_coordinates_text",
    "ring_to_wkt",
    "shapely_validity_warning",
]

GEOJSON = "geojson"
KML = "kml"


def detect_format(content: str) -> str:
    """Return ``"geojson"`` or ``"kml"`` from the document's leading content.

    Raises:
        GeometryImportError: ``INVALID_FORMAT`` for anything else.
    """
    trimmed = content.strip()
    if trimmed.startswith("{") and '"type"' in trimmed:
        return GEOJSON
    if trimmed.startswith("<") and "<kml" in trimmed:
        return KML
    msg = "Unsupported file format: provide a GeoJSON or KML document"
    raise GeometryImportError(msg, code="INVALID_FORMAT")


def import_geometry(
    content: str | bytes,
    config: EngineConfig | None = None,
    *,
    correlation_id: str = "",
) -> ImportResult:
    """Parse, normalise, validate and measure an uploaded boundary.

    Only the first polygon in the document is used.

    Args:
        content: Raw document text (bytes are decoded as UTF-8).
        config: Engine limits (defaults if ``None``).
        correlation_id: Request identifier copied onto any raised error.

    Returns:
        An ``ImportResult`` with the accepted polygon and its measurement.

    Raises:
        GeometryImportError: Unreadable document, too many coordinates,
            or an area outside the import limits.
        PolygonValidationError: The ring fails the validation pipeline
            (stage ``"import"``).
    """
    config = config or EngineConfig()

    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Unsupported file format: content is not UTF-8 text ({exc.reason})"
            raise GeometryImportError(
                msg, code="INVALID_FORMAT", correlation_id=correlation_id
            ) from exc

    fmt = detect_format(content)
    polygons = extract_geojson_polygons(content) if fmt == GEOJSON else extract_kml_polygons(content)

    warnings: list[str] = []
    if len(polygons) > 1:
        warnings.append(f"{len(polygons) - 1} additional polygon(s) ignored; using the first")

    ring = _first_ring(polygons[0])
    if len(ring) > config.max_import_coordinates:
        msg = (
            f"Polygon has {len(ring)} coordinates; the import limit is "
            f"{config.max_import_coordinates}"
        )
        raise GeometryImportError(msg, code="TOO_MANY_COORDINATES", correlation_id=correlation_id)

    ring, repairs = _normalise_ring(ring)
    warnings.extend(repairs)

    geometry = {"type": "Polygon", "coordinates": [ring]}
    issue = validate_polygon_structure(geometry)
    if issue is None and signed_area(ring) < -config.intersection_epsilon:
        ring = list(reversed(ring))
        geometry = {"type": "Polygon", "coordinates": [ring]}
        warnings.append("Ring was clockwise; reversed to counter-clockwise")
    if issue is None:
        issue = check_polygon(geometry, config)
    if issue is not None:
        logger.info(
            "Import rejected | format=%s | kind=%s | message=%s | correlation_id=%s",
            fmt,
            issue.kind.value,
            issue.message,
            correlation_id,
        )
        raise PolygonValidationError(issue, stage="import", correlation_id=correlation_id)

    polygon = Polygon.from_coords(ring)
    measurement = measure_polygon(polygon)

    if measurement.area_m2 < MIN_IMPORT_AREA_M2:
        msg = (
            f"Polygon area {measurement.area_m2:.2f} m² is below the minimum of "
            f"{MIN_IMPORT_AREA_M2:.0f} m² (likely degenerate geometry)"
        )
        raise GeometryImportError(msg, code="AREA_TOO_SMALL", correlation_id=correlation_id)
    if measurement.area_m2 > config.max_import_area_m2:
        msg = (
            f"Polygon area {measurement.area_m2:,.2f} m² exceeds the import maximum of "
            f"{config.max_import_area_m2:,.0f} m²"
        )
        raise GeometryImportError(msg, code="AREA_TOO_LARGE", correlation_id=correlation_id)

    shapely_warning = shapely_validity_warning(polygon.exterior)
    if shapely_warning:
        warnings.append(shapely_warning)

    for warning in warnings:
        logger.warning("Import normalised | format=%s | %s", fmt, warning)

    result = ImportResult(
        format=fmt,
        polygon=polygon,
        measurement=measurement,
        geodesic_area_m2=geodesic_area_m2(polygon.exterior),
        bbox=compute_bbox(polygon.exterior),
        wkt=ring_to_wkt(polygon.exterior),
        warnings=tuple(warnings),
    )
    logger.info(
        "Geometry imported | format=%s | area_m2=%.2f | geodesic_area_m2=%.2f | vertices=%d | "
        "correlation_id=%s",
        fmt,
        measurement.area_m2,
        result.geodesic_area_m2,
        polygon.vertex_count,
        correlation_id,
    )
    return result


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _first_ring(geometry: dict[str, Any]) -> list[Any]:
    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, list) or not coordinates or not isinstance(coordinates[0], list):
        msg = "Could not extract polygon: missing exterior ring"
        raise GeometryImportError(msg, code="INVALID_GEOJSON")
    return list(coordinates[0])


def _normalise_ring(ring: list[Any]) -> tuple[list[Any], list[str]]:
    """Drop altitude values and close an open ring.

    Entries that are not coordinate lists are left untouched for the
    structural validator to report.
    """
    repairs: list[str] = []

    stripped: list[Any] = []
    for coord in ring:
        if isinstance(coord, list) and len(coord) > 2:
            stripped.append(coord[:2])
        else:
            stripped.append(coord)
    if stripped != ring:
        repairs.append("Altitude values removed")
    ring = stripped

    if len(ring) >= 3 and ring[0] != ring[-1]:
        first = ring[0]
        ring = [*ring, list(first) if isinstance(first, list) else first]
        repairs.append("Ring was not closed; closing point added")

    return ring, repairs
