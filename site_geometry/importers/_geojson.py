"""GeoJSON polygon extraction.

Accepts a FeatureCollection, a single Feature, or a bare geometry, and
returns every Polygon it contains (MultiPolygon members included) as a
GeoJSON Polygon mapping.  Coordinates are passed through untouched; the
engine's structural validator judges them.
"""

from __future__ import annotations

import json
from typing import Any

from site_geometry.importers._errors import GeometryImportError

_POLYGON_TYPES = frozenset({"Polygon", "MultiPolygon"})


def extract_geojson_polygons(content: str) -> list[dict[str, Any]]:
    """Parse GeoJSON text and return its polygons in document order.

    Raises:
        GeometryImportError: If the text is not JSON or holds no polygons.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        msg = f"Invalid GeoJSON: {exc}"
        raise GeometryImportError(msg, code="INVALID_GEOJSON") from exc

    polygons: list[dict[str, Any]] = []
    for geometry in _geometries(data):
        polygons.extend(_explode(geometry))

    if not polygons:
        msg = "Invalid GeoJSON: no valid polygon features found"
        raise GeometryImportError(msg, code="INVALID_GEOJSON")
    return polygons


def _geometries(data: Any) -> list[dict[str, Any]]:
    """Polygonal geometries of a FeatureCollection, Feature or bare geometry."""
    if not isinstance(data, dict):
        return []

    geo_type = data.get("type")
    if geo_type == "FeatureCollection":
        features = data.get("features")
        if not isinstance(features, list):
            return []
        return [g for f in features for g in _geometries(f)]

    if geo_type == "Feature":
        geometry = data.get("geometry")
        if isinstance(geometry, dict) and geometry.get("type") in _POLYGON_TYPES:
            return [geometry]
        return []

    if geo_type in _POLYGON_TYPES and isinstance(data.get("coordinates"), list):
        return [data]
    return []


def _explode(geometry: dict[str, Any]) -> list[dict[str, Any]]:
    if geometry.get("type") == "Polygon":
        return [{"type": "Polygon", "coordinates": geometry.get("coordinates")}]
    return [
        {"type": "Polygon", "coordinates": member}
        for member in geometry.get("coordinates") or []
        if isinstance(member, list)
    ]
