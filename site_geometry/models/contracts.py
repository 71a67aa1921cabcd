"""Canonical payload contracts for the engine's boundaries.

Every payload that crosses from the engine to a collaborator (persistence
layer, editor UI, importer caller) is defined here as a ``TypedDict``.
This module is the single source of truth for field names; the
``to_dict()`` methods on the value models produce exactly these shapes.
"""

from __future__ import annotations

from typing import TypedDict

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


class PolygonGeometry(TypedDict):
    """GeoJSON Polygon as produced by ``Polygon.to_dict()``."""

    type: str
    coordinates: list[list[list[float]]]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationIssuePayload(TypedDict):
    """``ValidationIssue.to_error_dict()``: the advisory error shape."""

    kind: str
    message: str


class ErrorPayload(TypedDict):
    """``GeometryError.to_error_dict()``: the raising error shape."""

    category: str
    code: str
    stage: str
    message: str
    correlation_id: str


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------


class MeasurementPayload(TypedDict):
    """``Measurement.to_dict()``: attached to stored records."""

    area_m2: float
    area_ft2: float
    perimeter_m: float
    perimeter_ft: float
    centroid: list[float]


class MeasuredAreaPayload(TypedDict):
    """``MeasuredArea.to_dict()``: output of the authoritative entry point."""

    geometry: PolygonGeometry
    measurement: MeasurementPayload
    area_kind: str


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class DimensionsPayload(TypedDict):
    width_m: float
    length_m: float


class CenterPayload(TypedDict):
    lat: float
    lon: float


class RectangleBoundsPayload(TypedDict):
    """``RectangleBounds.to_dict()``: output of ``calculate_bounds``."""

    center: CenterPayload
    dimensions: DimensionsPayload


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------


class ImportResultPayload(TypedDict):
    """``ImportResult.to_dict()``: output of ``import_geometry``."""

    format: str
    geometry: PolygonGeometry
    measurement: MeasurementPayload
    geodesic_area_m2: float
    bbox: list[float]
    wkt: str
    warnings: list[str]
