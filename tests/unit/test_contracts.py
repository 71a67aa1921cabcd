"""Contract drift detection tests.

These tests verify that serialised model keys match the canonical payload
contracts defined in ``site_geometry.models.contracts``.  If a key is
added to or removed from a ``to_dict()`` / ``to_error_dict()`` without
updating the contract TypedDict, these tests fail.
"""

from __future__ import annotations

from typing import get_type_hints

from site_geometry.core.exceptions import GeometryError
from site_geometry.importers import import_geometry
from site_geometry.measure import measure_polygon
from site_geometry.models import Dimensions, MeasuredArea, Polygon
from site_geometry.models.contracts import (
    CenterPayload,
    DimensionsPayload,
    ErrorPayload,
    ImportResultPayload,
    MeasuredAreaPayload,
    MeasurementPayload,
    PolygonGeometry,
    RectangleBoundsPayload,
    ValidationIssuePayload,
)
from site_geometry.templates import calculate_bounds, generate_rectangle
from site_geometry.validation import ErrorKind, PolygonValidationError, ValidationIssue

SQUARE = [[0.0, 0.0], [0.001, 0.0], [0.001, 0.001], [0.0, 0.001], [0.0, 0.0]]


def _contract_keys(td: type) -> set[str]:
    """Extract the declared field names from a TypedDict class."""
    return set(get_type_hints(td).keys())


def _assert_no_drift(payload: object, td: type) -> None:
    actual = set(payload.keys())  # type: ignore[attr-defined]
    expected = _contract_keys(td)
    assert actual == expected, f"Drift detected: {actual.symmetric_difference(expected)}"


# ---------------------------------------------------------------------------
# Geometry and measurement
# ---------------------------------------------------------------------------


class TestPolygonContract:
    """Polygon.to_dict() keys must match PolygonGeometry."""

    def test_keys_match(self) -> None:
        _assert_no_drift(Polygon.from_coords(SQUARE).to_dict(), PolygonGeometry)


class TestMeasurementContract:
    """Measurement.to_dict() keys must match MeasurementPayload."""

    def test_keys_match(self) -> None:
        measurement = measure_polygon(Polygon.from_coords(SQUARE))
        _assert_no_drift(measurement.to_dict(), MeasurementPayload)


class TestMeasuredAreaContract:
    """MeasuredArea.to_dict() keys must match MeasuredAreaPayload, nested included."""

    def test_keys_match(self) -> None:
        polygon = Polygon.from_coords(SQUARE)
        payload = MeasuredArea(polygon=polygon, measurement=measure_polygon(polygon)).to_dict()
        _assert_no_drift(payload, MeasuredAreaPayload)
        _assert_no_drift(payload["geometry"], PolygonGeometry)
        _assert_no_drift(payload["measurement"], MeasurementPayload)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TestRectangleBoundsContract:
    """RectangleBounds.to_dict() keys must match RectangleBoundsPayload."""

    def test_keys_match(self) -> None:
        bounds = calculate_bounds(generate_rectangle(51.5, -0.1, Dimensions(68, 105)))
        payload = bounds.to_dict()
        _assert_no_drift(payload, RectangleBoundsPayload)
        _assert_no_drift(payload["center"], CenterPayload)
        _assert_no_drift(payload["dimensions"], DimensionsPayload)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrorContracts:
    """Error payload keys must match ValidationIssuePayload and ErrorPayload."""

    def test_issue_keys_match(self) -> None:
        issue = ValidationIssue(ErrorKind.OUT_OF_BOUNDS, "Point 1: longitude 200 is outside")
        _assert_no_drift(issue.to_error_dict(), ValidationIssuePayload)

    def test_geometry_error_keys_match(self) -> None:
        _assert_no_drift(GeometryError("x").to_error_dict(), ErrorPayload)

    def test_polygon_validation_error_keys_match(self) -> None:
        issue = ValidationIssue(ErrorKind.SELF_INTERSECTING, "Polygon self-intersects at 1 point(s)")
        _assert_no_drift(PolygonValidationError(issue).to_error_dict(), ErrorPayload)


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------


class TestImportResultContract:
    """ImportResult.to_dict() keys must match ImportResultPayload."""

    def test_keys_match(self) -> None:
        content = (
            '{"type": "Polygon", "coordinates": '
            "[[[-6.26, 53.34], [-6.2585, 53.34], [-6.2585, 53.3409], "
            "[-6.26, 53.3409], [-6.26, 53.34]]]}"
        )
        _assert_no_drift(import_geometry(content).to_dict(), ImportResultPayload)
