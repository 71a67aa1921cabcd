"""Tests for the advisory and authoritative entry points."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from site_geometry.core.config import EngineConfig
from site_geometry.models import MeasuredArea, Polygon
from site_geometry.policy import AreaKind, AreaLimitError
from site_geometry.service import check_polygon, require_valid_polygon, validate_and_measure
from site_geometry.validation import ErrorKind, PolygonValidationError

CLOCKWISE = {
    "type": "Polygon",
    "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]],
}


class TestCheckPolygon:
    """Advisory path: returns a value, never raises."""

    def test_valid(self, dublin_site: dict[str, Any]) -> None:
        assert check_polygon(dublin_site) is None

    def test_invalid_returns_issue(self) -> None:
        issue = check_polygon(CLOCKWISE)
        assert issue is not None
        assert issue.to_error_dict() == {
            "kind": "INVALID_WINDING",
            "message": issue.message,
        }

    @pytest.mark.parametrize("geometry", [None, 42, "POLYGON((0 0))", {}, []])
    def test_garbage_never_raises(self, geometry: Any) -> None:
        issue = check_polygon(geometry)
        assert issue is not None
        assert issue.kind is ErrorKind.INVALID_POLYGON


class TestRequireValidPolygon:
    """Authoritative path: raises the same issue the advisory path returns."""

    def test_returns_polygon(self, dublin_site: dict[str, Any]) -> None:
        polygon = require_valid_polygon(dublin_site)
        assert isinstance(polygon, Polygon)
        assert polygon.vertex_count == 5
        assert polygon.exterior[0] == (-6.26, 53.34)

    def test_raises_with_correlation_id(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            caplog.at_level(logging.INFO, logger="site_geometry.service"),
            pytest.raises(PolygonValidationError) as exc_info,
        ):
            require_valid_polygon(CLOCKWISE, correlation_id="req-42")

        err = exc_info.value
        assert err.kind is ErrorKind.INVALID_WINDING
        assert err.code == "INVALID_WINDING"
        assert err.stage == "validation"
        assert err.correlation_id == "req-42"
        assert any(
            "Polygon rejected" in r.message and "req-42" in r.message for r in caplog.records
        )

    def test_error_dict_forwards_kind_and_message(self) -> None:
        with pytest.raises(PolygonValidationError) as exc_info:
            require_valid_polygon(CLOCKWISE)
        payload = exc_info.value.to_error_dict()
        assert payload["code"] == exc_info.value.issue.kind.value
        assert payload["message"] == exc_info.value.issue.message
        assert payload["category"] == "validation"


class TestValidateAndMeasure:
    """Validation, measurement and optional area policy in one call."""

    def test_measured_area(self, dublin_site: dict[str, Any]) -> None:
        result = validate_and_measure(dublin_site)
        assert isinstance(result, MeasuredArea)
        assert result.area_kind == ""
        assert 9_000 < result.measurement.area_m2 < 11_000

    def test_area_kind_recorded(self, dublin_site: dict[str, Any]) -> None:
        result = validate_and_measure(dublin_site, area_kind=AreaKind.ZONE)
        assert result.area_kind == "zone"
        payload = result.to_dict()
        assert payload["area_kind"] == "zone"
        assert payload["geometry"] == result.polygon.to_dict()

    def test_invalid_geometry_raises_before_measuring(self) -> None:
        with pytest.raises(PolygonValidationError):
            validate_and_measure(CLOCKWISE)

    def test_area_limit_applied(self, unit_square: dict[str, Any]) -> None:
        """A one-degree square (~12,400 km²) exceeds every default limit."""
        with pytest.raises(AreaLimitError) as exc_info:
            validate_and_measure(unit_square, area_kind=AreaKind.SITE)
        assert exc_info.value.area_kind is AreaKind.SITE

    def test_no_policy_without_kind(self, unit_square: dict[str, Any]) -> None:
        result = validate_and_measure(unit_square)
        assert result.measurement.area_m2 > 10_000_000

    def test_configured_limit(self, dublin_site: dict[str, Any]) -> None:
        config = EngineConfig(max_pitch_area_m2=1_000.0)
        with pytest.raises(AreaLimitError, match="Pitch area"):
            validate_and_measure(dublin_site, area_kind=AreaKind.PITCH, config=config)

    def test_logs_acceptance(
        self, dublin_site: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="site_geometry.service"):
            validate_and_measure(dublin_site, correlation_id="req-7")
        assert any("Polygon accepted" in r.message for r in caplog.records)
