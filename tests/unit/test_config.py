"""Tests for engine configuration.

Covers:
- Default values
- Loading from environment variables
- Type coercion (string env vars → numeric fields)
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from site_geometry.core.config import ConfigValidationError, EngineConfig


class TestEngineConfigDefaults:
    """Verify default configuration values."""

    def test_default_vertex_cap(self) -> None:
        cfg = EngineConfig()
        assert cfg.max_ring_vertices == 500

    def test_default_epsilon(self) -> None:
        cfg = EngineConfig()
        assert cfg.intersection_epsilon == 1e-12

    def test_default_grid_size(self) -> None:
        cfg = EngineConfig()
        assert cfg.grid_size_deg == 0.00001

    def test_default_area_limits(self) -> None:
        cfg = EngineConfig()
        assert cfg.max_site_area_m2 == 10_000_000.0
        assert cfg.max_zone_area_m2 == 1_000_000.0
        assert cfg.max_pitch_area_m2 == 1_000_000.0
        assert cfg.max_import_area_m2 == 10_000_000.0

    def test_default_import_coordinate_cap(self) -> None:
        cfg = EngineConfig()
        assert cfg.max_import_coordinates == 50_000

    def test_default_catalog_path(self) -> None:
        cfg = EngineConfig()
        assert cfg.template_catalog_path == ""


class TestEngineConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        """All env vars are read and coerced to correct types."""
        env = {
            "GEOMETRY_MAX_RING_VERTICES": "1000",
            "GEOMETRY_INTERSECTION_EPSILON": "1e-10",
            "GEOMETRY_GRID_SIZE_DEG": "0.0001",
            "GEOMETRY_MAX_SITE_AREA_M2": "5000000",
            "GEOMETRY_MAX_ZONE_AREA_M2": "250000",
            "GEOMETRY_MAX_PITCH_AREA_M2": "20000",
            "GEOMETRY_MAX_IMPORT_AREA_M2": "2000000",
            "GEOMETRY_MAX_IMPORT_COORDINATES": "10000",
            "TEMPLATE_CATALOG_PATH": "/etc/site-geometry/templates.json",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = EngineConfig.from_env()

        assert cfg.max_ring_vertices == 1000
        assert cfg.intersection_epsilon == 1e-10
        assert cfg.grid_size_deg == 0.0001
        assert cfg.max_site_area_m2 == 5_000_000.0
        assert cfg.max_zone_area_m2 == 250_000.0
        assert cfg.max_pitch_area_m2 == 20_000.0
        assert cfg.max_import_area_m2 == 2_000_000.0
        assert cfg.max_import_coordinates == 10_000
        assert cfg.template_catalog_path == "/etc/site-geometry/templates.json"

    def test_defaults_when_env_missing(self) -> None:
        """Missing environment variables fall back to defaults."""
        with patch.dict(os.environ, {}, clear=True):
            cfg = EngineConfig.from_env()

        assert cfg == EngineConfig()

    def test_frozen_immutability(self) -> None:
        """EngineConfig is frozen (immutable)."""
        cfg = EngineConfig()
        with pytest.raises(AttributeError):
            cfg.max_ring_vertices = 10  # type: ignore[misc]


class TestEngineConfigValidation:
    """Fail-fast range validation in from_env."""

    def test_vertex_cap_below_minimum_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOMETRY_MAX_RING_VERTICES": "3"}, clear=True),
            pytest.raises(ConfigValidationError, match="GEOMETRY_MAX_RING_VERTICES"),
        ):
            EngineConfig.from_env()

    def test_vertex_cap_minimum_accepted(self) -> None:
        with patch.dict(os.environ, {"GEOMETRY_MAX_RING_VERTICES": "4"}, clear=True):
            cfg = EngineConfig.from_env()
        assert cfg.max_ring_vertices == 4

    def test_negative_epsilon_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOMETRY_INTERSECTION_EPSILON": "-1e-12"}, clear=True),
            pytest.raises(ConfigValidationError, match="GEOMETRY_INTERSECTION_EPSILON"),
        ):
            EngineConfig.from_env()

    def test_zero_epsilon_accepted(self) -> None:
        """Exact arithmetic (no tolerance) is allowed."""
        with patch.dict(os.environ, {"GEOMETRY_INTERSECTION_EPSILON": "0"}, clear=True):
            cfg = EngineConfig.from_env()
        assert cfg.intersection_epsilon == 0.0

    def test_nan_epsilon_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOMETRY_INTERSECTION_EPSILON": "nan"}, clear=True),
            pytest.raises(ConfigValidationError, match="finite"),
        ):
            EngineConfig.from_env()

    def test_zero_grid_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOMETRY_GRID_SIZE_DEG": "0"}, clear=True),
            pytest.raises(ConfigValidationError, match="must be > 0"),
        ):
            EngineConfig.from_env()

    @pytest.mark.parametrize(
        "key",
        [
            "GEOMETRY_MAX_SITE_AREA_M2",
            "GEOMETRY_MAX_ZONE_AREA_M2",
            "GEOMETRY_MAX_PITCH_AREA_M2",
            "GEOMETRY_MAX_IMPORT_AREA_M2",
        ],
    )
    def test_non_positive_area_limit_rejected(self, key: str) -> None:
        with (
            patch.dict(os.environ, {key: "0"}, clear=True),
            pytest.raises(ConfigValidationError, match=key),
        ):
            EngineConfig.from_env()

    def test_import_coordinate_cap_below_minimum_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"GEOMETRY_MAX_IMPORT_COORDINATES": "2"}, clear=True),
            pytest.raises(ConfigValidationError, match="GEOMETRY_MAX_IMPORT_COORDINATES"),
        ):
            EngineConfig.from_env()

    def test_non_numeric_env_raises_value_error(self) -> None:
        """Non-numeric string for an int field → ValueError."""
        with (
            patch.dict(os.environ, {"GEOMETRY_MAX_RING_VERTICES": "abc"}, clear=True),
            pytest.raises(ValueError),
        ):
            EngineConfig.from_env()

    def test_error_contains_key_and_value(self) -> None:
        """ConfigValidationError includes key and value attributes."""
        with (
            patch.dict(os.environ, {"GEOMETRY_MAX_ZONE_AREA_M2": "-5"}, clear=True),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            EngineConfig.from_env()

        assert exc_info.value.key == "GEOMETRY_MAX_ZONE_AREA_M2"
        assert exc_info.value.value == -5.0
        assert "square metres" in str(exc_info.value)
