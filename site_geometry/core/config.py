"""Engine configuration loaded from environment variables.

All configuration values have sensible defaults.  The hosting service
loads one ``EngineConfig`` at startup and passes it explicitly to the
engine's entry points; nothing in the engine reads the environment on
its own.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range.  This prevents latent runtime
    errors by catching bad configuration at startup.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from site_geometry.core.constants import (
    DEFAULT_GRID_SIZE_DEG,
    DEFAULT_INTERSECTION_EPSILON,
    DEFAULT_MAX_IMPORT_AREA_M2,
    DEFAULT_MAX_IMPORT_COORDINATES,
    DEFAULT_MAX_PITCH_AREA_M2,
    DEFAULT_MAX_RING_VERTICES,
    DEFAULT_MAX_SITE_AREA_M2,
    DEFAULT_MAX_ZONE_AREA_M2,
    MIN_RING_POINTS,
)
from site_geometry.core.exceptions import GeometryError


class ConfigValidationError(GeometryError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    category = "configuration"
    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable engine configuration.

    Attributes:
        max_ring_vertices: Longest ring accepted before self-intersection
            detection runs (bounds the O(n^2) check).
        intersection_epsilon: Cross-product magnitude treated as zero by the
            intersection and winding checks (square degrees).
        grid_size_deg: Default snap lattice spacing for the editor.
        max_site_area_m2: Area limit for site boundaries.
        max_zone_area_m2: Area limit for zones.
        max_pitch_area_m2: Area limit for generated pitches.
        max_import_area_m2: Area limit for imported GeoJSON/KML geometry.
        max_import_coordinates: Coordinate cap for imported rings.
        template_catalog_path: Optional JSON file replacing the built-in
            template table (empty means built-in).
    """

    max_ring_vertices: int = DEFAULT_MAX_RING_VERTICES
    intersection_epsilon: float = DEFAULT_INTERSECTION_EPSILON
    grid_size_deg: float = DEFAULT_GRID_SIZE_DEG
    max_site_area_m2: float = DEFAULT_MAX_SITE_AREA_M2
    max_zone_area_m2: float = DEFAULT_MAX_ZONE_AREA_M2
    max_pitch_area_m2: float = DEFAULT_MAX_PITCH_AREA_M2
    max_import_area_m2: float = DEFAULT_MAX_IMPORT_AREA_M2
    max_import_coordinates: int = DEFAULT_MAX_IMPORT_COORDINATES
    template_catalog_path: str = ""

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``GEOMETRY_MAX_RING_VERTICES=abc``).
        """
        config = cls(
            max_ring_vertices=int(
                os.getenv("GEOMETRY_MAX_RING_VERTICES", str(DEFAULT_MAX_RING_VERTICES))
            ),
            intersection_epsilon=float(
                os.getenv("GEOMETRY_INTERSECTION_EPSILON", str(DEFAULT_INTERSECTION_EPSILON))
            ),
            grid_size_deg=float(os.getenv("GEOMETRY_GRID_SIZE_DEG", str(DEFAULT_GRID_SIZE_DEG))),
            max_site_area_m2=float(
                os.getenv("GEOMETRY_MAX_SITE_AREA_M2", str(DEFAULT_MAX_SITE_AREA_M2))
            ),
            max_zone_area_m2=float(
                os.getenv("GEOMETRY_MAX_ZONE_AREA_M2", str(DEFAULT_MAX_ZONE_AREA_M2))
            ),
            max_pitch_area_m2=float(
                os.getenv("GEOMETRY_MAX_PITCH_AREA_M2", str(DEFAULT_MAX_PITCH_AREA_M2))
            ),
            max_import_area_m2=float(
                os.getenv("GEOMETRY_MAX_IMPORT_AREA_M2", str(DEFAULT_MAX_IMPORT_AREA_M2))
            ),
            max_import_coordinates=int(
                os.getenv("GEOMETRY_MAX_IMPORT_COORDINATES", str(DEFAULT_MAX_IMPORT_COORDINATES))
            ),
            template_catalog_path=os.getenv("TEMPLATE_CATALOG_PATH", ""),
        )
        _validate(config)
        return config


def _validate(config: EngineConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.max_ring_vertices < MIN_RING_POINTS:
        raise ConfigValidationError(
            "GEOMETRY_MAX_RING_VERTICES",
            config.max_ring_vertices,
            f"must be >= {MIN_RING_POINTS}",
        )

    if not math.isfinite(config.intersection_epsilon) or config.intersection_epsilon < 0:
        raise ConfigValidationError(
            "GEOMETRY_INTERSECTION_EPSILON",
            config.intersection_epsilon,
            "must be a finite value >= 0 (square degrees)",
        )

    if not math.isfinite(config.grid_size_deg) or config.grid_size_deg <= 0:
        raise ConfigValidationError(
            "GEOMETRY_GRID_SIZE_DEG",
            config.grid_size_deg,
            "must be > 0 (degrees)",
        )

    for key, value in (
        ("GEOMETRY_MAX_SITE_AREA_M2", config.max_site_area_m2),
        ("GEOMETRY_MAX_ZONE_AREA_M2", config.max_zone_area_m2),
        ("GEOMETRY_MAX_PITCH_AREA_M2", config.max_pitch_area_m2),
        ("GEOMETRY_MAX_IMPORT_AREA_M2", config.max_import_area_m2),
    ):
        if value <= 0:
            raise ConfigValidationError(key, value, "must be > 0 (square metres)")

    if config.max_import_coordinates < MIN_RING_POINTS:
        raise ConfigValidationError(
            "GEOMETRY_MAX_IMPORT_COORDINATES",
            config.max_import_coordinates,
            f"must be >= {MIN_RING_POINTS}",
        )
