"""Boundary entry points over the single engine implementation.

The editor UI and the persistence layer call the same code through two
doors:

- ``check_polygon`` (advisory): fast inline feedback, returns the issue
  value and never raises.  Its result is a UX hint only.
- ``require_valid_polygon`` / ``validate_and_measure`` (authoritative):
  run before any area-bearing record is created or updated.  A rejection
  raises ``PolygonValidationError`` whose ``kind`` and ``message`` the
  boundary layer forwards to the client verbatim.

Both doors run ``validate_polygon`` with the same configuration, so they
cannot drift apart.
"""

from __future__ import annotations

import logging
from typing import Any

from site_geometry.core.config import EngineConfig
from site_geometry.measure import measure_polygon
from site_geometry.models.measurement import MeasuredArea
from site_geometry.models.polygon import Polygon
from site_geometry.policy import AreaKind, check_area_limit
from site_geometry.validation import (
    PolygonValidationError,
    ValidationIssue,
    exterior_ring,
    validate_polygon,
)

logger = logging.getLogger("site_geometry.service")


def check_polygon(geometry: Any, config: EngineConfig | None = None) -> ValidationIssue | None:
    """Advisory validation for the editor.

    Returns:
        ``None`` if the geometry would be accepted, otherwise the first
        failing stage's issue.
    """
    config = config or EngineConfig()
    return validate_polygon(
        geometry,
        max_vertices=config.max_ring_vertices,
        epsilon=config.intersection_epsilon,
    )


def require_valid_polygon(
    geometry: Any,
    config: EngineConfig | None = None,
    *,
    correlation_id: str = "",
) -> Polygon:
    """Authoritative validation before persistence.

    Args:
        geometry: GeoJSON-shaped Polygon mapping or a ``Polygon`` model.
        config: Engine limits (defaults if ``None``).
        correlation_id: Request identifier copied onto any raised error.

    Returns:
        The accepted geometry as an immutable ``Polygon``.

    Raises:
        PolygonValidationError: Carrying the first failing stage's issue.
    """
    issue = check_polygon(geometry, config)
    if issue is not None:
        logger.info(
            "Polygon rejected | kind=%s | message=%s | correlation_id=%s",
            issue.kind.value,
            issue.message,
            correlation_id,
        )
        raise PolygonValidationError(issue, correlation_id=correlation_id)

    if isinstance(geometry, Polygon):
        return geometry
    return Polygon.from_coords(exterior_ring(geometry))


def validate_and_measure(
    geometry: Any,
    *,
    area_kind: AreaKind | None = None,
    config: EngineConfig | None = None,
    correlation_id: str = "",
) -> MeasuredArea:
    """Validate, measure and (optionally) apply the area-limit policy.

    Args:
        geometry: GeoJSON-shaped Polygon mapping or a ``Polygon`` model.
        area_kind: If given, the size-limit policy for this kind is applied.
        config: Engine limits (defaults if ``None``).
        correlation_id: Request identifier copied onto any raised error.

    Returns:
        A ``MeasuredArea`` ready to attach to the stored record.

    Raises:
        PolygonValidationError: If the geometry is rejected.
        AreaLimitError: If the area exceeds the limit for ``area_kind``.
    """
    config = config or EngineConfig()
    polygon = require_valid_polygon(geometry, config, correlation_id=correlation_id)
    measurement = measure_polygon(polygon)

    if area_kind is not None:
        check_area_limit(measurement, area_kind, config)

    logger.info(
        "Polygon accepted | area_m2=%.2f | perimeter_m=%.2f | vertices=%d | kind=%s | "
        "correlation_id=%s",
        measurement.area_m2,
        measurement.perimeter_m,
        polygon.vertex_count,
        area_kind.value if area_kind else "",
        correlation_id,
    )

    return MeasuredArea(
        polygon=polygon,
        measurement=measurement,
        area_kind=area_kind.value if area_kind else "",
    )
