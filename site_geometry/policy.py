"""Area size-limit policy.

A thin layer on top of the measurement engine: compares a measured
``area_m2`` against the configured maximum for the kind of record being
stored and rejects oversized areas with its own error code.  The engine's
validators know nothing about these limits.
"""

from __future__ import annotations

import enum
import logging

from site_geometry.core.config import EngineConfig
from site_geometry.core.exceptions import ValidationError
from site_geometry.models.measurement import Measurement

logger = logging.getLogger("site_geometry.policy")


class AreaKind(enum.Enum):
    """Kinds of area-bearing records."""

    SITE = "site"
    ZONE = "zone"
    PITCH = "pitch"


class AreaLimitError(ValidationError):
    """Raised when a measured area exceeds the limit for its kind.

    Attributes:
        area_kind: The kind whose limit was exceeded.
        area_m2: The measured area.
        max_area_m2: The configured limit.
    """

    default_stage = "policy"
    default_code = "AREA_TOO_LARGE"

    def __init__(self, area_kind: AreaKind, area_m2: float, max_area_m2: float) -> None:
        self.area_kind = area_kind
        self.area_m2 = area_m2
        self.max_area_m2 = max_area_m2
        super().__init__(
            f"{area_kind.value.capitalize()} area {area_m2:,.2f} m² exceeds "
            f"the maximum of {max_area_m2:,.0f} m²"
        )


def max_area_for(kind: AreaKind, config: EngineConfig) -> float:
    """Configured area limit (m²) for ``kind``."""
    limits = {
        AreaKind.SITE: config.max_site_area_m2,
        AreaKind.ZONE: config.max_zone_area_m2,
        AreaKind.PITCH: config.max_pitch_area_m2,
    }
    return limits[kind]


def check_area_limit(
    measurement: Measurement,
    kind: AreaKind,
    config: EngineConfig | None = None,
) -> None:
    """Reject ``measurement`` if its area exceeds the limit for ``kind``.

    Raises:
        AreaLimitError: If ``measurement.area_m2`` is above the limit.
    """
    config = config or EngineConfig()
    limit = max_area_for(kind, config)
    if measurement.area_m2 > limit:
        logger.info(
            "Area limit exceeded | kind=%s | area_m2=%.2f | max_area_m2=%.0f",
            kind.value,
            measurement.area_m2,
            limit,
        )
        raise AreaLimitError(kind, measurement.area_m2, limit)
