"""Editor snapping helpers.

Used only while a ring is being drawn; independent of validation and
measurement.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from site_geometry.core.constants import (
    CARDINAL_ANGLES,
    DEFAULT_CARDINAL_SNAP_DEG,
    DEFAULT_GRID_SIZE_DEG,
)
from site_geometry.models.polygon import Coordinate, Ring


def snap_to_grid(point: Sequence[float], grid_size: float = DEFAULT_GRID_SIZE_DEG) -> Coordinate:
    """Round each axis of ``(lon, lat)`` to the nearest multiple of ``grid_size``.

    Ties round up (towards positive infinity) on both axes, matching the
    editor's rounding.  Idempotent: snapping an already-snapped point
    returns it unchanged.

    Raises:
        ValueError: If ``grid_size`` is not positive.
    """
    if not grid_size > 0:
        msg = f"grid_size must be > 0, got {grid_size!r}"
        raise ValueError(msg)
    return (
        math.floor(point[0] / grid_size + 0.5) * grid_size,
        math.floor(point[1] / grid_size + 0.5) * grid_size,
    )


def snap_ring_to_grid(
    ring: Sequence[Sequence[float]],
    grid_size: float = DEFAULT_GRID_SIZE_DEG,
) -> Ring:
    """Snap every vertex of a ring; the closing repeat stays equal to the first."""
    return tuple(snap_to_grid(point, grid_size) for point in ring)


def snap_to_cardinal(angle: float, threshold: float = DEFAULT_CARDINAL_SNAP_DEG) -> float:
    """Snap a bearing within ``threshold`` degrees of 0/90/180/270/360.

    Returns the matching cardinal (360 folds to 0), or ``angle`` unchanged.
    """
    for cardinal in CARDINAL_ANGLES:
        if abs(angle - cardinal) < threshold:
            return cardinal % 360
    return angle
