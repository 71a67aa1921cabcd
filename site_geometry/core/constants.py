"""Shared geometry constants (single source of truth).

Centralises the coordinate bounds, unit conversions and default limits
used by the validators, the measurement engine and the template
generator, so both entry points of the engine read the same numbers.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0
MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0

# ---------------------------------------------------------------------------
# Ring structure
# ---------------------------------------------------------------------------

MIN_RING_POINTS: int = 4
"""3 unique vertices + 1 closing repeat."""

DEFAULT_MAX_RING_VERTICES: int = 500
"""Upper bound on ring length before the O(n^2) intersection check runs."""

DEFAULT_INTERSECTION_EPSILON: float = 1e-12
"""Cross products (deg^2) at or below this magnitude are treated as zero."""

# ---------------------------------------------------------------------------
# Unit conversions (equirectangular approximation)
# ---------------------------------------------------------------------------

METRES_PER_DEGREE: float = 111_320.0
"""Metres per degree of latitude (and of longitude at the equator)."""

SQ_FEET_PER_SQ_METRE: float = 10.7639
FEET_PER_METRE: float = 3.28084

MEASUREMENT_DECIMALS: int = 2

# ---------------------------------------------------------------------------
# Editing
# ---------------------------------------------------------------------------

DEFAULT_GRID_SIZE_DEG: float = 0.00001
"""Snap lattice spacing in degrees (about 1.1 m)."""

DEFAULT_CARDINAL_SNAP_DEG: float = 5.0
CARDINAL_ANGLES: tuple[float, ...] = (0.0, 90.0, 180.0, 270.0, 360.0)

# ---------------------------------------------------------------------------
# Area limits (square metres)
# ---------------------------------------------------------------------------

DEFAULT_MAX_SITE_AREA_M2: float = 10_000_000.0
DEFAULT_MAX_ZONE_AREA_M2: float = 1_000_000.0
DEFAULT_MAX_PITCH_AREA_M2: float = 1_000_000.0

# ---------------------------------------------------------------------------
# Geometry import
# ---------------------------------------------------------------------------

DEFAULT_MAX_IMPORT_AREA_M2: float = 10_000_000.0
MIN_IMPORT_AREA_M2: float = 1.0
DEFAULT_MAX_IMPORT_COORDINATES: int = 50_000

KML_NAMESPACE: str = "http://www.opengis.net/kml/2.2"
