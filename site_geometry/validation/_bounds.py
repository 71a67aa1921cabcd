"""WGS 84 bounds validation and parent-area containment."""

from __future__ import annotations

from collections.abc import Sequence

from site_geometry.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from site_geometry.validation._issues import ErrorKind, ValidationIssue


def validate_wgs84_bounds(ring: Sequence[Sequence[float]]) -> ValidationIssue | None:
    """Check every vertex lies within longitude [-180, 180], latitude [-90, 90].

    Returns:
        ``None`` or an ``OUT_OF_BOUNDS`` issue naming the first offending
        point index and the axis whose range was exceeded.
    """
    for idx, (lon, lat) in enumerate(ring):
        if not (MIN_LONGITUDE <= lon <= MAX_LONGITUDE):
            return ValidationIssue(
                ErrorKind.OUT_OF_BOUNDS,
                f"Point {idx}: longitude {lon} is outside WGS84 range "
                f"[{MIN_LONGITUDE:g}, {MAX_LONGITUDE:g}]",
            )
        if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
            return ValidationIssue(
                ErrorKind.OUT_OF_BOUNDS,
                f"Point {idx}: latitude {lat} is outside WGS84 range "
                f"[{MIN_LATITUDE:g}, {MAX_LATITUDE:g}]",
            )
    return None


def validate_fits_within(
    child: Sequence[Sequence[float]],
    parent: Sequence[Sequence[float]],
) -> ValidationIssue | None:
    """Check that every vertex of ``child`` lies inside ``parent``'s bounding box.

    Used to keep a pitch or zone within its site boundary.  This is a
    bounding-box test, not a point-in-polygon test.

    Returns:
        ``None`` or an ``OUT_OF_BOUNDS`` issue naming the first child
        vertex outside the parent extent.
    """
    lons = [c[0] for c in parent]
    lats = [c[1] for c in parent]
    min_lon, max_lon = min(lons), max(lons)
    min_lat, max_lat = min(lats), max(lats)

    for idx, (lon, lat) in enumerate(child):
        if lon < min_lon or lon > max_lon or lat < min_lat or lat > max_lat:
            return ValidationIssue(
                ErrorKind.OUT_OF_BOUNDS,
                f"Point {idx} ({lon}, {lat}) is outside parent bounds "
                f"[lon: {min_lon} to {max_lon}, lat: {min_lat} to {max_lat}]",
            )
    return None
