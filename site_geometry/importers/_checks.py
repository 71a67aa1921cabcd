"""Independent cross-checks for imported rings (pyproj, shapely).

These never decide acceptance; the engine's validator and measurement
do.  They produce the geodesic area and WKT carried on the import result
and surface disagreements as warnings.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger("site_geometry.importers")


def geodesic_area_m2(ring: Sequence[Sequence[float]]) -> float:
    """Area of the ring on the WGS 84 ellipsoid in square metres.

    Winding-order agnostic.
    """
    from pyproj import Geod

    geod = Geod(ellps="WGS84")
    lons = [c[0] for c in ring]
    lats = [c[1] for c in ring]
    area, _perimeter = geod.polygon_area_perimeter(lons, lats)
    return abs(area)


def shapely_validity_warning(ring: Sequence[Sequence[float]]) -> str | None:
    """Return a warning if shapely considers the ring invalid, else ``None``."""
    from shapely.geometry import Polygon
    from shapely.validation import explain_validity

    poly = Polygon([(c[0], c[1]) for c in ring])
    if poly.is_valid:
        return None
    reason = explain_validity(poly)
    logger.warning("Shapely flags imported ring as invalid | reason=%s", reason)
    return f"Geometry library reports: {reason}"


def ring_to_wkt(ring: Sequence[Sequence[float]]) -> str:
    """Well-Known Text of the ring as a POLYGON."""
    from shapely.geometry import Polygon

    return Polygon([(c[0], c[1]) for c in ring]).wkt
