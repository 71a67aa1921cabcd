"""Data model for an imported GeoJSON / KML geometry.

An ImportResult is the output of ``import_geometry``: the accepted
polygon, the engine's measurement, and cross-check values computed with
independent libraries (geodesic area, WKT) for the caller to store or
display.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from site_geometry.models.contracts import ImportResultPayload
from site_geometry.models.measurement import Measurement
from site_geometry.models.polygon import Polygon


@dataclass(frozen=True, slots=True)
class ImportResult:
    """A validated and measured imported polygon.

    Attributes:
        format: Source format, ``"geojson"`` or ``"kml"``.
        polygon: The accepted polygon (closed, counter-clockwise).
        measurement: Engine measurement of ``polygon``.
        geodesic_area_m2: Ellipsoidal area on WGS 84, for comparison with
            the engine's planar approximation.
        bbox: ``(min_lon, min_lat, max_lon, max_lat)``.
        wkt: Well-Known Text of ``polygon`` for spatial databases.
        warnings: Normalisation steps applied and anything ignored.
    """

    format: str
    polygon: Polygon
    measurement: Measurement
    geodesic_area_m2: float = 0.0
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    wkt: str = ""
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> ImportResultPayload:
        return {
            "format": self.format,
            "geometry": self.polygon.to_dict(),
            "measurement": self.measurement.to_dict(),
            "geodesic_area_m2": self.geodesic_area_m2,
            "bbox": list(self.bbox),
            "wkt": self.wkt,
            "warnings": list(self.warnings),
        }
