"""Data model for the derived measurements of an accepted polygon.

A Measurement is never persisted on its own: it is attached to the record
that owns the ring and recomputed whenever the ring changes.

Units are explicit in every field name (square metres, square feet,
metres, feet, degrees).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from site_geometry.models.contracts import MeasuredAreaPayload, MeasurementPayload
from site_geometry.models.polygon import Coordinate, Polygon


@dataclass(frozen=True, slots=True)
class Measurement:
    """Area, perimeter and centroid of a valid polygon.

    Attributes:
        area_m2: Area in square metres, rounded to 2 decimals (half-up).
        area_ft2: Area in square feet, rounded to 2 decimals (half-up).
        perimeter_m: Perimeter in metres, rounded to 2 decimals (half-up).
        perimeter_ft: Perimeter in feet, rounded to 2 decimals (half-up).
        centroid: Area-weighted centroid as ``(lon, lat)`` degrees.
    """

    area_m2: float = 0.0
    area_ft2: float = 0.0
    perimeter_m: float = 0.0
    perimeter_ft: float = 0.0
    centroid: Coordinate = (0.0, 0.0)

    def to_dict(self) -> MeasurementPayload:
        """Serialise to the payload attached to stored records."""
        return {
            "area_m2": self.area_m2,
            "area_ft2": self.area_ft2,
            "perimeter_m": self.perimeter_m,
            "perimeter_ft": self.perimeter_ft,
            "centroid": list(self.centroid),
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Measurement:
        """Deserialise from a stored payload.

        Raises:
            TypeError: If ``centroid`` is not a two-element list.
        """
        centroid_raw = data.get("centroid", [0.0, 0.0])
        if not isinstance(centroid_raw, list | tuple) or len(centroid_raw) != 2:
            msg = f"centroid must be a [lon, lat] list, got {centroid_raw!r}"
            raise TypeError(msg)

        return cls(
            area_m2=float(data.get("area_m2", 0.0)),  # type: ignore[arg-type]
            area_ft2=float(data.get("area_ft2", 0.0)),  # type: ignore[arg-type]
            perimeter_m=float(data.get("perimeter_m", 0.0)),  # type: ignore[arg-type]
            perimeter_ft=float(data.get("perimeter_ft", 0.0)),  # type: ignore[arg-type]
            centroid=(float(centroid_raw[0]), float(centroid_raw[1])),
        )


@dataclass(frozen=True, slots=True)
class MeasuredArea:
    """An accepted polygon together with its measurements.

    Output of the authoritative entry point; this is what the persistence
    collaborator stores.

    Attributes:
        polygon: The accepted polygon (validated, counter-clockwise).
        measurement: Derived area, perimeter and centroid.
        area_kind: Area kind the size-limit policy was checked against,
            empty when no policy was applied.
    """

    polygon: Polygon
    measurement: Measurement = field(default_factory=Measurement)
    area_kind: str = ""

    def to_dict(self) -> MeasuredAreaPayload:
        return {
            "geometry": self.polygon.to_dict(),
            "measurement": self.measurement.to_dict(),
            "area_kind": self.area_kind,
        }
