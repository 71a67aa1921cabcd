"""Data model for a drawn or generated polygon.

A Polygon carries exactly one exterior ring of ``(lon, lat)`` pairs in
WGS 84 degrees.  Holes are never used by the product, so the model does
not carry interior rings.  This is the value handed to the validation
pipeline, the measurement engine and, once accepted, the persistence
collaborator.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from site_geometry.models.contracts import PolygonGeometry

Coordinate = tuple[float, float]
Ring = tuple[Coordinate, ...]


def to_ring(coords: Sequence[Sequence[float]]) -> Ring:
    """Convert any sequence of ``[lon, lat]`` pairs to an immutable ring."""
    return tuple((float(c[0]), float(c[1])) for c in coords)


@dataclass(frozen=True, slots=True)
class Polygon:
    """A single-ring polygon in WGS 84 (EPSG:4326).

    Attributes:
        exterior: Exterior ring as a tuple of ``(lon, lat)`` tuples.  Closed
            (first == last) once it has passed structural validation.
    """

    exterior: Ring = field(default_factory=tuple)

    @classmethod
    def from_coords(cls, coords: Sequence[Sequence[float]]) -> Polygon:
        """Build a Polygon from a sequence of ``[lon, lat]`` pairs."""
        return cls(exterior=to_ring(coords))

    def to_dict(self) -> PolygonGeometry:
        """Serialise to a GeoJSON Polygon geometry."""
        return {
            "type": "Polygon",
            "coordinates": [[list(c) for c in self.exterior]],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Polygon:
        """Deserialise from a GeoJSON Polygon geometry.

        Only the exterior ring is kept.

        Raises:
            TypeError: If the payload is not a Polygon or the coordinate
                arrays have unexpected types.
        """
        geom_type = data.get("type")
        if geom_type != "Polygon":
            msg = f"expected a Polygon geometry, got {geom_type!r}"
            raise TypeError(msg)

        coords_raw = data.get("coordinates", [])
        if not isinstance(coords_raw, list | tuple) or not coords_raw:
            msg = f"coordinates must be a non-empty list, got {type(coords_raw).__name__}"
            raise TypeError(msg)

        exterior_raw = coords_raw[0]
        if not isinstance(exterior_raw, list | tuple):
            msg = f"exterior ring must be a list, got {type(exterior_raw).__name__}"
            raise TypeError(msg)

        return cls.from_coords(exterior_raw)

    @property
    def vertex_count(self) -> int:
        """Number of entries in the exterior ring, closing repeat included."""
        return len(self.exterior)

    @property
    def unique_vertices(self) -> Ring:
        """The ring without its closing repeat."""
        if len(self.exterior) > 1 and self.exterior[0] == self.exterior[-1]:
            return self.exterior[:-1]
        return self.exterior

    def reversed(self) -> Polygon:
        """Return the same polygon with the opposite winding order."""
        return Polygon(exterior=tuple(reversed(self.exterior)))
