"""Template reference data and rectangle dimension models.

A Template is static, read-only reference data (named pitch / zone sizes)
loaded once at startup.  It uses pydantic so that catalogs read from JSON
are validated at load time; the dimension types used by the generator are
plain frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from site_geometry.models.contracts import DimensionsPayload, RectangleBoundsPayload


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Physical rectangle size in metres.

    Attributes:
        width_m: Extent across the length axis (east-west at rotation 0).
        length_m: Extent along the length axis (north-south at rotation 0).
    """

    width_m: float
    length_m: float

    def to_dict(self) -> DimensionsPayload:
        return {"width_m": self.width_m, "length_m": self.length_m}


@dataclass(frozen=True, slots=True)
class RectangleBounds:
    """Approximate centre and axis-aligned size recovered from a polygon.

    Lossy: for a rotated rectangle the dimensions describe its bounding
    box, not its true width and length.

    Attributes:
        center_lat: Latitude of the bounding-box midpoint.
        center_lon: Longitude of the bounding-box midpoint.
        dimensions: Bounding-box width / length in metres.
    """

    center_lat: float
    center_lon: float
    dimensions: Dimensions

    def to_dict(self) -> RectangleBoundsPayload:
        return {
            "center": {"lat": self.center_lat, "lon": self.center_lon},
            "dimensions": self.dimensions.to_dict(),
        }


class Template(BaseModel):
    """A named rectangular layout template.

    Attributes:
        id: Stable slug (e.g. ``"soccer-full-pitch"``).
        name: Display name.
        category: Sport or usage category (e.g. ``"sports_tournament"``).
        default_width_m: Default width in metres.
        default_length_m: Default length in metres.
        default_rotation_deg: Default rotation in degrees.
        description: Free-text description.
        tags: Search tags.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    default_width_m: float = Field(gt=0, allow_inf_nan=False)
    default_length_m: float = Field(gt=0, allow_inf_nan=False)
    default_rotation_deg: float = Field(default=0.0, allow_inf_nan=False)
    description: str = ""
    tags: tuple[str, ...] = ()

    @property
    def default_dimensions(self) -> Dimensions:
        """Default size as a ``Dimensions`` value."""
        return Dimensions(width_m=self.default_width_m, length_m=self.default_length_m)
