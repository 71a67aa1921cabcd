"""Data models and schemas.

Defines the value types used throughout the engine:
- Polygon: a single exterior ring in WGS 84
- Measurement / MeasuredArea: derived area, perimeter, centroid
- Dimensions / RectangleBounds / Template: template generator inputs and outputs
- ImportResult: an accepted GeoJSON / KML upload
- contracts: TypedDict payload shapes
"""

from site_geometry.models.import_result import ImportResult
from site_geometry.models.measurement import MeasuredArea, Measurement
from site_geometry.models.polygon import Coordinate, Polygon, Ring, to_ring
from site_geometry.models.template import Dimensions, RectangleBounds, Template

__all__ = [
    "Coordinate",
    "Dimensions",
    "ImportResult",
    "MeasuredArea",
    "Measurement",
    "Polygon",
    "RectangleBounds",
    "Ring",
    "Template",
    "to_ring",
]
