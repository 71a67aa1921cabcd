"""Metre / degree conversion and planar rotation helpers.

Equirectangular approximation: one degree of latitude is 111,320 m and
one degree of longitude is 111,320 m scaled by the cosine of the latitude.
"""

from __future__ import annotations

import math

from site_geometry.core.constants import METRES_PER_DEGREE


def metres_to_degrees_lat(metres: float) -> float:
    return metres / METRES_PER_DEGREE


def metres_to_degrees_lon(metres: float, lat: float) -> float:
    """Longitude span of ``metres`` at latitude ``lat`` (degrees)."""
    return metres / (METRES_PER_DEGREE * math.cos(math.radians(lat)))


def degrees_lat_to_metres(degrees: float) -> float:
    return degrees * METRES_PER_DEGREE


def degrees_lon_to_metres(degrees: float, lat: float) -> float:
    return degrees * METRES_PER_DEGREE * math.cos(math.radians(lat))


def rotate_point(x: float, y: float, degrees: float) -> tuple[float, float]:
    """Rotate ``(x, y)`` about the origin, counter-clockwise for positive angles."""
    radians = math.radians(degrees)
    cos = math.cos(radians)
    sin = math.sin(radians)
    return (x * cos - y * sin, x * sin + y * cos)
