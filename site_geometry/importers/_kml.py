"""KML polygon extraction via lxml.

Walks every Placemark (nested Folders and MultiGeometry included) and
returns the outer boundary of each Polygon as a GeoJSON Polygon mapping.
Inner boundaries are ignored; the product never uses holes.  Elements are
matched by local name so files without the KML 2.2 namespace still parse.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from lxml import etree

from site_geometry.core.constants import KML_NAMESPACE
from site_geometry.importers._errors import GeometryImportError


def extract_kml_polygons(content: str | bytes) -> list[dict[str, Any]]:
    """Parse KML and return the outer ring of every Placemark polygon.

    Altitude values are dropped.

    Raises:
        GeometryImportError: If the content is not KML or has no polygons.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Invalid KML: not valid XML: {exc}"
        raise GeometryImportError(msg, code="INVALID_KML") from exc

    tag = root.tag if isinstance(root.tag, str) else ""
    if f"{{{KML_NAMESPACE}}}" not in tag and "kml" not in tag.lower():
        msg = f"Invalid KML: root element is <{tag}>"
        raise GeometryImportError(msg, code="INVALID_KML")

    polygons: list[dict[str, Any]] = []
    for placemark in _descendants(root, "Placemark"):
        for polygon in _descendants(placemark, "Polygon"):
            ring = _outer_ring(polygon)
            if ring:
                polygons.append({"type": "Polygon", "coordinates": [[list(c) for c in ring]]})

    if not polygons:
        msg = "Invalid KML: no valid polygon features found"
        raise GeometryImportError(msg, code="INVALID_KML")
    return polygons


def parse_coordinates_text(text: str) -> list[tuple[float, float]]:
    """Parse KML coordinate text (``lon,lat,alt lon,lat,alt ...``) to (lon, lat) tuples."""
    coords: list[tuple[float, float]] = []
    for token in text.split():
        parts = token.strip().split(",")
        if len(parts) >= 2:
            try:
                coords.append((float(parts[0]), float(parts[1])))
            except ValueError:
                continue
    return coords


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _local_name(elem: Any) -> str:
    if not isinstance(elem.tag, str):  # comments, processing instructions
        return ""
    return etree.QName(elem).localname


def _descendants(elem: Any, name: str) -> Iterator[Any]:
    for child in elem.iter():
        if child is not elem and _local_name(child) == name:
            yield child


def _outer_ring(polygon: Any) -> list[tuple[float, float]]:
    for boundary in polygon:
        if _local_name(boundary) != "outerBoundaryIs":
            continue
        for coordinates in _descendants(boundary, "coordinates"):
            if coordinates.text:
                return parse_coordinates_text(coordinates.text.strip())
    return []
