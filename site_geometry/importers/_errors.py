"""Exceptions raised by the geometry importers."""

from __future__ import annotations

from site_geometry.core.exceptions import ValidationError


class GeometryImportError(ValidationError):
    """Raised when uploaded content cannot be turned into an acceptable polygon.

    Codes: ``INVALID_FORMAT``, ``INVALID_GEOJSON``, ``INVALID_KML``,
    ``TOO_MANY_COORDINATES``, ``AREA_TOO_SMALL``, ``AREA_TOO_LARGE``.
    """

    default_stage = "import"
    default_code = "IMPORT_FAILED"
