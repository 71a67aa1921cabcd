"""Template geometry: rectangle generation, bounds recovery and the catalog.

- **generator**: ``generate_rectangle``, ``generate_from_template``,
  ``calculate_bounds``
- **catalog**: immutable ``TemplateCatalog`` built once at startup
- **_conversion**: metre / degree conversion and rotation helpers
"""

from __future__ import annotations

from site_geometry.templates._conversion import (
    degrees_lat_to_metres,
    degrees_lon_to_metres,
    metres_to_degrees_lat,
    metres_to_degrees_lon,
    rotate_point,
)
from site_geometry.templates.catalog import (
    DEFAULT_TEMPLATES,
    CatalogError,
    TemplateCatalog,
    TemplateNotFoundError,
    build_default_catalog,
    catalog_from_config,
    load_catalog,
)
from site_geometry.templates.generator import (
    TemplateGeometryError,
    calculate_bounds,
    generate_from_template,
    generate_rectangle,
)

__all__ = [
    "DEFAULT_TEMPLATES",
    "CatalogError",
    "TemplateCatalog",
    "TemplateGeometryError",
    "TemplateNotFoundError",
    "build_default_catalog",
    "calculate_bounds",
    "catalog_from_config",
    "degrees_lat_to_metres",
    "degrees_lon_to_metres",
    "generate_from_template",
    "generate_rectangle",
    "load_catalog",
    "metres_to_degrees_lat",
    "metres_to_degrees_lon",
    "rotate_point",
]
