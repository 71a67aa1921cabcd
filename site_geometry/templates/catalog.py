"""Immutable template catalog.

The catalog is built once at startup, either from the built-in table or
from a JSON file named by ``EngineConfig.template_catalog_path``, and then
passed explicitly to ``generate_from_template``.  Nothing reads it as a
module-level global.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError as PydanticValidationError

from site_geometry.core.config import EngineConfig
from site_geometry.core.exceptions import ContractError, ValidationError
from site_geometry.models.template import Template

logger = logging.getLogger("site_geometry.templates.catalog")


class TemplateNotFoundError(ValidationError):
    """Raised when a template id is not in the catalog."""

    default_stage = "template"
    default_code = "TEMPLATE_NOT_FOUND"


class CatalogError(ContractError):
    """Raised when catalog data is malformed."""

    default_stage = "template"
    default_code = "TEMPLATE_CATALOG_INVALID"


# ---------------------------------------------------------------------------
# Built-in table
# ---------------------------------------------------------------------------

DEFAULT_TEMPLATES: tuple[dict[str, object], ...] = (
    # Sports: tournament
    {
        "id": "gaa-full-pitch",
        "name": "GAA Full Pitch",
        "category": "sports_tournament",
        "default_width_m": 90,
        "default_length_m": 145,
        "description": "Standard GAA pitch (145m x 90m) for matches and tournaments",
        "tags": ["gaa", "gaelic", "football", "hurling", "full-size"],
    },
    {
        "id": "rugby-full-pitch",
        "name": "Rugby Full Pitch",
        "category": "sports_tournament",
        "default_width_m": 70,
        "default_length_m": 100,
        "description": "Standard rugby pitch (100m x 70m) including try zones",
        "tags": ["rugby", "union", "league", "full-size"],
    },
    {
        "id": "soccer-full-pitch",
        "name": "Soccer Full Pitch",
        "category": "sports_tournament",
        "default_width_m": 68,
        "default_length_m": 105,
        "description": "FIFA standard soccer pitch (105m x 68m)",
        "tags": ["soccer", "football", "fifa", "full-size"],
    },
    {
        "id": "hockey-full-pitch",
        "name": "Hockey Full Pitch",
        "category": "sports_tournament",
        "default_width_m": 55,
        "default_length_m": 91.4,
        "description": "Standard hockey pitch (91.4m x 55m) with shooting circles",
        "tags": ["hockey", "field-hockey", "full-size"],
    },
    {
        "id": "tennis-court",
        "name": "Tennis Court",
        "category": "sports_tournament",
        "default_width_m": 10.97,
        "default_length_m": 23.77,
        "description": "Doubles tennis court (23.77m x 10.97m)",
        "tags": ["tennis", "court"],
    },
    # Sports: training
    {
        "id": "gaa-training-half",
        "name": "GAA Half Pitch (Training)",
        "category": "sports_training",
        "default_width_m": 90,
        "default_length_m": 72.5,
        "description": "Half-size GAA pitch for training drills (72.5m x 90m)",
        "tags": ["gaa", "training", "half-pitch", "drills"],
    },
    {
        "id": "soccer-training-grid",
        "name": "Soccer Training Grid",
        "category": "sports_training",
        "default_width_m": 40,
        "default_length_m": 40,
        "description": "40m x 40m grid split into four drill squares",
        "tags": ["soccer", "training", "grid", "drills"],
    },
    # Events
    {
        "id": "market-stall",
        "name": "Market Stall",
        "category": "events",
        "default_width_m": 3,
        "default_length_m": 3,
        "description": "Single market stall pitch (3m x 3m)",
        "tags": ["market", "stall"],
    },
    {
        "id": "market-stall-grid",
        "name": "Market Stall Grid",
        "category": "events",
        "default_width_m": 50,
        "default_length_m": 50,
        "description": "Stall area for a grid of market pitches",
        "tags": ["market", "stalls", "grid"],
    },
    {
        "id": "parking-bay",
        "name": "Parking Bay",
        "category": "events",
        "default_width_m": 2.5,
        "default_length_m": 5,
        "description": "Standard car parking bay (5m x 2.5m)",
        "tags": ["parking", "bay"],
    },
    {
        "id": "parking-standard-grid",
        "name": "Parking Area",
        "category": "events",
        "default_width_m": 50,
        "default_length_m": 100,
        "description": "Overflow car park (100m x 50m)",
        "tags": ["parking", "car-park"],
    },
    {
        "id": "festival-stage",
        "name": "Festival Stage",
        "category": "events",
        "default_width_m": 15,
        "default_length_m": 20,
        "description": "Stage footprint (20m x 15m)",
        "tags": ["stage", "festival"],
    },
    {
        "id": "security-cordon",
        "name": "Security Cordon",
        "category": "events",
        "default_width_m": 100,
        "default_length_m": 100,
        "description": "Controlled-access cordon (100m x 100m)",
        "tags": ["security", "cordon"],
    },
    # Construction
    {
        "id": "construction-compound",
        "name": "Construction Compound",
        "category": "construction",
        "default_width_m": 30,
        "default_length_m": 50,
        "description": "Site compound (50m x 30m)",
        "tags": ["construction", "compound"],
    },
    {
        "id": "laydown-area",
        "name": "Laydown Area",
        "category": "construction",
        "default_width_m": 40,
        "default_length_m": 40,
        "description": "Materials laydown area (40m x 40m)",
        "tags": ["construction", "laydown"],
    },
    # Emergency
    {
        "id": "emergency-muster",
        "name": "Emergency Muster Point",
        "category": "emergency",
        "default_width_m": 20,
        "default_length_m": 20,
        "description": "Assembly area for evacuations (20m x 20m)",
        "tags": ["emergency", "muster"],
    },
    # Film
    {
        "id": "film-production",
        "name": "Film Production Zone",
        "category": "film",
        "default_width_m": 50,
        "default_length_m": 50,
        "description": "Production base area (50m x 50m)",
        "tags": ["film", "production", "base-camp"],
    },
)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class TemplateCatalog:
    """Read-only mapping of template id to ``Template``.

    Raises:
        CatalogError: On construction, if two templates share an id.
    """

    __slots__ = ("_templates",)

    def __init__(self, templates: Iterable[Template]) -> None:
        table: dict[str, Template] = {}
        for template in templates:
            if template.id in table:
                msg = f"Duplicate template id {template.id!r} in catalog"
                raise CatalogError(msg)
            table[template.id] = template
        self._templates = MappingProxyType(table)

    def __getitem__(self, template_id: str) -> Template:
        return self._templates[template_id]

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def get(self, template_id: str) -> Template:
        """Return the template with ``template_id``.

        Raises:
            TemplateNotFoundError: If no such template exists.
        """
        try:
            return self._templates[template_id]
        except KeyError:
            msg = f"Unknown template id {template_id!r}"
            raise TemplateNotFoundError(msg) from None

    def by_category(self, category: str) -> list[Template]:
        """Templates in ``category``, in catalog order."""
        return [t for t in self._templates.values() if t.category == category]

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, object]]) -> TemplateCatalog:
        """Build a catalog from raw dicts, validating each record.

        Raises:
            CatalogError: If a record is malformed or ids collide.
        """
        templates: list[Template] = []
        for idx, record in enumerate(records):
            try:
                templates.append(Template.model_validate(record))
            except PydanticValidationError as exc:
                msg = f"Invalid template record at index {idx}: {exc}"
                raise CatalogError(msg) from exc
        return cls(templates)


def build_default_catalog() -> TemplateCatalog:
    """Catalog built from the built-in ``DEFAULT_TEMPLATES`` table."""
    return TemplateCatalog.from_records(DEFAULT_TEMPLATES)


def load_catalog(path: Path | str) -> TemplateCatalog:
    """Load a catalog from a JSON file holding a list of template records.

    Raises:
        CatalogError: If the file cannot be read, is not a JSON list, or
            contains an invalid record.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Cannot read template catalog {path}: {exc}"
        raise CatalogError(msg) from exc

    if not isinstance(raw, list):
        msg = f"Template catalog {path} must be a JSON list, got {type(raw).__name__}"
        raise CatalogError(msg)

    catalog = TemplateCatalog.from_records(raw)
    logger.info("Template catalog loaded | path=%s | templates=%d", path, len(catalog))
    return catalog


def catalog_from_config(config: EngineConfig) -> TemplateCatalog:
    """Catalog named by ``config.template_catalog_path``, or the built-in one."""
    if config.template_catalog_path:
        return load_catalog(config.template_catalog_path)
    return build_default_catalog()
