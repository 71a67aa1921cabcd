"""Shared pytest fixtures for the site geometry test suite."""

from __future__ import annotations

from typing import Any

import pytest

from site_geometry.core.config import EngineConfig
from site_geometry.templates import TemplateCatalog, build_default_catalog

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture()
def config() -> EngineConfig:
    """Default engine configuration."""
    return EngineConfig()


@pytest.fixture()
def catalog() -> TemplateCatalog:
    """The built-in template catalog."""
    return build_default_catalog()


# ---------------------------------------------------------------------------
# Reference geometries
# ---------------------------------------------------------------------------


@pytest.fixture()
def dublin_site() -> dict[str, Any]:
    """A ~100 m x 100 m site boundary in Dublin (53.34N), counter-clockwise."""
    return {
        "type": "Polygon",
        "coordinates": [
            [
                [-6.2600, 53.3400],
                [-6.2585, 53.3400],
                [-6.2585, 53.3409],
                [-6.2600, 53.3409],
                [-6.2600, 53.3400],
            ]
        ],
    }


@pytest.fixture()
def unit_square() -> dict[str, Any]:
    """One-degree square at the origin, counter-clockwise."""
    return {
        "type": "Polygon",
        "coordinates": [[[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]],
    }
