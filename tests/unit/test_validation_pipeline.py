"""Tests for the composed validation pipeline and its two entry points.

Covers:
- Stage ordering: the first failing stage's issue is returned
- The vertex cap and its configuration
- The advisory (``check_polygon``) and authoritative
  (``require_valid_polygon``) paths return identical verdicts
- Determinism across repeated calls
"""

from __future__ import annotations

import math
from typing import Any

import pytest

from site_geometry.core.config import EngineConfig
from site_geometry.models.polygon import Polygon
from site_geometry.service import check_polygon, require_valid_polygon
from site_geometry.validation import (
    ErrorKind,
    PolygonValidationError,
    validate_polygon,
    validate_vertex_count,
)


def _geometry(ring: Any) -> dict[str, Any]:
    return {"type": "Polygon", "coordinates": [ring]}


def _regular_ring(vertices: int, radius: float = 0.01) -> list[list[float]]:
    """Counter-clockwise regular polygon around (0, 0), closed."""
    ring = [
        [
            radius * math.cos(2 * math.pi * k / vertices),
            radius * math.sin(2 * math.pi * k / vertices),
        ]
        for k in range(vertices)
    ]
    ring.append(ring[0])
    return ring


VALID_SITE = [[-6.26, 53.34], [-6.2585, 53.34], [-6.2585, 53.3409], [-6.26, 53.3409], [-6.26, 53.34]]

# (geometry, expected kind or None)
CASES: list[tuple[str, Any, ErrorKind | None]] = [
    ("valid-site", _geometry(VALID_SITE), None),
    ("missing", None, ErrorKind.INVALID_POLYGON),
    ("point", {"type": "Point", "coordinates": [0, 0]}, ErrorKind.INVALID_POLYGON),
    ("two-points", _geometry([[0, 0], [1, 1], [0, 0]]), ErrorKind.INSUFFICIENT_POINTS),
    ("unclosed", _geometry([[0, 0], [1, 0], [1, 1], [0, 1]]), ErrorKind.INVALID_POLYGON),
    ("out-of-bounds", _geometry([[0, 0], [200, 0], [1, 1], [0, 0]]), ErrorKind.OUT_OF_BOUNDS),
    (
        "bowtie",
        _geometry([[0, 0], [1, 1], [1, 0], [0, 1], [0, 0]]),
        ErrorKind.SELF_INTERSECTING,
    ),
    (
        "clockwise",
        _geometry([[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]),
        ErrorKind.INVALID_WINDING,
    ),
    ("collinear", _geometry([[0, 0], [1, 0], [2, 0], [0, 0]]), ErrorKind.INVALID_WINDING),
    ("too-many-points", _geometry(_regular_ring(600)), ErrorKind.TOO_MANY_POINTS),
]


class TestStageOrdering:
    """Earlier stages mask later ones."""

    def test_bounds_before_intersection(self) -> None:
        """An out-of-bounds bowtie reports OUT_OF_BOUNDS."""
        ring = [[0, 0], [181, 1], [181, 0], [0, 1], [0, 0]]
        issue = validate_polygon(_geometry(ring))
        assert issue is not None
        assert issue.kind is ErrorKind.OUT_OF_BOUNDS

    def test_intersection_before_winding(self) -> None:
        """A clockwise bowtie reports SELF_INTERSECTING."""
        ring = [[0, 0], [0, 1], [1, 0], [1, 1], [0, 0]]
        issue = validate_polygon(_geometry(ring))
        assert issue is not None
        assert issue.kind is ErrorKind.SELF_INTERSECTING

    def test_structure_before_bounds(self) -> None:
        ring = [[0, 0], [200, 0], [1, "1"], [0, 0]]
        issue = validate_polygon(_geometry(ring))
        assert issue is not None
        assert issue.kind is ErrorKind.INVALID_POLYGON

    def test_vertex_cap_before_intersection(self) -> None:
        ring = [[0, 0], [1, 1], [1, 0], [0, 1], [0, 0]]
        issue = validate_polygon(_geometry(ring), max_vertices=4)
        assert issue is not None
        assert issue.kind is ErrorKind.TOO_MANY_POINTS


class TestVertexCap:
    """Rings longer than the cap are rejected before the O(n^2) check."""

    def test_at_cap_accepted(self) -> None:
        assert validate_vertex_count(_regular_ring(499), 500) is None

    def test_over_cap_rejected(self) -> None:
        issue = validate_vertex_count(_regular_ring(500), 500)
        assert issue is not None
        assert issue.kind is ErrorKind.TOO_MANY_POINTS
        assert issue.message == "Polygon exterior ring has 501 points; maximum allowed is 500"

    def test_raised_cap_accepts_long_ring(self) -> None:
        config = EngineConfig(max_ring_vertices=1000)
        assert check_polygon(_geometry(_regular_ring(600)), config) is None


class TestEntryPointConformance:
    """Both entry points run the same pipeline and agree on every input."""

    @pytest.mark.parametrize(
        ("geometry", "expected"),
        [(geometry, expected) for _, geometry, expected in CASES],
        ids=[name for name, _, _ in CASES],
    )
    def test_same_verdict(self, geometry: Any, expected: ErrorKind | None) -> None:
        advisory = check_polygon(geometry)

        if expected is None:
            assert advisory is None
            assert isinstance(require_valid_polygon(geometry), Polygon)
            return

        assert advisory is not None
        assert advisory.kind is expected
        with pytest.raises(PolygonValidationError) as exc_info:
            require_valid_polygon(geometry)
        assert exc_info.value.issue == advisory
        assert exc_info.value.kind is expected
        assert exc_info.value.message == advisory.message

    def test_polygon_model_and_mapping_agree(self) -> None:
        model = Polygon.from_coords(VALID_SITE)
        assert check_polygon(model) is None
        assert check_polygon(model.to_dict()) is None
        assert require_valid_polygon(model) == model

    def test_config_applies_to_both(self) -> None:
        config = EngineConfig(max_ring_vertices=4)
        geometry = _geometry(VALID_SITE)
        issue = check_polygon(geometry, config)
        assert issue is not None
        assert issue.kind is ErrorKind.TOO_MANY_POINTS
        with pytest.raises(PolygonValidationError, match="maximum allowed is 4"):
            require_valid_polygon(geometry, config)


class TestDeterminism:
    """Same input, same output."""

    @pytest.mark.parametrize(
        "geometry",
        [geometry for _, geometry, _ in CASES],
        ids=[name for name, _, _ in CASES],
    )
    def test_repeated_calls_identical(self, geometry: Any) -> None:
        first = validate_polygon(geometry)
        for _ in range(3):
            assert validate_polygon(geometry) == first
