"""Validation result values and the raising wrapper around them.

The validators return a ``ValidationIssue`` (or ``None``) rather than
raising, so the advisory editor path can report the problem inline.
``PolygonValidationError`` carries the same value for callers that need
an exception (the authoritative boundary, the template generator).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from site_geometry.core.exceptions import ValidationError

if TYPE_CHECKING:
    from site_geometry.models.contracts import ValidationIssuePayload


class ErrorKind(enum.Enum):
    """Closed set of polygon validation failures.

    Values:
        INVALID_POLYGON:     Not a polygon, unclosed ring, or malformed pair.
        INSUFFICIENT_POINTS: Fewer than 4 ring entries.
        TOO_MANY_POINTS:     Ring longer than the configured vertex cap.
        OUT_OF_BOUNDS:       A vertex outside WGS 84 (or outside a parent area).
        SELF_INTERSECTING:   Non-adjacent edges cross or overlap.
        INVALID_WINDING:     Exterior ring is clockwise or has zero area.
    """

    INVALID_POLYGON = "INVALID_POLYGON"
    INSUFFICIENT_POINTS = "INSUFFICIENT_POINTS"
    TOO_MANY_POINTS = "TOO_MANY_POINTS"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    SELF_INTERSECTING = "SELF_INTERSECTING"
    INVALID_WINDING = "INVALID_WINDING"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """The single failure reported by a validation call.

    Attributes:
        kind: Which check failed.
        message: Human-readable description, naming the offending point
            index where one exists.
    """

    kind: ErrorKind
    message: str

    def to_error_dict(self) -> ValidationIssuePayload:
        """Return the ``{kind, message}`` payload passed to the boundary layer."""
        return {"kind": self.kind.value, "message": self.message}


class PolygonValidationError(ValidationError):
    """Raised when a polygon is rejected on a raising code path.

    The ``code`` is the issue kind, so boundary layers can forward
    ``kind`` and ``message`` verbatim.

    Attributes:
        issue: The ``ValidationIssue`` that caused the rejection.
    """

    default_stage = "validation"

    def __init__(
        self,
        issue: ValidationIssue,
        *,
        stage: str = "",
        correlation_id: str = "",
    ) -> None:
        self.issue = issue
        super().__init__(
            issue.message,
            stage=stage,
            code=issue.kind.value,
            correlation_id=correlation_id,
        )

    @property
    def kind(self) -> ErrorKind:
        return self.issue.kind
