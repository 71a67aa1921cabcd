"""Unified geometry exception taxonomy.

Provides a shared base exception hierarchy for the engine's raising
surfaces (authoritative boundary, template generator, importer,
configuration). Every domain exception inherits from ``GeometryError``
and carries structured context fields so the boundary layer can translate
it into whatever response format it uses without string parsing.

Taxonomy categories
-------------------
- ``ValidationError``: rejected input (ring, template request, upload).
- ``ContractError``: malformed catalog or record payloads.
- ``ConfigValidationError``: out-of-range configuration at startup.

The engine is deterministic, so nothing here is retryable: the same input
always reproduces the same error.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and client-facing responses.

The advisory validators do not raise; they return a ``ValidationIssue``
value. ``PolygonValidationError`` wraps that value for raising callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from site_geometry.models.contracts import ErrorPayload


class GeometryError(Exception):
    """Base exception for all geometry-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Engine stage where the error occurred
            (e.g. ``"validation"``, ``"template"``).
        code: Machine-readable error code (e.g. ``"SELF_INTERSECTING"``).
        correlation_id: Request correlation identifier supplied by the caller.
    """

    #: Taxonomy category reported in ``to_error_dict()``.
    category: ClassVar[str] = "geometry"
    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: ClassVar[str] = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: ClassVar[str] = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.correlation_id = correlation_id
        super().__init__(message)

    def to_error_dict(self) -> ErrorPayload:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeometryError):
    """Input or domain-model validation failure."""

    category = "validation"


class ContractError(GeometryError):
    """Payload or schema drift in reference data."""

    category = "contract"
