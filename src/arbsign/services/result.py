"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: service methods never raise pipeline errors to their caller.
Every ``OpportunityError`` is folded into a failed ServiceResult so the
CLI owns output routing and exit status in one place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from arbsign.domain.errors import OpportunityError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: OpportunityError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail())


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"sign_opportunity"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (digest, domain identity, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
