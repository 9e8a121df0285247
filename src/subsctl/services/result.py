"""ServiceResult and ServiceError — the service contract.

INVARIANT: Every public service method returns a ServiceResult. Domain
failures (validation, missing ids, illegal transitions) are values, not
exceptions; callers branch on ``ok``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from subsctl.domain.errors import SubscriptionError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: SubscriptionError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"cancel"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a failing plugin hook.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: SubscriptionError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
