"""Subscription error taxonomy.

Each error carries a stable ``code`` that the service layer copies into
:class:`~subsctl.services.result.ServiceError` when it converts a raised
error into a failed result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from subsctl.domain.validation import FieldError


class SubscriptionError(Exception):
    """Base class for deterministic, non-retryable subscription failures."""

    code = "SUBSCRIPTION_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> dict[str, Any]:
        """Structured payload attached to the service error."""
        return {}


class ValidationError(SubscriptionError):
    """A creation request failed one or more validation checks."""

    code = "VALIDATION_FAILED"

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__("; ".join(e.message for e in errors) or "Validation failed")
        self.errors = list(errors)

    @property
    def detail(self) -> dict[str, Any]:
        return {"errors": [e.model_dump() for e in self.errors]}


class NotFoundError(SubscriptionError):
    """No subscription exists with the requested id."""

    code = "NOT_FOUND"

    def __init__(self, subscription_id: int) -> None:
        super().__init__(f"No subscription found with ID: {subscription_id}")
        self.subscription_id = subscription_id

    @property
    def detail(self) -> dict[str, Any]:
        return {"id": self.subscription_id}


class DomainStateError(SubscriptionError):
    """A requested status transition violates the lifecycle guards."""

    code = "INVALID_TRANSITION"

    def __init__(self, message: str, *, subscription_id: int, status: str) -> None:
        super().__init__(message)
        self.subscription_id = subscription_id
        self.status = status

    @property
    def detail(self) -> dict[str, Any]:
        return {"id": self.subscription_id, "status": self.status}
