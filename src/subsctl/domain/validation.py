"""Creation request validation.

The validator runs every check and aggregates all failures in a fixed
order. It never short-circuits and never touches storage.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel

from subsctl.domain.subscription import MIN_INSTANT, CreateSubscriptionRequest
from subsctl.domain.types import Provider

INVALID_USER_ID = 100
INVALID_NAME = 101
INVALID_PROVIDER = 102
INVALID_EXPIRATION_DATE = 103


class FieldError(BaseModel):
    """One validation failure."""

    model_config = {"frozen": True}

    code: int
    message: str

    @classmethod
    def of(cls, code: int, message: str) -> FieldError:
        return cls(code=code, message=message)


@dataclass
class ValidationResult:
    """Ordered collection of validation failures. Empty means valid."""

    errors: list[FieldError] = field(default_factory=list)

    def add(self, error: FieldError) -> None:
        self.errors.append(error)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def codes(self) -> list[int]:
        return [e.code for e in self.errors]


class CreateSubscriptionValidator:
    """Checks a :class:`CreateSubscriptionRequest` before it is mapped."""

    def validate(self, request: CreateSubscriptionRequest) -> ValidationResult:
        result = ValidationResult()

        if request.user_id is None:
            result.add(FieldError.of(INVALID_USER_ID, "userId is invalid"))
        if not request.name:
            result.add(FieldError.of(INVALID_NAME, "name is invalid"))
        if Provider.parse(request.provider) is None:
            result.add(FieldError.of(INVALID_PROVIDER, "provider is invalid"))
        if request.expiration_date is None or request.expiration_date <= MIN_INSTANT:
            result.add(FieldError.of(INVALID_EXPIRATION_DATE, "expirationDate is invalid"))

        return result
