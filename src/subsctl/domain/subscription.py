"""Subscription entity and creation request models.

The entity is frozen. State changes produce a new instance via
``model_copy(update=...)``; only the service layer performs them.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, field_validator

from subsctl.domain.types import Provider, SubscriptionStatus

MIN_INSTANT = datetime.min.replace(tzinfo=UTC)
MAX_INSTANT = datetime.max.replace(tzinfo=UTC)


def as_utc(value: datetime) -> datetime:
    """Normalize *value* to a datetime carrying ``datetime.UTC``.

    Naive values are taken to already be UTC. Aware values whose UTC
    equivalent falls outside the representable range are clamped to
    ``MIN_INSTANT`` or ``MAX_INSTANT``.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    if value.tzinfo is UTC:
        return value
    offset = value.utcoffset()
    if offset == timedelta(0):
        return value.replace(tzinfo=UTC)
    try:
        return value.astimezone(UTC)
    except OverflowError:
        # A positive offset can only underflow; a negative one can only overflow.
        return MIN_INSTANT if offset is not None and offset > timedelta(0) else MAX_INSTANT


class Subscription(BaseModel):
    """A user's subscription as persisted in storage.

    Attributes:
        id: Storage-assigned identity; None until the row is inserted.
        user_id: Owning user.
        name: Display name.
        provider: Channel the subscription was purchased through.
        expiration_date: Instant the subscription lapses (UTC).
        status: Current lifecycle status.
    """

    model_config = {"frozen": True}

    id: int | None = None
    user_id: int
    name: str
    provider: Provider
    expiration_date: datetime
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE

    @field_validator("expiration_date", mode="after")
    @classmethod
    def _normalize_expiration(cls, value: datetime) -> datetime:
        return as_utc(value)

    def with_id(self, subscription_id: int) -> Subscription:
        return self.model_copy(update={"id": subscription_id})

    def with_status(self, status: SubscriptionStatus) -> Subscription:
        return self.model_copy(update={"status": status})

    def expired_at(self, instant: datetime) -> Subscription:
        """Return a copy marked EXPIRED as of *instant*."""
        return self.model_copy(
            update={"expiration_date": as_utc(instant), "status": SubscriptionStatus.EXPIRED}
        )

    def to_payload(self) -> dict[str, Any]:
        """JSON-friendly dict for service results and plugin hooks."""
        return self.model_dump(mode="json")


class CreateSubscriptionRequest(BaseModel):
    """Raw input for creating a subscription. Never persisted."""

    model_config = {"frozen": True}

    user_id: int | None = None
    name: str | None = None
    provider: str | None = None
    expiration_date: datetime | None = None

    @field_validator("expiration_date", mode="after")
    @classmethod
    def _normalize_expiration(cls, value: datetime | None) -> datetime | None:
        return None if value is None else as_utc(value)
