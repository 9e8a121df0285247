"""Subscription classification enums."""

from __future__ import annotations

from enum import StrEnum


class Provider(StrEnum):
    """Payment/service channel a subscription was purchased through."""

    GOOGLE = "GOOGLE"
    APPLE = "APPLE"

    @classmethod
    def parse(cls, raw: str | None) -> Provider | None:
        """Return the provider named *raw*, or None if it is not recognized."""
        if not raw:
            return None
        try:
            return cls[raw]
        except KeyError:
            return None


class SubscriptionStatus(StrEnum):
    """Machine status of a subscription."""

    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"
    EXPIRED = "EXPIRED"
