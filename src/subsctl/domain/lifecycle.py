"""Subscription status transitions.

The transition map encodes the guards the service enforces:

- cancel requires ACTIVE.
- expire rejects only EXPIRED, so a CANCELED subscription may still expire.

CANCELED accepts no cancel and EXPIRED accepts nothing.
"""

from __future__ import annotations

from subsctl.domain.errors import DomainStateError
from subsctl.domain.types import SubscriptionStatus

SUBSCRIPTION_TRANSITIONS: dict[str, list[str]] = {
    "ACTIVE": ["CANCELED", "EXPIRED"],
    "CANCELED": ["EXPIRED"],
    "EXPIRED": [],
}

INITIAL_STATUS = SubscriptionStatus.ACTIVE


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = SUBSCRIPTION_TRANSITIONS,
) -> bool:
    """Check if transitioning from *current* to *target* is allowed."""
    allowed = transitions.get(current, [])
    return target in allowed


def ensure_can_cancel(subscription_id: int, status: SubscriptionStatus) -> None:
    """Raise :class:`DomainStateError` unless *status* is ACTIVE."""
    if status != SubscriptionStatus.ACTIVE:
        raise DomainStateError(
            f"Only active subscription {subscription_id} can be canceled",
            subscription_id=subscription_id,
            status=str(status),
        )


def ensure_can_expire(subscription_id: int, status: SubscriptionStatus) -> None:
    """Raise :class:`DomainStateError` if *status* is already EXPIRED."""
    if not is_valid_transition(str(status), SubscriptionStatus.EXPIRED):
        raise DomainStateError(
            f"Subscription {subscription_id} has already expired",
            subscription_id=subscription_id,
            status=str(status),
        )
