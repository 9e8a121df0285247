"""Repositories encapsulating SQL for the service layer."""

from subsctl.infrastructure.repositories.subscription import SubscriptionRepository

__all__ = ["SubscriptionRepository"]
