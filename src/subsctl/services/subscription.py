"""SubscriptionService — create, cancel, and expire subscriptions.

Pipeline for creation: VALIDATE → MAP → PERSIST → NOTIFY → RESPOND.
Cancel and expire run: LOAD → GUARD → APPLY → PERSIST → NOTIFY → RESPOND.

Each call performs at most one read and one write. The read-then-write in
cancel/expire is not atomic; a single writer is assumed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog

from subsctl.domain.errors import NotFoundError, SubscriptionError, ValidationError
from subsctl.domain.lifecycle import ensure_can_cancel, ensure_can_expire
from subsctl.domain.types import SubscriptionStatus
from subsctl.services.base import BaseService
from subsctl.services.result import ServiceResult

if TYPE_CHECKING:
    from subsctl.domain.clock import Clock
    from subsctl.domain.mapping import CreateSubscriptionMapper
    from subsctl.domain.subscription import CreateSubscriptionRequest, Subscription
    from subsctl.domain.validation import CreateSubscriptionValidator
    from subsctl.infrastructure.repositories.subscription import SubscriptionRepository
    from subsctl.plugins.event_bus import EventBus

log = structlog.wrap_logger(logging.getLogger(__name__))


class SubscriptionService(BaseService):
    """Orchestrates the subscription lifecycle over a repository.

    All collaborators are passed in; nothing is looked up globally.
    """

    def __init__(
        self,
        repository: SubscriptionRepository,
        mapper: CreateSubscriptionMapper,
        validator: CreateSubscriptionValidator,
        clock: Clock,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        super().__init__(event_bus=event_bus)
        self._repository = repository
        self._mapper = mapper
        self._validator = validator
        self._clock = clock

    # ------------------------------------------------------------------
    # Lifecycle operations
    # ------------------------------------------------------------------

    def upsert(self, request: CreateSubscriptionRequest) -> ServiceResult:
        """Validate *request*, then insert or update the mapped subscription.

        On validation failure nothing else is touched: no mapping, no
        storage call. The error detail lists every failed check.
        """
        op = "upsert"
        warnings: list[str] = []

        validation = self._validator.validate(request)
        if validation.has_errors:
            log.info("subscription.rejected", codes=validation.codes)
            return ServiceResult.failure(op, ValidationError(validation.errors))

        saved = self._repository.upsert(self._mapper.map(request))
        log.info("subscription.upserted", subscription_id=saved.id, user_id=saved.user_id)

        self._dispatch_event(
            "post_upsert",
            {
                "subscription_id": saved.id,
                "user_id": saved.user_id,
                "provider": str(saved.provider),
                "status": str(saved.status),
            },
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"subscription": saved.to_payload()},
            warnings=warnings,
        )

    def cancel(self, subscription_id: int) -> ServiceResult:
        """Move an ACTIVE subscription to CANCELED."""
        op = "cancel"
        warnings: list[str] = []

        try:
            current = self._require(subscription_id)
            ensure_can_cancel(subscription_id, current.status)
        except SubscriptionError as exc:
            log.info("subscription.cancel_rejected", subscription_id=subscription_id, code=exc.code)
            return ServiceResult.failure(op, exc)

        canceled = current.with_status(SubscriptionStatus.CANCELED)
        self._repository.update(canceled)
        log.info("subscription.canceled", subscription_id=subscription_id)

        self._dispatch_event(
            "post_cancel",
            {"subscription_id": subscription_id, "user_id": canceled.user_id},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"subscription": canceled.to_payload()},
            warnings=warnings,
        )

    def expire(self, subscription_id: int) -> ServiceResult:
        """Mark a subscription EXPIRED as of the clock's current instant.

        Only an already EXPIRED subscription is rejected; a CANCELED one
        may still be expired.
        """
        op = "expire"
        warnings: list[str] = []

        try:
            current = self._require(subscription_id)
            ensure_can_expire(subscription_id, current.status)
        except SubscriptionError as exc:
            log.info("subscription.expire_rejected", subscription_id=subscription_id, code=exc.code)
            return ServiceResult.failure(op, exc)

        expired = current.expired_at(self._clock.now())
        self._repository.update(expired)
        log.info(
            "subscription.expired",
            subscription_id=subscription_id,
            expired_at=expired.expiration_date.isoformat(),
        )

        self._dispatch_event(
            "post_expire",
            {
                "subscription_id": subscription_id,
                "user_id": expired.user_id,
                "expired_at": expired.expiration_date.isoformat(),
            },
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"subscription": expired.to_payload()},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Reads and deletion
    # ------------------------------------------------------------------

    def get(self, subscription_id: int) -> ServiceResult:
        op = "get"
        try:
            subscription = self._require(subscription_id)
        except NotFoundError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"subscription": subscription.to_payload()})

    def list_subscriptions(self, *, user_id: int | None = None) -> ServiceResult:
        """List every subscription, or only those owned by *user_id*."""
        if user_id is None:
            items = self._repository.find_all()
        else:
            items = self._repository.find_by_user_id(user_id)
        return ServiceResult(
            ok=True,
            op="list",
            data={"count": len(items), "items": [s.to_payload() for s in items]},
        )

    def delete(self, subscription_id: int) -> ServiceResult:
        """Delete regardless of status. A missing id yields ``deleted=False``."""
        op = "delete"
        warnings: list[str] = []

        deleted = self._repository.delete(subscription_id)
        log.info("subscription.deleted", subscription_id=subscription_id, deleted=deleted)
        if deleted:
            self._dispatch_event("post_delete", {"subscription_id": subscription_id}, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": subscription_id, "deleted": deleted},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _require(self, subscription_id: int) -> Subscription:
        subscription = self._repository.find_by_id(subscription_id)
        if subscription is None:
            raise NotFoundError(subscription_id)
        return subscription
