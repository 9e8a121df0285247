"""Subscription storage over the ``subscriptions`` table."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine

from subsctl.domain.subscription import Subscription, as_utc
from subsctl.domain.types import Provider, SubscriptionStatus
from subsctl.infrastructure.database.schema import subscriptions

if TYPE_CHECKING:
    from sqlalchemy import Connection, Row

logger = logging.getLogger(__name__)


def _to_row(subscription: Subscription) -> dict[str, Any]:
    return {
        "user_id": subscription.user_id,
        "name": subscription.name,
        "provider": str(subscription.provider),
        "expiration_date": as_utc(subscription.expiration_date).isoformat(),
        "status": str(subscription.status),
    }


def _from_row(row: Row[Any]) -> Subscription:
    return Subscription(
        id=row.id,
        user_id=row.user_id,
        name=row.name,
        provider=Provider(row.provider),
        expiration_date=datetime.fromisoformat(row.expiration_date),
        status=SubscriptionStatus(row.status),
    )


class SubscriptionRepository:
    """Encapsulates SQL for subscription reads and writes.

    Each method runs in its own transaction. Callers that need a
    read-then-write sequence to be atomic must serialize access
    themselves.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find_all(self) -> list[Subscription]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(subscriptions).order_by(subscriptions.c.id)).fetchall()
        return [_from_row(r) for r in rows]

    def find_by_id(self, subscription_id: int) -> Subscription | None:
        with self._engine.connect() as conn:
            row = self._select_one(conn, subscription_id)
        return _from_row(row) if row is not None else None

    def find_by_user_id(self, user_id: int | None) -> list[Subscription]:
        """All subscriptions owned by *user_id*; empty when it is None or unknown."""
        if user_id is None:
            return []
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(subscriptions)
                .where(subscriptions.c.user_id == user_id)
                .order_by(subscriptions.c.id)
            ).fetchall()
        return [_from_row(r) for r in rows]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert(self, subscription: Subscription) -> Subscription:
        """Insert *subscription* and return a copy carrying the new id."""
        with self._engine.begin() as conn:
            return self._insert(conn, subscription)

    def update(self, subscription: Subscription) -> Subscription:
        """Overwrite every column of the row keyed by ``subscription.id``."""
        if subscription.id is None:
            msg = "Cannot update a subscription that has no id"
            raise ValueError(msg)
        with self._engine.begin() as conn:
            self._update(conn, subscription)
        return subscription

    def upsert(self, subscription: Subscription) -> Subscription:
        """Insert when no row has this identity, otherwise update it.

        A subscription without an id is always inserted. One with an id is
        updated if the row exists, or inserted under that id if not.
        """
        with self._engine.begin() as conn:
            exists = (
                subscription.id is not None
                and self._select_one(conn, subscription.id) is not None
            )
            if exists:
                self._update(conn, subscription)
                return subscription
            return self._insert(conn, subscription)

    def delete(self, subscription_id: int) -> bool:
        """Remove the row; True iff one existed."""
        with self._engine.begin() as conn:
            result = conn.execute(delete(subscriptions).where(subscriptions.c.id == subscription_id))
        return result.rowcount > 0

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _select_one(conn: Connection, subscription_id: int) -> Row[Any] | None:
        return conn.execute(
            select(subscriptions).where(subscriptions.c.id == subscription_id)
        ).first()

    @staticmethod
    def _insert(conn: Connection, subscription: Subscription) -> Subscription:
        values = _to_row(subscription)
        if subscription.id is not None:
            values["id"] = subscription.id
        result = conn.execute(insert(subscriptions).values(**values))
        new_id = result.inserted_primary_key[0]
        logger.debug("Inserted subscription %s for user %s", new_id, subscription.user_id)
        return subscription.with_id(new_id)

    @staticmethod
    def _update(conn: Connection, subscription: Subscription) -> None:
        conn.execute(
            update(subscriptions)
            .where(subscriptions.c.id == subscription.id)
            .values(**_to_row(subscription))
        )
        logger.debug("Updated subscription %s", subscription.id)
