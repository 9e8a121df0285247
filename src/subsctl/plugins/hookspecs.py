"""Pluggy hook specifications for subscription lifecycle events.

Each hook fires after the corresponding storage write has committed.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("subsctl")
hookimpl = pluggy.HookimplMarker("subsctl")


class SubsctlHookSpec:
    """Hook specifications for the subsctl plugin system."""

    @hookspec
    def post_upsert(
        self,
        subscription_id: int,
        user_id: int,
        provider: str,
        status: str,
    ) -> None:
        """Called after a subscription is created or replaced."""

    @hookspec
    def post_cancel(self, subscription_id: int, user_id: int) -> None:
        """Called after a subscription is canceled."""

    @hookspec
    def post_expire(self, subscription_id: int, user_id: int, expired_at: str) -> None:
        """Called after a subscription is expired."""

    @hookspec
    def post_delete(self, subscription_id: int) -> None:
        """Called after a subscription row is deleted."""
