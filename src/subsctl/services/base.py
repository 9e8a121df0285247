"""BaseService — shared plumbing for subsctl services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from subsctl.plugins.event_bus import EventBus

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes that publish lifecycle events.

    The event bus is optional. Without one, :meth:`_dispatch_event` is a
    no-op.
    """

    def __init__(self, *, event_bus: EventBus | None = None) -> None:
        self._event_bus = event_bus

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Dispatch a lifecycle event.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._event_bus is None:
            return
        if not self._event_bus.dispatch(hook_name, payload):
            logger.debug("Event dispatch failed for %s", hook_name)
            warnings.append(f"Event dispatch failed for {hook_name}")
