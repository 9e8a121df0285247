"""Synchronous lifecycle event dispatch via pluggy.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from subsctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class EventBus:
    """Dispatches lifecycle hooks to registered plugins in-process.

    Parameters:
        plugin_manager: Loaded PluginManager for hook dispatch.
    """

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> bool:
        """Call *hook_name* with *payload* on every plugin.

        Returns False if a plugin raised; the error is logged, not re-raised.
        Unknown hooks are ignored.
        """
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            logger.debug("No hook named %s", hook_name)
            return True

        try:
            hook_fn(**payload)
        except Exception:
            logger.warning("Hook %s failed", hook_name, exc_info=True)
            return False
        return True
