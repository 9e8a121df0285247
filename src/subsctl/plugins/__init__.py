"""Extension layer — lifecycle hooks via pluggy.

Discovery: entry_points (pip-installed) in the ``subsctl.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from subsctl.plugins.event_bus import EventBus
from subsctl.plugins.manager import PluginManager

__all__ = ["EventBus", "PluginManager"]
