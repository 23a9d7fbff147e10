"""Extension layer: layout provider plugins via pluggy.

Discovery: entry points in the ``slidegrid.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from slidegrid.plugins.manager import PluginManager

__all__ = ["PluginManager"]
