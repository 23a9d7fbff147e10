"""Layout provider plugins on top of pluggy.

Providers come from two places: entry points in the ``slidegrid.plugins``
group, and objects registered directly (the built-in layouts plugin).
:meth:`PluginManager.collect_layouts` puts everything they provide into
the system tier of a :class:`LayoutCatalog`.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

import pluggy

from slidegrid.domain.layouts import LayoutDefinition
from slidegrid.domain.types import LayoutSource
from slidegrid.plugins.hookspecs import SlideGridHookSpec

if TYPE_CHECKING:
    from slidegrid.services.catalog import LayoutCatalog

PROJECT_NAME = "slidegrid"
ENTRY_POINT_GROUP = "slidegrid.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Registry of layout providers."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(SlideGridHookSpec)
        self._discovered = False

    @property
    def is_loaded(self) -> bool:
        """True once entry points have been scanned."""
        return self._discovered

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def discover_and_load(self) -> list[str]:
        """Register entry-point providers; returns every registered plugin name."""
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d entry-point plugins from %s", count, ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        self._discovered = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        plugin_name = name or type(plugin).__name__
        self._pm.register(plugin, name=plugin_name)
        logger.debug("Registered layout plugin %s", plugin_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [name for name, _ in self._named_plugins()]

    def collect_layouts(self, catalog: LayoutCatalog) -> list[str]:
        """Register every provided layout into *catalog*'s system tier.

        Providers are called one at a time so a provider that raises, or
        returns something other than a list, only loses its own layouts.
        Returns the registered names in order.
        """
        registered: list[str] = []
        for plugin_name, plugin in self._named_plugins():
            provide = getattr(plugin, "register_layouts", None)
            if provide is None:
                continue
            try:
                provided = provide()
            except Exception:
                logger.warning("Layout plugin %s failed", plugin_name, exc_info=True)
                continue
            if provided is None:
                continue
            if not isinstance(provided, list | tuple):
                logger.warning(
                    "Layout plugin %s returned %s, expected a list",
                    plugin_name,
                    type(provided).__name__,
                )
                continue
            for layout in provided:
                if isinstance(layout, LayoutDefinition):
                    catalog.register(layout.name, layout, LayoutSource.SYSTEM)
                    registered.append(layout.name)
                else:
                    logger.warning("Layout plugin %s provided a non-layout: %r", plugin_name, layout)

        logger.debug("Collected %d plugin layouts", len(registered))
        return registered

    def _named_plugins(self) -> Iterator[tuple[str, object]]:
        for plugin in self._pm.get_plugins():
            yield self._pm.get_name(plugin) or type(plugin).__name__, plugin

    def _instantiate_class_plugins(self) -> None:
        # An entry point may name a class; its hooks need an instance.
        for plugin_name, plugin in list(self._named_plugins()):
            if not inspect.isclass(plugin):
                continue
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Could not instantiate layout plugin %s", plugin_name, exc_info=True)
                continue
            self._pm.register(instance, name=plugin_name)
