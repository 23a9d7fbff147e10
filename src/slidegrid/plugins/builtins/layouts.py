"""Built-in layouts plugin: contributes the eleven stock layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

from slidegrid.domain.builtins import BUILTIN_LAYOUTS
from slidegrid.domain.layouts import LayoutDefinition
from slidegrid.domain.types import LayoutSource

if TYPE_CHECKING:
    from slidegrid.services.catalog import LayoutCatalog

hookimpl = pluggy.HookimplMarker("slidegrid")


class BuiltinLayoutsPlugin:
    """Provides :data:`~slidegrid.domain.builtins.BUILTIN_LAYOUTS`."""

    @hookimpl
    def register_layouts(self) -> list[LayoutDefinition]:
        return list(BUILTIN_LAYOUTS)


def register_builtin_layouts(catalog: LayoutCatalog) -> None:
    """Put the stock layouts straight into *catalog*'s system tier, no plugin manager."""
    for layout in BUILTIN_LAYOUTS:
        catalog.register(layout.name, layout, LayoutSource.SYSTEM)
