"""Pluggy hook specifications for slidegrid layout providers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from slidegrid.domain.layouts import LayoutDefinition

hookspec = pluggy.HookspecMarker("slidegrid")


class SlideGridHookSpec:
    """Hook specifications for the slidegrid plugin system."""

    @hookspec
    def register_layouts(self) -> list[LayoutDefinition] | None:
        """Return layouts to add to the catalog's system tier."""
