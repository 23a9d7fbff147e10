"""LayoutService — ServiceResult facade over catalog, resolver, and composer.

The engine raises; this facade catches the slidegrid error taxonomy and
turns it into structured ``ServiceResult`` failures for the CLI:

==========================  ==================
Exception                   ``error.code``
==========================  ==================
LayoutNotFoundError         ``NOT_FOUND``
LayoutCycleError            ``CYCLE``
CompositionError            ``INVALID_LAYOUT``
==========================  ==================
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from slidegrid.domain.errors import CompositionError, LayoutCycleError, LayoutNotFoundError, SlideGridError
from slidegrid.domain.merge import check_layout_compatibility
from slidegrid.services.catalog import LayoutCatalog
from slidegrid.services.composer import LayoutComposer
from slidegrid.services.resolver import LayoutResolver
from slidegrid.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from slidegrid.config.settings import SlideGridSettings
    from slidegrid.domain.layouts import LayoutDefinition, LayoutVariant

logger = logging.getLogger(__name__)


def _error_result(op: str, exc: SlideGridError) -> ServiceResult:
    if isinstance(exc, LayoutNotFoundError):
        return ServiceResult.failure(
            op, ErrorCode.NOT_FOUND, str(exc), {"name": exc.name, "available": exc.available}
        )
    if isinstance(exc, LayoutCycleError):
        return ServiceResult.failure(op, ErrorCode.CYCLE, str(exc), {"cycle": exc.cycle})
    if isinstance(exc, CompositionError):
        return ServiceResult.failure(op, ErrorCode.INVALID_LAYOUT, str(exc), {"errors": exc.errors})
    return ServiceResult.failure(op, ErrorCode.LAYOUT_ERROR, str(exc))


class LayoutService:
    """Layout inspection operations returning :class:`ServiceResult`."""

    def __init__(self, catalog: LayoutCatalog, resolver: LayoutResolver | None = None) -> None:
        self._catalog = catalog
        self._resolver = resolver or LayoutResolver(catalog)

    @property
    def catalog(self) -> LayoutCatalog:
        return self._catalog

    @property
    def resolver(self) -> LayoutResolver:
        return self._resolver

    def list_layouts(self) -> ServiceResult:
        """Every name visible in the catalog with the tier that supplies it."""
        items = []
        for name in self._catalog.list_names():
            layout, tier = self._catalog.get_with_tier(name)
            items.append(
                {
                    "name": name,
                    "description": layout.description,
                    "tier": tier.value,
                    "zones": layout.zone_names(),
                }
            )
        return ServiceResult.success("list_layouts", {"count": len(items), "items": items})

    def show_layout(
        self,
        name: str,
        deck_variants: Sequence[LayoutDefinition] | None = None,
        theme_layouts: Sequence[LayoutDefinition] | None = None,
    ) -> ServiceResult:
        """Resolve *name* and return its serialized definition."""
        try:
            layout = self._resolver.resolve_layout(name, deck_variants, theme_layouts)
        except SlideGridError as exc:
            logger.debug("show_layout failed for %s", name, exc_info=True)
            return _error_result("show_layout", exc)
        return ServiceResult.success("show_layout", {"layout": layout.to_dict()})

    def check_compatibility(
        self,
        first: str,
        second: str,
        deck_variants: Sequence[LayoutDefinition] | None = None,
        theme_layouts: Sequence[LayoutDefinition] | None = None,
    ) -> ServiceResult:
        """Resolve two layouts and report conflicting grid areas on shared zones."""
        try:
            a = self._resolver.resolve_layout(first, deck_variants, theme_layouts)
            b = self._resolver.resolve_layout(second, deck_variants, theme_layouts)
        except SlideGridError as exc:
            return _error_result("check_compatibility", exc)

        report = check_layout_compatibility(a, b)
        shared = sorted(set(a.zone_names()) & set(b.zone_names()))
        return ServiceResult.success(
            "check_compatibility",
            {
                "first": first,
                "second": second,
                "shared_zones": shared,
                "compatible": report.compatible,
                "conflicts": report.conflicts,
            },
            warnings=list(report.conflicts),
        )

    def validate_variant(self, variant: LayoutVariant) -> ServiceResult:
        """Run the composer's structural checks against an existing variant."""
        errors = LayoutComposer.from_variant(variant).validate()
        if errors:
            return _error_result("validate_variant", CompositionError(errors))
        return ServiceResult.success("validate_variant", {"name": variant.name, "valid": True})


def build_layout_service(settings: SlideGridSettings) -> LayoutService:
    """Wire a catalog, its plugins, and a resolver according to *settings*."""
    from slidegrid.plugins.builtins.layouts import BuiltinLayoutsPlugin
    from slidegrid.plugins.manager import PluginManager

    catalog = LayoutCatalog()
    plugins = PluginManager()
    if settings.catalog.builtins:
        plugins.register_plugin(BuiltinLayoutsPlugin(), name="builtin-layouts")
    if settings.catalog.plugins:
        plugins.discover_and_load()
    plugins.collect_layouts(catalog)

    resolver = LayoutResolver(catalog, cache_key=settings.resolver.cache_key)
    return LayoutService(catalog, resolver)
