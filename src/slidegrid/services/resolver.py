"""LayoutResolver — turn a layout name plus context into one concrete layout.

Resolution order for a name (highest precedence first):

1. Deck variants passed to the call. A match is processed: ``extends``
   applies zone diffs onto one resolved base, ``compose_from`` unions
   several resolved bases, and a variant with neither is used as-is.
2. Theme layouts passed to the call, taken as complete layouts.
3. The injected :class:`LayoutCatalog` (its own deck > theme > system
   precedence applies).

Bases named by ``extends``/``compose_from`` are resolved through the same
procedure with the same deck/theme lists, so inheritance chains may cross
tiers freely. A per-call stack of names being resolved turns
self-referencing chains into :class:`LayoutCycleError`.

Results are cached per resolution context. With the default ``"content"``
key strategy the key covers the name, the catalog version and a digest of
every deck/theme record, so any change to the inputs misses the cache.
The ``"length"`` strategy keys on ``(name, len(deck), len(theme))`` only;
owners using it must call :meth:`LayoutResolver.clear_cache` whenever the
lists or the catalog change.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from slidegrid.domain.errors import (
    CompositionError,
    DuplicateZoneError,
    LayoutCycleError,
    LayoutNotFoundError,
)
from slidegrid.domain.layouts import LayoutDefinition, LayoutVariant, Zone
from slidegrid.domain.merge import apply_zone_patch, extend_layout, union_zones
from slidegrid.domain.types import TIER_PRIORITY, LayoutSource
from slidegrid.services.catalog import LayoutCatalog

CacheKeyStrategy = Literal["content", "length"]

logger = logging.getLogger(__name__)

_DEFINITION_FIELDS = set(LayoutDefinition.model_fields)


def _as_definition(layout: LayoutDefinition, source: LayoutSource, priority: int) -> LayoutDefinition:
    """Plain definition copy of *layout* tagged with *source* and *priority*."""
    data = layout.model_dump(include=_DEFINITION_FIELDS)
    data.update(source=source, priority=priority)
    return LayoutDefinition.model_validate(data)


def _digest(layouts: Sequence[LayoutDefinition]) -> str:
    h = hashlib.sha256()
    for layout in layouts:
        h.update(type(layout).__name__.encode())
        h.update(layout.model_dump_json().encode())
        h.update(b"\0")
    return h.hexdigest()


@dataclass
class _Context:
    """State shared by one top-level ``resolve_layout`` call."""

    deck: Sequence[LayoutDefinition]
    theme: Sequence[LayoutDefinition]
    fingerprint: tuple[Hashable, ...]
    stack: list[str] = field(default_factory=list)


class LayoutResolver:
    """Resolve layout names against a catalog plus deck/theme records."""

    def __init__(
        self,
        catalog: LayoutCatalog,
        *,
        cache_key: CacheKeyStrategy = "content",
    ) -> None:
        if cache_key not in ("content", "length"):
            raise ValueError(f"Unknown cache key strategy: {cache_key!r}")
        self._catalog = catalog
        self._cache_key = cache_key
        self._cache: dict[tuple[Hashable, ...], LayoutDefinition] = {}

    @property
    def catalog(self) -> LayoutCatalog:
        return self._catalog

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        """Drop every cached resolution."""
        self._cache.clear()
        logger.debug("Cleared layout cache")

    def resolve_layout(
        self,
        name: str,
        deck_variants: Sequence[LayoutDefinition] | None = None,
        theme_layouts: Sequence[LayoutDefinition] | None = None,
    ) -> LayoutDefinition:
        """Resolve *name* to a concrete layout.

        Returns the cached object unchanged when the resolution context is
        unchanged, so callers may compare results by identity.

        Layouts found in the catalog are tagged with the catalog tier that
        supplied them (system, theme or deck), not always ``system``.

        Raises:
            LayoutNotFoundError: *name* (or a base it needs) is in no tier.
                ``available`` lists catalog names plus the deck and theme
                record names passed to this call.
            LayoutCycleError: ``extends``/``compose_from`` loops back on itself.
            CompositionError: A deck variant is structurally invalid.
        """
        deck = list(deck_variants or ())
        theme = list(theme_layouts or ())
        ctx = _Context(deck=deck, theme=theme, fingerprint=self._fingerprint(deck, theme))
        return self._resolve(name, ctx)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fingerprint(
        self,
        deck: Sequence[LayoutDefinition],
        theme: Sequence[LayoutDefinition],
    ) -> tuple[Hashable, ...]:
        if self._cache_key == "length":
            return (len(deck), len(theme))
        return (self._catalog.version, _digest(deck), _digest(theme))

    def _resolve(self, name: str, ctx: _Context) -> LayoutDefinition:
        key = (name, *ctx.fingerprint)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Layout cache hit: %s", name)
            return cached

        if name in ctx.stack:
            cycle = [*ctx.stack[ctx.stack.index(name) :], name]
            logger.warning("Layout cycle detected: %s", " -> ".join(cycle))
            raise LayoutCycleError(cycle)

        ctx.stack.append(name)
        try:
            layout = self._resolve_uncached(name, ctx)
        finally:
            ctx.stack.pop()

        self._cache[key] = layout
        logger.debug(
            "Resolved layout %s from %s tier (%d zones)",
            name,
            layout.source.value,
            len(layout.zones),
        )
        return layout

    def _resolve_uncached(self, name: str, ctx: _Context) -> LayoutDefinition:
        for variant in ctx.deck:
            if variant.name == name:
                return self._process_variant(variant, ctx)

        for layout in ctx.theme:
            if layout.name == name:
                return _as_definition(layout, LayoutSource.THEME, TIER_PRIORITY[LayoutSource.THEME])

        try:
            layout, tier = self._catalog.get_with_tier(name)
        except LayoutNotFoundError as exc:
            known = [*exc.available, *(r.name for r in ctx.deck), *(r.name for r in ctx.theme)]
            raise LayoutNotFoundError(name, known) from exc
        return _as_definition(layout, tier, TIER_PRIORITY[tier])

    def _process_variant(self, record: LayoutDefinition, ctx: _Context) -> LayoutDefinition:
        variant = record if isinstance(record, LayoutVariant) else LayoutVariant(**record.model_dump())
        priority = variant.priority or TIER_PRIORITY[LayoutSource.DECK]

        if variant.extends and variant.compose_from:
            raise CompositionError(
                [f'Layout "{variant.name}" cannot both extend and compose from other layouts']
            )

        if variant.extends:
            base = self._resolve(variant.extends, ctx)
            result = self._extend(base, variant)
        elif variant.compose_from:
            bases = [self._resolve(base_name, ctx) for base_name in variant.compose_from]
            result = self._compose(bases, variant)
        else:
            result = variant

        return _as_definition(result, LayoutSource.DECK, priority)

    @staticmethod
    def _extend(base: LayoutDefinition, variant: LayoutVariant) -> LayoutDefinition:
        try:
            extended = extend_layout(
                base,
                name=variant.name,
                description=variant.description or base.description,
                add_zones=variant.additional_zones,
                remove_zones=variant.remove_zones,
                modify_zones=variant.modify_zones,
                grid_template_areas=variant.grid_template_areas,
                grid_template_columns=variant.grid_template_columns,
                grid_template_rows=variant.grid_template_rows,
                custom_styles=variant.custom_styles,
            )
        except DuplicateZoneError as exc:
            raise DuplicateZoneError(exc.zone, variant.name) from exc

        present = set(extended.zone_names())
        own = [z for z in variant.zones if z.name not in present]
        if not own:
            return extended
        return extended.model_copy(update={"zones": (*extended.zones, *own)})

    @staticmethod
    def _compose(bases: list[LayoutDefinition], variant: LayoutVariant) -> LayoutDefinition:
        zones: dict[str, Zone] = {z.name: z for z in union_zones(b.zones for b in bases)}

        for zone in variant.zones:
            zones[zone.name] = zone

        for removed in variant.remove_zones:
            zones.pop(removed, None)

        for zone_name, patch in variant.modify_zones.items():
            if zone_name in zones:
                zones[zone_name] = apply_zone_patch(zones[zone_name], patch)

        # Patches may rename zones; re-key so later checks see current names.
        rekeyed: dict[str, Zone] = {}
        for zone in zones.values():
            if zone.name in rekeyed:
                raise DuplicateZoneError(zone.name, variant.name)
            rekeyed[zone.name] = zone
        zones = rekeyed

        for zone in variant.additional_zones:
            if zone.name in zones:
                raise DuplicateZoneError(zone.name, variant.name)
            zones[zone.name] = zone

        first = bases[0]
        return LayoutDefinition(
            name=variant.name,
            description=variant.description,
            zones=tuple(zones.values()),
            grid_template_areas=variant.grid_template_areas or first.grid_template_areas,
            grid_template_columns=variant.grid_template_columns or first.grid_template_columns,
            grid_template_rows=variant.grid_template_rows or first.grid_template_rows,
            custom_styles=variant.custom_styles or first.custom_styles,
        )
