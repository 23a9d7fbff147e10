"""LayoutComposer — checked, incremental assembly of a deck layout variant.

Two kinds of checks, like filling out a form:

- Immediate: adding a zone whose name is already present raises
  :class:`DuplicateZoneError` on the spot.
- Deferred: :meth:`LayoutComposer.validate` collects every structural
  problem, and :meth:`LayoutComposer.build` raises them together as one
  :class:`CompositionError`.

``build()`` returns a frozen :class:`LayoutVariant` built from copies of
the draft, so continuing to call builder methods never changes a value
that was already built.

Usage::

    variant = (
        LayoutComposer("extended-title")
        .extends("title")
        .remove_zones(["subtitle"])
        .add_additional_zones([Zone(name="footer")])
        .build()
    )
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Self

from slidegrid.domain.errors import CompositionError, DuplicateZoneError
from slidegrid.domain.layouts import LayoutVariant, Zone, ZonePatch
from slidegrid.domain.types import TIER_PRIORITY, LayoutSource

logger = logging.getLogger(__name__)

ZoneLike = Zone | Mapping[str, Any]


def _as_zone(zone: ZoneLike) -> Zone:
    return zone if isinstance(zone, Zone) else Zone.model_validate(zone)


class LayoutComposer:
    """Fluent builder for one :class:`LayoutVariant`."""

    def __init__(self, name: str, description: str = "") -> None:
        self._name = name
        self._description = description
        self._zones: list[Zone] = []
        self._grid_template_areas: str | None = None
        self._grid_template_columns: str | None = None
        self._grid_template_rows: str | None = None
        self._custom_styles: str | None = None
        self._priority = TIER_PRIORITY[LayoutSource.DECK]
        self._extends: str | None = None
        self._compose_from: list[str] | None = None
        self._overrides: str | None = None
        self._additional_zones: list[Zone] | None = None
        self._remove_zones: list[str] | None = None
        self._modify_zones: dict[str, ZonePatch] | None = None

    @classmethod
    def create(cls, name: str, description: str = "") -> Self:
        return cls(name, description)

    @classmethod
    def from_variant(cls, variant: LayoutVariant) -> Self:
        """Load an existing variant into a composer, e.g. to validate it.

        Own zones are copied without the immediate duplicate check so that
        :meth:`validate` can report duplicates instead.
        """
        composer = cls(variant.name, variant.description)
        composer._zones = list(variant.zones)
        composer._grid_template_areas = variant.grid_template_areas
        composer._grid_template_columns = variant.grid_template_columns
        composer._grid_template_rows = variant.grid_template_rows
        composer._custom_styles = variant.custom_styles
        composer._priority = variant.priority
        composer._extends = variant.extends
        composer._compose_from = list(variant.compose_from) if variant.compose_from else None
        composer._overrides = variant.overrides
        composer._additional_zones = list(variant.additional_zones) or None
        composer._remove_zones = list(variant.remove_zones) or None
        composer._modify_zones = dict(variant.modify_zones) or None
        return composer

    # ------------------------------------------------------------------
    # Zones
    # ------------------------------------------------------------------

    def add_zone(
        self,
        name: str,
        grid_area: str | None = None,
        description: str | None = None,
    ) -> Self:
        """Append a zone to the variant's own zones.

        Raises:
            DuplicateZoneError: A zone named *name* was already added.
        """
        if any(z.name == name for z in self._zones):
            raise DuplicateZoneError(name, self._name)
        self._zones.append(Zone(name=name, grid_area=grid_area or None, description=description or None))
        return self

    def add_zones(self, zones: Iterable[ZoneLike]) -> Self:
        for zone in zones:
            z = _as_zone(zone)
            self.add_zone(z.name, z.grid_area, z.description)
        return self

    def add_additional_zones(self, zones: Iterable[ZoneLike]) -> Self:
        """Zones appended after everything inherited or composed."""
        if self._additional_zones is None:
            self._additional_zones = []
        self._additional_zones.extend(_as_zone(z) for z in zones)
        return self

    def remove_zones(self, zone_names: Iterable[str]) -> Self:
        if self._remove_zones is None:
            self._remove_zones = []
        self._remove_zones.extend(zone_names)
        return self

    def modify_zone(self, zone_name: str, patch: ZonePatch | Mapping[str, Any]) -> Self:
        if self._modify_zones is None:
            self._modify_zones = {}
        if not isinstance(patch, ZonePatch):
            patch = ZonePatch.model_validate(patch)
        self._modify_zones[zone_name] = patch
        return self

    # ------------------------------------------------------------------
    # Grid and metadata
    # ------------------------------------------------------------------

    def set_grid_template_areas(self, areas: str) -> Self:
        self._grid_template_areas = areas
        return self

    def set_grid_template_columns(self, columns: str) -> Self:
        self._grid_template_columns = columns
        return self

    def set_grid_template_rows(self, rows: str) -> Self:
        self._grid_template_rows = rows
        return self

    def set_custom_styles(self, styles: str) -> Self:
        self._custom_styles = styles
        return self

    def set_priority(self, priority: int) -> Self:
        self._priority = priority
        return self

    def extends(self, layout_name: str) -> Self:
        self._extends = layout_name
        return self

    def compose_from(self, layout_names: Sequence[str]) -> Self:
        if not layout_names:
            raise CompositionError(["compose_from requires at least one layout name"])
        self._compose_from = list(layout_names)
        return self

    def overrides(self, layout_name: str) -> Self:
        """Mark the variant as replacing *layout_name* (advisory only)."""
        self._overrides = layout_name
        return self

    # ------------------------------------------------------------------
    # Validation and build
    # ------------------------------------------------------------------

    def validate(self) -> list[str]:
        """Return every structural problem; never raises."""
        errors: list[str] = []

        if not self._name:
            errors.append("Layout name is required")

        if not self._extends and not self._compose_from:
            if not self._zones:
                errors.append("Layout must have at least one zone (unless extending or composing)")
            elif not self._grid_template_areas and not self._custom_styles:
                errors.append(
                    "Layout should define grid_template_areas or custom_styles for zone positioning"
                )

        if self._extends and self._compose_from:
            errors.append("Layout cannot both extend and compose from other layouts")

        own_names: set[str] = set()
        for zone in self._zones:
            if zone.name in own_names:
                errors.append(f'Duplicate zone name: "{zone.name}"')
            own_names.add(zone.name)

        additional_names: set[str] = set()
        for zone in self._additional_zones or ():
            if zone.name in additional_names:
                errors.append(f'Duplicate additional zone name: "{zone.name}"')
            additional_names.add(zone.name)
            if zone.name in own_names:
                errors.append(f'Additional zone "{zone.name}" conflicts with existing zone')

        for removed in dict.fromkeys(self._remove_zones or ()):
            if removed in additional_names:
                errors.append(f'Cannot both remove and add zone: "{removed}"')

        return errors

    def build(self) -> LayoutVariant:
        """Validate and return an independent, frozen variant.

        Raises:
            CompositionError: Aggregates every problem :meth:`validate` found.
        """
        errors = self.validate()
        if errors:
            raise CompositionError(errors)

        variant = LayoutVariant(
            name=self._name,
            description=self._description,
            zones=tuple(self._zones),
            grid_template_areas=self._grid_template_areas,
            grid_template_columns=self._grid_template_columns,
            grid_template_rows=self._grid_template_rows,
            custom_styles=self._custom_styles,
            priority=self._priority,
            extends=self._extends,
            compose_from=tuple(self._compose_from) if self._compose_from else None,
            overrides=self._overrides,
            additional_zones=tuple(self._additional_zones or ()),
            remove_zones=tuple(self._remove_zones or ()),
            modify_zones=dict(self._modify_zones or {}),
        )
        logger.debug("Built layout variant: %s", variant.name)
        return variant

    # ------------------------------------------------------------------
    # One-call constructors
    # ------------------------------------------------------------------

    @classmethod
    def simple(
        cls,
        name: str,
        description: str,
        zones: Iterable[ZoneLike],
        grid_template_areas: str,
    ) -> LayoutVariant:
        """Standalone layout: zones plus grid areas."""
        return cls(name, description).add_zones(zones).set_grid_template_areas(grid_template_areas).build()

    @classmethod
    def extend(
        cls,
        name: str,
        base_layout: str,
        *,
        description: str | None = None,
        additional_zones: Iterable[ZoneLike] | None = None,
        remove_zones: Iterable[str] | None = None,
        modify_zones: Mapping[str, ZonePatch | Mapping[str, Any]] | None = None,
    ) -> LayoutVariant:
        """Variant inheriting from *base_layout* with zone diffs."""
        composer = cls(name, description or f"Extended from {base_layout}").extends(base_layout)
        if additional_zones:
            composer.add_additional_zones(additional_zones)
        if remove_zones:
            composer.remove_zones(remove_zones)
        for zone_name, patch in (modify_zones or {}).items():
            composer.modify_zone(zone_name, patch)
        return composer.build()

    @classmethod
    def compose(
        cls,
        name: str,
        description: str,
        from_layouts: Sequence[str],
        *,
        additional_zones: Iterable[ZoneLike] | None = None,
        remove_zones: Iterable[str] | None = None,
        grid_template_areas: str | None = None,
    ) -> LayoutVariant:
        """Variant composed from several named layouts."""
        composer = cls(name, description).compose_from(from_layouts)
        if additional_zones:
            composer.add_additional_zones(additional_zones)
        if remove_zones:
            composer.remove_zones(remove_zones)
        if grid_template_areas:
            composer.set_grid_template_areas(grid_template_areas)
        return composer.build()
