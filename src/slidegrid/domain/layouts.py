"""Layout value models: zones, definitions, and deck-level variants.

All models are frozen. Transforms never mutate a definition in place;
they build a new one via ``model_copy(update=...)``.

Field names are snake_case in Python. The serialized shape handed to
renderers and debug collectors uses camelCase (``gridArea``,
``gridTemplateAreas``, ``composeFrom`` ...), and both spellings are
accepted on input so theme and deck records can be validated straight
from plain dicts.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from slidegrid.domain.types import TIER_PRIORITY, LayoutSource

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class Zone(BaseModel):
    """A named placement slot within a layout."""

    model_config = _MODEL_CONFIG

    name: str
    grid_area: str | None = None
    description: str | None = None

    @property
    def area(self) -> str:
        """Grid area used for placement; falls back to the zone name."""
        return self.grid_area or self.name


class ZonePatch(BaseModel):
    """Partial zone used by ``modify_zones``.

    Only fields explicitly set on the patch overwrite the target zone.
    """

    model_config = _MODEL_CONFIG

    name: str | None = None
    grid_area: str | None = None
    description: str | None = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class LayoutDefinition(BaseModel):
    """A concrete layout: ordered zones plus grid configuration.

    ``source`` and ``priority`` record which tier produced the definition.
    Priority is diagnostic only; tier precedence is structural.
    """

    model_config = _MODEL_CONFIG

    name: str
    description: str = ""
    zones: tuple[Zone, ...] = ()
    grid_template_areas: str | None = None
    grid_template_columns: str | None = None
    grid_template_rows: str | None = None
    custom_styles: str | None = None
    source: LayoutSource = LayoutSource.SYSTEM
    priority: int = TIER_PRIORITY[LayoutSource.SYSTEM]

    def zone_names(self) -> list[str]:
        return [z.name for z in self.zones]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase shape consumed by renderers."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LayoutVariant(LayoutDefinition):
    """Authoring-time layout record with inheritance and zone diffs.

    ``extends`` and ``compose_from`` are mutually exclusive; that and the
    other structural rules are enforced by :class:`LayoutComposer`, not
    here, so variants built by hand are accepted as-is.
    ``overrides`` is advisory metadata and is never read by the resolver.
    """

    source: LayoutSource = LayoutSource.DECK
    priority: int = TIER_PRIORITY[LayoutSource.DECK]

    extends: str | None = None
    compose_from: tuple[str, ...] | None = None
    overrides: str | None = None
    additional_zones: tuple[Zone, ...] = ()
    remove_zones: tuple[str, ...] = ()
    modify_zones: dict[str, ZonePatch] = Field(default_factory=dict)
