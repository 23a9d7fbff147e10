"""Zone merge and diff utilities.

Pure functions, no resolver state. The resolver builds on the same
primitives (:func:`apply_zone_patch`, :func:`union_zones`), and authoring
tools can call the public helpers directly to combine or inspect layouts.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

from slidegrid.domain.errors import DuplicateZoneError, LayoutMergeError
from slidegrid.domain.layouts import LayoutDefinition, Zone, ZonePatch

ConflictResolution = Literal["first", "last"]

_GRID_FIELDS = (
    "grid_template_areas",
    "grid_template_columns",
    "grid_template_rows",
    "custom_styles",
)


@dataclass(frozen=True)
class CompatibilityReport:
    """Outcome of :func:`check_layout_compatibility`."""

    compatible: bool
    conflicts: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def apply_zone_patch(zone: Zone, patch: ZonePatch | Mapping[str, Any]) -> Zone:
    """Return *zone* with the fields set on *patch* overwritten."""
    if not isinstance(patch, ZonePatch):
        patch = ZonePatch.model_validate(patch)
    changes = patch.changes()
    if not changes:
        return zone
    return zone.model_copy(update=changes)


def union_zones(
    sources: Iterable[Iterable[Zone]],
    *,
    conflict_resolution: ConflictResolution = "first",
) -> list[Zone]:
    """Ordered union of zones across *sources*.

    Position is fixed by the first occurrence of a name. With ``"first"``
    that occurrence also keeps its attributes; with ``"last"`` later
    occurrences replace the attributes in place.
    """
    merged: dict[str, Zone] = {}
    for zones in sources:
        for zone in zones:
            if zone.name in merged and conflict_resolution == "first":
                continue
            merged[zone.name] = zone
    return list(merged.values())


def _grid_overrides(overrides: Mapping[str, str | None], base: LayoutDefinition) -> dict[str, Any]:
    return {key: overrides.get(key) or getattr(base, key) for key in _GRID_FIELDS}


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def merge_layouts(
    layouts: Sequence[LayoutDefinition],
    *,
    name: str | None = None,
    description: str | None = None,
    conflict_resolution: ConflictResolution = "first",
) -> LayoutDefinition:
    """Merge *layouts* into one, keeping every unique zone.

    Grid templates, style block, source and priority come from the first
    layout, or from the last one when ``conflict_resolution="last"``.
    """
    if not layouts:
        raise LayoutMergeError("merge_layouts requires at least one layout")
    if conflict_resolution not in ("first", "last"):
        raise LayoutMergeError(f"Unknown conflict resolution: {conflict_resolution!r}")

    names = [layout.name for layout in layouts]
    base = layouts[-1] if conflict_resolution == "last" else layouts[0]
    zones = union_zones((layout.zones for layout in layouts), conflict_resolution=conflict_resolution)
    return base.model_copy(
        update={
            "name": name or "merged-" + "-".join(names),
            "description": description or "Merged from: " + ", ".join(names),
            "zones": tuple(zones),
        },
        deep=True,
    )


def extend_layout(
    base: LayoutDefinition,
    *,
    name: str | None = None,
    description: str | None = None,
    add_zones: Sequence[Zone] | None = None,
    remove_zones: Iterable[str] | None = None,
    modify_zones: Mapping[str, ZonePatch | Mapping[str, Any]] | None = None,
    grid_template_areas: str | None = None,
    grid_template_columns: str | None = None,
    grid_template_rows: str | None = None,
    custom_styles: str | None = None,
) -> LayoutDefinition:
    """Derive a layout from *base* by removing, modifying, then adding zones.

    Raises:
        DuplicateZoneError: A patch renames a zone onto another zone's name,
            or an added zone's name is already present after removals.
    """
    removed = set(remove_zones or ())
    patches = modify_zones or {}

    zones: list[Zone] = []
    for zone in base.zones:
        if zone.name in removed:
            continue
        patch = patches.get(zone.name)
        zones.append(apply_zone_patch(zone, patch) if patch is not None else zone)

    present: set[str] = set()
    for zone in zones:
        if zone.name in present:
            raise DuplicateZoneError(zone.name)
        present.add(zone.name)

    for zone in add_zones or ():
        if zone.name in present:
            raise DuplicateZoneError(zone.name)
        zones.append(zone)
        present.add(zone.name)

    grid = _grid_overrides(
        {
            "grid_template_areas": grid_template_areas,
            "grid_template_columns": grid_template_columns,
            "grid_template_rows": grid_template_rows,
            "custom_styles": custom_styles,
        },
        base,
    )
    return base.model_copy(
        update={
            "name": name or f"{base.name}-extended",
            "description": description or f"Extended from {base.name}",
            "zones": tuple(zones),
            **grid,
        },
    )


def override_layout(
    base: LayoutDefinition,
    *,
    zones: Mapping[str, Zone] | None = None,
    name: str | None = None,
    description: str | None = None,
    grid_template_areas: str | None = None,
    grid_template_columns: str | None = None,
    grid_template_rows: str | None = None,
    custom_styles: str | None = None,
) -> LayoutDefinition:
    """Replace or insert specific zones by name, leaving the rest untouched.

    Replaced zones keep their position; new names are appended.
    """
    merged: dict[str, Zone] = {z.name: z for z in base.zones}
    for zone_name, zone in (zones or {}).items():
        merged[zone_name] = zone

    grid = _grid_overrides(
        {
            "grid_template_areas": grid_template_areas,
            "grid_template_columns": grid_template_columns,
            "grid_template_rows": grid_template_rows,
            "custom_styles": custom_styles,
        },
        base,
    )
    return base.model_copy(
        update={
            "name": name or base.name,
            "description": description or base.description,
            "zones": tuple(merged.values()),
            **grid,
        },
    )


def clone_layout(layout: LayoutDefinition) -> LayoutDefinition:
    """Deep copy of *layout*."""
    return layout.model_copy(deep=True)


def has_required_zones(layout: LayoutDefinition, required_zones: Iterable[str]) -> bool:
    """Whether *layout* defines every zone named in *required_zones*."""
    names = set(layout.zone_names())
    return all(required in names for required in required_zones)


def get_zone_names(layout: LayoutDefinition) -> list[str]:
    return layout.zone_names()


def find_zone(layout: LayoutDefinition, zone_name: str) -> Zone | None:
    for zone in layout.zones:
        if zone.name == zone_name:
            return zone
    return None


def check_layout_compatibility(
    first: LayoutDefinition,
    second: LayoutDefinition,
) -> CompatibilityReport:
    """Report zones shared by both layouts whose grid areas disagree.

    A zone without an explicit ``grid_area`` on either side never
    conflicts.
    """
    conflicts: list[str] = []
    for zone in first.zones:
        other = find_zone(second, zone.name)
        if other is None:
            continue
        if zone.grid_area and other.grid_area and zone.grid_area != other.grid_area:
            conflicts.append(
                f'Zone "{zone.name}" has conflicting gridArea: '
                f'"{zone.grid_area}" vs "{other.grid_area}"'
            )
    return CompatibilityReport(compatible=not conflicts, conflicts=conflicts)
