"""Tests for LayoutComposer — fluent variant building and validation."""

from __future__ import annotations

import pytest

from slidegrid.domain.errors import CompositionError, DuplicateZoneError
from slidegrid.domain.layouts import LayoutVariant, Zone, ZonePatch
from slidegrid.domain.types import LayoutSource
from slidegrid.services.composer import LayoutComposer


class TestAddZone:
    def test_duplicate_raises_immediately(self) -> None:
        composer = LayoutComposer("hero").add_zone("x")
        with pytest.raises(DuplicateZoneError) as exc_info:
            composer.add_zone("x")
        assert exc_info.value.zone == "x"
        assert str(exc_info.value) == 'Zone "x" already exists in layout "hero"'

    def test_add_zones_accepts_dicts_and_models(self) -> None:
        variant = (
            LayoutComposer("hero")
            .add_zones([{"name": "title", "gridArea": "top"}, Zone(name="body")])
            .set_grid_template_areas('"top" "body"')
            .build()
        )
        assert variant.zone_names() == ["title", "body"]
        assert variant.zones[0].grid_area == "top"

    def test_empty_grid_area_stored_as_none(self) -> None:
        variant = LayoutComposer("a").add_zone("x", "").set_custom_styles(".x {}").build()
        assert variant.zones[0].grid_area is None


class TestValidate:
    def test_valid_standalone_layout(self) -> None:
        composer = LayoutComposer("a").add_zone("x", "x").set_grid_template_areas('"x"')
        assert composer.validate() == []

    def test_name_required(self) -> None:
        composer = LayoutComposer("").add_zone("x").set_grid_template_areas('"x"')
        assert "Layout name is required" in composer.validate()

    def test_zones_required_without_base(self) -> None:
        errors = LayoutComposer("a").validate()
        assert "Layout must have at least one zone (unless extending or composing)" in errors

    def test_positioning_required_for_standalone(self) -> None:
        errors = LayoutComposer("a").add_zone("x").validate()
        assert errors == [
            "Layout should define grid_template_areas or custom_styles for zone positioning"
        ]

    def test_custom_styles_satisfy_positioning(self) -> None:
        assert LayoutComposer("a").add_zone("x").set_custom_styles(".x {}").validate() == []

    def test_extending_needs_no_zones(self) -> None:
        assert LayoutComposer("a").extends("title").validate() == []

    def test_extends_and_compose_from_rejected(self) -> None:
        errors = LayoutComposer("a").extends("title").compose_from(["content"]).validate()
        assert "Layout cannot both extend and compose from other layouts" in errors

    def test_additional_zone_duplicates(self) -> None:
        errors = (
            LayoutComposer("a")
            .extends("title")
            .add_additional_zones([Zone(name="footer"), Zone(name="footer")])
            .validate()
        )
        assert 'Duplicate additional zone name: "footer"' in errors

    def test_additional_zone_conflicts_with_own_zone(self) -> None:
        errors = (
            LayoutComposer("a")
            .add_zone("footer")
            .set_grid_template_areas('"footer"')
            .add_additional_zones([Zone(name="footer")])
            .validate()
        )
        assert 'Additional zone "footer" conflicts with existing zone' in errors

    def test_remove_and_add_same_zone(self) -> None:
        errors = (
            LayoutComposer("a")
            .extends("title")
            .remove_zones(["footer"])
            .add_additional_zones([Zone(name="footer")])
            .validate()
        )
        assert errors == ['Cannot both remove and add zone: "footer"']

    def test_duplicate_own_zones_from_variant(self) -> None:
        variant = LayoutVariant(
            name="a",
            zones=(Zone(name="x"), Zone(name="x")),
            grid_template_areas='"x"',
        )
        assert 'Duplicate zone name: "x"' in LayoutComposer.from_variant(variant).validate()

    def test_validate_never_raises(self) -> None:
        composer = LayoutComposer("").extends("a").compose_from(["b"])
        assert len(composer.validate()) == 2


class TestBuild:
    def test_build_raises_all_errors(self) -> None:
        composer = (
            LayoutComposer("a")
            .extends("title")
            .compose_from(["content"])
            .add_additional_zones([Zone(name="x"), Zone(name="x")])
        )
        with pytest.raises(CompositionError) as exc_info:
            composer.build()
        assert len(exc_info.value.errors) == 2
        assert 'Duplicate additional zone name: "x"' in str(exc_info.value)

    def test_build_returns_deck_variant(self) -> None:
        variant = LayoutComposer("a", "Hero").add_zone("x", "x").set_grid_template_areas('"x"').build()
        assert isinstance(variant, LayoutVariant)
        assert variant.source is LayoutSource.DECK
        assert variant.priority == 100
        assert variant.description == "Hero"
        assert variant.compose_from is None

    def test_built_variant_independent_of_builder(self) -> None:
        composer = LayoutComposer("a").add_zone("x", "x").set_grid_template_areas('"x"')
        first = composer.build()
        composer.add_zone("y", "y")
        assert first.zone_names() == ["x"]
        assert composer.build().zone_names() == ["x", "y"]

    def test_full_chain(self) -> None:
        variant = (
            LayoutComposer.create("hero", "Hero slide")
            .extends("title")
            .overrides("title")
            .set_priority(150)
            .set_grid_template_columns("1fr 2fr")
            .set_grid_template_rows("auto")
            .remove_zones(["subtitle"])
            .modify_zone("title", {"description": "Huge"})
            .add_additional_zones([{"name": "footer"}])
            .build()
        )
        assert variant.extends == "title"
        assert variant.overrides == "title"
        assert variant.priority == 150
        assert variant.grid_template_columns == "1fr 2fr"
        assert variant.grid_template_rows == "auto"
        assert variant.remove_zones == ("subtitle",)
        assert variant.modify_zones == {"title": ZonePatch(description="Huge")}
        assert variant.additional_zones == (Zone(name="footer"),)

    def test_compose_from_empty_rejected(self) -> None:
        with pytest.raises(CompositionError):
            LayoutComposer("a").compose_from([])


class TestOneCallConstructors:
    def test_simple(self) -> None:
        variant = LayoutComposer.simple(
            "banner", "Banner", [{"name": "banner", "gridArea": "banner"}], '"banner"'
        )
        assert variant.zone_names() == ["banner"]
        assert variant.grid_template_areas == '"banner"'

    def test_extend(self) -> None:
        variant = LayoutComposer.extend(
            "extended-title",
            "title",
            additional_zones=[Zone(name="footer", grid_area="footer")],
            remove_zones=["subtitle"],
            modify_zones={"title": ZonePatch(description="Big")},
        )
        assert variant.extends == "title"
        assert variant.description == "Extended from title"
        assert variant.remove_zones == ("subtitle",)
        assert "title" in variant.modify_zones

    def test_compose(self) -> None:
        variant = LayoutComposer.compose(
            "combo",
            "Combined",
            ["a", "b"],
            additional_zones=[Zone(name="notes")],
            grid_template_areas='"x y z notes"',
        )
        assert variant.compose_from == ("a", "b")
        assert variant.additional_zones == (Zone(name="notes"),)
        assert variant.grid_template_areas == '"x y z notes"'

    def test_from_variant_round_trips(self) -> None:
        original = LayoutComposer.extend("v", "title", remove_zones=["subtitle"])
        assert LayoutComposer.from_variant(original).build() == original
