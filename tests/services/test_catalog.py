"""Tests for LayoutCatalog — tiered registration and lookup."""

from __future__ import annotations

import pytest
from conftest import make_layout

from slidegrid.domain.errors import LayoutNotFoundError
from slidegrid.domain.types import LayoutSource
from slidegrid.services.catalog import LayoutCatalog


class TestRegisterAndGet:
    def test_register_defaults_to_system(self, empty_catalog: LayoutCatalog) -> None:
        layout = make_layout("title", "title")
        empty_catalog.register("title", layout)
        assert empty_catalog.get("title") is layout
        assert empty_catalog.names_in_tier(LayoutSource.SYSTEM) == ["title"]

    def test_deck_beats_theme_beats_system(self, empty_catalog: LayoutCatalog) -> None:
        system = make_layout("title", "title")
        theme = make_layout("title", "title", "subtitle")
        deck = make_layout("title", "title", "footer")
        empty_catalog.register("title", system, LayoutSource.SYSTEM)
        empty_catalog.register("title", theme, LayoutSource.THEME)
        assert empty_catalog.get_with_tier("title") == (theme, LayoutSource.THEME)
        empty_catalog.register("title", deck, LayoutSource.DECK)
        assert empty_catalog.get_with_tier("title") == (deck, LayoutSource.DECK)

    def test_overwrite_within_tier(self, empty_catalog: LayoutCatalog) -> None:
        empty_catalog.register("a", make_layout("a", "x"))
        replacement = make_layout("a", "y")
        empty_catalog.register("a", replacement)
        assert empty_catalog.get("a") is replacement
        assert empty_catalog.count_unique_names() == 1

    def test_tier_accepts_string_value(self, empty_catalog: LayoutCatalog) -> None:
        empty_catalog.register("a", make_layout("a", "x"), "theme")  # type: ignore[arg-type]
        assert empty_catalog.names_in_tier(LayoutSource.THEME) == ["a"]

    def test_unknown_name_lists_available(self, catalog: LayoutCatalog) -> None:
        with pytest.raises(LayoutNotFoundError) as exc_info:
            catalog.get("nonexistent")
        assert exc_info.value.name == "nonexistent"
        assert "title" in exc_info.value.available
        assert "two-column" in str(exc_info.value)

    def test_has_and_contains(self, catalog: LayoutCatalog) -> None:
        assert catalog.has("title")
        assert "quote" in catalog
        assert not catalog.has("nonexistent")
        assert 42 not in catalog


class TestListing:
    def test_list_names_deduplicated_system_first(self, empty_catalog: LayoutCatalog) -> None:
        empty_catalog.register("deck-only", make_layout("deck-only", "x"), LayoutSource.DECK)
        empty_catalog.register("shared", make_layout("shared", "x"), LayoutSource.THEME)
        empty_catalog.register("shared", make_layout("shared", "x"), LayoutSource.SYSTEM)
        empty_catalog.register("theme-only", make_layout("theme-only", "x"), LayoutSource.THEME)
        assert empty_catalog.list_names() == ["shared", "theme-only", "deck-only"]
        assert empty_catalog.count_unique_names() == 3
        assert len(empty_catalog) == 3

    def test_builtins_registered(self, catalog: LayoutCatalog) -> None:
        assert len(catalog) == 11


class TestClearing:
    def test_clear_tier_leaves_others(self, catalog: LayoutCatalog) -> None:
        catalog.register("title", make_layout("title", "title", "footer"), LayoutSource.DECK)
        catalog.clear_tier(LayoutSource.DECK)
        assert catalog.names_in_tier(LayoutSource.DECK) == []
        assert catalog.get_with_tier("title")[1] is LayoutSource.SYSTEM

    def test_clear_all(self, catalog: LayoutCatalog) -> None:
        catalog.clear_all()
        assert catalog.list_names() == []
        assert not catalog.has("title")


class TestVersion:
    def test_starts_at_zero(self, empty_catalog: LayoutCatalog) -> None:
        assert empty_catalog.version == 0

    def test_every_mutation_bumps(self, empty_catalog: LayoutCatalog) -> None:
        empty_catalog.register("a", make_layout("a", "x"))
        v1 = empty_catalog.version
        empty_catalog.clear_tier(LayoutSource.THEME)
        v2 = empty_catalog.version
        empty_catalog.clear_all()
        assert 0 < v1 < v2 < empty_catalog.version

    def test_reads_do_not_bump(self, catalog: LayoutCatalog) -> None:
        before = catalog.version
        catalog.get("title")
        catalog.list_names()
        assert catalog.version == before
