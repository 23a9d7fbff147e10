"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from slidegrid.config.models import CatalogConfig, ResolverConfig, SlideGridConfig


class TestSlideGridConfig:
    def test_defaults(self) -> None:
        config = SlideGridConfig()
        assert config.resolver == ResolverConfig(cache_key="content")
        assert config.catalog == CatalogConfig(builtins=True, plugins=True)

    def test_unknown_cache_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResolverConfig(cache_key="name")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            CatalogConfig().builtins = False  # type: ignore[misc]
