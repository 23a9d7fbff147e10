"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``slidegrid.toml`` only holds
overrides. An empty or missing file yields a fully working configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ResolverConfig(BaseModel):
    """[resolver] section."""

    model_config = {"frozen": True}

    # "length" reproduces the legacy (name, #deck, #theme) cache key.
    cache_key: Literal["content", "length"] = "content"


class CatalogConfig(BaseModel):
    """[catalog] section."""

    model_config = {"frozen": True}

    builtins: bool = True
    plugins: bool = True


class SlideGridConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
