"""Shared pytest fixtures for slidegrid tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from slidegrid.domain.layouts import LayoutDefinition, Zone
from slidegrid.plugins.builtins.layouts import register_builtin_layouts
from slidegrid.services.catalog import LayoutCatalog
from slidegrid.services.resolver import LayoutResolver


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """Undo the handler swap done by configure_logging() in CLI tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("slidegrid").setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def empty_catalog() -> LayoutCatalog:
    return LayoutCatalog()


@pytest.fixture
def catalog() -> LayoutCatalog:
    """Fresh catalog with the built-in layouts in the system tier."""
    c = LayoutCatalog()
    register_builtin_layouts(c)
    return c


@pytest.fixture
def resolver(catalog: LayoutCatalog) -> LayoutResolver:
    return LayoutResolver(catalog)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no stray slidegrid.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    monkeypatch.delenv("SLIDEGRID_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_layout(name: str, *zones: str | Zone, **fields: object) -> LayoutDefinition:
    """Build a LayoutDefinition from zone names (or Zone objects)."""
    built = tuple(z if isinstance(z, Zone) else Zone(name=z, grid_area=z) for z in zones)
    return LayoutDefinition(name=name, zones=built, **fields)


@pytest.fixture
def layout_factory():
    """Expose :func:`make_layout` to tests."""
    return make_layout
