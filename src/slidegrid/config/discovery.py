"""Locating and reading ``slidegrid.toml``.

``SLIDEGRID_CONFIG`` names a file directly. Otherwise the nearest
``slidegrid.toml`` in the start directory or one of its ancestors is used.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click

from slidegrid.config.models import SlideGridConfig

CONFIG_FILENAME = "slidegrid.toml"
CONFIG_ENV_VAR = "SLIDEGRID_CONFIG"


def candidate_paths(start: Path | None = None) -> Iterator[Path]:
    """Yield ``slidegrid.toml`` locations from *start* up to the filesystem root."""
    directory = (start or Path.cwd()).resolve()
    yield directory / CONFIG_FILENAME
    for parent in directory.parents:
        yield parent / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file to use, or None.

    A ``SLIDEGRID_CONFIG`` pointing at a missing file disables discovery.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None
    return next((path for path in candidate_paths(start) if path.is_file()), None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, reporting syntax errors as a Click usage failure."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> SlideGridConfig:
    """Validated config from *path* (or the discovered file); defaults when none exists."""
    path = path or find_config(cwd)
    if path is None:
        return SlideGridConfig()
    return SlideGridConfig.model_validate(read_toml(path))
