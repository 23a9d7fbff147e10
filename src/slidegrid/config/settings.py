"""SlideGridSettings: CLI flags, env vars, and ``slidegrid.toml`` merged.

Priority chain (highest to lowest):
  1. Init kwargs (CLI flags passed by Click)
  2. Env vars (``SLIDEGRID_*`` prefix, ``__`` for nested sections)
  3. TOML file (``slidegrid.toml`` discovered via walk-up)
  4. Code defaults baked into the section models

Nested sections merge key by key across sources, so ``--cache-key``
changes ``resolver.cache_key`` without discarding other TOML values.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from slidegrid.config.discovery import find_config, read_toml
from slidegrid.config.models import CatalogConfig, ResolverConfig

logger = logging.getLogger(__name__)

# TOML file for the settings object currently being constructed.
_active_toml: ContextVar[Path | None] = ContextVar("slidegrid_active_toml", default=None)


class SlideGridTomlSource(PydanticBaseSettingsSource):
    """Settings source backed by one TOML file.

    Top-level keys that name no settings field are dropped with a
    warning instead of failing validation.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._values: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        known = set(settings_cls.model_fields)
        for key, value in read_toml(toml_path).items():
            if key in known:
                self._values[key] = value
            else:
                logger.warning("Ignoring unknown key %r in %s", key, toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, field_name in self._values

    def __call__(self) -> dict[str, Any]:
        return dict(self._values)


class SlideGridSettings(BaseSettings):
    """Everything the CLI and :func:`build_layout_service` read.

    Attributes:
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SLIDEGRID_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            SlideGridTomlSource(settings_cls, _active_toml.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_values: Any,
    ) -> SlideGridSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored; without
        one, ``slidegrid.toml`` is looked up from *start* (default: cwd).
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_values)
        finally:
            _active_toml.reset(token)
