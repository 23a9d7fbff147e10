"""Root ``slidegrid`` command group."""

from __future__ import annotations

from typing import Any

import click

from slidegrid import __version__
from slidegrid.commands import register_commands
from slidegrid.commands._context import AppContext
from slidegrid.config.settings import SlideGridSettings


def _section_overrides(no_plugins: bool, cache_key: str | None) -> dict[str, Any]:
    """Nested settings set from flags; unset flags leave TOML/env values alone."""
    overrides: dict[str, Any] = {}
    if no_plugins:
        overrides["catalog"] = {"plugins": False}
    if cache_key:
        overrides["resolver"] = {"cache_key": cache_key}
    return overrides


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="slidegrid")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Names only.")
@click.option("-v", "--verbose", is_flag=True, help="Show descriptions and debug logging.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Path to a slidegrid.toml.")
@click.option("--no-plugins", is_flag=True, help="Skip entry-point layout plugins.")
@click.option(
    "--cache-key",
    type=click.Choice(["content", "length"]),
    default=None,
    help="Resolver cache key strategy.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    no_plugins: bool,
    cache_key: str | None,
) -> None:
    """slidegrid: resolve and inspect slide layouts."""
    settings = SlideGridSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        **_section_overrides(no_plugins, cache_key),
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
