"""Subcommand modules for slidegrid.

register_commands() imports lazily so ``slidegrid --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from slidegrid.commands.layouts import compat, list_cmd, show

    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(compat)
