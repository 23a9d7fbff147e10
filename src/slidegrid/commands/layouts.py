"""Commands: inspect catalog layouts and resolve them."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from slidegrid.commands._base import SlideGridCommand

if TYPE_CHECKING:
    from slidegrid.commands._context import AppContext


@click.command(
    "list",
    cls=SlideGridCommand,
    examples="""\
  slidegrid list
  slidegrid -v list
  slidegrid --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every layout known to the catalog."""
    app.emit(app.service.list_layouts())


@click.command(
    cls=SlideGridCommand,
    examples="""\
  slidegrid show title
  slidegrid --json show two-column""",
)
@click.argument("name")
@click.pass_obj
def show(app: AppContext, name: str) -> None:
    """Resolve a layout and show its zones and grid."""
    app.emit(app.service.show_layout(name))


@click.command(
    cls=SlideGridCommand,
    examples="""\
  slidegrid compat two-column split-40-60
  slidegrid --json compat image-left image-right""",
)
@click.argument("first")
@click.argument("second")
@click.pass_obj
def compat(app: AppContext, first: str, second: str) -> None:
    """Report zones two layouts share and any conflicting grid areas."""
    app.emit(app.service.check_compatibility(first, second))
