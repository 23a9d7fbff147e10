"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from slidegrid.output.console import create_console, get_output, style_for_tier

if TYPE_CHECKING:
    from rich.console import Console

    from slidegrid.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: layout names, or the status line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items)
    layout = result.data.get("layout")
    if isinstance(layout, dict):
        return "\n".join(zone["name"] for zone in layout.get("zones", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sg.ok"), Text(f"  {result.op}", style="sg.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "sg.key"), (str(value), style)))


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="sg.warning"), warning)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="sg.error"), Text(f"  {result.op}", style="sg.op"), " — ", msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_layout_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="sg.name", no_wrap=True)
    table.add_column("Tier")
    table.add_column("Zones", style="sg.zone")
    if verbose:
        table.add_column("Description", style="dim")

    for item in result.data.get("items", []):
        tier = str(item.get("tier", ""))
        row = [
            Text(str(item.get("name", ""))),
            Text(tier, style=style_for_tier(tier)),
            Text(", ".join(item.get("zones", []))),
        ]
        if verbose:
            row.append(Text(str(item.get("description", ""))))
        table.add_row(*row)

    console.print(table)


def _render_layout(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    layout: dict[str, Any] = result.data.get("layout", {})
    source = str(layout.get("source", ""))

    _field(console, "name", layout.get("name", ""), "sg.name")
    if layout.get("description"):
        _field(console, "description", layout["description"])
    _field(console, "source", f"{source} (priority {layout.get('priority', 0)})", style_for_tier(source))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Zone", style="sg.zone", no_wrap=True)
    table.add_column("Grid area")
    if verbose:
        table.add_column("Description", style="dim")
    for zone in layout.get("zones", []):
        row = [zone["name"], zone.get("gridArea") or zone["name"]]
        if verbose:
            row.append(zone.get("description", ""))
        table.add_row(*row)
    console.print(table)

    for key in ("gridTemplateAreas", "gridTemplateColumns", "gridTemplateRows", "customStyles"):
        value = layout.get(key)
        if value:
            _field(console, key, " ".join(value.split()), "sg.grid")


def _render_compatibility(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "layouts", f"{data.get('first')} + {data.get('second')}", "sg.name")
    _field(console, "shared_zones", ", ".join(data.get("shared_zones", [])) or "(none)")
    _field(console, "compatible", data.get("compatible"))
    _render_warnings(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    _render_warnings(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_layouts": _render_layout_list,
    "show_layout": _render_layout,
    "check_compatibility": _render_compatibility,
}
