"""Rich Console factory and theme for slidegrid output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Rich drops color codes on its own when there is no
terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SLIDEGRID_THEME = Theme(
    {
        "sg.ok": "bold green",
        "sg.error": "bold red",
        "sg.warning": "bold yellow",
        "sg.op": "bold cyan",
        "sg.key": "dim",
        "sg.name": "bold blue",
        "sg.zone": "green",
        "sg.grid": "magenta",
        "sg.tier.system": "dim",
        "sg.tier.theme": "blue",
        "sg.tier.deck": "yellow",
    }
)

_TIER_STYLES: dict[str, str] = {
    "system": "sg.tier.system",
    "theme": "sg.tier.theme",
    "deck": "sg.tier.deck",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=SLIDEGRID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_tier(tier: str) -> str:
    return _TIER_STYLES.get(tier, "")
