"""Layout tiers and their diagnostic priorities.

Precedence between tiers is structural (deck > theme > system); the
numeric priority only annotates resolved layouts for debugging.
"""

from __future__ import annotations

from enum import StrEnum


class LayoutSource(StrEnum):
    """Tier a layout definition was resolved from."""

    SYSTEM = "system"
    THEME = "theme"
    DECK = "deck"


TIER_PRIORITY: dict[LayoutSource, int] = {
    LayoutSource.SYSTEM: 0,
    LayoutSource.THEME: 50,
    LayoutSource.DECK: 100,
}

# Highest precedence first.
TIER_PRECEDENCE: tuple[LayoutSource, ...] = (
    LayoutSource.DECK,
    LayoutSource.THEME,
    LayoutSource.SYSTEM,
)
