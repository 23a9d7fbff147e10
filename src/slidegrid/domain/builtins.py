"""Built-in system-tier layouts.

Eleven layouts ship with slidegrid. Themes and decks may shadow any of
them by name. The built-in layouts plugin registers them into a
catalog at startup (see :mod:`slidegrid.plugins.builtins.layouts`).
"""

from __future__ import annotations

from slidegrid.domain.layouts import LayoutDefinition, Zone


def _areas(*rows: str) -> str:
    return "\n".join(f'"{row}"' for row in rows)


def _zone(name: str, description: str) -> Zone:
    return Zone(name=name, grid_area=name, description=description)


TITLE = LayoutDefinition(
    name="title",
    description="Centered title and subtitle layout for opening slides",
    zones=(
        _zone("title", "Main title text"),
        _zone("subtitle", "Optional subtitle or supporting text"),
    ),
    grid_template_areas=_areas(".", "title", "subtitle", "."),
    grid_template_columns="1fr",
    grid_template_rows="1fr auto auto 1fr",
)

SECTION = LayoutDefinition(
    name="section",
    description="Full-screen centered heading for section dividers",
    zones=(_zone("heading", "Main section heading text"),),
    grid_template_areas=_areas(".", "heading", "."),
    grid_template_columns="1fr",
    grid_template_rows="1fr auto 1fr",
)

CONTENT = LayoutDefinition(
    name="content",
    description="Single content area with title for standard slides",
    zones=(
        _zone("title", "Slide title"),
        _zone("content", "Main content area"),
    ),
    grid_template_areas=_areas("title", "content"),
    grid_template_columns="1fr",
    grid_template_rows="auto 1fr",
)

TWO_COLUMN = LayoutDefinition(
    name="two-column",
    description="Equal-width two-column layout with title",
    zones=(
        _zone("title", "Slide title"),
        _zone("left", "Left column content"),
        _zone("right", "Right column content"),
    ),
    grid_template_areas=_areas("title title", "left right"),
    grid_template_columns="1fr 1fr",
    grid_template_rows="auto 1fr",
)

CODE = LayoutDefinition(
    name="code",
    description="Code-optimized layout with large code area",
    zones=(
        _zone("title", "Brief code title or description"),
        _zone("code", "Code content area"),
    ),
    grid_template_areas=_areas("title", "code"),
    grid_template_columns="1fr",
    grid_template_rows="auto 1fr",
)

IMAGE_LEFT = LayoutDefinition(
    name="image-left",
    description="Image on left (40%), content on right (60%)",
    zones=(
        _zone("title", "Slide title"),
        _zone("image", "Image content (left side)"),
        _zone("content", "Text content (right side)"),
    ),
    grid_template_areas=_areas("title title", "image content"),
    grid_template_columns="2fr 3fr",
    grid_template_rows="auto 1fr",
)

IMAGE_RIGHT = LayoutDefinition(
    name="image-right",
    description="Content on left (60%), image on right (40%)",
    zones=(
        _zone("title", "Slide title"),
        _zone("content", "Text content (left side)"),
        _zone("image", "Image content (right side)"),
    ),
    grid_template_areas=_areas("title title", "content image"),
    grid_template_columns="3fr 2fr",
    grid_template_rows="auto 1fr",
)

SPLIT_40_60 = LayoutDefinition(
    name="split-40-60",
    description="Asymmetric two-column layout with 40/60 split",
    zones=(
        _zone("title", "Slide title"),
        _zone("left", "Left column content (40%)"),
        _zone("right", "Right column content (60%)"),
    ),
    grid_template_areas=_areas("title title", "left right"),
    grid_template_columns="2fr 3fr",
    grid_template_rows="auto 1fr",
)

SPLIT_60_40 = LayoutDefinition(
    name="split-60-40",
    description="Asymmetric two-column layout with 60/40 split",
    zones=(
        _zone("title", "Slide title"),
        _zone("left", "Left column content (60%)"),
        _zone("right", "Right column content (40%)"),
    ),
    grid_template_areas=_areas("title title", "left right"),
    grid_template_columns="3fr 2fr",
    grid_template_rows="auto 1fr",
)

QUOTE = LayoutDefinition(
    name="quote",
    description="Large centered quote with attribution",
    zones=(
        _zone("quote", "Main quote text"),
        _zone("attribution", "Quote attribution or source"),
    ),
    grid_template_areas=_areas(".", "quote", "attribution", "."),
    grid_template_columns="1fr",
    grid_template_rows="1fr auto auto 1fr",
)

COMPARISON = LayoutDefinition(
    name="comparison",
    description="Side-by-side comparison with labels",
    zones=(
        _zone("title", "Slide title"),
        _zone("left-label", "Label for left column"),
        _zone("left", "Left column content"),
        _zone("right-label", "Label for right column"),
        _zone("right", "Right column content"),
    ),
    grid_template_areas=_areas("title title", "left-label right-label", "left right"),
    grid_template_columns="1fr 1fr",
    grid_template_rows="auto auto 1fr",
)

BUILTIN_LAYOUTS: tuple[LayoutDefinition, ...] = (
    TITLE,
    SECTION,
    CONTENT,
    TWO_COLUMN,
    CODE,
    IMAGE_LEFT,
    IMAGE_RIGHT,
    SPLIT_40_60,
    SPLIT_60_40,
    QUOTE,
    COMPARISON,
)

