"""Exception taxonomy for layout resolution and composition.

Every failure is raised synchronously to the caller of
``resolve_layout()`` or ``build()``; nothing is retried and no partial
layout is ever returned or cached.
"""

from __future__ import annotations

from collections.abc import Iterable


class SlideGridError(Exception):
    """Base class for all slidegrid errors."""


class LayoutNotFoundError(SlideGridError, LookupError):
    """A layout name is absent from every tier.

    Carries the requested name and every name known at the time of the
    lookup so the message is useful without a debugger.
    """

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(set(available))
        listing = ", ".join(self.available) if self.available else "(none)"
        super().__init__(f'Layout "{name}" not found. Available layouts: {listing}')


class CompositionError(SlideGridError, ValueError):
    """A layout variant failed structural validation.

    ``errors`` holds every problem found, not just the first one.
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__("Layout validation failed:\n" + "\n".join(self.errors))


class DuplicateZoneError(CompositionError):
    """A zone name was added twice to the same layout."""

    def __init__(self, zone: str, layout: str = "") -> None:
        self.zone = zone
        self.layout = layout
        where = f' in layout "{layout}"' if layout else " in the layout"
        super().__init__([f'Zone "{zone}" already exists{where}'])

    def __str__(self) -> str:
        return self.errors[0]


class LayoutCycleError(SlideGridError):
    """Inheritance or composition revisited a layout already being resolved."""

    def __init__(self, cycle: list[str]) -> None:
        self.cycle = list(cycle)
        super().__init__("Layout inheritance cycle: " + " -> ".join(self.cycle))


class LayoutMergeError(SlideGridError, ValueError):
    """Invalid input to a merge utility."""
