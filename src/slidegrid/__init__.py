"""slidegrid — layout resolution and composition for slide decks."""

from slidegrid.domain.errors import (
    CompositionError,
    DuplicateZoneError,
    LayoutCycleError,
    LayoutNotFoundError,
    SlideGridError,
)
from slidegrid.domain.layouts import LayoutDefinition, LayoutVariant, Zone, ZonePatch
from slidegrid.domain.types import LayoutSource
from slidegrid.services.catalog import LayoutCatalog
from slidegrid.services.composer import LayoutComposer
from slidegrid.services.resolver import LayoutResolver

__version__ = "0.1.0"

__all__ = [
    "CompositionError",
    "DuplicateZoneError",
    "LayoutCatalog",
    "LayoutComposer",
    "LayoutCycleError",
    "LayoutDefinition",
    "LayoutNotFoundError",
    "LayoutResolver",
    "LayoutSource",
    "LayoutVariant",
    "SlideGridError",
    "Zone",
    "ZonePatch",
    "__version__",
]
