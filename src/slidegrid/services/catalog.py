"""LayoutCatalog — tier-partitioned store of named layouts.

Each tier (system, theme, deck) holds its own name -> definition map.
Registering a name overwrites only that tier's entry; lookups report the
highest-precedence definition (deck > theme > system).

The catalog is plain storage. Cross-layout consistency is checked by
:class:`~slidegrid.services.composer.LayoutComposer`, and resolution of
``extends``/``compose_from`` happens in
:class:`~slidegrid.services.resolver.LayoutResolver`.
"""

from __future__ import annotations

import logging

from slidegrid.domain.errors import LayoutNotFoundError
from slidegrid.domain.layouts import LayoutDefinition
from slidegrid.domain.types import TIER_PRECEDENCE, LayoutSource

logger = logging.getLogger(__name__)


class LayoutCatalog:
    """Named layouts partitioned by tier.

    ``version`` increases on every mutation so consumers holding derived
    state (the resolver's cache) can tell when the catalog has changed.
    """

    def __init__(self) -> None:
        self._tiers: dict[LayoutSource, dict[str, LayoutDefinition]] = {
            tier: {} for tier in TIER_PRECEDENCE
        }
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def register(
        self,
        name: str,
        definition: LayoutDefinition,
        tier: LayoutSource = LayoutSource.SYSTEM,
    ) -> None:
        """Store *definition* under *name* in *tier*, replacing any previous entry."""
        tier = LayoutSource(tier)
        entries = self._tiers[tier]
        if name in entries:
            logger.debug("Overwriting %s layout: %s", tier.value, name)
        entries[name] = definition
        self._version += 1

    def get(self, name: str) -> LayoutDefinition:
        """Return the highest-precedence definition for *name*.

        Raises:
            LayoutNotFoundError: No tier has *name*.
        """
        return self.get_with_tier(name)[0]

    def get_with_tier(self, name: str) -> tuple[LayoutDefinition, LayoutSource]:
        """Like :meth:`get`, also reporting which tier supplied the definition."""
        for tier in TIER_PRECEDENCE:
            definition = self._tiers[tier].get(name)
            if definition is not None:
                return definition, tier
        raise LayoutNotFoundError(name, self.list_names())

    def has(self, name: str) -> bool:
        return any(name in entries for entries in self._tiers.values())

    def list_names(self) -> list[str]:
        """All known names, deduplicated across tiers.

        System names come first, then names only themes define, then
        names only decks define, each in registration order.
        """
        seen: dict[str, None] = {}
        for tier in reversed(TIER_PRECEDENCE):
            for name in self._tiers[tier]:
                seen.setdefault(name, None)
        return list(seen)

    def names_in_tier(self, tier: LayoutSource) -> list[str]:
        return list(self._tiers[LayoutSource(tier)])

    def count_unique_names(self) -> int:
        return len(self.list_names())

    def clear_tier(self, tier: LayoutSource) -> None:
        """Drop every entry of *tier*; other tiers are untouched."""
        self._tiers[LayoutSource(tier)].clear()
        self._version += 1

    def clear_all(self) -> None:
        for entries in self._tiers.values():
            entries.clear()
        self._version += 1

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return self.count_unique_names()
