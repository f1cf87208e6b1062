from __future__ import annotations

from typing import Protocol


class TaxonomyProvider(Protocol):
    def categories(self) -> dict[str, tuple[str, ...]]:
        """Return keyword lists per category, in declaration order."""

    def keywords(self) -> tuple[str, ...]:
        """Return the deduplicated canonical keyword catalog."""
