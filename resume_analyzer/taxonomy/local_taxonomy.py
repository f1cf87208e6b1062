from __future__ import annotations

import json
from pathlib import Path

from .provider import TaxonomyProvider

CATEGORY_ORDER = ("technical", "interpersonal", "experience")


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, keywords_path: str | Path | None = None) -> None:
        path = Path(keywords_path) if keywords_path else Path(__file__).with_name("keywords.json")
        self._categories = self._load_categories(path)
        self._keywords = self._build_catalog(self._categories)

    @staticmethod
    def _load_categories(path: Path) -> dict[str, tuple[str, ...]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid keyword taxonomy '{path}': expected a top-level mapping.")

        categories: dict[str, tuple[str, ...]] = {}
        for category in CATEGORY_ORDER:
            values = raw.get(category, [])
            categories[category] = tuple(str(value).strip().lower() for value in values if str(value).strip())
        return categories

    @staticmethod
    def _build_catalog(categories: dict[str, tuple[str, ...]]) -> tuple[str, ...]:
        # first occurrence wins so catalog order stays stable for tie-breaks
        seen: set[str] = set()
        catalog: list[str] = []
        for category in CATEGORY_ORDER:
            for keyword in categories.get(category, ()):
                if keyword in seen:
                    continue
                seen.add(keyword)
                catalog.append(keyword)
        return tuple(catalog)

    def categories(self) -> dict[str, tuple[str, ...]]:
        return dict(self._categories)

    def keywords(self) -> tuple[str, ...]:
        return self._keywords

    def category_of(self, keyword: str) -> str | None:
        normalized = keyword.strip().lower()
        for category in CATEGORY_ORDER:
            if normalized in self._categories.get(category, ()):
                return category
        return None
