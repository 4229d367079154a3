"""Address, suburb and postcode matching over the property catalog."""

from __future__ import annotations

import re
from typing import Iterable

from property_insights.catalog import PropertyCatalog
from property_insights.models import PropertySummary

# Canonical city or region -> aliases recognised in a query
CITY_ALIASES: dict[str, tuple[str, ...]] = {
    "sydney": ("sydney", "syd"),
    "melbourne": ("melbourne", "melb"),
    "brisbane": ("brisbane", "bris", "bne"),
    "perth": ("perth",),
    "adelaide": ("adelaide",),
    "hobart": ("hobart",),
    "darwin": ("darwin",),
    "canberra": ("canberra", "cbr"),
    "gold coast": ("gold coast", "goldcoast", "gc", "surfers", "broadbeach"),
    "sunshine coast": ("sunshine coast", "noosa"),
}

# Regions whose name never appears in a street address
REGION_SUBURBS: dict[str, tuple[str, ...]] = {
    "gold coast": ("surfers paradise", "broadbeach"),
    "sunshine coast": ("noosa heads",),
}

_ALIAS_PATTERNS: dict[str, re.Pattern[str]] = {
    city: re.compile(r"\b(?:" + "|".join(re.escape(a) for a in aliases) + r")")
    for city, aliases in CITY_ALIASES.items()
}


def normalize_query(query: str | None) -> str:
    """Lower-case and collapse whitespace."""
    if not query:
        return ""
    return " ".join(query.lower().split())


def aliased_cities(query: str) -> list[str]:
    """Canonical cities whose alias starts a word in the normalized query."""
    return [city for city, pattern in _ALIAS_PATTERNS.items() if pattern.search(query)]


def matches(summary: PropertySummary, query: str) -> bool:
    """Whether a candidate satisfies the substring-or-alias rule."""
    q = normalize_query(query)
    if not q:
        return False

    fields = (
        summary.display_address,
        summary.short_address,
        summary.suburb,
        summary.state,
        summary.postcode,
        summary.property_type.value,
    )
    if any(q in field.lower() for field in fields):
        return True

    suburb = summary.suburb.lower()
    address = summary.display_address.lower()
    for city in aliased_cities(q):
        if city in suburb or city in address:
            return True
        if suburb in REGION_SUBURBS.get(city, ()):
            return True
    return False


class PropertyMatcher:
    """Turn partial free text into candidate properties.

    Results keep catalog order, so the same query always yields the same
    list. The matcher holds no mutable state and may be called repeatedly.

    Parameters
    ----------
    catalog : PropertyCatalog
        Source of candidate properties.
    limit : int | None
        Maximum number of candidates returned (None for all).
    """

    def __init__(self, catalog: PropertyCatalog, limit: int | None = None) -> None:
        self._catalog = catalog
        self.limit = limit

    def search(self, query: str | None) -> list[PropertySummary]:
        """Return candidates matching ``query``; empty input yields ``[]``."""
        q = normalize_query(query)
        if not q:
            return []
        results = [s for s in self._candidates() if matches(s, q)]
        return results[: self.limit] if self.limit is not None else results

    def _candidates(self) -> Iterable[PropertySummary]:
        return self._catalog.summaries()
