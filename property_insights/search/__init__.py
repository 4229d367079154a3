"""Property search: matching and debounced sessions."""

from property_insights.search.matcher import (
    CITY_ALIASES,
    REGION_SUBURBS,
    PropertyMatcher,
    matches,
    normalize_query,
)
from property_insights.search.session import CancellationToken, SearchSession, SearchState

__all__ = [
    "CITY_ALIASES",
    "CancellationToken",
    "PropertyMatcher",
    "REGION_SUBURBS",
    "SearchSession",
    "SearchState",
    "matches",
    "normalize_query",
]
