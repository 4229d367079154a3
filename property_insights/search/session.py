"""Debounced search-as-you-type with supersession of stale responses."""

from __future__ import annotations

import asyncio
import inspect
import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Union

from property_insights.models import PropertySummary

logger = logging.getLogger(__name__)

SearchFunction = Callable[[str], Union[list[PropertySummary], Awaitable[list[PropertySummary]]]]

_token_counter = itertools.count(1)


@dataclass(frozen=True)
class CancellationToken:
    """Identifies one search request; only the latest may update state."""

    serial: int
    query: str


@dataclass
class SearchState:
    """What the search box currently shows."""

    query: str = ""
    results: list[PropertySummary] = field(default_factory=list)
    loading: bool = False
    error: str | None = None


class SearchSession:
    """Debounce queries and apply only the most recent response.

    Each ``submit`` issues a token and waits out the debounce window. If a
    newer query arrives meanwhile, the older call returns ``None`` without
    calling the search function. A response is applied only if its token is
    still the latest one when it arrives.

    Parameters
    ----------
    search : SearchFunction
        ``PropertyMatcher.search`` or an async remote equivalent.
    debounce_seconds : float
        Quiet period before a query is sent.
    on_change : Callable[[SearchState], Any] | None
        Called whenever visible state changes.
    """

    def __init__(
        self,
        search: SearchFunction,
        debounce_seconds: float = 0.3,
        on_change: Callable[[SearchState], Any] | None = None,
    ) -> None:
        self._search = search
        self.debounce_seconds = debounce_seconds
        self._on_change = on_change
        self._latest: CancellationToken | None = None
        self.state = SearchState()
        self.calls = 0

    @property
    def results(self) -> list[PropertySummary]:
        return self.state.results

    @property
    def latest_query(self) -> str:
        return self._latest.query if self._latest else ""

    def is_current(self, token: CancellationToken) -> bool:
        """Whether ``token`` still belongs to the newest request."""
        return self._latest is token

    def issue(self, query: str) -> CancellationToken:
        """Issue a token for ``query``, superseding any outstanding one."""
        token = CancellationToken(serial=next(_token_counter), query=query)
        self._latest = token
        return token

    async def submit(self, query: str) -> list[PropertySummary] | None:
        """Run a debounced search.

        Returns
        -------
        list[PropertySummary] | None
            The results applied to visible state, or ``None`` when this
            request was superseded.
        """
        trimmed = query.strip()
        token = self.issue(trimmed)

        if not trimmed:
            self._apply(SearchState(query="", results=[]))
            return []

        await asyncio.sleep(self.debounce_seconds)
        if not self.is_current(token):
            logger.debug("Search %r superseded during debounce", trimmed)
            return None

        self._apply(SearchState(query=trimmed, results=self.state.results, loading=True))
        try:
            results = await self._call(trimmed)
        except Exception as exc:
            if not self.is_current(token):
                return None
            logger.warning("Search for %r failed: %s", trimmed, exc)
            self._apply(SearchState(query=trimmed, results=[], error=str(exc)))
            return []

        if not self.is_current(token):
            logger.debug("Discarding stale results for %r", trimmed)
            return None

        self._apply(SearchState(query=trimmed, results=list(results)))
        return self.state.results

    def clear(self) -> None:
        """Reset the box and drop any pending request."""
        self.issue("")
        self._apply(SearchState())

    async def _call(self, query: str) -> list[PropertySummary]:
        self.calls += 1
        result = self._search(query)
        if inspect.isawaitable(result):
            result = await result
        return result

    def _apply(self, state: SearchState) -> None:
        self.state = state
        if self._on_change is not None:
            self._on_change(state)
