"""Pytest configuration and fixtures."""

import asyncio
from datetime import date

import pytest

from property_insights.aggregator import PropertyDetailAggregator
from property_insights.catalog import PropertyCatalog
from property_insights.email import DispatchResult, EmailDispatcher
from property_insights.exceptions import TransportError
from property_insights.gate import MemoryStore, UnlockGate
from property_insights.leads import LeadPipeline
from property_insights.models import PropertyDetail


class RecordingDispatcher(EmailDispatcher):
    """Dispatcher that records messages and can be told to fail."""

    name = "recording"

    def __init__(self, fail: bool = False, delay: float = 0.0) -> None:
        self.fail = fail
        self.delay = delay
        self.messages: list = []

    async def _deliver(self, message) -> DispatchResult:
        self.messages.append(message)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise TransportError("Provider unavailable", status_code=503)
        return DispatchResult(
            success=True,
            message="Email sent successfully",
            message_id=f"msg-{len(self.messages)}",
        )


@pytest.fixture
def reference_date() -> date:
    """Fixed anchor for synthesized sale dates."""
    return date(2025, 6, 30)


@pytest.fixture
def catalog() -> PropertyCatalog:
    """Bundled catalog, fresh for each test."""
    return PropertyCatalog.default()


@pytest.fixture
def aggregator(catalog: PropertyCatalog, reference_date: date) -> PropertyDetailAggregator:
    """Aggregator without simulated latency."""
    return PropertyDetailAggregator(catalog, reference_date=reference_date)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def gate(store: MemoryStore) -> UnlockGate:
    """Gate with a short prompt delay."""
    return UnlockGate(store, prompt_delay_seconds=0.01)


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def failing_dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher(fail=True)


@pytest.fixture
def pipeline(dispatcher: RecordingDispatcher, gate: UnlockGate) -> LeadPipeline:
    return LeadPipeline(dispatcher, gate)


@pytest.fixture
def shields_detail(aggregator: PropertyDetailAggregator) -> PropertyDetail:
    """Report for 30 Shields Street, Redcliffe (fully synthesized)."""
    return asyncio.run(aggregator.get_property_details("VC-9552-CQ"))


@pytest.fixture
def sourced_detail(aggregator: PropertyDetailAggregator) -> PropertyDetail:
    """Report for property 1, which has sourced comparables and schools."""
    return asyncio.run(aggregator.get_property_details("1"))
