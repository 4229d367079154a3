"""Tests for the property report view."""

import asyncio

import pytest

from property_insights.aggregator import PropertyDetailAggregator
from property_insights.exceptions import NotFoundError, ValidationError
from property_insights.leads import LeadPipeline
from property_insights.models import LeadSubmission, UserProfile
from property_insights.view import PropertyReportView, ViewStatus


@pytest.fixture
def slow_aggregator(catalog, reference_date) -> PropertyDetailAggregator:
    return PropertyDetailAggregator(catalog, latency_seconds=0.03, reference_date=reference_date)


@pytest.fixture
def prompts() -> list[str]:
    return []


@pytest.fixture
def view(aggregator, gate, pipeline, prompts) -> PropertyReportView:
    return PropertyReportView(aggregator, gate, pipeline, on_prompt=prompts.append)


class TestMount:
    """Loading a report."""

    def test_ready_locked(self, view: PropertyReportView) -> None:
        status = asyncio.run(view.mount("VC-9552-CQ"))

        assert status is ViewStatus.READY
        assert view.detail.id == "VC-9552-CQ"
        assert view.unlocked is False
        sections = {s.name: s for s in view.render()}
        assert sections["address"].obscured is False
        assert sections["preview_image"].obscured is False
        assert sections["price_estimate"].obscured is True
        assert sections["price_estimate"].interactive is False

    def test_ready_unlocked(self, view: PropertyReportView, gate) -> None:
        gate.unlock("VC-9552-CQ", "jane@example.com")

        asyncio.run(view.mount("VC-9552-CQ"))

        assert view.unlocked is True
        assert not any(s.obscured for s in view.render())

    def test_not_found(self, view: PropertyReportView) -> None:
        status = asyncio.run(view.mount("does-not-exist"))

        assert status is ViewStatus.NOT_FOUND
        assert view.detail is None
        assert "does-not-exist" in view.error
        assert view.render() == []

    def test_render_before_mount(self, view: PropertyReportView) -> None:
        assert view.status is ViewStatus.IDLE
        assert view.render() == []


class TestStaleLoads:
    """Responses that arrive after teardown or a newer mount are ignored."""

    def test_unmount_during_load(self, slow_aggregator, gate, pipeline) -> None:
        view = PropertyReportView(slow_aggregator, gate, pipeline)

        async def run():
            task = asyncio.create_task(view.mount("VC-9552-CQ"))
            await asyncio.sleep(0)
            view.unmount()
            await task

        asyncio.run(run())

        assert view.status is ViewStatus.IDLE
        assert view.detail is None

    def test_newer_mount_wins(self, slow_aggregator, gate, pipeline) -> None:
        view = PropertyReportView(slow_aggregator, gate, pipeline)

        async def run():
            await asyncio.gather(view.mount("1"), view.mount("VC-9552-CQ"))

        asyncio.run(run())

        assert view.status is ViewStatus.READY
        assert view.property_id == "VC-9552-CQ"
        assert view.detail.id == "VC-9552-CQ"

    def test_stale_not_found_ignored(self, slow_aggregator, gate, pipeline) -> None:
        view = PropertyReportView(slow_aggregator, gate, pipeline)

        async def run():
            await asyncio.gather(view.mount("missing"), view.mount("1"))

        asyncio.run(run())

        assert view.status is ViewStatus.READY
        assert view.error is None


class TestPrompt:
    """The unlock prompt opens after a delay on locked reports."""

    def test_prompt_fires(self, view: PropertyReportView, prompts: list[str]) -> None:
        async def run():
            await view.mount("VC-9552-CQ")
            await asyncio.sleep(0.05)

        asyncio.run(run())

        assert view.prompt_open is True
        assert prompts == ["VC-9552-CQ"]

    def test_no_prompt_when_unlocked(self, view: PropertyReportView, gate, prompts: list[str]) -> None:
        gate.unlock("VC-9552-CQ", "jane@example.com")

        async def run():
            await view.mount("VC-9552-CQ")
            await asyncio.sleep(0.05)

        asyncio.run(run())

        assert view.prompt_open is False
        assert prompts == []

    def test_unmount_cancels_prompt(self, view: PropertyReportView, prompts: list[str]) -> None:
        async def run():
            await view.mount("VC-9552-CQ")
            view.unmount()
            await asyncio.sleep(0.05)

        asyncio.run(run())

        assert prompts == []


class TestSubmitLead:
    """Submitting the lead form from the view."""

    def test_unlocks_report(self, view: PropertyReportView, dispatcher) -> None:
        form = LeadSubmission(email="jane@example.com", name="Jane Doe")

        async def run():
            await view.mount("VC-9552-CQ")
            await asyncio.sleep(0.05)
            return await view.submit_lead(form)

        result = asyncio.run(run())

        assert result.success is True
        assert view.unlocked is True
        assert view.prompt_open is False
        assert not any(s.obscured for s in view.render())
        assert dispatcher.messages[0].property_id == "VC-9552-CQ"

    def test_sends_lead_and_report(self, view: PropertyReportView, dispatcher) -> None:
        async def run():
            await view.mount("VC-9552-CQ")
            await view.submit_lead(LeadSubmission(email="jane@example.com", name="Jane Doe"))

        asyncio.run(run())

        assert [m.type.value for m in dispatcher.messages] == ["lead", "report"]
        report = dispatcher.messages[1]
        assert report.email == "jane@example.com"
        assert report.name == "Jane Doe"
        assert report.property["address"] == "30 Shields Street, Redcliffe QLD 4020"

    def test_unlocks_on_provider_failure(self, aggregator, gate, failing_dispatcher) -> None:
        view = PropertyReportView(aggregator, gate, LeadPipeline(failing_dispatcher, gate))

        async def run():
            await view.mount("VC-9552-CQ")
            return await view.submit_lead(LeadSubmission(email="jane@example.com", name="Jane Doe"))

        result = asyncio.run(run())

        assert result.warning is not None
        assert view.unlocked is True

    def test_invalid_form_stays_locked(self, view: PropertyReportView) -> None:
        async def run():
            await view.mount("VC-9552-CQ")
            await view.submit_lead(LeadSubmission(email="not-an-email", name="Jane"))

        with pytest.raises(ValidationError):
            asyncio.run(run())

        assert view.unlocked is False

    def test_requires_loaded_property(self, view: PropertyReportView) -> None:
        with pytest.raises(NotFoundError):
            asyncio.run(view.submit_lead(LeadSubmission(email="jane@example.com", name="Jane")))

    def test_prefill(self, view: PropertyReportView) -> None:
        async def run():
            await view.mount("VC-9552-CQ")
            await view.submit_lead(LeadSubmission(email="jane@example.com", name="Jane Doe"))

        asyncio.run(run())

        assert view.prefill() == UserProfile(email="jane@example.com", first_name="Jane", last_name="Doe")
