"""Headless model of the property report page."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Callable

from property_insights.aggregator import PropertyDetailAggregator
from property_insights.exceptions import NotFoundError
from property_insights.gate import SectionView, UnlockGate, render_sections
from property_insights.leads import LeadPipeline
from property_insights.models import LeadSubmission, PropertyDetail, SubmissionResult, UserProfile

logger = logging.getLogger(__name__)


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    NOT_FOUND = "not_found"


class PropertyReportView:
    """Load a report, gate it and capture the lead that unlocks it.

    Every ``mount`` starts a new generation; a response that arrives after a
    newer ``mount`` or after ``unmount`` is discarded.

    Parameters
    ----------
    aggregator : PropertyDetailAggregator
        Source of the detail bundle.
    gate : UnlockGate
        Shared unlock state.
    pipeline : LeadPipeline
        Handles lead submissions from the prompt.
    on_prompt : Callable[[str], Any] | None
        Called with the property id when the unlock prompt opens.
    """

    def __init__(
        self,
        aggregator: PropertyDetailAggregator,
        gate: UnlockGate,
        pipeline: LeadPipeline,
        on_prompt: Callable[[str], Any] | None = None,
    ) -> None:
        self.aggregator = aggregator
        self.gate = gate
        self.pipeline = pipeline
        self.on_prompt = on_prompt

        self.status = ViewStatus.IDLE
        self.property_id: str | None = None
        self.detail: PropertyDetail | None = None
        self.error: str | None = None
        self.unlocked = False
        self.prompt_open = False

        self._generation = 0
        self._prompt_handle: asyncio.TimerHandle | None = None

    async def mount(self, property_id: str) -> ViewStatus:
        """Load ``property_id`` and schedule the prompt if it is locked."""
        self._generation += 1
        generation = self._generation
        self._cancel_prompt()

        self.property_id = property_id
        self.status = ViewStatus.LOADING
        self.detail = None
        self.error = None
        self.prompt_open = False

        try:
            detail = await self.aggregator.get_property_details(property_id)
        except NotFoundError as exc:
            if generation != self._generation:
                return self.status
            self.status = ViewStatus.NOT_FOUND
            self.error = str(exc)
            return self.status

        if generation != self._generation:
            logger.debug("Discarding stale detail for %s", property_id)
            return self.status

        self.detail = detail
        self.unlocked = self.gate.is_unlocked(property_id)
        self.status = ViewStatus.READY
        if not self.unlocked:
            self._prompt_handle = self.gate.schedule_prompt(property_id, self._open_prompt)
        return self.status

    def unmount(self) -> None:
        """Tear down; any in-flight load is ignored when it completes."""
        self._generation += 1
        self._cancel_prompt()
        self.status = ViewStatus.IDLE

    def render(self) -> list[SectionView]:
        if self.status is not ViewStatus.READY or self.detail is None:
            return []
        return render_sections(self.detail, self.unlocked)

    def prefill(self) -> UserProfile | None:
        """Last submitted profile, for populating the lead form."""
        return self.gate.last_profile()

    async def submit_lead(self, form: LeadSubmission) -> SubmissionResult:
        """Run the lead pipeline for the mounted property.

        Raises
        ------
        ValidationError
            If the form is invalid; the gate is untouched.
        """
        if self.detail is None:
            raise NotFoundError("No property is loaded")
        result = await self.pipeline.submit(form, self.detail)
        self.unlocked = self.gate.is_unlocked(self.detail.id)
        if self.unlocked:
            self.prompt_open = False
            self._cancel_prompt()
        return result

    def _open_prompt(self, property_id: str) -> None:
        self._prompt_handle = None
        self.prompt_open = True
        if self.on_prompt is not None:
            self.on_prompt(property_id)

    def _cancel_prompt(self) -> None:
        if self._prompt_handle is not None:
            self._prompt_handle.cancel()
            self._prompt_handle = None
