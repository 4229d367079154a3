"""Lead submission: validate, dispatch, settle the unlock gate."""

from __future__ import annotations

import asyncio
import logging
import time

from property_insights.email import (
    ContactMessage,
    DispatchResult,
    EmailDispatcher,
    LeadMessage,
    ReportMessage,
)
from property_insights.email.messages import EmailMessage
from property_insights.exceptions import ConfigurationError, TransportError
from property_insights.gate import UnlockGate
from property_insights.leads.validation import ensure_valid
from property_insights.models import (
    ContactForm,
    LeadSubmission,
    PropertyDetail,
    SettlementPolicy,
    SubmissionResult,
    UserProfile,
)

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Report will be sent to your email shortly"
DEGRADED_MESSAGE = "Report unlocked"
DEGRADED_WARNING = "We couldn't email your report right now. You can still view it here."


def new_report_id() -> str:
    """``RPT-<epoch millis>``."""
    return f"RPT-{int(time.time() * 1000)}"


class LeadPipeline:
    """Turn a lead form into an email dispatch and an unlocked report.

    Under ``ALWAYS_UNLOCK_ON_SUBMIT`` a failed dispatch still unlocks the
    property and returns a successful result carrying a warning.
    ``UNLOCK_ON_DELIVERY`` leaves the gate locked and fails instead.

    Parameters
    ----------
    dispatcher : EmailDispatcher
        Provider used for a single send attempt per message.
    gate : UnlockGate
        Gate updated on settlement.
    policy : SettlementPolicy
        How a failed dispatch is settled.
    send_report : bool
        Email the report to the submitter when a detail is supplied (set
        False to send only the lead notification).
    """

    def __init__(
        self,
        dispatcher: EmailDispatcher,
        gate: UnlockGate,
        policy: SettlementPolicy = SettlementPolicy.ALWAYS_UNLOCK_ON_SUBMIT,
        send_report: bool = True,
    ) -> None:
        self.dispatcher = dispatcher
        self.gate = gate
        self.policy = policy
        self.send_report = send_report
        self._in_flight: dict[tuple[str | None, str], asyncio.Task] = {}

    async def submit(
        self,
        form: LeadSubmission,
        detail: PropertyDetail | None = None,
    ) -> SubmissionResult:
        """Validate and settle a lead submission.

        A second identical submission (same property and email) made while
        the first is still in flight waits on the first instead of sending
        again.

        Raises
        ------
        ValidationError
            If any field is invalid; nothing is dispatched.
        """
        ensure_valid(form)
        property_id = detail.id if detail is not None else form.property_id
        key = (property_id, form.email.strip().lower())

        task = self._in_flight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._settle(form, detail, property_id))
            self._in_flight[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        else:
            logger.debug("Joining in-flight submission for %s", property_id)
        return await asyncio.shield(task)

    async def submit_contact(self, form: ContactForm) -> DispatchResult:
        """Send a contact-page enquiry; failures are returned, not masked.

        Raises
        ------
        ValidationError
            If any field is invalid.
        """
        ensure_valid(form)
        message = ContactMessage(
            first_name=form.first_name.strip(),
            last_name=form.last_name.strip(),
            email=form.email.strip(),
            message=form.message,
            phone=form.phone.strip(),
        )
        return await self._dispatch(message)

    async def _settle(
        self,
        form: LeadSubmission,
        detail: PropertyDetail | None,
        property_id: str | None,
    ) -> SubmissionResult:
        email = form.email.strip()
        lead = LeadMessage(
            name=form.full_name,
            email=email,
            property_address=detail.address if detail is not None else "",
            property_suburb=detail.suburb if detail is not None else "",
            property_id=property_id or "",
        )
        results = [await self._dispatch(lead)]
        if self.send_report and detail is not None:
            report = ReportMessage.for_detail(email=email, name=form.full_name, detail=detail)
            results.append(await self._dispatch(report))

        self.gate.remember_profile(UserProfile.from_submission(form))
        report_id = new_report_id()
        failures = [r for r in results if not r.success]

        if not failures:
            self._unlock(property_id, email)
            return SubmissionResult(
                success=True,
                report_id=report_id,
                message=SUCCESS_MESSAGE,
                dispatched=True,
            )

        reason = "; ".join(dict.fromkeys(r.message for r in failures))
        logger.warning(
            "Lead dispatch failed for property %s: %s",
            property_id,
            reason,
            extra={
                "action": "lead_dispatch_failed",
                "extra_data": {"property_id": property_id, "policy": self.policy.value},
            },
        )

        if self.policy is SettlementPolicy.ALWAYS_UNLOCK_ON_SUBMIT:
            self._unlock(property_id, email)
            return SubmissionResult(
                success=True,
                report_id=report_id,
                message=DEGRADED_MESSAGE,
                warning=DEGRADED_WARNING,
                dispatched=False,
            )

        return SubmissionResult(
            success=False,
            report_id=report_id,
            message=reason,
            dispatched=False,
        )

    async def _dispatch(self, message: EmailMessage) -> DispatchResult:
        try:
            return await self.dispatcher.send(message)
        except (TransportError, ConfigurationError) as exc:
            logger.error("Dispatcher raised instead of reporting: %s", exc)
            return DispatchResult.failed(exc)
        except Exception as exc:
            logger.error(
                "Email dispatch of %s message failed: %s",
                message.type.value,
                exc,
                exc_info=True,
                extra={
                    "action": "lead_dispatch_failed",
                    "extra_data": {"type": message.type.value, "error": type(exc).__name__},
                },
            )
            return DispatchResult(
                success=False,
                message=f"Email could not be sent: {exc}",
                status_code=500,
                error=exc,
            )

    def _unlock(self, property_id: str | None, email: str) -> None:
        if property_id is None:
            return
        self.gate.unlock(property_id, email)

    def _forget(self, key: tuple[str | None, str], task: asyncio.Task) -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]
