"""Email dispatchers with provider abstraction.

Supports multiple providers via a factory. Set ``EMAIL_PROVIDER=console``
for development; ``brevo`` sends through Brevo's transactional API and
``http`` forwards the wire payload to the site's send-email endpoint.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx
from jinja2 import TemplateError

from property_insights.config import EmailConfig, PropertyInsightsConfig, ReportConfig
from property_insights.email.messages import EmailMessage
from property_insights.email.rendering import RenderedEmail, render_email
from property_insights.exceptions import (
    ConfigurationError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Email service is not configured. Please contact support."


@dataclass
class DispatchResult:
    """Outcome of a single send attempt."""

    success: bool
    message: str
    message_id: str | None = None
    status_code: int = 200
    error: Exception | None = None

    @classmethod
    def failed(cls, exc: TransportError | ConfigurationError) -> "DispatchResult":
        return cls(success=False, message=str(exc), status_code=exc.status_code, error=exc)


class EmailDispatcher(ABC):
    """Abstract base for email providers.

    ``send`` makes exactly one attempt and never raises for transport or
    configuration problems; those are reported in the result.
    """

    name = "base"

    async def send(self, message: EmailMessage) -> DispatchResult:
        """Send ``message`` and report the outcome.

        Raises
        ------
        ValidationError
            If the message data cannot be rendered into an email.
        """
        logger.info(
            "Sending %s email via %s",
            message.type.value,
            self.name,
            extra={
                "action": "email_send_attempt",
                "extra_data": {"provider": self.name, "type": message.type.value},
            },
        )
        try:
            result = await self._deliver(message)
        except (TransportError, ConfigurationError) as exc:
            logger.error(
                "Email send failed: %s",
                exc,
                extra={
                    "action": "email_send_failed",
                    "extra_data": {
                        "provider": self.name,
                        "type": message.type.value,
                        "status_code": exc.status_code,
                    },
                },
            )
            return DispatchResult.failed(exc)

        logger.info(
            "Email sent successfully",
            extra={
                "action": "email_sent",
                "extra_data": {"provider": self.name, "message_id": result.message_id},
            },
        )
        return result

    @abstractmethod
    async def _deliver(self, message: EmailMessage) -> DispatchResult:
        """Perform the send; raise ``TransportError`` or ``ConfigurationError`` on failure."""


class BrevoDispatcher(EmailDispatcher):
    """Render locally and send through Brevo's transactional email API.

    Parameters
    ----------
    config : EmailConfig
        Credentials, addresses and timeout.
    report_config : ReportConfig | None
        Branding and limits for report emails.
    client : httpx.AsyncClient | None
        Shared client; one is opened per send when omitted.
    """

    name = "brevo"

    def __init__(
        self,
        config: EmailConfig,
        report_config: ReportConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.report_config = report_config or ReportConfig()
        self._client = client

    async def _deliver(self, message: EmailMessage) -> DispatchResult:
        if not self.config.brevo_api_key:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

        rendered = _render(message, self.config, self.report_config)
        headers = {
            "accept": "application/json",
            "api-key": self.config.brevo_api_key,
            "content-type": "application/json",
        }
        response = await _post(
            self._client,
            self.config.brevo_api_url,
            rendered.to_brevo(),
            headers,
            self.config.timeout_seconds,
        )
        data = _json_or_empty(response)
        if response.is_error:
            raise TransportError(
                data.get("message") or "Failed to send email",
                status_code=response.status_code,
            )
        return DispatchResult(
            success=True,
            message="Email sent successfully",
            message_id=data.get("messageId"),
            status_code=response.status_code,
        )


class HttpEndpointDispatcher(EmailDispatcher):
    """Forward the ``{type, data}`` payload to a send-email endpoint."""

    name = "http"

    def __init__(
        self,
        url: str,
        client: httpx.AsyncClient | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.url = url
        self._client = client
        self.timeout_seconds = timeout_seconds

    async def _deliver(self, message: EmailMessage) -> DispatchResult:
        response = await _post(
            self._client,
            self.url,
            message.to_payload(),
            {"content-type": "application/json"},
            self.timeout_seconds,
        )
        data = _json_or_empty(response)
        if response.is_error:
            raise TransportError(
                data.get("message") or "Failed to send email",
                status_code=response.status_code,
            )
        return DispatchResult(
            success=True,
            message=data.get("message") or "Email sent successfully",
            message_id=data.get("messageId"),
            status_code=response.status_code,
        )


class ConsoleDispatcher(EmailDispatcher):
    """Dev/testing - logs the rendered email instead of sending."""

    name = "console"

    def __init__(self, config: EmailConfig, report_config: ReportConfig | None = None) -> None:
        self.config = config
        self.report_config = report_config or ReportConfig()
        self.sent: list[RenderedEmail] = []

    async def _deliver(self, message: EmailMessage) -> DispatchResult:
        rendered = _render(message, self.config, self.report_config)
        self.sent.append(rendered)
        text = rendered.text
        logger.info(
            "Email sent (console provider)",
            extra={
                "action": "email_sent",
                "extra_data": {
                    "provider": "console",
                    "to_email": [r.email for r in rendered.to],
                    "subject": rendered.subject,
                    "reply_to": rendered.reply_to.email if rendered.reply_to else None,
                    "body_preview": text[:200] + "..." if len(text) > 200 else text,
                },
            },
        )
        return DispatchResult(
            success=True,
            message="Email sent successfully",
            message_id=f"console-{uuid.uuid4().hex[:12]}",
        )


def get_dispatcher(config: PropertyInsightsConfig) -> EmailDispatcher:
    """Provider factory keyed on ``config.email.provider``."""
    provider = config.email.provider
    if provider == "brevo":
        return BrevoDispatcher(config.email, config.report)
    elif provider == "http":
        return HttpEndpointDispatcher(
            config.email.endpoint_url,
            timeout_seconds=config.email.timeout_seconds,
        )
    elif provider == "console":
        return ConsoleDispatcher(config.email, config.report)
    else:
        raise ConfigurationError(f"Unknown EMAIL_PROVIDER: {provider}")


async def _post(
    client: httpx.AsyncClient | None,
    url: str,
    payload: dict[str, Any],
    headers: dict[str, str],
    timeout: float,
) -> httpx.Response:
    try:
        if client is not None:
            return await client.post(url, json=payload, headers=headers, timeout=timeout)
        async with httpx.AsyncClient(timeout=timeout) as owned:
            return await owned.post(url, json=payload, headers=headers)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid email endpoint URL {url!r}: {exc}") from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"Email provider unreachable: {exc}", status_code=502) from exc


def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _render(
    message: EmailMessage,
    config: EmailConfig,
    report_config: ReportConfig,
) -> RenderedEmail:
    """Render ``message``; data the templates cannot use raises ``ValidationError``."""
    try:
        return render_email(message, config, report_config)
    except (TypeError, ValueError, TemplateError) as exc:
        raise ValidationError({"data": f"Email could not be rendered: {exc}"}) from exc
