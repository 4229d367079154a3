"""Render email messages into provider-ready subject, HTML and text."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, Undefined, select_autoescape

from property_insights.config import EmailConfig, ReportConfig
from property_insights.email.messages import (
    ContactMessage,
    EmailMessage,
    LeadMessage,
    ReportMessage,
)

TEMPLATES_DIR = Path(__file__).parent / "templates"

ADMIN_NAME = "Property Insights Team"

_template_env: Environment | None = None


def _as_number(value: Any) -> float | None:
    """``value`` as a finite float, or None when it is not a number."""
    if value is None or isinstance(value, (bool, Undefined)):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def format_aud(value: Any) -> str:
    """Whole-dollar AUD, e.g. ``$1,250,000``; ``-`` for missing or non-numeric values."""
    number = _as_number(value)
    if number is None:
        return "-"
    return f"${round(number):,}"


def format_number(value: Any) -> str:
    number = _as_number(value)
    if number is None:
        return "-"
    return f"{round(number):,}"


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def get_template_env() -> Environment:
    """Get or create the Jinja2 template environment."""
    global _template_env
    if _template_env is None:
        _template_env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        _template_env.filters["aud"] = format_aud
        _template_env.filters["number"] = format_number
    return _template_env


@dataclass
class Recipient:
    email: str
    name: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"email": self.email, "name": self.name}


@dataclass
class RenderedEmail:
    """A fully rendered email, independent of the sending provider."""

    sender: Recipient
    to: list[Recipient]
    subject: str
    html: str
    text: str
    reply_to: Recipient | None = None
    tags: list[str] = field(default_factory=list)

    def to_brevo(self) -> dict[str, Any]:
        """Request body for Brevo's transactional ``smtp/email`` endpoint."""
        body: dict[str, Any] = {
            "sender": self.sender.to_dict(),
            "to": [r.to_dict() for r in self.to],
            "subject": self.subject,
            "htmlContent": self.html,
            "textContent": self.text,
        }
        if self.reply_to is not None:
            body["replyTo"] = self.reply_to.to_dict()
        if self.tags:
            body["tags"] = list(self.tags)
        return body


def render_email(
    message: EmailMessage,
    email_config: EmailConfig,
    report_config: ReportConfig | None = None,
) -> RenderedEmail:
    """Render ``message`` with the templates for its type.

    Contact and lead messages go to the admin inbox with reply-to set to the
    submitter; reports go to the submitter.
    """
    report_config = report_config or ReportConfig()
    sender = Recipient(email=email_config.from_email, name=email_config.from_name)
    admin = Recipient(email=email_config.admin_email, name=ADMIN_NAME)

    if isinstance(message, ContactMessage):
        context = {"message": message}
        return RenderedEmail(
            sender=sender,
            to=[admin],
            reply_to=Recipient(email=message.email, name=message.full_name),
            subject=f"New Contact Form Submission from {message.first_name} {message.last_name}",
            html=_render("contact.html", context),
            text=_render("contact.txt", context),
            tags=[message.type.value],
        )

    if isinstance(message, LeadMessage):
        context = {"lead": message}
        return RenderedEmail(
            sender=sender,
            to=[admin],
            reply_to=Recipient(email=message.email, name=message.name),
            subject=f"New Property Report Request - {message.property_address}",
            html=_render("lead.html", context),
            text=_render("lead.txt", context),
            tags=[message.type.value],
        )

    if isinstance(message, ReportMessage):
        context = _report_context(message, email_config, report_config)
        address = message.property.get("address") or "Property"
        return RenderedEmail(
            sender=sender,
            to=[Recipient(email=message.email, name=message.name)],
            subject=f"Your Property Report for {address}",
            html=_render("report.html", context),
            text=_render("report.txt", context),
            tags=[message.type.value],
        )

    raise TypeError(f"Cannot render {type(message).__name__}")


def _render(template_name: str, context: dict[str, Any]) -> str:
    return get_template_env().get_template(template_name).render(**context)


def _report_context(
    message: ReportMessage,
    email_config: EmailConfig,
    report_config: ReportConfig,
) -> dict[str, Any]:
    prop = message.property
    images = _as_list(prop.get("images"))
    return {
        "name": message.name,
        "first_name": message.name.split(" ")[0] if message.name else "",
        "address": prop.get("address") or "the selected property",
        "prop": prop,
        "hero_image": images[0] if images else None,
        "price": prop.get("priceEstimate"),
        "rental": prop.get("rentalEstimate"),
        "insights": prop.get("suburbInsights"),
        "comparables": _as_list(prop.get("comparables"))[: report_config.max_comparables],
        "sales_history": _as_list(prop.get("salesHistory"))[: report_config.max_sales_history],
        "schools": _as_list(prop.get("schools"))[: report_config.max_schools],
        "report_url": f"{email_config.site_url}/property/{prop.get('id', '')}",
        "site_url": email_config.site_url,
        "brand": report_config.brand,
        "colors": report_config.brand.colors,
        "contact_email": report_config.contact_email,
        "contact_phone": report_config.contact_phone,
        "appraisal_url": report_config.appraisal_url,
        "cta_text": report_config.cta_text,
    }
