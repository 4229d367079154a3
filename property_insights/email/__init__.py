"""Transactional email: messages, rendering and dispatchers."""

from property_insights.email.dispatcher import (
    BrevoDispatcher,
    ConsoleDispatcher,
    DispatchResult,
    EmailDispatcher,
    HttpEndpointDispatcher,
    get_dispatcher,
)
from property_insights.email.endpoint import handle_send_email
from property_insights.email.messages import (
    ContactMessage,
    EmailMessage,
    LeadMessage,
    ReportMessage,
    message_from_payload,
)
from property_insights.email.rendering import RenderedEmail, render_email

__all__ = [
    "BrevoDispatcher",
    "ConsoleDispatcher",
    "ContactMessage",
    "DispatchResult",
    "EmailDispatcher",
    "EmailMessage",
    "HttpEndpointDispatcher",
    "LeadMessage",
    "RenderedEmail",
    "ReportMessage",
    "get_dispatcher",
    "handle_send_email",
    "message_from_payload",
    "render_email",
]
