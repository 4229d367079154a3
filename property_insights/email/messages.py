"""Typed email messages and the ``{type, data}`` wire format."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from property_insights.exceptions import ValidationError
from property_insights.models import MessageType, PropertyDetail
from property_insights.serialization import to_camel_dict


@dataclass
class ContactMessage:
    """General enquiry routed to the admin inbox."""

    first_name: str
    last_name: str
    email: str
    message: str
    phone: str = ""

    type = MessageType.CONTACT

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_payload(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "data": {
                "firstName": self.first_name,
                "lastName": self.last_name,
                "email": self.email,
                "phone": self.phone,
                "message": self.message,
            },
        }


@dataclass
class LeadMessage:
    """Notification that a visitor requested a property report."""

    name: str
    email: str
    property_address: str = ""
    property_suburb: str = ""
    property_id: str = ""

    type = MessageType.LEAD

    def to_payload(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "data": {
                "name": self.name,
                "email": self.email,
                "propertyAddress": self.property_address,
                "propertySuburb": self.property_suburb,
                "propertyId": self.property_id,
            },
        }


@dataclass
class ReportMessage:
    """The report itself, addressed to the visitor.

    ``property`` holds the report in its camelCase wire form so that a
    message parsed from a request renders the same as one built locally.
    """

    email: str
    name: str
    property: dict[str, Any] = field(default_factory=dict)

    type = MessageType.REPORT

    @classmethod
    def for_detail(cls, email: str, name: str, detail: PropertyDetail) -> "ReportMessage":
        return cls(email=email, name=name, property=to_camel_dict(detail))

    def to_payload(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "data": {"email": self.email, "name": self.name, "property": self.property},
        }


EmailMessage = Union[ContactMessage, LeadMessage, ReportMessage]

_REQUIRED = {
    MessageType.CONTACT: ("firstName", "lastName", "email", "message"),
    MessageType.LEAD: ("name", "email"),
    MessageType.REPORT: ("email", "name", "property"),
}


def message_from_payload(body: Any) -> EmailMessage:
    """Parse a ``{"type": ..., "data": {...}}`` request body.

    Raises
    ------
    ValidationError
        ``errors["type"]`` is set for a missing or unknown type; other keys
        name missing data fields.
    """
    if not isinstance(body, dict):
        raise ValidationError({"type": "Invalid email type"})
    try:
        kind = MessageType(body.get("type"))
    except ValueError:
        raise ValidationError({"type": "Invalid email type"}) from None

    data = body.get("data")
    if not isinstance(data, dict):
        raise ValidationError({"data": "Email data is required"})

    missing = {key: f"{key} is required" for key in _REQUIRED[kind] if not data.get(key)}
    if missing:
        raise ValidationError(missing)

    if kind is MessageType.CONTACT:
        return ContactMessage(
            first_name=str(data["firstName"]),
            last_name=str(data["lastName"]),
            email=str(data["email"]),
            message=str(data["message"]),
            phone=str(data.get("phone") or ""),
        )
    if kind is MessageType.LEAD:
        return LeadMessage(
            name=str(data["name"]),
            email=str(data["email"]),
            property_address=str(data.get("propertyAddress") or ""),
            property_suburb=str(data.get("propertySuburb") or ""),
            property_id=str(data.get("propertyId") or ""),
        )
    if not isinstance(data["property"], dict):
        raise ValidationError({"property": "property must be an object"})
    return ReportMessage(email=str(data["email"]), name=str(data["name"]), property=data["property"])
