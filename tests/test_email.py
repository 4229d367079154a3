"""Tests for email messages and template rendering."""

import pytest

from property_insights.config import EmailConfig, ReportConfig
from property_insights.email import (
    ContactMessage,
    LeadMessage,
    ReportMessage,
    message_from_payload,
    render_email,
)
from property_insights.email.rendering import format_aud, format_number
from property_insights.exceptions import ValidationError
from property_insights.models import PropertyDetail


@pytest.fixture
def email_config() -> EmailConfig:
    return EmailConfig(site_url="https://www.example.com.au")


@pytest.fixture
def contact() -> ContactMessage:
    return ContactMessage(
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        message="Line one\n<b>Line two</b>",
        phone="0412 345 678",
    )


class TestPayloads:
    """Wire format of each message type."""

    def test_contact(self, contact: ContactMessage) -> None:
        assert contact.to_payload() == {
            "type": "contact",
            "data": {
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane@example.com",
                "phone": "0412 345 678",
                "message": "Line one\n<b>Line two</b>",
            },
        }

    def test_lead(self) -> None:
        lead = LeadMessage(
            name="Jane Doe",
            email="jane@example.com",
            property_address="30 Shields Street, Redcliffe QLD 4020",
            property_suburb="Redcliffe",
            property_id="VC-9552-CQ",
        )

        payload = lead.to_payload()

        assert payload["type"] == "lead"
        assert payload["data"]["propertyAddress"] == "30 Shields Street, Redcliffe QLD 4020"
        assert payload["data"]["propertyId"] == "VC-9552-CQ"

    def test_report_for_detail(self, shields_detail: PropertyDetail) -> None:
        report = ReportMessage.for_detail("jane@example.com", "Jane Doe", shields_detail)

        data = report.to_payload()["data"]

        assert data["property"]["id"] == "VC-9552-CQ"
        assert data["property"]["priceEstimate"]["mid"] == 785000
        assert data["property"]["propertyType"] == "House"


class TestMessageFromPayload:
    """Parsing the wire format."""

    def test_round_trip(self, contact: ContactMessage) -> None:
        assert message_from_payload(contact.to_payload()) == contact

    def test_lead_optional_fields(self) -> None:
        message = message_from_payload({"type": "lead", "data": {"name": "Jane", "email": "j@e.com"}})

        assert message == LeadMessage(name="Jane", email="j@e.com")

    @pytest.mark.parametrize("body", [{"type": "sms", "data": {}}, {"data": {}}, "lead", None])
    def test_invalid_type(self, body) -> None:
        with pytest.raises(ValidationError) as exc_info:
            message_from_payload(body)

        assert "type" in exc_info.value.errors

    def test_missing_fields(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            message_from_payload({"type": "contact", "data": {"firstName": "Jane"}})

        assert set(exc_info.value.errors) == {"lastName", "email", "message"}

    def test_missing_data(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            message_from_payload({"type": "report"})

        assert set(exc_info.value.errors) == {"data"}

    def test_report_property_must_be_object(self) -> None:
        with pytest.raises(ValidationError):
            message_from_payload({"type": "report", "data": {"email": "j@e.com", "name": "J", "property": "x"}})


class TestFormatting:
    """Template filters."""

    def test_aud(self) -> None:
        assert format_aud(1250000) == "$1,250,000"
        assert format_aud(785000.4) == "$785,000"
        assert format_aud(None) == "-"

    def test_number(self) -> None:
        assert format_number(607) == "607"
        assert format_number(12000) == "12,000"

    @pytest.mark.parametrize("value", ["abc", "", True, float("nan"), float("inf"), [1], {"a": 1}])
    def test_non_numeric(self, value) -> None:
        assert format_aud(value) == "-"
        assert format_number(value) == "-"

    def test_numeric_string(self) -> None:
        assert format_aud("785000") == "$785,000"


class TestRenderContact:
    """Contact emails go to the admin inbox."""

    def test_envelope(self, contact: ContactMessage, email_config: EmailConfig) -> None:
        email = render_email(contact, email_config)

        assert email.subject == "New Contact Form Submission from Jane Doe"
        assert [r.email for r in email.to] == ["customercare@kindred.com.au"]
        assert email.reply_to.email == "jane@example.com"
        assert email.reply_to.name == "Jane Doe"
        assert email.sender.email == "noreply@kindred.com.au"

    def test_html_escapes_user_input(self, contact: ContactMessage, email_config: EmailConfig) -> None:
        email = render_email(contact, email_config)

        assert "&lt;b&gt;Line two&lt;/b&gt;" in email.html
        assert "<b>Line two</b>" not in email.html
        assert "Line one<br>" in email.html

    def test_text_is_not_escaped(self, contact: ContactMessage, email_config: EmailConfig) -> None:
        email = render_email(contact, email_config)

        assert "<b>Line two</b>" in email.text
        assert "Phone: 0412 345 678" in email.text

    def test_brevo_body(self, contact: ContactMessage, email_config: EmailConfig) -> None:
        body = render_email(contact, email_config).to_brevo()

        assert body["sender"] == {"email": "noreply@kindred.com.au", "name": "Property Insights Australia"}
        assert body["to"] == [{"email": "customercare@kindred.com.au", "name": "Property Insights Team"}]
        assert body["replyTo"]["email"] == "jane@example.com"
        assert set(body) >= {"subject", "htmlContent", "textContent"}


class TestRenderLead:
    """Lead notifications."""

    def test_subject_and_body(self, email_config: EmailConfig) -> None:
        lead = LeadMessage(
            name="Jane Doe",
            email="jane@example.com",
            property_address="30 Shields Street, Redcliffe QLD 4020",
            property_suburb="Redcliffe",
            property_id="VC-9552-CQ",
        )

        email = render_email(lead, email_config)

        assert email.subject == "New Property Report Request - 30 Shields Street, Redcliffe QLD 4020"
        assert "Property ID: VC-9552-CQ" in email.text
        assert "Redcliffe" in email.html
        assert email.tags == ["lead"]


class TestRenderReport:
    """Report emails go to the visitor."""

    def test_report(self, shields_detail: PropertyDetail, email_config: EmailConfig) -> None:
        report = ReportMessage.for_detail("jane@example.com", "Jane Doe", shields_detail)

        email = render_email(report, email_config)

        assert email.subject == "Your Property Report for 30 Shields Street, Redcliffe QLD 4020"
        assert [r.email for r in email.to] == ["jane@example.com"]
        assert email.reply_to is None
        assert "https://www.example.com.au/property/VC-9552-CQ" in email.html
        assert "https://www.example.com.au/property/VC-9552-CQ" in email.text
        assert "$720,000 - $850,000" in email.html
        assert "Hi Jane," in email.text
        assert "Suburb Performance" in email.html
        assert shields_detail.images[0] in email.html

    def test_limits(self, sourced_detail: PropertyDetail, email_config: EmailConfig) -> None:
        report = ReportMessage.for_detail("jane@example.com", "Jane", sourced_detail)
        config = ReportConfig(max_comparables=1, max_schools=1, max_sales_history=1)

        email = render_email(report, email_config, config)

        assert "115 Collins Street" in email.text
        assert "130 Collins Street" not in email.text
        assert "Melbourne Grammar School" in email.text
        assert "Melbourne High School" not in email.text

    def test_minimal_payload(self, email_config: EmailConfig) -> None:
        """A sparse property from the wire still renders."""
        report = ReportMessage(email="jane@example.com", name="Jane", property={"id": "X1"})

        email = render_email(report, email_config)

        assert email.subject == "Your Property Report for Property"
        assert "Contact Agent" in email.text
        assert "/property/X1" in email.text

    def test_wrongly_typed_payload(self, email_config: EmailConfig) -> None:
        """Non-numeric amounts and non-list sections render as placeholders."""
        report = ReportMessage(
            email="jane@example.com",
            name="Jane",
            property={
                "address": "1 Test Street",
                "priceEstimate": {"low": "abc", "high": "1"},
                "suburbInsights": {"medianPrice": "n/a", "growthPercent": "fast"},
                "comparables": 42,
                "schools": "none",
                "images": "front.jpg",
            },
        )

        email = render_email(report, email_config)

        assert "Estimated value: - - $1" in email.text
        assert "Median price: -" in email.text
        assert "Comparable sales" not in email.text
        assert "front.jpg" not in email.html
