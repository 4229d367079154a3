"""Tests for lead and contact form validation."""

import pytest

from property_insights.exceptions import ValidationError
from property_insights.leads import (
    ensure_valid,
    is_valid_email,
    is_valid_phone,
    validate_contact,
    validate_lead,
)
from property_insights.models import ContactForm, LeadSubmission


class TestEmail:
    """Email shape check."""

    @pytest.mark.parametrize("email", ["jane@example.com", "a.b+c@sub.domain.com.au", " jane@example.com "])
    def test_valid(self, email: str) -> None:
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", ["not-an-email", "jane@example", "@example.com", "jane doe@example.com", ""])
    def test_invalid(self, email: str) -> None:
        assert not is_valid_email(email)


class TestPhone:
    """Mobile number check."""

    @pytest.mark.parametrize("phone", ["0412 345 678", "+61 (412) 345-678", "12345678"])
    def test_valid(self, phone: str) -> None:
        assert is_valid_phone(phone)

    @pytest.mark.parametrize("phone", ["1234567", "0412abc678", "call me"])
    def test_invalid(self, phone: str) -> None:
        assert not is_valid_phone(phone)


class TestValidateLead:
    """Tests for validate_lead."""

    def test_valid_single_name(self) -> None:
        assert validate_lead(LeadSubmission(email="jane@example.com", name="Jane Doe")) == {}

    def test_valid_split_name(self) -> None:
        form = LeadSubmission(email="jane@example.com", first_name="Jane", last_name="Doe")

        assert validate_lead(form) == {}

    def test_missing_name(self) -> None:
        errors = validate_lead(LeadSubmission(email="jane@example.com", name="   "))

        assert errors == {"name": "Name is required"}

    def test_missing_email(self) -> None:
        errors = validate_lead(LeadSubmission(email="", name="Jane"))

        assert errors["email"] == "Email is required"

    def test_malformed_email(self) -> None:
        errors = validate_lead(LeadSubmission(email="not-an-email", name="Jane"))

        assert errors == {"email": "Please enter a valid email address"}

    def test_bad_phone(self) -> None:
        errors = validate_lead(LeadSubmission(email="jane@example.com", name="Jane", phone="123"))

        assert set(errors) == {"phone"}

    def test_long_message(self) -> None:
        errors = validate_lead(LeadSubmission(email="jane@example.com", name="Jane", message="x" * 5001))

        assert set(errors) == {"message"}

    def test_all_fields_reported(self) -> None:
        errors = validate_lead(LeadSubmission(email="nope", phone="abc"))

        assert set(errors) == {"name", "email", "phone"}


class TestValidateContact:
    """Tests for validate_contact."""

    def test_valid(self) -> None:
        form = ContactForm(first_name="Jane", last_name="Doe", email="jane@example.com", message="Hello")

        assert validate_contact(form) == {}

    def test_required_fields(self) -> None:
        errors = validate_contact(ContactForm(first_name="", last_name=" ", email="", message=""))

        assert set(errors) == {"first_name", "last_name", "email", "message"}


class TestEnsureValid:
    """Tests for ensure_valid."""

    def test_passes(self) -> None:
        ensure_valid(LeadSubmission(email="jane@example.com", name="Jane"))

    def test_raises_with_errors(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid(LeadSubmission(email="not-an-email", name="Jane"))

        assert exc_info.value.errors == {"email": "Please enter a valid email address"}

    def test_contact_form(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid(ContactForm(first_name="Jane", last_name="Doe", email="jane@example.com", message=""))

        assert set(exc_info.value.errors) == {"message"}
