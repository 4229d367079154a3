"""Field-level validation of lead and contact forms."""

import re

from property_insights.exceptions import ValidationError
from property_insights.models import ContactForm, LeadSubmission

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\d\s\-+()]+$")
MIN_PHONE_DIGITS = 8
MAX_MESSAGE_LENGTH = 5000


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email.strip()))


def is_valid_phone(phone: str) -> bool:
    """Digits, spaces, ``-+()`` only, with at least eight digits."""
    phone = phone.strip()
    digits = sum(ch.isdigit() for ch in phone)
    return bool(PHONE_PATTERN.match(phone)) and digits >= MIN_PHONE_DIGITS


def validate_lead(submission: LeadSubmission) -> dict[str, str]:
    """Return field errors for a lead submission (empty when valid)."""
    errors: dict[str, str] = {}

    if not submission.full_name:
        errors["name"] = "Name is required"

    _check_email(submission.email, errors)
    _check_optional(submission.phone, submission.message, errors)
    return errors


def validate_contact(form: ContactForm) -> dict[str, str]:
    """Return field errors for a contact-page enquiry."""
    errors: dict[str, str] = {}

    if not form.first_name.strip():
        errors["first_name"] = "First name is required"
    if not form.last_name.strip():
        errors["last_name"] = "Last name is required"
    _check_email(form.email, errors)
    if not form.message.strip():
        errors["message"] = "Message is required"
    _check_optional(form.phone, form.message, errors)
    return errors


def ensure_valid(form: LeadSubmission | ContactForm) -> None:
    """Raise ``ValidationError`` listing every invalid field."""
    if isinstance(form, ContactForm):
        errors = validate_contact(form)
    else:
        errors = validate_lead(form)
    if errors:
        raise ValidationError(errors)


def _check_email(email: str, errors: dict[str, str]) -> None:
    if not email.strip():
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"


def _check_optional(phone: str, message: str, errors: dict[str, str]) -> None:
    if phone.strip() and not is_valid_phone(phone):
        errors["phone"] = "Please enter a valid mobile number"
    if len(message) > MAX_MESSAGE_LENGTH:
        errors["message"] = f"Message must be at most {MAX_MESSAGE_LENGTH} characters"
