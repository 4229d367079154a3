"""Lead capture, unlock and submission models."""

from dataclasses import dataclass


@dataclass
class LeadSubmission:
    """A contact form requesting a property report.

    Accepts either a single ``name`` or ``first_name``/``last_name``.
    """

    email: str
    name: str = ""
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    message: str = ""
    property_id: str | None = None

    @property
    def full_name(self) -> str:
        if self.name.strip():
            return " ".join(self.name.split())
        return " ".join(part for part in (self.first_name.strip(), self.last_name.strip()) if part)

    @property
    def given_name(self) -> str:
        """First name for greetings."""
        if self.first_name.strip():
            return self.first_name.strip()
        return self.full_name.split(" ")[0] if self.full_name else ""


@dataclass
class ContactForm:
    """General enquiry from the contact page."""

    first_name: str
    last_name: str
    email: str
    message: str
    phone: str = ""


@dataclass(frozen=True)
class UnlockRecord:
    property_id: str
    unlocked: bool
    email: str | None = None


@dataclass
class UserProfile:
    """Last submitted identity, used to prefill forms."""

    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""

    @classmethod
    def from_submission(cls, submission: LeadSubmission) -> "UserProfile":
        first, last = submission.first_name.strip(), submission.last_name.strip()
        if not first and not last:
            parts = submission.full_name.split(" ", 1)
            first = parts[0]
            last = parts[1] if len(parts) > 1 else ""
        return cls(
            email=submission.email.strip(),
            first_name=first,
            last_name=last,
            phone=submission.phone.strip(),
        )


@dataclass
class SubmissionResult:
    """Outcome reported to the caller of a lead submission."""

    success: bool
    report_id: str
    message: str
    warning: str | None = None
    dispatched: bool = False
