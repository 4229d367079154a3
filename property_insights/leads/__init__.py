"""Lead capture: form validation and the submission pipeline."""

from property_insights.leads.pipeline import LeadPipeline, new_report_id
from property_insights.leads.validation import (
    ensure_valid,
    is_valid_email,
    is_valid_phone,
    validate_contact,
    validate_lead,
)

__all__ = [
    "LeadPipeline",
    "ensure_valid",
    "is_valid_email",
    "is_valid_phone",
    "new_report_id",
    "validate_contact",
    "validate_lead",
]
