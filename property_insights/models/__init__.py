"""Domain models for property insights."""

from property_insights.models.enums import (
    Demand,
    GateState,
    MessageType,
    PropertyType,
    SaleType,
    SchoolType,
    SettlementPolicy,
)
from property_insights.models.lead import (
    ContactForm,
    LeadSubmission,
    SubmissionResult,
    UnlockRecord,
    UserProfile,
)
from property_insights.models.property import (
    Coordinates,
    PriceEstimate,
    PropertyDetail,
    PropertyRecord,
    PropertySummary,
    RentalEstimate,
    Sale,
    School,
    SuburbInsights,
)

__all__ = [
    "ContactForm",
    "Coordinates",
    "Demand",
    "GateState",
    "LeadSubmission",
    "MessageType",
    "PriceEstimate",
    "PropertyDetail",
    "PropertyRecord",
    "PropertySummary",
    "PropertyType",
    "RentalEstimate",
    "Sale",
    "SaleType",
    "School",
    "SchoolType",
    "SettlementPolicy",
    "SubmissionResult",
    "SuburbInsights",
    "UnlockRecord",
    "UserProfile",
]
