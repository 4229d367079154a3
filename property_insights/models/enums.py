"""Enumeration types for property and lead entities."""

from enum import Enum


class PropertyType(str, Enum):
    HOUSE = "House"
    APARTMENT = "Apartment"
    TOWNHOUSE = "Townhouse"
    TERRACE = "Terrace"
    UNIT = "Unit"
    VILLA = "Villa"
    LAND = "Land"


class SchoolType(str, Enum):
    PUBLIC = "Public"
    PRIVATE = "Private"


class SaleType(str, Enum):
    AUCTION = "Auction"
    PRIVATE_SALE = "Private Sale"


class Demand(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class MessageType(str, Enum):
    CONTACT = "contact"
    LEAD = "lead"
    REPORT = "report"


class GateState(str, Enum):
    LOCKED = "LOCKED"
    UNLOCKED = "UNLOCKED"


class SettlementPolicy(str, Enum):
    """How a lead submission reconciles the gate with the email outcome."""

    ALWAYS_UNLOCK_ON_SUBMIT = "ALWAYS_UNLOCK_ON_SUBMIT"
    UNLOCK_ON_DELIVERY = "UNLOCK_ON_DELIVERY"
