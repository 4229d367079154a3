"""Tests for domain models."""

from datetime import date

import pytest

from property_insights.models import (
    GateState,
    LeadSubmission,
    MessageType,
    PriceEstimate,
    PropertyRecord,
    PropertyType,
    SettlementPolicy,
    UserProfile,
)


def _record(**overrides) -> PropertyRecord:
    values = {
        "id": "T-1",
        "address": "1 Test Street, Testville QLD 4000",
        "short_address": "1 Test Street",
        "suburb": "Testville",
        "state": "QLD",
        "postcode": "4000",
        "property_type": PropertyType.HOUSE,
        "beds": 3,
        "baths": 2,
        "parking": 1,
        "price_estimate": PriceEstimate(500000, 550000, 600000),
    }
    values.update(overrides)
    return PropertyRecord(**values)


class TestPriceEstimate:
    """Tests for PriceEstimate."""

    def test_valid_range(self) -> None:
        estimate = PriceEstimate(low=700000, mid=750000, high=800000)

        assert estimate.low <= estimate.mid <= estimate.high

    def test_equal_bounds_allowed(self) -> None:
        assert PriceEstimate(1, 1, 1).mid == 1

    @pytest.mark.parametrize(
        "low,mid,high",
        [(800000, 750000, 900000), (700000, 950000, 900000), (-1, 0, 10)],
    )
    def test_rejects_unordered(self, low: int, mid: int, high: int) -> None:
        with pytest.raises(ValueError):
            PriceEstimate(low=low, mid=mid, high=high)


class TestPropertyRecord:
    """Tests for PropertyRecord."""

    def test_defaults(self) -> None:
        record = _record()

        assert record.land_size == 0
        assert record.rental_estimate is None
        assert record.images == []

    def test_summary(self) -> None:
        summary = _record().summary()

        assert summary.id == "T-1"
        assert summary.display_address == "1 Test Street, Testville QLD 4000"
        assert summary.short_address == "1 Test Street"
        assert summary.property_type is PropertyType.HOUSE

    def test_summary_is_frozen(self) -> None:
        summary = _record().summary()

        with pytest.raises(AttributeError):
            summary.suburb = "Elsewhere"


class TestLeadSubmission:
    """Tests for LeadSubmission name handling."""

    def test_full_name_from_name(self) -> None:
        assert LeadSubmission(email="a@b.co", name="  Jane   Doe ").full_name == "Jane Doe"

    def test_full_name_from_parts(self) -> None:
        form = LeadSubmission(email="a@b.co", first_name="Jane", last_name="Doe")

        assert form.full_name == "Jane Doe"
        assert form.given_name == "Jane"

    def test_given_name_from_single_name(self) -> None:
        assert LeadSubmission(email="a@b.co", name="Jane Doe").given_name == "Jane"

    def test_empty_name(self) -> None:
        form = LeadSubmission(email="a@b.co")

        assert form.full_name == ""
        assert form.given_name == ""


class TestUserProfile:
    """Tests for UserProfile."""

    def test_splits_full_name(self) -> None:
        profile = UserProfile.from_submission(
            LeadSubmission(email=" jane@example.com ", name="Jane Mary Doe", phone="0412 345 678")
        )

        assert profile.first_name == "Jane"
        assert profile.last_name == "Mary Doe"
        assert profile.email == "jane@example.com"
        assert profile.phone == "0412 345 678"

    def test_keeps_explicit_parts(self) -> None:
        profile = UserProfile.from_submission(
            LeadSubmission(email="jane@example.com", first_name="Jane", last_name="Doe")
        )

        assert (profile.first_name, profile.last_name) == ("Jane", "Doe")


class TestEnums:
    """Enum wire values."""

    def test_values(self) -> None:
        assert MessageType.LEAD.value == "lead"
        assert GateState.UNLOCKED.value == "UNLOCKED"
        assert PropertyType("Terrace") is PropertyType.TERRACE

    def test_policy_members(self) -> None:
        assert {p.name for p in SettlementPolicy} == {
            "ALWAYS_UNLOCK_ON_SUBMIT",
            "UNLOCK_ON_DELIVERY",
        }
