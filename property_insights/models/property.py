"""Property, sale, school and suburb models."""

from dataclasses import dataclass, field
from datetime import date

from property_insights.models.enums import Demand, PropertyType, SaleType, SchoolType


@dataclass(frozen=True)
class PriceEstimate:
    """Valuation range in whole AUD."""

    low: int
    mid: int
    high: int

    def __post_init__(self) -> None:
        if not 0 <= self.low <= self.mid <= self.high:
            raise ValueError(
                f"Price estimate must satisfy 0 <= low <= mid <= high, "
                f"got {self.low}/{self.mid}/{self.high}"
            )


@dataclass(frozen=True)
class RentalEstimate:
    """Weekly rent and gross yield."""

    weekly: int
    yield_percent: float


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class PropertySummary:
    """Lightweight search result."""

    id: str
    display_address: str
    short_address: str
    suburb: str
    state: str
    postcode: str
    property_type: PropertyType


@dataclass
class PropertyRecord:
    """Full catalog row for a property."""

    id: str
    address: str
    short_address: str
    suburb: str
    state: str
    postcode: str
    property_type: PropertyType
    beds: int
    baths: int
    parking: int
    price_estimate: PriceEstimate
    land_size: int = 0  # Square metres, 0 for strata
    building_size: int = 0
    rental_estimate: RentalEstimate | None = None
    coordinates: Coordinates | None = None
    images: list[str] = field(default_factory=list)

    def summary(self) -> PropertySummary:
        """Project the record down to its search-result shape."""
        return PropertySummary(
            id=self.id,
            display_address=self.address,
            short_address=self.short_address,
            suburb=self.suburb,
            state=self.state,
            postcode=self.postcode,
            property_type=self.property_type,
        )


@dataclass(frozen=True)
class Sale:
    """A recorded or synthesized sale.

    Comparables and a property's own sales history share this schema.
    """

    address: str
    sale_price: int
    sale_date: date
    beds: int
    baths: int
    parking: int
    land_size: int | None = None
    distance_km: float | None = None
    sale_type: SaleType | None = None
    agency: str | None = None
    agent: str | None = None
    days_on_market: int | None = None


@dataclass(frozen=True)
class School:
    name: str
    school_type: SchoolType
    rating: int
    distance_km: float
    year_range: str


@dataclass(frozen=True)
class SuburbInsights:
    median_price: int
    growth_percent: float
    demand: Demand
    population: int
    average_days_on_market: int
    auction_clearance_rate: int


@dataclass
class PropertyDetail:
    """Composite report for a single property."""

    id: str
    address: str
    short_address: str
    suburb: str
    state: str
    postcode: str
    property_type: PropertyType
    beds: int
    baths: int
    parking: int
    land_size: int
    building_size: int
    price_estimate: PriceEstimate
    rental_estimate: RentalEstimate | None
    coordinates: Coordinates | None
    images: list[str]
    comparables: list[Sale]
    suburb_insights: SuburbInsights
    schools: list[School]
    sales_history: list[Sale]

    @property
    def display_address(self) -> str:
        return self.address
