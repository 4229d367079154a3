"""In-memory property catalog with authoritative lookup tables."""

from dataclasses import dataclass, field
from datetime import date

from property_insights.catalog import data
from property_insights.exceptions import NotFoundError
from property_insights.models import (
    Coordinates,
    Demand,
    PriceEstimate,
    PropertyRecord,
    PropertySummary,
    PropertyType,
    RentalEstimate,
    Sale,
    SaleType,
    School,
    SchoolType,
    SuburbInsights,
)

GENERIC_SUBURB_INSIGHTS = SuburbInsights(
    median_price=650000,
    growth_percent=4.0,
    demand=Demand.MEDIUM,
    population=100000,
    average_days_on_market=35,
    auction_clearance_rate=60,
)


@dataclass
class PropertyCatalog:
    """In-memory store for properties and their sourced report data.

    Lookups for comparables, schools and sales history return ``None`` when
    no authoritative record exists, leaving synthesis to the caller.
    """

    properties: dict[str, PropertyRecord] = field(default_factory=dict)
    comparables: dict[str, list[Sale]] = field(default_factory=dict)
    schools: dict[str, list[School]] = field(default_factory=dict)
    sales_history: dict[str, list[Sale]] = field(default_factory=dict)
    suburb_insights: dict[tuple[str, str], SuburbInsights] = field(default_factory=dict)

    def add_property(self, record: PropertyRecord) -> None:
        """Add a property to the catalog."""
        self.properties[record.id] = record

    def add_comparables(self, property_id: str, sales: list[Sale]) -> None:
        self._require(property_id)
        self.comparables[property_id] = list(sales)

    def add_schools(self, property_id: str, schools: list[School]) -> None:
        self._require(property_id)
        self.schools[property_id] = list(schools)

    def add_sales_history(self, property_id: str, sales: list[Sale]) -> None:
        self._require(property_id)
        self.sales_history[property_id] = list(sales)

    def add_suburb_insights(self, suburb: str, state: str, insights: SuburbInsights) -> None:
        self.suburb_insights[_suburb_key(suburb, state)] = insights

    # Query methods
    def get_property(self, property_id: str) -> PropertyRecord:
        """Get a property by id.

        Raises
        ------
        NotFoundError
            If the id is unknown.
        """
        return self._require(property_id)

    def find_by_address(self, address: str) -> PropertyRecord:
        """Find a property by exact full or short address (case-insensitive)."""
        wanted = " ".join(address.lower().split())
        for record in self.properties.values():
            if wanted in (record.address.lower(), record.short_address.lower()):
                return record
        raise NotFoundError(f"Property at {address!r} not found")

    def summaries(self) -> list[PropertySummary]:
        """All property summaries in insertion order."""
        return [record.summary() for record in self.properties.values()]

    def get_comparables(self, property_id: str) -> list[Sale] | None:
        return _copy_or_none(self.comparables.get(property_id))

    def get_schools(self, property_id: str) -> list[School] | None:
        return _copy_or_none(self.schools.get(property_id))

    def get_sales_history(self, property_id: str) -> list[Sale] | None:
        return _copy_or_none(self.sales_history.get(property_id))

    def get_suburb_insights(self, suburb: str, state: str) -> SuburbInsights:
        """Insights for a suburb, or the generic profile when unknown."""
        return self.suburb_insights.get(_suburb_key(suburb, state), GENERIC_SUBURB_INSIGHTS)

    def has_suburb_insights(self, suburb: str, state: str) -> bool:
        return _suburb_key(suburb, state) in self.suburb_insights

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "properties": len(self.properties),
            "comparables": sum(len(v) for v in self.comparables.values()),
            "schools": sum(len(v) for v in self.schools.values()),
            "sales_history": sum(len(v) for v in self.sales_history.values()),
            "suburbs": len(self.suburb_insights),
        }

    def _require(self, property_id: str) -> PropertyRecord:
        record = self.properties.get(property_id)
        if record is None:
            raise NotFoundError(f"Property {property_id} not found")
        return record

    @classmethod
    def default(cls) -> "PropertyCatalog":
        """Catalog seeded with the bundled Australian dataset."""
        catalog = cls()

        for row in data.PROPERTY_ROWS:
            (pid, address, short, suburb, state, postcode, ptype, beds, baths,
             parking, land, building, (low, mid, high), (weekly, yld), (lat, lng)) = row
            catalog.add_property(
                PropertyRecord(
                    id=pid,
                    address=address,
                    short_address=short,
                    suburb=suburb,
                    state=state,
                    postcode=postcode,
                    property_type=PropertyType(ptype),
                    beds=beds,
                    baths=baths,
                    parking=parking,
                    land_size=land,
                    building_size=building,
                    price_estimate=PriceEstimate(low=low, mid=mid, high=high),
                    rental_estimate=RentalEstimate(weekly=weekly, yield_percent=yld),
                    coordinates=Coordinates(lat=lat, lng=lng),
                    images=list(data.PROPERTY_IMAGES.get(pid, [])),
                )
            )

        for pid, rows in data.COMPARABLE_ROWS.items():
            parking = catalog.properties[pid].parking
            catalog.add_comparables(
                pid,
                [
                    Sale(
                        address=address,
                        sale_price=price,
                        sale_date=date.fromisoformat(sold),
                        beds=beds,
                        baths=baths,
                        parking=parking,
                        land_size=land,
                        distance_km=distance,
                    )
                    for address, price, sold, beds, baths, land, distance in rows
                ],
            )

        for pid, rows in data.SCHOOL_ROWS.items():
            catalog.add_schools(
                pid,
                [
                    School(
                        name=name,
                        school_type=SchoolType(kind),
                        rating=rating,
                        distance_km=distance,
                        year_range=years,
                    )
                    for name, kind, rating, distance, years in rows
                ],
            )

        for pid, rows in data.SALES_HISTORY_ROWS.items():
            record = catalog.properties[pid]
            catalog.add_sales_history(
                pid,
                [
                    Sale(
                        address=record.address,
                        sale_price=price,
                        sale_date=date.fromisoformat(sold),
                        beds=record.beds,
                        baths=record.baths,
                        parking=record.parking,
                        land_size=record.land_size,
                        sale_type=SaleType(kind),
                    )
                    for price, sold, kind in rows
                ],
            )

        for (suburb, state), row in data.SUBURB_INSIGHT_ROWS.items():
            median, growth, demand, population, days, clearance = row
            catalog.add_suburb_insights(
                suburb,
                state,
                SuburbInsights(
                    median_price=median,
                    growth_percent=growth,
                    demand=Demand(demand),
                    population=population,
                    average_days_on_market=days,
                    auction_clearance_rate=clearance,
                ),
            )

        return catalog


def _suburb_key(suburb: str, state: str) -> tuple[str, str]:
    return (suburb.strip().lower(), state.strip().upper())


def _copy_or_none(items: list | None) -> list | None:
    return list(items) if items is not None else None
