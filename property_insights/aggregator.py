"""Assemble composite property reports from the catalog and synthesis."""

from __future__ import annotations

import asyncio
import logging
from datetime import date

from property_insights.catalog import PropertyCatalog
from property_insights.config import AggregatorConfig
from property_insights.generators import (
    ComparableSaleGenerator,
    SalesHistoryGenerator,
    SchoolGenerator,
)
from property_insights.models import PropertyDetail, PropertyRecord, Sale, School, SuburbInsights

logger = logging.getLogger(__name__)


class PropertyDetailAggregator:
    """Build a ``PropertyDetail`` for a property id.

    Comparables, schools and sales history come from the catalog when it has
    an authoritative record for the id, and are synthesized otherwise.
    Unknown suburbs get the generic insights profile. The aggregator keeps no
    per-request state, so concurrent calls for different ids are independent.

    Parameters
    ----------
    catalog : PropertyCatalog
        Backing store.
    comparables, schools, history : generators, optional
        Synthesis used when the catalog has no record (defaults are
        deterministic ``en_AU`` generators).
    latency_seconds : float
        Simulated I/O delay before each lookup.
    reference_date : date | None
        Anchor for synthesized sale dates (default today).
    """

    def __init__(
        self,
        catalog: PropertyCatalog,
        comparables: ComparableSaleGenerator | None = None,
        schools: SchoolGenerator | None = None,
        history: SalesHistoryGenerator | None = None,
        latency_seconds: float = 0.0,
        reference_date: date | None = None,
    ) -> None:
        self.catalog = catalog
        self.latency_seconds = latency_seconds
        self.reference_date = reference_date
        self._comparables = comparables or ComparableSaleGenerator()
        self._schools = schools or SchoolGenerator()
        self._history = history or SalesHistoryGenerator()

    @classmethod
    def from_config(
        cls,
        catalog: PropertyCatalog,
        config: AggregatorConfig,
    ) -> "PropertyDetailAggregator":
        """Create an aggregator whose generators follow ``config``."""
        options = {"locale": config.locale, "deterministic": config.deterministic}
        return cls(
            catalog,
            comparables=ComparableSaleGenerator(**options),
            schools=SchoolGenerator(**options),
            history=SalesHistoryGenerator(**options),
            latency_seconds=config.latency_seconds,
        )

    async def get_property_details(self, property_id: str) -> PropertyDetail:
        """Fetch the full report for ``property_id``.

        Raises
        ------
        NotFoundError
            If the id is not in the catalog.
        """
        await self._simulate_latency()
        record = self.catalog.get_property(property_id)
        return await self._assemble(record)

    async def get_property_by_address(self, address: str) -> PropertyDetail:
        """Fetch the full report for an exact full or short address."""
        await self._simulate_latency()
        record = self.catalog.find_by_address(address)
        return await self._assemble(record)

    async def _assemble(self, record: PropertyRecord) -> PropertyDetail:
        comparables, insights, schools, history = await asyncio.gather(
            self._lookup_comparables(record),
            self._lookup_suburb_insights(record),
            self._lookup_schools(record),
            self._lookup_sales_history(record),
        )

        return PropertyDetail(
            id=record.id,
            address=record.address,
            short_address=record.short_address,
            suburb=record.suburb,
            state=record.state,
            postcode=record.postcode,
            property_type=record.property_type,
            beds=record.beds,
            baths=record.baths,
            parking=record.parking,
            land_size=record.land_size,
            building_size=record.building_size,
            price_estimate=record.price_estimate,
            rental_estimate=record.rental_estimate,
            coordinates=record.coordinates,
            images=list(record.images),
            comparables=comparables,
            suburb_insights=insights,
            schools=schools,
            sales_history=history,
        )

    async def _lookup_comparables(self, record: PropertyRecord) -> list[Sale]:
        sourced = self.catalog.get_comparables(record.id)
        if sourced is not None:
            return sourced
        logger.debug("Synthesizing comparables for %s", record.id)
        return self._comparables.generate_for(record, self.reference_date)

    async def _lookup_schools(self, record: PropertyRecord) -> list[School]:
        sourced = self.catalog.get_schools(record.id)
        if sourced is not None:
            return sourced
        logger.debug("Synthesizing schools for %s", record.id)
        return self._schools.generate_for(record, self.reference_date)

    async def _lookup_sales_history(self, record: PropertyRecord) -> list[Sale]:
        sourced = self.catalog.get_sales_history(record.id)
        if sourced is not None:
            return sourced
        logger.debug("Synthesizing sales history for %s", record.id)
        return self._history.generate_for(record, self.reference_date)

    async def _lookup_suburb_insights(self, record: PropertyRecord) -> SuburbInsights:
        if not self.catalog.has_suburb_insights(record.suburb, record.state):
            logger.debug("No insights for %s %s, using generic profile", record.suburb, record.state)
        return self.catalog.get_suburb_insights(record.suburb, record.state)

    async def _simulate_latency(self) -> None:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)
