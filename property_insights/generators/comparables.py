"""Comparable sales synthesis."""

from __future__ import annotations

from datetime import date, timedelta

from property_insights.generators.base import BaseGenerator
from property_insights.models import PropertyRecord, Sale


class ComparableSaleGenerator(BaseGenerator):
    """Generate nearby sales anchored on a property's mid estimate."""

    SALT = "comparables"

    PRICE_FACTOR = (0.85, 1.15)
    MAX_DISTANCE_KM = 3.0
    MAX_DAYS_AGO = 365

    def generate_for(
        self,
        record: PropertyRecord,
        reference_date: date | None = None,
    ) -> list[Sale]:
        """Generate 2-3 comparable sales for ``record``.

        Parameters
        ----------
        record : PropertyRecord
            The subject property.
        reference_date : date | None
            Sales are dated within the year before this (default today).

        Returns
        -------
        list[Sale]
            Sales ordered newest first.
        """
        rng = self._rng_for(record.id)
        today = self._today(reference_date)
        mid = record.price_estimate.mid

        sales = []
        for _ in range(rng.randint(2, 3)):
            number = rng.randint(1, 199)
            street = self.fake.street_name()
            bed_delta = rng.choice([0, 0, 0, -1, 1])
            sales.append(
                Sale(
                    address=f"{number} {street}, {record.suburb} {record.state} {record.postcode}",
                    sale_price=round(mid * rng.uniform(*self.PRICE_FACTOR)),
                    sale_date=today - timedelta(days=rng.randint(14, self.MAX_DAYS_AGO)),
                    beds=max(0, record.beds + bed_delta),
                    baths=record.baths,
                    parking=record.parking,
                    land_size=_vary_land(record.land_size, rng.uniform(0.85, 1.15)),
                    distance_km=round(rng.uniform(0.1, self.MAX_DISTANCE_KM), 1),
                )
            )
        sales.sort(key=lambda s: s.sale_date, reverse=True)
        return sales


def _vary_land(land_size: int, factor: float) -> int:
    # Strata titles have no land component
    return round(land_size * factor) if land_size else 0
