"""Past sales history synthesis."""

from __future__ import annotations

from datetime import date, timedelta

from property_insights.generators.base import BaseGenerator
from property_insights.models import PropertyRecord, Sale, SaleType


class SalesHistoryGenerator(BaseGenerator):
    """Generate earlier sales of the property itself.

    Each earlier sale is cheaper than the next, starting from 75-95% of the
    mid estimate and never below 55% of it.
    """

    SALT = "history"

    MIN_FACTOR = 0.55
    FIRST_FACTOR = (0.75, 0.95)
    YEARS_BETWEEN = (3, 7)

    def generate_for(
        self,
        record: PropertyRecord,
        reference_date: date | None = None,
    ) -> list[Sale]:
        """Generate 2-3 past sales, newest first."""
        rng = self._rng_for(record.id)
        today = self._today(reference_date)
        mid = record.price_estimate.mid

        factor = rng.uniform(*self.FIRST_FACTOR)
        sold = today - timedelta(days=365 * rng.randint(*self.YEARS_BETWEEN))
        history = []
        for _ in range(rng.randint(2, 3)):
            history.append(
                Sale(
                    address=record.address,
                    sale_price=round(mid * factor),
                    sale_date=sold - timedelta(days=rng.randint(0, 180)),
                    beds=record.beds,
                    baths=record.baths,
                    parking=record.parking,
                    land_size=record.land_size,
                    sale_type=rng.choice(list(SaleType)),
                    agency=f"{self.fake.last_name()} Real Estate",
                    agent=self.fake.name(),
                    days_on_market=rng.randint(14, 60),
                )
            )
            factor = max(self.MIN_FACTOR, factor * rng.uniform(0.7, 0.9))
            sold -= timedelta(days=365 * rng.randint(*self.YEARS_BETWEEN))
        return history
