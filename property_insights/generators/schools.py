"""Nearby school synthesis."""

from __future__ import annotations

from datetime import date

from property_insights.generators.base import BaseGenerator
from property_insights.models import PropertyRecord, School, SchoolType


class SchoolGenerator(BaseGenerator):
    """Generate plausible local schools named after the suburb."""

    SALT = "schools"

    # suffix, type, year range, rating band, distance band (km)
    TEMPLATES = [
        ("Grammar School", SchoolType.PRIVATE, "Prep-12", (85, 94), (0.5, 2.5)),
        ("State High School", SchoolType.PUBLIC, "7-12", (80, 94), (1.0, 4.0)),
        ("Primary School", SchoolType.PUBLIC, "Prep-6", (78, 89), (0.3, 1.8)),
    ]

    def generate_for(
        self,
        record: PropertyRecord,
        reference_date: date | None = None,
    ) -> list[School]:
        """Generate 2-3 schools for ``record``, nearest first."""
        rng = self._rng_for(record.id)
        count = rng.randint(2, 3)
        templates = rng.sample(self.TEMPLATES, count)

        schools = [
            School(
                name=f"{record.suburb} {suffix}",
                school_type=school_type,
                rating=rng.randint(*ratings),
                distance_km=round(rng.uniform(*distances), 1),
                year_range=years,
            )
            for suffix, school_type, years, ratings, distances in templates
        ]
        schools.sort(key=lambda s: s.distance_km)
        return schools
