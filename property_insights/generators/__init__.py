"""Synthesis of placeholder report data."""

from property_insights.generators.base import BaseGenerator, seed_for
from property_insights.generators.comparables import ComparableSaleGenerator
from property_insights.generators.history import SalesHistoryGenerator
from property_insights.generators.schools import SchoolGenerator

__all__ = [
    "BaseGenerator",
    "ComparableSaleGenerator",
    "SalesHistoryGenerator",
    "SchoolGenerator",
    "seed_for",
]
