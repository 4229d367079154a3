"""Property catalog and bundled dataset."""

from property_insights.catalog.store import GENERIC_SUBURB_INSIGHTS, PropertyCatalog

__all__ = ["GENERIC_SUBURB_INSIGHTS", "PropertyCatalog"]
