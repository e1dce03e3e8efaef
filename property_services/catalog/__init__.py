"""
Catalog Service

This service exposes the property portfolio to the front end.

Key responsibilities:
- fetch_all / fetch_by_state / fetch_one: one store read, normalized output
- save_property_data: whole-record writes used by the admin tooling
- Keep "no data yet" results apart from store failures
"""

from .property_catalog import SAMPLE_PROPERTY, PropertyCatalog, sample_property

__all__ = ["PropertyCatalog", "SAMPLE_PROPERTY", "sample_property"]
__version__ = "0.1.0"
