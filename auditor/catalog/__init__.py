"""Catalog lookup: event schemas and attribute definitions."""

from auditor.catalog.models import (
    DEFAULT_CATALOG_ID,
    AttributeDefinition,
    Catalog,
    Constraint,
    EventAttribute,
    EventSchema,
)
from auditor.catalog.store import CatalogStore
from auditor.catalog.stores.inmemory import InMemoryCatalogStore

__all__ = [
    "DEFAULT_CATALOG_ID",
    "AttributeDefinition",
    "Catalog",
    "CatalogStore",
    "Constraint",
    "EventAttribute",
    "EventSchema",
    "InMemoryCatalogStore",
]
