"""Catalog store implementations."""

from auditor.catalog.stores.inmemory import InMemoryCatalogStore

__all__ = ["InMemoryCatalogStore"]
