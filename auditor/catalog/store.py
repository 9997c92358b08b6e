"""CatalogStore abstract interface.

Read-only lookup of event schemas and attribute definitions. Stores are
populated once at startup and only read afterwards, so implementations
must be safe for concurrent reads.
"""

from abc import ABC, abstractmethod

from auditor.catalog.models import AttributeDefinition, EventSchema


class CatalogStore(ABC):
    """Abstract interface for catalog lookups used by the event validator."""

    @abstractmethod
    def get_event(self, name: str, catalog_id: str | None = None) -> EventSchema | None:
        """Get an event schema by name, optionally within a specific catalog."""
        pass

    @abstractmethod
    def list_events(self, catalog_id: str | None = None) -> list[EventSchema]:
        """List event schemas, all catalogs when catalog_id is None."""
        pass

    @abstractmethod
    def get_attribute(
        self, name: str, catalog_id: str | None = None
    ) -> AttributeDefinition | None:
        """Get an attribute definition by name."""
        pass

    @abstractmethod
    def get_attributes(
        self, event_name: str, catalog_id: str | None = None
    ) -> dict[str, AttributeDefinition]:
        """Get the attribute definitions of an event keyed by attribute name."""
        pass

    @abstractmethod
    def get_attribute_names(
        self, event_name: str, catalog_id: str | None = None
    ) -> list[str]:
        """Get the attribute names of an event in declaration order."""
        pass

    @abstractmethod
    def get_required_context_attributes(
        self, event_name: str, catalog_id: str | None = None
    ) -> list[str]:
        """Get names of request context attributes the event requires."""
        pass

    @abstractmethod
    def get_request_context_attributes(self) -> dict[str, AttributeDefinition]:
        """Get every request context attribute definition keyed by name."""
        pass
