"""In-memory implementation of CatalogStore."""

from auditor.catalog.models import (
    DEFAULT_CATALOG_ID,
    AttributeDefinition,
    Catalog,
    EventSchema,
)
from auditor.catalog.store import CatalogStore
from auditor.observability.logging import get_logger

logger = get_logger(__name__)


class InMemoryCatalogStore(CatalogStore):
    """In-memory CatalogStore built from a parsed Catalog.

    Lookups with a catalog_id fall back to the default catalog when the
    named catalog has no matching entry. Indexes are built once in the
    constructor and never modified, so concurrent reads need no locking.
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        """Index the catalog's attributes and events."""
        catalog = catalog or Catalog()
        self._attributes: dict[tuple[str, str], AttributeDefinition] = {}
        self._events: dict[tuple[str, str], EventSchema] = {}

        for attribute in catalog.attributes:
            self._attributes[(attribute.catalog_id, attribute.name)] = attribute
        for event in catalog.events:
            self._events[(event.catalog_id, event.name)] = event
            for ref in event.attributes:
                if self.get_attribute(ref.name, event.catalog_id) is None:
                    logger.warning(
                        "catalog_attribute_undefined",
                        event_name=event.name,
                        attribute=ref.name,
                        catalog_id=event.catalog_id,
                    )

        logger.debug(
            "catalog_store_initialized",
            attribute_count=len(self._attributes),
            event_count=len(self._events),
        )

    def get_event(self, name: str, catalog_id: str | None = None) -> EventSchema | None:
        """Get an event schema, falling back to the default catalog."""
        if catalog_id is not None and catalog_id != DEFAULT_CATALOG_ID:
            event = self._events.get((catalog_id, name))
            if event is not None:
                return event
        return self._events.get((DEFAULT_CATALOG_ID, name))

    def list_events(self, catalog_id: str | None = None) -> list[EventSchema]:
        """List event schemas, all catalogs when catalog_id is None."""
        return [
            event
            for (event_catalog, _), event in self._events.items()
            if catalog_id is None or event_catalog == catalog_id
        ]

    def get_attribute(
        self, name: str, catalog_id: str | None = None
    ) -> AttributeDefinition | None:
        """Get an attribute definition, falling back to the default catalog."""
        if catalog_id is not None and catalog_id != DEFAULT_CATALOG_ID:
            attribute = self._attributes.get((catalog_id, name))
            if attribute is not None:
                return attribute
        return self._attributes.get((DEFAULT_CATALOG_ID, name))

    def get_attributes(
        self, event_name: str, catalog_id: str | None = None
    ) -> dict[str, AttributeDefinition]:
        """Get the defined attributes of an event keyed by name.

        References to attributes missing from the catalog are left out.
        """
        event = self.get_event(event_name, catalog_id)
        if event is None:
            return {}
        result: dict[str, AttributeDefinition] = {}
        for ref in event.attributes:
            attribute = self.get_attribute(ref.name, event.catalog_id)
            if attribute is not None:
                result[attribute.name] = attribute
        return result

    def get_attribute_names(
        self, event_name: str, catalog_id: str | None = None
    ) -> list[str]:
        """Get every attribute name the event references, in order."""
        event = self.get_event(event_name, catalog_id)
        if event is None:
            return []
        return [ref.name for ref in event.attributes]

    def get_required_context_attributes(
        self, event_name: str, catalog_id: str | None = None
    ) -> list[str]:
        """Get request context attributes required by the event, in order."""
        event = self.get_event(event_name, catalog_id)
        if event is None:
            return []
        required: list[str] = []
        for ref in event.attributes:
            attribute = self.get_attribute(ref.name, event.catalog_id)
            if attribute is None or not attribute.request_context:
                continue
            if attribute.required or ref.required:
                required.append(attribute.name)
        return required

    def get_request_context_attributes(self) -> dict[str, AttributeDefinition]:
        """Get all request context attributes across catalogs.

        Default catalog definitions win when names collide.
        """
        result: dict[str, AttributeDefinition] = {}
        for (catalog_id, name), attribute in self._attributes.items():
            if not attribute.request_context:
                continue
            if name in result and catalog_id != DEFAULT_CATALOG_ID:
                continue
            result[name] = attribute
        return result
