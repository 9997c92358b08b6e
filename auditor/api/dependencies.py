"""Dependency injection for API routes.

Components are created once from settings and reused. Deployments install
their catalog and constraint validators at startup through
configure_catalog() and get_constraint_registry(); tests override the
dependencies on the app or call reset_dependencies().
"""

from typing import Annotated

from fastapi import Depends

from auditor.audit.handlers import handler_for_policy
from auditor.audit.logger import EventLogger
from auditor.audit.sink import AuditSink
from auditor.audit.sinks.inmemory import InMemoryAuditSink
from auditor.audit.sinks.logging import LoggingAuditSink
from auditor.catalog.models import Catalog
from auditor.catalog.store import CatalogStore
from auditor.catalog.stores.inmemory import InMemoryCatalogStore
from auditor.config import get_settings as _load_settings
from auditor.config.settings import Settings
from auditor.constraints.registry import ConstraintRegistry
from auditor.observability.logging import get_logger

logger = get_logger(__name__)

_catalog_store: CatalogStore | None = None
_constraint_registry: ConstraintRegistry | None = None
_audit_sink: AuditSink | None = None
_event_logger: EventLogger | None = None


def get_settings() -> Settings:
    """Get application settings."""
    return _load_settings()


def configure_catalog(catalog: Catalog | CatalogStore) -> CatalogStore:
    """Install the catalog used by the API.

    Accepts a parsed Catalog, wrapped in an InMemoryCatalogStore, or any
    CatalogStore. Drops the cached event logger so it picks up the new
    catalog.
    """
    global _catalog_store, _event_logger
    if isinstance(catalog, Catalog):
        _catalog_store = InMemoryCatalogStore(catalog)
    else:
        _catalog_store = catalog
    _event_logger = None
    logger.info("catalog_configured", store_type=type(_catalog_store).__name__)
    return _catalog_store


def get_catalog_store() -> CatalogStore:
    """Get the installed catalog store, an empty one if none was configured."""
    global _catalog_store
    if _catalog_store is None:
        _catalog_store = InMemoryCatalogStore()
        logger.warning("catalog_store_empty")
    return _catalog_store


def get_constraint_registry() -> ConstraintRegistry:
    """Get the shared constraint registry."""
    global _constraint_registry
    if _constraint_registry is None:
        settings = get_settings()
        _constraint_registry = ConstraintRegistry(strict=settings.audit.strict_constraints)
        logger.info(
            "constraint_registry_initialized",
            strict=settings.audit.strict_constraints,
        )
    return _constraint_registry


def get_audit_sink() -> AuditSink:
    """Get the configured audit sink."""
    global _audit_sink
    if _audit_sink is None:
        settings = get_settings()
        if settings.audit.sink == "memory":
            _audit_sink = InMemoryAuditSink()
        else:
            _audit_sink = LoggingAuditSink()
        logger.info("audit_sink_initialized", sink_type=settings.audit.sink)
    return _audit_sink


def get_event_logger(
    catalog: Annotated[CatalogStore, Depends(get_catalog_store)],
    constraints: Annotated[ConstraintRegistry, Depends(get_constraint_registry)],
    sink: Annotated[AuditSink, Depends(get_audit_sink)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> EventLogger:
    """Get the EventLogger wired to the catalog, registry and sink."""
    global _event_logger
    if _event_logger is None:
        _event_logger = EventLogger(
            catalog,
            constraints,
            sink,
            max_length=settings.audit.max_length,
            exception_handler=handler_for_policy(settings.audit.failure_policy),
        )
        logger.info(
            "event_logger_initialized",
            max_length=settings.audit.max_length,
            failure_policy=settings.audit.failure_policy,
        )
    return _event_logger


SettingsDep = Annotated[Settings, Depends(get_settings)]
CatalogStoreDep = Annotated[CatalogStore, Depends(get_catalog_store)]
AuditSinkDep = Annotated[AuditSink, Depends(get_audit_sink)]
EventLoggerDep = Annotated[EventLogger, Depends(get_event_logger)]


def reset_dependencies() -> None:
    """Reset all cached dependencies.

    Used for testing to ensure fresh instances.
    """
    global _catalog_store, _constraint_registry, _audit_sink, _event_logger
    _catalog_store = None
    _constraint_registry = None
    _audit_sink = None
    _event_logger = None
