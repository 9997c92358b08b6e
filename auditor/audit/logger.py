"""EventLogger: validates audit events and emits them to a sink."""

from collections.abc import Mapping

from auditor.audit.handlers import (
    AuditExceptionHandler,
    ignore_audit_exception,
    raise_audit_exception,
)
from auditor.audit.models import DEFAULT_MAX_LENGTH, AuditMessage
from auditor.audit.sink import AuditSink
from auditor.audit.validator import EventValidator
from auditor.catalog.store import CatalogStore
from auditor.constraints.registry import ConstraintRegistry
from auditor.errors import AuditError, UnknownEventError
from auditor.observability.logging import get_logger
from auditor.observability.metrics import EVENTS_EMITTED, EVENTS_REJECTED, SINK_FAILURES

logger = get_logger(__name__)


class EventLogger:
    """Entry point for logging catalog-defined audit events.

    Validation failures always raise. Failures raised by the sink are
    passed to an exception handler: the one given to log_event, or the
    logger's default. The default is injected at construction and can be
    replaced later; it is shared by every caller of this instance.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        constraints: ConstraintRegistry,
        sink: AuditSink,
        *,
        max_length: int = DEFAULT_MAX_LENGTH,
        exception_handler: AuditExceptionHandler = raise_audit_exception,
    ) -> None:
        self._catalog = catalog
        self._sink = sink
        self._validator = EventValidator(catalog, constraints, max_length=max_length)
        self._default_exception_handler = exception_handler

    @property
    def validator(self) -> EventValidator:
        return self._validator

    @property
    def default_exception_handler(self) -> AuditExceptionHandler:
        return self._default_exception_handler

    def set_default_exception_handler(self, handler: AuditExceptionHandler | None) -> None:
        """Replace the default handler; None installs the no-op handler."""
        self._default_exception_handler = handler or ignore_audit_exception
        logger.info(
            "audit_exception_handler_changed",
            handler=getattr(self._default_exception_handler, "__name__", repr(handler)),
        )

    def get_attribute_names(self, event_name: str, catalog_id: str | None = None) -> list[str]:
        """Get the attribute names declared for an event."""
        return self._catalog.get_attribute_names(event_name, catalog_id)

    def log_event(
        self,
        event_name: str,
        attributes: Mapping[str, str],
        *,
        catalog_id: str | None = None,
        exception_handler: AuditExceptionHandler | None = None,
        context: Mapping[str, str] | None = None,
    ) -> AuditMessage:
        """Validate an event and emit it to the sink.

        Args:
            event_name: Name of the catalog event
            attributes: Caller supplied attribute values
            catalog_id: Catalog to resolve the event in
            exception_handler: Handler for sink failures on this call only
            context: Explicit request context snapshot instead of the ambient one

        Returns:
            The message handed to the sink

        Raises:
            AuditError: Validation failed, or the exception handler raised
        """
        try:
            message = self._validator.validate(
                event_name, attributes, catalog_id=catalog_id, context=context
            )
        except AuditError as e:
            known = not isinstance(e, UnknownEventError)
            EVENTS_REJECTED.labels(
                event_name=event_name if known else "unknown",
                error_type=type(e).__name__,
            ).inc()
            logger.warning(
                "audit_event_rejected",
                event_name=event_name,
                catalog_id=catalog_id,
                error_type=type(e).__name__,
                errors=e.errors,
            )
            raise

        try:
            self._sink.emit(message)
        except Exception as e:
            SINK_FAILURES.labels(event_name=event_name).inc()
            logger.error(
                "audit_sink_failed",
                event_name=event_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            handler = exception_handler or self._default_exception_handler
            handler(message, e)
            return message

        EVENTS_EMITTED.labels(event_name=event_name).inc()
        logger.debug("audit_event_emitted", event_name=event_name)
        return message
