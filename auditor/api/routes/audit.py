"""Audit event logging endpoints."""

from fastapi import APIRouter

from auditor.api.dependencies import CatalogStoreDep, EventLoggerDep
from auditor.api.exceptions import EventNotFoundError
from auditor.api.models.events import (
    AttributeNamesResponse,
    LogEventRequest,
    LogEventResponse,
)
from auditor.context import request_context
from auditor.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/audit")


# Sync handlers: sinks may block, so FastAPI runs these in its threadpool.
@router.post("/log", response_model=LogEventResponse)
def log_event(body: LogEventRequest, event_logger: EventLoggerDep) -> LogEventResponse:
    """Validate an audit event and record it.

    The supplied request context is bound for the duration of the call
    only, so context values never leak between requests.
    """
    with request_context(body.request_context):
        message = event_logger.log_event(
            body.event_name,
            body.attributes,
            catalog_id=body.catalog_id,
        )

    return LogEventResponse(event_name=message.event_name, timestamp=message.timestamp)


@router.get("/events/{event_name}/attributes", response_model=AttributeNamesResponse)
def get_event_attributes(
    event_name: str,
    catalog: CatalogStoreDep,
    catalog_id: str | None = None,
) -> AttributeNamesResponse:
    """List the attribute names declared for an event."""
    if catalog.get_event(event_name, catalog_id) is None:
        raise EventNotFoundError(f"Unable to locate definition of audit event {event_name}")

    return AttributeNamesResponse(
        event_name=event_name,
        catalog_id=catalog_id,
        attributes=catalog.get_attribute_names(event_name, catalog_id),
    )
