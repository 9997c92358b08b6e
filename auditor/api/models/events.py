"""Audit event request and response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class LogEventRequest(BaseModel):
    """Request body for POST /v1/audit/log."""

    event_name: str = Field(..., min_length=1, description="Catalog event name")
    catalog_id: str | None = Field(default=None, description="Catalog to resolve the event in")
    request_context: dict[str, str] = Field(
        default_factory=dict,
        description="Request context values bound while the event is logged",
    )
    attributes: dict[str, str] = Field(
        default_factory=dict, description="Event attribute values"
    )


class LogEventResponse(BaseModel):
    """Response for a logged event."""

    event_name: str
    status: Literal["logged"] = "logged"
    timestamp: datetime


class AttributeNamesResponse(BaseModel):
    """Attribute names declared for an event."""

    event_name: str
    catalog_id: str | None = None
    attributes: list[str] = Field(default_factory=list)
