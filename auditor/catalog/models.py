"""Catalog models: events, attributes and constraints.

Catalog entries are immutable once loaded. The validator references
them directly and never copies or mutates them.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CATALOG_ID = "DEFAULT"


class Constraint(BaseModel):
    """A named validation rule applied to an attribute value."""

    model_config = ConfigDict(frozen=True)

    constraint_type: str = Field(..., description="Registered constraint type identifier")
    value: str = Field(default="", description="Opaque constraint argument, e.g. a max length")


class AttributeDefinition(BaseModel):
    """Catalog definition of an attribute shared by one or more events."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Attribute name as supplied by callers")
    display_name: str | None = Field(default=None, description="Human readable name")
    description: str | None = Field(default=None, description="Attribute description")
    data_type: str = Field(default="STRING", description="Declared data type")
    required: bool = Field(default=False, description="Required in every event using it")
    request_context: bool = Field(
        default=False,
        description="Value is taken from the request context, not the caller",
    )
    constraints: tuple[Constraint, ...] = Field(
        default=(), description="Constraints evaluated against the value"
    )
    catalog_id: str = Field(default=DEFAULT_CATALOG_ID, description="Owning catalog")


class EventAttribute(BaseModel):
    """Reference from an event to an attribute, with a per-event required override."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Referenced attribute name")
    required: bool = Field(default=False, description="Required for this event")


class EventSchema(BaseModel):
    """Catalog definition of an audit event."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Event name")
    display_name: str | None = Field(default=None, description="Human readable name")
    description: str | None = Field(default=None, description="Event description")
    catalog_id: str = Field(default=DEFAULT_CATALOG_ID, description="Owning catalog")
    attributes: tuple[EventAttribute, ...] = Field(
        default=(), description="Attributes in declaration order"
    )


class Catalog(BaseModel):
    """A parsed catalog: attribute definitions plus the events using them."""

    model_config = ConfigDict(frozen=True)

    attributes: tuple[AttributeDefinition, ...] = Field(default=())
    events: tuple[EventSchema, ...] = Field(default=())
