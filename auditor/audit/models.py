"""AuditMessage model: the validated, emission-ready structured record."""

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

DEFAULT_MAX_LENGTH = 32

# Passed through even when the event schema does not declare it.
COMPLETION_STATUS = "completionStatus"

_FORBIDDEN_KEY_CHARS = frozenset('=]"')


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


def structured_data_errors(
    name: str, keys: Iterable[str], max_length: int
) -> list[str]:
    """Check an id name and data keys against structured data rules.

    Args:
        name: Message id name (the event name)
        keys: Attribute keys to be stored in the message
        max_length: Maximum length of name and keys, 0 for unbounded

    Returns:
        Violations, empty when the message can be built
    """
    errors: list[str] = []
    if max_length > 0 and len(name) > max_length:
        errors.append(f"Length of id {name} exceeds maximum of {max_length} characters")
    for key in keys:
        if max_length > 0 and len(key) > max_length:
            errors.append(
                f"Structured data keys are limited to {max_length} characters, key: {key}"
            )
        if any(c < "!" or c > "~" or c in _FORBIDDEN_KEY_CHARS for c in key):
            errors.append(
                "Structured data keys must contain printable US ASCII characters "
                f'and may not contain a space, =, ] or ", key: {key}'
            )
    return errors


class AuditMessageId(BaseModel):
    """Identity of an audit message."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Event name")
    enterprise_number: str | None = Field(
        default=None, description="Optional IANA enterprise number"
    )

    def __str__(self) -> str:
        if self.enterprise_number:
            return f"{self.name}@{self.enterprise_number}"
        return self.name
class AuditMessage(BaseModel):
    """Immutable structured audit record handed to a sink.

    Only built after the event passed validation. ``data`` is a read-only
    view over a private copy of the caller's attributes, so neither the
    caller nor a sink can change a message once it exists.
    """

    model_config = ConfigDict(frozen=True)

    id: AuditMessageId = Field(..., description="Message identity")
    type: Literal["Audit"] = Field(default="Audit", description="Structured data type")
    data: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True, description="Attribute values"
    )
    max_length: int = Field(
        default=DEFAULT_MAX_LENGTH,
        ge=0,
        description="Maximum length of the id name and data keys, 0 for unbounded",
    )
    timestamp: datetime = Field(default_factory=utc_now, description="Creation time")

    @field_validator("data")
    @classmethod
    def _freeze_data(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("data")
    def _serialize_data(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)

    @model_validator(mode="after")
    def _check_structured_data(self) -> "AuditMessage":
        errors = structured_data_errors(self.id.name, self.data, self.max_length)
        if errors:
            raise ValueError("; ".join(errors))
        return self

    @property
    def event_name(self) -> str:
        return self.id.name

    @property
    def attributes(self) -> Mapping[str, str]:
        return self.data
