"""Audit error hierarchy.

Validation errors (unknown event, invalid attributes, missing or invalid
request context, malformed message) are raised synchronously to the caller.
Sink failures are routed through the configured exception handler and only
surface as AuditSinkError when that handler raises.
"""


class AuditError(Exception):
    """Base exception for all audit errors.

    Carries the individual problems in ``errors`` so callers can report
    every issue detected in one validation pass.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = list(errors) if errors else [message]


class UnknownEventError(AuditError):
    """Raised when the catalog has no definition for the event."""

    def __init__(self, event_name: str, catalog_id: str | None = None) -> None:
        super().__init__(f"Unable to locate definition of audit event {event_name}")
        self.event_name = event_name
        self.catalog_id = catalog_id


class InvalidAttributesError(AuditError):
    """Raised when supplied attributes are missing, undefined or violate constraints."""

    pass


class MissingContextError(AuditError):
    """Raised when required request context values are absent."""

    def __init__(self, event_name: str, missing: list[str]) -> None:
        super().__init__(
            f"Event {event_name} is missing required RequestContext values for "
            f"{', '.join(missing)}"
        )
        self.event_name = event_name
        self.missing = list(missing)


class InvalidContextError(AuditError):
    """Raised when request context values violate their constraints."""

    pass


class MessageFormatError(AuditError):
    """Raised when a validated event cannot be expressed as a structured message.

    Examples:
        - Event name longer than the configured maximum length
        - Attribute key containing spaces, '=', ']' or '"'
    """

    pass


class AuditSinkError(AuditError):
    """Raised by the default exception handler when emission fails."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
