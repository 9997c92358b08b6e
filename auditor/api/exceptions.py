"""API exception hierarchy and audit error mapping.

API exceptions carry status_code and error_code used by the global
exception handler. Audit errors raised by the engine are mapped to the
same response format through AUDIT_ERROR_RESPONSES.
"""

from auditor.api.models.errors import ErrorCode
from auditor.errors import (
    AuditError,
    AuditSinkError,
    InvalidAttributesError,
    InvalidContextError,
    MessageFormatError,
    MissingContextError,
    UnknownEventError,
)


class AuditorAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnauthorizedError(AuditorAPIError):
    """Raised when the Authorization header does not match the shared secret."""

    status_code = 401
    error_code = ErrorCode.UNAUTHORIZED


class EventNotFoundError(AuditorAPIError):
    """Raised when a requested event is not in the catalog."""

    status_code = 404
    error_code = ErrorCode.UNKNOWN_EVENT


AUDIT_ERROR_RESPONSES: dict[type[AuditError], tuple[int, ErrorCode]] = {
    UnknownEventError: (404, ErrorCode.UNKNOWN_EVENT),
    InvalidAttributesError: (400, ErrorCode.INVALID_ATTRIBUTES),
    MissingContextError: (400, ErrorCode.MISSING_CONTEXT),
    InvalidContextError: (400, ErrorCode.INVALID_CONTEXT),
    MessageFormatError: (400, ErrorCode.INVALID_MESSAGE),
    AuditSinkError: (500, ErrorCode.SINK_FAILURE),
}


def audit_error_response(exc: AuditError) -> tuple[int, ErrorCode]:
    """Get the HTTP status and error code for an audit error."""
    for error_type in type(exc).__mro__:
        if error_type in AUDIT_ERROR_RESPONSES:
            return AUDIT_ERROR_RESPONSES[error_type]
    return 500, ErrorCode.INTERNAL_ERROR
