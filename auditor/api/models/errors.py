"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Machine-readable error codes for API responses."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request body failed validation."""

    UNAUTHORIZED = "UNAUTHORIZED"
    """Authorization header missing or not matching the shared secret."""

    UNKNOWN_EVENT = "UNKNOWN_EVENT"
    """The catalog has no definition for the event."""

    INVALID_ATTRIBUTES = "INVALID_ATTRIBUTES"
    """Attributes are missing, undefined or violate constraints."""

    MISSING_CONTEXT = "MISSING_CONTEXT"
    """Required request context values are absent."""

    INVALID_CONTEXT = "INVALID_CONTEXT"
    """Request context values violate constraints."""

    INVALID_MESSAGE = "INVALID_MESSAGE"
    """Event name or attribute keys cannot form a structured message."""

    SINK_FAILURE = "SINK_FAILURE"
    """The validated event could not be recorded."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """One problem found while handling the request."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {
            "error": {
                "code": "INVALID_ATTRIBUTES",
                "message": "Event UserLogin is missing required attribute(s) userId"
            }
        }
    """

    error: ErrorBody
