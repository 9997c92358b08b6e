"""Exception handlers for sink failures.

A handler receives the message that failed to emit and the exception the
sink raised. It may raise to fail the call or return to swallow the error.
"""

from collections.abc import Callable

from auditor.audit.models import AuditMessage
from auditor.config.models.audit import FailurePolicy
from auditor.errors import AuditSinkError

AuditExceptionHandler = Callable[[AuditMessage, Exception], None]


def raise_audit_exception(message: AuditMessage, exc: Exception) -> None:
    """Default handler: fail the call with an AuditSinkError."""
    raise AuditSinkError(f"Error logging event {message.id.name}", cause=exc) from exc


def ignore_audit_exception(message: AuditMessage, exc: Exception) -> None:  # noqa: ARG001
    """Swallow sink failures."""
    return None


def handler_for_policy(policy: FailurePolicy) -> AuditExceptionHandler:
    """Map a configured failure policy to its built-in handler."""
    if policy == "ignore":
        return ignore_audit_exception
    return raise_audit_exception
