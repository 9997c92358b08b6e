"""Audit event validation, message assembly and emission.

Usage:
    from auditor.audit import EventLogger

    audit = EventLogger(catalog, constraints, sink)
    audit.log_event("UserLogin", {"userId": "alice"})
"""

from auditor.audit.handlers import (
    AuditExceptionHandler,
    ignore_audit_exception,
    raise_audit_exception,
)
from auditor.audit.logger import EventLogger
from auditor.audit.models import COMPLETION_STATUS, AuditMessage, AuditMessageId
from auditor.audit.sink import AuditSink
from auditor.audit.validator import EventValidator

__all__ = [
    "COMPLETION_STATUS",
    "AuditExceptionHandler",
    "AuditMessage",
    "AuditMessageId",
    "AuditSink",
    "EventLogger",
    "EventValidator",
    "ignore_audit_exception",
    "raise_audit_exception",
]
