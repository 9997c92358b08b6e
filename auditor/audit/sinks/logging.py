"""AuditSink writing messages as JSON lines through structlog."""

import sys
from typing import TextIO

import structlog

from auditor.audit.models import AuditMessage
from auditor.audit.sink import AuditSink


class LoggingAuditSink(AuditSink):
    """Writes each audit message as one JSON line.

    The sink owns its logger and processor chain instead of going through
    setup_logging: the operational log level never drops audit records and
    secret redaction never rewrites their data. Write errors propagate so
    the failure policy sees them.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(stream or sys.stdout),
            processors=[
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    def emit(self, message: AuditMessage) -> None:
        self._logger.info(
            "audit",
            audit_id=str(message.id),
            audit_type=message.type,
            audit_timestamp=message.timestamp.isoformat(),
            data=dict(message.data),
        )
