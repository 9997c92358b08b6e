"""AuditSink abstract interface.

A sink durably records validated audit messages. It may block or fail;
failures are handed to the event logger's exception handler.
"""

from abc import ABC, abstractmethod

from auditor.audit.models import AuditMessage


class AuditSink(ABC):
    """Destination for validated audit messages."""

    @abstractmethod
    def emit(self, message: AuditMessage) -> None:
        """Record a message, raising on failure."""
        pass
