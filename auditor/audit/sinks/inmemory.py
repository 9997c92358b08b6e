"""In-memory implementation of AuditSink."""

import threading

from auditor.audit.models import AuditMessage
from auditor.audit.sink import AuditSink


class InMemoryAuditSink(AuditSink):
    """In-memory AuditSink for testing and development.

    Keeps every emitted message in a list. Not suitable for production use.
    """

    def __init__(self) -> None:
        self._messages: list[AuditMessage] = []
        self._lock = threading.Lock()

    def emit(self, message: AuditMessage) -> None:
        with self._lock:
            self._messages.append(message)

    @property
    def messages(self) -> list[AuditMessage]:
        """Emitted messages in emission order."""
        with self._lock:
            return list(self._messages)

    def list_by_event(self, event_name: str) -> list[AuditMessage]:
        return [m for m in self.messages if m.event_name == event_name]

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()
