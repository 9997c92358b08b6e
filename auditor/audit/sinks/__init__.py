"""Audit sink implementations."""

from auditor.audit.sinks.inmemory import InMemoryAuditSink
from auditor.audit.sinks.logging import LoggingAuditSink

__all__ = ["InMemoryAuditSink", "LoggingAuditSink"]
