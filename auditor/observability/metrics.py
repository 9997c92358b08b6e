"""Prometheus metrics for audit event processing."""

from prometheus_client import Counter

EVENTS_EMITTED = Counter(
    "auditor_events_emitted_total",
    "Audit events validated and handed to the sink",
    labelnames=["event_name"],
)

EVENTS_REJECTED = Counter(
    "auditor_events_rejected_total",
    "Audit events rejected during validation",
    labelnames=["event_name", "error_type"],
)

SINK_FAILURES = Counter(
    "auditor_sink_failures_total",
    "Sink emission failures routed to an exception handler",
    labelnames=["event_name"],
)
