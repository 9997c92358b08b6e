"""HTTP API for logging audit events."""
