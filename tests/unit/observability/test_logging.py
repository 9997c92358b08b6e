"""Tests for structured logging."""

import json
from io import StringIO

import structlog

from auditor.observability.logging import (
    REDACTED,
    SecretRedactor,
    get_logger,
    setup_logging,
)


def last_record(output: StringIO) -> dict:
    return json.loads(output.getvalue().strip().splitlines()[-1])


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_json_format(self) -> None:
        output = StringIO()
        setup_logging(level="INFO", format="json", redact_secrets=False, stream=output)

        get_logger("test.json").info("json_message", count=3)

        record = last_record(output)
        assert record["event"] == "json_message"
        assert record["count"] == 3
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_setup_console_format(self) -> None:
        output = StringIO()
        setup_logging(level="DEBUG", format="console", redact_secrets=False, stream=output)

        get_logger("test.console").debug("console_message")

        assert "console_message" in output.getvalue()

    def test_level_filters(self) -> None:
        output = StringIO()
        setup_logging(level="WARNING", format="json", stream=output)

        get_logger("test.level").info("hidden_message")

        assert "hidden_message" not in output.getvalue()

    def test_redaction_enabled(self) -> None:
        output = StringIO()
        setup_logging(level="INFO", format="json", redact_secrets=True, stream=output)

        get_logger("test.redact").info("configured", auth_token="s3cret")

        assert last_record(output)["auth_token"] == REDACTED

    def test_merges_context_vars(self) -> None:
        output = StringIO()
        setup_logging(level="INFO", format="json", redact_secrets=False, stream=output)
        structlog.contextvars.bind_contextvars(request_id="r-1")
        try:
            get_logger("test.ctx").info("bound_message")
        finally:
            structlog.contextvars.clear_contextvars()

        assert last_record(output)["request_id"] == "r-1"


class TestSecretRedactor:
    """Tests for SecretRedactor processor."""

    def test_redacts_sensitive_keys(self) -> None:
        redactor = SecretRedactor()

        result = redactor(None, "info", {"event": "x", "auth_token": "s3cret", "user": "alice"})

        assert result == {"event": "x", "auth_token": REDACTED, "user": "alice"}

    def test_redacts_nested_mappings(self) -> None:
        redactor = SecretRedactor()

        result = redactor(
            None, "info", {"event": "audit", "data": {"Password": "pw", "userId": "a"}}
        )

        assert result["data"] == {"Password": REDACTED, "userId": "a"}

    def test_custom_keys(self) -> None:
        redactor = SecretRedactor(frozenset({"ssn"}))

        result = redactor(None, "info", {"ssn": "123-45-6789", "token": "t"})

        assert result == {"ssn": REDACTED, "token": "t"}
