"""Shared test fixtures for the Auditor test suite."""

from collections.abc import Callable, Generator, Iterator
from pathlib import Path

import pytest

from auditor import context as request_context
from auditor.audit.logger import EventLogger
from auditor.audit.sinks.inmemory import InMemoryAuditSink
from auditor.audit.validator import EventValidator
from auditor.catalog.models import (
    AttributeDefinition,
    Catalog,
    Constraint,
    EventAttribute,
    EventSchema,
)
from auditor.catalog.stores.inmemory import InMemoryCatalogStore
from auditor.constraints.registry import ConstraintRegistry


def max_length(is_request_context: bool, name: str, value: str, argument: str) -> list[str]:
    """Test constraint: value length must not exceed the argument."""
    if len(value) > int(argument):
        source = "request context value" if is_request_context else "attribute"
        return [
            f"The {source} {name} exceeds the maximum length of {argument} "
            f"with a length of {len(value)}"
        ]
    return []


def pattern_digits(is_request_context: bool, name: str, value: str, argument: str) -> list[str]:  # noqa: ARG001
    """Test constraint: value must be all digits."""
    if not value.isdigit():
        return [f"{name} must contain only digits"]
    return []


@pytest.fixture
def catalog() -> Catalog:
    """A small catalog covering plain, constrained and request context attributes."""
    return Catalog(
        attributes=(
            AttributeDefinition(name="userId"),
            AttributeDefinition(
                name="accountNumber",
                required=True,
                constraints=(
                    Constraint(constraint_type="maxLength", value="8"),
                    Constraint(constraint_type="digits"),
                ),
            ),
            AttributeDefinition(name="amount", required=True),
            AttributeDefinition(name="memo"),
            AttributeDefinition(name="requestId", request_context=True, required=True),
            AttributeDefinition(
                name="ipAddress",
                request_context=True,
                constraints=(Constraint(constraint_type="maxLength", value="15"),),
            ),
        ),
        events=(
            EventSchema(
                name="UserLogin",
                attributes=(EventAttribute(name="userId", required=True),),
            ),
            EventSchema(
                name="Transfer",
                attributes=(
                    EventAttribute(name="accountNumber"),
                    EventAttribute(name="amount"),
                    EventAttribute(name="memo"),
                    EventAttribute(name="requestId"),
                    EventAttribute(name="ipAddress"),
                ),
            ),
            EventSchema(
                name="PageView",
                attributes=(
                    EventAttribute(name="userId"),
                    EventAttribute(name="memo"),
                ),
            ),
        ),
    )


@pytest.fixture
def catalog_store(catalog: Catalog) -> InMemoryCatalogStore:
    return InMemoryCatalogStore(catalog)


@pytest.fixture
def constraints() -> ConstraintRegistry:
    registry = ConstraintRegistry()
    registry.register("maxLength", max_length)
    registry.register("digits", pattern_digits)
    return registry


@pytest.fixture
def validator(
    catalog_store: InMemoryCatalogStore, constraints: ConstraintRegistry
) -> EventValidator:
    return EventValidator(catalog_store, constraints)


@pytest.fixture
def sink() -> InMemoryAuditSink:
    return InMemoryAuditSink()


@pytest.fixture
def event_logger(
    catalog_store: InMemoryCatalogStore,
    constraints: ConstraintRegistry,
    sink: InMemoryAuditSink,
) -> EventLogger:
    return EventLogger(catalog_store, constraints, sink)


@pytest.fixture(autouse=True)
def clear_request_context() -> Iterator[None]:
    """Start and end every test with an empty request context."""
    request_context.clear()
    yield
    request_context.clear()


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({"default.toml": "app_name = 'test'"})
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from auditor.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
