"""Fixtures for API tests."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from auditor.api.app import create_app
from auditor.api.dependencies import (
    get_audit_sink,
    get_catalog_store,
    get_event_logger,
    get_settings,
    reset_dependencies,
)
from auditor.audit.logger import EventLogger
from auditor.audit.sinks.inmemory import InMemoryAuditSink
from auditor.catalog.stores.inmemory import InMemoryCatalogStore
from auditor.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings with authorization disabled."""
    return Settings()


@pytest.fixture
def app(
    settings: Settings,
    catalog_store: InMemoryCatalogStore,
    sink: InMemoryAuditSink,
    event_logger: EventLogger,
) -> Iterator[FastAPI]:
    """Application wired to the test catalog and an in-memory sink."""
    reset_dependencies()

    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_catalog_store] = lambda: catalog_store
    app.dependency_overrides[get_audit_sink] = lambda: sink
    app.dependency_overrides[get_event_logger] = lambda: event_logger

    yield app

    reset_dependencies()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
