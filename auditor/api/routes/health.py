"""Health check and metrics endpoints."""

from typing import Literal

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from auditor.api.dependencies import AuditSinkDep, CatalogStoreDep
from auditor.api.models.health import ComponentHealth, HealthResponse
from auditor.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check(catalog: CatalogStoreDep, sink: AuditSinkDep) -> HealthResponse:
    """Report service health.

    An empty catalog is reported as degraded: every event would be
    rejected as unknown.
    """
    if catalog.list_events():
        catalog_health = ComponentHealth(name="catalog", status="healthy")
    else:
        catalog_health = ComponentHealth(
            name="catalog", status="degraded", message="Catalog has no events"
        )

    components = [
        catalog_health,
        ComponentHealth(name="sink", status="healthy", message=type(sink).__name__),
    ]

    status: Literal["healthy", "degraded"] = "healthy"
    if any(c.status != "healthy" for c in components):
        status = "degraded"
    logger.debug("health_check_completed", status=status)

    return HealthResponse(status=status, version=VERSION, components=components)


async def get_metrics() -> Response:
    """Prometheus metrics in text format for scraping."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
