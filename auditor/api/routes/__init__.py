"""API route registration."""

from fastapi import APIRouter, Depends, FastAPI

from auditor.api.middleware.auth import verify_authorization
from auditor.config.settings import Settings
from auditor.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router; every route requires authorization."""
    router = APIRouter(prefix="/v1", dependencies=[Depends(verify_authorization)])

    from auditor.api.routes.audit import router as audit_router

    router.include_router(audit_router, tags=["Audit"])

    return router


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register all routes with the FastAPI application."""
    app.include_router(create_v1_router())

    from auditor.api.routes.health import get_metrics
    from auditor.api.routes.health import router as health_router

    app.include_router(health_router, tags=["Health"])

    if settings.observability.metrics.enabled:
        app.add_api_route(
            settings.observability.metrics.path,
            get_metrics,
            methods=["GET"],
            tags=["Health"],
        )

    logger.info("routes_registered", metrics_enabled=settings.observability.metrics.enabled)
