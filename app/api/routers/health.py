"""Health endpoint router composition for aggregated dependency checks."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.domain import HealthAggregate
from app.health import (
    HealthCheckService,
    health_build_payload,
    health_build_response_headers,
    health_status_code,
)

logger = logging.getLogger(__name__)


def api_create_health_router(health_service: HealthCheckService) -> APIRouter:
    """Create health-check router with aggregated dependency status.

    Args:
        health_service: Service running probes and aggregation.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when health_service is invalid.
    """

    if health_service is None:
        raise ValueError("health_service must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    async def api_health_status() -> JSONResponse:
        """Return the aggregated health state of the service and its dependencies.

        Returns:
            JSONResponse: Health payload with 200 for healthy/degraded and 503 for unhealthy.

        Raises:
            RuntimeError: This handler converts every internal error into a 503 payload.
        """

        context = health_service.context
        started_at = context.clock()
        try:
            aggregate = await health_service.health_run_all()
            return _api_health_response(health_service, aggregate)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Critical error during health check")
            return _api_health_response(health_service, health_service.health_build_critical_aggregate(started_at))

    return router


def _api_health_response(health_service: HealthCheckService, aggregate: HealthAggregate) -> JSONResponse:
    context = health_service.context
    payload = health_build_payload(
        aggregate,
        environment_name=context.environment_name,
        version=context.version,
        timestamp=context.wall_clock(),
    )
    return JSONResponse(
        content=payload,
        status_code=health_status_code(aggregate.overall_status),
        headers=health_build_response_headers(aggregate),
    )
