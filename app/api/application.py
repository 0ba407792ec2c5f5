"""FastAPI application factory for the health-check service.

This module defines API application composition used by the runtime.
"""

from fastapi import FastAPI

from app.config import Strictness
from app.health import HealthCheckService

from .routers import api_create_health_router, api_create_setup_router


def create_api_application(health_service: HealthCheckService) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Setup routes are only mounted outside strict (production) mode.

    Args:
        health_service: Health-check service carrying the runtime context.

    Returns:
        FastAPI: Framework application instance.

    Raises:
        ValueError: Raised when health_service is None.
    """

    if health_service is None:
        raise ValueError("health_service must not be None")

    context = health_service.context
    application = FastAPI(title="MDM Hub Health", version=context.version)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal service identification response.

        Returns:
            dict[str, str]: Service name, version and environment.

        Raises:
            RuntimeError: Raised if route handler cannot produce a response.
        """

        return {
            "service": "mdm-hub-health",
            "version": context.version,
            "environment": context.environment_name,
        }

    application.include_router(api_create_health_router(health_service=health_service))
    if context.strictness != Strictness.STRICT:
        application.include_router(api_create_setup_router(health_service=health_service))

    return application
