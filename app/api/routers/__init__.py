"""API router package for endpoint composition."""

from .health import api_create_health_router
from .setup import api_create_setup_router

__all__ = ["api_create_health_router", "api_create_setup_router"]
