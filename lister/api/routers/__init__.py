"""API router package for endpoint composition."""

from .applications import api_create_applications_router
from .environments import api_create_environments_router
from .health import api_create_health_router
from .metrics import api_create_metrics_router

__all__ = [
    "api_create_applications_router",
    "api_create_environments_router",
    "api_create_health_router",
    "api_create_metrics_router",
]
