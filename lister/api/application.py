"""FastAPI application factory composing routers and pipeline stages.

Catalog routers are mounted twice: under the versioned `/1.x` prefix and at
the root for legacy clients. Both mounts share the same router objects.
"""

from fastapi import FastAPI

from lister import __version__
from lister.catalog import CatalogService
from lister.config import AppSettings
from lister.db import ApplicationStorePort, EnvironmentStorePort
from lister.health import HealthAggregator
from lister.metrics import MetricsCollector

from .errors import api_register_error_handlers
from .middleware import TrailingSlashMiddleware, api_install_instrumentation
from .responses import CatalogJSONResponse
from .routers import (
    api_create_applications_router,
    api_create_environments_router,
    api_create_health_router,
    api_create_metrics_router,
)

VERSIONED_API_PREFIX = "/1.x"
LEGACY_API_PREFIX = ""


def create_api_application(
    settings: AppSettings,
    application_store: ApplicationStorePort,
    environment_store: EnvironmentStorePort,
    metrics_collector: MetricsCollector | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        application_store: Applications persistence port.
        environment_store: Environments persistence port.
        metrics_collector: Optional collector; a fresh one is created when omitted.

    Returns:
        FastAPI: Framework application instance with all routes and stages installed.

    Raises:
        ValueError: Raised when a dependency is invalid.
    """

    catalog_service = CatalogService(application_store=application_store, environment_store=environment_store)
    health_aggregator = HealthAggregator(
        application_store=application_store,
        environment_store=environment_store,
        service_name=settings.service_name,
        version=__version__,
    )
    collector = metrics_collector or MetricsCollector()

    application = FastAPI(
        title="Lister",
        version=__version__,
        default_response_class=CatalogJSONResponse,
        redirect_slashes=False,
    )

    api_include_catalog_routers(application, catalog_service, VERSIONED_API_PREFIX, include_in_schema=True)
    api_include_catalog_routers(application, catalog_service, LEGACY_API_PREFIX, include_in_schema=False)
    application.include_router(api_create_health_router(health_aggregator=health_aggregator))
    application.include_router(api_create_metrics_router(metrics_collector=collector))

    api_register_error_handlers(application)
    api_install_instrumentation(application, collector)
    application.add_middleware(TrailingSlashMiddleware)

    return application


def api_include_catalog_routers(
    application: FastAPI,
    catalog_service: CatalogService,
    prefix: str,
    include_in_schema: bool,
) -> None:
    """Mount the applications and environments routers under one prefix.

    Args:
        application: FastAPI application receiving the routes.
        catalog_service: Catalog service shared by every mount.
        prefix: Path prefix; empty for the root mount.
        include_in_schema: Whether the mount appears in the OpenAPI document.
    """

    application.include_router(
        api_create_applications_router(catalog_service=catalog_service),
        prefix=prefix,
        include_in_schema=include_in_schema,
    )
    application.include_router(
        api_create_environments_router(catalog_service=catalog_service),
        prefix=prefix,
        include_in_schema=include_in_schema,
    )
