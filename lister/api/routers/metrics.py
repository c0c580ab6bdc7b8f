"""Metrics exposure endpoint."""

from fastapi import APIRouter, status

from lister.api.responses import CatalogJSONResponse
from lister.metrics import MetricsCollector


def api_create_metrics_router(metrics_collector: MetricsCollector) -> APIRouter:
    """Create router exposing collected request metrics as JSON at `/metrics`.

    Args:
        metrics_collector: Collector fed by the instrumentation middleware.

    Returns:
        APIRouter: Router exposing the `/metrics` endpoint.

    Raises:
        ValueError: Raised when metrics_collector is None.
    """

    if metrics_collector is None:
        raise ValueError("metrics_collector must not be None")

    router = APIRouter(tags=["metrics"])

    @router.api_route("/metrics", methods=["GET", "HEAD"])
    def api_metrics_summary() -> CatalogJSONResponse:
        """Return the current metrics summary.

        Returns:
            CatalogJSONResponse: Request counters and timings.
        """

        return CatalogJSONResponse(content=metrics_collector.get_summary(), status_code=status.HTTP_200_OK)

    return router
