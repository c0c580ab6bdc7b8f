"""Operational endpoints: liveness ping and aggregated readiness check."""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from lister.api.responses import CatalogJSONResponse
from lister.health import HealthAggregator

READ_METHODS = ["GET", "HEAD"]


def api_create_health_router(health_aggregator: HealthAggregator) -> APIRouter:
    """Create health-check router with liveness and dependency readiness status.

    Args:
        health_aggregator: Aggregator probing both catalog stores.

    Returns:
        APIRouter: Router exposing `/ping` and `/healthcheck` endpoints.

    Raises:
        ValueError: Raised when health_aggregator is invalid.
    """

    if health_aggregator is None:
        raise ValueError("health_aggregator must not be None")

    router = APIRouter(tags=["health"])

    @router.api_route("/ping", methods=READ_METHODS)
    def api_ping() -> PlainTextResponse:
        """Return trivial liveness.

        Returns:
            PlainTextResponse: Plain-text `pong` with HTTP 200.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        return PlainTextResponse("pong", status_code=status.HTTP_200_OK)

    @router.api_route("/healthcheck", methods=READ_METHODS)
    async def api_health_status() -> CatalogJSONResponse:
        """Return aggregated store health; 200 when every check succeeded, 500 otherwise.

        Returns:
            CatalogJSONResponse: Health payload with per-dependency outcomes.

        Raises:
            RuntimeError: Check failures are reported in the payload, never raised.
        """

        report = await health_aggregator.health_check()
        status_code = status.HTTP_200_OK if report.success else status.HTTP_500_INTERNAL_SERVER_ERROR
        return CatalogJSONResponse(content=report.as_payload(), status_code=status_code)

    return router
