"""Cross-cutting request stages wrapped around the router."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request, Response
from starlette.types import ASGIApp, Receive, Scope, Send

from lister.metrics import MetricsCollector

logger = logging.getLogger(__name__)

UNMATCHED_ROUTE_LABEL = "<unmatched>"


class TrailingSlashMiddleware:
    """Treat `/x/` and `/x` as the same route by stripping trailing slashes.

    The path is rewritten before routing, so no redirect is issued.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if len(path) > 1 and path.endswith("/"):
                scope = dict(scope)
                scope["path"] = path.rstrip("/") or "/"
                raw_path = scope.get("raw_path")
                if raw_path:
                    scope["raw_path"] = raw_path.rstrip(b"/") or b"/"
        await self.app(scope, receive, send)


def api_route_label(scope: Scope) -> str:
    """Return the metrics label for the route that handled a request.

    Depending on how a router was included, the matched route template may or
    may not carry its mount prefix. The prefix is recovered from the request
    path: segments left over after aligning the template with the tail of the
    path belong to the mount.

    Args:
        scope: ASGI scope after routing.

    Returns:
        str: Full route template such as `/1.x/applications/{application_name}`,
        or `UNMATCHED_ROUTE_LABEL` when no route matched.
    """

    route_template = getattr(scope.get("route"), "path", None)
    if not route_template:
        return UNMATCHED_ROUTE_LABEL

    path_segments = [segment for segment in scope["path"].split("/") if segment]
    template_segments = [segment for segment in route_template.split("/") if segment]
    prefix_segments = path_segments[: max(len(path_segments) - len(template_segments), 0)]
    return "/" + "/".join(prefix_segments + template_segments)


def api_install_instrumentation(application: FastAPI, metrics_collector: MetricsCollector) -> None:
    """Time and count every request into the metrics collector.

    Args:
        application: FastAPI application to instrument.
        metrics_collector: Collector receiving one record per request.
    """

    @application.middleware("http")
    async def api_instrument_request(request: Request, call_next) -> Response:
        """Record method, route label, status and latency for one request.

        Returns:
            Response: Downstream response, unchanged.

        Raises:
            Exception: Downstream failures are re-raised after being recorded as 500.
        """

        started_at = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_seconds = time.perf_counter() - started_at
            route_label = api_route_label(request.scope)
            metrics_collector.record_request(request.method, route_label, status_code, elapsed_seconds)
            logger.debug("%s %s -> %s in %.2fms", request.method, request.url.path, status_code, elapsed_seconds * 1000)
