"""Exception handlers translating failures into structured responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from lister.catalog import CatalogBadRequestError, CatalogNotFoundError

from .responses import api_error_response

logger = logging.getLogger(__name__)

RESOURCE_NOT_FOUND_MESSAGE = "Resource not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


async def api_handle_catalog_not_found(_request: Request, error: CatalogNotFoundError) -> Response:
    """Render a missing application, environment or metadata key.

    Returns:
        Response: HTTP 404 with a `{"message"}` body naming the missing entity.
    """

    return api_error_response(error.message, status.HTTP_404_NOT_FOUND)


async def api_handle_catalog_bad_request(_request: Request, error: CatalogBadRequestError) -> Response:
    """Render a missing or unusable request parameter.

    Returns:
        Response: HTTP 400 with a plain-text message.
    """

    return PlainTextResponse(error.message, status_code=status.HTTP_400_BAD_REQUEST)


async def api_handle_http_error(_request: Request, error: StarletteHTTPException) -> Response:
    """Render routing errors; an unmatched path or method is always a 404."""

    if error.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return api_error_response(RESOURCE_NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
    return api_error_response(str(error.detail), error.status_code)


async def api_handle_unexpected_error(request: Request, error: Exception) -> Response:
    """Render any uncaught handler failure as a structured 500 response.

    Args:
        request: Request that failed.
        error: Uncaught exception.

    Returns:
        Response: Structured error response.
    """

    logger.error(
        "unhandled error for %s %s",
        request.method,
        request.url.path,
        exc_info=(type(error), error, error.__traceback__),
    )
    return api_error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def api_register_error_handlers(application: FastAPI) -> None:
    """Attach all exception handlers to the application.

    Args:
        application: FastAPI application to configure.
    """

    application.add_exception_handler(CatalogNotFoundError, api_handle_catalog_not_found)
    application.add_exception_handler(CatalogBadRequestError, api_handle_catalog_bad_request)
    application.add_exception_handler(StarletteHTTPException, api_handle_http_error)
    application.add_exception_handler(Exception, api_handle_unexpected_error)
