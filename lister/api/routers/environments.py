"""Environments API router for environment records."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from lister.api.parameters import api_request_parameters
from lister.api.responses import CatalogJSONResponse
from lister.catalog import CatalogService
from lister.domain import EnvironmentRecord

READ_METHODS = ["GET", "HEAD"]


def api_serialize_environment(record: EnvironmentRecord) -> dict:
    """Serialize an environment with its name kept outside the metadata bag."""

    return {"name": record.name, "metadata": dict(record.metadata)}


def api_create_environments_router(catalog_service: CatalogService) -> APIRouter:
    """Create environments router with list, detail, create and delete endpoints.

    Args:
        catalog_service: Catalog service executing environment operations.

    Returns:
        APIRouter: Router exposing `/environments` endpoints.

    Raises:
        ValueError: Raised when catalog_service is None.
    """

    if catalog_service is None:
        raise ValueError("catalog_service must not be None")

    router = APIRouter(prefix="/environments", tags=["environments"])

    @router.api_route("", methods=READ_METHODS)
    def api_environment_list() -> CatalogJSONResponse:
        """Return environment names sorted ascending.

        Returns:
            CatalogJSONResponse: `{"environments": [...]}` payload.

        Raises:
            RuntimeError: Raised when the store read fails.
        """

        payload = {"environments": catalog_service.catalog_environment_list()}
        return CatalogJSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.api_route("/{environment_name}", methods=READ_METHODS)
    def api_environment_get(environment_name: str) -> CatalogJSONResponse:
        """Return one environment with its metadata.

        Returns:
            CatalogJSONResponse: `{"name", "metadata"}` payload.

        Raises:
            CatalogNotFoundError: Raised when the environment does not exist.
        """

        record = catalog_service.catalog_environment_get(environment_name)
        return CatalogJSONResponse(content=api_serialize_environment(record), status_code=status.HTTP_200_OK)

    @router.put("/{environment_name}")
    def api_environment_create(
        environment_name: str,
        parameters: dict[str, str] = Depends(api_request_parameters),
    ) -> Response:
        """Create an environment; answers 400 without writing when `account` is missing.

        Returns:
            Response: Empty HTTP 201 response.

        Raises:
            CatalogBadRequestError: Raised when `account` is missing or blank.
        """

        catalog_service.catalog_environment_create(environment_name, parameters.get("account"))
        return Response(status_code=status.HTTP_201_CREATED)

    @router.delete("/{environment_name}")
    def api_environment_delete(environment_name: str) -> Response:
        """Delete an environment and its metadata. Always 204, idempotent.

        Returns:
            Response: Empty HTTP 204 response.

        Raises:
            RuntimeError: Raised when the store write fails.
        """

        catalog_service.catalog_environment_delete(environment_name)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
