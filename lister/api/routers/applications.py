"""Applications API router for application records and metadata items."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from lister.api.parameters import api_request_parameters
from lister.api.responses import CatalogJSONResponse
from lister.catalog import CatalogService
from lister.domain import ApplicationRecord

FULL_VIEW = "full"
READ_METHODS = ["GET", "HEAD"]


def api_serialize_application(record: ApplicationRecord) -> dict:
    """Serialize an application with its name kept outside the metadata bag."""

    return {"name": record.name, "metadata": dict(record.metadata)}


def api_create_applications_router(catalog_service: CatalogService) -> APIRouter:
    """Create applications router with resource and metadata-item endpoints.

    Args:
        catalog_service: Catalog service executing application operations.

    Returns:
        APIRouter: Router exposing `/applications` endpoints.

    Raises:
        ValueError: Raised when catalog_service is None.
    """

    if catalog_service is None:
        raise ValueError("catalog_service must not be None")

    router = APIRouter(prefix="/applications", tags=["applications"])

    @router.api_route("", methods=READ_METHODS)
    def api_application_list(view: str | None = Query(default=None)) -> CatalogJSONResponse:
        """Return application names, or full records when `view=full` is given.

        Args:
            view: Optional listing view; `full` includes every metadata bag.

        Returns:
            CatalogJSONResponse: Name-sorted applications payload.

        Raises:
            RuntimeError: Raised when the store read fails.
        """

        if view == FULL_VIEW:
            records = catalog_service.catalog_application_list_full()
            payload = {"applications": [api_serialize_application(record) for record in records]}
        else:
            payload = {"applications": catalog_service.catalog_application_list()}
        return CatalogJSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.api_route("/{application_name}", methods=READ_METHODS)
    def api_application_get(application_name: str) -> CatalogJSONResponse:
        """Return one application with its metadata.

        Returns:
            CatalogJSONResponse: `{"name", "metadata"}` payload.

        Raises:
            CatalogNotFoundError: Raised when the application does not exist.
        """

        record = catalog_service.catalog_application_get(application_name)
        return CatalogJSONResponse(content=api_serialize_application(record), status_code=status.HTTP_200_OK)

    @router.put("/{application_name}")
    def api_application_create(application_name: str) -> CatalogJSONResponse:
        """Create or replace an application; metadata starts empty.

        Returns:
            CatalogJSONResponse: Created `{"name"}` payload with HTTP 201.

        Raises:
            RuntimeError: Raised when the store write fails.
        """

        record = catalog_service.catalog_application_create(application_name)
        return CatalogJSONResponse(content={"name": record.name}, status_code=status.HTTP_201_CREATED)

    @router.delete("/{application_name}")
    def api_application_delete(application_name: str) -> Response:
        """Delete an application and all its metadata. Always 204, idempotent.

        Returns:
            Response: Empty HTTP 204 response.

        Raises:
            RuntimeError: Raised when the store write fails.
        """

        catalog_service.catalog_application_delete(application_name)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.api_route("/{application_name}/{metadata_key}", methods=READ_METHODS)
    def api_application_metadata_get(application_name: str, metadata_key: str) -> CatalogJSONResponse:
        """Return one metadata item.

        Returns:
            CatalogJSONResponse: `{key: value}` payload.

        Raises:
            CatalogNotFoundError: Raised when the application or key does not exist.
        """

        item = catalog_service.catalog_application_metadata_get(application_name, metadata_key)
        return CatalogJSONResponse(content=item.as_payload(), status_code=status.HTTP_200_OK)

    @router.put("/{application_name}/{metadata_key}")
    def api_application_metadata_put(
        application_name: str,
        metadata_key: str,
        parameters: dict[str, str] = Depends(api_request_parameters),
    ) -> CatalogJSONResponse:
        """Upsert one metadata item; `value` comes from query, form or JSON body.

        Returns:
            CatalogJSONResponse: Stored `{key: value}` payload with HTTP 201.

        Raises:
            CatalogBadRequestError: Raised when `value` is missing or the key is reserved.
            CatalogNotFoundError: Raised when the application does not exist.
        """

        item = catalog_service.catalog_application_metadata_put(
            application_name,
            metadata_key,
            parameters.get("value"),
        )
        return CatalogJSONResponse(content=item.as_payload(), status_code=status.HTTP_201_CREATED)

    @router.delete("/{application_name}/{metadata_key}")
    def api_application_metadata_delete(application_name: str, metadata_key: str) -> Response:
        """Delete one metadata item. Always 204, idempotent.

        Returns:
            Response: Empty HTTP 204 response.

        Raises:
            RuntimeError: Raised when the store write fails.
        """

        catalog_service.catalog_application_metadata_delete(application_name, metadata_key)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
