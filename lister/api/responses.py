"""Response classes shared by all API routes."""

from fastapi.responses import JSONResponse

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"
TEXT_PLAIN_CONTENT_TYPE = "text/plain;charset=UTF-8"


class CatalogJSONResponse(JSONResponse):
    """JSON response carrying an explicit UTF-8 charset in its content type."""

    media_type = JSON_CONTENT_TYPE


def api_error_response(message: str, status_code: int) -> CatalogJSONResponse:
    """Build the structured error body used for every JSON error.

    Args:
        message: Human-readable error message.
        status_code: HTTP status code.

    Returns:
        CatalogJSONResponse: Response with `{"message": ...}` body.
    """

    return CatalogJSONResponse(content={"message": message}, status_code=status_code)
