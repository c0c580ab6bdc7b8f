"""Request parameter decoding for handlers that accept body parameters.

Parameters are merged from the query string and then from a form or JSON
object body; body values override query values with the same name.
"""

from __future__ import annotations

import json

from fastapi import Request

from lister.catalog import CatalogBadRequestError

MALFORMED_JSON_MESSAGE = "Malformed JSON in request body."
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _api_parameter_text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value)


def _api_request_media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";", 1)[0].strip().lower()


async def api_request_parameters(request: Request) -> dict[str, str]:
    """Decode query and body parameters into one flat string mapping.

    Args:
        request: Incoming request.

    Returns:
        dict[str, str]: Merged parameters.

    Raises:
        CatalogBadRequestError: Raised when a JSON body is malformed or not an object.
    """

    parameters: dict[str, str] = dict(request.query_params)
    media_type = _api_request_media_type(request)

    if media_type in FORM_CONTENT_TYPES:
        form = await request.form()
        parameters.update({key: value for key, value in form.items() if isinstance(value, str)})
    elif media_type == "application/json" or media_type.endswith("+json"):
        if not await request.body():
            return parameters
        try:
            payload = await request.json()
        except (UnicodeDecodeError, json.JSONDecodeError) as error:
            raise CatalogBadRequestError(MALFORMED_JSON_MESSAGE) from error
        if not isinstance(payload, dict):
            raise CatalogBadRequestError(MALFORMED_JSON_MESSAGE)
        for key, value in payload.items():
            text_value = _api_parameter_text(value)
            if text_value is not None:
                parameters[key] = text_value
    return parameters
