"""
Request body binding.

Turns the raw JSON body into a request model. Binding failures are not
raised: the model is just missing from the FilterContext arguments and the
ValidationFilter answers with the "Body" problem response.
"""

from typing import Optional, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from validation_api.utils.logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def is_json_content_type(content_type: str) -> bool:
    """True for application/json and application/*+json, parameters ignored."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


async def bind_body(request: Request, model: Type[ModelT]) -> Optional[ModelT]:
    """
    Parse the request body into ``model``.

    Args:
        request: Incoming request
        model: Pydantic model the JSON object should bind to

    Returns:
        The bound model, or None when the content type is not JSON, the
        body is empty, is not valid JSON, is not a JSON object, or has
        fields of the wrong type.
    """
    content_type = request.headers.get("content-type", "")
    if not is_json_content_type(content_type):
        logger.debug(
            f"Could not bind {model.__name__} on {request.method} {request.url.path}: "
            f"unsupported content type {content_type!r}"
        )
        return None

    body = await request.body()

    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.debug(
            f"Could not bind {model.__name__} on {request.method} {request.url.path}: "
            f"{e.error_count()} error(s)"
        )
        return None
