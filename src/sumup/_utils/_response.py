from typing import Any, Optional, TypeVar

from httpx import Response
from pydantic import TypeAdapter, ValidationError

from ..models._base import JsonDocument
from ..models.api_response import ApiResponse
from ..models.errors import ApiError
from ..models.exceptions import ApiException, DecodeError

T = TypeVar("T")


def _request_uri(response: Response) -> Optional[str]:
    try:
        return str(response.request.url)
    except RuntimeError:
        return None


def _try_parse_error(payload: str) -> Optional[ApiError]:
    try:
        return ApiError.model_validate_json(payload)
    except ValidationError:
        return None


def classify_response(
    response: Response, response_type: Optional[type[T]] = None
) -> ApiResponse[T]:
    """Map a fully read response to an ``ApiResponse`` or raise.

    Args:
        response: A response whose body has already been read.
        response_type: Shape of the payload. ``JsonDocument`` keeps the parsed
            JSON as-is, ``str`` returns the text, ``None`` ignores the body and
            any other type is validated with pydantic.

    Raises:
        ApiException: The status code is outside ``[200, 300)``.
        DecodeError: The status code is successful but the body does not
            match ``response_type``.
    """
    request_uri = _request_uri(response)

    if not response.is_success:
        body = response.text if response.content else None
        error = _try_parse_error(body) if body else None
        raise ApiException(response.status_code, error, body, request_uri)

    if not response.content or response_type is None:
        return ApiResponse(None, response.status_code, response.headers, request_uri)

    data: Any
    try:
        if response_type is str:
            data = response.text
        elif response_type is JsonDocument:
            data = JsonDocument.model_validate_json(response.content)
        else:
            data = TypeAdapter(response_type).validate_json(response.content)
    except (ValidationError, ValueError) as e:
        raise DecodeError(
            f"Failed to decode response body as {getattr(response_type, '__name__', response_type)}: {e}",
            response.status_code,
            response.text,
            request_uri,
        ) from e

    return ApiResponse(data, response.status_code, response.headers, request_uri)
