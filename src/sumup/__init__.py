"""Python SDK for the SumUp REST API.

Examples:
    ```python
    from sumup import SumUp

    client = SumUp()  # reads SUMUP_ACCESS_TOKEN when a request is sent
    readers = client.readers.list("MCODE").data
    ```
"""

from ._config import (
    INFINITE_TIMEOUT,
    RequestOptions,
    SumUpClientOptions,
    SumUpEnvironment,
)
from ._services import ApiClient
from ._sumup import SumUp
from ._utils import OptionalQuery, RequestBuilder
from .models import (
    ApiError,
    ApiException,
    ApiResponse,
    ConfigurationError,
    DecodeError,
    InvalidArgumentError,
    JsonDocument,
    RequestTimeoutError,
    SumUpError,
)

__all__ = [
    "INFINITE_TIMEOUT",
    "ApiClient",
    "ApiError",
    "ApiException",
    "ApiResponse",
    "ConfigurationError",
    "DecodeError",
    "InvalidArgumentError",
    "JsonDocument",
    "OptionalQuery",
    "RequestBuilder",
    "RequestOptions",
    "RequestTimeoutError",
    "SumUp",
    "SumUpClientOptions",
    "SumUpEnvironment",
    "SumUpError",
]
