from ._auth import AccessTokenResolver
from ._logs import setup_logging
from ._optional_query import OptionalQuery
from ._request_builder import RequestBuilder, to_invariant_string
from ._response import classify_response
from ._runtime_headers import runtime_headers

__all__ = [
    "AccessTokenResolver",
    "OptionalQuery",
    "RequestBuilder",
    "classify_response",
    "runtime_headers",
    "setup_logging",
    "to_invariant_string",
]
