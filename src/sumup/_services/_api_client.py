import asyncio
import math
import time
from logging import getLogger
from typing import Any, Callable, Optional, TypeVar, Union

from httpx import (
    USE_CLIENT_DEFAULT,
    AsyncClient,
    Client,
    Headers,
    Request,
    Response,
    Timeout,
    TimeoutException,
)
from pydantic import BaseModel
from pydantic_core import to_json

from .._config import RequestOptions, SumUpClientOptions
from .._utils._auth import AccessTokenResolver
from .._utils._request_builder import RequestBuilder
from .._utils._response import classify_response
from .._utils._runtime_headers import apply_runtime_headers
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    APPLICATION_JSON,
    APPLICATION_OCTET_STREAM,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
)
from ..models._base import JsonDocument
from ..models.api_response import ApiResponse
from ..models.exceptions import ConfigurationError, RequestTimeoutError

T = TypeVar("T")

_BODY_HEADERS = (b"content-length", b"transfer-encoding")


def encode_body(body: Any, content_type: Optional[str] = None) -> tuple[bytes, str]:
    """Serialize a request body and pick its content type.

    Raw bytes and readable streams pass through as
    ``application/octet-stream``; strings and ``JsonDocument`` are treated as
    pre-serialized JSON; anything else is serialized to JSON with aliases and
    enum values.
    """
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body), content_type or APPLICATION_OCTET_STREAM
    if hasattr(body, "read"):
        data = body.read()
        if isinstance(data, str):
            data = data.encode("utf-8")
        return data, content_type or APPLICATION_OCTET_STREAM
    if isinstance(body, str):
        return body.encode("utf-8"), content_type or APPLICATION_JSON
    if isinstance(body, JsonDocument):
        return body.model_dump_json().encode("utf-8"), content_type or APPLICATION_JSON
    if isinstance(body, BaseModel):
        payload = body.model_dump_json(by_alias=True, exclude_none=True)
        return payload.encode("utf-8"), content_type or APPLICATION_JSON
    return to_json(body, by_alias=True, exclude_none=True), content_type or APPLICATION_JSON


def effective_timeout(request_options: Optional[RequestOptions]) -> Optional[float]:
    """Per-call timeout in seconds, ``None`` when the call has none.

    Raises:
        ConfigurationError: The timeout is zero or negative.
    """
    if request_options is None or request_options.timeout is None:
        return None
    timeout = request_options.timeout
    if math.isnan(timeout) or timeout <= 0:
        raise ConfigurationError(
            f"Request timeout must be positive or INFINITE_TIMEOUT, got {timeout!r}."
        )
    if math.isinf(timeout):
        return None
    return timeout


def _timed_out(request: Request, timeout: Optional[float]) -> RequestTimeoutError:
    message = f"Request to {request.url} timed out"
    if timeout is not None:
        message += f" after {timeout}s"
    return RequestTimeoutError(f"{message}.", str(request.url))


class ApiClient:
    """Builds, authenticates and dispatches SumUp API requests.

    The client holds no per-call state, so one instance can serve concurrent
    calls. Resource services hold a reference to it and supply path templates,
    bindings and response types.
    """

    def __init__(self, options: Optional[SumUpClientOptions] = None) -> None:
        self._logger = getLogger("sumup")
        self._options = options or SumUpClientOptions.from_environment()
        self._resolver = AccessTokenResolver(self._options)

        transport_timeout = (
            None if math.isinf(self._options.timeout) else self._options.timeout
        )
        client_kwargs = get_httpx_client_kwargs(transport_timeout)

        self._owns_client = self._options.http_client is None
        self._owns_client_async = self._options.http_client_async is None
        self._client = self._options.http_client or Client(**client_kwargs)
        self._client_async = self._options.http_client_async or AsyncClient(
            **client_kwargs
        )

    @property
    def options(self) -> SumUpClientOptions:
        return self._options

    @property
    def base_url(self) -> str:
        return self._options.base_url

    def create_request(
        self,
        method: str,
        path_template: str,
        configure: Optional[Callable[[RequestBuilder], Any]] = None,
    ) -> Request:
        builder = RequestBuilder(method, path_template, self.base_url)
        if configure is not None:
            configure(builder)
        request = builder.build()

        request.headers[HEADER_ACCEPT] = APPLICATION_JSON
        request.headers[HEADER_USER_AGENT] = self._options.user_agent
        apply_runtime_headers(request.headers)
        return request

    def send(
        self,
        request: Request,
        response_type: Optional[type[T]] = None,
        *,
        body: Any = None,
        content_type: Optional[str] = None,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[T]:
        timeout = effective_timeout(request_options)
        deadline = None if timeout is None else time.monotonic() + timeout

        headers = Headers(request.headers)
        token = self._resolver.resolve(headers, request_options)
        self._resolver.apply(headers, token)

        prepared = self._prepare(
            self._client,
            request,
            headers,
            body,
            content_type,
            self._transport_timeout(request, deadline, timeout),
        )

        self._logger.debug(f"Request: {prepared.method} {prepared.url}")
        try:
            streamed = self._client.send(prepared, stream=True)
            try:
                response = self._read_within(streamed, deadline, timeout)
            finally:
                streamed.close()
        except TimeoutException as e:
            raise _timed_out(request, timeout) from e

        self._logger.debug(f"Response: {response.status_code} {prepared.url}")
        return classify_response(response, response_type)

    async def send_async(
        self,
        request: Request,
        response_type: Optional[type[T]] = None,
        *,
        body: Any = None,
        content_type: Optional[str] = None,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[T]:
        timeout = effective_timeout(request_options)

        # The scope covers token resolution, transmission and the body read.
        try:
            async with asyncio.timeout(timeout):
                headers = Headers(request.headers)
                token = await self._resolver.resolve_async(headers, request_options)
                self._resolver.apply(headers, token)

                prepared = self._prepare(
                    self._client_async,
                    request,
                    headers,
                    body,
                    content_type,
                    USE_CLIENT_DEFAULT,
                )

                self._logger.debug(f"Request: {prepared.method} {prepared.url}")
                response = await self._client_async.send(prepared, stream=True)
                try:
                    await response.aread()
                finally:
                    await response.aclose()
        except (TimeoutException, TimeoutError) as e:
            raise _timed_out(request, timeout) from e

        self._logger.debug(f"Response: {response.status_code} {prepared.url}")
        return classify_response(response, response_type)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    async def aclose(self) -> None:
        if self._owns_client_async:
            await self._client_async.aclose()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    @staticmethod
    def _transport_timeout(
        request: Request, deadline: Optional[float], timeout: Optional[float]
    ) -> Any:
        if deadline is None:
            return USE_CLIENT_DEFAULT
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise _timed_out(request, timeout)
        return Timeout(remaining)

    @staticmethod
    def _read_within(
        response: Response, deadline: Optional[float], timeout: Optional[float]
    ) -> Response:
        """Read the body, failing once the call deadline has passed.

        Transport timeouts bound each socket operation, not the call, so a
        slowly trickling body is checked against the deadline between chunks.
        """
        chunks: list[bytes] = []
        for chunk in response.iter_raw():
            chunks.append(chunk)
            if deadline is not None and time.monotonic() > deadline:
                raise _timed_out(response.request, timeout)

        return Response(
            response.status_code,
            headers=response.headers,
            content=b"".join(chunks),
            request=response.request,
            extensions=response.extensions,
        )

    def _prepare(
        self,
        client: Union[Client, AsyncClient],
        request: Request,
        headers: Headers,
        body: Any,
        content_type: Optional[str],
        timeout: Any,
    ) -> Request:
        content: Optional[bytes] = request.content or None
        if body is not None and content is None:
            content, resolved_type = encode_body(
                body, content_type or headers.get(HEADER_CONTENT_TYPE)
            )
            headers[HEADER_CONTENT_TYPE] = resolved_type

        apply_runtime_headers(headers)

        raw_headers = [
            (key, value)
            for key, value in headers.raw
            if key.lower() not in _BODY_HEADERS
        ]
        return client.build_request(
            request.method,
            request.url,
            headers=raw_headers,
            content=content,
            timeout=timeout,
            extensions=request.extensions,
        )
