import inspect
import os
from typing import TYPE_CHECKING, Any, Optional

from httpx import Headers

from ..models.exceptions import ConfigurationError
from .constants import HEADER_AUTHORIZATION

if TYPE_CHECKING:
    from .._config import RequestOptions, SumUpClientOptions

_BEARER_PREFIX = "bearer "

# Marks "keep resolving" in the shared precedence helpers.
_CONTINUE: Any = object()


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _credential(header_value: str) -> str:
    if header_value.lower().startswith(_BEARER_PREFIX):
        return header_value[len(_BEARER_PREFIX) :].strip()
    return header_value


class AccessTokenResolver:
    """Determines the bearer token for a request.

    The first match wins:

    1. ``request_options.access_token``. A blank value means "send no
       ``Authorization`` header" and stops resolution.
    2. An ``Authorization`` header already on the request.
    3. ``options.access_token`` when not blank.
    4. ``options.access_token_provider`` when it returns a non-blank token.
    5. The environment variable named by
       ``options.access_token_environment_variable``, read on every call.

    When nothing matches the request is sent unauthenticated.
    """

    def __init__(self, options: "SumUpClientOptions") -> None:
        self._options = options

    async def resolve_async(
        self,
        headers: Headers,
        request_options: Optional["RequestOptions"] = None,
    ) -> Optional[str]:
        token = self._resolve_configured(headers, request_options)
        if token is not _CONTINUE:
            return token

        provider = self._options.access_token_provider
        if provider is not None:
            provided = provider()
            if inspect.isawaitable(provided):
                provided = await provided
            if not _is_blank(provided):
                return provided

        return self._resolve_environment()

    def resolve(
        self,
        headers: Headers,
        request_options: Optional["RequestOptions"] = None,
    ) -> Optional[str]:
        token = self._resolve_configured(headers, request_options)
        if token is not _CONTINUE:
            return token

        provider = self._options.access_token_provider
        if provider is not None:
            provided = provider()
            if inspect.isawaitable(provided):
                if inspect.iscoroutine(provided):
                    provided.close()
                raise ConfigurationError(
                    "access_token_provider returned an awaitable; "
                    "use the async client methods or a synchronous provider."
                )
            if not _is_blank(provided):
                return provided

        return self._resolve_environment()

    @staticmethod
    def apply(headers: Headers, token: Optional[str]) -> None:
        """Write ``token`` as a bearer ``Authorization`` header.

        ``None`` removes the header. A header that already carries the token is
        left untouched, whatever its scheme.
        """
        if token is None:
            headers.pop(HEADER_AUTHORIZATION, None)
            return

        existing = headers.get(HEADER_AUTHORIZATION)
        if existing is not None and _credential(existing) == token:
            return
        headers[HEADER_AUTHORIZATION] = f"Bearer {token}"

    def _resolve_configured(
        self, headers: Headers, request_options: Optional["RequestOptions"]
    ) -> Any:
        if request_options is not None and request_options.access_token is not None:
            override = request_options.access_token.strip()
            return override or None

        existing = headers.get(HEADER_AUTHORIZATION)
        if not _is_blank(existing):
            return _credential(existing)  # type: ignore[arg-type]

        if not _is_blank(self._options.access_token):
            return self._options.access_token

        return _CONTINUE

    def _resolve_environment(self) -> Optional[str]:
        token = os.environ.get(self._options.access_token_environment_variable)
        if _is_blank(token):
            return None
        return token
