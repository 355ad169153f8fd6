import math
import os
from typing import Awaitable, Callable, Optional, Union

from dotenv import load_dotenv
from httpx import AsyncClient, Client
from pydantic import BaseModel, ConfigDict, Field

from ._utils._runtime_headers import default_user_agent
from ._utils.constants import ENV_ACCESS_TOKEN, ENV_BASE_URL

INFINITE_TIMEOUT = math.inf

AccessTokenProvider = Callable[
    [], Union[Optional[str], Awaitable[Optional[str]]]
]


class SumUpEnvironment:
    """Known SumUp API base addresses."""

    PRODUCTION = "https://api.sumup.com"
    SANDBOX = "https://sandbox.sumup.com"


class SumUpClientOptions(BaseModel):
    """Configures how the SDK connects to the SumUp API.

    Attributes:
        base_url: Base address for API requests.
        timeout: Default transport timeout in seconds.
        access_token: Static bearer token.
        access_token_provider: Callable returning a token (or an awaitable of
            one), consulted when ``access_token`` is blank. It may be called
            concurrently by in-flight requests.
        user_agent: ``User-Agent`` header sent with every request.
        access_token_environment_variable: Environment variable read as the
            last token fallback.
        http_client: Optional caller-owned ``httpx.Client``.
        http_client_async: Optional caller-owned ``httpx.AsyncClient``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    base_url: str = SumUpEnvironment.PRODUCTION
    timeout: float = Field(default=100.0, gt=0)
    access_token: Optional[str] = None
    access_token_provider: Optional[AccessTokenProvider] = None
    user_agent: str = Field(default_factory=default_user_agent)
    access_token_environment_variable: str = ENV_ACCESS_TOKEN
    http_client: Optional[Client] = None
    http_client_async: Optional[AsyncClient] = None

    @classmethod
    def from_environment(cls, **overrides) -> "SumUpClientOptions":
        """Create options from defaults, a ``.env`` file and the environment.

        The access token is not captured here; it is read from the environment
        each time a request is authenticated.
        """
        load_dotenv(override=False)

        values = {}
        base_url = os.environ.get(ENV_BASE_URL)
        if base_url:
            values["base_url"] = base_url
        values.update(overrides)
        return cls(**values)


class RequestOptions(BaseModel):
    """Per-call overrides.

    Attributes:
        access_token: Token used for this call only. A blank string sends the
            request without an ``Authorization`` header.
        timeout: Timeout in seconds for this call. ``INFINITE_TIMEOUT`` disables
            the per-call timeout. Zero or negative values are rejected when the
            request is dispatched.
    """

    access_token: Optional[str] = None
    timeout: Optional[float] = None
