from logging import getLogger
from typing import Any, Optional

from ._config import SumUpClientOptions
from ._services import ApiClient, CheckoutsService, MembershipsService, ReadersService
from ._utils._logs import setup_logging


class SumUp:
    """Entry point for interacting with the SumUp API.

    Examples:
        ```python
        from sumup import SumUp, SumUpClientOptions

        with SumUp(SumUpClientOptions(access_token="sup_sk_...")) as client:
            response = client.checkouts.list()
        ```
    """

    def __init__(
        self,
        options: Optional[SumUpClientOptions] = None,
        *,
        debug: bool = False,
    ) -> None:
        if debug:
            setup_logging(debug)

        self._options = options or SumUpClientOptions.from_environment()
        self._api_client = ApiClient(self._options)

        log = getLogger("sumup")
        log.debug(f"Base URL: {self._options.base_url}")

        self._readers = ReadersService(self._api_client)
        self._checkouts = CheckoutsService(self._api_client)
        self._memberships = MembershipsService(self._api_client)

    @property
    def options(self) -> SumUpClientOptions:
        return self._options

    @property
    def api_client(self) -> ApiClient:
        return self._api_client

    @property
    def readers(self) -> ReadersService:
        return self._readers

    @property
    def checkouts(self) -> CheckoutsService:
        return self._checkouts

    @property
    def memberships(self) -> MembershipsService:
        return self._memberships

    def close(self) -> None:
        self._api_client.close()

    async def aclose(self) -> None:
        await self._api_client.aclose()

    def __enter__(self) -> "SumUp":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "SumUp":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
