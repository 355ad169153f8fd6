from typing import List, Optional

from httpx import Request

from .._config import RequestOptions
from ..models.api_response import ApiResponse
from ..models.checkouts import Checkout, CreateCheckoutRequest
from ._base_service import BaseService


class CheckoutsService(BaseService):
    """Service for online checkouts."""

    def list(
        self,
        *,
        checkout_reference: Optional[str] = None,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[List[Checkout]]:
        """List checkouts, optionally filtered by checkout reference.

        Examples:
            ```python
            from sumup import SumUp

            client = SumUp()

            for checkout in client.checkouts.list().data or []:
                print(checkout.id, checkout.amount, checkout.currency)
            ```
        """
        return self._api.send(
            self._list_spec(checkout_reference),
            List[Checkout],
            request_options=request_options,
        )

    async def list_async(
        self,
        *,
        checkout_reference: Optional[str] = None,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[List[Checkout]]:
        return await self._api.send_async(
            self._list_spec(checkout_reference),
            List[Checkout],
            request_options=request_options,
        )

    def get(
        self, id: str, *, request_options: Optional[RequestOptions] = None
    ) -> ApiResponse[Checkout]:
        return self._api.send(
            self._get_spec(id), Checkout, request_options=request_options
        )

    async def get_async(
        self, id: str, *, request_options: Optional[RequestOptions] = None
    ) -> ApiResponse[Checkout]:
        return await self._api.send_async(
            self._get_spec(id), Checkout, request_options=request_options
        )

    def create(
        self,
        body: CreateCheckoutRequest,
        *,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[Checkout]:
        """Create a checkout to be processed later."""
        return self._api.send(
            self._create_spec(),
            Checkout,
            body=body,
            request_options=request_options,
        )

    async def create_async(
        self,
        body: CreateCheckoutRequest,
        *,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[Checkout]:
        return await self._api.send_async(
            self._create_spec(),
            Checkout,
            body=body,
            request_options=request_options,
        )

    def _list_spec(self, checkout_reference: Optional[str]) -> Request:
        return self._api.create_request(
            "GET",
            "/v0.1/checkouts",
            lambda b: b.add_query("checkout_reference", checkout_reference),
        )

    def _get_spec(self, id: str) -> Request:
        return self._api.create_request(
            "GET", "/v0.1/checkouts/{id}", lambda b: b.add_path("id", id)
        )

    def _create_spec(self) -> Request:
        return self._api.create_request("POST", "/v0.1/checkouts")
