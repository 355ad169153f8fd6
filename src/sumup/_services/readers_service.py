from typing import Optional

from httpx import Request

from .._config import RequestOptions
from ..models.api_response import ApiResponse
from ..models.readers import (
    CreateReaderCheckoutRequest,
    CreateReaderCheckoutResponse,
    Reader,
    ReadersListResponse,
    ReaderStatusResponse,
)
from ._base_service import BaseService


class ReadersService(BaseService):
    """Service for the card readers paired to a merchant account."""

    def list(
        self,
        merchant_code: str,
        *,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[ReadersListResponse]:
        """List the readers paired to a merchant.

        Args:
            merchant_code (str): Merchant code of the account.
            request_options (Optional[RequestOptions]): Per-call token and timeout overrides.

        Returns:
            ApiResponse[ReadersListResponse]: The paired readers.

        Examples:
            ```python
            from sumup import SumUp

            client = SumUp()

            for reader in client.readers.list("MCODE").data.items:
                print(reader.id, reader.status)
            ```
        """
        return self._api.send(
            self._list_spec(merchant_code),
            ReadersListResponse,
            request_options=request_options,
        )

    async def list_async(
        self,
        merchant_code: str,
        *,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[ReadersListResponse]:
        """Asynchronously list the readers paired to a merchant."""
        return await self._api.send_async(
            self._list_spec(merchant_code),
            ReadersListResponse,
            request_options=request_options,
        )

    def get(
        self,
        merchant_code: str,
        id: str,
        *,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[Reader]:
        """Retrieve a single reader."""
        return self._api.send(
            self._get_spec(merchant_code, id), Reader, request_options=request_options
        )

    async def get_async(
        self,
        merchant_code: str,
        id: str,
        *,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[Reader]:
        """Asynchronously retrieve a single reader."""
        return await self._api.send_async(
            self._get_spec(merchant_code, id), Reader, request_options=request_options
        )

    def get_status(
        self,
        merchant_code: str,
        reader_id: str,
        *,
        accept: Optional[str] = None,
        content_type: Optional[str] = None,
        authorization: Optional[str] = None,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[ReaderStatusResponse]:
        """Retrieve the live status of a reader.

        Args:
            merchant_code (str): Merchant code of the account.
            reader_id (str): Identifier of the reader.
            accept (Optional[str]): ``Accept`` header forwarded as a header parameter.
            content_type (Optional[str]): ``Content-Type`` header forwarded as a header parameter.
            authorization (Optional[str]): A full ``Authorization`` header value. When
                given it is sent as-is instead of the configured token.
            request_options (Optional[RequestOptions]): Per-call token and timeout overrides.
        """
        spec = self._get_status_spec(
            merchant_code, reader_id, accept, content_type, authorization
        )
        return self._api.send(
            spec, ReaderStatusResponse, request_options=request_options
        )

    async def get_status_async(
        self,
        merchant_code: str,
        reader_id: str,
        *,
        accept: Optional[str] = None,
        content_type: Optional[str] = None,
        authorization: Optional[str] = None,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[ReaderStatusResponse]:
        """Asynchronously retrieve the live status of a reader."""
        spec = self._get_status_spec(
            merchant_code, reader_id, accept, content_type, authorization
        )
        return await self._api.send_async(
            spec, ReaderStatusResponse, request_options=request_options
        )

    def create_checkout(
        self,
        merchant_code: str,
        reader_id: str,
        body: CreateReaderCheckoutRequest,
        *,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[CreateReaderCheckoutResponse]:
        """Start a checkout on a reader.

        The reader prompts the customer for payment of ``body.total_amount``.
        """
        return self._api.send(
            self._create_checkout_spec(merchant_code, reader_id),
            CreateReaderCheckoutResponse,
            body=body,
            request_options=request_options,
        )

    async def create_checkout_async(
        self,
        merchant_code: str,
        reader_id: str,
        body: CreateReaderCheckoutRequest,
        *,
        request_options: Optional[RequestOptions] = None,
    ) -> ApiResponse[CreateReaderCheckoutResponse]:
        """Asynchronously start a checkout on a reader."""
        return await self._api.send_async(
            self._create_checkout_spec(merchant_code, reader_id),
            CreateReaderCheckoutResponse,
            body=body,
            request_options=request_options,
        )

    def _list_spec(self, merchant_code: str) -> Request:
        return self._api.create_request(
            "GET",
            "/v0.1/merchants/{merchant_code}/readers",
            lambda b: b.add_path("merchant_code", merchant_code),
        )

    def _get_spec(self, merchant_code: str, id: str) -> Request:
        return self._api.create_request(
            "GET",
            "/v0.1/merchants/{merchant_code}/readers/{id}",
            lambda b: b.add_path("merchant_code", merchant_code).add_path("id", id),
        )

    def _get_status_spec(
        self,
        merchant_code: str,
        reader_id: str,
        accept: Optional[str],
        content_type: Optional[str],
        authorization: Optional[str],
    ) -> Request:
        def configure(builder):
            builder.add_path("merchant_code", merchant_code)
            builder.add_path("reader_id", reader_id)
            builder.add_header("Accept", accept)
            builder.add_header("Content-Type", content_type)
            builder.add_header("Authorization", authorization)

        return self._api.create_request(
            "GET",
            "/v0.1/merchants/{merchant_code}/readers/{reader_id}/status",
            configure,
        )

    def _create_checkout_spec(self, merchant_code: str, reader_id: str) -> Request:
        return self._api.create_request(
            "POST",
            "/v0.1/merchants/{merchant_code}/readers/{reader_id}/checkout",
            lambda b: b.add_path("merchant_code", merchant_code).add_path(
                "reader_id", reader_id
            ),
        )
