import asyncio
import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from sumup import (
    ApiClient,
    ApiException,
    ConfigurationError,
    DecodeError,
    JsonDocument,
    RequestOptions,
    RequestTimeoutError,
    SumUpClientOptions,
)
from sumup._utils import runtime_headers
from sumup.models import Checkout, CreateCheckoutRequest


class TestCreateRequest:
    def test_sets_default_headers(self, api_client: ApiClient, base_url: str):
        request = api_client.create_request(
            "GET", "/v0.1/checkouts/{id}", lambda b: b.add_path("id", "chk 1")
        )

        assert str(request.url) == f"{base_url}/v0.1/checkouts/chk%201"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == api_client.options.user_agent
        for name, value in runtime_headers().items():
            assert request.headers[name] == value

    def test_does_not_authenticate(self, api_client: ApiClient):
        request = api_client.create_request("GET", "/v0.1/me")

        assert "Authorization" not in request.headers


class TestSend:
    def test_sends_authenticated_request(
        self,
        httpx_mock: HTTPXMock,
        api_client: ApiClient,
        base_url: str,
        secret: str,
    ):
        httpx_mock.add_response(
            url=f"{base_url}/v0.1/checkouts/chk_1",
            status_code=200,
            json={"id": "chk_1", "status": "PAID"},
        )

        response = api_client.send(
            api_client.create_request(
                "GET", "/v0.1/checkouts/{id}", lambda b: b.add_path("id", "chk_1")
            ),
            Checkout,
        )

        assert response.data.id == "chk_1"
        assert response.status_code == 200
        assert response.request_uri == f"{base_url}/v0.1/checkouts/chk_1"

        sent = httpx_mock.get_request()
        assert sent is not None
        assert sent.method == "GET"
        assert sent.headers["Authorization"] == f"Bearer {secret}"
        assert sent.headers["Accept"] == "application/json"
        assert sent.headers["User-Agent"].startswith("sumup-python/v")
        assert sent.headers["X-Sumup-Lang"] == "python"

    def test_per_call_token(self, httpx_mock: HTTPXMock, api_client: ApiClient):
        httpx_mock.add_response(status_code=204)

        api_client.send(
            api_client.create_request("GET", "/v0.1/me"),
            request_options=RequestOptions(access_token="per-call"),
        )

        assert httpx_mock.get_request().headers["Authorization"] == "Bearer per-call"

    def test_blank_per_call_token_sends_no_authorization(
        self, httpx_mock: HTTPXMock, api_client: ApiClient
    ):
        httpx_mock.add_response(status_code=204)

        api_client.send(
            api_client.create_request("GET", "/v0.1/me"),
            request_options=RequestOptions(access_token=""),
        )

        assert "Authorization" not in httpx_mock.get_request().headers

    def test_environment_token(
        self, httpx_mock: HTTPXMock, base_url: str, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("SUMUP_ACCESS_TOKEN", "env-token")
        httpx_mock.add_response(status_code=204)

        with ApiClient(SumUpClientOptions(base_url=base_url)) as client:
            client.send(client.create_request("GET", "/v0.1/me"))

        assert httpx_mock.get_request().headers["Authorization"] == "Bearer env-token"

    def test_unauthenticated_when_nothing_configured(
        self, httpx_mock: HTTPXMock, base_url: str
    ):
        httpx_mock.add_response(status_code=204)

        with ApiClient(SumUpClientOptions(base_url=base_url)) as client:
            response = client.send(client.create_request("GET", "/v0.1/me"))

        assert response.data is None
        assert "Authorization" not in httpx_mock.get_request().headers

    def test_serializes_model_body(self, httpx_mock: HTTPXMock, api_client: ApiClient):
        httpx_mock.add_response(status_code=201, json={"id": "chk_1"})
        body = CreateCheckoutRequest(
            checkout_reference="ref-1",
            amount=10.5,
            currency="EUR",
            merchant_code="MC1",
        )

        api_client.send(
            api_client.create_request("POST", "/v0.1/checkouts"), Checkout, body=body
        )

        sent = httpx_mock.get_request()
        assert sent.headers["Content-Type"] == "application/json"
        assert json.loads(sent.content) == {
            "checkout_reference": "ref-1",
            "amount": 10.5,
            "currency": "EUR",
            "merchant_code": "MC1",
        }
        assert sent.headers["Content-Length"] == str(len(sent.content))

    def test_serializes_plain_body(self, httpx_mock: HTTPXMock, api_client: ApiClient):
        httpx_mock.add_response(status_code=204)

        api_client.send(
            api_client.create_request("POST", "/v0.1/items"),
            body={"name": "item", "tags": ["a"]},
        )

        assert json.loads(httpx_mock.get_request().content) == {
            "name": "item",
            "tags": ["a"],
        }

    def test_sends_json_document_as_is(
        self, httpx_mock: HTTPXMock, api_client: ApiClient
    ):
        httpx_mock.add_response(status_code=204)

        api_client.send(
            api_client.create_request("POST", "/v0.1/items"),
            body=JsonDocument({"nested": {"value": None}}),
        )

        assert json.loads(httpx_mock.get_request().content) == {
            "nested": {"value": None}
        }

    def test_raw_bytes_body(self, httpx_mock: HTTPXMock, api_client: ApiClient):
        httpx_mock.add_response(status_code=204)

        api_client.send(
            api_client.create_request("PUT", "/v0.1/files"), body=b"\x00\x01"
        )

        sent = httpx_mock.get_request()
        assert sent.content == b"\x00\x01"
        assert sent.headers["Content-Type"] == "application/octet-stream"

    def test_explicit_content_type(self, httpx_mock: HTTPXMock, api_client: ApiClient):
        httpx_mock.add_response(status_code=204)

        api_client.send(
            api_client.create_request("PUT", "/v0.1/files"),
            body=b"<xml/>",
            content_type="application/xml",
        )

        assert httpx_mock.get_request().headers["Content-Type"] == "application/xml"

    def test_structured_api_error(self, httpx_mock: HTTPXMock, api_client: ApiClient):
        httpx_mock.add_response(
            status_code=404,
            json={"code": "NOT_FOUND", "message": "Checkout not found"},
        )

        with pytest.raises(ApiException) as exc_info:
            api_client.send(api_client.create_request("GET", "/v0.1/me"), Checkout)

        exc = exc_info.value
        assert exc.status_code == 404
        assert exc.error.code == "NOT_FOUND"
        assert exc.error.message == "Checkout not found"
        assert "Checkout not found" in str(exc)

    def test_unstructured_api_error(
        self, httpx_mock: HTTPXMock, api_client: ApiClient
    ):
        httpx_mock.add_response(status_code=503, text="Service Unavailable")

        with pytest.raises(ApiException) as exc_info:
            api_client.send(api_client.create_request("GET", "/v0.1/me"), Checkout)

        assert exc_info.value.error is None
        assert exc_info.value.response_body == "Service Unavailable"

    def test_decode_error(self, httpx_mock: HTTPXMock, api_client: ApiClient):
        httpx_mock.add_response(status_code=200, text="<html></html>")

        with pytest.raises(DecodeError) as exc_info:
            api_client.send(api_client.create_request("GET", "/v0.1/me"), Checkout)

        assert exc_info.value.response_body == "<html></html>"

    def test_per_call_timeout_is_passed_to_transport(
        self, httpx_mock: HTTPXMock, api_client: ApiClient
    ):
        httpx_mock.add_response(status_code=204)

        api_client.send(
            api_client.create_request("GET", "/v0.1/me"),
            request_options=RequestOptions(timeout=2.5),
        )

        transport_timeout = httpx_mock.get_request().extensions["timeout"]
        assert set(transport_timeout) == {"connect", "read", "write", "pool"}
        assert all(0 < value <= 2.5 for value in transport_timeout.values())

    def test_timeout_raises_request_timeout_error(
        self, httpx_mock: HTTPXMock, api_client: ApiClient, base_url: str
    ):
        httpx_mock.add_exception(httpx.ReadTimeout("Unable to read within timeout"))

        with pytest.raises(RequestTimeoutError) as exc_info:
            api_client.send(
                api_client.create_request("GET", "/v0.1/me"),
                request_options=RequestOptions(timeout=0.5),
            )

        assert isinstance(exc_info.value, TimeoutError)
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
        assert exc_info.value.request_uri == f"{base_url}/v0.1/me"

    def test_non_positive_timeout_is_rejected_before_sending(
        self, httpx_mock: HTTPXMock, api_client: ApiClient
    ):
        with pytest.raises(ConfigurationError):
            api_client.send(
                api_client.create_request("GET", "/v0.1/me"),
                request_options=RequestOptions(timeout=0),
            )

        assert httpx_mock.get_requests() == []

    def test_transport_errors_propagate(
        self, httpx_mock: HTTPXMock, api_client: ApiClient
    ):
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        with pytest.raises(httpx.ConnectError):
            api_client.send(api_client.create_request("GET", "/v0.1/me"))

    def test_caller_owned_client_is_not_closed(
        self, httpx_mock: HTTPXMock, base_url: str, secret: str
    ):
        httpx_mock.add_response(status_code=204)
        http_client = httpx.Client()

        with ApiClient(
            SumUpClientOptions(
                base_url=base_url, access_token=secret, http_client=http_client
            )
        ) as client:
            client.send(client.create_request("GET", "/v0.1/me"))

        assert not http_client.is_closed
        http_client.close()


class TestSendAsync:
    @pytest.mark.asyncio
    async def test_sends_authenticated_request(
        self, httpx_mock: HTTPXMock, base_url: str
    ):
        async def provider():
            return "provided-token"

        httpx_mock.add_response(status_code=200, json={"id": "chk_1"})

        async with ApiClient(
            SumUpClientOptions(base_url=base_url, access_token_provider=provider)
        ) as client:
            response = await client.send_async(
                client.create_request("GET", "/v0.1/checkouts/chk_1"), Checkout
            )

        assert response.data.id == "chk_1"
        sent = httpx_mock.get_request()
        assert sent.headers["Authorization"] == "Bearer provided-token"
        assert sent.headers["X-Sumup-Lang"] == "python"

    @pytest.mark.asyncio
    async def test_serializes_body(self, httpx_mock: HTTPXMock, options):
        httpx_mock.add_response(status_code=204)

        async with ApiClient(options) as client:
            await client.send_async(
                client.create_request("POST", "/v0.1/items"), body={"name": "item"}
            )

        sent = httpx_mock.get_request()
        assert json.loads(sent.content) == {"name": "item"}
        assert sent.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_timeout_cancels_request(self, httpx_mock: HTTPXMock, options):
        async def slow_response(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(5)
            return httpx.Response(status_code=204)

        httpx_mock.add_callback(slow_response)

        async with ApiClient(options) as client:
            with pytest.raises(RequestTimeoutError):
                await client.send_async(
                    client.create_request("GET", "/v0.1/me"),
                    request_options=RequestOptions(timeout=0.05),
                )

    @pytest.mark.asyncio
    async def test_api_error(self, httpx_mock: HTTPXMock, options):
        httpx_mock.add_response(status_code=401, json={"message": "Unauthorized"})

        async with ApiClient(options) as client:
            with pytest.raises(ApiException) as exc_info:
                await client.send_async(client.create_request("GET", "/v0.1/me"))

        assert exc_info.value.status_code == 401
