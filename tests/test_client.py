"""Test the shared request and response handling of the client."""

import asyncio
import io
import json
import logging

import httpx
import pytest

from zentral.sdk import TimeoutConfig, __version__
from zentral.sdk.client import DEFAULT_USER_AGENT, ZentralClient
from zentral.sdk.config import ZentralConfig
from zentral.sdk.exceptions import (
    ArgumentError,
    ConnectionError,
    DecodeError,
    HTTPError,
    URLError,
    ZentralError,
)
from zentral.sdk.models import Tag, TagRequest

from .conftest import BASE_URL, TOKEN


class TestClientInit:
    """Test client construction."""

    def test_defaults(self):
        """Test client defaults."""
        client = ZentralClient(BASE_URL, TOKEN)
        assert str(client.base_url) == BASE_URL
        assert client.token == TOKEN
        assert client.user_agent == f"zentral-sdk-python/{__version__}"
        assert client.headers == {}

    def test_base_url_gets_trailing_slash(self):
        """Test that a trailing slash is added to the base URL."""
        client = ZentralClient("https://zentral.example.com/api", TOKEN)
        assert str(client.base_url) == "https://zentral.example.com/api/"

    @pytest.mark.parametrize("base_url", ["zentral.example.com/api/", "/api/", ""])
    def test_relative_base_url(self, base_url):
        """Test that a relative base URL is rejected."""
        with pytest.raises(URLError):
            ZentralClient(base_url, TOKEN)

    @pytest.mark.parametrize("token", ["  yolo\n", "'yolo'", '"yolo"', " 'yolo' "])
    def test_token_is_cleaned(self, token):
        """Test that whitespace and quotes are removed from the token."""
        client = ZentralClient(BASE_URL, token)
        assert client.token == "yolo"

    @pytest.mark.parametrize("token", ["", "   ", "''", None])
    def test_blank_token(self, token):
        """Test that a blank token is rejected."""
        with pytest.raises(ArgumentError) as excinfo:
            ZentralClient(BASE_URL, token)
        assert excinfo.value.argument == "token"

    def test_user_agent_prefix(self):
        """Test user agent prefixing."""
        client = ZentralClient(BASE_URL, TOKEN, user_agent="terraform-provider-zentral/1.2")
        assert client.user_agent == f"terraform-provider-zentral/1.2 {DEFAULT_USER_AGENT}"

    def test_from_config(self):
        """Test client creation from a config."""
        config = ZentralConfig(
            base_url=BASE_URL,
            token=TOKEN,
            user_agent="yolo",
            headers={"X-Yolo": "fomo"},
            timeout=12.5,
        )
        client = ZentralClient.from_config(config)
        assert client.user_agent.startswith("yolo ")
        assert client.headers == {"X-Yolo": "fomo"}
        assert client._http.timeout_config == TimeoutConfig(12.5, 12.5, 12.5, 12.5)

    def test_from_environment(self, monkeypatch):
        """Test client creation from environment variables."""
        monkeypatch.setenv("ZTL_API_BASE_URL", BASE_URL)
        monkeypatch.setenv("ZTL_API_TOKEN", TOKEN)
        monkeypatch.delenv("ZTL_TIMEOUT", raising=False)
        monkeypatch.delenv("ZTL_USER_AGENT", raising=False)
        monkeypatch.delenv("ZTL_EXTRA_HEADERS", raising=False)
        client = ZentralClient.from_environment()
        assert str(client.base_url) == BASE_URL
        assert client.token == TOKEN

    def test_services_share_the_client(self):
        """Test that every service uses the same client."""
        client = ZentralClient(BASE_URL, TOKEN)
        assert client.tags._client is client
        assert client.mdm_blueprints._client is client
        assert client.stores._client is client


class TestNewRequest:
    """Test request building."""

    def test_control_headers(self, client):
        """Test the Authorization, Accept and User-Agent headers."""
        request = client.new_request("GET", "inventory/tags/")
        assert str(request.url) == BASE_URL + "inventory/tags/"
        assert request.headers["Authorization"] == f"Token {TOKEN}"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == DEFAULT_USER_AGENT

    def test_static_headers_cannot_override_control_headers(self):
        """Test that static headers never replace the control headers."""
        client = ZentralClient(
            BASE_URL,
            TOKEN,
            headers={"Authorization": "Bearer nope", "Accept": "text/html", "X-Yolo": "fomo"},
        )
        request = client.new_request("GET", "inventory/tags/")
        assert request.headers.get_list("Authorization") == [f"Token {TOKEN}"]
        assert request.headers.get_list("Accept") == ["application/json"]
        assert request.headers["X-Yolo"] == "fomo"

    def test_query_string_is_kept(self, client):
        """Test a path with a query string."""
        request = client.new_request("GET", "inventory/tags/?name=yolo")
        assert request.url.params["name"] == "yolo"

    def test_absolute_path(self, client):
        """Test that a path with a leading slash is rejected."""
        with pytest.raises(URLError):
            client.new_request("GET", "/inventory/tags/")

    @pytest.mark.parametrize("method", ["GET", "HEAD", "OPTIONS"])
    def test_body_is_ignored_for_safe_methods(self, client, method):
        """Test that GET, HEAD and OPTIONS requests have no body."""
        request = client.new_request(method, "inventory/tags/", {"name": "yolo"})
        assert request.content == b""
        assert "Content-Type" not in request.headers

    def test_dict_body(self, client):
        """Test a dict body."""
        request = client.new_request("POST", "inventory/tags/", {"name": "yolo", "taxonomy": None})
        assert request.content == b'{"name":"yolo","taxonomy":null}'
        assert request.headers["Content-Type"] == "application/json"

    def test_model_body(self, client):
        """Test a model body."""
        request = client.new_request("PUT", "inventory/tags/1/", TagRequest(name="yolo", taxonomy=1))
        assert json.loads(request.content) == {
            "name": "yolo",
            "taxonomy": 1,
            "meta_business_unit": None,
        }
        assert request.headers["Content-Type"] == "application/json"

    def test_no_body(self, client):
        """Test a request without body."""
        request = client.new_request("DELETE", "inventory/tags/1/")
        assert request.content == b""
        assert "Content-Type" not in request.headers

    @pytest.mark.parametrize("method", ["GET", "DELETE"])
    def test_static_content_type_without_body(self, method):
        """Test that a static Content-Type header is not sent without a body."""
        client = ZentralClient(BASE_URL, TOKEN, headers={"content-type": "text/plain", "X-Yolo": "fomo"})
        request = client.new_request(method, "inventory/tags/1/")
        assert "Content-Type" not in request.headers
        assert request.headers["X-Yolo"] == "fomo"

    def test_static_content_type_with_body(self):
        """Test that the JSON Content-Type replaces a static one."""
        client = ZentralClient(BASE_URL, TOKEN, headers={"content-type": "text/plain"})
        request = client.new_request("POST", "inventory/tags/", {"name": "yolo"})
        assert request.headers.get_list("Content-Type") == ["application/json"]

    def test_body_encoding_error(self, client):
        """Test a body that cannot be encoded."""
        with pytest.raises(ArgumentError) as excinfo:
            client.new_request("POST", "inventory/tags/", {"name": object()})
        assert excinfo.value.argument == "body"


class TestDo:
    """Test request execution and response handling."""

    @pytest.mark.asyncio
    async def test_decode_model(self, client, server):
        """Test decoding a model."""
        server.add("GET", "inventory/tags/1/", {"id": 1, "name": "yolo", "slug": "yolo"})
        request = client.new_request("GET", "inventory/tags/1/")
        response = await client.do(request, Tag)
        assert response.status_code == 200
        assert response.data == Tag(id=1, name="yolo", slug="yolo")
        assert response.http_response.is_closed

    @pytest.mark.asyncio
    async def test_decode_list(self, client, server):
        """Test decoding a list of models."""
        server.add("GET", "inventory/tags/", [{"id": 1}, {"id": 2}])
        response = await client.do(client.new_request("GET", "inventory/tags/"), list[Tag])
        assert [tag.id for tag in response.data] == [1, 2]

    @pytest.mark.asyncio
    async def test_no_decode_target(self, client, server):
        """Test a response without decode target."""
        server.add("DELETE", "inventory/tags/1/", status_code=204)
        response = await client.do(client.new_request("DELETE", "inventory/tags/1/"))
        assert response.status_code == 204
        assert response.data is None

    @pytest.mark.asyncio
    async def test_unread_large_body_is_closed(self, client, server):
        """Test that an unread large body is closed."""
        server.add("GET", "inventory/tags/", b"x" * 10_000)
        response = await client.do(client.new_request("GET", "inventory/tags/"))
        assert response.http_response.is_closed

    @pytest.mark.asyncio
    async def test_raw_sink(self, client, server):
        """Test copying the raw body into a sink."""
        server.add("GET", "mdm/profiles/1/download/", b"\x00\x01binary\xff")
        sink = io.BytesIO()
        response = await client.do(client.new_request("GET", "mdm/profiles/1/download/"), sink)
        assert response.data is sink
        assert sink.getvalue() == b"\x00\x01binary\xff"

    @pytest.mark.asyncio
    async def test_http_error(self, client, server):
        """Test a JSON error response."""
        server.add("GET", "inventory/tags/1/", {"detail": "Not found."}, status_code=404)
        with pytest.raises(HTTPError) as excinfo:
            await client.do(client.new_request("GET", "inventory/tags/1/"), Tag)
        err = excinfo.value
        assert err.status_code == 404
        assert err.message == '{"detail": "Not found."}'
        assert err.body == err.message
        assert "GET https://zentral.example.com/api/inventory/tags/1/: 404" in str(err)

    @pytest.mark.asyncio
    async def test_http_error_plain_text_body(self, client, server):
        """Test that the error message has the method, URL, status and body."""
        server.add("GET", "inventory/tags/1/", "not found", status_code=404, headers={"Content-Type": "text/plain"})
        with pytest.raises(HTTPError) as excinfo:
            await client.do(client.new_request("GET", "inventory/tags/1/"), Tag)
        assert excinfo.value.message == "not found"
        assert str(excinfo.value) == "GET https://zentral.example.com/api/inventory/tags/1/: 404 not found"

    @pytest.mark.asyncio
    async def test_http_error_without_body(self, client, server):
        """Test an error response without body."""
        server.add("POST", "inventory/tags/", status_code=500)
        with pytest.raises(HTTPError) as excinfo:
            await client.do(client.new_request("POST", "inventory/tags/", {"name": "yolo"}), Tag)
        assert excinfo.value.status_code == 500
        assert excinfo.value.message == ""

    @pytest.mark.asyncio
    async def test_error_leaves_sink_untouched(self, client, server):
        """Test that an error body is not written to the sink."""
        server.add("GET", "mdm/profiles/1/download/", "nope", status_code=403)
        sink = io.BytesIO()
        with pytest.raises(HTTPError):
            await client.do(client.new_request("GET", "mdm/profiles/1/download/"), sink)
        assert sink.getvalue() == b""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"", b"not json", b'{"id": "yolo"}'])
    async def test_decode_error(self, client, server, body):
        """Test invalid response bodies."""
        server.add("GET", "inventory/tags/1/", body)
        with pytest.raises(DecodeError) as excinfo:
            await client.do(client.new_request("GET", "inventory/tags/1/"), Tag)
        assert excinfo.value.response.status_code == 200

    @pytest.mark.asyncio
    async def test_transport_error(self):
        """Test a connection failure."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = ZentralClient(BASE_URL, TOKEN, transport=httpx.MockTransport(handler))
        async with client:
            with pytest.raises(ConnectionError) as excinfo:
                await client.do(client.new_request("GET", "inventory/tags/"))
        assert isinstance(excinfo.value.original_error, httpx.ConnectError)
        assert excinfo.value.url == BASE_URL + "inventory/tags/"

    @pytest.mark.asyncio
    async def test_deadline(self):
        """Test an expired deadline."""
        async def handler(request):
            await asyncio.sleep(5)
            return httpx.Response(200, json=[])

        client = ZentralClient(BASE_URL, TOKEN, transport=httpx.MockTransport(handler))
        async with client:
            with pytest.raises(ConnectionError) as excinfo:
                await client.do(client.new_request("GET", "inventory/tags/"), timeout=0.01)
        assert isinstance(excinfo.value.original_error, TimeoutError)

    @pytest.mark.asyncio
    async def test_cancellation(self):
        """Test cancelling a request."""
        started = asyncio.Event()

        async def handler(request):
            started.set()
            await asyncio.sleep(5)
            return httpx.Response(200, json=[])

        client = ZentralClient(BASE_URL, TOKEN, transport=httpx.MockTransport(handler))
        async with client:
            task = asyncio.create_task(client.do(client.new_request("GET", "inventory/tags/")))
            await started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

    @pytest.mark.asyncio
    async def test_errors_share_a_base_class(self, client, server):
        """Test that every error is a ZentralError."""
        server.add("GET", "inventory/tags/1/", status_code=400)
        with pytest.raises(ZentralError):
            await client.do(client.new_request("GET", "inventory/tags/1/"))

    @pytest.mark.asyncio
    async def test_debug_logging_hides_token(self, client, server, caplog):
        """Test that the token is never logged."""
        server.add("GET", "inventory/tags/", [])
        with caplog.at_level(logging.DEBUG, logger="zentral.sdk"):
            await client.do(client.new_request("GET", "inventory/tags/"), list[Tag])
        assert "GET https://zentral.example.com/api/inventory/tags/ -> 200" in caplog.text
        assert TOKEN not in caplog.text


class TestLifecycle:
    """Test closing the client."""

    @pytest.mark.asyncio
    async def test_external_http_client_is_not_closed(self, server):
        """Test that an injected HTTP client stays open."""
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
        async with ZentralClient(BASE_URL, TOKEN, http_client=http_client) as client:
            server.add("GET", "inventory/tags/", [])
            await client.tags.list()
        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_http_client_is_closed(self, server):
        """Test that the client closes its own HTTP client."""
        client = ZentralClient(BASE_URL, TOKEN, transport=httpx.MockTransport(server.handler))
        server.add("GET", "inventory/tags/", [])
        await client.tags.list()
        http_client = client._http.client
        await client.aclose()
        assert http_client.is_closed
