"""Tests for the HTTP transport using httpx.MockTransport."""

import json

import httpx
import pytest

from wordpress_rest_mcp.client import (
    PluginDirectoryClient,
    WordPressClient,
    normalize_base_url,
)
from wordpress_rest_mcp.errors import TransportError


def recording_transport(responder):
    """MockTransport that stores every request in ``transport.requests``."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return responder(request)

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


def json_response(payload, status=200):
    return lambda request: httpx.Response(status, json=payload)


class TestNormalizeBaseUrl:
    """Tests for normalize_base_url."""

    def test_appends_wp_json(self):
        assert normalize_base_url("https://example.com") == "https://example.com/wp-json/"
        assert normalize_base_url("https://example.com/") == "https://example.com/wp-json/"

    def test_keeps_existing_rest_root(self):
        assert normalize_base_url("https://example.com/wp-json") == "https://example.com/wp-json/"
        assert normalize_base_url("https://example.com/wp-json/") == "https://example.com/wp-json/"


class TestWordPressClient:
    """Tests for WordPressClient.request."""

    @pytest.mark.asyncio
    async def test_get_encodes_query(self):
        transport = recording_transport(json_response([]))
        async with WordPressClient("https://example.com", transport=transport) as client:
            await client.request("GET", "/wp/v2/posts", {"author": [1, 2], "sticky": True})

        (request,) = transport.requests
        assert request.url.path == "/wp-json/wp/v2/posts"
        assert request.url.params.get_list("author[]") == ["1", "2"]
        assert request.url.params["sticky"] == "true"

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self):
        transport = recording_transport(json_response({"id": 9}))
        async with WordPressClient("https://example.com", "admin", "secret", transport=transport) as client:
            result = await client.request("POST", "wp/v2/posts", {"title": "Hi"})

        (request,) = transport.requests
        assert result == {"id": 9}
        assert json.loads(request.content) == {"title": "Hi"}
        assert request.headers["authorization"].startswith("Basic ")

    @pytest.mark.asyncio
    async def test_error_response_message(self):
        transport = recording_transport(
            json_response({"code": "rest_forbidden", "message": "Sorry, you are not allowed."}, 403)
        )
        async with WordPressClient("https://example.com", transport=transport) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.request("DELETE", "wp/v2/posts/1")

        error = exc_info.value
        assert error.status == 403
        assert error.code == "rest_forbidden"
        assert str(error) == "Sorry, you are not allowed."

    @pytest.mark.asyncio
    async def test_error_without_message(self):
        transport = recording_transport(lambda request: httpx.Response(502, text="Bad gateway"))
        async with WordPressClient("https://example.com", transport=transport) as client:
            with pytest.raises(TransportError, match="Request failed with status code 502"):
                await client.request("GET", "wp/v2/posts")

    @pytest.mark.asyncio
    async def test_network_error(self):
        def responder(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with WordPressClient("https://example.com", transport=recording_transport(responder)) as client:
            with pytest.raises(TransportError, match="connection refused") as exc_info:
                await client.request("GET", "wp/v2/posts")
        assert exc_info.value.status is None

    @pytest.mark.asyncio
    async def test_raw_response(self):
        transport = recording_transport(json_response({"id": 3}, 201))
        async with WordPressClient("https://example.com", transport=transport) as client:
            result = await client.request("POST", "wp/v2/media", {}, raw_response=True)

        assert result["status"] == 201
        assert result["data"] == {"id": 3}
        assert result["headers"]["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_rejects_unknown_method(self):
        async with WordPressClient("https://example.com", transport=recording_transport(json_response({}))) as client:
            with pytest.raises(ValueError, match="Unsupported HTTP method"):
                await client.request("OPTIONS", "wp/v2/posts")

    @pytest.mark.asyncio
    async def test_multipart_upload(self):
        transport = recording_transport(json_response({"id": 4}, 201))
        async with WordPressClient("https://example.com", transport=transport) as client:
            await client.request(
                "POST",
                "wp/v2/media",
                {"title": "Logo"},
                files={"file": ("Logo.jpg", b"\xff\xd8", "image/jpeg")},
            )

        (request,) = transport.requests
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'filename="Logo.jpg"' in request.content

    @pytest.mark.asyncio
    async def test_query_on_post_is_encoded(self):
        transport = recording_transport(json_response({"id": 1}))
        async with WordPressClient("https://example.com", transport=transport) as client:
            await client.request(
                "POST",
                "fc-manager/v1/spaces/4/members",
                query={"user_id": 12, "role": "admin & mod"},
            )

        (request,) = transport.requests
        assert request.url.params["user_id"] == "12"
        assert request.url.params["role"] == "admin & mod"
        assert request.content == b""

    @pytest.mark.asyncio
    async def test_redirect_without_location_raises(self):
        transport = recording_transport(lambda request: httpx.Response(301))
        async with WordPressClient("http://example.com", transport=transport) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.request("GET", "wp/v2/posts")
        assert exc_info.value.status == 301

    @pytest.mark.asyncio
    async def test_redirect_loop_raises(self):
        transport = recording_transport(
            lambda request: httpx.Response(
                302, headers={"Location": "http://example.com/wp-json/wp/v2/posts"}
            )
        )
        async with WordPressClient("http://example.com", transport=transport) as client:
            with pytest.raises(TransportError):
                await client.request("GET", "wp/v2/posts")

    @pytest.mark.asyncio
    async def test_redirect_is_followed(self):
        def responder(request):
            if request.url.scheme == "http":
                return httpx.Response(
                    301, headers={"Location": str(request.url.copy_with(scheme="https"))}
                )
            return httpx.Response(200, json=[{"id": 1}])

        transport = recording_transport(responder)
        async with WordPressClient("http://example.com", transport=transport) as client:
            result = await client.request("GET", "wp/v2/posts")

        assert result == [{"id": 1}]
        assert [r.url.scheme for r in transport.requests] == ["http", "https"]

    @pytest.mark.asyncio
    async def test_download_accepts_any_type(self):
        transport = recording_transport(
            lambda request: httpx.Response(
                200, content=b"\x89PNG", headers={"Content-Type": "image/png"}
            )
        )
        async with WordPressClient("https://example.com", "admin", "secret", transport=transport) as client:
            content, content_type = await client.download("https://cdn.example.com/a.png")

        (request,) = transport.requests
        assert (content, content_type) == (b"\x89PNG", "image/png")
        assert request.headers["accept"] == "*/*"
        assert "authorization" not in request.headers


class TestPluginDirectoryClient:
    """Tests for the WordPress.org plugin directory client."""

    @pytest.mark.asyncio
    async def test_query_plugins_params(self):
        transport = recording_transport(json_response({"info": {"page": 1}, "plugins": []}))
        directory = PluginDirectoryClient(transport=transport)
        try:
            await directory.query_plugins("seo", page=2, per_page=5)
        finally:
            await directory.aclose()

        params = transport.requests[0].url.params
        assert params["action"] == "query_plugins"
        assert params["request[search]"] == "seo"
        assert params["request[page]"] == "2"
        assert params["request[per_page]"] == "5"
        assert params["request[fields][sections]"] == "false"

    @pytest.mark.asyncio
    async def test_redirect_raises(self):
        directory = PluginDirectoryClient(
            transport=recording_transport(lambda request: httpx.Response(302))
        )
        try:
            with pytest.raises(TransportError):
                await directory.plugin_information("akismet")
        finally:
            await directory.aclose()

    @pytest.mark.asyncio
    async def test_error_body_raises(self):
        transport = recording_transport(json_response({"error": "Plugin not found."}))
        directory = PluginDirectoryClient(transport=transport)
        try:
            with pytest.raises(TransportError, match="Plugin not found."):
                await directory.plugin_information("nope")
        finally:
            await directory.aclose()
