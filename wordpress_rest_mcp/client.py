"""HTTP transport to the WordPress REST API and server lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from .config import (
    DISCOVERY_CACHE_TTL,
    PLUGIN_DIRECTORY_URL,
    REQUEST_TIMEOUT,
    WORDPRESS_API_URL,
    WORDPRESS_PASSWORD,
    WORDPRESS_USERNAME,
    logger,
)
from .errors import TransportError
from .utils import flatten_params

if TYPE_CHECKING:
    from .discovery import DiscoveryService
    from .locator import ContentLocator

ALLOWED_METHODS = {"GET", "POST", "PUT", "PATCH", "DELETE"}


def normalize_base_url(api_url: str) -> str:
    """Return the REST root for a site URL, always ending in ``/``.

    ``https://example.com`` -> ``https://example.com/wp-json/``; URLs that
    already point into ``/wp-json/`` are kept.
    """
    base = api_url if api_url.endswith("/") else f"{api_url}/"
    if "/wp-json/" not in base:
        base = f"{base}wp-json/"
    return base


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _transport_error(response: httpx.Response) -> TransportError:
    body = _decode(response)
    message = None
    code = None
    if isinstance(body, dict):
        message = body.get("message")
        code = body.get("code")
    if not message:
        message = f"Request failed with status code {response.status_code}"
    return TransportError(str(message), status=response.status_code, code=code, data=body)


class WordPressClient:
    """Authenticated client for one WordPress site.

    Paths passed to :meth:`request` are relative to the REST root, e.g.
    ``wp/v2/posts`` or ``fluent-crm/v2/contacts``.
    """

    def __init__(
        self,
        base_url: str,
        username: str = "",
        password: str = "",
        timeout: float = REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = normalize_base_url(base_url)
        auth = (username, password) if username and password else None
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            auth=auth,
            timeout=timeout,
            headers={"Accept": "application/json"},
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> WordPressClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        data: Any = None,
        *,
        query: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        raw_response: bool = False,
    ) -> Any:
        """Send a request and return the decoded response body.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH or DELETE).
            path: Endpoint relative to the REST root.
            data: Query parameters for GET, JSON body otherwise. With ``files``
                the mapping is sent as multipart form fields instead.
            query: Extra query parameters, for endpoints that read them on
                POST, PUT or DELETE.
            files: Files for a multipart upload (``httpx`` format).
            headers: Extra request headers.
            raw_response: Return ``{"status", "headers", "data"}`` instead of
                just the decoded body.

        Returns:
            Decoded JSON (or text for non-JSON bodies).

        Raises:
            TransportError: On non-2xx responses or network failure.
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        path = path.lstrip("/")
        kwargs: dict[str, Any] = {"headers": headers}
        params = flatten_params(query)
        if method == "GET":
            params = [*flatten_params(data), *params]
        elif files is not None:
            kwargs["files"] = files
            kwargs["data"] = data
        elif data is not None:
            kwargs["json"] = data
        if params:
            kwargs["params"] = params

        logger.debug("%s %s%s", method, self.base_url, path)

        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            error = _transport_error(response)
            logger.error(
                "%s %s returned %s: %s", method, path, error.status, error.message
            )
            raise error

        body = _decode(response)
        if raw_response:
            return {
                "status": response.status_code,
                "headers": dict(response.headers),
                "data": body,
            }
        return body

    async def download(self, url: str) -> tuple[bytes, str]:
        """Fetch an external file (no site credentials are sent).

        Returns:
            Tuple of (content, content_type).
        """
        try:
            response = await self._http.get(
                url, auth=None, headers={"Accept": "*/*"}
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Could not download {url}: {e}") from e
        if not response.is_success:
            raise TransportError(
                f"Could not download {url}: status {response.status_code}",
                status=response.status_code,
            )
        content_type = response.headers.get("content-type", "application/octet-stream")
        return response.content, content_type

    async def verify(self) -> None:
        """Check that the REST root answers."""
        await self.request("GET", "")


class PluginDirectoryClient:
    """Read-only client for the WordPress.org plugin directory API."""

    def __init__(
        self,
        url: str = PLUGIN_DIRECTORY_URL,
        timeout: float = REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self._http = httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, transport=transport
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _call(self, action: str, request: dict[str, Any]) -> Any:
        params = [("action", action), *flatten_params({"request": request})]
        try:
            response = await self._http.get(self.url, params=params)
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__) from e
        if not response.is_success:
            raise _transport_error(response)
        body = _decode(response)
        if isinstance(body, dict) and body.get("error"):
            raise TransportError(str(body["error"]), status=response.status_code, data=body)
        return body

    async def query_plugins(self, search: str, page: int = 1, per_page: int = 10) -> Any:
        return await self._call(
            "query_plugins",
            {
                "search": search,
                "page": page,
                "per_page": per_page,
                "fields": {
                    "description": True,
                    "sections": False,
                    "tested": True,
                    "requires": True,
                    "rating": True,
                    "ratings": False,
                    "downloaded": True,
                    "downloadlink": True,
                    "last_updated": True,
                    "homepage": True,
                    "tags": True,
                },
            },
        )

    async def plugin_information(self, slug: str) -> Any:
        return await self._call(
            "plugin_information",
            {
                "slug": slug,
                "fields": {
                    "description": True,
                    "sections": True,
                    "tested": True,
                    "requires": True,
                    "rating": True,
                    "ratings": True,
                    "downloaded": True,
                    "downloadlink": True,
                    "last_updated": True,
                    "homepage": True,
                    "tags": True,
                    "compatibility": True,
                    "author": True,
                    "contributors": True,
                    "banners": True,
                    "icons": True,
                },
            },
        )


@dataclass
class ToolContext:
    """Everything a tool handler may use, built once per server run."""

    client: WordPressClient
    discovery: DiscoveryService
    locator: ContentLocator
    directory: PluginDirectoryClient | None = None


def build_context(
    client: WordPressClient,
    directory: PluginDirectoryClient | None = None,
    ttl: float = DISCOVERY_CACHE_TTL,
) -> ToolContext:
    """Wire the discovery service and content locator around a client."""
    from .discovery import DiscoveryService
    from .locator import ContentLocator

    discovery = DiscoveryService(client, ttl=ttl)
    return ToolContext(
        client=client,
        discovery=discovery,
        locator=ContentLocator(client, discovery),
        directory=directory,
    )


@asynccontextmanager
async def app_lifespan(server):
    """Create and teardown the WordPress HTTP clients.

    Args:
        server: The MCP server instance (required by lifespan protocol).
    """
    if not WORDPRESS_API_URL:
        logger.error("WORDPRESS_API_URL is not set")
        raise RuntimeError("WORDPRESS_API_URL is not set. Point it at your WordPress site.")

    client = WordPressClient(WORDPRESS_API_URL, WORDPRESS_USERNAME, WORDPRESS_PASSWORD)
    directory = PluginDirectoryClient()

    try:
        try:
            await client.verify()
        except TransportError as e:
            logger.error("Failed to connect to WordPress API: %s", e)
            raise RuntimeError(f"Failed to connect to WordPress API: {e}") from e
        logger.info("Connected to WordPress API at %s", client.base_url)
        yield build_context(client, directory)
    finally:
        await client.aclose()
        await directory.aclose()
        logger.info("WordPress clients closed")
