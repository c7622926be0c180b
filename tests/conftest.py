"""Pytest configuration and shared fixtures."""

import pytest

from wordpress_rest_mcp.client import ToolContext, build_context


class FakeClient:
    """Records requests and answers them from a route table.

    ``routes`` maps ``(method, path)`` to a response value, an exception
    instance (raised), or a callable taking the request data.
    Unrouted GETs return ``[]``; other unrouted methods return ``{}``.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.downloads = {}

    async def request(self, method, path, data=None, **kwargs):
        self.calls.append((method, path, data, kwargs))
        response = self.routes.get((method, path))
        if response is None:
            return [] if method == "GET" else {}
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(data)
        return response

    async def download(self, url):
        self.calls.append(("DOWNLOAD", url, None, {}))
        return self.downloads[url]

    def paths(self, method=None):
        return [path for m, path, _, _ in self.calls if method is None or m == method]


class FakeDirectory:
    """Stand-in for the WordPress.org plugin directory client."""

    def __init__(self, search=None, details=None):
        self.search = search or {}
        self.details = details or {}
        self.calls = []

    async def query_plugins(self, search, page=1, per_page=10):
        self.calls.append(("query_plugins", search, page, per_page))
        return self.search

    async def plugin_information(self, slug):
        self.calls.append(("plugin_information", slug))
        return self.details


@pytest.fixture
def sample_types():
    """Sample ``wp/v2/types`` payload."""
    return {
        "post": {
            "name": "Posts",
            "description": "",
            "rest_base": "posts",
            "hierarchical": False,
            "supports": {"title": True},
            "taxonomies": ["category", "post_tag"],
        },
        "page": {
            "name": "Pages",
            "description": "",
            "rest_base": "pages",
            "hierarchical": True,
            "taxonomies": [],
        },
        "attachment": {"name": "Media", "rest_base": "media"},
        "wp_block": {"name": "Patterns", "rest_base": "blocks"},
        "product": {"name": "Products", "rest_base": "product"},
    }


@pytest.fixture
def sample_taxonomies():
    """Sample ``wp/v2/taxonomies`` payload."""
    return {
        "category": {
            "name": "Categories",
            "types": ["post"],
            "hierarchical": True,
            "rest_base": "categories",
        },
        "post_tag": {
            "name": "Tags",
            "types": ["post"],
            "hierarchical": False,
            "rest_base": "tags",
        },
        "product_cat": {
            "name": "Product categories",
            "types": ["product"],
            "hierarchical": True,
            "rest_base": "product_cat",
        },
    }


@pytest.fixture
def fake_client(sample_types, sample_taxonomies):
    """Fake client that already answers the discovery endpoints."""
    return FakeClient(
        {
            ("GET", "wp/v2/types"): sample_types,
            ("GET", "wp/v2/taxonomies"): sample_taxonomies,
        }
    )


@pytest.fixture
def fake_directory():
    return FakeDirectory()


@pytest.fixture
def tool_context(fake_client, fake_directory) -> ToolContext:
    """Tool context wired around the fake client."""
    return build_context(fake_client, fake_directory)


@pytest.fixture
def client_factory():
    """Build bare fake clients with a custom route table."""
    return FakeClient
