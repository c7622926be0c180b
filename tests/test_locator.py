"""Tests for URL parsing and content location."""

import pytest

from wordpress_rest_mcp.errors import NotFoundError, TransportError
from wordpress_rest_mcp.locator import candidate_types, parse_content_url


class TestParseContentUrl:
    """Tests for parse_content_url."""

    def test_slug_and_hints(self):
        assert parse_content_url("https://example.com/docs/getting-started") == (
            "getting-started",
            ["docs"],
        )

    def test_trailing_slash_ignored(self):
        slug, hints = parse_content_url("https://example.com/blog/2024/hello-world/")
        assert slug == "hello-world"
        assert hints == ["blog", "2024"]

    def test_no_path(self):
        assert parse_content_url("https://example.com") == ("", [])
        assert parse_content_url("https://example.com/") == ("", [])


class TestCandidateTypes:
    """Tests for candidate_types."""

    def test_docs_hint(self):
        assert candidate_types(["docs"]) == ["documentation", "docs", "doc", "post", "page"]

    def test_hints_are_case_insensitive(self):
        assert candidate_types(["Products"]) == ["product", "post", "page"]

    def test_unknown_hints_give_fallbacks(self):
        assert candidate_types(["blog", "2024"]) == ["post", "page"]

    def test_duplicates_removed(self):
        """documentation and docs map to the same candidates."""
        assert candidate_types(["documentation", "docs"]) == [
            "documentation",
            "docs",
            "doc",
            "post",
            "page",
        ]


class TestContentLocator:
    """Tests for ContentLocator against a fake client."""

    @pytest.mark.asyncio
    async def test_stops_at_first_hit(self, tool_context, fake_client):
        """A hit on the first candidate makes exactly one probe."""
        fake_client.routes[("GET", "wp/v2/documentation")] = [{"id": 7, "slug": "getting-started"}]

        found = await tool_context.locator.locate("https://example.com/docs/getting-started")

        assert found.content_type == "documentation"
        assert found.id == 7
        assert fake_client.paths() == ["wp/v2/documentation"]
        assert fake_client.calls[0][2] == {"slug": "getting-started", "per_page": 1}

    @pytest.mark.asyncio
    async def test_falls_back_to_all_content_types(self, tool_context, fake_client):
        """Unhinted types are found in the enumeration pass."""
        fake_client.routes[("GET", "wp/v2/product")] = [{"id": 12, "slug": "blue-shirt"}]

        found = await tool_context.locator.locate("https://example.com/shop/blue-shirt")

        assert found.content_type == "product"
        probed = fake_client.paths()
        assert probed[:2] == ["wp/v2/posts", "wp/v2/pages"]
        assert "wp/v2/types" in probed
        assert "wp/v2/attachment" not in probed
        assert "wp/v2/wp_block" not in probed
        assert probed[-1] == "wp/v2/product"

    @pytest.mark.asyncio
    async def test_not_found(self, tool_context):
        with pytest.raises(NotFoundError, match="No content found with URL"):
            await tool_context.locator.locate("https://example.com/missing-page")

    @pytest.mark.asyncio
    async def test_empty_slug_makes_no_requests(self, tool_context, fake_client):
        with pytest.raises(NotFoundError, match="Could not extract slug"):
            await tool_context.locator.locate("https://example.com/")
        assert fake_client.calls == []

    @pytest.mark.asyncio
    async def test_probe_errors_are_skipped(self, tool_context, fake_client):
        """A failing collection does not stop the search."""
        fake_client.routes[("GET", "wp/v2/documentation")] = TransportError(
            "No route was found matching the URL and request method.", status=404
        )
        fake_client.routes[("GET", "wp/v2/docs")] = [{"id": 3}]

        found = await tool_context.locator.locate("https://example.com/docs/intro")

        assert found.content_type == "docs"
        assert fake_client.paths() == ["wp/v2/documentation", "wp/v2/docs"]

    @pytest.mark.asyncio
    async def test_find_by_slug_in_given_types(self, tool_context, fake_client):
        fake_client.routes[("GET", "wp/v2/pages")] = [{"id": 2, "slug": "about"}]

        found = await tool_context.locator.find_by_slug("about", ["post", "page"])

        assert found.content == {"id": 2, "slug": "about"}
        assert fake_client.paths() == ["wp/v2/posts", "wp/v2/pages"]

    @pytest.mark.asyncio
    async def test_find_by_slug_miss_returns_none(self, tool_context):
        assert await tool_context.locator.find_by_slug("nothing", ["post"]) is None

    @pytest.mark.asyncio
    async def test_update_after_locate(self, tool_context, fake_client):
        fake_client.routes[("GET", "wp/v2/posts")] = [{"id": 5, "title": "Old"}]
        fake_client.routes[("POST", "wp/v2/posts/5")] = {"id": 5, "title": "New"}

        found, updated = await tool_context.locator.locate_and_update(
            "https://example.com/hello", {"title": "New"}
        )

        assert updated is True
        assert found.content == {"id": 5, "title": "New"}
        assert fake_client.calls[-1][:3] == ("POST", "wp/v2/posts/5", {"title": "New"})

    @pytest.mark.asyncio
    async def test_no_update_without_fields(self, tool_context, fake_client):
        fake_client.routes[("GET", "wp/v2/posts")] = [{"id": 5}]

        _, updated = await tool_context.locator.locate_and_update("https://example.com/hello")

        assert updated is False
        assert fake_client.paths("POST") == []
