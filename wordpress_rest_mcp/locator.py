"""Find a content item from its public URL without knowing its content type.

The last path segment is taken as the slug. Earlier segments hint at likely
content types (``/docs/getting-started`` is probably a ``documentation``
item); those candidates are probed first, then ``post`` and ``page``, and
finally every content type the site exposes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any
from urllib.parse import urlparse

from .config import logger
from .endpoints import resolve_content_endpoint
from .errors import NotFoundError
from .utils import unique

# URL path segment (lowercase) -> probable content type slugs, in probe order
PATH_HINTS = MappingProxyType(
    {
        "documentation": ("documentation", "docs", "doc"),
        "docs": ("documentation", "docs", "doc"),
        "products": ("product",),
        "portfolio": ("portfolio", "project"),
        "services": ("service",),
        "testimonials": ("testimonial",),
        "team": ("team_member", "staff"),
        "events": ("event",),
        "courses": ("course", "lesson"),
    }
)

FALLBACK_TYPES = ("post", "page")

# Never probed during the full enumeration pass
EXCLUDED_TYPES = frozenset({"attachment", "wp_block"})


@dataclass(frozen=True)
class LocatedContent:
    content: Any
    content_type: str

    @property
    def id(self) -> Any:
        if isinstance(self.content, dict):
            return self.content.get("id")
        return None


def parse_content_url(url: str) -> tuple[str, list[str]]:
    """Split a URL into its slug and the path segments before it.

    Returns:
        Tuple of (slug, path_hints). ``("", [])`` when the URL has no path.
    """
    try:
        path = urlparse(url).path
    except ValueError as e:
        logger.warning("Error parsing URL %s: %s", url, e)
        return "", []

    parts = [p for p in path.split("/") if p]
    if not parts:
        return "", []
    return parts[-1], parts[:-1]


def candidate_types(path_hints: Iterable[str]) -> list[str]:
    """Ordered, de-duplicated content types to probe for a set of hints."""
    candidates: list[str] = []
    for hint in path_hints:
        candidates.extend(PATH_HINTS.get(hint.lower(), ()))
    candidates.extend(FALLBACK_TYPES)
    return unique(candidates)


class ContentLocator:
    """Probe content type collections for a slug."""

    def __init__(self, client, discovery):
        self.client = client
        self.discovery = discovery

    async def _all_content_types(self) -> list[str]:
        types = await self.discovery.get_content_types()
        return [slug for slug in types if slug not in EXCLUDED_TYPES]

    async def find_by_slug(
        self, slug: str, content_types: Sequence[str] | None = None
    ) -> LocatedContent | None:
        """Return the first item with ``slug`` across ``content_types``.

        Candidates are probed in order and the search stops at the first hit.
        A failing probe (unknown collection, permissions) is logged and the
        next candidate is tried. Without ``content_types`` every discovered
        content type except attachments and reusable blocks is searched.
        """
        types_to_search = list(content_types or [])
        if not types_to_search:
            types_to_search = await self._all_content_types()

        logger.info(
            "Searching for slug %r across content types: %s",
            slug,
            ", ".join(types_to_search),
        )

        for content_type in types_to_search:
            endpoint = resolve_content_endpoint(content_type)
            try:
                response = await self.client.request(
                    "GET", endpoint, {"slug": slug, "per_page": 1}
                )
            except Exception as e:
                logger.warning("Error searching %s: %s", content_type, e)
                continue

            if isinstance(response, list) and response:
                logger.info("Found slug %r in content type %r", slug, content_type)
                return LocatedContent(response[0], content_type)

        return None

    async def locate(self, url: str) -> LocatedContent:
        """Find the content item published at ``url``.

        Raises:
            NotFoundError: If no slug can be extracted or nothing matches.
        """
        slug, path_hints = parse_content_url(url)
        if not slug:
            raise NotFoundError(f"Could not extract slug from URL: {url}")

        logger.info("Locating slug %r, path hints: %s", slug, "/".join(path_hints))

        found = await self.find_by_slug(slug, candidate_types(path_hints))
        if found is None:
            found = await self.find_by_slug(slug)
        if found is None:
            raise NotFoundError(f"No content found with URL: {url}")
        return found

    async def locate_and_update(
        self, url: str, update: dict[str, Any] | None = None
    ) -> tuple[LocatedContent, bool]:
        """Locate ``url`` and, when ``update`` is given, patch the item.

        Returns:
            Tuple of (located content, whether it was updated). After an
            update ``content`` holds the patched representation.
        """
        found = await self.locate(url)
        if update is None:
            return found, False

        endpoint = resolve_content_endpoint(found.content_type)
        updated = await self.client.request("POST", f"{endpoint}/{found.id}", update)
        return LocatedContent(updated, found.content_type), True
