"""Map content type and taxonomy slugs to WordPress REST collection paths.

WordPress names most collections after the type slug (``wp/v2/product``), but a
few built-ins use a different ``rest_base`` (``post`` -> ``posts``,
``post_tag`` -> ``tags``). Those exceptions live here; everything else uses the
``wp/v2/<slug>`` convention.
"""

from __future__ import annotations

from types import MappingProxyType

REST_NAMESPACE = "wp/v2"

CONTENT_ENDPOINTS = MappingProxyType(
    {
        "post": f"{REST_NAMESPACE}/posts",
        "page": f"{REST_NAMESPACE}/pages",
    }
)

TAXONOMY_ENDPOINTS = MappingProxyType(
    {
        "category": f"{REST_NAMESPACE}/categories",
        "post_tag": f"{REST_NAMESPACE}/tags",
        "nav_menu": f"{REST_NAMESPACE}/menus",
        "link_category": f"{REST_NAMESPACE}/link_categories",
    }
)

# Field on a content item that holds the term IDs of a taxonomy
TAXONOMY_FIELDS = MappingProxyType(
    {
        "category": "categories",
        "post_tag": "tags",
    }
)


def resolve_content_endpoint(content_type: str) -> str:
    """Return the collection path for a content type slug."""
    return CONTENT_ENDPOINTS.get(content_type, f"{REST_NAMESPACE}/{content_type}")


def resolve_taxonomy_endpoint(taxonomy: str) -> str:
    """Return the collection path for a taxonomy slug."""
    return TAXONOMY_ENDPOINTS.get(taxonomy, f"{REST_NAMESPACE}/{taxonomy}")


def taxonomy_field(taxonomy: str) -> str:
    return TAXONOMY_FIELDS.get(taxonomy, taxonomy)
