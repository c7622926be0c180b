"""Unified content tools for posts, pages and custom post types.

Every tool takes a ``content_type`` slug instead of being tied to one
collection, so custom post types registered by plugins work without extra
configuration.
"""

from __future__ import annotations

from typing import Any

from ..config import logger
from ..endpoints import resolve_content_endpoint
from ..errors import NotFoundError
from ..models.content import (
    CreateContentInput,
    DeleteContentInput,
    DiscoverContentTypesInput,
    FindContentByUrlInput,
    GetContentBySlugInput,
    GetContentInput,
    ListContentInput,
    UpdateContentInput,
)
from ..registry import DESTRUCTIVE, READ_ONLY, WRITE, ToolDescriptor
from .common import params_dict

TOOLS = [
    ToolDescriptor(
        name="list_content",
        description="List content of any type (posts, pages, or custom post types).",
        input_model=ListContentInput,
        error_context="listing content",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="get_content",
        description="Get specific content by ID and content type.",
        input_model=GetContentInput,
        error_context="getting content",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="create_content",
        description="Create new content of any type.",
        input_model=CreateContentInput,
        error_context="creating content",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="update_content",
        description="Update existing content of any type. Only provided fields change.",
        input_model=UpdateContentInput,
        error_context="updating content",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="delete_content",
        description="Delete content of any type (to trash unless force is true).",
        input_model=DeleteContentInput,
        error_context="deleting content",
        annotations=DESTRUCTIVE,
    ),
    ToolDescriptor(
        name="discover_content_types",
        description="Discover all available content types (built-in and custom) on the site.",
        input_model=DiscoverContentTypesInput,
        error_context="discovering content types",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="find_content_by_url",
        description=(
            "Find content by its URL, detecting the content type automatically. "
            "Optionally update the content once found."
        ),
        input_model=FindContentByUrlInput,
        error_context="finding content by URL",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="get_content_by_slug",
        description="Search for content by slug across one or more content types.",
        input_model=GetContentBySlugInput,
        error_context="getting content by slug",
        annotations=READ_ONLY,
    ),
]


def _content_body(data: dict[str, Any]) -> dict[str, Any]:
    """Fold ``custom_fields`` into the top level of a request body."""
    custom_fields = data.pop("custom_fields", None) or {}
    return {**data, **custom_fields}


async def list_content(params: ListContentInput, ctx) -> Any:
    endpoint = resolve_content_endpoint(params.content_type)
    return await ctx.client.request(
        "GET", endpoint, params_dict(params, exclude={"content_type"})
    )


async def get_content(params: GetContentInput, ctx) -> Any:
    endpoint = resolve_content_endpoint(params.content_type)
    return await ctx.client.request("GET", f"{endpoint}/{params.id}")


async def create_content(params: CreateContentInput, ctx) -> Any:
    endpoint = resolve_content_endpoint(params.content_type)
    body = _content_body(params_dict(params, exclude={"content_type"}))
    return await ctx.client.request("POST", endpoint, body)


async def update_content(params: UpdateContentInput, ctx) -> Any:
    endpoint = resolve_content_endpoint(params.content_type)
    body = _content_body(params_dict(params, exclude={"content_type", "id"}))
    return await ctx.client.request("POST", f"{endpoint}/{params.id}", body)


async def delete_content(params: DeleteContentInput, ctx) -> Any:
    endpoint = resolve_content_endpoint(params.content_type)
    return await ctx.client.request(
        "DELETE", f"{endpoint}/{params.id}", {"force": params.force}
    )


async def discover_content_types(params: DiscoverContentTypesInput, ctx) -> list[dict]:
    content_types = await ctx.discovery.get_content_types(params.refresh_cache)
    return [
        {
            "slug": slug,
            "name": info.get("name"),
            "description": info.get("description"),
            "rest_base": info.get("rest_base"),
            "hierarchical": info.get("hierarchical"),
            "supports": info.get("supports"),
            "taxonomies": info.get("taxonomies"),
        }
        for slug, info in content_types.items()
    ]


async def find_content_by_url(params: FindContentByUrlInput, ctx) -> dict[str, Any]:
    """Find the content item published at a URL, optionally updating it.

    Args:
        params: Page URL and optional fields to update on the match.

    Returns:
        The matched type, ID and content. Raises NotFoundError when no
        content type has an item with the URL's slug.
    """
    update = None
    if params.update_fields is not None:
        update = _content_body(params_dict(params.update_fields))

    found, updated = await ctx.locator.locate_and_update(params.url, update)

    result: dict[str, Any] = {
        "found": True,
        "content_type": found.content_type,
        "content_id": found.id,
        "original_url": params.url,
    }
    if updated:
        logger.info("Updated %s %s found at %s", found.content_type, found.id, params.url)
        result["updated"] = True
    result["content"] = found.content
    return result


async def get_content_by_slug(params: GetContentBySlugInput, ctx) -> dict[str, Any]:
    """Look up content by slug across the given or default content types."""
    found = await ctx.locator.find_by_slug(params.slug, params.content_types)
    if found is None:
        raise NotFoundError(f"No content found with slug: {params.slug}")
    return {"found": True, "content_type": found.content_type, "content": found.content}


HANDLERS = {
    "list_content": list_content,
    "get_content": get_content,
    "create_content": create_content,
    "update_content": update_content,
    "delete_content": delete_content,
    "discover_content_types": discover_content_types,
    "find_content_by_url": find_content_by_url,
    "get_content_by_slug": get_content_by_slug,
}
