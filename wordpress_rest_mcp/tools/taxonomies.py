"""Unified taxonomy tools for categories, tags and custom taxonomies."""

from __future__ import annotations

import asyncio
from typing import Any

from ..config import logger
from ..endpoints import resolve_content_endpoint, resolve_taxonomy_endpoint, taxonomy_field
from ..models.taxonomies import (
    AssignTermsInput,
    CreateTermInput,
    DeleteTermInput,
    DiscoverTaxonomiesInput,
    GetContentTermsInput,
    GetTermInput,
    ListTermsInput,
    UpdateTermInput,
)
from ..registry import DESTRUCTIVE, READ_ONLY, WRITE, ToolDescriptor
from ..utils import unique
from .common import params_dict

TOOLS = [
    ToolDescriptor(
        name="discover_taxonomies",
        description="Discover all available taxonomies (built-in and custom) on the site.",
        input_model=DiscoverTaxonomiesInput,
        error_context="discovering taxonomies",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="list_terms",
        description="List terms in any taxonomy (categories, tags, or custom taxonomies).",
        input_model=ListTermsInput,
        error_context="listing terms",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="get_term",
        description="Get a specific term by ID.",
        input_model=GetTermInput,
        error_context="getting term",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="create_term",
        description="Create a new term in any taxonomy.",
        input_model=CreateTermInput,
        error_context="creating term",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="update_term",
        description="Update an existing term.",
        input_model=UpdateTermInput,
        error_context="updating term",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="delete_term",
        description="Delete a term from any taxonomy. Terms are deleted permanently.",
        input_model=DeleteTermInput,
        error_context="deleting term",
        annotations=DESTRUCTIVE,
    ),
    ToolDescriptor(
        name="assign_terms_to_content",
        description="Assign terms to content of any type, replacing or appending.",
        input_model=AssignTermsInput,
        error_context="assigning terms to content",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="get_content_terms",
        description="Get all terms assigned to a content item, grouped by taxonomy.",
        input_model=GetContentTermsInput,
        error_context="getting content terms",
        annotations=READ_ONLY,
    ),
]


async def discover_taxonomies(params: DiscoverTaxonomiesInput, ctx) -> list[dict]:
    taxonomies = await ctx.discovery.get_taxonomies(params.refresh_cache)
    return [
        {
            "slug": slug,
            "name": info.get("name"),
            "description": info.get("description"),
            "types": info.get("types"),
            "hierarchical": info.get("hierarchical"),
            "rest_base": info.get("rest_base"),
            "labels": info.get("labels"),
        }
        for slug, info in taxonomies.items()
        if not params.content_type or params.content_type in (info.get("types") or [])
    ]


async def list_terms(params: ListTermsInput, ctx) -> Any:
    endpoint = resolve_taxonomy_endpoint(params.taxonomy)
    return await ctx.client.request("GET", endpoint, params_dict(params, exclude={"taxonomy"}))


async def get_term(params: GetTermInput, ctx) -> Any:
    endpoint = resolve_taxonomy_endpoint(params.taxonomy)
    return await ctx.client.request("GET", f"{endpoint}/{params.id}")


async def create_term(params: CreateTermInput, ctx) -> Any:
    endpoint = resolve_taxonomy_endpoint(params.taxonomy)
    return await ctx.client.request("POST", endpoint, params_dict(params, exclude={"taxonomy"}))


async def update_term(params: UpdateTermInput, ctx) -> Any:
    endpoint = resolve_taxonomy_endpoint(params.taxonomy)
    body = params_dict(params, exclude={"taxonomy", "id"})
    return await ctx.client.request("POST", f"{endpoint}/{params.id}", body)


async def delete_term(params: DeleteTermInput, ctx) -> Any:
    endpoint = resolve_taxonomy_endpoint(params.taxonomy)
    # Terms do not support trashing
    return await ctx.client.request("DELETE", f"{endpoint}/{params.id}", {"force": True})


async def assign_terms_to_content(params: AssignTermsInput, ctx) -> dict[str, Any]:
    """Set the terms of one taxonomy on a content item.

    Args:
        params: Content, taxonomy and term IDs. With ``append`` the IDs are
            merged into the terms already assigned.

    Returns:
        The requested terms, whether they were appended, and the updated
        content item.
    """
    endpoint = f"{resolve_content_endpoint(params.content_type)}/{params.content_id}"
    field = taxonomy_field(params.taxonomy)
    terms = list(params.terms)

    if params.append:
        try:
            current = await ctx.client.request("GET", endpoint)
        except Exception as e:
            logger.warning(
                "Could not read current %s of %s %s, replacing instead: %s",
                field,
                params.content_type,
                params.content_id,
                e,
            )
        else:
            existing = current.get(field) if isinstance(current, dict) else None
            terms = unique([*(existing or []), *terms])

    content = await ctx.client.request("POST", endpoint, {field: terms})
    return {
        "success": True,
        "content_id": params.content_id,
        "content_type": params.content_type,
        "taxonomy": params.taxonomy,
        "assigned_terms": list(params.terms),
        "appended": params.append,
        "content": content,
    }


async def _term_details(ctx, taxonomy: str, term_ids: list[Any]) -> list[Any]:
    endpoint = resolve_taxonomy_endpoint(taxonomy)

    async def fetch(term_id):
        try:
            return await ctx.client.request("GET", f"{endpoint}/{term_id}")
        except Exception as e:
            logger.warning("Could not fetch %s term %s: %s", taxonomy, term_id, e)
            return {"id": term_id, "error": "Could not fetch term details"}

    return list(await asyncio.gather(*(fetch(term_id) for term_id in term_ids)))


async def get_content_terms(params: GetContentTermsInput, ctx) -> dict[str, Any]:
    """Return term details for a content item, keyed by taxonomy.

    Without ``taxonomy`` every taxonomy registered for the content type is
    read. Terms that cannot be fetched are reported as ``{id, error}``.
    """
    endpoint = resolve_content_endpoint(params.content_type)
    content = await ctx.client.request("GET", f"{endpoint}/{params.content_id}")
    if not isinstance(content, dict):
        content = {}

    if params.taxonomy:
        taxonomies = [params.taxonomy]
    else:
        discovered = await ctx.discovery.get_taxonomies()
        taxonomies = [
            slug
            for slug, info in discovered.items()
            if params.content_type in (info.get("types") or [])
        ]

    terms: dict[str, list[Any]] = {}
    for taxonomy in taxonomies:
        term_ids = content.get(taxonomy_field(taxonomy))
        if isinstance(term_ids, list) and term_ids:
            terms[taxonomy] = await _term_details(ctx, taxonomy, term_ids)

    return {
        "content_id": params.content_id,
        "content_type": params.content_type,
        "terms": terms,
    }


HANDLERS = {
    "discover_taxonomies": discover_taxonomies,
    "list_terms": list_terms,
    "get_term": get_term,
    "create_term": create_term,
    "update_term": update_term,
    "delete_term": delete_term,
    "assign_terms_to_content": assign_terms_to_content,
    "get_content_terms": get_content_terms,
}
