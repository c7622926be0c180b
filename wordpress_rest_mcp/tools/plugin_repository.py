"""WordPress.org plugin directory search and details."""

from __future__ import annotations

from typing import Any

from ..models.site import GetPluginDetailsInput, SearchPluginRepositoryInput
from ..registry import READ_ONLY, ToolDescriptor

TOOLS = [
    ToolDescriptor(
        name="search_plugin_repository",
        description="Search for plugins in the WordPress.org plugin repository.",
        input_model=SearchPluginRepositoryInput,
        error_context="searching plugin repository",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="get_plugin_details",
        description="Get detailed information about a plugin from the WordPress.org repository.",
        input_model=GetPluginDetailsInput,
        error_context="getting plugin details",
        annotations=READ_ONLY,
    ),
]

SUMMARY_FIELDS = {
    "name": "name",
    "slug": "slug",
    "version": "version",
    "author": "author",
    "requires_wp": "requires",
    "tested": "tested",
    "rating": "rating",
    "active_installs": "active_installs",
    "downloaded": "downloaded",
    "last_updated": "last_updated",
    "short_description": "short_description",
    "download_link": "download_link",
    "homepage": "homepage",
}

DETAIL_FIELDS = {
    **SUMMARY_FIELDS,
    "author_profile": "author_profile",
    "contributors": "contributors",
    "requires_php": "requires_php",
    "ratings": "ratings",
    "added": "added",
    "description": "description",
    "tags": "tags",
    "sections": "sections",
    "banners": "banners",
    "icons": "icons",
}


def _pick(plugin: dict[str, Any], fields: dict[str, str]) -> dict[str, Any]:
    return {key: plugin.get(source) for key, source in fields.items()}


def _directory(ctx):
    if ctx.directory is None:
        raise RuntimeError("Plugin directory client is not configured")
    return ctx.directory


async def search_plugin_repository(params: SearchPluginRepositoryInput, ctx) -> dict:
    response = await _directory(ctx).query_plugins(params.search, params.page, params.per_page)
    info = response.get("info") or {}
    return {
        "info": {
            "page": info.get("page"),
            "pages": info.get("pages"),
            "results": info.get("results"),
        },
        "plugins": [_pick(p, SUMMARY_FIELDS) for p in response.get("plugins") or []],
    }


async def get_plugin_details(params: GetPluginDetailsInput, ctx) -> dict:
    plugin = await _directory(ctx).plugin_information(params.slug)
    return _pick(plugin, DETAIL_FIELDS)


HANDLERS = {
    "search_plugin_repository": search_plugin_repository,
    "get_plugin_details": get_plugin_details,
}
