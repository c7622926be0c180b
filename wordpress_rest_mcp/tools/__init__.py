"""MCP tool implementations for the WordPress REST API and plugin APIs."""

from __future__ import annotations

from ..config import ENABLED_TOOLS, logger
from ..registry import ToolCategory, ToolRegistry, select_category
from . import (
    comments,
    content,
    debug,
    fluent_cart,
    fluent_community,
    fluent_crm,
    media,
    ml_plugins,
    plugin_repository,
    plugins,
    taxonomies,
    users,
)

TOOL_GROUPS = {
    ToolCategory.WORDPRESS: (
        content,
        taxonomies,
        plugins,
        media,
        users,
        plugin_repository,
        comments,
    ),
    ToolCategory.FLUENTCOMMUNITY: (fluent_community,),
    ToolCategory.FLUENTCART: (fluent_cart,),
    ToolCategory.FLUENTCRM: (fluent_crm,),
    ToolCategory.MLPLUGINS: (ml_plugins,),
    ToolCategory.DEBUG: (debug,),
}

__all__ = ["TOOL_GROUPS", "build_registry", "modules_for"]


def modules_for(category: ToolCategory) -> list:
    """Tool modules making up a category, in registration order."""
    if category is ToolCategory.ALL:
        return [module for group in TOOL_GROUPS.values() for module in group]
    return list(TOOL_GROUPS[category])


def build_registry(selection: str | None = ENABLED_TOOLS) -> ToolRegistry:
    """Build the active tool registry for an ``ENABLED_TOOLS`` value."""
    category = select_category(selection)
    modules = modules_for(category)

    registry = ToolRegistry()
    for module in modules:
        registry.register(module.TOOLS, module.HANDLERS)

    declared = sum(len(module.TOOLS) for module in modules)
    logger.info("Registered %d of %d tools (%s)", len(registry), declared, category.value)
    return registry
