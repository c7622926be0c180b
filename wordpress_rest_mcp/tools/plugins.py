"""Installed plugin tools (``wp/v2/plugins``)."""

from __future__ import annotations

from ..models.site import CreatePluginInput, ListPluginsInput, PluginInput
from ..registry import READ_ONLY, WRITE, ToolDescriptor
from .common import rest_tool

TOOLS = [
    ToolDescriptor(
        name="list_plugins",
        description="List plugins installed on the site, filtered by status.",
        input_model=ListPluginsInput,
        error_context="listing plugins",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="get_plugin",
        description="Get details for an installed plugin.",
        input_model=PluginInput,
        error_context="retrieving plugin",
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="activate_plugin",
        description="Activate an installed plugin.",
        input_model=PluginInput,
        error_context="activating plugin",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="deactivate_plugin",
        description="Deactivate an installed plugin.",
        input_model=PluginInput,
        error_context="deactivating plugin",
        annotations=WRITE,
    ),
    ToolDescriptor(
        name="create_plugin",
        description="Install a plugin from the WordPress.org plugin directory.",
        input_model=CreatePluginInput,
        error_context="creating plugin",
        annotations=WRITE,
    ),
]

HANDLERS = {
    "list_plugins": rest_tool("GET", "wp/v2/plugins"),
    "get_plugin": rest_tool("GET", "wp/v2/plugins/{plugin}"),
    "activate_plugin": rest_tool("POST", "wp/v2/plugins/{plugin}/activate"),
    "deactivate_plugin": rest_tool("POST", "wp/v2/plugins/{plugin}/deactivate"),
    "create_plugin": rest_tool("POST", "wp/v2/plugins"),
}
