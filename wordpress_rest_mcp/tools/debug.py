"""Diagnostic tools exposed by the FC Manager plugin."""

from __future__ import annotations

from ..models.base import EmptyInput
from ..registry import READ_ONLY, ToolDescriptor
from .common import rest_tool

TOOLS = [
    ToolDescriptor(
        name="debug_options",
        description="Dump the WordPress options FC Manager uses, for troubleshooting.",
        input_model=EmptyInput,
        annotations=READ_ONLY,
    ),
    ToolDescriptor(
        name="debug_fluentcrm",
        description="Report FluentCRM installation and table status.",
        input_model=EmptyInput,
        annotations=READ_ONLY,
    ),
]

HANDLERS = {
    "debug_options": rest_tool("GET", "fc-manager/v1/debug/options"),
    "debug_fluentcrm": rest_tool("GET", "fc-manager/v1/debug/fluentcrm"),
}
