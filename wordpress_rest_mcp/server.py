"""WordPress REST MCP Server entry point."""

from __future__ import annotations

import asyncio
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from .client import app_lifespan
from .config import ENABLED_TOOLS, SERVER_VERSION, logger, server_name
from .tools import build_registry

# Build the active tool catalog
registry = build_registry(ENABLED_TOOLS)

# Create the MCP server
server = Server(server_name(), lifespan=app_lifespan)


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    return registry.list_tools()


# Arguments are validated by each tool's input model, which yields the
# "Error <context>: ..." envelope instead of a protocol-level rejection.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
    ctx = server.request_context.lifespan_context
    outcome = await registry.invoke(name, arguments, ctx)
    return outcome.to_call_tool_result()


async def run():
    """Serve the registry over stdio until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info(
            "Starting %s v%s with %d tools", server.name, SERVER_VERSION, len(registry)
        )
        await server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=server.name,
                server_version=SERVER_VERSION,
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def main():
    """Run the MCP server."""
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("Server stopped")


if __name__ == "__main__":
    main()
