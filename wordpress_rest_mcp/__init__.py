"""WordPress REST MCP Server.

Exposes the WordPress REST API (content, taxonomies, media, users, comments,
plugins) and several plugin APIs (FluentCRM, FluentCart, FluentCommunity,
ML plugins) as Model Context Protocol tools.
"""

__version__ = "1.0.7"

from .server import main, server

__all__ = ["main", "server", "__version__"]
