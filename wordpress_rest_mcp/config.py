"""Configuration and constants for the WordPress REST MCP Server."""

from __future__ import annotations

import logging
import os
import sys
from urllib.parse import urlparse

# ---------------------------------------------------------------------------
# Configuration from environment variables
# ---------------------------------------------------------------------------

WORDPRESS_API_URL = os.getenv("WORDPRESS_API_URL", "")
WORDPRESS_USERNAME = os.getenv("WORDPRESS_USERNAME", "")
WORDPRESS_PASSWORD = os.getenv("WORDPRESS_PASSWORD") or os.getenv(
    "WORDPRESS_APP_PASSWORD", ""
)  # application password

ENABLED_TOOLS = os.getenv("ENABLED_TOOLS", "")  # category selector, empty = all
MCP_SERVER_NAME = os.getenv("MCP_SERVER_NAME", "")

REQUEST_TIMEOUT = float(os.getenv("WORDPRESS_REQUEST_TIMEOUT", "120"))

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SERVER_VERSION = "1.0.7"

# Content type / taxonomy discovery results are reused for this long (seconds)
DISCOVERY_CACHE_TTL = 300

PLUGIN_DIRECTORY_URL = "https://api.wordpress.org/plugins/info/1.2/"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logger = logging.getLogger("wordpress_rest_mcp")
logging.basicConfig(level=logging.INFO, stream=sys.stderr)

if not (WORDPRESS_USERNAME and WORDPRESS_PASSWORD):
    logger.warning(
        "WORDPRESS_USERNAME / WORDPRESS_PASSWORD are not set. Requests will be "
        "anonymous and most write tools will be rejected by WordPress."
    )


def server_name(api_url: str = WORDPRESS_API_URL, custom: str = MCP_SERVER_NAME) -> str:
    """Derive the MCP server name from the site URL.

    ``fccmanagermcp.instawp.co`` becomes ``fccmanagermcp-instawp``; when that is
    longer than 25 characters only the subdomain is used. Two-label hosts drop
    the TLD (``example.com`` -> ``example``).
    """
    if custom:
        return custom
    if not api_url:
        return "wordpress"

    hostname = urlparse(api_url).hostname or ""
    parts = [p for p in hostname.split(".") if p]
    if len(parts) >= 3:
        with_domain = f"{parts[0]}-{parts[1]}"
        if len(with_domain) <= 25:
            return with_domain
        return parts[0]
    return "-".join(parts[:-1]) or "wordpress"
