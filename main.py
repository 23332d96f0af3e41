# =============================================================================
# main.py  —  Entry Point for the Ghost MCP server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or the installed `ghost-mcp` script)
#
# WHAT HAPPENS:
#   1. Loads .env (GHOST_URL, GHOST_ADMIN_API_KEY, GHOST_CONTENT_API_KEY)
#   2. Validates the configuration; any problem here is fatal
#   3. Builds ONE shared httpx client and the two Ghost API clients
#   4. Builds the FastMCP server (tools/mcp_server.py)
#   5. Serves MCP over stdio until the client disconnects
#
# Configure it in an MCP client, e.g. claude_desktop_config.json:
#   {"command": "uv", "args": ["run", "python", "/path/to/main.py"]}
# =============================================================================

import logging
import sys
from contextlib import asynccontextmanager

from dotenv import load_dotenv

from core.config import ConfigurationError, load_settings
from gateway import GhostAdminClient, GhostContentClient, build_async_client
from tools.mcp_server import configure_logging, create_server


def main() -> None:
    # .env must be loaded BEFORE settings are read from the environment.
    load_dotenv()

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        configure_logging()
        logging.error(f"Fatal error: {exc}")
        sys.exit(1)

    configure_logging(settings.ghost_mcp_log_level)

    http_client = build_async_client(settings)
    admin = GhostAdminClient(http_client, settings.ghost_admin_api_key)
    content = GhostContentClient(http_client, settings.ghost_content_api_key)

    @asynccontextmanager
    async def lifespan(_server):
        logging.info("Ghost MCP server running...")
        try:
            yield
        finally:
            await http_client.aclose()

    server = create_server(admin, content, lifespan=lifespan)
    server.run()


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
