# =============================================================================
# tools/mcp_server.py  —  FastMCP binding for the Ghost tools and resources
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Wires the four MCP message kinds to the core components:
#
#     tools/list      → CatalogPublisher   (static, from the Schema Registry)
#     tools/call      → ToolDispatcher     (always answers with text)
#     resources/list  → ResourceResolver   (fresh preview of 5 posts)
#     resources/read  → ResourceResolver   (ghost://posts/{slug*})
#
# HOW IT WORKS (the flow):
#   1. Each catalog entry becomes a CatalogTool.  Its advertised inputSchema
#      is the catalog's JSON shape, and its run() hands the RAW arguments to
#      the dispatcher; validation happens there, not in FastMCP.
#   2. GhostProtocolMiddleware catches tool names that are not in the
#      catalog, so they also get an "Error: Unknown tool: ..." envelope
#      instead of a protocol fault.  It also answers resources/list.
#   3. Resource reads go through a wildcard URI template, so a slug may
#      span several path segments.  A URI that doesn't match the template
#      is rejected by FastMCP before any Ghost call is made.
#
# ERROR ASYMMETRY:
#   Tool calls never fail at protocol level.  Resource reads may: a bad URI
#   or a missing post surfaces as a request error.
# =============================================================================

import logging
import sys
from typing import Any

from fastmcp import FastMCP
from fastmcp.resources import Resource
from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from core.catalog import CatalogPublisher
from core.dispatcher import ToolDispatcher
from core.gateway import AdminGateway, ReadGateway
from core.models import ResourceDescriptor, ResultEnvelope
from core.resources import RESOURCE_MIME_TYPE, ResourceResolver, post_uri

SERVER_NAME = "ghost-mcp"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP client talks to us over STDOUT.  Anything
# printed to stdout would corrupt the JSON-RPC stream.
#
#   CYAN   → incoming tool calls (name + arguments)
#   YELLOW → status lines
#   GREEN  → first line of the text we send back
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, params: dict) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, envelope: ResultEnvelope) -> ToolResult:
    """Log the headline of the envelope in GREEN, then convert it for FastMCP."""
    headline = envelope.content_items[0].text.splitlines()[0] if envelope.content_items else ""
    logging.info(f"{_GREEN}  ← {tool_name} response: {headline}{_RESET}")
    return to_tool_result(envelope)


def to_tool_result(envelope: ResultEnvelope) -> ToolResult:
    return ToolResult(
        content=[TextContent(type="text", text=item.text) for item in envelope.content_items]
    )


# =============================================================================
# Tools
# =============================================================================
class CatalogTool(Tool):
    """A catalog entry whose calls are routed through the ToolDispatcher."""

    dispatcher: Any = Field(exclude=True)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments or {})
        envelope = await self.dispatcher.dispatch(self.name, arguments)
        return _log_response(self.name, envelope)


# =============================================================================
# Resources
# =============================================================================
class PostResource(Resource):
    """A listed post.  Reading it renders "# <title>\\n\\n<html>"."""

    resolver: Any = Field(exclude=True)

    @classmethod
    def from_descriptor(cls, descriptor: ResourceDescriptor, resolver: ResourceResolver) -> "PostResource":
        return cls(
            uri=descriptor.uri,
            name=descriptor.name,
            description=descriptor.description,
            mime_type=descriptor.mime_type,
            resolver=resolver,
        )

    async def read(self) -> str:
        contents = await self.resolver.read_resource(str(self.uri))
        return contents.text


class GhostProtocolMiddleware(Middleware):
    def __init__(self, dispatcher: ToolDispatcher, resolver: ResourceResolver, tool_names: set[str]):
        self._dispatcher = dispatcher
        self._resolver = resolver
        self._tool_names = tool_names

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        if name in self._tool_names:
            return await call_next(context)
        arguments = context.message.arguments or {}
        _log_request(name, arguments)
        _log_status("not in the catalog")
        envelope = await self._dispatcher.dispatch(name, arguments)
        return _log_response(name, envelope)

    async def on_list_resources(self, context: MiddlewareContext, call_next):
        descriptors = await self._resolver.list_resources()
        _log_status(f"Listing {len(descriptors)} post resources")
        return [PostResource.from_descriptor(d, self._resolver) for d in descriptors]


# =============================================================================
# Server factory
# =============================================================================
def create_server(admin: AdminGateway, content: ReadGateway, *, lifespan=None) -> FastMCP:
    """Build the FastMCP server around the given Ghost gateways."""
    server = FastMCP(SERVER_NAME, lifespan=lifespan)

    dispatcher = ToolDispatcher(admin, content)
    resolver = ResourceResolver(content)
    catalog = CatalogPublisher()

    for descriptor in catalog.list_operations():
        server.add_tool(
            CatalogTool(
                name=descriptor.name,
                description=descriptor.description,
                parameters=descriptor.input_shape,
                dispatcher=dispatcher,
            )
        )

    @server.resource(
        "ghost://posts/{slug*}",
        name="ghost_post",
        description="A Ghost post rendered as its title followed by its HTML",
        mime_type=RESOURCE_MIME_TYPE,
    )
    async def read_post_resource(slug: str) -> str:
        contents = await resolver.read_resource(post_uri(slug))
        return contents.text

    server.add_middleware(
        GhostProtocolMiddleware(
            dispatcher,
            resolver,
            {descriptor.name for descriptor in catalog.list_operations()},
        )
    )
    return server
