#!/usr/bin/env python3
"""
BioGRID MCP Server - Core Infrastructure

Contains:
- Server initialization
- Tool listing handler
- Tool call router
- Resource template listing and resource read handlers
- Backend lifecycle management
"""

import asyncio
import logging
import sys
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from pydantic import AnyUrl

from biogrid_mcp import __version__
from biogrid_mcp.clients.rest_client import BiogridClient
from biogrid_mcp.config import ConfigurationError, settings
from biogrid_mcp.constants import RESOURCE_MIME_TYPE
from biogrid_mcp.server.dispatcher import ToolDispatcher
from biogrid_mcp.server.resources import get_resource_templates, read_resource
from biogrid_mcp.server.tools_registry import get_all_tools

# Configure logging
# stdout carries the stdio transport, so logs always go to stderr
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if settings.log_format == "text"
    else '{"time":"%(asctime)s","name":"%(name)s","level":"%(levelname)s","message":"%(message)s"}',
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)

# Initialize MCP server
server = Server(settings.mcp_server_name, version=__version__)

# Global state
_client: BiogridClient | None = None
_dispatcher: ToolDispatcher | None = None


async def initialize_backend() -> ToolDispatcher:
    """
    Validate configuration and open the BioGRID client.

    Raises:
        ConfigurationError: If BIOGRID_API_KEY is missing
    """
    global _client, _dispatcher

    logger.info("Starting BioGRID MCP Server")
    settings.validate_credentials()
    logger.info(
        f"Configuration: api_base={settings.biogrid_api_base}, "
        f"timeout={settings.request_timeout_seconds}s"
    )

    _client = BiogridClient.from_settings(settings)
    _dispatcher = ToolDispatcher(_client)
    logger.info(f"✓ Dispatcher ready with tools: {', '.join(_dispatcher.tool_names)}")
    return _dispatcher


async def cleanup_backend() -> None:
    """Close the BioGRID client."""
    global _client, _dispatcher

    logger.info("Shutting down BioGRID MCP Server")
    if _client is not None:
        await _client.close()
    _client = None
    _dispatcher = None
    logger.info("✓ Connections closed")


def get_dispatcher() -> ToolDispatcher:
    """Return the active dispatcher; initialize_backend() must have run."""
    if _dispatcher is None:
        raise RuntimeError("Backend not initialized")
    return _dispatcher


@server.list_tools()
async def handle_list_tools() -> list[types.Tool]:
    """
    List all available MCP tools.

    Tool definitions are in tools_registry module.
    Handler implementations are in server/handlers/.
    """
    return get_all_tools()


async def handle_call_tool(
    name: str, arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    """
    Route tool calls through the dispatcher.

    Args:
        name: Tool name (e.g., "get_physical_interactions")
        arguments: Tool-specific parameters

    Returns:
        List with one JSON text content

    Raises:
        McpError: METHOD_NOT_FOUND, INVALID_PARAMS or INTERNAL_ERROR
    """
    return await get_dispatcher().call_tool(name, arguments)


async def handle_call_tool_request(req: types.CallToolRequest) -> types.ServerResult:
    """
    tools/call request handler.

    Registered directly rather than through @server.call_tool(), which turns
    every exception into an isError text result. Here a dispatcher McpError
    reaches the session and is sent as a JSON-RPC error with its code.
    """
    content = await handle_call_tool(req.params.name, req.params.arguments)
    return types.ServerResult(types.CallToolResult(content=content))


server.request_handlers[types.CallToolRequest] = handle_call_tool_request


@server.list_resource_templates()
async def handle_list_resource_templates() -> list[types.ResourceTemplate]:
    """List the edge list resource template."""
    return get_resource_templates()


@server.read_resource()
async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
    """
    Read biogrid://export/{biogrid_ids}.

    Raises:
        McpError: INVALID_REQUEST for a malformed URI, otherwise as export_edge_list
    """
    text = await read_resource(get_dispatcher(), str(uri))
    return [ReadResourceContents(content=text, mime_type=RESOURCE_MIME_TYPE)]


async def main():
    """Main entry point."""
    logger.info("=" * 80)
    logger.info(f"BioGRID MCP Server v{__version__} - 5 Tools, 1 Resource Template")
    logger.info("=" * 80)
    logger.info("Transport: stdio")
    logger.info(f"Log level: {settings.log_level}")
    logger.info("=" * 80)

    try:
        await initialize_backend()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    try:
        # Run server
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=settings.mcp_server_name,
                    server_version=__version__,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        await cleanup_backend()


if __name__ == "__main__":
    asyncio.run(main())
