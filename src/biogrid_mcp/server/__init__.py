"""
BioGRID MCP Server

Main entry point for the MCP server.
Exports the main() function for running the server.
"""

from biogrid_mcp.server.core import (
    main,
    server,
    initialize_backend,
    cleanup_backend,
    get_dispatcher,
    handle_list_tools,
    handle_call_tool,
    handle_call_tool_request,
    handle_list_resource_templates,
    handle_read_resource,
)

__all__ = [
    "main",
    "server",
    "initialize_backend",
    "cleanup_backend",
    "get_dispatcher",
    "handle_list_tools",
    "handle_call_tool",
    "handle_call_tool_request",
    "handle_list_resource_templates",
    "handle_read_resource",
]
