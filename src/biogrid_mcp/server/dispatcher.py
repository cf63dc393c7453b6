"""
Tool Dispatcher

Maps a tool name to its (input schema, handler) route, validates the
arguments before any network call, runs the handler, and translates every
failure into a typed MCP error:

- unknown tool            -> METHOD_NOT_FOUND
- bad or missing argument -> INVALID_PARAMS
- upstream failure        -> INTERNAL_ERROR (upstream message attached)
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any

import mcp.types as types
from mcp.shared.exceptions import McpError
from pydantic import BaseModel, ValidationError

from biogrid_mcp.clients.rest_client import BiogridAPIError, BiogridClient
from biogrid_mcp.constants import (
    ERROR_EDGE_EXPORT,
    ERROR_GENE_SEARCH,
    ERROR_INTERACTIONS,
    ERROR_UNKNOWN_TOOL,
    TOOL_EXPORT_EDGE_LIST,
    TOOL_GENE_INTERACTIONS,
    TOOL_GENETIC_INTERACTIONS,
    TOOL_PHYSICAL_INTERACTIONS,
    TOOL_SEARCH_GENES,
    InteractionType,
)
from biogrid_mcp.schemas import (
    BaseToolInput,
    EdgeExportQuery,
    GeneSearchQuery,
    InteractionQuery,
)
from biogrid_mcp.server.handlers import edge_export, gene_search, interactions
from biogrid_mcp.services.formatter import get_formatter

logger = logging.getLogger(__name__)


def mcp_error(code: int, message: str) -> McpError:
    """Build an McpError carrying a JSON-RPC error code."""
    return McpError(types.ErrorData(code=code, message=message))


@dataclass(frozen=True)
class ToolRoute:
    """How one tool is validated, executed, and reported on failure."""

    input_model: type[BaseToolInput]
    handler: Callable[[BiogridClient, Any], Awaitable[BaseModel]]
    error_message: str


TOOL_ROUTES: Mapping[str, ToolRoute] = {
    TOOL_GENE_INTERACTIONS: ToolRoute(
        InteractionQuery,
        partial(interactions.handle, interaction_type=InteractionType.ALL),
        ERROR_INTERACTIONS,
    ),
    TOOL_PHYSICAL_INTERACTIONS: ToolRoute(
        InteractionQuery,
        partial(interactions.handle, interaction_type=InteractionType.PHYSICAL),
        ERROR_INTERACTIONS,
    ),
    TOOL_GENETIC_INTERACTIONS: ToolRoute(
        InteractionQuery,
        partial(interactions.handle, interaction_type=InteractionType.GENETIC),
        ERROR_INTERACTIONS,
    ),
    TOOL_SEARCH_GENES: ToolRoute(
        GeneSearchQuery,
        gene_search.handle,
        ERROR_GENE_SEARCH,
    ),
    TOOL_EXPORT_EDGE_LIST: ToolRoute(
        EdgeExportQuery,
        edge_export.handle,
        ERROR_EDGE_EXPORT,
    ),
}


def format_validation_error(error: ValidationError) -> str:
    """Summarize pydantic errors as 'field: message' pairs."""
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "arguments"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


class ToolDispatcher:
    """
    Route named tool invocations through their pipelines.

    Holds only the shared, read-only BioGRID client.
    """

    def __init__(
        self,
        client: BiogridClient,
        routes: Mapping[str, ToolRoute] = TOOL_ROUTES,
    ):
        self._client = client
        self._routes = routes

    @property
    def tool_names(self) -> list[str]:
        """Registered tool names."""
        return list(self._routes)

    def validate(self, name: str, arguments: Any) -> tuple[ToolRoute, BaseToolInput]:
        """
        Resolve the route and validate arguments without touching the network.

        Raises:
            McpError: METHOD_NOT_FOUND or INVALID_PARAMS
        """
        route = self._routes.get(name)
        if route is None:
            logger.warning(f"Unknown tool requested: {name}")
            raise mcp_error(types.METHOD_NOT_FOUND, ERROR_UNKNOWN_TOOL.format(name=name))

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise mcp_error(
                types.INVALID_PARAMS,
                f"Invalid arguments for {name}: expected an object",
            )

        try:
            params = route.input_model.model_validate(dict(arguments))
        except ValidationError as e:
            message = f"Invalid arguments for {name}: {format_validation_error(e)}"
            logger.warning(message)
            raise mcp_error(types.INVALID_PARAMS, message) from e

        return route, params

    async def dispatch(self, name: str, arguments: Any) -> BaseModel:
        """
        Validate, execute, and return the tool's envelope.

        Raises:
            McpError: METHOD_NOT_FOUND, INVALID_PARAMS or INTERNAL_ERROR
        """
        route, params = self.validate(name, arguments)

        try:
            return await route.handler(self._client, params)
        except BiogridAPIError as e:
            logger.error(f"Tool error in {name}: {e}")
            raise mcp_error(
                types.INTERNAL_ERROR, route.error_message.format(message=e)
            ) from e

    async def call_tool(self, name: str, arguments: Any) -> list[types.TextContent]:
        """Dispatch and wrap the envelope as MCP text content."""
        envelope = await self.dispatch(name, arguments)
        return get_formatter().to_text_content(envelope)
