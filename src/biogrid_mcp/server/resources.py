"""
Resource Adapter

Exposes the edge list export as a read-only resource:

    biogrid://export/{biogrid_ids}

where biogrid_ids is a comma-separated, optionally percent-encoded list of
BioGRID IDs. Reads go through the same dispatcher pipeline as the
export_edge_list tool with interaction_type fixed to "all".
"""

import logging
import re
from urllib.parse import unquote

import mcp.types as types

from biogrid_mcp.constants import (
    EDGE_LIST_URI_PREFIX,
    EDGE_LIST_URI_TEMPLATE,
    ERROR_INVALID_URI,
    RESOURCE_MIME_TYPE,
    TOOL_EXPORT_EDGE_LIST,
    InteractionType,
)
from biogrid_mcp.server.dispatcher import ToolDispatcher, mcp_error
from biogrid_mcp.services.formatter import get_formatter

logger = logging.getLogger(__name__)

EDGE_LIST_URI_PATTERN = re.compile(rf"^{re.escape(EDGE_LIST_URI_PREFIX)}(.+)$")

ID_SEPARATOR = ","

RESOURCE_TEMPLATES = [
    types.ResourceTemplate(
        uriTemplate=EDGE_LIST_URI_TEMPLATE,
        name="BioGRID edge list",
        description="Edge list JSON for a set of BIOGRID IDs",
        mimeType=RESOURCE_MIME_TYPE,
    ),
]


def get_resource_templates() -> list[types.ResourceTemplate]:
    """Return list of all resource template definitions."""
    return RESOURCE_TEMPLATES


def parse_edge_list_uri(uri: str) -> list[str]:
    """
    Extract BioGRID IDs from an edge list resource URI.

    Raises:
        McpError: INVALID_REQUEST if the URI does not match the template
    """
    match = EDGE_LIST_URI_PATTERN.match(uri)
    if not match:
        logger.warning(f"Rejected resource URI: {uri}")
        raise mcp_error(types.INVALID_REQUEST, ERROR_INVALID_URI.format(uri=uri))
    return unquote(match.group(1)).split(ID_SEPARATOR)


async def read_resource(dispatcher: ToolDispatcher, uri: str) -> str:
    """
    Read an edge list resource.

    Returns:
        The same JSON text export_edge_list returns for these IDs
    """
    biogrid_ids = parse_edge_list_uri(uri)
    envelope = await dispatcher.dispatch(
        TOOL_EXPORT_EDGE_LIST,
        {"biogrid_ids": biogrid_ids, "interaction_type": InteractionType.ALL.value},
    )
    return get_formatter().format_response(envelope)
