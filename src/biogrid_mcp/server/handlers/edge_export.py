"""
Edge list export for a fixed set of BioGRID IDs.

Also backs the biogrid://export/{biogrid_ids} resource.
"""

import logging

from biogrid_mcp.clients.rest_client import BiogridClient
from biogrid_mcp.constants import INTERACTIONS_PATH
from biogrid_mcp.schemas import EdgeExportQuery, EdgeListResponse
from biogrid_mcp.services.normalizer import normalize_edge_list
from biogrid_mcp.services.query_builder import build_edge_export_params

logger = logging.getLogger(__name__)


async def handle(client: BiogridClient, params: EdgeExportQuery) -> EdgeListResponse:
    """Export [symbol A, symbol B] pairs among params.biogrid_ids."""
    raw_records = await client.call(INTERACTIONS_PATH, build_edge_export_params(params))

    response = normalize_edge_list(raw_records)
    logger.info(
        f"Edge export for {len(params.biogrid_ids)} IDs "
        f"({params.interaction_type.value}): {response.count} edges"
    )
    return response
