"""
Gene search by symbol or synonym.
"""

import logging

from biogrid_mcp.clients.rest_client import BiogridClient
from biogrid_mcp.constants import GENE_PATH
from biogrid_mcp.schemas import GeneSearchQuery, GeneSearchResponse
from biogrid_mcp.services.normalizer import normalize_genes
from biogrid_mcp.services.query_builder import build_gene_search_params

logger = logging.getLogger(__name__)


async def handle(client: BiogridClient, params: GeneSearchQuery) -> GeneSearchResponse:
    """Search the BioGRID gene catalog."""
    raw_records = await client.call(GENE_PATH, build_gene_search_params(params))

    response = normalize_genes(raw_records, params.query)
    logger.info(f"Gene search '{params.query}': {response.count} matches")
    return response
