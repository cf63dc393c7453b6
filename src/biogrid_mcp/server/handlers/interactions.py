"""
Gene, physical and genetic interaction queries.

One pipeline serves three tools; the tool name fixes the interaction type.
"""

import logging

from biogrid_mcp.clients.rest_client import BiogridClient
from biogrid_mcp.constants import INTERACTIONS_PATH, InteractionType
from biogrid_mcp.schemas import InteractionQuery, InteractionResponse
from biogrid_mcp.services.normalizer import normalize_interactions
from biogrid_mcp.services.query_builder import build_interaction_params

logger = logging.getLogger(__name__)


async def handle(
    client: BiogridClient,
    params: InteractionQuery,
    interaction_type: InteractionType = InteractionType.ALL,
) -> InteractionResponse:
    """Fetch interactions for one gene, filtered to interaction_type."""
    query = build_interaction_params(params, interaction_type)
    raw_records = await client.call(INTERACTIONS_PATH, query)

    response = normalize_interactions(raw_records, params.gene, interaction_type)
    logger.info(
        f"Interactions for '{params.gene}' ({interaction_type.value}): "
        f"{response.count} of {len(raw_records)} upstream records"
    )
    return response
