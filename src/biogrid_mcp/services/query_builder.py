"""
Request builders: validated tool input -> BioGRID query parameters.

Every builder is a pure function. The access key and output format are
added by the client, not here.
"""

from biogrid_mcp.constants import EDGE_EXPORT_MAX_RESULTS, InteractionType
from biogrid_mcp.schemas import EdgeExportQuery, GeneSearchQuery, InteractionQuery

# BioGRID's geneList parameter takes several identifiers separated by pipes
GENE_LIST_SEPARATOR = "|"


def build_interaction_params(
    params: InteractionQuery,
    interaction_type: InteractionType,
) -> dict[str, str]:
    """
    Build /interactions/ parameters for one gene and its interactors.

    Args:
        params: Validated interaction tool input
        interaction_type: Fixed by the tool (all, physical or genetic)

    Returns:
        Query parameters with string values
    """
    query = {
        "searchNames": "true",
        "geneList": params.gene,
        "includeInteractors": "true",
        "start": "0",
        "max": str(params.max_results),
    }
    if params.taxon_id:
        query["taxonId"] = params.taxon_id

    # TODO: confirm with BioGRID whether interSpeciesExcluded belongs with the
    # type filter or should be its own tool argument; both are sent together.
    if interaction_type != InteractionType.ALL:
        query["interSpeciesExcluded"] = "true"
        query["experimentalSystemType"] = interaction_type.value

    return query


def build_gene_search_params(params: GeneSearchQuery) -> dict[str, str]:
    """Build /gene/ parameters for a symbol or synonym search."""
    query = {
        "searchNames": "true",
        "geneList": params.query,
        "start": "0",
        "max": str(params.max_results),
    }
    if params.taxon_id:
        query["taxonId"] = params.taxon_id
    return query


def build_edge_export_params(params: EdgeExportQuery) -> dict[str, str]:
    """
    Build /interactions/ parameters restricted to a fixed set of BioGRID IDs.

    includeInteractors is disabled so only edges among the supplied
    identifiers come back.
    """
    query = {
        "geneList": GENE_LIST_SEPARATOR.join(params.biogrid_ids),
        "includeInteractors": "false",
        "start": "0",
        "max": str(EDGE_EXPORT_MAX_RESULTS),
    }
    if params.interaction_type != InteractionType.ALL:
        query["experimentalSystemType"] = params.interaction_type.value
    return query
