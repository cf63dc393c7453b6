"""
Response normalizers: raw BioGRID rows -> tool output envelopes.

Raw rows are parsed into record models first so a malformed upstream
payload fails loudly instead of producing a partial envelope.
"""

import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from biogrid_mcp.clients.rest_client import BiogridAPIError
from biogrid_mcp.constants import InteractionType
from biogrid_mcp.schemas import (
    EdgeListResponse,
    GeneEntry,
    GeneRecord,
    GeneSearchResponse,
    InteractionEdge,
    InteractionRecord,
    InteractionResponse,
    UpstreamRecord,
)

logger = logging.getLogger(__name__)

SYNONYM_SEPARATOR = "|"

# BioGRID's placeholder for an empty column
EMPTY_VALUE = "-"

RecordT = TypeVar("RecordT", bound=UpstreamRecord)


def parse_records(raw_records: list[dict[str, Any]], model: type[RecordT]) -> list[RecordT]:
    """
    Parse raw rows into record models.

    Raises:
        BiogridAPIError: If a row does not match the expected shape
    """
    try:
        return [model.model_validate(raw) for raw in raw_records]
    except ValidationError as e:
        logger.error(f"Malformed {model.__name__} in BioGRID response: {e}")
        raise BiogridAPIError(f"Malformed {model.__name__} in response: {e}") from e


def split_synonyms(value: str | None) -> list[str]:
    """Split a pipe-delimited synonym column, preserving order."""
    if not value or value == EMPTY_VALUE:
        return []
    return value.split(SYNONYM_SEPARATOR)


def normalize_interactions(
    raw_records: list[dict[str, Any]],
    query_gene: str,
    interaction_type: InteractionType,
) -> InteractionResponse:
    """
    Filter and project interaction rows.

    Upstream applies experimentalSystemType itself, but its matching is
    string-based, so type-restricted results are re-checked here.
    """
    records = parse_records(raw_records, InteractionRecord)
    kept = [r for r in records if r.has_system_type(interaction_type)]

    dropped = len(records) - len(kept)
    if dropped:
        logger.debug(
            f"Dropped {dropped} interactions not matching type '{interaction_type.value}'"
        )

    edges = [
        InteractionEdge(
            a=r.official_symbol_a,
            b=r.official_symbol_b,
            biogrid_interaction_id=r.biogrid_interaction_id,
            experimental_system=r.experimental_system,
            system_type=r.experimental_system_type,
            pubmed_id=r.pubmed_id,
        )
        for r in kept
    ]

    return InteractionResponse(
        query_gene=query_gene,
        interaction_type=interaction_type,
        count=len(edges),
        edges=edges,
    )


def normalize_genes(raw_records: list[dict[str, Any]], query: str) -> GeneSearchResponse:
    """Project gene rows, splitting synonyms into a list."""
    genes = [
        GeneEntry(
            biogrid_id=r.biogrid_id,
            symbol=r.official_symbol,
            synonyms=split_synonyms(r.synonyms),
            taxon_id=r.taxon_id,
            organism=r.organism_name,
        )
        for r in parse_records(raw_records, GeneRecord)
    ]
    return GeneSearchResponse(query=query, count=len(genes), genes=genes)


def normalize_edge_list(raw_records: list[dict[str, Any]]) -> EdgeListResponse:
    """Reduce interaction rows to bare [symbol A, symbol B] pairs."""
    edge_list = [
        (r.official_symbol_a, r.official_symbol_b)
        for r in parse_records(raw_records, InteractionRecord)
    ]
    return EdgeListResponse(edge_list=edge_list, count=len(edge_list))
