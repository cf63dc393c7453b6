"""
Services layer: request building, response normalization, and formatting.
"""

from biogrid_mcp.services.formatter import ResponseFormatter
from biogrid_mcp.services.normalizer import (
    normalize_edge_list,
    normalize_genes,
    normalize_interactions,
)
from biogrid_mcp.services.query_builder import (
    build_edge_export_params,
    build_gene_search_params,
    build_interaction_params,
)

__all__ = [
    "ResponseFormatter",
    "build_edge_export_params",
    "build_gene_search_params",
    "build_interaction_params",
    "normalize_edge_list",
    "normalize_genes",
    "normalize_interactions",
]
