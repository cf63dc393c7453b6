"""
Tool Registry - All 5 MCP Tool Definitions

This module contains the tool definitions (schemas and descriptions)
for the BioGRID MCP tools. Arguments are enforced by the pydantic models
in biogrid_mcp.schemas at dispatch time.
"""

import mcp.types as types

from biogrid_mcp.constants import (
    DEFAULT_GENE_RESULTS,
    DEFAULT_INTERACTION_RESULTS,
    MAX_GENE_RESULTS,
    MAX_INTERACTION_RESULTS,
    MIN_RESULTS,
    READONLY_ANNOTATIONS,
    TOOL_EXPORT_EDGE_LIST,
    TOOL_GENE_INTERACTIONS,
    TOOL_GENETIC_INTERACTIONS,
    TOOL_PHYSICAL_INTERACTIONS,
    TOOL_SEARCH_GENES,
    InteractionType,
)


def get_all_tools() -> list[types.Tool]:
    """Return list of all tool definitions."""
    return TOOL_DEFINITIONS


def _interaction_schema() -> dict:
    return {
        "type": "object",
        "properties": {
            "gene": {
                "type": "string",
                "description": "Gene symbol or BioGRID ID (e.g., 'TP53' or '113010')",
            },
            "taxon_id": {
                "type": "string",
                "description": "NCBI Taxonomy ID (optional, e.g., '9606' for human)",
            },
            "max_results": {
                "type": "integer",
                "minimum": MIN_RESULTS,
                "maximum": MAX_INTERACTION_RESULTS,
                "default": DEFAULT_INTERACTION_RESULTS,
                "description": f"Result cap (default {DEFAULT_INTERACTION_RESULTS})",
            },
        },
        "required": ["gene"],
        "additionalProperties": False,
    }


_ANNOTATIONS = types.ToolAnnotations(**READONLY_ANNOTATIONS)

TOOL_DEFINITIONS = [
    # Tool 1: All interactions
    types.Tool(
        name=TOOL_GENE_INTERACTIONS,
        description="""Retrieve all physical and genetic interactions for a gene symbol or BioGRID ID.

Returns one edge per reported interaction with both interactor symbols, the
BioGRID interaction ID, the experimental system, its type, and the PubMed ID.

Examples:
- All TP53 interactions in human: gene="TP53", taxon_id="9606"
- First 50 interactions for yeast CDC28: gene="CDC28", taxon_id="559292", max_results=50
""",
        inputSchema=_interaction_schema(),
        annotations=_ANNOTATIONS,
    ),
    # Tool 2: Physical interactions
    types.Tool(
        name=TOOL_PHYSICAL_INTERACTIONS,
        description="""Retrieve only PHYSICAL interactions for a gene.

Inter-species interactions are excluded. Useful for protein complex and
binding partner discovery (e.g., Affinity Capture-MS, Two-hybrid).
""",
        inputSchema=_interaction_schema(),
        annotations=_ANNOTATIONS,
    ),
    # Tool 3: Genetic interactions
    types.Tool(
        name=TOOL_GENETIC_INTERACTIONS,
        description="""Retrieve only GENETIC interactions for a gene.

Inter-species interactions are excluded. Useful for synthetic lethality and
epistasis analysis (e.g., Synthetic Lethality, Dosage Rescue).
""",
        inputSchema=_interaction_schema(),
        annotations=_ANNOTATIONS,
    ),
    # Tool 4: Gene search
    types.Tool(
        name=TOOL_SEARCH_GENES,
        description="""Search BioGRID for genes matching a query string.

Matches official symbols and synonyms. Returns BioGRID ID, symbol,
synonyms, taxonomy ID and organism for each hit. Use the BioGRID IDs with
export_edge_list.
""",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Gene symbol or synonym"},
                "taxon_id": {"type": "string", "description": "NCBI Taxonomy ID (optional)"},
                "max_results": {
                    "type": "integer",
                    "minimum": MIN_RESULTS,
                    "maximum": MAX_GENE_RESULTS,
                    "default": DEFAULT_GENE_RESULTS,
                    "description": f"Result cap (default {DEFAULT_GENE_RESULTS})",
                },
            },
            "required": ["query"],
            "additionalProperties": False,
        },
        annotations=_ANNOTATIONS,
    ),
    # Tool 5: Edge list export
    types.Tool(
        name=TOOL_EXPORT_EDGE_LIST,
        description="""Export edge list for a set of BioGRID gene IDs.

Only interactions strictly among the supplied IDs are returned, as
[symbol A, symbol B] pairs suitable for graph tooling. Also available as
the resource biogrid://export/{biogrid_ids}.
""",
        inputSchema={
            "type": "object",
            "properties": {
                "biogrid_ids": {
                    "type": "array",
                    "items": {"type": "string"},
                    "minItems": 1,
                    "description": "Array of BioGRID IDs.",
                },
                "interaction_type": {
                    "type": "string",
                    "enum": [t.value for t in InteractionType],
                    "default": InteractionType.ALL.value,
                    "description": "Edge filter.",
                },
            },
            "required": ["biogrid_ids"],
            "additionalProperties": False,
        },
        annotations=_ANNOTATIONS,
    ),
]
