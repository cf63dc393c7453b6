"""
Constants used throughout the application.

Includes BioGRID endpoint paths, result caps, tool names, and standard values.
"""

from enum import Enum

# ============================================================================
# BioGRID Webservice Endpoints
# ============================================================================

INTERACTIONS_PATH = "/interactions/"
GENE_PATH = "/gene/"

# Injected into every upstream request alongside the access key
RESPONSE_FORMAT = "json"

# ============================================================================
# Result Caps
# ============================================================================

DEFAULT_INTERACTION_RESULTS = 500
MAX_INTERACTION_RESULTS = 10000

DEFAULT_GENE_RESULTS = 25
MAX_GENE_RESULTS = 100

# Edge export always requests the full webservice page
EDGE_EXPORT_MAX_RESULTS = 10000

MIN_RESULTS = 1

# ============================================================================
# Interaction Types
# ============================================================================


class InteractionType(str, Enum):
    """Experimental system type filter for interaction queries."""

    PHYSICAL = "physical"
    GENETIC = "genetic"
    ALL = "all"


# ============================================================================
# Tool Names
# ============================================================================

TOOL_GENE_INTERACTIONS = "get_gene_interactions"
TOOL_PHYSICAL_INTERACTIONS = "get_physical_interactions"
TOOL_GENETIC_INTERACTIONS = "get_genetic_interactions"
TOOL_SEARCH_GENES = "search_genes"
TOOL_EXPORT_EDGE_LIST = "export_edge_list"

# ============================================================================
# Resources
# ============================================================================

EDGE_LIST_URI_TEMPLATE = "biogrid://export/{biogrid_ids}"
EDGE_LIST_URI_PREFIX = "biogrid://export/"
RESOURCE_MIME_TYPE = "application/json"

# ============================================================================
# Standard Annotations
# ============================================================================

# Every tool is a read-only lookup against the public webservice
READONLY_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": True,
}

# ============================================================================
# Error Messages
# ============================================================================

ERROR_UNKNOWN_TOOL = "Unknown tool: {name}"

ERROR_INVALID_URI = "Invalid biogrid URI: {uri}"

ERROR_INTERACTIONS = "BioGRID API error: {message}"
ERROR_GENE_SEARCH = "BioGRID gene search error: {message}"
ERROR_EDGE_EXPORT = "BioGRID edge export error: {message}"
