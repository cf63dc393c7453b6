"""
BioGRID MCP Server

Model Context Protocol server exposing the BioGRID interaction database
REST webservice as schema-described tools and resources.

Provides 5 tools (gene, physical and genetic interactions, gene search,
edge list export) and 1 resource template (edge list by BioGRID IDs).
"""

__version__ = "1.0.0"
__author__ = "BioGRID MCP Team"

# Lazy import to avoid MCP dependency for standalone usage
def __getattr__(name):
    if name == "server":
        from biogrid_mcp.server import server
        return server
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = ["server", "__version__"]
