"""
BioGRID MCP Tool Handlers

Each module runs the builder -> client -> normalizer pipeline for one family
of tools. All handlers expose `handle(client, params, ...)` and return a
pydantic envelope; error translation happens in the dispatcher.
"""

from biogrid_mcp.server.handlers import edge_export, gene_search, interactions

__all__ = [
    "edge_export",
    "gene_search",
    "interactions",
]
