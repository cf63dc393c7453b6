"""
Client for the BioGRID REST webservice.
"""

from biogrid_mcp.clients.rest_client import BiogridAPIError, BiogridClient

__all__ = ["BiogridAPIError", "BiogridClient"]
