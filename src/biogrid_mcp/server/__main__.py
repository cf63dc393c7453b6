"""
Entry point for running the BioGRID MCP server as a module.

Usage:
    python -m biogrid_mcp.server
    biogrid-mcp
"""

import asyncio

from biogrid_mcp.server import main


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
