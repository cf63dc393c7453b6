"""
Pytest fixtures for integration tests against the live BioGRID webservice.

Skipped unless BIOGRID_API_KEY is configured.
"""

import logging

import pytest

from biogrid_mcp.clients.rest_client import BiogridClient
from biogrid_mcp.config import settings
from biogrid_mcp.server.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)


def pytest_collection_modifyitems(config, items):
    """Skip live tests when no access key is available."""
    if settings.has_api_key:
        return
    skip_live = pytest.mark.skip(reason="BIOGRID_API_KEY not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
async def live_dispatcher() -> ToolDispatcher:
    """
    Dispatcher over a real BiogridClient.

    Function-scoped so the client lives in the test's event loop.
    """
    client = BiogridClient.from_settings(settings.validate_credentials())
    logger.info("Opened live BioGRID client")
    yield ToolDispatcher(client)
    await client.close()
