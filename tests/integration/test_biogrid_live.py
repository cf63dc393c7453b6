"""
Live smoke tests: every tool and the edge list resource against BioGRID.

Run with: BIOGRID_API_KEY=... pytest tests/integration -v -m integration
"""

import pytest

from biogrid_mcp.server.resources import read_resource
from tests.integration.utils import assert_counted, assert_json, assert_keys

# TP53 and MDM2 human BioGRID IDs
TP53_BIOGRID_ID = "113010"
MDM2_BIOGRID_ID = "110358"


async def _call_tool(dispatcher, name: str, arguments: dict):
    result = await dispatcher.call_tool(name, arguments)
    assert len(result) == 1
    return assert_json(result[0].text)


@pytest.mark.integration
class TestLiveTools:
    """Representative calls for each tool."""

    async def test_gene_interactions(self, live_dispatcher):
        data = await _call_tool(
            live_dispatcher,
            "get_gene_interactions",
            {"gene": "TP53", "taxon_id": "9606", "max_results": 20},
        )

        assert_keys(data, ["query_gene", "interaction_type", "edges"])
        assert_counted(data, "edges")

    @pytest.mark.parametrize(
        "tool,interaction_type",
        [
            ("get_physical_interactions", "physical"),
            ("get_genetic_interactions", "genetic"),
        ],
    )
    async def test_typed_interactions(self, live_dispatcher, tool, interaction_type):
        data = await _call_tool(
            live_dispatcher, tool, {"gene": "TP53", "taxon_id": "9606", "max_results": 50}
        )

        assert data["interaction_type"] == interaction_type
        assert_counted(data, "edges", min_len=0)
        assert all(e["system_type"].lower() == interaction_type for e in data["edges"])

    async def test_search_genes(self, live_dispatcher):
        data = await _call_tool(
            live_dispatcher, "search_genes", {"query": "PIK3R1", "taxon_id": "9606"}
        )

        assert_counted(data, "genes")
        assert all(isinstance(g["synonyms"], list) for g in data["genes"])

    async def test_export_edge_list(self, live_dispatcher):
        data = await _call_tool(
            live_dispatcher,
            "export_edge_list",
            {"biogrid_ids": [TP53_BIOGRID_ID, MDM2_BIOGRID_ID]},
        )

        assert_counted(data, "edge_list", min_len=0)
        assert all(len(pair) == 2 for pair in data["edge_list"])

    async def test_edge_list_resource(self, live_dispatcher):
        text = await read_resource(
            live_dispatcher, f"biogrid://export/{TP53_BIOGRID_ID},{MDM2_BIOGRID_ID}"
        )

        assert_counted(assert_json(text), "edge_list", min_len=0)
