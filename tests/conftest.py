"""
Shared pytest fixtures.

Provides:
- Canned BioGRID webservice rows (interactions and genes)
- A stub upstream client that counts calls and replays canned rows
- A dispatcher wired to the stub client
"""

import copy
from typing import Any

import pytest

from biogrid_mcp.clients.rest_client import BiogridAPIError
from biogrid_mcp.server.dispatcher import ToolDispatcher


def make_interaction(
    interaction_id: int,
    symbol_a: str,
    symbol_b: str,
    system: str,
    system_type: str,
    pubmed_id: int = 9006895,
) -> dict[str, Any]:
    """One /interactions/ row in BioGRID's format=json shape."""
    return {
        "BIOGRID_INTERACTION_ID": interaction_id,
        "ENTREZ_GENE_A": "7157",
        "ENTREZ_GENE_B": "4193",
        "BIOGRID_ID_A": 113010,
        "BIOGRID_ID_B": 110358,
        "OFFICIAL_SYMBOL_A": symbol_a,
        "OFFICIAL_SYMBOL_B": symbol_b,
        "EXPERIMENTAL_SYSTEM": system,
        "EXPERIMENTAL_SYSTEM_TYPE": system_type,
        "INTERACTION_TYPE": system_type,
        "AUTHOR": "Haupt Y (1997)",
        "PUBMED_ID": pubmed_id,
        "ORGANISM_A": 9606,
        "ORGANISM_B": 9606,
        "TAXON_ID_A": "9606",
        "TAXON_ID_B": "9606",
        "THROUGHPUT": "Low Throughput",
        "QUANTITATION": "-",
        "SCORE": "-",
    }


@pytest.fixture
def interaction_records() -> list[dict[str, Any]]:
    """
    Mixed physical and genetic TP53 interactions.

    System types vary in case to exercise case-insensitive filtering.
    """
    return [
        make_interaction(103, "TP53", "MDM2", "Affinity Capture-Western", "physical"),
        make_interaction(104, "TP53", "MDM2", "Two-hybrid", "Physical"),
        make_interaction(105, "TP53", "ATM", "Synthetic Lethality", "genetic"),
        make_interaction(106, "TP53", "EP300", "Reconstituted Complex", "physical"),
        make_interaction(107, "TP53", "BRCA1", "Dosage Rescue", "GENETIC"),
    ]


@pytest.fixture
def gene_records() -> list[dict[str, Any]]:
    """/gene/ rows for a PIK3R1 search."""
    return [
        {
            "BIOGRID_ID": 111183,
            "OFFICIAL_SYMBOL": "PIK3R1",
            "SYNONYMS": "p85|PIK3R1|PIK3R2",
            "TAXON_ID": 9606,
            "ORGANISM_NAME": "Homo sapiens",
        },
        {
            "BIOGRID_ID": 202139,
            "OFFICIAL_SYMBOL": "Pik3r1",
            "SYNONYMS": "-",
            "TAXON_ID": 10090,
            "ORGANISM_NAME": "Mus musculus",
        },
    ]


class StubBiogridClient:
    """
    Stand-in for BiogridClient.

    Replays canned rows (deep-copied per call) and records every call so
    tests can assert on the number of network round-trips.
    """

    def __init__(
        self,
        records: list[dict[str, Any]] | None = None,
        error: Exception | None = None,
    ):
        self.records = records or []
        self.error = error
        self.calls: list[tuple[str, dict[str, str]]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def call(self, path: str, params: dict[str, str]) -> list[dict[str, Any]]:
        self.calls.append((path, dict(params)))
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.records)


@pytest.fixture
def stub_client(interaction_records) -> StubBiogridClient:
    """Stub client serving the canned interaction rows."""
    return StubBiogridClient(records=interaction_records)


@pytest.fixture
def gene_stub_client(gene_records) -> StubBiogridClient:
    """Stub client serving the canned gene rows."""
    return StubBiogridClient(records=gene_records)


@pytest.fixture
def failing_client() -> StubBiogridClient:
    """Stub client whose every call fails like a timed-out request."""
    return StubBiogridClient(
        error=BiogridAPIError("Request to /interactions/ timed out after 20.0s")
    )


@pytest.fixture
def dispatcher(stub_client) -> ToolDispatcher:
    """Dispatcher over the interaction stub client."""
    return ToolDispatcher(stub_client)


@pytest.fixture
def stub_client_factory():
    """Build stub clients with custom rows or errors."""
    return StubBiogridClient
