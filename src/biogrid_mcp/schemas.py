"""
Pydantic schemas for all data structures.

Includes input schemas for tools, record schemas for raw BioGRID rows,
and output schemas for the JSON envelopes returned to the caller.
"""

from typing import Annotated, Any, ClassVar, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    model_validator,
)

from biogrid_mcp.constants import (
    DEFAULT_GENE_RESULTS,
    DEFAULT_INTERACTION_RESULTS,
    MAX_GENE_RESULTS,
    MAX_INTERACTION_RESULTS,
    MIN_RESULTS,
    InteractionType,
)

# BioGRID returns identifiers as either JSON numbers or strings depending on
# the endpoint, so they are passed through untouched.
UpstreamValue = Union[int, float, str, None]

# At least one non-whitespace character; the value itself is passed on as sent
NonEmptyStr = Annotated[str, Field(min_length=1, pattern=r"\S")]


def _reject_bool_and_str(value: Any) -> Any:
    if isinstance(value, (bool, str)):
        raise ValueError("must be a number")
    return value


# Integral floats such as 50.0 are accepted; booleans and numeric strings are not
ResultCap = Annotated[int, BeforeValidator(_reject_bool_and_str)]

# ============================================================================
# Base Models
# ============================================================================


class BaseToolInput(BaseModel):
    """Base class for all tool input schemas."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Reject unknown fields
    )


class UpstreamRecord(BaseModel):
    """Base class for raw BioGRID rows keyed by their upper-case column names."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


# ============================================================================
# Tool Inputs
# ============================================================================


class InteractionQuery(BaseToolInput):
    """
    Input for get_gene_interactions, get_physical_interactions and
    get_genetic_interactions.

    The interaction type is fixed by the tool name, not by the caller.
    """

    gene: NonEmptyStr = Field(..., description="Gene symbol or BioGRID ID")
    taxon_id: Optional[str] = Field(
        None,
        description="NCBI Taxonomy ID (e.g., '9606' for human)",
    )
    max_results: ResultCap = Field(
        default=DEFAULT_INTERACTION_RESULTS,
        ge=MIN_RESULTS,
        le=MAX_INTERACTION_RESULTS,
        description=f"Result cap ({MIN_RESULTS}-{MAX_INTERACTION_RESULTS})",
    )


class GeneSearchQuery(BaseToolInput):
    """Input for search_genes."""

    query: NonEmptyStr = Field(..., description="Gene symbol or synonym to search for")
    taxon_id: Optional[str] = Field(None, description="NCBI Taxonomy ID")
    max_results: ResultCap = Field(
        default=DEFAULT_GENE_RESULTS,
        ge=MIN_RESULTS,
        le=MAX_GENE_RESULTS,
        description=f"Result cap ({MIN_RESULTS}-{MAX_GENE_RESULTS})",
    )


class EdgeExportQuery(BaseToolInput):
    """Input for export_edge_list."""

    biogrid_ids: list[NonEmptyStr] = Field(
        ...,
        min_length=1,
        description="BioGRID gene IDs whose mutual interactions are exported",
    )
    interaction_type: InteractionType = Field(
        default=InteractionType.ALL,
        description="Edge filter: physical, genetic or all",
    )


# ============================================================================
# Upstream Records
# ============================================================================


class InteractionRecord(UpstreamRecord):
    """One interaction row from the /interactions/ endpoint."""

    biogrid_interaction_id: UpstreamValue = Field(None, alias="BIOGRID_INTERACTION_ID")
    official_symbol_a: UpstreamValue = Field(None, alias="OFFICIAL_SYMBOL_A")
    official_symbol_b: UpstreamValue = Field(None, alias="OFFICIAL_SYMBOL_B")
    biogrid_id_a: UpstreamValue = Field(None, alias="BIOGRID_ID_A")
    biogrid_id_b: UpstreamValue = Field(None, alias="BIOGRID_ID_B")
    interaction_type: UpstreamValue = Field(None, alias="INTERACTION_TYPE")
    experimental_system: UpstreamValue = Field(None, alias="EXPERIMENTAL_SYSTEM")
    experimental_system_type: UpstreamValue = Field(None, alias="EXPERIMENTAL_SYSTEM_TYPE")
    author: UpstreamValue = Field(None, alias="AUTHOR")
    pubmed_id: UpstreamValue = Field(None, alias="PUBMED_ID")
    taxon_id_a: UpstreamValue = Field(None, alias="TAXON_ID_A")
    taxon_id_b: UpstreamValue = Field(None, alias="TAXON_ID_B")
    throughput: UpstreamValue = Field(
        None, validation_alias=AliasChoices("THROUGHPUT", "THROUGH_PUT", "throughput")
    )
    score: UpstreamValue = Field(None, alias="SCORE")

    def has_system_type(self, interaction_type: InteractionType) -> bool:
        """Case-insensitive match of the experimental system type."""
        if interaction_type == InteractionType.ALL:
            return True
        if self.experimental_system_type is None:
            return False
        return str(self.experimental_system_type).lower() == interaction_type.value


class GeneRecord(UpstreamRecord):
    """One gene row from the /gene/ endpoint."""

    biogrid_id: UpstreamValue = Field(None, alias="BIOGRID_ID")
    official_symbol: UpstreamValue = Field(None, alias="OFFICIAL_SYMBOL")
    synonyms: Optional[str] = Field(None, alias="SYNONYMS")
    taxon_id: UpstreamValue = Field(None, alias="TAXON_ID")
    organism_name: UpstreamValue = Field(None, alias="ORGANISM_NAME")


# ============================================================================
# Output Envelopes
# ============================================================================


class InteractionEdge(BaseModel):
    """Projected interaction returned by the interaction tools."""

    a: UpstreamValue = Field(..., description="Official symbol of interactor A")
    b: UpstreamValue = Field(..., description="Official symbol of interactor B")
    biogrid_interaction_id: UpstreamValue
    experimental_system: UpstreamValue
    system_type: UpstreamValue
    pubmed_id: UpstreamValue


class GeneEntry(BaseModel):
    """Projected gene returned by search_genes."""

    biogrid_id: UpstreamValue
    symbol: UpstreamValue
    synonyms: list[str] = Field(default_factory=list)
    taxon_id: UpstreamValue
    organism: UpstreamValue


class CountedResponse(BaseModel):
    """Envelope whose count must match the length of its sequence field."""

    sequence_field: ClassVar[str] = ""

    @model_validator(mode="after")
    def check_count(self):
        items = getattr(self, self.sequence_field)
        if self.count != len(items):
            raise ValueError(
                f"count={self.count} does not match {len(items)} {self.sequence_field}"
            )
        return self


class InteractionResponse(CountedResponse):
    """Output of the three interaction tools."""

    sequence_field: ClassVar[str] = "edges"

    query_gene: str
    interaction_type: InteractionType
    count: int
    edges: list[InteractionEdge]


class GeneSearchResponse(CountedResponse):
    """Output of search_genes."""

    sequence_field: ClassVar[str] = "genes"

    query: str
    count: int
    genes: list[GeneEntry]


class EdgeListResponse(CountedResponse):
    """Output of export_edge_list and the edge list resource."""

    sequence_field: ClassVar[str] = "edge_list"

    edge_list: list[tuple[UpstreamValue, UpstreamValue]]
    count: int
