"""
Pydantic schemas for all data structures.

Includes input schemas for tools, result schemas for the remote GraphQL
payloads, and output schemas for normalized responses.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, ValidationError

from opentargets_mcp.constants import (
    DEFAULT_DISEASE_ID,
    DEFAULT_EVIDENCE_DATASOURCES,
    DEFAULT_EVIDENCE_SIZE,
    DEFAULT_ORDER_BY_SCORE,
    DEFAULT_PAGE_INDEX,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TARGET_ID,
)
from opentargets_mcp.errors import InputValidationError, MissingFieldError


def _describe(error: ValidationError) -> str:
    """Flatten a ValidationError into 'loc: msg; loc: msg'."""
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or '<root>'}: {item['msg']}"
        for item in error.errors()
    )


# ============================================================================
# Base Models
# ============================================================================


class BaseToolInput(BaseModel):
    """Base class for all tool input schemas."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",  # Reject unknown fields
    )

    @classmethod
    def from_arguments(cls, arguments: Optional[dict[str, Any]]):
        """
        Validate raw MCP tool arguments.

        Raises:
            InputValidationError: If required fields are missing or malformed.
        """
        try:
            return cls.model_validate(arguments or {})
        except ValidationError as e:
            raise InputValidationError(f"Invalid arguments: {_describe(e)}") from e


class RemoteModel(BaseModel):
    """
    Base class for remote GraphQL payloads.

    Fields the tools rely on are declared without defaults so that a payload
    missing them fails to parse instead of yielding partial output.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    @classmethod
    def parse(cls, data: Any):
        """
        Parse a GraphQL ``data`` object.

        Raises:
            MissingFieldError: If the payload does not match the expected shape.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MissingFieldError(f"Unexpected response shape: {_describe(e)}") from e


class OutputModel(BaseModel):
    """Base class for normalized, immutable tool output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ============================================================================
# Common Output Types
# ============================================================================


class NamedEntity(OutputModel):
    """Entity reference with identifier and display name."""

    id: str = Field(..., description="Entity identifier")
    name: Optional[str] = Field(..., description="Display name")


class ResultCount(OutputModel):
    """Total rows reported by the API vs rows in this response."""

    count: int = Field(..., description="Total number of results")
    returned: int = Field(..., description="Number of results in this response")


# ============================================================================
# Tool 1: target_disease_associations
# ============================================================================


class Pagination(BaseModel):
    """Page window passed through to the API."""

    model_config = ConfigDict(extra="forbid")

    index: StrictInt = Field(
        default=DEFAULT_PAGE_INDEX,
        ge=0,
        description="Page index (zero-based)",
    )
    size: StrictInt = Field(
        default=DEFAULT_PAGE_SIZE,
        gt=0,
        description="Number of results per page",
    )


class DatasourceSettings(BaseModel):
    """Per-datasource scoring override."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., description="Datasource identifier (e.g. 'gwas_credible_sets')")
    weight: float = Field(..., description="Weight applied to this datasource's scores")
    propagate: StrictBool = Field(..., description="Propagate evidence up the disease ontology")
    required: StrictBool = Field(
        default=False,
        description="Only keep associations with evidence from this datasource",
    )


class TargetDiseaseAssociationsQuery(BaseToolInput):
    """
    Input for target_disease_associations tool.

    All fields except include_disease_details are forwarded to the
    targetAssociatedDiseases query.
    """

    target_id: str = Field(
        ...,
        alias="targetId",
        min_length=1,
        description="Ensembl gene ID (e.g., ENSG00000157764)",
    )
    page: Pagination = Field(
        ...,
        description="Pagination parameters",
    )
    order_by_score: str = Field(
        default=DEFAULT_ORDER_BY_SCORE,
        alias="orderByScore",
        description="Order results by datasource or score - score is default",
    )
    disease_ids: Optional[list[str]] = Field(
        default=None,
        alias="Bs",
        description="Filter by list of disease IDs",
    )
    datasources: Optional[list[DatasourceSettings]] = Field(
        default=None,
        description="List of datasource settings",
    )
    enable_indirect: StrictBool = Field(
        default=False,
        alias="enableIndirect",
        description="Utilize target interactions to retrieve all associated diseases",
    )
    facet_filters: Optional[list[str]] = Field(
        default=None,
        alias="facetFilters",
        description="List of facet IDs to filter by (using AND)",
    )
    b_filter: str = Field(
        default="",
        alias="BFilter",
        description="Filter to apply to the IDs with string prefixes",
    )
    include_disease_details: StrictBool = Field(
        default=False,
        alias="includeDiseaseDetails",
        description="Include disease description and therapeutic areas in each row",
    )


class TherapeuticArea(RemoteModel):
    id: str
    name: str


class AssociatedDiseaseResult(RemoteModel):
    id: str
    name: str
    description: Optional[str]
    therapeutic_areas: Optional[list[TherapeuticArea]] = Field(..., alias="therapeuticAreas")


class DatasourceScoreResult(RemoteModel):
    id: str
    score: float


class AssociationRowResult(RemoteModel):
    disease: AssociatedDiseaseResult
    score: float
    datasource_scores: Optional[list[DatasourceScoreResult]] = Field(
        default=None, alias="datasourceScores"
    )


class AssociatedDiseasesResult(RemoteModel):
    count: int
    rows: list[AssociationRowResult]


class AssociatedTargetResult(RemoteModel):
    id: str
    approved_symbol: str = Field(..., alias="approvedSymbol")
    approved_name: Optional[str] = Field(..., alias="approvedName")
    biotype: Optional[str]
    associated_diseases: AssociatedDiseasesResult = Field(..., alias="associatedDiseases")


class TargetAssociationsResult(RemoteModel):
    """Parsed ``data`` of the targetAssociatedDiseases query."""

    target: AssociatedTargetResult


class TargetSummary(OutputModel):
    id: str
    symbol: str
    name: Optional[str]
    biotype: Optional[str]


class AssociationsSummary(OutputModel):
    target: TargetSummary
    disease_associations: ResultCount = Field(..., alias="diseaseAssociations")


class AssociatedDisease(OutputModel):
    """Disease in an association row; details only when requested."""

    id: str
    name: str
    description: Optional[str] = None
    therapeutic_areas: Optional[list[NamedEntity]] = Field(default=None, alias="therapeuticAreas")


class EvidenceScore(OutputModel):
    source: str = Field(..., description="Datasource identifier")
    score: float


class AssociationRecord(OutputModel):
    disease: AssociatedDisease
    overall_score: float = Field(..., alias="overallScore")
    evidence_scores: list[EvidenceScore] = Field(..., alias="evidenceScores")


class AssociationsResponse(OutputModel):
    """Normalized output of target_disease_associations."""

    summary: AssociationsSummary
    associations: list[AssociationRecord]


# ============================================================================
# Tool 2: disease_evidence
# ============================================================================


class DiseaseEvidenceQuery(BaseToolInput):
    """Input for disease_evidence tool."""

    disease_id: str = Field(
        default=DEFAULT_DISEASE_ID,
        alias="diseaseId",
        min_length=1,
        description="EFO disease ID (e.g., EFO_0006335)",
    )
    target_id: str = Field(
        default=DEFAULT_TARGET_ID,
        alias="targetId",
        min_length=1,
        description="Ensembl gene ID (e.g., ENSG00000091157)",
    )
    datasource_ids: Optional[list[str]] = Field(
        default=list(DEFAULT_EVIDENCE_DATASOURCES),
        alias="datasourceIds",
        description="Datasource IDs to filter evidence by (e.g., gwas_credible_sets)",
    )
    enable_indirect: StrictBool = Field(
        default=True,
        alias="enableIndirect",
        description="Include evidence for descendant diseases in the ontology",
    )
    size: StrictInt = Field(
        default=DEFAULT_EVIDENCE_SIZE,
        gt=0,
        description="Maximum number of evidence rows to return",
    )


class EvidenceTargetResult(RemoteModel):
    id: str
    approved_symbol: str = Field(..., alias="approvedSymbol")
    approved_name: Optional[str] = Field(..., alias="approvedName")


class EvidenceDiseaseResult(RemoteModel):
    id: str
    name: str


class EvidenceUrlResult(RemoteModel):
    nice_name: Optional[str] = Field(default=None, alias="niceName")
    url: str


class TextMiningSentenceResult(RemoteModel):
    text: str
    t_start: Optional[int] = Field(default=None, alias="tStart")
    t_end: Optional[int] = Field(default=None, alias="tEnd")
    d_start: Optional[int] = Field(default=None, alias="dStart")
    d_end: Optional[int] = Field(default=None, alias="dEnd")
    section: Optional[str] = None


class EvidenceRowResult(RemoteModel):
    id: str
    score: float
    datatype_id: str = Field(..., alias="datatypeId")
    datasource_id: str = Field(..., alias="datasourceId")
    target: EvidenceTargetResult
    disease: EvidenceDiseaseResult
    urls: Optional[list[EvidenceUrlResult]] = None
    literature: Optional[list[str]] = None
    publication_first_author: Optional[str] = Field(default=None, alias="publicationFirstAuthor")
    publication_year: Optional[int] = Field(default=None, alias="publicationYear")
    text_mining_sentences: Optional[list[TextMiningSentenceResult]] = Field(
        default=None, alias="textMiningSentences"
    )


class EvidencesResult(RemoteModel):
    count: int
    rows: list[EvidenceRowResult]


class EvidenceRootDiseaseResult(RemoteModel):
    id: str
    name: str
    evidences: EvidencesResult


class EvidenceRootTargetResult(RemoteModel):
    id: str
    approved_symbol: str = Field(..., alias="approvedSymbol")


class DiseaseEvidenceResult(RemoteModel):
    """Parsed ``data`` of the diseaseEvidence query."""

    target: Optional[EvidenceRootTargetResult] = None
    disease: EvidenceRootDiseaseResult


class TargetRef(OutputModel):
    id: str
    symbol: Optional[str]


class EvidenceTarget(OutputModel):
    id: str
    symbol: str
    name: Optional[str]


class SourceLink(OutputModel):
    name: Optional[str]
    url: str


class LiteratureRef(OutputModel):
    publication_id: str = Field(..., alias="publicationId")
    title: Optional[str]


class MatchedTerm(OutputModel):
    type: str = Field(..., description="'target' or 'disease'")
    term: str


class TextMiningMatch(OutputModel):
    text: str
    matched_terms: list[MatchedTerm] = Field(..., alias="matchedTerms")


class EvidenceRecord(OutputModel):
    """Evidence row; source, literature and textMining only when present remotely."""

    id: str
    score: float
    data_type: str = Field(..., alias="dataType")
    datasource_id: str = Field(..., alias="datasourceId")
    target: EvidenceTarget
    disease: NamedEntity
    source: Optional[SourceLink] = None
    literature: Optional[LiteratureRef] = None
    text_mining: Optional[list[TextMiningMatch]] = Field(default=None, alias="textMining")


class EvidenceSummary(OutputModel):
    disease: NamedEntity
    target: TargetRef
    evidences: ResultCount


class EvidenceResponse(OutputModel):
    """Normalized output of disease_evidence."""

    summary: EvidenceSummary
    evidences: list[EvidenceRecord]
