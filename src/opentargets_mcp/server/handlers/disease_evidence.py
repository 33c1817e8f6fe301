"""
Tool 2: Disease Evidence Handler

Fetches evidence rows supporting a disease/target association, with
source links, literature references and text-mining snippets when the
datasource provides them.
"""

import logging
from typing import Any, Optional

import mcp.types as types

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.constants import DEFAULT_DISEASE_ID
from opentargets_mcp.errors import ToolExecutionError
from opentargets_mcp.queries import DISEASE_EVIDENCE
from opentargets_mcp.schemas import (
    DiseaseEvidenceQuery,
    DiseaseEvidenceResult,
    EvidenceRecord,
    EvidenceResponse,
    EvidenceRowResult,
    EvidenceSummary,
    EvidenceTarget,
    LiteratureRef,
    MatchedTerm,
    NamedEntity,
    ResultCount,
    SourceLink,
    TargetRef,
    TextMiningMatch,
    TextMiningSentenceResult,
)
from opentargets_mcp.services.formatter import ResponseFormatter
from opentargets_mcp.services.variables import drop_unset

logger = logging.getLogger(__name__)

TOOL_NAME = "disease_evidence"


async def handle(args: dict[str, Any], client: GraphQLClient) -> list[types.TextContent]:
    """Handle disease_evidence tool call."""
    response = await fetch_evidence(args, client)
    return [types.TextContent(type="text", text=ResponseFormatter.format_response(response))]


async def fetch_evidence(args: dict[str, Any], client: GraphQLClient) -> EvidenceResponse:
    """
    Run the diseaseEvidence query and normalize the result.

    Raises:
        ToolExecutionError: On invalid input, remote failure or unexpected
            response shape. The message names the disease ID.
    """
    disease_id = (args or {}).get("diseaseId", DEFAULT_DISEASE_ID)

    try:
        params = DiseaseEvidenceQuery.from_arguments(args)
        disease_id = params.disease_id
        logger.info(
            f"{TOOL_NAME}: disease={disease_id} target={params.target_id} "
            f"datasources={params.datasource_ids} size={params.size}"
        )

        data = await client.execute(DISEASE_EVIDENCE, build_variables(params))
        result = DiseaseEvidenceResult.parse(data)
        return normalize(result, requested_target_id=params.target_id)

    except Exception as e:
        logger.error(f"Tool error in {TOOL_NAME}: {e}", exc_info=True)
        raise ToolExecutionError(
            TOOL_NAME,
            disease_id,
            f"Failed to fetch evidence for disease {disease_id}: {e}",
            cause=e,
        ) from e


def build_variables(params: DiseaseEvidenceQuery) -> dict[str, Any]:
    """Build GraphQL variables for the diseaseEvidence query."""
    return drop_unset(
        {
            "diseaseId": params.disease_id,
            "ensemblId": params.target_id,
            "datasourceIds": params.datasource_ids,
            "enableIndirect": params.enable_indirect,
            "size": params.size,
        }
    )


def normalize(result: DiseaseEvidenceResult, requested_target_id: str) -> EvidenceResponse:
    """Flatten the disease/evidences payload."""
    disease = result.disease
    rows = [_format_evidence(row) for row in disease.evidences.rows]

    target = result.target
    summary = EvidenceSummary(
        disease=NamedEntity(id=disease.id, name=disease.name),
        target=TargetRef(
            id=target.id if target else requested_target_id,
            symbol=target.approved_symbol if target else None,
        ),
        evidences=ResultCount(count=disease.evidences.count, returned=len(rows)),
    )

    return EvidenceResponse(summary=summary, evidences=rows)


def _format_evidence(row: EvidenceRowResult) -> EvidenceRecord:
    optional: dict[str, Any] = {}

    if row.urls:
        link = row.urls[0]
        optional["source"] = SourceLink(name=link.nice_name, url=link.url)

    publication_id = _publication_id(row)
    if publication_id:
        optional["literature"] = LiteratureRef(
            publication_id=publication_id,
            title=_citation(row),
        )

    if row.text_mining_sentences:
        optional["text_mining"] = [
            _format_sentence(sentence) for sentence in row.text_mining_sentences
        ]

    return EvidenceRecord(
        id=row.id,
        score=row.score,
        data_type=row.datatype_id,
        datasource_id=row.datasource_id,
        target=EvidenceTarget(
            id=row.target.id,
            symbol=row.target.approved_symbol,
            name=row.target.approved_name,
        ),
        disease=NamedEntity(id=row.disease.id, name=row.disease.name),
        **optional,
    )


def _publication_id(row: EvidenceRowResult) -> Optional[str]:
    """First non-blank literature identifier (usually a PMID)."""
    for reference in row.literature or []:
        if reference and reference.strip():
            return reference.strip()
    return None


def _citation(row: EvidenceRowResult) -> Optional[str]:
    author = row.publication_first_author
    year = row.publication_year
    if author and year:
        return f"{author} et al. ({year})"
    if author:
        return f"{author} et al."
    return None


def _format_sentence(sentence: TextMiningSentenceResult) -> TextMiningMatch:
    text = sentence.text
    spans = (
        ("target", sentence.t_start, sentence.t_end),
        ("disease", sentence.d_start, sentence.d_end),
    )

    matched = [
        MatchedTerm(type=kind, term=text[start:end])
        for kind, start, end in spans
        if start is not None and end is not None and 0 <= start < end <= len(text)
    ]

    return TextMiningMatch(text=text, matched_terms=matched)
