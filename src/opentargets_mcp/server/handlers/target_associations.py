"""
Tool 1: Target-Disease Associations Handler

Lists diseases associated with an Ensembl target, ranked by overall
association score, together with each datasource's contribution.
"""

import logging
from typing import Any

import mcp.types as types

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.errors import ToolExecutionError
from opentargets_mcp.queries import TARGET_ASSOCIATED_DISEASES
from opentargets_mcp.schemas import (
    AssociatedDisease,
    AssociationRecord,
    AssociationRowResult,
    AssociationsResponse,
    AssociationsSummary,
    EvidenceScore,
    NamedEntity,
    ResultCount,
    TargetAssociationsResult,
    TargetDiseaseAssociationsQuery,
    TargetSummary,
)
from opentargets_mcp.services.formatter import ResponseFormatter
from opentargets_mcp.services.variables import drop_unset

logger = logging.getLogger(__name__)

TOOL_NAME = "target_disease_associations"

# Handled locally; never part of the GraphQL request
LOCAL_FIELDS = {"include_disease_details"}


async def handle(args: dict[str, Any], client: GraphQLClient) -> list[types.TextContent]:
    """Handle target_disease_associations tool call."""
    response = await fetch_associations(args, client)
    return [types.TextContent(type="text", text=ResponseFormatter.format_response(response))]


async def fetch_associations(
    args: dict[str, Any], client: GraphQLClient
) -> AssociationsResponse:
    """
    Run the targetAssociatedDiseases query and normalize the result.

    Raises:
        ToolExecutionError: On invalid input, remote failure or unexpected
            response shape. The message names the target ID.
    """
    target_id = (args or {}).get("targetId")

    try:
        params = TargetDiseaseAssociationsQuery.from_arguments(args)
        target_id = params.target_id
        logger.info(f"{TOOL_NAME}: target={target_id} page={params.page.index}/{params.page.size}")

        data = await client.execute(TARGET_ASSOCIATED_DISEASES, build_variables(params))
        result = TargetAssociationsResult.parse(data)
        return normalize(result, include_disease_details=params.include_disease_details)

    except Exception as e:
        logger.error(f"Tool error in {TOOL_NAME}: {e}", exc_info=True)
        raise ToolExecutionError(
            TOOL_NAME,
            target_id,
            f"Failed to fetch associated diseases for target {target_id}: {e}",
            cause=e,
        ) from e


def build_variables(params: TargetDiseaseAssociationsQuery) -> dict[str, Any]:
    """Build GraphQL variables, leaving out local and unset fields."""
    return drop_unset(params.model_dump(by_alias=True, exclude=LOCAL_FIELDS))


def normalize(
    result: TargetAssociationsResult, include_disease_details: bool = False
) -> AssociationsResponse:
    """Flatten the nested target/associatedDiseases payload."""
    target = result.target
    associated = target.associated_diseases

    rows = [_format_row(row, include_disease_details) for row in associated.rows]

    summary = AssociationsSummary(
        target=TargetSummary(
            id=target.id,
            symbol=target.approved_symbol,
            name=target.approved_name,
            biotype=target.biotype,
        ),
        disease_associations=ResultCount(count=associated.count, returned=len(rows)),
    )

    return AssociationsResponse(summary=summary, associations=rows)


def _format_row(row: AssociationRowResult, include_disease_details: bool) -> AssociationRecord:
    disease = row.disease

    if include_disease_details:
        areas = disease.therapeutic_areas
        formatted_disease = AssociatedDisease(
            id=disease.id,
            name=disease.name,
            description=disease.description,
            therapeutic_areas=(
                [NamedEntity(id=area.id, name=area.name) for area in areas]
                if areas is not None
                else None
            ),
        )
    else:
        formatted_disease = AssociatedDisease(id=disease.id, name=disease.name)

    return AssociationRecord(
        disease=formatted_disease,
        overall_score=row.score,
        evidence_scores=[
            EvidenceScore(source=ds.id, score=ds.score)
            for ds in row.datasource_scores or []
        ],
    )
