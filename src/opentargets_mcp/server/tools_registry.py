"""
Tool Registry - MCP Tool Definitions

Input schemas are generated from the pydantic input models so that field
descriptions and defaults stay in one place.
"""

from typing import Any

import mcp.types as types
from pydantic import BaseModel

from opentargets_mcp.constants import READONLY_ANNOTATIONS
from opentargets_mcp.schemas import DiseaseEvidenceQuery, TargetDiseaseAssociationsQuery
from opentargets_mcp.server.handlers import disease_evidence, target_associations


def get_all_tools() -> list[types.Tool]:
    """Return list of all tool definitions."""
    return TOOL_DEFINITIONS


def input_schema(model: type[BaseModel]) -> dict[str, Any]:
    """JSON schema for a tool input model, keyed by the public (alias) names."""
    return model.model_json_schema(by_alias=True)


TOOL_DEFINITIONS = [
    # Tool 1: Target-Disease Associations
    types.Tool(
        name=target_associations.TOOL_NAME,
        description="""Diseases associated with a target (Ensembl gene ID).

Returns a summary (target symbol/name/biotype, total vs returned count) and
one row per associated disease with its overall association score and the
per-datasource scores that contribute to it.

Set includeDiseaseDetails=true to add each disease's description and
therapeutic areas.

Examples:
- BRAF associations: targetId="ENSG00000157764", page={"index": 0, "size": 10}
- Include associations inferred via target interactions: enableIndirect=true
- Restrict to given diseases: Bs=["EFO_0000756"]
""",
        inputSchema=input_schema(TargetDiseaseAssociationsQuery),
        annotations=types.ToolAnnotations(
            title="Target-disease associations",
            **READONLY_ANNOTATIONS,
        ),
    ),
    # Tool 2: Disease Evidence
    types.Tool(
        name=disease_evidence.TOOL_NAME,
        description="""Evidence supporting a disease/target association.

Returns a summary (disease, target, total vs returned evidence count) and
one row per evidence item: score, data type, datasource, target, disease,
and when available a source link, literature reference and text-mining
sentences with the matched target/disease terms.

Defaults to GWAS credible-set evidence for EFO_0006335 / ENSG00000091157.

Examples:
- GWAS evidence: diseaseId="EFO_0006335", targetId="ENSG00000091157"
- Literature evidence: datasourceIds=["europepmc"], size=5
""",
        inputSchema=input_schema(DiseaseEvidenceQuery),
        annotations=types.ToolAnnotations(
            title="Disease evidence",
            **READONLY_ANNOTATIONS,
        ),
    ),
]
