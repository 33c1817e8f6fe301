"""
Constants used throughout the application.

Includes endpoint defaults, tool defaults, and standard annotations.
"""

# ============================================================================
# MCP Server Identity
# ============================================================================

SERVER_NAME = "opentargets_mcp"
SERVER_VERSION = "1.0.0"
USER_AGENT = f"opentargets-mcp/{SERVER_VERSION}"

SERVER_INSTRUCTIONS = """
Open Targets Platform MCP Server

## target_disease_associations
Diseases associated with an Ensembl target (e.g. ENSG00000157764 / BRAF),
ranked by overall association score with per-datasource scores.

## disease_evidence
Evidence rows for a disease/target pair (EFO id + Ensembl id), filtered by
datasource (GWAS credible sets by default).
"""

# ============================================================================
# Open Targets Platform
# ============================================================================

DEFAULT_API_URL = "https://api.platform.opentargets.org/api/v4/graphql"

# ============================================================================
# Tool Defaults
# ============================================================================

DEFAULT_PAGE_INDEX = 0
DEFAULT_PAGE_SIZE = 10
DEFAULT_ORDER_BY_SCORE = "score"

DEFAULT_DISEASE_ID = "EFO_0006335"
DEFAULT_TARGET_ID = "ENSG00000091157"
DEFAULT_EVIDENCE_DATASOURCES = ("gwas_credible_sets",)
DEFAULT_EVIDENCE_SIZE = 10

# ============================================================================
# Standard Annotations
# ============================================================================

# Read-only tools backed by a remote public API
READONLY_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": True,
}
