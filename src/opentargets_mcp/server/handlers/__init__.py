"""
Tool handlers.

Each handler validates tool arguments, runs one catalog query through the
GraphQL client and returns the normalized response as MCP text content.
"""

from opentargets_mcp.server.handlers import disease_evidence, target_associations

__all__ = ["disease_evidence", "target_associations"]
