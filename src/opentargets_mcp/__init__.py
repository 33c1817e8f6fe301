"""
Open Targets MCP Server

Model Context Protocol server for the Open Targets Platform GraphQL API.

Provides 2 read-only tools:
- target_disease_associations: diseases associated with a target, with scores
- disease_evidence: evidence rows supporting a target-disease association
"""

__version__ = "1.0.0"
__author__ = "Open Targets MCP Team"

# Lazy import to avoid MCP dependency for standalone usage
def __getattr__(name):
    if name == "create_server":
        from opentargets_mcp.server import create_server
        return create_server
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = ["create_server", "__version__"]
