"""
Open Targets MCP Server

Main entry point for the MCP server.
Exports the main() function for running the server.
"""

from opentargets_mcp.server.core import (
    ToolRouter,
    configure_logging,
    create_server,
    main,
    run,
)

__all__ = [
    "ToolRouter",
    "configure_logging",
    "create_server",
    "main",
    "run",
]
