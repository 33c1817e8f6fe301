"""
Entry point for running the Open Targets MCP server as a module.

Usage:
    python -m opentargets_mcp.server
"""

from opentargets_mcp.server import run

if __name__ == "__main__":
    run()
