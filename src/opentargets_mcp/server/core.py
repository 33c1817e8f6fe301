#!/usr/bin/env python3
"""
Open Targets MCP Server - Core Infrastructure

Contains:
- Logging setup
- Tool router (list/call handlers)
- Server construction
- stdio serve loop and client lifecycle
"""

import asyncio
import logging
import sys
from typing import Any, Awaitable, Callable

import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from opentargets_mcp.clients.graphql_client import GraphQLClient
from opentargets_mcp.config import Settings
from opentargets_mcp.constants import SERVER_INSTRUCTIONS, SERVER_NAME, SERVER_VERSION
from opentargets_mcp.server.handlers import disease_evidence, target_associations
from opentargets_mcp.server.tools_registry import get_all_tools

logger = logging.getLogger(__name__)

ToolHandler = Callable[[dict[str, Any], GraphQLClient], Awaitable[list[types.TextContent]]]


def configure_logging(settings: Settings) -> None:
    """Configure root logging on stderr (stdout carries the MCP stream)."""
    logging.basicConfig(
        level=getattr(logging, settings.effective_log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        if settings.log_format == "text"
        else '{"time":"%(asctime)s","name":"%(name)s","level":"%(levelname)s","message":"%(message)s"}',
        stream=sys.stderr,
    )


class ToolRouter:
    """
    Route MCP tool calls to handler implementations.

    Handler failures are not converted into text: they propagate so the MCP
    SDK reports the call as an error to the client.
    """

    HANDLERS: dict[str, ToolHandler] = {
        target_associations.TOOL_NAME: target_associations.handle,
        disease_evidence.TOOL_NAME: disease_evidence.handle,
    }

    def __init__(self, client: GraphQLClient):
        self.client = client

    async def list_tools(self) -> list[types.Tool]:
        """List all available MCP tools."""
        return get_all_tools()

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        """
        Dispatch a tool call.

        Args:
            name: Tool name (e.g., "target_disease_associations")
            arguments: Tool-specific parameters

        Returns:
            Single text content block with the JSON response

        Raises:
            ValueError: If tool name is unknown
            ToolExecutionError: If the tool fails
        """
        handler = self.HANDLERS.get(name)
        if handler is None:
            raise ValueError(f"Unknown tool: {name}")

        return await handler(arguments or {}, self.client)


def create_server(client: GraphQLClient, name: str = SERVER_NAME) -> Server:
    """Build a low-level MCP server with both tools registered."""
    server = Server(name)
    router = ToolRouter(client)

    server.list_tools()(router.list_tools)
    # Arguments are validated by the pydantic input models inside each handler
    server.call_tool(validate_input=False)(router.call_tool)

    return server


async def serve(settings: Settings) -> None:
    """Run the stdio transport until the client disconnects."""
    client = GraphQLClient.from_settings(settings)
    server = create_server(client, settings.mcp_server_name)

    try:
        await client.initialize()

        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=settings.mcp_server_name,
                    server_version=SERVER_VERSION,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                    instructions=SERVER_INSTRUCTIONS,
                ),
            )
    finally:
        await client.close()


async def main():
    """Main entry point."""
    settings = Settings()
    configure_logging(settings)

    logger.info("=" * 80)
    logger.info(f"Open Targets MCP Server v{SERVER_VERSION}")
    logger.info("=" * 80)
    logger.info(f"Transport: {settings.transport}")
    logger.info(f"Endpoint: {settings.open_targets_api_url}")
    logger.info(f"Debug mode: {settings.mcp_debug}")
    logger.info("=" * 80)

    try:
        await serve(settings)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


def run() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
