"""
Clients for backend connectivity.

Provides the GraphQL client for the Open Targets Platform API.
"""

from opentargets_mcp.clients.graphql_client import GraphQLClient

__all__ = ["GraphQLClient"]
