"""
GraphQL client for the Open Targets Platform API.

Provides access to the public Open Targets GraphQL endpoint with:
- Connection pooling
- GraphQL envelope unwrapping (data / errors)
- Uniform error reporting via RemoteCallError

One request per call; failures are not retried.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx

from opentargets_mcp.config import Settings
from opentargets_mcp.constants import USER_AGENT
from opentargets_mcp.errors import InputValidationError, RemoteCallError
from opentargets_mcp.queries import QueryDocument

logger = logging.getLogger(__name__)


class GraphQLClient:
    """
    HTTP client for the Open Targets GraphQL API.

    Features:
    - Lazy initialization of the underlying httpx.AsyncClient
    - Connection pooling
    - Optional timeout (None waits indefinitely)
    """

    def __init__(
        self,
        endpoint: str,
        timeout: Optional[float] = None,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize GraphQL client.

        Args:
            endpoint: GraphQL endpoint URL
            timeout: Request timeout in seconds, or None for no timeout
            max_connections: Maximum total connections
            max_keepalive_connections: Maximum keepalive connections
            transport: Optional httpx transport (used to stub the API in tests)
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.transport = transport

        self.client: Optional[httpx.AsyncClient] = None
        self._lock = asyncio.Lock()

        # Connection pool configuration
        self.limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GraphQLClient":
        """Build a client from application settings."""
        return cls(
            endpoint=settings.open_targets_api_url,
            timeout=settings.open_targets_timeout,
            transport=transport,
        )

    async def initialize(self) -> None:
        """Initialize HTTP client with connection pooling."""
        async with self._lock:
            if self.client is not None:
                return

            self.client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=self.limits,
                headers={
                    "User-Agent": USER_AGENT,
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
                follow_redirects=True,
                transport=self.transport,
            )

            logger.info(f"GraphQL client initialized for {self.endpoint}")

    async def close(self) -> None:
        """Close HTTP client and connections."""
        async with self._lock:
            if self.client:
                await self.client.aclose()
                self.client = None
                logger.info("GraphQL client closed")

    async def __aenter__(self) -> "GraphQLClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def execute(
        self,
        query: QueryDocument,
        variables: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Execute a catalog query against the GraphQL endpoint.

        Args:
            query: Query document from the catalog
            variables: Variables with unset entries already removed

        Returns:
            The ``data`` object of the GraphQL response

        Raises:
            InputValidationError: If a required variable is missing
            RemoteCallError: If the request or the GraphQL execution fails
        """
        missing = [name for name in query.required_variables if variables.get(name) is None]
        if missing:
            raise InputValidationError(
                f"Query '{query.name}' is missing required variables: {', '.join(missing)}"
            )

        if self.client is None:
            await self.initialize()

        logger.debug(f"Query '{query.name}' variables={variables}")

        try:
            response = await self.client.post(
                self.endpoint,
                json={"query": query.document, "variables": variables},
            )
            response.raise_for_status()
            payload = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                f"Query '{query.name}' failed: {e.response.status_code} - {e.response.text}"
            )
            raise RemoteCallError(
                f"HTTP {e.response.status_code} from {self.endpoint}",
                status_code=e.response.status_code,
            ) from e

        except httpx.HTTPError as e:
            logger.error(f"Query '{query.name}' request error: {e}")
            raise RemoteCallError(f"Request to {self.endpoint} failed: {e}") from e

        except ValueError as e:
            logger.error(f"Query '{query.name}' returned invalid JSON: {e}")
            raise RemoteCallError(
                f"Invalid JSON from {self.endpoint}",
                status_code=response.status_code,
            ) from e

        return self._unwrap(payload, query.name, response.status_code)

    @staticmethod
    def _unwrap(payload: Any, query_name: str, status_code: int) -> dict[str, Any]:
        """
        Extract ``data`` from a GraphQL response envelope.

        A response carrying ``errors`` is treated as failed even when partial
        data is present.
        """
        if not isinstance(payload, dict):
            raise RemoteCallError(
                f"Malformed GraphQL response for '{query_name}'",
                status_code=status_code,
            )

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in errors
            )
            logger.error(f"Query '{query_name}' returned GraphQL errors: {messages}")
            raise RemoteCallError(f"GraphQL error: {messages}", status_code=status_code)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise RemoteCallError(
                f"GraphQL response for '{query_name}' has no data",
                status_code=status_code,
            )

        logger.debug(f"Query '{query_name}' succeeded (status={status_code})")
        return data
