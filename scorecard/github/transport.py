"""
Async GraphQL transport.

Posts GraphQL documents with aiohttp and parses the JSON envelope into a
``GraphQLResponse``. Every request carries the bearer token through the
session's default headers. No retries, no rate limiting.
"""

from types import TracebackType
from typing import Any, Dict, Optional, Type

import aiohttp

from ..config import GITHUB_GRAPHQL_URL
from ..exceptions import ClientNotInitializedError
from ..logging import get_logger
from .types import GraphQLResponse

logger = get_logger("github.transport")


class GraphQLTransport:
    """
    Authenticated aiohttp session bound to one GraphQL endpoint.

    The session is created on context entry and is read-only afterwards, so one
    transport can serve concurrent queries.

    Example:
        async with GraphQLTransport(token) as transport:
            response = await transport.execute(query, {"query": "is:open"})
    """

    def __init__(
        self,
        token: str,
        url: str = GITHUB_GRAPHQL_URL,
        timeout: Optional[float] = None,
    ):
        self.token = token
        self.url = url
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def __aenter__(self) -> "GraphQLTransport":
        """Create aiohttp session on context entry."""
        kwargs: Dict[str, Any] = {"headers": self.headers}
        if self.timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)
        self._session = aiohttp.ClientSession(**kwargs)
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        """Close session on context exit."""
        if self._session:
            await self._session.close()
            self._session = None

    async def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> GraphQLResponse:
        """
        Execute a GraphQL document.

        Raises:
            ClientNotInitializedError: outside of ``async with``.
            aiohttp.ClientResponseError: on a non-2xx HTTP status.
            aiohttp.ClientError: on connection failures.
        """
        if not self._session:
            raise ClientNotInitializedError()

        async with self._session.post(
            self.url,
            json={"query": query, "variables": variables or {}},
        ) as response:
            response.raise_for_status()
            payload = await response.json()

        parsed = GraphQLResponse.model_validate(payload)
        if parsed.has_errors:
            logger.debug("graphql_errors", errors=parsed.error_messages)
        return parsed
