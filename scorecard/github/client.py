"""
Async GitHub GraphQL Client.

Features:
- Issue/PR counts for a search query
- Cursor-based pagination streamed page by page
- Assignable users of a repository
- One shared aiohttp session per client
"""

from types import TracebackType
from typing import Any, Dict, List, Optional, Type

import structlog

from ..config import Settings, get_settings
from ..exceptions import GraphQLResponseError
from ..logging import get_logger
from ..models import Issue
from ..streams import Emit, PushStream
from .mapper import issue_from_node
from .queries import ASSIGNABLE_USERS_QUERY, ISSUE_COUNT_QUERY, ISSUE_DATA_QUERY
from .transport import GraphQLTransport
from .types import (
    AssignableUsersData,
    GraphQLResponse,
    IssueCountData,
    IssueData,
    is_issue_or_pull_request,
)

logger = get_logger("github")


def _require_data(response: GraphQLResponse) -> Dict[str, Any]:
    """Return the ``data`` member, failing if the server sent none."""
    if response.data is None:
        raise GraphQLResponseError(response.error_messages or ["Response contained no data"])
    return response.data


class GraphQLClient:
    """
    Async GitHub GraphQL client for the team scorecard.

    Example:
        async with GraphQLClient(token) as client:
            total = await client.count_issues_and_prs("repo:spring-projects/spring-boot")
            async for issue in client.search_issues_and_prs("repo:spring-projects/spring-boot"):
                print(issue.id, issue.author)
    """

    def __init__(
        self,
        github_token: Optional[str] = None,
        settings: Optional[Settings] = None,
        transport: Optional[GraphQLTransport] = None,
    ):
        self.settings = settings or get_settings()
        token = github_token or self.settings.github_token
        if not token and transport is None:
            raise ValueError("GitHub token required")

        self.page_size = self.settings.page_size
        self.transport = transport or GraphQLTransport(
            token,
            url=self.settings.graphql_url,
            timeout=self.settings.request_timeout,
        )

    async def __aenter__(self) -> "GraphQLClient":
        await self.transport.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.transport.__aexit__(exc_type, exc_val, exc_tb)

    async def count_issues_and_prs(self, search_query: str) -> int:
        """Return the number of issues and PRs matching ``search_query``."""
        logger.debug("count_query", search_query=search_query)
        response = await self.transport.execute(ISSUE_COUNT_QUERY, {"query": search_query})
        data = IssueCountData.model_validate(_require_data(response))
        return data.search.issue_count

    def search_issues_and_prs(self, search_query: str) -> PushStream[Issue]:
        """
        Stream every issue and PR matching ``search_query``.

        Pages are fetched one at a time, in order, and each page's records are
        emitted as soon as it arrives. A page reporting GraphQL errors fails the
        stream with ``GraphQLResponseError``.
        """
        logger.debug("search_query", search_query=search_query)

        async def produce(emit: Emit) -> None:
            with structlog.contextvars.bound_contextvars(search_query=search_query):
                await self._fetch_pages(search_query, emit)

        return PushStream(produce)

    async def _fetch_pages(self, search_query: str, emit: Emit) -> None:
        cursor: Optional[str] = None
        processed = 0

        while True:
            response = await self.transport.execute(
                ISSUE_DATA_QUERY,
                {"query": search_query, "first": self.page_size, "after": cursor},
            )
            if response.has_errors:
                raise GraphQLResponseError(response.error_messages)

            search = IssueData.model_validate(_require_data(response)).search

            start = processed
            processed += len(search.nodes)
            logger.info(
                "fetching_issues",
                start=start,
                end=processed,
                total=search.issue_count,
            )

            for node in search.nodes:
                if not is_issue_or_pull_request(node):
                    logger.debug("excluding_node", typename=node.typename, node=repr(node))
                    continue
                emit(issue_from_node(node))

            if not search.page_info.has_next_page:
                logger.debug("last_page")
                return

            logger.debug("fetching_additional_page")
            cursor = search.page_info.end_cursor

    def find_assignable_users(self, org: str, repo: str) -> PushStream[str]:
        """Stream the logins of users assignable in ``org/repo`` (first page only)."""

        async def produce(emit: Emit) -> None:
            response = await self.transport.execute(
                ASSIGNABLE_USERS_QUERY, {"org": org, "repo": repo}
            )
            data = AssignableUsersData.model_validate(_require_data(response))
            if data.repository is None:
                raise GraphQLResponseError(
                    response.error_messages or [f"Could not resolve repository {org}/{repo}"]
                )
            for node in data.repository.assignable_users.nodes:
                emit(node.login)

        return PushStream(produce)

    async def get_assignable_users(self, org: str, repo: str) -> List[str]:
        """Collect ``find_assignable_users`` into a list."""
        return await self.find_assignable_users(org, repo).to_list()
