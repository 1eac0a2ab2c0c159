"""
Pytest fixtures for scorecard tests.

Builds GraphQL payloads the way GitHub returns them and a client whose
transport is an AsyncMock scripted per test.
"""

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from scorecard.config import Settings
from scorecard.github.client import GraphQLClient
from scorecard.github.transport import GraphQLTransport
from scorecard.github.types import GraphQLResponse


def build_node(
    number: int,
    typename: str = "Issue",
    state: str = "OPEN",
    author: Optional[str] = "alice",
    created_at: str = "2023-01-01T00:00:00Z",
    closed_at: Optional[str] = None,
    labels: Optional[List[str]] = None,
    participants: Optional[List[str]] = None,
    milestone: Optional[str] = None,
) -> Dict[str, Any]:
    """Raw issue or pull request search node."""
    return {
        "__typename": typename,
        "number": number,
        "author": {"login": author} if author is not None else None,
        "createdAt": created_at,
        "state": state,
        "closedAt": closed_at,
        "labels": {"nodes": [{"name": name} for name in (labels or [])]},
        "participants": {"nodes": [{"login": login} for login in (participants or [])]},
        "milestone": {"title": milestone} if milestone is not None else None,
    }


def build_page(
    nodes: List[Dict[str, Any]],
    has_next_page: bool = False,
    end_cursor: Optional[str] = None,
    issue_count: Optional[int] = None,
) -> GraphQLResponse:
    """Issue data response holding one search page."""
    return GraphQLResponse.model_validate({
        "data": {
            "search": {
                "issueCount": len(nodes) if issue_count is None else issue_count,
                "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
                "nodes": nodes,
            }
        }
    })


def build_error_response(*messages: str) -> GraphQLResponse:
    return GraphQLResponse.model_validate({
        "data": None,
        "errors": [{"message": message} for message in messages],
    })


@pytest.fixture
def settings():
    """Settings isolated from the environment."""
    return Settings(
        github_token="test_token",
        graphql_url="https://api.github.com/graphql",
        page_size=2,
        request_timeout=None,
    )


@pytest.fixture
def mock_transport():
    """Transport whose ``execute`` is scripted through ``side_effect``."""
    return AsyncMock(spec=GraphQLTransport)


@pytest.fixture
def client(settings, mock_transport):
    return GraphQLClient("test_token", settings=settings, transport=mock_transport)
