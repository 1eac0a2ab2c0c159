"""
Typed GraphQL responses.

Pydantic models for the GraphQL envelope and for the payloads of the issue
count, issue data and assignable users queries. Search result nodes are a
tagged union on ``__typename``.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GitHubModel(BaseModel):
    """Base model for GitHub GraphQL payloads."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


# =============================================================================
# Envelope
# =============================================================================

class GraphQLError(GitHubModel):
    """One entry of the top-level ``errors`` list."""
    message: str
    type: Optional[str] = None
    path: Optional[List[Union[str, int]]] = None


class GraphQLResponse(GitHubModel):
    """Parsed GraphQL response body."""
    data: Optional[Dict[str, Any]] = None
    errors: List[GraphQLError] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_messages(self) -> List[str]:
        return [error.message for error in self.errors]


# =============================================================================
# Shared objects
# =============================================================================

class IssueState(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class PullRequestState(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    MERGED = "MERGED"


class Actor(GitHubModel):
    login: str


class Label(GitHubModel):
    name: str


class Milestone(GitHubModel):
    title: str


class ActorConnection(GitHubModel):
    nodes: List[Actor] = Field(default_factory=list)


class LabelConnection(GitHubModel):
    nodes: List[Label] = Field(default_factory=list)


class PageInfo(GitHubModel):
    has_next_page: bool = Field(alias="hasNextPage")
    end_cursor: Optional[str] = Field(default=None, alias="endCursor")


# =============================================================================
# Search nodes
# =============================================================================

class _IssueLikeNode(GitHubModel):
    number: int
    # null for deleted accounts
    author: Optional[Actor] = None
    created_at: str = Field(alias="createdAt")
    closed_at: Optional[str] = Field(default=None, alias="closedAt")
    labels: LabelConnection = Field(default_factory=LabelConnection)
    participants: ActorConnection = Field(default_factory=ActorConnection)
    milestone: Optional[Milestone] = None


class IssueNode(_IssueLikeNode):
    typename: Literal["Issue"] = Field(default="Issue", alias="__typename")
    state: IssueState


class PullRequestNode(_IssueLikeNode):
    typename: Literal["PullRequest"] = Field(default="PullRequest", alias="__typename")
    state: PullRequestState


class UnknownNode(GitHubModel):
    """Any search node that is not an issue or a pull request."""
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    typename: Optional[str] = Field(default=None, alias="__typename")


SearchNode = Union[IssueNode, PullRequestNode, UnknownNode]

_NODE_TYPES = {
    "Issue": IssueNode,
    "PullRequest": PullRequestNode,
}


def parse_search_node(raw: Optional[Dict[str, Any]]) -> SearchNode:
    """Dispatch a raw search node to its model by ``__typename``."""
    raw = raw or {}
    model = _NODE_TYPES.get(raw.get("__typename"), UnknownNode)
    return model.model_validate(raw)


def is_issue_or_pull_request(node: SearchNode) -> bool:
    return isinstance(node, (IssueNode, PullRequestNode))


# =============================================================================
# Query payloads
# =============================================================================

class SearchCount(GitHubModel):
    issue_count: int = Field(ge=0, alias="issueCount")


class IssueCountData(GitHubModel):
    search: SearchCount


class SearchPage(GitHubModel):
    issue_count: int = Field(default=0, alias="issueCount")
    page_info: PageInfo = Field(alias="pageInfo")
    nodes: List[SearchNode] = Field(default_factory=list)

    @field_validator("nodes", mode="before")
    @classmethod
    def parse_nodes(cls, v: Any) -> List[SearchNode]:
        if isinstance(v, list):
            return [
                node if isinstance(node, BaseModel) else parse_search_node(node)
                for node in v
            ]
        return v


class IssueData(GitHubModel):
    search: SearchPage


class Repository(GitHubModel):
    assignable_users: ActorConnection = Field(alias="assignableUsers")


class AssignableUsersData(GitHubModel):
    repository: Optional[Repository] = None
