"""Map search nodes into unified ``Issue`` records."""

from datetime import datetime
from typing import Optional

from ..exceptions import UnprocessableNodeError
from ..models import Issue
from .types import IssueNode, IssueState, PullRequestNode, PullRequestState, SearchNode

# GitHub's placeholder login for deleted accounts
GHOST_LOGIN = "ghost"


def parse_datetime(value: str) -> datetime:
    """
    Parse a GitHub ISO-8601 timestamp.

    Raises ValueError on malformed input; callers do not catch it.
    """
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _parse_optional_datetime(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return parse_datetime(value)


def _issue_from_fields(node, is_open: bool) -> Issue:
    return Issue(
        id=node.number,
        author=node.author.login if node.author else GHOST_LOGIN,
        created_at=parse_datetime(node.created_at),
        is_open=is_open,
        closed_at=_parse_optional_datetime(node.closed_at),
        labels=[label.name for label in node.labels.nodes],
        participants=[participant.login for participant in node.participants.nodes],
        milestone=node.milestone.title if node.milestone else None,
    )


def issue_from_node(node: SearchNode) -> Issue:
    """
    Convert an issue or pull request node into an ``Issue``.

    Raises:
        UnprocessableNodeError: for any other node type.
        ValueError: if a timestamp cannot be parsed.
    """
    if isinstance(node, IssueNode):
        return _issue_from_fields(node, node.state is IssueState.OPEN)
    if isinstance(node, PullRequestNode):
        return _issue_from_fields(node, node.state is PullRequestState.OPEN)
    raise UnprocessableNodeError(node)
