"""Domain records produced by the GraphQL client."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class Issue:
    """
    Unified issue or pull request.

    ``id`` is the issue/PR number, unique only within one repository.
    ``labels`` and ``participants`` keep the server's order, duplicates included.
    """

    id: int
    author: str
    created_at: datetime
    is_open: bool
    closed_at: Optional[datetime] = None
    labels: List[str] = field(default_factory=list)
    participants: List[str] = field(default_factory=list)
    milestone: Optional[str] = None

    @property
    def is_closed(self) -> bool:
        return not self.is_open
