"""Exceptions raised by the scorecard GraphQL client."""

from typing import Any, Iterable, List


class ScorecardError(Exception):
    """Base class for scorecard client errors."""


class GraphQLResponseError(ScorecardError):
    """
    The server answered but reported GraphQL errors.

    All reported messages are joined into a single failure.
    """

    def __init__(self, messages: Iterable[str]):
        self.messages: List[str] = list(messages)
        super().__init__("Error in response: " + ", ".join(self.messages))


class UnprocessableNodeError(ScorecardError, ValueError):
    """A search node is neither an issue nor a pull request."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Unprocessable node: {node!r}")


class ClientNotInitializedError(ScorecardError, RuntimeError):
    """The transport was used outside its ``async with`` block."""

    def __init__(self) -> None:
        super().__init__("Client not initialized. Use 'async with' context.")
