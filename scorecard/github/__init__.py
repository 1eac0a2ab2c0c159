"""
GitHub Module.

Provides the async GitHub GraphQL client with:
- GraphQL queries for counts, issue data and assignable users
- aiohttp transport with bearer-token authentication
- Mapping of issue/PR search nodes into unified records
"""

# Use lazy imports to avoid requiring aiohttp at import time
def __getattr__(name):
    if name == "GraphQLClient":
        from .client import GraphQLClient
        return GraphQLClient
    elif name == "GraphQLTransport":
        from .transport import GraphQLTransport
        return GraphQLTransport
    elif name == "issue_from_node":
        from .mapper import issue_from_node
        return issue_from_node
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "GraphQLClient",
    "GraphQLTransport",
    "issue_from_node",
]
