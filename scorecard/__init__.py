"""
Scorecard GraphQL Package.

Async GitHub GraphQL client used by the team scorecard.

Features:
- Issue/PR count queries
- Cursor-based pagination streamed as unified issue records
- Assignable-user lookups per repository
"""

__version__ = "1.0.0"
