"""
GitHub GraphQL Queries.

Queries for the team scorecard: issue counts, paginated issue/PR data and
repository assignable users.
"""

# Total number of issues and PRs matching a search
ISSUE_COUNT_QUERY = """
query IssueCount($query: String!) {
  search(query: $query, type: ISSUE, first: 0) {
    issueCount
  }
}
"""

# Issue and PR data with cursor-based pagination
ISSUE_DATA_QUERY = """
query IssueData($query: String!, $first: Int!, $after: String) {
  search(query: $query, type: ISSUE, first: $first, after: $after) {
    issueCount
    pageInfo {
      endCursor
      hasNextPage
    }
    nodes {
      __typename
      ... on Issue {
        number
        author {
          login
        }
        createdAt
        state
        closedAt
        labels(first: 100) {
          nodes {
            name
          }
        }
        participants(first: 100) {
          nodes {
            login
          }
        }
        milestone {
          title
        }
      }
      ... on PullRequest {
        number
        author {
          login
        }
        createdAt
        state
        closedAt
        labels(first: 100) {
          nodes {
            name
          }
        }
        participants(first: 100) {
          nodes {
            login
          }
        }
        milestone {
          title
        }
      }
    }
  }
}
"""

# Users that can be assigned to issues in a repository (single page only)
ASSIGNABLE_USERS_QUERY = """
query AssignableUsers($org: String!, $repo: String!) {
  repository(owner: $org, name: $repo) {
    assignableUsers(first: 100) {
      nodes {
        login
      }
    }
  }
}
"""
