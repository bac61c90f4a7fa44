"""GraphQL documents used to read events, discussions, teams and files."""
import os
from typing import Optional

DEFAULT_APPROVED_EVENT_LABEL = 'Approved :white_check_mark:'
LABEL_PLACEHOLDER = 'DEFAULT_LABEL'

_ISSUE_FIELDS = """
      id
      number
      title
      url
      body
      reactions(first: 100) {
        nodes {
          content
        }
      }
      subIssues(first: 50) {
        nodes {
          title
          url
          body
          author {
            login
            avatarUrl
            url
            ... on User {
              name
            }
          }
          reactions(first: 100) {
            nodes {
              content
            }
          }
        }
      }
"""

EVENTS_QUERY = """
query events(
  $organization: String!
  $repository: String!
  $state: IssueState!
  $first: Int!
) {
  repository(owner: $organization, name: $repository) {
    issues(
      first: $first
      states: [$state]
      labels: ["DEFAULT_LABEL"]
      orderBy: { field: CREATED_AT, direction: DESC }
    ) {
      edges {
        cursor
        node {%s}
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
""" % _ISSUE_FIELDS

EVENT_QUERY = """
query event($organization: String!, $repository: String!, $number: Int!) {
  repository(owner: $organization, name: $repository) {
    issue(number: $number) {%s}
  }
}
""" % _ISSUE_FIELDS

DISCUSSIONS_QUERY = """
query discussions(
  $organization: String!
  $repository: String!
  $first: Int!
  $categoryId: ID
) {
  repository(owner: $organization, name: $repository) {
    discussions(
      first: $first
      categoryId: $categoryId
      orderBy: { field: CREATED_AT, direction: DESC }
    ) {
      edges {
        node {
          id
          number
          title
          url
          body
          createdAt
          updatedAt
          author {
            login
            avatarUrl
            url
            ... on User {
              name
            }
          }
          category {
            id
            name
            emoji
            description
          }
          reactions(first: 100) {
            nodes {
              content
            }
          }
          comments {
            totalCount
          }
        }
      }
    }
  }
}
"""

_SOCIAL_ACCOUNTS = """
      socialAccounts(first: 10) {
        nodes {
          provider
          url
        }
      }
"""

TEAM_QUERY = """
query team($organization: String!, $teamSlug: String!) {
  organization(login: $organization) {
    team(slug: $teamSlug) {
      name
      slug
      description
      members(first: 100) {
        nodes {
          login
          name
          avatarUrl
          bio
          websiteUrl
          company
          location%s
        }
      }
    }
  }
}
""" % _SOCIAL_ACCOUNTS

USER_QUERY = """
query user($login: String!) {
  user(login: $login) {
    login
    name
    bio
    avatarUrl
    url
    websiteUrl
    company
    location
    email
    createdAt
    updatedAt
    followers {
      totalCount
    }
    following {
      totalCount
    }
    repositories(privacy: PUBLIC) {
      totalCount
    }%s
  }
}
""" % _SOCIAL_ACCOUNTS

ORGANIZATION_QUERY = """
query organization($organization: String!) {
  organization(login: $organization) {
    name
    login
    description
    websiteUrl
    avatarUrl
    email
    location
    createdAt
    updatedAt
    membersWithRole {
      totalCount
    }
    repositories(privacy: PUBLIC) {
      totalCount
    }
  }
}
"""

FILE_QUERY = """
query file($organization: String!, $repository: String!, $expression: String!) {
  repository(owner: $organization, name: $repository) {
    object(expression: $expression) {
      ... on Blob {
        text
        byteSize
        isBinary
      }
    }
  }
}
"""

QUERIES = {
    'events': EVENTS_QUERY,
    'event': EVENT_QUERY,
    'discussions': DISCUSSIONS_QUERY,
    'team': TEAM_QUERY,
    'user': USER_QUERY,
    'organization': ORGANIZATION_QUERY,
    'file': FILE_QUERY,
}


class UnknownQueryError(KeyError):
    """Raised when a query name has no bundled document."""

    def __str__(self) -> str:
        return self.args[0]


def get_query(name: str, default_label: Optional[str] = None) -> str:
    """
    Look up a bundled GraphQL document.

    Args:
        name: Logical query name, e.g. "events"
        default_label: Label marking approved events; falls back to the
            DEFAULT_APPROVED_EVENT_LABEL environment variable

    Returns:
        GraphQL document text with the event label filled in

    Raises:
        UnknownQueryError: If no query is bundled under name
    """
    query = QUERIES.get(name)
    if query is None:
        raise UnknownQueryError(f"Unknown GraphQL query: {name}")

    label = default_label or os.environ.get(
        'DEFAULT_APPROVED_EVENT_LABEL', DEFAULT_APPROVED_EVENT_LABEL
    )
    return query.replace(LABEL_PLACEHOLDER, label, 1)
