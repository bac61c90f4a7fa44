"""Accessor for repository discussions."""
import logging
from typing import List, Optional

from accessors.errors import FetchError
from accessors.params import validate_params
from github_api.graphql_client import GraphQL
from github_api.queries import get_query
from processor.models import Discussion
from processor.payloads import process_discussions

logger = logging.getLogger(__name__)


def list_discussions(
    graphql: GraphQL,
    org: str,
    repo: str,
    first: int = 10,
    category_id: Optional[str] = None
) -> List[Discussion]:
    """
    List the most recent discussions of a repository.

    Args:
        graphql: Callable executing a GraphQL document with variables
        org: Organization login
        repo: Repository name
        first: Page size (default: 10)
        category_id: Only list discussions in this category

    Returns:
        List of Discussion objects
    """
    validate_params({'graphql': graphql, 'org': org, 'repo': repo})

    try:
        variables = {
            'organization': org,
            'repository': repo,
            'first': first or 10,
            'categoryId': category_id
        }
        result = graphql(get_query('discussions'), variables)

        repository = result.get('repository') or {}
        edges = (repository.get('discussions') or {}).get('edges')
        discussions = process_discussions(edges)
        logger.info(f"Fetched {len(discussions)} discussions from {org}/{repo}")
        return discussions
    except Exception as e:
        raise FetchError(f"Failed to fetch discussions: {e}") from e
