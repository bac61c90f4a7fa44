"""Accessors for events stored as repository issues."""
import logging
from typing import List, Optional

from accessors.errors import FetchError
from accessors.params import validate_params
from github_api.graphql_client import GraphQL
from github_api.queries import get_query
from processor.event_processor import EventProcessor
from processor.models import Event

logger = logging.getLogger(__name__)


def list_upcoming_events(
    graphql: GraphQL,
    org: str,
    repo: str,
    first: int = 10,
    processor: Optional[EventProcessor] = None
) -> List[Event]:
    """
    List open event issues, most recent date first.

    Args:
        graphql: Callable executing a GraphQL document with variables
        org: Organization login
        repo: Repository name
        first: Page size (default: 10)
        processor: EventProcessor to use, a default one if omitted

    Returns:
        List of Event objects
    """
    validate_params({'graphql': graphql, 'org': org, 'repo': repo})

    try:
        return _list_events(graphql, org, repo, 'OPEN', first, processor)
    except Exception as e:
        raise FetchError(f"Failed to fetch upcoming events: {e}") from e


def list_past_events(
    graphql: GraphQL,
    org: str,
    repo: str,
    first: int = 10,
    processor: Optional[EventProcessor] = None
) -> List[Event]:
    """List closed event issues, most recent date first."""
    validate_params({'graphql': graphql, 'org': org, 'repo': repo})

    try:
        return _list_events(graphql, org, repo, 'CLOSED', first, processor)
    except Exception as e:
        raise FetchError(f"Failed to fetch past events: {e}") from e


def get_event(
    graphql: GraphQL,
    org: str,
    repo: str,
    number: int,
    processor: Optional[EventProcessor] = None
) -> Optional[Event]:
    """
    Fetch a single event issue by number.

    Returns:
        Event object or None if the issue does not exist
    """
    validate_params(
        {'graphql': graphql, 'org': org, 'repo': repo, 'number': number}
    )

    try:
        variables = {
            'organization': org,
            'repository': repo,
            'number': number
        }
        result = graphql(get_query('event'), variables)

        issue = (result.get('repository') or {}).get('issue')
        if not issue:
            logger.info(f"Event #{number} not found in {org}/{repo}")
            return None

        return (processor or EventProcessor()).process_events([issue])[0]
    except Exception as e:
        raise FetchError(f"Failed to fetch event #{number}: {e}") from e


def _list_events(
    graphql: GraphQL,
    org: str,
    repo: str,
    state: str,
    first: int,
    processor: Optional[EventProcessor]
) -> List[Event]:
    variables = {
        'organization': org,
        'repository': repo,
        'state': state,
        'first': first
    }
    result = graphql(get_query('events'), variables)

    issues = (result.get('repository') or {}).get('issues') or {}
    entries = issues.get('edges') or issues.get('nodes') or []
    logger.info(
        f"Fetched {len(entries)} {state.lower()} event issues from {org}/{repo}"
    )

    return (processor or EventProcessor()).process_events(entries)
