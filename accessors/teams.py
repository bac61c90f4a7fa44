"""Accessor for organization teams."""
from typing import Optional

from accessors.errors import FetchError
from accessors.params import validate_params
from github_api.graphql_client import GraphQL
from github_api.queries import get_query
from processor.models import Team
from processor.payloads import process_team


def get_team(graphql: GraphQL, org: str, team_slug: str) -> Optional[Team]:
    """
    Fetch a team and its members by slug.

    Returns:
        Team object or None if the team does not exist
    """
    validate_params({'graphql': graphql, 'org': org, 'teamSlug': team_slug})

    try:
        variables = {'organization': org, 'teamSlug': team_slug}
        result = graphql(get_query('team'), variables)
        return process_team((result.get('organization') or {}).get('team'))
    except Exception as e:
        raise FetchError(f"Failed to fetch team {team_slug}: {e}") from e
