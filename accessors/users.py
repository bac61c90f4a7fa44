"""Accessor for user profiles."""
from typing import Optional

from accessors.errors import FetchError
from accessors.params import validate_params
from github_api.graphql_client import GraphQL
from github_api.queries import get_query
from processor.models import User
from processor.payloads import process_user


def get_user(graphql: GraphQL, login: str) -> Optional[User]:
    """Fetch a user profile, or None if the login does not exist."""
    validate_params({'graphql': graphql, 'login': login})

    try:
        result = graphql(get_query('user'), {'login': login})
        return process_user(result.get('user'))
    except Exception as e:
        raise FetchError(f"Failed to fetch user: {e}") from e
