"""Accessor for the organization profile."""
from typing import Optional

from accessors.errors import FetchError
from accessors.params import validate_params
from github_api.graphql_client import GraphQL
from github_api.queries import get_query
from processor.models import Organization
from processor.payloads import process_organization


def get_organization(graphql: GraphQL, org: str) -> Optional[Organization]:
    """Fetch an organization profile, or None if it does not exist."""
    validate_params({'graphql': graphql, 'org': org})

    try:
        result = graphql(get_query('organization'), {'organization': org})
        return process_organization(result.get('organization'))
    except Exception as e:
        raise FetchError(f"Failed to fetch organization: {e}") from e
