"""Accessor for the venue list of an organization."""
import logging
from typing import Optional

from accessors.errors import (
    BinaryFileError,
    FetchError,
    InvalidJSONError,
    InvalidLocationsError,
    RepositoryFileNotFoundError,
)
from accessors.files import get_file
from accessors.params import validate_params
from github_api.graphql_client import GraphQL
from processor.location_validator import LocationValidator
from processor.models import LocationsResult

logger = logging.getLogger(__name__)

DEFAULT_LOCATIONS_FILE = 'locations.json'


def get_locations(
    graphql: GraphQL,
    org: str,
    repo: str,
    file_name: str = DEFAULT_LOCATIONS_FILE,
    branch: Optional[str] = None
) -> LocationsResult:
    """
    Fetch and validate the locations file.

    Entries failing validation are reported in the result instead of raising.

    Args:
        graphql: Callable executing a GraphQL document with variables
        org: Organization login
        repo: Repository name
        file_name: Path of the locations file (default: locations.json)
        branch: Branch, tag or commit (default: HEAD)

    Returns:
        LocationsResult with valid locations and per-entry errors
    """
    validate_params({'graphql': graphql, 'org': org, 'repo': repo})

    try:
        data = get_file(
            graphql, org, repo, file_name or DEFAULT_LOCATIONS_FILE,
            branch=branch, parse=True
        )
        result = LocationValidator().validate(data)
        logger.info(
            f"Loaded {len(result.locations)} locations from {org}/{repo}"
        )
        return result
    except (
        RepositoryFileNotFoundError,
        BinaryFileError,
        InvalidJSONError,
        InvalidLocationsError
    ):
        raise
    except Exception as e:
        raise FetchError(f"Failed to fetch locations: {e}") from e
