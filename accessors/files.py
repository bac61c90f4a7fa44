"""Accessor for text files stored in a repository."""
import json
import logging
from typing import Any, Optional

from accessors.errors import (
    BinaryFileError,
    FetchError,
    InvalidJSONError,
    RepositoryFileNotFoundError,
)
from accessors.params import validate_params
from github_api.graphql_client import GraphQL
from github_api.queries import get_query

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = 'HEAD'


def get_file(
    graphql: GraphQL,
    org: str,
    repo: str,
    file_path: str,
    branch: Optional[str] = None,
    parse: bool = False
) -> Any:
    """
    Fetch a text file from a repository.

    Args:
        graphql: Callable executing a GraphQL document with variables
        org: Organization login
        repo: Repository name
        file_path: Path of the file inside the repository
        branch: Branch, tag or commit (default: HEAD)
        parse: Parse the content as JSON

    Returns:
        File text, or the parsed JSON value when parse is set

    Raises:
        RepositoryFileNotFoundError: If the path does not resolve to a file
        BinaryFileError: If the file is binary
        InvalidJSONError: If parse is set and the content is not JSON
        FetchError: On any other failure
    """
    validate_params(
        {'graphql': graphql, 'org': org, 'repo': repo, 'filePath': file_path}
    )

    try:
        variables = {
            'organization': org,
            'repository': repo,
            'expression': f"{branch or DEFAULT_BRANCH}:{file_path}"
        }
        result = graphql(get_query('file'), variables)

        file = (result.get('repository') or {}).get('object')
        if not file:
            raise RepositoryFileNotFoundError(file_path)

        if file.get('isBinary'):
            raise BinaryFileError(file_path)

        content = file.get('text')
        logger.info(
            f"Fetched {file_path} from {org}/{repo} "
            f"({file.get('byteSize')} bytes)"
        )

        if not parse:
            return content

        try:
            return json.loads(content)
        except (TypeError, ValueError) as e:
            raise InvalidJSONError(file_path, str(e)) from e
    except (RepositoryFileNotFoundError, BinaryFileError, InvalidJSONError):
        raise
    except Exception as e:
        raise FetchError(f"Failed to fetch file: {e}") from e
