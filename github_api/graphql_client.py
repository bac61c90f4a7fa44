"""GraphQL client for the GitHub API."""
import logging
from typing import Any, Callable, Dict, Mapping, Optional

import requests

logger = logging.getLogger(__name__)

GraphQL = Callable[[str, Mapping[str, Any]], Dict[str, Any]]


class GraphQLError(Exception):
    """Raised when a GraphQL request fails or returns errors."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class GraphQLClient:
    """Callable client executing GraphQL documents against GitHub."""

    ENDPOINT = "https://api.github.com/graphql"

    def __init__(
        self,
        token: str,
        endpoint: str = ENDPOINT,
        timeout: int = 30,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the GraphQL client.

        Args:
            token: GitHub personal access or installation token
            endpoint: GraphQL endpoint URL
            timeout: HTTP request timeout in seconds (default: 30)
            session: Optional requests session to reuse
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f'Bearer {token}',
            'Accept': 'application/vnd.github+json',
            'User-Agent': 'gitevents-fetch'
        })

    def __call__(self, query: str, variables: Mapping[str, Any]) -> Dict[str, Any]:
        return self.execute(query, variables)

    def execute(self, query: str, variables: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Execute a GraphQL document.

        Args:
            query: GraphQL document text
            variables: Variables for the document

        Returns:
            The "data" member of the response

        Raises:
            GraphQLError: On network errors, HTTP errors or GraphQL errors
        """
        try:
            response = self.session.post(
                self.endpoint,
                json={'query': query, 'variables': dict(variables)},
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"GraphQL request failed: {e}")
            raise GraphQLError(str(e)) from e

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error(
                f"GraphQL request returned {response.status_code}: {message}"
            )
            raise GraphQLError(message, status=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"GraphQL response is not valid JSON: {e}")
            raise GraphQLError(
                f"GitHub GraphQL returned an invalid response ({response.status_code})",
                status=response.status_code
            ) from e
        if not isinstance(payload, dict):
            raise GraphQLError(
                f"GitHub GraphQL returned an invalid response ({response.status_code})",
                status=response.status_code
            )

        errors = payload.get('errors')
        if errors:
            message = '; '.join(
                error.get('message', 'Unknown error') for error in errors
            )
            raise GraphQLError(message, status=response.status_code)

        return payload.get('data') or {}

    def _error_message(self, response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        message = body.get('message') if isinstance(body, dict) else None
        return message or f"GitHub GraphQL request failed ({response.status_code})"
