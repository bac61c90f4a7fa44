"""GitHub App authentication: signs an app JWT and exchanges it for an installation token."""
import base64
import logging
import time
from datetime import datetime
from typing import Optional

import jwt
import requests

logger = logging.getLogger(__name__)

API_URL = "https://api.github.com"

# GitHub rejects app JWTs valid for more than ten minutes
JWT_LIFETIME_SECONDS = 540
CLOCK_DRIFT_SECONDS = 60


class AppAuthError(Exception):
    """Raised when an installation token cannot be obtained."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


def decode_private_key(encoded: str) -> str:
    """Decode a base64 encoded PEM private key."""
    try:
        return base64.b64decode(encoded).decode('ascii')
    except ValueError as e:
        raise AppAuthError(f"GitHub App private key is not valid base64: {e}") from e


class InstallationTokenProvider:
    """Mints and caches installation access tokens for a GitHub App."""

    def __init__(
        self,
        app_id: str,
        private_key: str,
        installation_id: str,
        api_url: str = API_URL,
        timeout: int = 30,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the token provider.

        Args:
            app_id: GitHub App id, used as the JWT issuer
            private_key: PEM encoded RSA private key of the app
            installation_id: Installation of the app on the organization
            api_url: GitHub REST API base URL
            timeout: HTTP request timeout in seconds (default: 30)
            session: Optional requests session to reuse
        """
        self.app_id = str(app_id)
        self.private_key = private_key
        self.installation_id = installation_id
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self._token: Optional[str] = None
        self._expires_at: Optional[float] = None

    def app_jwt(self) -> str:
        now = int(time.time())
        payload = {
            'iat': now - CLOCK_DRIFT_SECONDS,
            'exp': now + JWT_LIFETIME_SECONDS,
            'iss': self.app_id
        }
        try:
            return jwt.encode(payload, self.private_key, algorithm='RS256')
        except (ValueError, TypeError, jwt.PyJWTError) as e:
            raise AppAuthError(f"Failed to sign GitHub App JWT: {e}") from e

    def get_token(self) -> str:
        """
        Return a valid installation token, requesting a new one when needed.

        Returns:
            Installation access token

        Raises:
            AppAuthError: If signing or the token exchange fails
        """
        if self._token and self._expires_at:
            if time.time() < self._expires_at - CLOCK_DRIFT_SECONDS:
                return self._token

        url = f"{self.api_url}/app/installations/{self.installation_id}/access_tokens"
        try:
            response = self.session.post(
                url,
                headers={
                    'Authorization': f'Bearer {self.app_jwt()}',
                    'Accept': 'application/vnd.github+json',
                    'User-Agent': 'gitevents-fetch'
                },
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Installation token request failed: {e}")
            raise AppAuthError(str(e)) from e

        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        if response.status_code >= 400 or not body.get('token'):
            message = body.get('message') or (
                f"GitHub installation token request failed ({response.status_code})"
            )
            logger.error(
                f"Installation token request returned {response.status_code}: {message}"
            )
            raise AppAuthError(message, status=response.status_code)

        self._token = body['token']
        self._expires_at = _expiry(body.get('expires_at'))
        logger.info(f"Obtained installation token for installation {self.installation_id}")
        return self._token


def _expiry(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00')).timestamp()
    except ValueError:
        return None
