"""AWS Lambda handler serving GitHub-hosted community content as JSON."""
import json
import logging
import os
import time
from typing import Any, Callable, Dict

from accessors.discussions import list_discussions
from accessors.errors import MissingParametersError
from accessors.events import get_event, list_past_events, list_upcoming_events
from accessors.locations import get_locations
from accessors.organization import get_organization
from accessors.teams import get_team
from accessors.users import get_user
from github_api.app_auth import InstallationTokenProvider, decode_private_key
from github_api.graphql_client import GraphQL, GraphQLClient


# Attributes every LogRecord carries; anything else was passed with extra=
RESERVED_ATTRS = set(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {
    'message', 'asctime', 'taskName'
}


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON, including fields passed with extra=."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        for key, value in vars(record).items():
            if key not in RESERVED_ATTRS and not key.startswith('_'):
                log_data[key] = value

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def _to_json(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, list):
        return [item.to_dict() for item in value]
    return value.to_dict()


ACTIONS: Dict[str, Callable[[GraphQL, Dict[str, Any]], Any]] = {
    'upcoming_events': lambda graphql, params: list_upcoming_events(
        graphql, params.get('org'), params.get('repo'),
        first=params.get('first', 10)
    ),
    'past_events': lambda graphql, params: list_past_events(
        graphql, params.get('org'), params.get('repo'),
        first=params.get('first', 10)
    ),
    'event': lambda graphql, params: get_event(
        graphql, params.get('org'), params.get('repo'), params.get('number')
    ),
    'discussions': lambda graphql, params: list_discussions(
        graphql, params.get('org'), params.get('repo'),
        first=params.get('first', 10),
        category_id=params.get('category_id')
    ),
    'team': lambda graphql, params: get_team(
        graphql, params.get('org'), params.get('team_slug')
    ),
    'user': lambda graphql, params: get_user(graphql, params.get('login')),
    'organization': lambda graphql, params: get_organization(
        graphql, params.get('org')
    ),
    'locations': lambda graphql, params: get_locations(
        graphql, params.get('org'), params.get('repo'),
        file_name=params.get('file_name'),
        branch=params.get('branch')
    ),
}


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {'statusCode': status_code, 'body': json.dumps(body)}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    The event names an action (default: upcoming_events) and its
    parameters; org and repo fall back to GITEVENTS_ORG/GITEVENTS_REPO.

    Args:
        event: Invocation payload
        context: Lambda context object

    Returns:
        Response dict with statusCode and JSON body
    """
    # Read configuration from environment variables
    pat = os.environ.get('GH_PAT')
    app_id = os.environ.get('GH_APP_ID')
    private_key = os.environ.get('GH_PRIVATE_KEY')
    installation_id = os.environ.get('GH_APP_INSTALLATION_ID')
    log_level = os.environ.get('LOG_LEVEL', 'INFO')
    timeout_seconds = int(os.environ.get('TIMEOUT_SECONDS', '30'))

    params = {
        'org': os.environ.get('GITEVENTS_ORG'),
        'repo': os.environ.get('GITEVENTS_REPO'),
    }
    params.update({key: value for key, value in (event or {}).items() if value})
    action = params.pop('action', 'upcoming_events')

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    start_time = time.time()
    logger.info(
        f"Lambda execution started: {action}",
        extra={'org': params.get('org'), 'repo': params.get('repo')}
    )

    handler = ACTIONS.get(action)
    if handler is None:
        return _response(400, {'message': f"Unknown action: {action}"})

    use_pat = bool(pat) and not private_key
    if not use_pat and not (app_id and private_key and installation_id):
        logger.error("Neither GH_PAT nor GitHub App credentials are configured")
        return _response(500, {'message': 'GitHub credentials are not configured'})

    try:
        if use_pat:
            logger.info("Using GitHub PAT for authentication")
            token = pat
        else:
            token = InstallationTokenProvider(
                app_id, decode_private_key(private_key), installation_id,
                timeout=timeout_seconds
            ).get_token()
        graphql = GraphQLClient(token=token, timeout=timeout_seconds)
        result = handler(graphql, params)
    except MissingParametersError as e:
        logger.warning(f"Invalid request: {e}")
        return _response(400, {'message': str(e)})
    except Exception as e:
        duration = time.time() - start_time
        logger.error(
            f"Lambda execution failed: {str(e)}",
            extra={
                'duration_seconds': round(duration, 2),
                'error_type': type(e).__name__
            },
            exc_info=True
        )
        return _response(500, {
            'message': f"{action} failed",
            'error': str(e),
            'error_type': type(e).__name__,
            'duration_seconds': round(duration, 2)
        })

    duration = time.time() - start_time
    logger.info(
        f"Lambda execution completed successfully",
        extra={'duration_seconds': round(duration, 2)}
    )

    return _response(200, {'action': action, 'data': _to_json(result)})
