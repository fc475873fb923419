"""Helper utilities for AWS lambda functions.

Functions:
    base_url() -> str
        Extract correct public base URL from API Gateway event
    validate_long_url() -> str
        Ensure a URL to shorten is an absolute http(s) URL
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    guarantee_500_response(handler) -> Callable
        Decorator: Turn unexpected handler exceptions into a 500 response

Example:
    Typical usage inside a Lambda handler:

        >>> from tinyurl.utils.helpers import base_url
        >>> event = {
        ...     "requestContext": {
        ...         "domainName": "abc123.execute-api.us-east-1.amazonaws.com",
        ...         "stage": "Prod"
        ...     }
        ... }
        >>> base_url(event)
        'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'

        >>> base_url({})
        'http://localhost:3000'
"""

import os
import json
import logging
import functools
import urllib.parse
from typing import Any
from collections.abc import Callable

from tinyurl.exceptions import InvalidInputError, MissingEnvironmentVariableError
from tinyurl.utils.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from tinyurl.utils.runtime import running_locally


logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = frozenset({'http', 'https'})


def base_url(event: dict[str, Any]) -> str:
    """Extract public base URL from API Gateway event

    Works seamlessly with both custom and default AWS API Gateway domains.
    If a custom domain is configured, the stage name is omitted.
    If using the default AWS execute-api domain, the stage name is included.

    Args:
        event (dict): API Gateway event object passed to Lambda handler

    Returns:
        str: Base URL, e.g.:
             - "https://tiny.example.com"
             - "https://abc123.execute-api.us-east-1.amazonaws.com/Prod"
    """
    request_context = event.get('requestContext', {})
    domain = request_context.get('domainName', '')
    stage = request_context.get('stage', '')

    if domain and 'execute-api' not in domain:
        # If the domain is a custom domain (no execute-api), skip stage
        return f'https://{domain}'
    elif domain:
        # Otherwise include the stage (for AWS default domains)
        return f'https://{domain}/{stage}'
    else:
        # Fallback: local invocation (SAM CLI, tests, etc.)
        return 'http://localhost:3000'


def validate_long_url(long_url: Any) -> str:
    """Ensure long_url is an absolute http(s) URL

    Args:
        long_url (Any): candidate URL taken from a request

    Returns:
        str: long_url, unchanged

    Raises:
        InvalidInputError:
            If long_url isn't a string, has another scheme, or lacks a host.

    Example:
        >>> validate_long_url('https://abc.io')
        'https://abc.io'
        >>> validate_long_url('ftp://abc.io')
        InvalidInputError: URL scheme must be one of 'http', 'https' (given value: 'ftp://abc.io').
    """
    if not isinstance(long_url, str) or not long_url:
        raise InvalidInputError(f'URL must be a non-empty string (given value: {long_url!r}).')

    components = urllib.parse.urlparse(long_url)
    if components.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidInputError(f"URL scheme must be one of 'http', 'https' (given value: {long_url!r}).")
    if not components.netloc:
        raise InvalidInputError(f'URL must include a host (given value: {long_url!r}).')
    return long_url


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with 500 instead of crashing on unexpected exceptions

    When running locally, exceptions are re-raised to ease debugging.

    Example:
        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    @functools.wraps(handler)
    def wrapper(event: dict[str, Any], context: Any) -> dict[str, Any]:
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in lambda handler. Responding with 500.')
            return {
                'statusCode': 500,
                'headers': {'Content-Type': 'application/json'},
                'body': json.dumps(
                    {
                        'message': 'Internal Server Error',
                        'error_code': UNKNOWN_INTERNAL_SERVER_ERROR,
                    }
                ),
            }

    return wrapper
