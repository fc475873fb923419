"""Utility functions for application configuration management.

Lambda functions read their configuration from **AWS AppConfig**. Each
environment (`APP_ENV`) has a dedicated AppConfig *Environment* within the
AppConfig *Application* identified by `APP_NAME`. The configuration is a JSON
document deployed under a configuration profile (typically `backend-config`):

    {
        "build": "2025-10-15.1",
        "configs": {
            "shorten_url": {
                "store": {"host": "...", "port": 6379, "db": 0, "socket_timeout": 2.0},
                "cache": {"host": "...", "port": 6379, "db": 1, "ttl": 86400}
            },
            "redirect_url": { ... },
            "delete_url": { ... }
        }
    }

Each Lambda loads its own section (e.g. `"redirect_url"`).

Functions:
    app_env() -> str
        Return `APP_ENV`, defaulting to `'local'`.

    app_name() -> str | None
        Return `APP_NAME`, or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    load_config(lambda_name: str) -> dict
        Load the configuration section of a Lambda from AWS AppConfig.
        In SAM, load it from a local AppConfig agent.

Example:
    >>> from tinyurl.utils.config import load_config
    >>> config = load_config('redirect_url')
    >>> config['store']['host']
    'redis-15501.host.docker.internal'
"""

import os
import json
import functools
import urllib.parse
import urllib.request
import logging
from collections.abc import Callable

import boto3

from tinyurl.exceptions import BadConfigurationError
from tinyurl.utils.helpers import require_environment
from tinyurl.utils.runtime import running_locally
from tinyurl.utils.constants import ENV


logger = logging.getLogger(__name__)

LOCAL_AGENT_HOSTS = frozenset({'localhost', '127.0.0.1', 'host.docker.internal'})
LOCAL_AGENT_PORTS = frozenset({2772, None})


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'tinyurl'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'tinyurl:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def validate_agent_url(url: str | None) -> str:
    """Return url if it points at a local AppConfig agent, '' if url is unset

    Raises:
        BadConfigurationError: If url has a bad scheme, host or port.
    """
    if not url:
        return ''
    components = urllib.parse.urlparse(url)
    if components.scheme not in {'http', 'https'}:
        raise BadConfigurationError(f'Bad AppConfig agent scheme {url}')
    if components.hostname not in LOCAL_AGENT_HOSTS:
        raise BadConfigurationError(f'Bad AppConfig agent host {url}')
    if components.port not in LOCAL_AGENT_PORTS:
        raise BadConfigurationError(f'Bad AppConfig agent port {url}')
    return url


def lambda_section(document: dict, lambda_name: str) -> dict:
    """Extract a Lambda's section from the AppConfig document

    Raises:
        BadConfigurationError: If the document has no section for lambda_name.
    """
    try:
        return document['configs'][lambda_name]
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f"AppConfig document has no section for '{lambda_name}'.") from e


def _sam_load_local_appconfig(func: Callable[[str], dict]) -> Callable[[str], dict]:
    """Decorator: load AppConfig from a local AppConfig Agent when running under SAM

    Behavior:
        - If the application is running locally and `APPCONFIG_AGENT_URL` is set
          to a local URL, fetch the document from the local AppConfig agent.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).

    Environment variables used:
        APPCONFIG_AGENT_URL     – Base URL of the local agent (e.g. http://host.docker.internal:2772).
        APPCONFIG_PROFILE_NAME  – Optional profile name (default: "backend-config").
    """

    @functools.wraps(func)
    def wrapper(lambda_name: str, *args, **kwargs) -> dict:
        agent_url = validate_agent_url(os.getenv(ENV.AppConfig.AGENT_URL))
        if not running_locally() or not agent_url:
            return func(lambda_name, *args, **kwargs)

        profile_name = os.getenv(ENV.AppConfig.PROFILE_NAME, 'backend-config')
        url = f'{agent_url}/applications/{app_name()}/environments/{app_env()}/configurations/{profile_name}'

        logger.debug('Trying to load AppConfig from local agent.', extra={'agentUrl': url, 'lambdaName': lambda_name})
        with urllib.request.urlopen(url, timeout=5) as r:  # noqa: S310
            document = json.load(r)

        data = lambda_section(document, lambda_name)
        logger.debug('Loaded AppConfig from local agent.', extra={'lambdaName': lambda_name, 'build': document.get('build')})
        return data

    return wrapper


@_sam_load_local_appconfig
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(lambda_name: str) -> dict:
    """Load configuration for a given Lambda from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        lambda_name (str):
            Name of the Lambda (e.g. "shorten_url" or "redirect_url").

    Returns:
        dict: The lambda's config section, with 'store' and 'cache' sub-sections.

    Raises:
        MissingEnvironmentVariableError:
            If any of the AppConfig identifiers is missing.
        BadConfigurationError:
            If the document has no section for the lambda.
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name})

    appconfig = boto3.client('appconfigdata')

    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    document = json.loads(content.decode('utf-8'))

    data = lambda_section(document, lambda_name)
    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name, 'build': document.get('build')})
    return data
