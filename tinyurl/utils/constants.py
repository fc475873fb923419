from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Default URL document lifetime (1 year in seconds)
    ONE_YEAR = 31_536_000  # 60 * 60 * 24 * 365
    # Practical "forever" for live-forever documents (250 years in seconds)
    FOREVER = 250 * ONE_YEAR


class Generation:
    """URL document generation settings."""

    # Attempts at drawing a fresh key before giving up on a key collision
    MAX_ATTEMPTS = 3


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
