from tinyurl.utils.config import app_env, app_name, app_prefix, load_config
from tinyurl.utils.helpers import base_url, validate_long_url, require_environment, guarantee_500_response
from tinyurl.utils.shortener import encode, decode, generate_base10_id
from tinyurl.utils.logging import initialize_logging


__all__ = [
    'encode',
    'decode',
    'generate_base10_id',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'validate_long_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
