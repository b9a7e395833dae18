from linkshortener.utils.config import app_env, load_config, AppConfig, StoreConfig, HttpConfig
from linkshortener.utils.helpers import base_url, get_short_url, guarantee_500_response
from linkshortener.utils.shortener import generate_short_id, generate_unique_short_id
from linkshortener.utils.validators import require_long_url, url_host, validate_domain
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'generate_short_id',
    'generate_unique_short_id',
    'app_env',
    'load_config',
    'AppConfig',
    'StoreConfig',
    'HttpConfig',
    'base_url',
    'get_short_url',
    'guarantee_500_response',
    'require_long_url',
    'url_host',
    'validate_domain',
    'initialize_logging',
]
