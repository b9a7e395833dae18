"""Utility functions for application configuration management.

Configuration is read from an optional YAML document and then overridden by
environment variables. Every option has a default, so running without any
configuration at all gives a store under `./data/links.json` with domain
validation disabled.

The YAML document follows this structure:

    store:
      data_dir: ./data
      file_name: links.json
      allowed_domain: localhost:3000    # or null to accept any host
      short_id_length: 6
    http:
      base_path: /share

Environment overrides:
    LINKSHORTENER_CONFIG            – Path to the YAML document (used when no path is given).
    LINKSHORTENER_DATA_DIR          – store.data_dir
    LINKSHORTENER_FILE_NAME         – store.file_name
    LINKSHORTENER_ALLOWED_DOMAIN    – store.allowed_domain (empty string disables validation)
    LINKSHORTENER_SHORT_ID_LENGTH   – store.short_id_length
    LINKSHORTENER_BASE_PATH         – http.base_path

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    load_yaml(path: Path) -> dict
        Load a YAML document into a dictionary.

    load_config(path: str | Path | None = None) -> AppConfig
        Build the application configuration from YAML and environment.

Example:
    >>> from linkshortener.utils.config import load_config
    >>> config = load_config('config/local.yml')
    >>> config.store.persistence_path
    PosixPath('data/links.json')
"""

import os
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from linkshortener.exceptions import ConfigurationError, BadConfigurationError
from linkshortener.utils.constants import (
    APP_ENV_ENV,
    CONFIG_PATH_ENV,
    DATA_DIR_ENV,
    FILE_NAME_ENV,
    ALLOWED_DOMAIN_ENV,
    SHORT_ID_LENGTH_ENV,
    BASE_PATH_ENV,
    DEFAULT_DATA_DIR,
    DEFAULT_FILE_NAME,
    DEFAULT_SHORT_ID_LENGTH,
    DEFAULT_BASE_PATH,
)


logger = logging.getLogger(__name__)


# fmt: off
@dataclass(frozen=True)
class StoreConfig:
    data_dir: str = DEFAULT_DATA_DIR                # Directory holding the links file
    file_name: str = DEFAULT_FILE_NAME              # Name of the links file
    allowed_domain: str | None = None               # Only accept URLs on this host[:port]; None accepts any
    short_id_length: int = DEFAULT_SHORT_ID_LENGTH  # Length of newly generated short ids

    @property
    def persistence_path(self) -> Path:
        return Path(self.data_dir) / self.file_name


@dataclass(frozen=True)
class HttpConfig:
    base_path: str = DEFAULT_BASE_PATH              # Prefix for short links, e.g. /share/<shortId>


@dataclass(frozen=True)
class AppConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
# fmt: on


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(APP_ENV_ENV, 'local').lower()


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file into a Python dictionary.

    Args:
        path (Path):
            Path to a YAML file.

    Returns:
        dict[str, Any]:
            Parsed YAML document. Returns {} for empty files.

    Raises:
        ConfigurationError:
            If the file does not exist or is not valid YAML.
        BadConfigurationError:
            If the document is not a mapping.
    """
    if not path.is_file():
        raise ConfigurationError(f'Configuration file not found: {path}')

    try:
        with path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f'Configuration file {path} is not valid YAML.') from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadConfigurationError(f'Configuration file {path} must contain a mapping (got {type(data).__name__}).')
    return data


def _section(document: dict[str, Any], name: str) -> dict[str, Any]:
    section = document.get(name) or {}
    if not isinstance(section, dict):
        raise BadConfigurationError(f"'{name}' section must be a mapping.")
    return section


def _string_option(section: dict[str, Any], key: str, default: str, allow_empty: bool = False) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise BadConfigurationError(f'{key} must be a string (given value: {value!r}).')
    if not value and not allow_empty:
        raise BadConfigurationError(f'{key} must not be empty.')
    return value


def _short_id_length(value: Any) -> int:
    try:
        length = int(value)
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f'short_id_length must be an integer (given value: {value!r}).') from e
    if isinstance(value, bool) or length <= 0:
        raise BadConfigurationError(f'short_id_length must be a positive integer (given value: {value!r}).')
    return length


def _apply_environment(config: AppConfig) -> AppConfig:
    store_overrides = {}
    if os.environ.get(DATA_DIR_ENV):
        store_overrides['data_dir'] = os.environ[DATA_DIR_ENV]
    if os.environ.get(FILE_NAME_ENV):
        store_overrides['file_name'] = os.environ[FILE_NAME_ENV]
    if ALLOWED_DOMAIN_ENV in os.environ:
        store_overrides['allowed_domain'] = os.environ[ALLOWED_DOMAIN_ENV] or None
    if os.environ.get(SHORT_ID_LENGTH_ENV):
        store_overrides['short_id_length'] = _short_id_length(os.environ[SHORT_ID_LENGTH_ENV])

    http_overrides = {}
    if os.environ.get(BASE_PATH_ENV):
        http_overrides['base_path'] = os.environ[BASE_PATH_ENV]

    return AppConfig(
        store=replace(config.store, **store_overrides),
        http=replace(config.http, **http_overrides),
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load the application configuration

    Reads the YAML document at `path` (or at `LINKSHORTENER_CONFIG` when no path
    is given), fills missing options with defaults and applies environment
    overrides on top.

    Args:
        path (str | Path | None):
            Optional path to a YAML configuration document.

    Returns:
        AppConfig: The resolved configuration.

    Raises:
        ConfigurationError:
            If an explicitly requested file is missing or unreadable.
        BadConfigurationError:
            If the document holds values of the wrong type.

    Example:
        >>> config = load_config()
        >>> config.store.file_name
        'links.json'
    """
    path = path or os.environ.get(CONFIG_PATH_ENV)
    document = load_yaml(Path(path)) if path else {}

    store = _section(document, 'store')
    http = _section(document, 'http')

    allowed_domain = store.get('allowed_domain')
    if allowed_domain is not None and not isinstance(allowed_domain, str):
        raise BadConfigurationError(f'allowed_domain must be a string or null (given value: {allowed_domain!r}).')

    config = AppConfig(
        store=StoreConfig(
            data_dir=_string_option(store, 'data_dir', DEFAULT_DATA_DIR),
            file_name=_string_option(store, 'file_name', DEFAULT_FILE_NAME),
            allowed_domain=allowed_domain or None,
            short_id_length=_short_id_length(store.get('short_id_length', DEFAULT_SHORT_ID_LENGTH)),
        ),
        http=HttpConfig(base_path=_string_option(http, 'base_path', DEFAULT_BASE_PATH, allow_empty=True)),
    )
    config = _apply_environment(config)

    logger.debug(
        'Loaded configuration.',
        extra={'configPath': str(path) if path else None, 'appEnv': app_env(), 'persistencePath': str(config.store.persistence_path)},
    )
    return config
