"""Utility functions for application configuration management.

Configuration is stored as YAML documents, one per application environment
(`APP_ENV`), under a `config/` directory at the project root:

    config/
    ├── local.yml
    └── dev.yml

Each document follows this structure:

    active_backend: redis
    base_url: https://sho.rt
    configs:
      file:
        path: data/links.json
      redis:
        host: localhost
        port: 6379
        db: 0

`load_config()` reduces the document to the active backend's section:

    {
        "active_backend": "redis",
        "base_url": "https://sho.rt",
        "redis": {"host": "localhost", "port": 6379, "db": 0}
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the storage key prefix, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    config_file() -> Path
        Return the path of the YAML document for the current environment.

    load_config() -> dict
        Load and validate the configuration of the current environment.

Example:
    >>> from linkshrink.utils.config import load_config
    >>> config = load_config()
    >>> config['active_backend']
    'file'
    >>> config['file']['path']
    'data/links.json'
"""

import os
import logging
from pathlib import Path

import yaml

from linkshrink.constants import ENV, Backend
from linkshrink.exceptions import BadConfigurationError
from linkshrink.types import AppConfig


logger = logging.getLogger(__name__)


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
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return storage key prefix

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'linkshrink'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'linkshrink:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Reads PROJECT_ROOT and falls back to the current working directory.
    """
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, os.getcwd())).resolve()


def config_file() -> Path:
    """Return the YAML document for the current environment

    `LINKSHRINK_CONFIG_FILE` takes precedence over `<project root>/config/<APP_ENV>.yml`.
    """
    override = os.environ.get(ENV.App.CONFIG_FILE)
    if override:
        return Path(override)
    return project_root() / 'config' / f'{app_env()}.yml'


def load_config() -> AppConfig:
    """Load configuration for the current environment

    Returns:
        dict: the active backend name, the public base URL and the
              active backend's options.

    Raises:
        FileNotFoundError:
            If the configuration document does not exist.
        BadConfigurationError:
            If the document is malformed or names an unknown backend.

    Example:
        >>> load_config()
        {'active_backend': 'file', 'base_url': 'http://localhost:3000', 'file': {'path': 'data/links.json'}}
    """
    path = config_file()
    logger.debug('Loading configuration.', extra={'configFile': str(path)})

    with open(path, encoding='utf-8') as f:
        try:
            document = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise BadConfigurationError(f'Configuration file {path} is not valid YAML.') from e

    if not isinstance(document, dict):
        raise BadConfigurationError(f'Configuration file {path} must hold a mapping.')

    backend = document.get('active_backend')
    if backend not in set(Backend):
        raise BadConfigurationError(f"Unknown storage backend {backend!r} in {path}.")

    backend_config = (document.get('configs') or {}).get(backend) or {}
    if not isinstance(backend_config, dict):
        raise BadConfigurationError(f"Options of backend '{backend}' in {path} must be a mapping.")

    logger.debug('Loaded configuration.', extra={'configFile': str(path), 'backend': backend})
    return {
        'active_backend': backend,
        'base_url': document.get('base_url'),
        backend: backend_config,
    }
