"""Utility functions for application configuration management.

The only configurable values of the link engine are its four bounds: the
minimum and maximum link TTL (hours) and the minimum and maximum redirect
limit. They are resolved from three layers, lowest precedence first:

1. Built-in defaults (see `linkshortener.constants.DefaultBounds`).
2. A YAML document, taken from (first match wins):
     - the `path` argument of `load_bounds()`,
     - the `LINKSHORTENER_CONFIG` environment variable,
     - `<project root>/config/<app env>.yml`, if that file exists.
3. Environment variable overrides:
     LINKSHORTENER_TTL_MIN, LINKSHORTENER_TTL_MAX,
     LINKSHORTENER_LIMIT_MIN, LINKSHORTENER_LIMIT_MAX.

The YAML document follows this structure (every key is optional):

    ttl:
      min: 1
      max: 48
    limit:
      min: 1
      max: 100

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    load_yaml(path: Path) -> dict
        Load a YAML file into a Python dictionary.

    load_bounds(path: Path | None = None) -> Bounds
        Resolve the system bounds from defaults, YAML and environment.

Example:
    >>> import os
    >>> os.environ['LINKSHORTENER_TTL_MAX'] = '72'
    >>> load_bounds()
    Bounds(ttl_min=1, ttl_max=72, limit_min=1, limit_max=100)
"""

import os
import logging
from pathlib import Path
from typing import Any

import yaml

from linkshortener.constants import ENV
from linkshortener.exceptions import BadConfigurationError, ConfigurationError
from linkshortener.models import Bounds


logger = logging.getLogger(__name__)

# (YAML section, YAML key, Bounds field, environment variable)
_BOUND_SOURCES = (
    ('ttl', 'min', 'ttl_min', ENV.Bounds.TTL_MIN),
    ('ttl', 'max', 'ttl_max', ENV.Bounds.TTL_MAX),
    ('limit', 'min', 'limit_min', ENV.Bounds.LIMIT_MIN),
    ('limit', 'max', 'limit_max', ENV.Bounds.LIMIT_MAX),
)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'test'
        >>> app_env()
        'test'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Reads the PROJECT_ROOT environment variable and falls back to the current
    working directory.
    """
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, os.getcwd()))


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
            If the file does not exist.
        BadConfigurationError:
            If the file is not valid YAML or its top level is not a mapping.
    """
    if not path.is_file():
        raise ConfigurationError(f'Configuration file not found: {path}')

    try:
        with path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise BadConfigurationError(f'Invalid YAML in {path}: {e}') from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadConfigurationError(f'Top level of {path} must be a mapping.')
    return data


def _config_path(path: Path | None) -> Path | None:
    """Pick the YAML document to read, or None if there is none."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(ENV.App.CONFIG_PATH)
    if env_path:
        return Path(env_path)

    default = project_root() / 'config' / f'{app_env()}.yml'
    return default if default.is_file() else None


def _as_int(value: Any, source: str) -> int:
    # bool is an int subclass; int() would truncate 1.9 to 1
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise BadConfigurationError(f'{source} must be an integer (given value: {value!r}).')
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f'{source} must be an integer (given value: {value!r}).') from e


def load_bounds(path: Path | None = None) -> Bounds:
    """Resolve the system bounds

    Args:
        path (Path | None):
            Explicit YAML configuration file. When None, LINKSHORTENER_CONFIG
            and then `<project root>/config/<app env>.yml` are tried.

    Returns:
        Bounds:
            Validated bounds.

    Raises:
        ConfigurationError:
            If an explicitly requested configuration file does not exist.
        BadConfigurationError:
            If a value is not an integer or the resulting bounds are inconsistent.

    Example:
        >>> load_bounds(Path('config/local.yml'))
        Bounds(ttl_min=1, ttl_max=48, limit_min=1, limit_max=100)
    """
    values: dict[str, int] = {}

    config_path = _config_path(path)
    if config_path is not None:
        document = load_yaml(config_path)
        for section, key, field, _ in _BOUND_SOURCES:
            section_data = document.get(section) or {}
            if not isinstance(section_data, dict):
                raise BadConfigurationError(f"Section '{section}' in {config_path} must be a mapping.")
            if key in section_data:
                values[field] = _as_int(section_data[key], f'{section}.{key}')
        logger.debug('Loaded bounds from YAML.', extra={'configPath': str(config_path)})

    for _, _, field, env_name in _BOUND_SOURCES:
        raw = os.environ.get(env_name)
        if raw:
            values[field] = _as_int(raw, env_name)

    bounds = Bounds(**values)
    logger.info(
        'Resolved system bounds.',
        extra={'ttlMin': bounds.ttl_min, 'ttlMax': bounds.ttl_max, 'limitMin': bounds.limit_min, 'limitMax': bounds.limit_max},
    )
    return bounds
