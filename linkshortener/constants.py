from enum import StrEnum


class DefaultBounds:
    """System bounds used when no configuration overrides them."""

    TTL_MIN = 1  # hours
    TTL_MAX = 48  # hours
    LIMIT_MIN = 1  # redirects
    LIMIT_MAX = 100  # redirects
    # Largest accepted ttl_max; expiry times must stay representable as datetimes
    TTL_CEILING = 24 * 365 * 100  # hours


class Shortcode:
    """Short identifier generation parameters."""

    LENGTH = 8
    MIN_LENGTH = 6
    MAX_LENGTH = 8
    # Uniqueness retries before giving up on a new identifier
    MAX_ATTEMPTS = 10


class CLIDefaults:
    """Values used by the CLI when `shorten` omits them (clamped like any other value)."""

    TTL_HOURS = 24
    LIMIT = 10


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        PROJECT_ROOT = 'PROJECT_ROOT'
        LOG_LEVEL = 'LOG_LEVEL'
        CONFIG_PATH = 'LINKSHORTENER_CONFIG'

    class Bounds(StrEnum):
        TTL_MIN = 'LINKSHORTENER_TTL_MIN'
        TTL_MAX = 'LINKSHORTENER_TTL_MAX'
        LIMIT_MIN = 'LINKSHORTENER_LIMIT_MIN'
        LIMIT_MAX = 'LINKSHORTENER_LIMIT_MAX'
