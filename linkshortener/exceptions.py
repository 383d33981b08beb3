"""Application-wide exceptions.

Every exception carries an `error_code` class attribute in the form
`<area>:<name>` so that front ends can react to a failure kind without
matching on message text.

The link errors double as the user-facing outcome of a link operation: their
message is the same text the LinkEngine appends to its notification log.

Example:
    >>> from linkshortener.exceptions import LinkNotFoundError
    >>> try:
    ...     raise LinkNotFoundError("Link 'abc12345' not found.")
    ... except LinkNotFoundError as e:
    ...     e.error_code
    'link:not_found'
"""


class LinkShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkshortener_error'


class InvalidInputError(LinkShortenerError):
    """Raised when an operation receives unusable arguments (e.g. empty URL, missing owner)."""

    error_code = 'link:invalid_input'


class LinkNotFoundError(LinkShortenerError):
    """Raised when no link with the requested identifier exists."""

    error_code = 'link:not_found'


class LinkExpiredError(LinkShortenerError):
    """Raised when resolving a link past its expiration time."""

    error_code = 'link:expired'


class LinkLimitExceededError(LinkShortenerError):
    """Raised when resolving a link whose redirect count has reached its limit."""

    error_code = 'link:limit_exceeded'


class ForbiddenError(LinkShortenerError):
    """Raised when a user tries to modify a link they do not own."""

    error_code = 'link:forbidden'


class ShortcodeGenerationError(LinkShortenerError):
    """Raised when no unused short identifier could be generated."""

    error_code = 'link:shortcode_generation'


class UserNotFoundError(LinkShortenerError):
    """Raised when no user with the requested identifier exists."""

    error_code = 'user:not_found'


class ConfigurationError(LinkShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
