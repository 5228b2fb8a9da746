"""Application-specific exceptions.

Classes:
    ShardShortenerError:
        Base class for all application errors.

    ConfigurationError / BadConfigurationError:
        Raised at startup when the shortener is misconfigured (e.g. a malformed shard id).

    InvalidArgumentError:
        Raised when a caller passes an out-of-range argument (e.g. a code length too small).

    GenerationExhaustedError:
        Raised when every bounded attempt to generate a unique shortcode collided.

    ShortURLNotFoundError:
        Raised when a shortcode is unknown or (for resolution) expired.

Example:
    >>> from shardshortener.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'A0aaaaab' not found.")
    Traceback (most recent call last):
        ...
    shardshortener.exceptions.ShortURLNotFoundError: Short URL with code 'A0aaaaab' not found.
"""


class ShardShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shardshortener_error'


class ConfigurationError(ShardShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class InvalidArgumentError(ShardShortenerError, ValueError):
    """Raised when a caller passes an invalid argument."""

    error_code = 'app:invalid_argument_error'


class ShortenerError(ShardShortenerError):
    """Base exception for failures of the shorten/resolve/stats operations."""

    error_code = 'shortener:shortener_error'


class GenerationExhaustedError(ShortenerError):
    """Raised when all shortcode generation attempts collided.

    The failure depends on transient contention, so callers may retry later.
    """

    error_code = 'shortener:generation_exhausted_error'


class ShortURLNotFoundError(ShortenerError):
    """Raised when a short URL does not exist (or has expired, for resolution)."""

    error_code = 'shortener:short_url_not_found_error'
