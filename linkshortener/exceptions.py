"""Application-specific exceptions.

Classes:
    LinkShortenerError:
        Base exception for all application-specific errors.

    ValidationError:
        Raised when a required input is missing or empty.

    DomainMismatchError:
        Raised when a URL is not absolute or its host is not the allowed domain.

    ConfigurationError / BadConfigurationError:
        Raised when the application configuration cannot be loaded or is invalid.

DAO-related exceptions live in `linkshortener.dao.exceptions` and share the
same base class.

Example:
    >>> from linkshortener.exceptions import DomainMismatchError
    >>> raise DomainMismatchError('Link must be from domain "example.com". Got: other.com')
    Traceback (most recent call last):
        ...
    linkshortener.exceptions.DomainMismatchError: Link must be from domain "example.com". Got: other.com
"""


class LinkShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:linkshortener_error'


class ValidationError(LinkShortenerError):
    """Raised when a required input is missing or empty."""

    error_code = 'input:validation_error'


class DomainMismatchError(ValidationError):
    """Raised when a URL is malformed or its host differs from the allowed domain."""

    error_code = 'input:domain_mismatch_error'


class ConfigurationError(LinkShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
