"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class UnsupportedOperationError(AttributeError):
    """Operation requested outside the person capability set.

    Raised by the interceptor when a caller asks for an attribute or an
    operation identifier that the capability interface does not name.
    Inherits from AttributeError so ``hasattr`` and ``getattr`` with a
    default keep their usual meaning on the proxy.

    Example:
        >>> from person_proxy.domain.errors import UnsupportedOperationError
        >>> err = UnsupportedOperationError("Unsupported operation: fly")
        >>> str(err)
        'Unsupported operation: fly'
        >>> isinstance(err, AttributeError)
        True
    """


class InvalidProfileError(ValueError):
    """Demo profile data failed validation at construction.

    Example:
        >>> from person_proxy.domain.errors import InvalidProfileError
        >>> err = InvalidProfileError("age must be a non-negative integer, got -1")
        >>> isinstance(err, ValueError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be turned into domain values.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from person_proxy.domain.errors import ConfigurationError
        >>> err = ConfigurationError("[demo] section is invalid")
        >>> str(err)
        '[demo] section is invalid'
    """


__all__ = [
    "ConfigurationError",
    "InvalidProfileError",
    "UnsupportedOperationError",
]
