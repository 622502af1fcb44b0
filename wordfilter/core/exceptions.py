# wordfilter/core/exceptions.py

"""Custom exception hierarchy for the sensitive word filter.

This module defines the specific error types used throughout the application
to differentiate between configuration, initialization, and build errors.
The scanner itself never raises.
"""


class FilterError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(FilterError):
    """Raised when configuration loading or validation fails."""

    pass


class InitializationError(FilterError):
    """Raised when the filter engine cannot be built."""

    pass


class DictionaryFrozenError(FilterError):
    """Raised when a keyword is inserted after the dictionary was built."""

    pass


class ValidationError(FilterError):
    """Raised when input validation fails (e.g., a non-string keyword)."""

    pass
