"""Person lookup exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each layer raises a specific error type for debuggability.
"""

from __future__ import annotations


class PersonLookupError(Exception):
    """Base exception for all person lookup failures."""


class PersonLookupConfigError(PersonLookupError):
    """Raised for invalid runtime configuration."""


class PersonLookupDependencyError(PersonLookupError):
    """Raised when an optional runtime dependency is missing."""


class InvalidArgumentError(PersonLookupError, ValueError):
    """Raised for invalid caller input to a lookup operation."""


class DataSourceUnavailableError(PersonLookupError):
    """Raised when a data file cannot be located, read, or decoded."""


class MalformedDataError(PersonLookupError):
    """Raised when a data file is not an array of well-formed records."""


class InvalidIdentityFormatError(PersonLookupError):
    """Raised when a joined record carries an unparsable person identity."""
