"""Repofix exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Only structural failures are raised; field-level problems are coerced.
"""

from __future__ import annotations


class RepofixError(Exception):
    """Base exception for all repofix failures."""


class RepofixConfigError(RepofixError):
    """Raised for invalid runtime configuration."""


class RepofixReadError(RepofixError):
    """Raised when the input document cannot be read."""


class RepofixParseError(RepofixError):
    """Raised when the input document is not a JSON object."""


class RepofixSerializeError(RepofixError):
    """Raised when the normalized catalog cannot be encoded."""


class RepofixWriteError(RepofixError):
    """Raised when the normalized catalog cannot be written."""
