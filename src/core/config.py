"""Runtime configuration model for repofix.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_IDENTIFIER,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SOURCE_URL,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RepofixConfigError


@dataclass(frozen=True)
class RepofixConfig:
    """Validated runtime configuration.

    Attributes:
        default_identifier: Catalog identifier used when input has none.
        default_source_url: Catalog source URL used when input has none.
        log_level: Minimum structured log level written to stderr.
    """

    default_identifier: str = DEFAULT_IDENTIFIER
    default_source_url: str = DEFAULT_SOURCE_URL
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "RepofixConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RepofixConfigError: If environment values are invalid.
        """
        default_identifier = _parse_default(
            "REPOFIX_DEFAULT_IDENTIFIER", os.getenv("REPOFIX_DEFAULT_IDENTIFIER")
        )
        default_source_url = _parse_default(
            "REPOFIX_DEFAULT_SOURCE_URL", os.getenv("REPOFIX_DEFAULT_SOURCE_URL")
        )
        log_level = _parse_log_level(os.getenv("REPOFIX_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            default_identifier=default_identifier or DEFAULT_IDENTIFIER,
            default_source_url=default_source_url or DEFAULT_SOURCE_URL,
            log_level=log_level,
        )


def _parse_default(variable: str, raw_value: str | None) -> str | None:
    """Validate an optional fallback override.

    Args:
        variable: Environment variable name for error context.
        raw_value: Raw string from environment, or None when unset.

    Returns:
        The override value, or None when unset.

    Raises:
        RepofixConfigError: If the override is blank.
    """
    if raw_value is None:
        return None
    if not raw_value.strip():
        raise RepofixConfigError(
            f"Invalid {variable} value: expected a non-blank string. "
            f"Unset {variable} to use the built-in default."
        )
    return raw_value


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased level name.

    Raises:
        RepofixConfigError: If value is not a supported level.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise RepofixConfigError(
            "Invalid REPOFIX_LOG_LEVEL value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
        )
    return level
