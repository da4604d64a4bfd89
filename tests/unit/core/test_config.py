"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RepofixConfig
from core.constants import DEFAULT_IDENTIFIER, DEFAULT_LOG_LEVEL, DEFAULT_SOURCE_URL
from core.errors import RepofixConfigError


def test_from_env_uses_builtin_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to the built-in constants."""
    monkeypatch.delenv("REPOFIX_DEFAULT_IDENTIFIER", raising=False)
    monkeypatch.delenv("REPOFIX_DEFAULT_SOURCE_URL", raising=False)
    monkeypatch.delenv("REPOFIX_LOG_LEVEL", raising=False)

    config = RepofixConfig.from_env()

    assert config == RepofixConfig(DEFAULT_IDENTIFIER, DEFAULT_SOURCE_URL, DEFAULT_LOG_LEVEL)


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should honor environment overrides."""
    monkeypatch.setenv("REPOFIX_DEFAULT_IDENTIFIER", "org.example.repo")
    monkeypatch.setenv("REPOFIX_LOG_LEVEL", "debug")

    config = RepofixConfig.from_env()

    assert config.default_identifier == "org.example.repo" and config.log_level == "DEBUG"


def test_from_env_raises_for_blank_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should refuse a blank fallback override."""
    monkeypatch.setenv("REPOFIX_DEFAULT_SOURCE_URL", "  ")

    with pytest.raises(RepofixConfigError):
        RepofixConfig.from_env()


def test_from_env_raises_for_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unsupported log levels."""
    monkeypatch.setenv("REPOFIX_LOG_LEVEL", "LOUD")

    with pytest.raises(RepofixConfigError):
        RepofixConfig.from_env()
