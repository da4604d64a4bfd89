"""Unit tests for structured logging setup."""

from __future__ import annotations

import json
from typing import Iterator

import pytest

from core.logging_config import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    yield
    configure_logging()


def test_logger_writes_json_events_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Logged events should be JSON lines on stderr."""
    configure_logging("INFO")

    get_logger("tests.logging").info("sample_event", app_count=3)
    captured = capsys.readouterr()
    event = json.loads(captured.err.strip())

    assert captured.out == "" and event["event"] == "sample_event" and event["app_count"] == 3


def test_logger_filters_below_configured_level(capsys: pytest.CaptureFixture[str]) -> None:
    """Events below the configured level should be dropped."""
    configure_logging("WARNING")

    get_logger("tests.logging").debug("hidden_event")

    assert capsys.readouterr().err == ""
