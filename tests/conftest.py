"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.fixture_paths import repo_fixture


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def dirty_repo_text() -> str:
    """Raw text of the dirty catalog fixture."""
    return repo_fixture("dirty_repo.json").read_text(encoding="utf-8")
