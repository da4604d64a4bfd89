"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import main
from core.constants import SUCCESS_MESSAGE
from core.errors import RepofixSerializeError
from tests.fixture_paths import repo_fixture


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("REPOFIX_LOG_LEVEL", raising=False)
    return tmp_path


def test_cli_without_input_prints_usage(capsys: pytest.CaptureFixture[str]) -> None:
    """Missing input argument should print usage and exit 1."""
    exit_code = main([])

    assert exit_code == 1 and "usage: repofix" in capsys.readouterr().out


def test_cli_writes_output_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Successful runs should write output.json and confirm on stdout."""
    exit_code = main([str(repo_fixture("dirty_repo.json"))])
    output = capsys.readouterr().out.strip()
    written = json.loads((tmp_path / "output.json").read_text(encoding="utf-8"))

    assert exit_code == 0 and output == SUCCESS_MESSAGE
    assert written["identifier"] == "com.ripestore.source"


def test_cli_returns_2_for_unreadable_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Unreadable input should exit 2 without writing output."""
    exit_code = main([str(tmp_path / "missing.json")])

    assert exit_code == 2 and capsys.readouterr().err.startswith("error: ")
    assert not (tmp_path / "output.json").exists()


def test_cli_returns_3_for_malformed_json(tmp_path: Path) -> None:
    """Malformed JSON should exit 3 without writing output."""
    exit_code = main([str(repo_fixture("malformed_repo.json"))])

    assert exit_code == 3 and not (tmp_path / "output.json").exists()


def test_cli_returns_4_for_serialization_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Serialization failures should exit 4 without writing output."""

    def _fail(_catalog: object) -> str:
        raise RepofixSerializeError("cannot encode")

    monkeypatch.setattr("ingest.pipeline.serialize_catalog", _fail)

    exit_code = main([str(repo_fixture("dirty_repo.json"))])

    assert exit_code == 4 and not (tmp_path / "output.json").exists()


def test_cli_returns_5_for_write_failure(tmp_path: Path) -> None:
    """Write failures should exit 5."""
    (tmp_path / "output.json").mkdir()

    exit_code = main([str(repo_fixture("dirty_repo.json"))])

    assert exit_code == 5


def test_cli_returns_1_for_invalid_config(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Invalid configuration should exit 1 with a one-line diagnostic."""
    monkeypatch.setenv("REPOFIX_LOG_LEVEL", "LOUD")

    exit_code = main([str(repo_fixture("dirty_repo.json"))])
    error_lines = capsys.readouterr().err.strip().splitlines()

    assert exit_code == 1 and len(error_lines) == 1
