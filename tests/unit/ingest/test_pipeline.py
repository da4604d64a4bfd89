"""Unit tests for normalization orchestration."""

from __future__ import annotations

import json
from pathlib import Path

from core.config import RepofixConfig
from core.constants import DEFAULT_IDENTIFIER, DEFAULT_SOURCE_URL
from ingest.pipeline import normalize_repo_file, normalize_text
from tests.fixture_paths import repo_fixture


def test_normalize_repo_file_writes_output(tmp_path: Path) -> None:
    """Pipeline should write the normalized catalog and return it."""
    output_path = tmp_path / "output.json"

    catalog = normalize_repo_file(
        repo_fixture("dirty_repo.json"), output_path, RepofixConfig()
    )
    written = json.loads(output_path.read_text(encoding="utf-8"))

    assert len(catalog.apps) == 2 and [app["name"] for app in written["apps"]] == ["Alpha", "Beta"]


def test_normalize_text_is_idempotent(dirty_repo_text: str) -> None:
    """Normalizing normalized output should not change a byte."""
    first_pass = normalize_text(dirty_repo_text, RepofixConfig())
    second_pass = normalize_text(first_pass, RepofixConfig())

    assert first_pass == second_pass


def test_normalize_text_excludes_disallowed_keys_everywhere() -> None:
    """Dropped keys should not appear anywhere in the output."""
    raw_text = json.dumps(
        {
            "apps": [
                {
                    "marketplaceID": 99,
                    "patreon": None,
                    "versions": [{"buildVersion": {"n": 1}, "version": "1"}],
                }
            ]
        }
    )

    document = normalize_text(raw_text, RepofixConfig())

    assert all(key not in document for key in ("marketplaceID", "patreon", "buildVersion"))


def test_normalize_text_turns_null_document_into_default_catalog() -> None:
    """A null document should produce a catalog with only the defaults."""
    document = normalize_text("null", RepofixConfig())

    assert json.loads(document) == {
        "identifier": DEFAULT_IDENTIFIER,
        "sourceURL": DEFAULT_SOURCE_URL,
    }
