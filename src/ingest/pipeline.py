"""Catalog normalization orchestration.

This module coordinates document reading, reshaping, serialization,
and output writes for one normalization run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from core.config import RepofixConfig
from core.logging_config import get_logger
from core.types import Catalog
from ingest.catalog_reader import parse_catalog_text, read_catalog_document
from ingest.reshaper import reshape_catalog
from store.catalog_writer import serialize_catalog, write_catalog

_LOGGER = get_logger(__name__)


def normalize_repo_file(input_path: Path, output_path: Path, config: RepofixConfig) -> Catalog:
    """Normalize a catalog file and write the result.

    The output file is only touched once the whole document has been
    serialized.

    Args:
        input_path: Raw catalog JSON path.
        output_path: Destination path for the normalized document.
        config: Runtime configuration.

    Returns:
        The normalized catalog that was written.

    Raises:
        RepofixReadError: If the input cannot be read.
        RepofixParseError: If the input is not a JSON object.
        RepofixSerializeError: If the output cannot be encoded.
        RepofixWriteError: If the output cannot be written.
    """
    raw = read_catalog_document(input_path)
    catalog = reshape_catalog(raw, config)
    document = serialize_catalog(catalog)
    write_catalog(output_path, document)
    _LOGGER.debug("catalog_written", output_path=str(output_path), byte_count=len(document))
    _log_normalize_completion(input_path, output_path, catalog)
    return catalog


def normalize_document(raw: Mapping[str, Any], config: RepofixConfig) -> str:
    """Reshape and serialize a decoded catalog in memory.

    Args:
        raw: Decoded top-level JSON object.
        config: Runtime configuration.

    Returns:
        Normalized JSON document text.
    """
    return serialize_catalog(reshape_catalog(raw, config))


def normalize_text(text: str, config: RepofixConfig) -> str:
    """Parse, reshape, and serialize catalog JSON text in memory.

    Raises:
        RepofixParseError: If the text is not a JSON object.
    """
    return normalize_document(parse_catalog_text(text), config)


def _log_normalize_completion(input_path: Path, output_path: Path, catalog: Catalog) -> None:
    """Log run completion with catalog counts."""
    _LOGGER.info(
        "normalize_completed",
        input_path=str(input_path),
        output_path=str(output_path),
        identifier=catalog.identifier,
        app_count=len(catalog.apps),
        version_count=sum(len(app.versions) for app in catalog.apps),
        news_count=len(catalog.news),
    )
