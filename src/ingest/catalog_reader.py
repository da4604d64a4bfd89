"""Raw catalog document reader.

This module loads catalog bytes, repairs invalid encoding across the
whole document, and decodes it into a generic JSON object tree.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.errors import RepofixParseError, RepofixReadError
from core.logging_config import get_logger
from transforms.text_sanitizer import repair_document_bytes

_LOGGER = get_logger(__name__)


def read_catalog_document(input_path: Path) -> dict[str, Any]:
    """Read and decode a catalog file.

    Args:
        input_path: Path to the raw catalog JSON.

    Returns:
        Decoded top-level JSON object.

    Raises:
        RepofixReadError: If the file cannot be read.
        RepofixParseError: If the content is not a JSON object.
    """
    try:
        raw = input_path.read_bytes()
    except OSError as error:
        raise RepofixReadError(
            f"Failed to read catalog at {input_path}: {error.strerror or error}. "
            "Provide a readable JSON file."
        ) from error
    _LOGGER.debug("catalog_read", input_path=str(input_path), byte_count=len(raw))
    return parse_catalog_bytes(raw, source=str(input_path))


def parse_catalog_bytes(raw: bytes, source: str = "<memory>") -> dict[str, Any]:
    """Decode raw catalog bytes into a JSON object.

    Args:
        raw: Document bytes, possibly with invalid UTF-8.
        source: Label used in error messages.

    Returns:
        Decoded top-level JSON object.

    Raises:
        RepofixParseError: If the content is not a JSON object.
    """
    text, repaired = repair_document_bytes(raw)
    if repaired:
        _LOGGER.info("document_encoding_repaired", source=source)
    return parse_catalog_text(text, source=source)


def parse_catalog_text(text: str, source: str = "<memory>") -> dict[str, Any]:
    """Decode catalog text into a JSON object.

    Args:
        text: Document text.
        source: Label used in error messages.

    Returns:
        Decoded top-level JSON object; a top-level null reads as an
        empty object.

    Raises:
        RepofixParseError: If JSON is malformed, or an array or scalar.
    """
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as error:
        raise RepofixParseError(
            f"Failed to parse catalog JSON at {source}: "
            f"{error.msg} (line {error.lineno}, column {error.colno})."
        ) from error
    except (ValueError, RecursionError) as error:
        raise RepofixParseError(f"Failed to parse catalog JSON at {source}: {error}.") from error
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise RepofixParseError(
            f"Failed to parse catalog JSON at {source}: "
            f"expected an object at top level, got {type(payload).__name__}."
        )
    return payload


def _reject_constant(name: str) -> Any:
    """Refuse the non-standard NaN and Infinity literals."""
    raise ValueError(f"non-standard constant {name} is not valid JSON")
