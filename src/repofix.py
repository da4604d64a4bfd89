"""Public SDK surface for repofix.

This module provides a stable import path for library users.
It re-exports the pipeline entry points and typed catalog models.
"""

from __future__ import annotations

from core.config import RepofixConfig
from core.errors import (
    RepofixConfigError,
    RepofixError,
    RepofixParseError,
    RepofixReadError,
    RepofixSerializeError,
    RepofixWriteError,
)
from core.types import App, Catalog, NewsItem, OpaqueValue, Version
from ingest.pipeline import normalize_document, normalize_repo_file, normalize_text
from ingest.reshaper import reshape_catalog
from store.catalog_writer import catalog_to_payload, serialize_catalog
from transforms.date_parser import canonicalize_date, parse_flexible_time
from transforms.text_sanitizer import sanitize_text
from transforms.type_coercion import coerce_int64, coerce_string

__all__ = [
    "App",
    "Catalog",
    "NewsItem",
    "OpaqueValue",
    "RepofixConfig",
    "RepofixConfigError",
    "RepofixError",
    "RepofixParseError",
    "RepofixReadError",
    "RepofixSerializeError",
    "RepofixWriteError",
    "Version",
    "canonicalize_date",
    "catalog_to_payload",
    "coerce_int64",
    "coerce_string",
    "normalize_document",
    "normalize_repo_file",
    "normalize_text",
    "parse_flexible_time",
    "reshape_catalog",
    "sanitize_text",
    "serialize_catalog",
]
