"""Normalized catalog serialization and persistence.

This module renders catalog models into ordered JSON payloads with
empty fields omitted, and writes the final document to disk.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.constants import OUTPUT_INDENT
from core.errors import RepofixSerializeError, RepofixWriteError
from core.types import App, Catalog, NewsItem, OpaqueValue, Version
from transforms.text_sanitizer import sanitize_text


def catalog_to_payload(catalog: Catalog) -> dict[str, Any]:
    """Serialize a catalog into an ordered JSON-safe payload.

    Args:
        catalog: Normalized catalog.

    Returns:
        Dictionary whose insertion order is the output key order.
    """
    return _compact(
        [
            ("name", catalog.name),
            ("subtitle", catalog.subtitle),
            ("identifier", catalog.identifier),
            ("sourceURL", catalog.source_url),
            ("description", catalog.description),
            ("iconURL", catalog.icon_url),
            ("website", catalog.website),
            ("patreonURL", catalog.patreon_url),
            ("headerURL", catalog.header_url),
            ("tintColor", catalog.tint_color),
            ("featuredApps", list(catalog.featured_apps)),
            ("apps", [app_to_payload(app) for app in catalog.apps]),
            ("news", [news_item_to_payload(item) for item in catalog.news]),
        ]
    )


def app_to_payload(app: App) -> dict[str, Any]:
    """Serialize one app entry."""
    return _compact(
        [
            ("name", app.name),
            ("bundleIdentifier", app.bundle_identifier),
            ("developerName", app.developer_name),
            ("subtitle", app.subtitle),
            ("localizedDescription", app.localized_description),
            ("iconURL", app.icon_url),
            ("tintColor", app.tint_color),
            ("category", app.category),
            ("screenshotURLs", list(app.screenshot_urls)),
            ("versions", [version_to_payload(version) for version in app.versions]),
            ("appPermissions", app.app_permissions),
        ]
    )


def version_to_payload(version: Version) -> dict[str, Any]:
    """Serialize one version entry."""
    return _compact(
        [
            ("version", version.version),
            ("date", version.date),
            ("localizedDescription", version.localized_description),
            ("downloadURL", version.download_url),
            ("size", version.size),
            ("minOSVersion", version.min_os_version),
        ]
    )


def news_item_to_payload(item: NewsItem) -> dict[str, Any]:
    """Serialize one news entry."""
    return _compact(
        [
            ("title", item.title),
            ("identifier", item.identifier),
            ("caption", item.caption),
            ("date", item.date),
            ("tintColor", item.tint_color),
            ("imageURL", item.image_url),
            ("notify", item.notify),
            ("url", item.url),
            ("appID", item.app_id),
        ]
    )


def serialize_catalog(catalog: Catalog) -> str:
    """Render a catalog as pretty-printed JSON text.

    Args:
        catalog: Normalized catalog.

    Returns:
        JSON document with two-space indentation and a trailing newline.

    Raises:
        RepofixSerializeError: If the payload cannot be encoded.
    """
    try:
        body = json.dumps(
            catalog_to_payload(catalog),
            indent=OUTPUT_INDENT,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as error:
        raise RepofixSerializeError(f"Failed to encode normalized catalog: {error}.") from error
    # Opaque payloads may still hold lone surrogates from JSON escapes.
    return sanitize_text(body) + "\n"


def write_catalog(output_path: Path, document: str) -> None:
    """Write a serialized catalog document.

    Args:
        output_path: Destination file path.
        document: Serialized JSON text.

    Raises:
        RepofixWriteError: If the file cannot be written.
    """
    try:
        output_path.write_text(document, encoding="utf-8")
    except OSError as error:
        raise RepofixWriteError(
            f"Failed to write normalized catalog to {output_path}: "
            f"{error.strerror or error}. Check directory permissions."
        ) from error


def _compact(fields: list[tuple[str, Any]]) -> dict[str, Any]:
    """Build an ordered payload, dropping empty and default values.

    Opaque values are unwrapped and always kept, including JSON null.
    """
    payload: dict[str, Any] = {}
    for key, value in fields:
        if isinstance(value, OpaqueValue):
            payload[key] = value.payload
        elif value:
            payload[key] = value
    return payload
