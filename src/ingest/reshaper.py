"""Catalog field projection.

This module maps a decoded, loosely-typed catalog tree onto the
ordered catalog models, dropping disallowed fields, applying defaults,
and skipping malformed collection elements.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from core.config import RepofixConfig
from core.logging_config import get_logger
from core.types import App, Catalog, NewsItem, OpaqueValue, Version
from transforms.date_parser import DateParseError, format_canonical, parse_flexible_time
from transforms.text_sanitizer import sanitize_text
from transforms.type_coercion import coerce_int64, coerce_string

_LOGGER = get_logger(__name__)


def reshape_catalog(raw: Mapping[str, Any], config: RepofixConfig) -> Catalog:
    """Build a normalized catalog from a decoded document.

    Args:
        raw: Decoded top-level JSON object.
        config: Runtime configuration holding fallback defaults.

    Returns:
        Normalized catalog.
    """
    catalog = Catalog(
        name=coerce_string(raw, "name"),
        subtitle=coerce_string(raw, "subtitle"),
        identifier=_default_if_blank(coerce_string(raw, "identifier"), config.default_identifier),
        source_url=_default_if_blank(coerce_string(raw, "sourceURL"), config.default_source_url),
        description=coerce_string(raw, "description"),
        icon_url=coerce_string(raw, "iconURL"),
        website=coerce_string(raw, "website"),
        patreon_url=coerce_string(raw, "patreonURL"),
        header_url=coerce_string(raw, "headerURL"),
        tint_color=coerce_string(raw, "tintColor"),
        featured_apps=_reshape_featured_apps(raw.get("featuredApps")),
        apps=tuple(reshape_app(entry) for entry in _object_elements(raw, "apps")),
        news=tuple(reshape_news_item(entry) for entry in _object_elements(raw, "news")),
    )
    _LOGGER.debug(
        "catalog_reshaped",
        app_count=len(catalog.apps),
        news_count=len(catalog.news),
        featured_count=len(catalog.featured_apps),
    )
    return catalog


def reshape_app(raw: Mapping[str, Any]) -> App:
    """Build one app entry; ``marketplaceID`` and ``patreon`` are dropped.

    Args:
        raw: Decoded app object.

    Returns:
        Normalized app.
    """
    permissions = OpaqueValue(raw["appPermissions"]) if "appPermissions" in raw else None
    return App(
        name=coerce_string(raw, "name"),
        bundle_identifier=coerce_string(raw, "bundleIdentifier"),
        developer_name=coerce_string(raw, "developerName"),
        subtitle=coerce_string(raw, "subtitle"),
        localized_description=coerce_string(raw, "localizedDescription"),
        icon_url=coerce_string(raw, "iconURL"),
        tint_color=coerce_string(raw, "tintColor"),
        category=coerce_string(raw, "category"),
        screenshot_urls=reshape_screenshots(raw),
        versions=tuple(reshape_version(entry) for entry in _object_elements(raw, "versions")),
        app_permissions=permissions,
    )


def reshape_version(raw: Mapping[str, Any]) -> Version:
    """Build one version entry; ``buildVersion`` is dropped.

    Args:
        raw: Decoded version object.

    Returns:
        Normalized version.
    """
    return Version(
        version=coerce_string(raw, "version"),
        date=_canonical_date(coerce_string(raw, "date")),
        localized_description=coerce_string(raw, "localizedDescription"),
        download_url=coerce_string(raw, "downloadURL"),
        size=coerce_int64(raw, "size"),
        min_os_version=coerce_string(raw, "minOSVersion"),
    )


def reshape_news_item(raw: Mapping[str, Any]) -> NewsItem:
    """Build one news entry.

    Args:
        raw: Decoded news object.

    Returns:
        Normalized news item.
    """
    raw_date = raw.get("date")
    notify = raw.get("notify")
    app_id = raw.get("appID")
    return NewsItem(
        title=coerce_string(raw, "title"),
        identifier=coerce_string(raw, "identifier"),
        caption=coerce_string(raw, "caption"),
        date=_canonical_date(sanitize_text(raw_date)) if isinstance(raw_date, str) else "",
        tint_color=coerce_string(raw, "tintColor"),
        image_url=coerce_string(raw, "imageURL"),
        notify=notify if isinstance(notify, bool) else False,
        url=coerce_string(raw, "url"),
        app_id=OpaqueValue(app_id) if app_id is not None else None,
    )


def reshape_screenshots(raw: Mapping[str, Any]) -> tuple[str, ...]:
    """Collect screenshot URLs, falling back to the legacy key.

    ``screenshots`` is only read when ``screenshotURLs`` is absent.

    Args:
        raw: Decoded app object.

    Returns:
        Ordered screenshot URLs.
    """
    key = "screenshotURLs" if "screenshotURLs" in raw else "screenshots"
    elements = raw.get(key)
    if not isinstance(elements, list):
        return ()
    urls: list[str] = []
    for element in elements:
        if isinstance(element, str):
            urls.append(sanitize_text(element))
        elif isinstance(element, dict):
            url = coerce_string(element, "imageURL") or coerce_string(element, "url")
            if url:
                urls.append(url)
    return tuple(urls)


def _reshape_featured_apps(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(sanitize_text(item) for item in value if isinstance(item, str))


def _object_elements(raw: Mapping[str, Any], key: str) -> Iterator[Mapping[str, Any]]:
    """Yield object elements of a list field, skipping anything else.

    Args:
        raw: Parent JSON object.
        key: Collection field name.

    Yields:
        Elements that are JSON objects, in input order.
    """
    elements = raw.get(key)
    if not isinstance(elements, list):
        return
    for position, element in enumerate(elements):
        if isinstance(element, dict):
            yield element
            continue
        _LOGGER.debug(
            "malformed_element_skipped",
            collection=key,
            position=position,
            element_type=type(element).__name__,
        )


def _canonical_date(text: str) -> str:
    if not text:
        return ""
    try:
        instant = parse_flexible_time(text)
    except DateParseError:
        _LOGGER.debug("date_left_unparsed", value=text)
        return text
    return format_canonical(instant)


def _default_if_blank(value: str, default: str) -> str:
    """Return ``value`` unless it is empty after stripping whitespace."""
    return value if value.strip() else default
