"""Shared typed models.

This module defines immutable catalog models produced by the reshaper
and consumed by the writer, keeping the output shape explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]


@dataclass(frozen=True)
class OpaqueValue:
    """JSON value carried through without coercion or reshaping.

    Attributes:
        payload: Decoded JSON value, re-emitted as-is. ``None`` here is a
            present JSON ``null``, not an absent field.
    """

    payload: JsonValue


@dataclass(frozen=True)
class Version:
    """One downloadable release of an app.

    Attributes:
        version: Version string.
        date: Canonical UTC date, or the original text when unparseable.
        localized_description: Release notes.
        download_url: Package download URL.
        size: Package size in bytes, zero when unknown.
        min_os_version: Minimum supported OS version.
    """

    version: str = ""
    date: str = ""
    localized_description: str = ""
    download_url: str = ""
    size: int = 0
    min_os_version: str = ""


@dataclass(frozen=True)
class App:
    """Catalog app entry.

    Attributes:
        name: Display name.
        bundle_identifier: Bundle identifier.
        developer_name: Developer display name.
        subtitle: Short tagline.
        localized_description: Long description.
        icon_url: Icon image URL.
        tint_color: Accent color.
        category: Store category.
        screenshot_urls: Ordered screenshot image URLs.
        versions: Ordered releases.
        app_permissions: Permissions payload, None when absent.
    """

    name: str = ""
    bundle_identifier: str = ""
    developer_name: str = ""
    subtitle: str = ""
    localized_description: str = ""
    icon_url: str = ""
    tint_color: str = ""
    category: str = ""
    screenshot_urls: tuple[str, ...] = ()
    versions: tuple[Version, ...] = ()
    app_permissions: OpaqueValue | None = None


@dataclass(frozen=True)
class NewsItem:
    """Catalog news entry.

    Attributes:
        title: Headline.
        identifier: News identifier.
        caption: Body text.
        date: Canonical UTC date, or the original text when unparseable.
        tint_color: Accent color.
        image_url: Banner image URL.
        notify: Whether clients should raise a notification.
        url: Target URL.
        app_id: Referenced app, None when absent or null.
    """

    title: str = ""
    identifier: str = ""
    caption: str = ""
    date: str = ""
    tint_color: str = ""
    image_url: str = ""
    notify: bool = False
    url: str = ""
    app_id: OpaqueValue | None = None


@dataclass(frozen=True)
class Catalog:
    """Root app catalog ("repo") document.

    Attributes:
        name: Catalog display name.
        subtitle: Catalog tagline.
        identifier: Catalog identifier, never empty.
        source_url: Catalog source URL, never empty.
        description: Catalog description.
        icon_url: Icon image URL.
        website: Website URL.
        patreon_url: Patreon page URL.
        header_url: Header image URL.
        tint_color: Accent color.
        featured_apps: Ordered featured bundle identifiers.
        apps: Ordered app entries.
        news: Ordered news entries.
    """

    identifier: str
    source_url: str
    name: str = ""
    subtitle: str = ""
    description: str = ""
    icon_url: str = ""
    website: str = ""
    patreon_url: str = ""
    header_url: str = ""
    tint_color: str = ""
    featured_apps: tuple[str, ...] = ()
    apps: tuple[App, ...] = ()
    news: tuple[NewsItem, ...] = ()
