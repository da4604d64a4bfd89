"""Invalid text encoding repair.

This module replaces undecodable UTF-8 sequences with U+FFFD.
It runs on single field values and on whole raw documents.
"""

from __future__ import annotations

import codecs
import re

from core.constants import REPLACEMENT_CHARACTER

BYTEWISE_REPLACE_ERRORS = "repofix.bytewise_replace"

_LONE_SURROGATE_PATTERN = re.compile("[\ud800-\udfff]")


def _replace_one_byte(error: UnicodeError) -> tuple[str, int]:
    """Replace the first undecodable byte and resume on the next one."""
    if not isinstance(error, UnicodeDecodeError):
        raise error
    return REPLACEMENT_CHARACTER, error.start + 1


codecs.register_error(BYTEWISE_REPLACE_ERRORS, _replace_one_byte)


def sanitize_text(value: str | bytes) -> str:
    """Return text with every invalid encoding unit replaced.

    Bytes are decoded as UTF-8 with each undecodable byte turned into
    one replacement character, so a truncated multi-byte sequence yields
    one replacement per byte and nothing valid after it is lost. Strings
    can only carry invalid encoding as lone surrogates, which are
    replaced one for one.

    Args:
        value: Raw bytes or decoded text.

    Returns:
        Valid text. Already-valid strings are returned unchanged.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors=BYTEWISE_REPLACE_ERRORS)
    if _LONE_SURROGATE_PATTERN.search(value) is None:
        return value
    return _LONE_SURROGATE_PATTERN.sub(REPLACEMENT_CHARACTER, value)


def is_valid_utf8(raw: bytes) -> bool:
    """Return whether raw bytes decode cleanly as UTF-8."""
    try:
        raw.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def repair_document_bytes(raw: bytes) -> tuple[str, bool]:
    """Decode a whole raw document before structural parsing.

    Uses the same byte-by-byte replacement as :func:`sanitize_text`.

    Args:
        raw: File contents.

    Returns:
        Decoded text and whether any bytes had to be replaced.
    """
    if is_valid_utf8(raw):
        return raw.decode("utf-8"), False
    return sanitize_text(raw), True
