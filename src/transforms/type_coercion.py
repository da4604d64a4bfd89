"""Loose JSON scalar coercion.

This module turns values of unknown JSON type into canonical strings
and 64-bit integers, so one policy governs every extracted field.
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping

from core.constants import EXPONENT_FORMAT_THRESHOLD, INT64_MAX, INT64_MIN
from transforms.text_sanitizer import sanitize_text


def coerce_string(mapping: Mapping[str, Any], key: str) -> str:
    """Extract a field as a canonical string.

    Args:
        mapping: Decoded JSON object.
        key: Field name.

    Returns:
        Canonical string; empty when the field is missing, null, or of
        an unsupported type.
    """
    value = mapping.get(key)
    if value is None:
        return ""
    if isinstance(value, str):
        return sanitize_text(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (dict, list)):
        return sanitize_text(_compact_json(value))
    return ""


def format_number(value: int | float) -> str:
    """Format a JSON number with a locale-independent minimal repr.

    Integral floats below 1e21 print without a fractional part; other
    floats use the shortest round-trip representation.

    Args:
        value: Decoded JSON number.

    Returns:
        Decimal text.
    """
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < EXPONENT_FORMAT_THRESHOLD:
        return str(int(value))
    return repr(value)


def coerce_int64(mapping: Mapping[str, Any], key: str) -> int:
    """Extract a numeric field as a truncated 64-bit integer.

    Args:
        mapping: Decoded JSON object.
        key: Field name.

    Returns:
        Integer value, or zero when missing, non-numeric, or out of range.
    """
    value = mapping.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        value = math.trunc(value)
    if value < INT64_MIN or value > INT64_MAX:
        return 0
    return int(value)


def _compact_json(value: object) -> str:
    """Serialize nested JSON without insignificant whitespace."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
