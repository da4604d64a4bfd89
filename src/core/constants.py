"""Core constants used across repofix modules.

This module centralizes fallback defaults and fixed output names.
Keeping values here avoids magic literals in the reshaping logic.
"""

from __future__ import annotations

DEFAULT_IDENTIFIER = "com.ripestore.source"
DEFAULT_SOURCE_URL = (
    "https://raw.githubusercontent.com/RipeStore/repos/main/RipeStore_feather.json"
)
OUTPUT_FILE_NAME = "output.json"
OUTPUT_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
REPLACEMENT_CHARACTER = "\ufffd"
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
EXPONENT_FORMAT_THRESHOLD = 1e21
SUCCESS_MESSAGE = f"Wrote {OUTPUT_FILE_NAME} (ordered, normalized)."

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_READ_FAILURE = 2
EXIT_PARSE_FAILURE = 3
EXIT_SERIALIZE_FAILURE = 4
EXIT_WRITE_FAILURE = 5
