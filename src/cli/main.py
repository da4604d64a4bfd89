"""Repofix CLI entry point.

This module maps the single ``INPUT`` argument onto a normalization run
and translates domain errors into distinct process exit codes.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
from typing import Sequence

from core.config import RepofixConfig
from core.constants import (
    EXIT_OK,
    EXIT_PARSE_FAILURE,
    EXIT_READ_FAILURE,
    EXIT_SERIALIZE_FAILURE,
    EXIT_USAGE,
    EXIT_WRITE_FAILURE,
    OUTPUT_FILE_NAME,
    SUCCESS_MESSAGE,
)
from core.errors import (
    RepofixConfigError,
    RepofixError,
    RepofixParseError,
    RepofixReadError,
    RepofixSerializeError,
    RepofixWriteError,
)
from core.logging_config import configure_logging
from ingest.pipeline import normalize_repo_file

_EXIT_CODES: tuple[tuple[type[RepofixError], int], ...] = (
    (RepofixConfigError, EXIT_USAGE),
    (RepofixReadError, EXIT_READ_FAILURE),
    (RepofixParseError, EXIT_PARSE_FAILURE),
    (RepofixSerializeError, EXIT_SERIALIZE_FAILURE),
    (RepofixWriteError, EXIT_WRITE_FAILURE),
)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="repofix",
        description=f"Normalize an app catalog JSON file into ./{OUTPUT_FILE_NAME}",
    )
    parser.add_argument("input", nargs="?", help="Path to the catalog JSON to normalize")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the repofix CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args, _ = parser.parse_known_args(argv)
    if args.input is None:
        parser.print_usage(sys.stdout)
        return EXIT_USAGE
    try:
        config = RepofixConfig.from_env()
        configure_logging(config.log_level)
        normalize_repo_file(Path(args.input), Path.cwd() / OUTPUT_FILE_NAME, config)
    except RepofixError as error:
        print(f"error: {error}", file=sys.stderr)
        return _exit_code_for(error)
    print(SUCCESS_MESSAGE)
    return EXIT_OK


def _exit_code_for(error: RepofixError) -> int:
    """Map a domain error onto its exit code."""
    for error_type, exit_code in _EXIT_CODES:
        if isinstance(error, error_type):
            return exit_code
    return EXIT_USAGE
