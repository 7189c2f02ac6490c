"""
Format detection for flatparse.

Formats are identified by file suffix only; the grammars are strict
enough that a wrong guess surfaces as a syntax error on the first line.

Design: Strategy Pattern
- detect_format() returns a format name ("csv" or "ini").
- get_parser() maps a format name to a BaseParser instance.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flatparse.exceptions import UnknownFormatError
from flatparse.parsers.base import BaseParser
from flatparse.parsers.ini import IniParser
from flatparse.parsers.numeric_csv import CsvParser

logger = logging.getLogger(__name__)

_SUFFIX_FORMATS = {
    ".csv": "csv",
    ".ini": "ini",
    ".cfg": "ini",
    ".conf": "ini",
}

# Maps format name to parser class
_PARSER_MAP: dict[str, type[BaseParser]] = {
    "csv": CsvParser,
    "ini": IniParser,
}


def detect_format(path: str | Path) -> str:
    """Detect the format of *path* from its suffix.

    Raises:
        UnknownFormatError: If the suffix is not a known csv/ini suffix.
    """
    path = Path(path)
    fmt = _SUFFIX_FORMATS.get(path.suffix.lower())
    if fmt is None:
        known = ", ".join(sorted(_SUFFIX_FORMATS))
        raise UnknownFormatError(
            f"Could not detect format for: {path}\n"
            f"Known suffixes: {known}. Pass the format explicitly."
        )
    logger.info("Detected format '%s' for %s", fmt, path)
    return fmt


def get_parser(fmt: str) -> BaseParser:
    """Return a parser instance for the format name *fmt*.

    Raises:
        UnknownFormatError: If *fmt* is not a supported format.
    """
    parser_cls = _PARSER_MAP.get(fmt)
    if parser_cls is None:
        raise UnknownFormatError(
            f"Unsupported format: '{fmt}'. "
            f"Supported formats: {sorted(_PARSER_MAP)}"
        )
    return parser_cls()
