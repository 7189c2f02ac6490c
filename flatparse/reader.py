"""
File reading wrappers for flatparse.

The parsers themselves never touch the filesystem. This module is the
thin I/O layer around them: read a file as text, pick a parser, and
return the parsed model. Syntax errors from the parser propagate
unchanged, with the file path added to the log.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flatparse.detect import detect_format, get_parser
from flatparse.exceptions import ParseSyntaxError
from flatparse.models import Config, Table

logger = logging.getLogger(__name__)


def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole file as text.

    A UTF-8 byte order mark is stripped when *encoding* is UTF-8.
    ``\\r\\n`` line endings are kept as-is; both grammars accept them.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def read_csv(path: str | Path, encoding: str = "utf-8") -> Table:
    """Read and parse a numeric CSV file."""
    return read_source(path, "csv", encoding)


def read_ini(path: str | Path, encoding: str = "utf-8") -> Config:
    """Read and parse an INI file."""
    return read_source(path, "ini", encoding)


def read_source(
    path: str | Path,
    fmt: str | None = None,
    encoding: str = "utf-8",
) -> Table | Config:
    """Read *path* and parse it with the parser for *fmt*.

    Args:
        path: Input file.
        fmt: ``"csv"`` or ``"ini"``; detected from the suffix when None.
        encoding: Text encoding of the file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        UnknownFormatError: If *fmt* is None and the suffix is unknown,
            or *fmt* is not supported.
        ParseSyntaxError: If the content does not match the grammar.
    """
    path = Path(path)
    if fmt is None:
        fmt = detect_format(path)
    parser = get_parser(fmt)
    text = read_text(path, encoding)

    try:
        result = parser.parse(text)
    except ParseSyntaxError as exc:
        logger.error("Syntax error in %s: %s", path, exc)
        raise

    if isinstance(result, Table):
        logger.info("Read %s: %d rows (%s)", path, len(result), fmt)
    else:
        logger.info("Read %s: %d sections (%s)", path, len(result), fmt)
    return result
