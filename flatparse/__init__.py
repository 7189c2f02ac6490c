"""
flatparse: grammar-driven parsers for numeric CSV and INI text.

Public API surface:

- ``parse_csv(text)`` -- parse comma-separated decimal numbers into a
  ``Table`` of float rows.

- ``parse_ini(text)`` -- parse ``[section]`` / ``key=value`` text into a
  ``Config`` whose first section is always the unnamed default section.

- ``open(path, ...)`` -- read a file and parse it with the parser chosen
  by its suffix (or an explicit format).

- ``load_all(manifest_path)`` -- parse every source named in a
  ``flatparse.yaml`` manifest.

Both parsers are pure functions of their input text. On malformed input
they raise a ``ParseSyntaxError`` subclass carrying line, column and
offset; no partial result is ever returned.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flatparse.config import load_manifest, resolve_path, validate_source_formats
from flatparse.exceptions import (
    CsvSyntaxError,
    FlatParseError,
    IniSyntaxError,
    NumberSyntaxError,
    ParseSyntaxError,
    ParsingError,
    UnknownFormatError,
)
from flatparse.models import Config, Row, Section, Table
from flatparse.parsers import match_number, parse_csv, parse_ini, parse_number
from flatparse.reader import read_source

__all__ = [
    "open",
    "load_all",
    "parse_csv",
    "parse_ini",
    "parse_number",
    "match_number",
    "Table",
    "Row",
    "Config",
    "Section",
    "FlatParseError",
    "ParsingError",
    "ParseSyntaxError",
    "NumberSyntaxError",
    "CsvSyntaxError",
    "IniSyntaxError",
    "UnknownFormatError",
]

logger = logging.getLogger(__name__)


def open(
    path: str | Path,
    fmt: str | None = None,
    encoding: str = "utf-8",
) -> Table | Config:
    """Read and parse a single file.

    Args:
        path: Path to a ``.csv`` / ``.ini`` / ``.cfg`` / ``.conf`` file.
        fmt: ``"csv"`` or ``"ini"`` to override suffix detection.
        encoding: Text encoding of the file.

    Returns:
        A ``Table`` for CSV input, a ``Config`` for INI input.

    Examples::

        table = flatparse.open("data/readings.csv")
        df = table.to_frame()

        config = flatparse.open("conf/servers.ini")
        ip = config.get("server_1", "ip")

    Raises:
        FileNotFoundError: If *path* does not exist.
        UnknownFormatError: If the format cannot be determined.
        ParseSyntaxError: If the content does not match the grammar.
    """
    return read_source(path, fmt, encoding)


def load_all(manifest_path: str | Path = "flatparse.yaml") -> dict[str, Table | Config]:
    """Parse every source declared in a manifest.

    Orchestration:
      1. ``load_manifest()`` -> ``ManifestConfig`` (Pydantic validation on load).
      2. ``validate_source_formats()`` -- fail fast on undetectable formats.
      3. For each source, in declaration order: resolve its path against
         the manifest directory and parse it with ``read_source()``.

    Returns:
        Mapping of source name -> parsed ``Table`` or ``Config``, in
        manifest order.

    Raises:
        FileNotFoundError: If the manifest or a source file does not exist.
        pydantic.ValidationError: If the manifest fails validation.
        ConfigValidationError: If the manifest file is empty or a source
            has no detectable format.
        ParseSyntaxError: At the first source with malformed content.
    """
    logger.info("load_all() -- manifest_path=%s", manifest_path)
    manifest = load_manifest(manifest_path)
    validate_source_formats(manifest)

    results: dict[str, Table | Config] = {}
    for name, source in manifest.sources.items():
        path = resolve_path(manifest_path, source)
        results[name] = read_source(path, source.format, source.encoding)
    logger.info("Parsed %d source(s)", len(results))
    return results
