"""
Numeric CSV parser for flatparse.

Grammar::

    file   := record (line_break record)* end_of_input
    record := number (',' number)*

Each record becomes one Row of floats. A line break is ``\\n`` or
``\\r\\n``; empty lines (including a single trailing line break) produce
no row, so empty input yields an empty Table. The whole input must be
consumed: a number followed by anything other than ',', a line break
or end of input is an error, even though the number rule itself stops
short without complaint (``"1a"`` matches ``"1"``).
"""

from __future__ import annotations

import logging

from flatparse.exceptions import CsvSyntaxError
from flatparse.models import Row, Table
from flatparse.parsers.base import BaseParser, Cursor, describe
from flatparse.parsers.numbers import scan_number

logger = logging.getLogger(__name__)


def _at_line_break(cursor: Cursor) -> bool:
    char = cursor.peek()
    return char == "\n" or (char == "\r" and cursor.peek(1) == "\n")


def _skip_line_break(cursor: Cursor) -> None:
    cursor.advance(2 if cursor.peek() == "\r" else 1)


def _parse_record(cursor: Cursor) -> Row:
    """Parse ``number (',' number)*`` and stop before the line terminator."""
    values = [scan_number(cursor, CsvSyntaxError).value]
    while cursor.peek() == ",":
        cursor.advance()
        values.append(scan_number(cursor, CsvSyntaxError).value)
    return tuple(values)


class CsvParser(BaseParser):
    """Parser for comma-separated decimal numbers."""

    def parse(self, text: str) -> Table:
        cursor = Cursor(text)
        rows: list[Row] = []

        while not cursor.at_end():
            if _at_line_break(cursor):
                _skip_line_break(cursor)
                continue

            rows.append(_parse_record(cursor))

            if cursor.at_end():
                break
            if not _at_line_break(cursor):
                raise cursor.error(
                    CsvSyntaxError,
                    f"expected ',' or end of line, found {describe(cursor.peek())}",
                )
            _skip_line_break(cursor)

        logger.debug("Parsed CSV: %d rows", len(rows))
        return Table(tuple(rows))


def parse_csv(text: str) -> Table:
    """Parse numeric CSV text into a Table.

    Example::

        >>> parse_csv("0,1\\n-2,-3.4").to_list()
        [[0.0, 1.0], [-2.0, -3.4]]

    Raises:
        CsvSyntaxError: At the first character that does not fit the grammar.
    """
    return CsvParser().parse(text)
