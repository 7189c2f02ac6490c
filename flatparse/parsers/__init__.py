"""
Parsers sub-package for flatparse.

Contains the hand-written recursive-descent grammars that turn raw text
into result models (see flatparse.models).

Design: Strategy Pattern
- base.py defines the BaseParser ABC, the Cursor and error positioning.
- numbers.py implements the decimal number lexer shared by the CSV grammar.
- numeric_csv.py implements CsvParser (comma-separated numeric records).
- ini.py implements IniParser (section headers and key=value properties).

flatparse.detect maps a file format name to the parser class at runtime.
"""

from flatparse.parsers.ini import IniParser, parse_ini
from flatparse.parsers.numbers import match_number, parse_number
from flatparse.parsers.numeric_csv import CsvParser, parse_csv

__all__ = [
    "CsvParser",
    "IniParser",
    "match_number",
    "parse_csv",
    "parse_ini",
    "parse_number",
]
