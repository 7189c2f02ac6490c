"""
Custom exception hierarchy for flatparse.

Why a custom hierarchy:
- Callers can catch a syntax error from one grammar (e.g., CsvSyntaxError)
  without relying on generic ValueError.
- Every syntax error carries the position of the first mismatch, so a
  caller can point the user at the exact line and column.
"""

from __future__ import annotations


class FlatParseError(Exception):
    """Base exception for all flatparse errors."""


class UnknownFormatError(FlatParseError):
    """Raised when the format of an input file cannot be determined.

    Typically the file suffix is not one of the known csv/ini suffixes
    and no explicit format was given.
    """


class ConfigValidationError(FlatParseError):
    """Raised when a flatparse.yaml manifest fails validation.

    This can happen if:
    - The manifest file is empty.
    - A source has no explicit format and its suffix is unknown.
    """


class ParsingError(FlatParseError):
    """Raised when input text does not match a grammar."""


class ParseSyntaxError(ParsingError):
    """A grammar mismatch at a known position.

    Attributes:
        message: Human-readable description of the mismatch.
        line: 1-based line number of the mismatch.
        column: 1-based column number within that line.
        offset: 0-based character offset into the whole input.
        line_text: The offending line, without its line break.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int = 1,
        column: int = 1,
        offset: int = 0,
        line_text: str = "",
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.offset = offset
        self.line_text = line_text
        super().__init__(f"{message} (line {line}, column {column})")


class NumberSyntaxError(ParseSyntaxError):
    """Raised when a standalone number does not match the number grammar."""


class CsvSyntaxError(ParseSyntaxError):
    """Raised when numeric CSV text does not match the record grammar."""


class IniSyntaxError(ParseSyntaxError):
    """Raised when INI text contains a malformed header or property line."""
