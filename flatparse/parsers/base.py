"""
Base parser protocol / ABC and cursor primitives for flatparse.

All format-specific parsers implement the same contract:
1. parse() takes the complete input text and returns a result model
   (Table or Config).
2. On the first grammar mismatch it raises a ParseSyntaxError subclass
   carrying line, column and offset. No partial result is returned.

The Cursor is the shared state of the hand-written recursive-descent
parsers: a position into an immutable string plus helpers to build
position-aware errors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from flatparse.exceptions import ParseSyntaxError
from flatparse.models import Config, Table


def locate(text: str, offset: int) -> tuple[int, int, str]:
    """Map a character offset to ``(line, column, line_text)``.

    Line and column are 1-based. ``line_text`` excludes the line break
    (including the ``\\r`` of a CRLF pair).
    """
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    line_end = text.find("\n", offset)
    if line_end == -1:
        line_end = len(text)
    line_text = text[line_start:line_end].rstrip("\r")
    return line, offset - line_start + 1, line_text


def syntax_error(
    error_cls: type[ParseSyntaxError],
    text: str,
    offset: int,
    message: str,
) -> ParseSyntaxError:
    """Build (not raise) a syntax error positioned at *offset* in *text*."""
    line, column, line_text = locate(text, offset)
    return error_cls(
        message,
        line=line,
        column=column,
        offset=offset,
        line_text=line_text,
    )


def describe(char: str) -> str:
    """Human-readable name of a lookahead character for error messages."""
    if char == "":
        return "end of input"
    if char in ("\n", "\r"):
        return "line break"
    return repr(char)


@dataclass
class Cursor:
    """Read position over an immutable input string.

    ``peek()`` returns the empty string past the end of input so callers
    can compare against single characters without bounds checks.
    """

    text: str
    pos: int = 0

    def peek(self, ahead: int = 0) -> str:
        index = self.pos + ahead
        if index < len(self.text):
            return self.text[index]
        return ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def error(
        self,
        error_cls: type[ParseSyntaxError],
        message: str,
        offset: int | None = None,
    ) -> ParseSyntaxError:
        """Build a syntax error at *offset* (default: the current position)."""
        return syntax_error(
            error_cls, self.text, self.pos if offset is None else offset, message
        )


class BaseParser(ABC):
    """Abstract base class for flatparse grammars.

    Subclasses must implement parse(). Parsers hold no state between
    calls, so one instance can be reused freely.
    """

    @abstractmethod
    def parse(self, text: str) -> Table | Config:
        """Parse a complete input text.

        Args:
            text: The whole input, already decoded.

        Returns:
            The fully assembled result model.

        Raises:
            ParseSyntaxError: At the first grammar mismatch.
        """
