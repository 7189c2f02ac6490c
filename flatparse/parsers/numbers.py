"""
Decimal number lexer for flatparse.

Grammar::

    number        := sign? ( int_part frac_part? | frac_part )
    sign          := '-'
    int_part      := '0' | digit_nonzero digit*
    frac_part     := '.' digit+

Rules worth knowing:
1. A lone '0' is a valid integer part, but '0' followed by another
   digit is rejected ("004" is not a number).
2. The integer part may be omitted when a fraction follows (".4", "-.4").
3. Matching is greedy but partial: "1.1.1" yields "1.1" and "1a" yields
   "1". Whatever is left is for the caller to accept or reject.
4. No exponent, '+' sign, thousands separators, or hex/octal forms.

The matched token is converted with ``float()``, which cannot fail for
any token this grammar accepts.
"""

from __future__ import annotations

from dataclasses import dataclass

from flatparse.exceptions import NumberSyntaxError, ParseSyntaxError
from flatparse.parsers.base import Cursor, describe

# ASCII only; str.isdigit() would also accept other Unicode digits
_DIGITS = frozenset("0123456789")
_NONZERO_DIGITS = frozenset("123456789")


@dataclass(frozen=True)
class NumberToken:
    """A matched number: its source text and ``[start, end)`` span."""

    text: str
    start: int
    end: int

    @property
    def value(self) -> float:
        return float(self.text)


def _scan_int_part(cursor: Cursor, error_cls: type[ParseSyntaxError]) -> bool:
    """Consume an integer part if one starts here. Returns True if consumed."""
    char = cursor.peek()
    if char == "0":
        cursor.advance()
        if cursor.peek() in _DIGITS:
            raise cursor.error(error_cls, "leading zero in number")
        return True
    if char in _NONZERO_DIGITS:
        cursor.advance()
        while cursor.peek() in _DIGITS:
            cursor.advance()
        return True
    return False


def _scan_frac_part(cursor: Cursor) -> bool:
    """Consume '.' digit+ if present. A '.' without a digit is left alone."""
    if cursor.peek() != "." or cursor.peek(1) not in _DIGITS:
        return False
    cursor.advance(2)
    while cursor.peek() in _DIGITS:
        cursor.advance()
    return True


def scan_number(
    cursor: Cursor,
    error_cls: type[ParseSyntaxError] = NumberSyntaxError,
) -> NumberToken:
    """Match the longest number at the cursor and advance past it.

    Args:
        cursor: Cursor positioned at the first character of the number.
        error_cls: Syntax error class to raise, so callers embedding the
            number rule (e.g. the CSV parser) report their own error type.

    Returns:
        The matched NumberToken. The cursor is left right after it.

    Raises:
        error_cls: If no number starts at the cursor.
    """
    start = cursor.pos
    if cursor.peek() == "-":
        cursor.advance()
    has_int = _scan_int_part(cursor, error_cls)
    has_frac = _scan_frac_part(cursor)
    if not (has_int or has_frac):
        raise cursor.error(
            error_cls, f"expected a number, found {describe(cursor.peek())}"
        )
    return NumberToken(cursor.text[start:cursor.pos], start, cursor.pos)


def match_number(text: str, pos: int = 0) -> NumberToken:
    """Match a number starting at *pos*, without requiring end of input.

    ``match_number("1.1.1").text == "1.1"``; ``match_number("1a").text == "1"``.

    Raises:
        NumberSyntaxError: If no number starts at *pos*.
    """
    return scan_number(Cursor(text, pos))


def parse_number(text: str) -> float:
    """Parse *text* as exactly one number, rejecting any trailing text.

    Raises:
        NumberSyntaxError: If *text* is not entirely one number.
    """
    cursor = Cursor(text)
    token = scan_number(cursor)
    if not cursor.at_end():
        raise cursor.error(
            NumberSyntaxError,
            f"unexpected {describe(cursor.peek())} after number {token.text!r}",
        )
    return token.value
