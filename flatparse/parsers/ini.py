"""
INI parser for flatparse.

Grammar (line oriented)::

    file           := (blank_line | section_header | property)* end_of_input
    section_header := '[' name ']'
    property       := key '=' value

Parsing runs in two independent steps:

1. classify_lines() turns each non-blank line into a SectionHeader or a
   Property, raising IniSyntaxError on the first malformed line.
2. assemble_sections() folds those entries into a Config with a
   SectionAccumulator: properties go into the in-progress section, each
   header flushes it and starts a new one, and end of input flushes once
   more. The in-progress section starts out unnamed, which is why every
   Config begins with the implicit default section.

Spaces and tabs around a name, key or value are dropped. Keys must be
non-empty; values may be empty ("ip=").
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from flatparse.exceptions import IniSyntaxError
from flatparse.models import Config, Section
from flatparse.parsers.base import BaseParser, syntax_error

logger = logging.getLogger(__name__)

_INLINE_WS = " \t"


@dataclass(frozen=True)
class SectionHeader:
    """A ``[name]`` line."""
    name: str


@dataclass(frozen=True)
class Property:
    """A ``key=value`` line."""
    key: str
    value: str


Entry = SectionHeader | Property


# ---------------------------------------------------------------------------
# Step 1: line classification
# ---------------------------------------------------------------------------

def _iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, line)`` pairs, with ``\\n`` / ``\\r\\n`` removed."""
    offset = 0
    for raw in text.split("\n"):
        yield offset, raw.removesuffix("\r")
        offset += len(raw) + 1


def classify_line(line: str, text: str = "", offset: int = 0) -> Entry | None:
    """Classify one line.

    Args:
        line: The line without its line break.
        text: The whole input, used only to position errors.
        offset: Offset of *line* within *text*.

    Returns:
        A SectionHeader, a Property, or None for a blank line.

    Raises:
        IniSyntaxError: For a header without ']' or with trailing text,
            or a property line without '=' or with an empty key.
    """
    source = text or line
    stripped = line.strip(_INLINE_WS)
    if not stripped.strip():
        return None

    indent = len(line) - len(line.lstrip(_INLINE_WS))

    if stripped.startswith("["):
        close = stripped.find("]")
        if close == -1:
            raise syntax_error(
                IniSyntaxError,
                source,
                offset + indent + len(stripped),
                "section header is missing its closing ']'",
            )
        trailing = stripped[close + 1:]
        if trailing:
            raise syntax_error(
                IniSyntaxError,
                source,
                offset + indent + close + 1,
                f"unexpected text after section header: {trailing!r}",
            )
        return SectionHeader(stripped[1:close].strip(_INLINE_WS))

    equals = line.find("=")
    if equals == -1:
        raise syntax_error(
            IniSyntaxError,
            source,
            offset + indent,
            f"expected 'key=value' or '[section]', found {stripped!r}",
        )
    key = line[:equals].strip(_INLINE_WS)
    if not key:
        raise syntax_error(
            IniSyntaxError, source, offset + equals, "property has an empty key"
        )
    return Property(key, line[equals + 1:].strip(_INLINE_WS))


def classify_lines(text: str) -> Iterator[Entry]:
    """Yield the header and property entries of *text*, skipping blank lines."""
    for offset, line in _iter_lines(text):
        entry = classify_line(line, text, offset)
        if entry is not None:
            yield entry


# ---------------------------------------------------------------------------
# Step 2: section assembly
# ---------------------------------------------------------------------------

@dataclass
class SectionAccumulator:
    """Fold state: the section being filled plus the sections already done.

    Usage::

        acc = SectionAccumulator()
        for entry in entries:
            acc.feed(entry)
        config = acc.finish()
    """

    name: str = ""
    values: dict[str, str] = field(default_factory=dict)
    completed: list[Section] = field(default_factory=list)

    def start_section(self, name: str) -> None:
        """Flush the in-progress section, even if empty, and open *name*."""
        self.completed.append(Section(self.name, self.values))
        self.name = name
        self.values = {}

    def add_property(self, key: str, value: str) -> None:
        """Insert or overwrite *key* in the in-progress section."""
        self.values[key] = value

    def feed(self, entry: Entry) -> None:
        if isinstance(entry, SectionHeader):
            self.start_section(entry.name)
        else:
            self.add_property(entry.key, entry.value)

    def finish(self) -> Config:
        """Flush the last section and return the assembled Config."""
        sections = (*self.completed, Section(self.name, dict(self.values)))
        return Config(sections)


def assemble_sections(entries: Iterable[Entry]) -> Config:
    """Fold classified entries into a Config."""
    accumulator = SectionAccumulator()
    for entry in entries:
        accumulator.feed(entry)
    return accumulator.finish()


class IniParser(BaseParser):
    """Parser for ``[section]`` / ``key=value`` configuration text."""

    def parse(self, text: str) -> Config:
        config = assemble_sections(classify_lines(text))
        logger.debug(
            "Parsed INI: %d sections (%d named)", len(config), len(config) - 1
        )
        return config


def parse_ini(text: str) -> Config:
    """Parse INI text into a Config.

    The first section of the result is always the unnamed default
    section; empty and repeated sections are preserved in order.

    Raises:
        IniSyntaxError: At the first malformed line.
    """
    return IniParser().parse(text)
