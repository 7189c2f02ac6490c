"""
Result models for flatparse.

These are the in-memory structures returned by the parsers:

- Table: ordered numeric rows from the CSV grammar.
- Section: one named group of key/value properties from the INI grammar.
- Config: ordered sections, always starting with the implicit unnamed
  section that holds properties appearing before the first header.

All models are frozen dataclasses. They are built in a single pass and
hold no reference back to the parsed text.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import pandas as pd

Row = tuple[float, ...]


# ---------------------------------------------------------------------------
# Table -- numeric CSV result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Table:
    """Ordered numeric rows, one per non-empty CSV line.

    Rows may have different lengths; no rectangularity is enforced.
    """

    rows: tuple[Row, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    @property
    def width(self) -> int:
        """Length of the longest row (0 for an empty table)."""
        return max((len(row) for row in self.rows), default=0)

    @property
    def is_rectangular(self) -> bool:
        """True when every row has the same number of values."""
        return len({len(row) for row in self.rows}) <= 1

    def to_list(self) -> list[list[float]]:
        return [list(row) for row in self.rows]

    def to_frame(self) -> pd.DataFrame:
        """Convert to a float64 DataFrame with columns ``col_0..col_{n-1}``.

        Short rows are padded with ``NaN`` so ragged tables still fit
        into a rectangular frame.
        """
        width = self.width
        columns = [f"col_{i}" for i in range(width)]
        padded = [
            list(row) + [float("nan")] * (width - len(row))
            for row in self.rows
        ]
        return pd.DataFrame(padded, columns=columns, dtype="float64")


# ---------------------------------------------------------------------------
# Section / Config -- INI result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Section:
    """A named group of properties.

    Attributes:
        name: Header name; the empty string for the implicit leading section.
        values: Property key -> value. A later duplicate key has already
            overwritten the earlier one by the time the section is built.
    """

    name: str = ""
    values: dict[str, str] = field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __getitem__(self, key: str) -> str:
        return self.values[key]

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.values.get(key, default)


@dataclass(frozen=True)
class Config:
    """Ordered sections in header order.

    ``sections[0]`` is always the implicit unnamed section. Two headers
    with the same name produce two distinct entries.
    """

    sections: tuple[Section, ...] = field(default_factory=lambda: (Section(),))

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __getitem__(self, index: int) -> Section:
        return self.sections[index]

    @property
    def default(self) -> Section:
        """The implicit section holding properties before the first header."""
        return self.sections[0]

    def names(self) -> list[str]:
        return [section.name for section in self.sections]

    def find(self, name: str) -> list[Section]:
        """Return every section called *name*, in input order."""
        return [section for section in self.sections if section.name == name]

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        """Look up *key* in the first section called *section*."""
        for candidate in self.sections:
            if candidate.name == section:
                return candidate.get(key, default)
        return default

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Flatten into ``{section_name: {key: value}}``.

        Sections sharing a name are overlaid in input order, so later
        keys win.
        """
        merged: dict[str, dict[str, str]] = {}
        for section in self.sections:
            merged.setdefault(section.name, {}).update(section.values)
        return merged
