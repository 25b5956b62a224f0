"""Named color palette with tolerance-based lookup."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from oklch_names.errors import MalformedPalette

log = logging.getLogger(__name__)

# Absolute per-component tolerance used when matching source values to entries.
# Source files usually carry values rounded to a handful of decimals.
MATCH_EPSILON = 0.0001


def format_number(value: float) -> str:
    """Format a component as the shortest plain decimal that round-trips (``0`` not ``0.0``, ``0.00005`` not ``5e-05``)."""
    if math.isfinite(value) and value == int(value) and abs(value) < 1e21:
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def approx_equal(a: float, b: float, epsilon: float = MATCH_EPSILON) -> bool:
    return abs(a - b) < epsilon


@dataclass(frozen=True)
class ColorEntry:
    """A named color with its canonical OKLCH components."""
    name: str
    l: float
    c: float
    h: float

    def literal(self, alpha_raw: str | None = None) -> str:
        """
        Render this entry as an ``oklch(...)`` literal.

        ``alpha_raw`` is appended verbatim before the closing parenthesis, so
        an existing alpha clause such as ``" / 15%"`` keeps its exact format.
        """
        body = f"{format_number(self.l)} {format_number(self.c)} {format_number(self.h)}"
        return f"oklch({body}{alpha_raw or ''})"

    @classmethod
    def from_record(cls, record: Any) -> ColorEntry:
        """Build an entry from a ``{name, oklch: {l, c, h}}`` mapping."""
        if not isinstance(record, Mapping):
            raise MalformedPalette(f"Palette record must be an object, got {type(record).__name__}")
        name = record.get("name")
        if not isinstance(name, str):
            raise MalformedPalette(f"Palette record has no string 'name': {record!r}")
        values = record.get("oklch")
        if not isinstance(values, Mapping):
            raise MalformedPalette(f"Palette record {name!r} has no 'oklch' object")

        components: list[float] = []
        for key in ("l", "c", "h"):
            value = values.get(key)
            # bool is an int subclass; true/false in JSON is still malformed
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise MalformedPalette(f"Palette record {name!r} has non-numeric oklch.{key}: {value!r}")
            if not math.isfinite(value):
                raise MalformedPalette(f"Palette record {name!r} has non-finite oklch.{key}")
            components.append(float(value))

        return cls(name, *components)


class PaletteIndex:
    """
    Immutable table of named colors.

    Forward lookup (values to name) is approximate, with an independent
    tolerance on each of L, C and H. Backward lookup (name to entry) is exact.
    Build one per session and pass it to whatever needs it.
    """

    def __init__(self, entries: Sequence[ColorEntry] = ()):
        self._entries: tuple[ColorEntry, ...] = tuple(entries)

    @classmethod
    def from_records(cls, records: Any) -> PaletteIndex:
        """Build an index from decoded JSON records, validating every one."""
        if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
            raise MalformedPalette(
                f"Palette must be a list of color records, got {type(records).__name__}"
            )
        entries = [ColorEntry.from_record(record) for record in records]
        log.debug("Built palette index with %d entries", len(entries))
        return cls(entries)

    @classmethod
    def empty(cls) -> PaletteIndex:
        return cls(())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ColorEntry]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @property
    def entries(self) -> tuple[ColorEntry, ...]:
        return self._entries

    def find_name(self, l: float, c: float, h: float) -> str | None:
        """Return the name of the first entry matching all three components, or None."""
        for entry in self._entries:
            if approx_equal(entry.l, l) and approx_equal(entry.c, c) and approx_equal(entry.h, h):
                return entry.name
        return None

    def find_entry(self, name: str) -> ColorEntry | None:
        """Return the first entry named exactly ``name``, or None."""
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def search(self, query: str) -> list[ColorEntry]:
        """Case-insensitive substring match on name or ``oklch(...)`` literal."""
        needle = query.strip().lower()
        if not needle:
            return list(self._entries)
        return [
            entry for entry in self._entries
            if needle in entry.name.lower() or needle in entry.literal().lower()
        ]
