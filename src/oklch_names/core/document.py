"""TextDocument - in-memory text buffer with line/character addressing."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from oklch_names.core.span import Position, Span
from oklch_names.errors import EditRejected

if TYPE_CHECKING:
    from oklch_names.edit.ops import EditOp

LINE_BREAK = re.compile(r'\r\n|\n')


@dataclass(frozen=True)
class Line:
    """One physical line; ``text`` excludes the line terminator."""
    number: int
    start: int
    text: str

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def span(self) -> Span:
        return Span(self.start, self.end)


class TextDocument:
    """
    Text buffer used as the edit host.

    Reads are always against the current snapshot. The only mutation is
    ``apply_edits``, which validates a whole op list first and then swaps in
    the new text, so a rejected transaction leaves the document untouched.
    """

    def __init__(self, text: str = "", path: Path | None = None, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding
        self.version = 0
        self._set_text(text)

    def _set_text(self, text: str) -> None:
        self._text = text
        self._line_starts = [0] + [m.end() for m in LINE_BREAK.finditer(text)]

    @classmethod
    def load(cls, path: str | Path, encoding: str = "utf-8") -> TextDocument:
        """Load a document from disk, keeping its line terminators."""
        from oklch_names.io.reader import load_document
        return load_document(path, encoding=encoding)

    def save(self, path: str | Path | None = None) -> Path:
        """Save to path, or back to the path it was loaded from."""
        from oklch_names.io.writer import save_document
        return save_document(self, path)

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def __len__(self) -> int:
        return len(self._text)

    def line_at(self, number: int) -> Line:
        """Return line ``number`` (zero-based)."""
        if not 0 <= number < self.line_count:
            raise IndexError(f"line {number} out of range (document has {self.line_count} lines)")
        start = self._line_starts[number]
        if number + 1 < self.line_count:
            end = self._line_starts[number + 1]
            raw = self._text[start:end]
            text = raw[:-2] if raw.endswith('\r\n') else raw[:-1]
        else:
            text = self._text[start:]
        return Line(number, start, text)

    def lines(self) -> Iterator[Line]:
        for number in range(self.line_count):
            yield self.line_at(number)

    def offset_at(self, position: Position) -> int:
        """Absolute offset of a position; the character is clamped to the line."""
        line = self.line_at(position.line)
        return line.start + max(0, min(position.character, len(line.text)))

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self._text)))
        number = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(number, offset - self._line_starts[number])

    def get_text(self, span: Span | None = None) -> str:
        if span is None:
            return self._text
        return self._text[span.start:span.end]

    def apply_edits(self, ops: list[EditOp]) -> None:
        """
        Apply all ops atomically.

        Raises:
            EditRejected: if any op is out of bounds or two ops overlap;
                nothing is applied in that case
        """
        from oklch_names.edit.ops import order_ops

        size = len(self._text)
        ascending = sorted(ops, key=lambda op: (op.start, op.end))
        for op in ascending:
            if not 0 <= op.start <= op.end <= size:
                raise EditRejected(f"Edit [{op.start}, {op.end}) outside document of length {size}")
        for prev, cur in zip(ascending, ascending[1:]):
            if prev.end > cur.start or (prev.start == prev.end == cur.start == cur.end):
                raise EditRejected(
                    f"Overlapping edits [{prev.start}, {prev.end}) and [{cur.start}, {cur.end})"
                )

        text = self._text
        for op in order_ops(ops):
            text = text[:op.start] + op.new_text + text[op.end:]
        self._set_text(text)
        self.version += 1
