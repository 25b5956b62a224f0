"""Text addressing primitives: absolute spans and line/character positions."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Span:
    """
    Half-open range ``[start, end)`` of absolute character offsets.

    Spans are always expressed against an unedited snapshot of the text.
    """
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span: [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        """True if offset lies inside the span, end inclusive (cursor semantics)."""
        return self.start <= offset <= self.end

    def intersects(self, other: "Span") -> bool:
        """True if the two spans share at least one offset or touch on an empty span."""
        if self.start == self.end or other.start == other.end:
            return self.contains(other.start) or other.contains(self.start)
        return self.start < other.end and other.start < self.end

    def shifted(self, offset: int) -> "Span":
        """Return the span moved by offset characters."""
        return Span(self.start + offset, self.end + offset)


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line and character address inside a document."""
    line: int
    character: int
