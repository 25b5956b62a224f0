"""Edit operations planned against an unedited text snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from oklch_names.core.span import Span


@dataclass(frozen=True)
class Replace:
    """Replace the text in span with new text."""
    span: Span
    text: str

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    @property
    def new_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class Insert:
    """Insert text at an offset."""
    position: int
    text: str

    @property
    def start(self) -> int:
        return self.position

    @property
    def end(self) -> int:
        return self.position

    @property
    def new_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class Delete:
    """Remove the text in span."""
    span: Span

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    @property
    def new_text(self) -> str:
        return ""


EditOp = Union[Replace, Insert, Delete]


def order_ops(ops: list[EditOp]) -> list[EditOp]:
    """
    Sort ops for back-to-front application.

    Descending by start, then by end, so that applying each op never moves an
    offset a later op still targets. At a shared start the wider op (a
    replace or delete beginning at p) goes before a zero-width insert at p.
    """
    return sorted(ops, key=lambda op: (op.start, op.end), reverse=True)
