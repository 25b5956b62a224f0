"""Parsed ``oklch(...)`` token."""

from dataclasses import dataclass

from oklch_names.core.span import Span


@dataclass(frozen=True)
class ParsedToken:
    """
    One ``oklch(L C H [/ A])`` occurrence found in a buffer.

    ``alpha_raw`` is the exact source text of the alpha clause, slash and
    surrounding spaces included (e.g. ``" / 15%"``). It is kept apart from the
    numeric ``alpha`` so a replacement can reproduce the original formatting.
    Both are None when the token has no alpha clause.
    """
    l: float
    c: float
    h: float
    span: Span
    alpha: float | None = None
    alpha_raw: str | None = None

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end
