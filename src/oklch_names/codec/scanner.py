"""Scanner for ``oklch()`` color function tokens."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator

from oklch_names.core.span import Span
from oklch_names.core.token import ParsedToken

# oklch( L C H [/ A] ) with horizontal whitespace only, so a token never
# spans lines. A is a decimal, optionally followed by '%'.
OKLCH_PATTERN = re.compile(
    r'oklch\([ \t]*'
    r'(?P<l>[\d.]+)[ \t]+'
    r'(?P<c>[\d.]+)[ \t]+'
    r'(?P<h>[\d.]+)'
    r'(?P<alpha>[ \t]*/[ \t]*(?P<alpha_value>[\d.%]+))?'
    r'[ \t]*\)'
)


def _parse_component(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_alpha(raw: str) -> float | None:
    """Parse ``0.8`` or ``80%`` to a fraction; None if either form is malformed."""
    if raw.endswith('%'):
        value = _parse_component(raw[:-1])
        return value / 100 if value is not None else None
    return _parse_component(raw)


def scan(text: str, base_offset: int = 0) -> Iterator[ParsedToken]:
    """
    Yield every well-formed ``oklch()`` token in text, left to right.

    Spans are rebased by ``base_offset`` so a caller scanning one line of a
    document gets whole-document offsets back. Tokens whose numbers do not
    parse, including a present but malformed alpha, are skipped entirely.
    """
    for match in OKLCH_PATTERN.finditer(text):
        l = _parse_component(match.group('l'))
        c = _parse_component(match.group('c'))
        h = _parse_component(match.group('h'))
        if l is None or c is None or h is None:
            continue

        alpha_raw = match.group('alpha')
        alpha = None
        if alpha_raw is not None:
            alpha = _parse_alpha(match.group('alpha_value'))
            if alpha is None:
                continue

        yield ParsedToken(
            l=l,
            c=c,
            h=h,
            span=Span(base_offset + match.start(), base_offset + match.end()),
            alpha=alpha,
            alpha_raw=alpha_raw,
        )


def token_at(tokens: Iterable[ParsedToken], offset: int) -> ParsedToken | None:
    """Return the first token whose span contains offset (end inclusive)."""
    for token in tokens:
        if token.span.contains(offset):
            return token
    return None


def tokens_in_range(tokens: Iterable[ParsedToken], span: Span) -> list[ParsedToken]:
    """Return tokens intersecting span, in source order."""
    return [token for token in tokens if token.span.intersects(span)]
