"""Locate and format the ``/* Name */`` annotation comment that follows a token."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from oklch_names.core.span import Span

# Single-line block comment, non-greedy, no nesting.
COMMENT_PATTERN = re.compile(r'/\*.*?\*/')
ADJACENT_PATTERN = re.compile(r'[ \t]*(/\*.*?\*/)')

HORIZONTAL_WHITESPACE = ' \t'

# Alpha within this distance of 1.0 is treated as opaque.
OPAQUE_EPSILON = 0.001


class Placement(Enum):
    """Where an annotation is looked for and inserted relative to its token."""
    ADJACENT = "adjacent"  # directly after the token
    LINE = "line"          # anywhere later on the same line; inserted at line end


@dataclass(frozen=True)
class AnnotationSpan:
    """
    An existing annotation comment.

    ``comment`` covers ``/* ... */`` exactly. ``including_whitespace`` also
    covers the whitespace run in front of it, so deleting it leaves the line
    as if the annotation had never been inserted.
    """
    comment: Span
    including_whitespace: Span
    text: str

    def shifted(self, offset: int) -> AnnotationSpan:
        return AnnotationSpan(
            self.comment.shifted(offset),
            self.including_whitespace.shifted(offset),
            self.text,
        )


def locate(
    line_text: str,
    token_end_column: int,
    *,
    placement: Placement = Placement.ADJACENT,
    limit: int | None = None,
) -> AnnotationSpan | None:
    """
    Find the annotation comment belonging to the token ending at ``token_end_column``.

    Args:
        line_text: The line, without its terminator
        token_end_column: Column just past the token's closing parenthesis
        placement: ADJACENT requires the comment right after the token
            (horizontal whitespace allowed); LINE accepts the first comment
            anywhere later on the line
        limit: Column the comment must end before, normally the start of
            the next token on the line

    Returns:
        Column-relative AnnotationSpan, or None. If several comments
        qualify, only the first one is returned.
    """
    end = len(line_text) if limit is None else min(limit, len(line_text))
    if token_end_column > end:
        return None

    if placement is Placement.ADJACENT:
        match = ADJACENT_PATTERN.match(line_text, token_end_column, end)
        if match is None:
            return None
        comment_start, comment_end = match.span(1)
    else:
        match = COMMENT_PATTERN.search(line_text, token_end_column, end)
        if match is None:
            return None
        comment_start, comment_end = match.span()

    widened_start = comment_start
    while widened_start > token_end_column and line_text[widened_start - 1] in HORIZONTAL_WHITESPACE:
        widened_start -= 1

    return AnnotationSpan(
        comment=Span(comment_start, comment_end),
        including_whitespace=Span(widened_start, comment_end),
        text=line_text[comment_start:comment_end],
    )


def alpha_percent(alpha: float) -> int:
    """Alpha as a whole percentage, rounding halves up."""
    return math.floor(alpha * 100 + 0.5)


def format_annotation(name: str, alpha: float | None = None) -> str:
    """Build ``/* Name */``, or ``/* Name / P% */`` for a translucent color."""
    if alpha is not None and abs(alpha - 1.0) >= OPAQUE_EPSILON:
        return f"/* {name} / {alpha_percent(alpha)}% */"
    return f"/* {name} */"


def format_hover(name: str, alpha: float | None = None) -> str:
    """Build the markdown shown when hovering a named color."""
    text = f"**{name}**"
    if alpha is not None:
        percent = alpha_percent(alpha)
        if percent != 100:
            text += f" / {percent}%"
    return text
