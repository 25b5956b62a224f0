"""
Plan edits for the annotate, remove, replace and gray-conversion commands.

Every plan is computed against one immutable snapshot of the document.
Tokens are scanned line by line, their spans rebased to absolute offsets,
and processed in descending start order, so the resulting ops can be
applied back to front without any op shifting another's target.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from oklch_names.codec.annotation import (
    AnnotationSpan,
    Placement,
    format_annotation,
    format_hover,
    locate,
)
from oklch_names.codec.scanner import scan, token_at, tokens_in_range
from oklch_names.core.document import Line, TextDocument
from oklch_names.core.palette import ColorEntry, PaletteIndex
from oklch_names.core.span import Position, Span
from oklch_names.core.token import ParsedToken
from oklch_names.edit.ops import Delete, EditOp, Insert, Replace
from oklch_names.edit.plan import EditPlan, Hover, Operation, PlanStatus

log = logging.getLogger(__name__)

CUSTOM_LABEL = "Custom"

GRAY_FAMILIES = ("Slate", "Gray", "Zinc", "Neutral", "Stone")
GRAY_NAME_PATTERN = re.compile(r'^(?P<family>' + '|'.join(GRAY_FAMILIES) + r') (?P<shade>\d+)$')


@dataclass(frozen=True)
class TokenSite:
    """A token together with its line, its existing annotation and where a new one goes."""
    token: ParsedToken
    line: Line
    annotation: AnnotationSpan | None
    insert_at: int


@dataclass(frozen=True)
class GrayToken:
    site: TokenSite
    family: str
    shade: str


class EditPlanner:
    """
    Turns scanner, locator and palette output into ordered edit ops.

    Example:
        planner = EditPlanner(palette)
        plan = planner.annotate_all(doc)
        doc.apply_edits(list(plan.ops))
    """

    def __init__(self, palette: PaletteIndex, placement: Placement = Placement.ADJACENT):
        self.palette = palette
        self.placement = placement

    # -------------------------------------------------------------------------
    # Scanning
    # -------------------------------------------------------------------------

    def _line_sites(self, line: Line) -> list[TokenSite]:
        tokens = list(scan(line.text, line.start))
        sites = []
        for i, token in enumerate(tokens):
            is_last = i + 1 == len(tokens)
            # A token's annotation may not reach into the next token.
            limit = None if is_last else tokens[i + 1].start - line.start
            found = locate(
                line.text,
                token.end - line.start,
                placement=self.placement,
                limit=limit,
            )
            if self.placement is Placement.LINE and is_last:
                insert_at = line.start + len(line.text.rstrip(' \t'))
            else:
                insert_at = token.end
            sites.append(TokenSite(
                token=token,
                line=line,
                annotation=found.shifted(line.start) if found else None,
                insert_at=insert_at,
            ))
        return sites

    def sites(self, document: TextDocument) -> list[TokenSite]:
        """All token sites in the document, last token first."""
        sites = []
        for line in document.lines():
            sites.extend(self._line_sites(line))
        sites.sort(key=lambda site: site.token.start, reverse=True)
        return sites

    def gray_tokens(self, document: TextDocument) -> list[GrayToken]:
        """Tokens whose palette name is a gray-family shade, last token first."""
        result = []
        for site in self.sites(document):
            name = self.palette.find_name(site.token.l, site.token.c, site.token.h)
            if name is None:
                continue
            match = GRAY_NAME_PATTERN.match(name)
            if match:
                result.append(GrayToken(site, match.group('family'), match.group('shade')))
        return result

    def color_action_at(self, document: TextDocument, selection: Span) -> ParsedToken | None:
        """
        The token a quick fix applies to.

        An empty selection (a cursor) picks the token containing it; a
        non-empty one picks the first token it intersects on its first line.
        """
        line = document.line_at(document.position_at(selection.start).line)
        tokens = list(scan(line.text, line.start))
        if len(selection) == 0:
            return token_at(tokens, selection.start)
        hits = tokens_in_range(tokens, selection)
        return hits[0] if hits else None

    # -------------------------------------------------------------------------
    # Shared edit construction
    # -------------------------------------------------------------------------

    def _comment_edit(self, site: TokenSite, text: str) -> EditOp | None:
        """Edit bringing the site's annotation to ``text``; None if already there."""
        if site.annotation is None:
            return Insert(site.insert_at, " " + text)
        if site.annotation.text == text:
            return None
        return Replace(site.annotation.comment, text)

    def _recolor(self, site: TokenSite, entry: ColorEntry) -> list[EditOp]:
        """Replace the token with entry's values, keeping its alpha text, and retitle its comment."""
        token = site.token
        ops: list[EditOp] = [Replace(token.span, entry.literal(token.alpha_raw))]
        comment = self._comment_edit(site, format_annotation(entry.name, token.alpha))
        if comment is not None:
            ops.append(comment)
        return ops

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def resolve_hover(self, document: TextDocument, position: Position) -> Hover | None:
        """Name of the color under position, or None when it has no palette name."""
        if not 0 <= position.line < document.line_count:
            return None
        line = document.line_at(position.line)
        offset = document.offset_at(position)
        token = token_at(scan(line.text, line.start), offset)
        if token is None:
            return None
        name = self.palette.find_name(token.l, token.c, token.h)
        if name is None:
            return None
        return Hover(format_hover(name, token.alpha), token.span)

    def annotate_all(self, document: TextDocument) -> EditPlan:
        """Insert or refresh a ``/* Name */`` comment after every token."""
        sites = self.sites(document)
        if not sites:
            return EditPlan.failed(Operation.ANNOTATE, PlanStatus.NO_COLORS)

        ops: list[EditOp] = []
        for site in sites:
            token = site.token
            name = self.palette.find_name(token.l, token.c, token.h) or CUSTOM_LABEL
            op = self._comment_edit(site, format_annotation(name, token.alpha))
            if op is not None:
                ops.append(op)

        log.debug("annotate: %d tokens, %d edits", len(sites), len(ops))
        return EditPlan(Operation.ANNOTATE, ops=tuple(ops), count=len(ops))

    def remove_all_annotations(self, document: TextDocument) -> EditPlan:
        """Delete every token's annotation along with the whitespace before it."""
        sites = self.sites(document)
        if not sites:
            return EditPlan.failed(Operation.REMOVE_ANNOTATIONS, PlanStatus.NO_COLORS)

        ops: list[EditOp] = [
            Delete(site.annotation.including_whitespace)
            for site in sites
            if site.annotation is not None
        ]
        if not ops:
            return EditPlan.failed(Operation.REMOVE_ANNOTATIONS, PlanStatus.NO_ANNOTATIONS)

        log.debug("remove: %d tokens, %d annotations", len(sites), len(ops))
        return EditPlan(Operation.REMOVE_ANNOTATIONS, ops=tuple(ops), count=len(ops))

    def replace_color_at(self, document: TextDocument, span: Span, entry: ColorEntry) -> EditPlan:
        """
        Swap the token at span for entry, keeping its original alpha text.

        span is either a token's exact span or a cursor/selection, which is
        resolved the same way as ``color_action_at``.
        """
        sites = self.sites(document)
        site = next((s for s in sites if s.token.span == span), None)
        if site is None:
            token = self.color_action_at(document, span)
            if token is not None:
                site = next((s for s in sites if s.token.span == token.span), None)
        if site is None:
            return EditPlan.failed(Operation.REPLACE_COLOR, PlanStatus.NO_COLORS)

        ops = self._recolor(site, entry)
        return EditPlan(Operation.REPLACE_COLOR, ops=tuple(ops), count=1, target=entry.name)

    def convert_gray_family(self, document: TextDocument, family: str) -> EditPlan:
        """
        Move every gray-family token to the same shade of ``family``.

        Tokens whose shade does not exist in the target family are skipped
        and counted, not treated as errors.
        """
        if family not in GRAY_FAMILIES:
            raise ValueError(f"Unknown gray family: {family!r} (expected one of {', '.join(GRAY_FAMILIES)})")

        grays = self.gray_tokens(document)
        if not grays:
            return EditPlan.failed(Operation.CONVERT_GRAY, PlanStatus.NO_GRAY_COLORS)

        ops: list[EditOp] = []
        converted = skipped = 0
        for gray in grays:
            entry = self.palette.find_entry(f"{family} {gray.shade}")
            if entry is None:
                log.debug("no %s %s in palette, skipping %s %s", family, gray.shade, gray.family, gray.shade)
                skipped += 1
                continue
            ops.extend(self._recolor(gray.site, entry))
            converted += 1

        return EditPlan(
            Operation.CONVERT_GRAY,
            ops=tuple(ops),
            count=converted,
            skipped=skipped,
            target=family,
        )
