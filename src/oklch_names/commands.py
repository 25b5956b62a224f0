"""
Host-facing commands.

Each command checks its preconditions, asks the picker at most once, plans
synchronously from the answer and commits the whole plan in one
transaction. Dismissing the picker aborts before any op is built.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from oklch_names.codec.annotation import Placement
from oklch_names.core.document import TextDocument
from oklch_names.core.palette import ColorEntry, PaletteIndex
from oklch_names.core.span import Position, Span
from oklch_names.edit.plan import EditPlan, Hover, Operation, PlanStatus
from oklch_names.edit.planner import GRAY_FAMILIES, EditPlanner
from oklch_names.edit.sequencer import EditSequencer
from oklch_names.errors import MalformedPalette
from oklch_names.io.reader import load_palette

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickItem:
    """One choice offered to the user."""
    label: str
    description: str = ""
    value: Any = None


class Picker(Protocol):
    """Interactive selection; returns None when the user dismisses it."""

    def pick(self, items: Sequence[PickItem], placeholder: str = "") -> PickItem | None:
        ...


def palette_items(palette: PaletteIndex) -> list[PickItem]:
    """Palette entries as pick items, described by their ``oklch(...)`` literal."""
    return [PickItem(entry.name, entry.literal(), entry) for entry in palette]


def family_items() -> list[PickItem]:
    return [PickItem(family, "gray family", family) for family in GRAY_FAMILIES]


class ColorCommands:
    """
    The four editing commands plus hover, bound to one palette.

    A palette that failed to load leaves the commands usable but inert:
    every command reports PALETTE_UNAVAILABLE instead of raising.
    """

    def __init__(
        self,
        palette: PaletteIndex | None,
        picker: Picker,
        sequencer: EditSequencer | None = None,
        placement: Placement = Placement.ADJACENT,
    ):
        self.palette = palette
        self.picker = picker
        self.sequencer = sequencer or EditSequencer()
        self.planner = EditPlanner(palette or PaletteIndex.empty(), placement)
        self.load_error: str | None = None

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        picker: Picker,
        sequencer: EditSequencer | None = None,
        placement: Placement = Placement.ADJACENT,
    ) -> ColorCommands:
        """Load the palette at path; a bad palette is logged once, not raised."""
        try:
            palette = load_palette(path)
        except MalformedPalette as e:
            log.error("Failed to load OKLCH color map: %s", e)
            commands = cls(None, picker, sequencer, placement)
            commands.load_error = str(e)
            return commands
        return cls(palette, picker, sequencer, placement)

    @property
    def available(self) -> bool:
        return self.palette is not None

    def _precheck(self, document: TextDocument | None, operation: Operation) -> EditPlan | None:
        if document is None:
            return EditPlan.failed(operation, PlanStatus.NO_BUFFER)
        if not self.available:
            return EditPlan.failed(operation, PlanStatus.PALETTE_UNAVAILABLE)
        return None

    def _commit(self, document: TextDocument, plan: EditPlan) -> EditPlan:
        if plan.has_edits:
            self.sequencer.apply(document, plan.ops)
        log.debug(plan.message)
        return plan

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def hover(self, document: TextDocument | None, position: Position) -> Hover | None:
        if document is None or not self.available:
            return None
        return self.planner.resolve_hover(document, position)

    def annotate_all(self, document: TextDocument | None) -> EditPlan:
        failed = self._precheck(document, Operation.ANNOTATE)
        if failed:
            return failed
        return self._commit(document, self.planner.annotate_all(document))

    def remove_all_annotations(self, document: TextDocument | None) -> EditPlan:
        failed = self._precheck(document, Operation.REMOVE_ANNOTATIONS)
        if failed:
            return failed
        return self._commit(document, self.planner.remove_all_annotations(document))

    def replace_color(self, document: TextDocument | None, span: Span, entry: ColorEntry) -> EditPlan:
        """Replace the token at span with an already chosen entry."""
        failed = self._precheck(document, Operation.REPLACE_COLOR)
        if failed:
            return failed
        return self._commit(document, self.planner.replace_color_at(document, span, entry))

    def select_color(self, document: TextDocument | None, selection: Span) -> EditPlan:
        """Ask the picker for a palette entry and put it in place of the token at selection."""
        failed = self._precheck(document, Operation.REPLACE_COLOR)
        if failed:
            return failed

        token = self.planner.color_action_at(document, selection)
        if token is None:
            return EditPlan.failed(Operation.REPLACE_COLOR, PlanStatus.NO_COLORS)

        item = self.picker.pick(
            palette_items(self.palette),
            "Select color name or search by oklch values",
        )
        if item is None:
            return EditPlan.failed(Operation.REPLACE_COLOR, PlanStatus.CANCELLED)

        return self._commit(document, self.planner.replace_color_at(document, token.span, item.value))

    def convert_to_family(self, document: TextDocument | None, family: str) -> EditPlan:
        """Convert every gray-family token to an already chosen family."""
        failed = self._precheck(document, Operation.CONVERT_GRAY)
        if failed:
            return failed
        return self._commit(document, self.planner.convert_gray_family(document, family))

    def convert_gray_family(self, document: TextDocument | None) -> EditPlan:
        """Ask the picker for a target family and convert every gray-family token to it."""
        failed = self._precheck(document, Operation.CONVERT_GRAY)
        if failed:
            return failed

        if not self.planner.gray_tokens(document):
            return EditPlan.failed(Operation.CONVERT_GRAY, PlanStatus.NO_GRAY_COLORS)

        item = self.picker.pick(family_items(), "Convert gray colors to which family?")
        if item is None:
            return EditPlan.failed(Operation.CONVERT_GRAY, PlanStatus.CANCELLED)

        return self._commit(document, self.planner.convert_gray_family(document, item.value))
