"""Results produced by the edit planner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from oklch_names.core.span import Span
from oklch_names.edit.ops import EditOp


class PlanStatus(Enum):
    """Outcome of planning one command."""
    OK = auto()
    NO_BUFFER = auto()
    NO_COLORS = auto()
    NO_ANNOTATIONS = auto()
    NO_GRAY_COLORS = auto()
    CANCELLED = auto()
    PALETTE_UNAVAILABLE = auto()


class Operation(Enum):
    ANNOTATE = "annotate"
    REMOVE_ANNOTATIONS = "remove-annotations"
    REPLACE_COLOR = "replace-color"
    CONVERT_GRAY = "convert-gray"


_STATUS_MESSAGES = {
    PlanStatus.NO_BUFFER: "No active document.",
    PlanStatus.NO_COLORS: "No OKLCH colors found.",
    PlanStatus.NO_ANNOTATIONS: "No color annotations found.",
    PlanStatus.NO_GRAY_COLORS: "No gray-family colors found.",
    PlanStatus.CANCELLED: "Cancelled; no changes made.",
    PlanStatus.PALETTE_UNAVAILABLE: "Color palette is not loaded.",
}


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


@dataclass(frozen=True)
class EditPlan:
    """
    Ordered edit ops for one command, plus what to report.

    A plan whose status is not OK never carries ops. ``count`` is the number
    of colors annotated, comments removed or colors converted; ``skipped``
    counts gray tokens with no matching shade in the target family.
    """
    operation: Operation
    status: PlanStatus = PlanStatus.OK
    ops: tuple[EditOp, ...] = ()
    count: int = 0
    skipped: int = 0
    target: str | None = None

    @classmethod
    def failed(cls, operation: Operation, status: PlanStatus) -> EditPlan:
        return cls(operation, status)

    @property
    def ok(self) -> bool:
        return self.status is PlanStatus.OK

    @property
    def has_edits(self) -> bool:
        return bool(self.ops)

    @property
    def message(self) -> str:
        """One-line report for the user."""
        if self.status is not PlanStatus.OK:
            return _STATUS_MESSAGES[self.status]

        if self.operation is Operation.ANNOTATE:
            if self.count == 0:
                return "All colors are already annotated."
            return f"Annotated {_plural(self.count, 'color')}."
        if self.operation is Operation.REMOVE_ANNOTATIONS:
            return f"Removed {_plural(self.count, 'comment')}."
        if self.operation is Operation.REPLACE_COLOR:
            return f"Replaced color with {self.target}."

        text = f"Converted {_plural(self.count, 'color')} to {self.target}."
        if self.skipped:
            text += f" Skipped {self.skipped} with no matching {self.target} shade."
        return text


@dataclass(frozen=True)
class Hover:
    """Markdown text describing the color under the cursor, and its span."""
    text: str
    span: Span
