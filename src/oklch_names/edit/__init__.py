"""Edit planning and application."""

from oklch_names.edit.ops import Delete, EditOp, Insert, Replace, order_ops
from oklch_names.edit.plan import EditPlan, Hover, Operation, PlanStatus
from oklch_names.edit.planner import CUSTOM_LABEL, GRAY_FAMILIES, EditPlanner
from oklch_names.edit.sequencer import DocumentHost, EditHost, EditSequencer

__all__ = [
    "Delete",
    "EditOp",
    "Insert",
    "Replace",
    "order_ops",
    "EditPlan",
    "Hover",
    "Operation",
    "PlanStatus",
    "CUSTOM_LABEL",
    "GRAY_FAMILIES",
    "EditPlanner",
    "DocumentHost",
    "EditHost",
    "EditSequencer",
]
