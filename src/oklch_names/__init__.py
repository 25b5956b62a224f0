"""
oklch-names: name and annotate oklch() colors in stylesheets

Finds ``oklch(L C H [/ A])`` colors in text, resolves them to palette names,
and plans safe, non-overlapping edits to annotate, strip, replace or
re-family them.

Quick Start:
    >>> import oklch_names as on
    >>> palette = on.load_palette("palette.json")
    >>> doc = on.TextDocument("color: oklch(0.985 0 0);")
    >>> plan = on.EditPlanner(palette).annotate_all(doc)
    >>> on.EditSequencer().apply(doc, plan.ops)
    True
    >>> doc.text
    'color: oklch(0.985 0 0) /* White */;'

Features:
    - Tolerant palette matching (per-component, 0.0001)
    - Annotation comments with alpha percentages: /* Slate 500 / 15% */
    - Idempotent annotate, exact round trip through strip
    - Color replacement that keeps the original alpha text verbatim
    - Gray family conversion (Slate, Gray, Zinc, Neutral, Stone)
"""

__version__ = "0.1.0"

# Core types
from oklch_names.core.span import Span, Position
from oklch_names.core.token import ParsedToken
from oklch_names.core.palette import ColorEntry, PaletteIndex
from oklch_names.core.document import TextDocument

# Scanning
from oklch_names.codec.scanner import scan

# Editing
from oklch_names.edit.plan import EditPlan, PlanStatus
from oklch_names.edit.planner import EditPlanner
from oklch_names.edit.sequencer import EditSequencer

# Convenience functions
from oklch_names.io.reader import load_document, load_palette

from oklch_names.errors import MalformedPalette, TransactionFailed

__all__ = [
    # Version
    "__version__",
    # Core types
    "Span",
    "Position",
    "ParsedToken",
    "ColorEntry",
    "PaletteIndex",
    "TextDocument",
    # Scanning
    "scan",
    # Editing
    "EditPlan",
    "PlanStatus",
    "EditPlanner",
    "EditSequencer",
    # I/O
    "load_document",
    "load_palette",
    # Errors
    "MalformedPalette",
    "TransactionFailed",
]
