"""Core data structures: spans, tokens, palette and the text document."""

from oklch_names.core.span import Span, Position
from oklch_names.core.token import ParsedToken
from oklch_names.core.palette import ColorEntry, PaletteIndex
from oklch_names.core.document import TextDocument, Line

__all__ = ["Span", "Position", "ParsedToken", "ColorEntry", "PaletteIndex", "TextDocument", "Line"]
