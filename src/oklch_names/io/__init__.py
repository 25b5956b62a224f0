"""File I/O for palettes and documents."""

from oklch_names.io.reader import load_document, load_palette
from oklch_names.io.writer import save_document

__all__ = ["load_document", "load_palette", "save_document"]
