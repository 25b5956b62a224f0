"""Load palettes and documents from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from oklch_names.core.document import TextDocument
from oklch_names.core.palette import PaletteIndex
from oklch_names.errors import MalformedPalette

log = logging.getLogger(__name__)


def load_palette(path: str | Path) -> PaletteIndex:
    """
    Load a palette from a JSON file.

    The file must hold a list of ``{"name": ..., "oklch": {"l", "c", "h"}}``
    records.

    Raises:
        MalformedPalette: if the file cannot be read, is not JSON, or any
            record is malformed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except OSError as e:
        raise MalformedPalette(f"Cannot read palette {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise MalformedPalette(f"Palette {path} is not valid JSON: {e}") from e

    palette = PaletteIndex.from_records(records)
    log.info("Loaded %d palette entries from %s", len(palette), path)
    return palette


def load_document(path: str | Path, encoding: str = "utf-8") -> TextDocument:
    """Load a text document, preserving its line terminators."""
    path = Path(path)
    with open(path, 'r', encoding=encoding, newline='') as f:
        text = f.read()
    return TextDocument(text, path=path, encoding=encoding)
