"""Save documents to disk."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from oklch_names.core.document import TextDocument


def save_document(doc: "TextDocument", path: str | Path | None = None) -> Path:
    """
    Write a document's text to disk unchanged.

    Defaults to the path the document was loaded from.
    """
    if path is None:
        if doc.path is None:
            raise ValueError("No path specified and document has no existing path")
        path = doc.path
    path = Path(path)

    with open(path, 'w', encoding=doc.encoding, newline='') as f:
        f.write(doc.text)
    return path
