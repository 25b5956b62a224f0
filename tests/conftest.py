"""Shared fixtures: a small palette, documents and a scripted picker."""

import json
from pathlib import Path
from typing import Optional, Sequence

import pytest

from oklch_names.commands import PickItem
from oklch_names.core.palette import PaletteIndex

PALETTE_RECORDS = [
    {"name": "White", "oklch": {"l": 0.985, "c": 0, "h": 0}},
    {"name": "Black", "oklch": {"l": 0, "c": 0, "h": 0}},
    {"name": "Slate 500", "oklch": {"l": 0.554, "c": 0.046, "h": 257.417}},
    {"name": "Slate 700", "oklch": {"l": 0.372, "c": 0.044, "h": 257.287}},
    {"name": "Gray 500", "oklch": {"l": 0.551, "c": 0.027, "h": 264.364}},
    {"name": "Zinc 500", "oklch": {"l": 0.552, "c": 0.016, "h": 285.938}},
    {"name": "Red 500", "oklch": {"l": 0.637, "c": 0.237, "h": 25.331}},
]


class ScriptedPicker:
    """Picker that answers with a fixed label (or cancels) and records each prompt."""

    def __init__(self, answer: Optional[str] = None):
        self.answer = answer
        self.calls: list[list[PickItem]] = []

    def pick(self, items: Sequence[PickItem], placeholder: str = "") -> Optional[PickItem]:
        self.calls.append(list(items))
        if self.answer is None:
            return None
        for item in items:
            if item.label == self.answer:
                return item
        raise AssertionError(f"{self.answer!r} not offered")


@pytest.fixture
def palette() -> PaletteIndex:
    return PaletteIndex.from_records(PALETTE_RECORDS)


@pytest.fixture
def palette_file(tmp_path: Path) -> Path:
    path = tmp_path / "palette.json"
    path.write_text(json.dumps(PALETTE_RECORDS))
    return path


@pytest.fixture
def make_picker():
    """Factory for ScriptedPicker, so tests don't import conftest."""
    return ScriptedPicker
