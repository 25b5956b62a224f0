"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from oklch_names.codec.annotation import Placement

PALETTE_ENV = "OKLCH_NAMES_PALETTE"
PLACEMENT_ENV = "OKLCH_NAMES_PLACEMENT"


@dataclass(frozen=True)
class Settings:
    """
    Where the palette lives and how annotations are placed.

    Set OKLCH_NAMES_PALETTE to a palette JSON file and OKLCH_NAMES_PLACEMENT
    to ``adjacent`` or ``line``. Explicit CLI options win over both.
    """
    palette_path: Path | None = None
    placement: Placement = Placement.ADJACENT

    @classmethod
    def from_env(cls) -> Settings:
        palette_path = None
        if env_path := os.environ.get(PALETTE_ENV):
            palette_path = Path(env_path).expanduser()

        placement = Placement.ADJACENT
        if env_placement := os.environ.get(PLACEMENT_ENV):
            try:
                placement = Placement(env_placement.strip().lower())
            except ValueError:
                raise ValueError(
                    f"{PLACEMENT_ENV} must be one of "
                    f"{', '.join(p.value for p in Placement)}, got {env_placement!r}"
                ) from None

        return cls(palette_path=palette_path, placement=placement)

    def with_overrides(
        self,
        palette_path: Path | None = None,
        placement: Placement | None = None,
    ) -> Settings:
        return replace(
            self,
            palette_path=palette_path or self.palette_path,
            placement=placement or self.placement,
        )
