"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from oklch_names.codec.annotation import Placement
from oklch_names.config import PALETTE_ENV, PLACEMENT_ENV, Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(PALETTE_ENV, raising=False)
        monkeypatch.delenv(PLACEMENT_ENV, raising=False)
        settings = Settings.from_env()
        assert settings.palette_path is None
        assert settings.placement is Placement.ADJACENT

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(PALETTE_ENV, "/tmp/palette.json")
        monkeypatch.setenv(PLACEMENT_ENV, "LINE")
        settings = Settings.from_env()
        assert settings.palette_path == Path("/tmp/palette.json")
        assert settings.placement is Placement.LINE

    def test_bad_placement(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(PLACEMENT_ENV, "sideways")
        with pytest.raises(ValueError):
            Settings.from_env()

    def test_overrides_win(self) -> None:
        settings = Settings(Path("env.json"), Placement.LINE)
        overridden = settings.with_overrides(palette_path=Path("cli.json"))
        assert overridden.palette_path == Path("cli.json")
        assert overridden.placement is Placement.LINE
        assert settings.with_overrides(placement=Placement.ADJACENT).placement is Placement.ADJACENT
