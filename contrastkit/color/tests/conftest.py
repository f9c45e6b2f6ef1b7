"""Shared fixtures for color pipeline tests."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from contrastkit.color import palettes
from contrastkit.color.palettes import PaletteConfig, load_palette_config
from contrastkit.config import get_settings

WHITE = "#FFFFFF"
BLACK = "#000000"


# ---------------------------------------------------------------------------
# Settings / singleton isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached Settings and the palette singleton around every test."""
    for var in (
        "CONTRASTKIT_LOG_LEVEL",
        "CONTRASTKIT_PALETTE_CONFIG_PATH",
        "CONTRASTKIT_DEFAULT_PALETTE",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    monkeypatch.setattr(palettes, "_config", None)
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Palette config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def palette_config() -> PaletteConfig:
    """Load the bundled palettes.yaml."""
    return load_palette_config()


@pytest.fixture
def write_palette_yaml(tmp_path: Path):
    """Write YAML text to a temp file and return its path."""

    def _write(text: str, name: str = "palettes.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write
