"""Load, validate, and hot-reload named candidate palettes.

The palettes live in ``palettes.yaml`` alongside this module, unless
``CONTRASTKIT_PALETTE_CONFIG_PATH`` points elsewhere.  The file is loaded once
and cached.  Call ``reload_palette_config()`` to re-read it from disk.

Usage::

    from contrastkit.color.palettes import optimal_text_color_from_palette

    optimal_text_color_from_palette("#5B2BE6")           # default palette
    optimal_text_color_from_palette("#F8F9FA", "slate")  # "#111827"
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path

import yaml

from contrastkit.color.base import InvalidColorFormat
from contrastkit.color.hex_decoder import hex_to_rgb
from contrastkit.color.selector import optimal_text_color
from contrastkit.config import get_settings

logger = logging.getLogger("contrastkit.color.palettes")

# Path to the YAML file sitting next to this module
_CONFIG_PATH = Path(__file__).parent / "palettes.yaml"


@dataclass
class PaletteConfig:
    """Validated in-memory form of palettes.yaml.

    Attributes:
        version:         Config schema version string.
        default_palette: Name of the palette used when none is requested.
        palettes:        Palette name → ordered candidate hex colors.
    """

    version: str
    default_palette: str
    palettes: dict[str, list[str]]

    def palette(self, name: str | None = None) -> list[str]:
        """Return a copy of the named palette, or of the default one.

        Raises:
            KeyError: If no palette has that name.
        """
        key = name or self.default_palette
        if key not in self.palettes:
            raise KeyError(f"Unknown palette {key!r}")
        return list(self.palettes[key])

    @property
    def names(self) -> list[str]:
        return sorted(self.palettes)


# ---------------------------------------------------------------------------
# Loader / validation
# ---------------------------------------------------------------------------


class ConfigValidationError(ValueError):
    """Raised when palettes.yaml fails validation."""


def _load_yaml(path: Path) -> dict:
    """Read and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the YAML is malformed or not a mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"Palette config not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"YAML parse error in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigValidationError(f"{path} must contain a mapping at the top level")
    return raw


def _validate_and_build(raw: dict) -> PaletteConfig:
    """Validate the raw YAML dict and construct a PaletteConfig.

    All problems are collected and reported together.

    Raises:
        ConfigValidationError: If any palette or the default is invalid.
    """
    errors: list[str] = []

    version = str(raw.get("version", "1.0"))

    palettes_raw = raw.get("palettes") or {}
    if not isinstance(palettes_raw, dict) or not palettes_raw:
        errors.append("'palettes' section is missing or empty")
        palettes_raw = {}

    palettes: dict[str, list[str]] = {}
    for name, colors in palettes_raw.items():
        if not isinstance(colors, list) or not colors:
            errors.append(f"palettes.{name} must be a non-empty list of hex colors")
            continue
        for i, color in enumerate(colors):
            try:
                hex_to_rgb(color)
            except InvalidColorFormat as exc:
                errors.append(f"palettes.{name}[{i}]: {exc}")
        palettes[str(name)] = list(colors)

    default_palette = raw.get("default_palette")
    if not default_palette:
        errors.append("'default_palette' is missing")
    elif not isinstance(default_palette, str):
        errors.append(
            f"'default_palette' must be a palette name, got {default_palette!r}"
        )
    elif palettes_raw and default_palette not in {str(k) for k in palettes_raw}:
        errors.append(f"default_palette {default_palette!r} is not a defined palette")

    if errors:
        raise ConfigValidationError(
            f"palette config has {len(errors)} validation error(s):\n"
            + "\n".join(f"  • {e}" for e in errors)
        )

    return PaletteConfig(
        version=version,
        default_palette=str(default_palette),
        palettes=palettes,
    )


def load_palette_config(path: Path | None = None) -> PaletteConfig:
    """Load and validate the palette config from disk.

    Args:
        path: Override path to YAML.  Falls back to
              ``Settings.palette_config_path``, then the bundled palettes.yaml.
    """
    target = path or get_settings().palette_config_path or _CONFIG_PATH
    config = _validate_and_build(_load_yaml(Path(target)))
    logger.info(
        "Loaded palette config v%s (%d palettes) from %s",
        config.version,
        len(config.palettes),
        target,
    )
    return config


# ---------------------------------------------------------------------------
# Global singleton with hot-reload support
# ---------------------------------------------------------------------------

_config: PaletteConfig | None = None
_config_lock = threading.Lock()


def get_palette_config() -> PaletteConfig:
    """Return the global PaletteConfig, loading it on first call."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:  # double-checked locking
                _config = load_palette_config()
    return _config


def reload_palette_config(path: Path | None = None) -> PaletteConfig:
    """Reload palettes from disk and replace the global singleton.

    If validation fails, the old config is retained and the error is re-raised.
    """
    global _config
    new_config = load_palette_config(path)  # validate before acquiring lock
    with _config_lock:
        old_version = _config.version if _config else "none"
        _config = new_config
    logger.info("Reloaded palette config: %s → %s", old_version, new_config.version)
    return new_config


def optimal_text_color_from_palette(
    background: str, palette_name: str | None = None
) -> str:
    """Pick the best text color for ``background`` from a configured palette.

    Without ``palette_name``, uses ``Settings.default_palette`` if set, else the
    YAML's ``default_palette``.

    Raises:
        KeyError: If the palette is not configured.
        InvalidColorFormat: If ``background`` is malformed.
    """
    name = palette_name or get_settings().default_palette
    return optimal_text_color(background, get_palette_config().palette(name))
