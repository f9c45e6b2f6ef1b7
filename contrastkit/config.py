"""Process-level settings loaded from environment variables."""

import logging
import sys
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """All settings come from ``CONTRASTKIT_*`` environment variables (or .env)."""

    # --- Logging ---
    log_level: str = "INFO"

    # --- Palettes ---
    palette_config_path: Path | None = None  # overrides the bundled palettes.yaml
    default_palette: str | None = None  # overrides default_palette from the YAML

    model_config = SettingsConfigDict(
        env_prefix="CONTRASTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Send log records to stdout at the configured level."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
    )
