"""Read-only TOML configuration."""

import logging
import os
import tomllib
from dataclasses import dataclass
from typing import Optional

from .models import DEFAULT_CONFIG

LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Configuration file is unreadable or holds an invalid value."""


@dataclass
class AppConfig:
    tick_seconds: float = 1.0
    seed: bool = True
    mouse: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_toml(cls, data: dict) -> "AppConfig":
        try:
            tick_seconds = float(data.get("tick_seconds", 1.0))
        except (TypeError, ValueError):
            raise ConfigError(f"tick_seconds must be a number, got {data.get('tick_seconds')!r}")
        if tick_seconds <= 0:
            raise ConfigError("tick_seconds must be greater than zero")
        log_level = str(data.get("log_level", "INFO")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return cls(
            tick_seconds=tick_seconds,
            seed=bool(data.get("seed", True)),
            mouse=bool(data.get("mouse", True)),
            log_level=log_level,
        )


def load_config(path: Optional[str] = None) -> AppConfig:
    """Load config from path (default ~/.classwork/config.toml); defaults if missing."""
    path = path or DEFAULT_CONFIG
    if not os.path.exists(path):
        return AppConfig()
    try:
        with open(path, "rb") as fh:
            data = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    LOGGER.debug("Loaded configuration from %s", path)
    return AppConfig.from_toml(data)
