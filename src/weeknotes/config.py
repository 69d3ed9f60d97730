"""Configuration loading from environment variables and weeknotes.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_CONFIG_FILENAME = "weeknotes.toml"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class WeeknotesConfig:
    """Top-level weeknotes configuration."""

    default_file: Path | None = None
    autoload: bool = False
    log_level: str = "WARNING"


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def load_config(config_path: Path | None = None) -> WeeknotesConfig:
    """Load configuration from environment variables and optional weeknotes.toml.

    Priority: environment variables > weeknotes.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.weeknotes/
        for candidate in [
            Path.cwd() / _CONFIG_FILENAME,
            Path.home() / ".weeknotes" / _CONFIG_FILENAME,
        ]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    default_file = os.getenv("WEEKNOTES_FILE", file_data.get("default_file"))

    return WeeknotesConfig(
        default_file=Path(str(default_file)).expanduser() if default_file else None,
        autoload=_as_bool(os.getenv("WEEKNOTES_AUTOLOAD", file_data.get("autoload", False))),
        log_level=str(os.getenv("WEEKNOTES_LOG_LEVEL", file_data.get("log_level", "WARNING"))),
    )
