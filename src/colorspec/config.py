"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

THEME_ENV = "COLORSPEC_THEME"
LOG_LEVEL_ENV = "COLORSPEC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """
    Settings for the colorspec command line.

    Set COLORSPEC_THEME to a JSON theme file to use it by default, and
    COLORSPEC_LOG_LEVEL (DEBUG, INFO, ...) to control log output.
    """
    theme_path: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Read settings from environment variables."""
        env = os.environ if environ is None else environ

        theme_path = None
        if raw_path := env.get(THEME_ENV):
            theme_path = Path(raw_path).expanduser()

        log_level = env.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
        return cls(theme_path=theme_path, log_level=log_level)
