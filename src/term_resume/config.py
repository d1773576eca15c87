"""Runtime settings.

The viewer takes no command-line flags; the only knobs are the logging
environment variables read by ``Settings.from_env()``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

LOG_FILE_ENV = "TERM_RESUME_LOG_FILE"
LOG_LEVEL_ENV = "TERM_RESUME_LOG_LEVEL"

TICK_INTERVAL = 0.2  # seconds between TickEvents
QUIT_CHAR = "q"


@dataclass(frozen=True)
class Settings:
    """Settings for one viewer session."""
    tick_interval: float = TICK_INTERVAL
    quit_char: str = QUIT_CHAR
    log_file: Optional[Path] = None
    log_level: str = "DEBUG"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ
        log_file = env.get(LOG_FILE_ENV)
        return cls(
            log_file=Path(log_file).expanduser() if log_file else None,
            log_level=env.get(LOG_LEVEL_ENV, "DEBUG").upper(),
        )
