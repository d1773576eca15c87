"""Loguru setup.

While the viewer runs the terminal belongs to the UI, so nothing may be
logged to stdout or stderr. Logs go to a file when one is configured and
are dropped otherwise.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from term_resume.config import Settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {thread.name} | {message}"


def setup_logging(settings: Settings) -> Optional[Path]:
    """
    Route loguru output according to ``settings``.

    Removes the default stderr handler and adds a file handler if
    ``settings.log_file`` is set. Returns the log file path, if any.
    """
    logger.remove()

    if settings.log_file is None:
        return None

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        format=LOG_FORMAT,
        level=settings.log_level,
        enqueue=True,
    )
    logger.info("=" * 60)
    logger.info(f"term-resume session, Python {sys.version.split()[0]}")
    return settings.log_file
