"""
Logging configuration for diffpanes.

The terminal belongs to the Textual app, so log records never go to stdout.
They are sent to the Textual devtools console (textual console) and, when a
path is given, to a rotating log file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from textual.logging import TextualHandler

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
MAX_LOG_SIZE_MB = 5
BACKUP_COUNT = 3

_configured = False


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the diffpanes logger once.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a rotating log file.
    """
    global _configured
    if _configured:
        return

    logger = logging.getLogger("diffpanes")
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    logger.addHandler(TextualHandler())

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=MAX_LOG_SIZE_MB * 1024 * 1024,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    _configured = True


def reset_logging() -> None:
    """Remove handlers installed by configure_logging()."""
    global _configured
    logger = logging.getLogger("diffpanes")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    _configured = False
