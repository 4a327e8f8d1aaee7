"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure logging defaults and expose the shared library logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from pathext.config.paths import default_log_file

from .handlers import PathRichHandler


LOGGER_NAME: Final[str] = "pathext"
DEFAULT_LOG_FILE: Final[Path | None] = default_log_file()


_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _rotating_file_handler(log_file: Path, level: int) -> logging.Handler:
    """Build the size-rotated UTF-8 file handler, creating its directory."""

    resolved = Path(log_file).expanduser().resolve()
    os.makedirs(resolved.parent, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up and configure the library logger.

    The logger owns its handlers and does not propagate, so host
    applications configuring the root logger never see pathext debug
    records. Its level is the lowest level any attached handler accepts.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output. Defaults to WARNING.
        file_level: Logging level for file output. Defaults to DEBUG.

    Returns:
        logging.Logger: Configured logger instance.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = PathRichHandler(console=Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    handlers: list[logging.Handler] = [console_handler]

    if log_file is not None:
        handlers.append(_rotating_file_handler(log_file, file_level))

    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(min(handler.level for handler in handlers))
    return logger


def configure_from_settings() -> logging.Logger:
    """Re-run ``setup_logger`` with the levels and file from the loaded config."""

    from pathext.config import settings

    return setup_logger(
        log_file=settings.LOG_FILE or DEFAULT_LOG_FILE,
        console_level=settings.CONSOLE_LEVEL,
    )


logger: Final[logging.Logger] = setup_logger(log_file=DEFAULT_LOG_FILE)


__all__ = [
    "DEFAULT_LOG_FILE",
    "LOGGER_NAME",
    "configure_from_settings",
    "logger",
    "setup_logger",
]
