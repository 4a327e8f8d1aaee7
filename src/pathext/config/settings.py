"""Where: src/pathext/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature modules without file I/O.
Assumptions: - Invalid config values fall back to defaults rather than failing imports.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pathext.config.config import config as app_config

DEFAULT_PATH_FLAVOR: str = "native"
VALID_PATH_FLAVORS: tuple[str, ...] = ("native", "posix", "windows")

# Path splitting ---------------------------------------------------------------

_flavor = str(getattr(app_config, "path_flavor", DEFAULT_PATH_FLAVOR)).strip().lower()
PATH_FLAVOR: str = _flavor if _flavor in VALID_PATH_FLAVORS else DEFAULT_PATH_FLAVOR


# Logging ----------------------------------------------------------------------

_level = logging.getLevelName(str(getattr(app_config, "console_level", "WARNING")).upper())
CONSOLE_LEVEL: int = _level if isinstance(_level, int) else logging.WARNING

LOG_FILE: Path | None = getattr(app_config, "log_file", None)


__all__ = [
    "DEFAULT_PATH_FLAVOR",
    "VALID_PATH_FLAVORS",
    "PATH_FLAVOR",
    "CONSOLE_LEVEL",
    "LOG_FILE",
]
