"""Shared path utilities for configuration and log locations.

This module centralizes how the library discovers the locations of its
config and log files.

Policy:
- Config: ``PATHEXT_CONFIG`` when set, otherwise repository-root
  ``<repo_root>/config/pathext.toml``.
- Log file: ``PATHEXT_LOG_FILE`` when set, otherwise no file logging.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "PATHEXT_CONFIG"
_ENV_LOG_FILE: Final[str] = "PATHEXT_LOG_FILE"
_REPO_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path | None],
) -> Path | None:
    """Resolve a location honoring explicit and environment overrides.

    Args:
        explicit_path: Path supplied by the caller; wins over everything else.
        env: Environment mapping. Defaults to ``os.environ``.
        env_var: Name of the environment variable to consult.
        default_factory: Produces the fallback path, or ``None`` for "unset".

    Returns:
        Path | None: Resolved absolute path, or ``None`` when nothing applies.
    """

    mapping = env if env is not None else os.environ
    from_env = (mapping.get(env_var) or "").strip() if env_var else ""

    if explicit_path is not None:
        chosen: Path | str | None = explicit_path
    elif from_env:
        chosen = from_env
    else:
        chosen = default_factory()

    return None if chosen is None else Path(chosen).expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` holding a ``_REPO_MARKERS`` entry.

    ``start`` defaults to this file. Falls back to the current working
    directory when no ancestor is marked, as for an installed wheel.
    """
    origin = (start or Path(__file__).resolve()).parent
    return next(
        (
            candidate
            for candidate in (origin, *origin.parents)
            if any((candidate / marker).exists() for marker in _REPO_MARKERS)
        ),
        Path.cwd(),
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path of the TOML config file."""

    resolved = resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / "pathext.toml",
    )
    assert resolved is not None
    return resolved


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file path, or ``None`` when file logging is not requested."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_LOG_FILE,
        default_factory=lambda: None,
    )


__all__ = [
    "default_config_path",
    "default_log_file",
    "resolve_overridable_path",
]
