"""
Summary: Path-like abstraction shared by every path predicate.
Why: Define text form, component splitting and flavor handling once for all inputs.
"""

from __future__ import annotations

import os
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Final, TypeAlias

from pathext.config import settings
from pathext.platform.logging import logger
from pathext.shared.errors import UnknownPathFlavorError, UnsupportedPathError

PathInput: TypeAlias = str | bytes | os.PathLike[str] | os.PathLike[bytes]
"""Anything ``os.fspath`` accepts: str, bytes, pathlib paths, PathExt, ..."""

_FLAVORS: Final[dict[str, type[PurePath]]] = {
    "native": PurePath,
    "posix": PurePosixPath,
    "windows": PureWindowsPath,
}


def flavor_class(name: str | None = None) -> type[PurePath]:
    """Return the ``PurePath`` class used to split plain strings and bytes.

    Args:
        name: ``"native"``, ``"posix"`` or ``"windows"``. ``None`` selects the
            configured default.

    Returns:
        type[PurePath]: The matching pure path class.

    Raises:
        UnknownPathFlavorError: If ``name`` is not a known flavor.
    """
    key = settings.PATH_FLAVOR if name is None else str(name).strip().lower()
    try:
        return _FLAVORS[key]
    except KeyError:
        logger.error("Unknown path flavor '%s'", name)
        raise UnknownPathFlavorError(name) from None


def raw_fspath(value: PathInput) -> str | bytes:
    """Return the file system representation of ``value``.

    Raises:
        UnsupportedPathError: If ``value`` is not path-like.
    """
    try:
        return os.fspath(value)
    except TypeError as e:
        logger.error("Unsupported path-like value %r: %s", value, e)
        raise UnsupportedPathError(value) from e


def text_form(value: PathInput) -> str | None:
    """Return the textual form of a path, or ``None`` when it has none.

    Strings are used verbatim unless they hold lone surrogates (the
    ``surrogateescape`` rendition of undecodable bytes). Bytes must be
    valid UTF-8. ``PurePath`` values contribute their normalized ``str()``.

    Args:
        value: Any path-like value.

    Returns:
        str | None: The text form, or ``None`` if it cannot be produced.
    """
    raw = raw_fspath(value)
    try:
        if isinstance(raw, bytes):
            return raw.decode("utf-8")
        _ = raw.encode("utf-8")
        return raw
    except UnicodeError:
        logger.debug(
            "Path %r has no textual form",
            raw,
            extra={"path_operation": "text_form", "path": os.fsdecode(raw), "outcome": "no_text_form"},
        )
        return None


def as_pure_path(value: PathInput, flavor: str | None = None) -> PurePath:
    """Return ``value`` as a pure path without touching the file system.

    ``PurePath`` instances (including concrete ``Path`` objects) are returned
    unchanged and keep their own flavor. Everything else is decoded with
    ``os.fsdecode``, which never fails, and wrapped in ``flavor_class(flavor)``.
    """
    if isinstance(value, PurePath):
        return value
    raw = raw_fspath(value)
    return flavor_class(flavor)(os.fsdecode(raw))


def _leading_current_dir(raw: str, pure: PurePath) -> bool:
    """Whether ``raw`` opens with a ``.`` segment that ``PurePath`` discarded."""

    if pure.anchor:
        return False
    separators = ("/", "\\") if isinstance(pure, PureWindowsPath) else ("/",)
    return raw == "." or any(raw.startswith("." + sep) for sep in separators)


def components(value: PathInput, flavor: str | None = None) -> tuple[str, ...]:
    """Return the components of ``value`` per the flavor's splitting rules.

    The root (``"/"``, ``"C:\\\\"``) is a component of its own; empty and
    interior ``"."`` segments are dropped, and trailing separators never
    survive. A raw string or bytes value opening with ``"./"`` keeps that
    leading ``"."``, so ``"./a"`` splits into ``(".", "a")``. ``PurePath``
    values have already normalized it away.
    """
    pure = as_pure_path(value, flavor)
    if isinstance(value, PurePath):
        return pure.parts
    if _leading_current_dir(os.fsdecode(raw_fspath(value)), pure):
        return (".", *pure.parts)
    return pure.parts


__all__ = [
    "PathInput",
    "as_pure_path",
    "components",
    "flavor_class",
    "raw_fspath",
    "text_form",
]
