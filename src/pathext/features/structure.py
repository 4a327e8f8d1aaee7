"""
Summary: Component-aware operations on path-like values.
Why: Distinguish standalone path segments and structural prefixes from plain substrings.
"""

from __future__ import annotations

import os
from pathlib import PurePath

from pathext.platform.logging import logger
from pathext.shared.path_like import PathInput, as_pure_path, components


def has_component(path: PathInput, component: str, *, flavor: str | None = None) -> bool:
    """Check whether ``component`` equals one of the path's components.

    Comparison is exact and happens after splitting, so ``"someplace/"`` or
    ``"a/b"`` never match: no single component carries a separator. Paths
    without a textual form are still split and compared.

    Args:
        path: Any path-like value.
        component: Segment to look for.
        flavor: Splitting rules for plain strings and bytes.

    Returns:
        bool: ``True`` if any component equals ``component``.
    """
    return component in components(path, flavor)


def strip_prefix_if_needed(
    path: PathInput,
    prefix: PathInput,
    *,
    flavor: str | None = None,
) -> PurePath:
    """Remove ``prefix`` from the front of ``path`` when it structurally matches.

    Matching follows ``PurePath.relative_to``: ``/usr/local`` is a prefix of
    ``/usr/local/aardvark`` but ``/usr/lo`` is not. An unmatched prefix is a
    no-op.

    Args:
        path: Any path-like value.
        prefix: Leading components to remove.
        flavor: Splitting rules for plain strings and bytes.

    Returns:
        PurePath: The remainder after ``prefix``, or ``path`` itself (as a
        pure path) when ``prefix`` does not lead it.
    """
    pure = as_pure_path(path, flavor)
    base = type(pure)(as_pure_path(prefix, flavor))
    try:
        return pure.relative_to(base)
    except ValueError:
        logger.debug(
            "Prefix %s does not lead %s",
            base,
            pure,
            extra={
                "path_operation": "strip_prefix_if_needed",
                "path": os.fspath(pure),
                "pattern": os.fspath(base),
                "outcome": "unmatched",
            },
        )
        return pure


__all__ = ["has_component", "strip_prefix_if_needed"]
