"""
Summary: PathExt wrapper giving any path-like value the predicate methods.
Why: Let call sites read as methods on the value itself, whatever its concrete type.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath
from typing import final

from pathext.features import structure
from pathext.features import text as text_ops
from pathext.shared.path_like import (
    PathInput,
    as_pure_path,
    components,
    flavor_class,
    raw_fspath,
    text_form,
)


@final
@dataclass(frozen=True, slots=True)
class PathExt:
    """Capability wrapper over a str, bytes, ``PurePath`` or other ``os.PathLike``.

    The wrapped value is kept as given, so raw strings keep trailing
    separators that ``PurePath`` would normalize away.

    Example:
        >>> PathExt("/some/path").has_component("path")
        True
        >>> PathExt("/this/and/that/").starts_or_ends_with("/")
        True
    """

    value: PathInput
    flavor: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.value, PathExt):
            object.__setattr__(self, "value", self.value.value)
        _ = raw_fspath(self.value)
        if self.flavor is not None:
            _ = flavor_class(self.flavor)

    def __fspath__(self) -> str | bytes:
        return os.fspath(self.value)

    @property
    def text(self) -> str | None:
        """Text form of the wrapped value, or ``None``."""
        return text_form(self.value)

    @property
    def components(self) -> tuple[str, ...]:
        return components(self.value, self.flavor)

    def as_pure_path(self) -> PurePath:
        return as_pure_path(self.value, self.flavor)

    def contains(self, pattern: str) -> bool:
        """See ``pathext.features.text.contains``."""
        return text_ops.contains(self.value, pattern)

    def has_component(self, component: str) -> bool:
        """See ``pathext.features.structure.has_component``."""
        return structure.has_component(self.value, component, flavor=self.flavor)

    def starts_or_ends_with(self, pattern: str) -> bool:
        """See ``pathext.features.text.starts_or_ends_with``."""
        return text_ops.starts_or_ends_with(self.value, pattern)

    def ends_with_extensions(self, pattern: str) -> bool:
        """See ``pathext.features.text.ends_with_extensions``."""
        return text_ops.ends_with_extensions(self.value, pattern)

    def strip_extensions(self) -> str | None:
        """See ``pathext.features.text.strip_extensions``."""
        return text_ops.strip_extensions(self.value)

    def strip_prefix_if_needed(self, prefix: PathInput) -> PurePath:
        """See ``pathext.features.structure.strip_prefix_if_needed``."""
        return structure.strip_prefix_if_needed(self.value, prefix, flavor=self.flavor)


def ext(value: PathInput, flavor: str | None = None) -> PathExt:
    """Shorthand for ``PathExt(value, flavor)``."""
    return PathExt(value, flavor)


__all__ = ["PathExt", "ext"]
