"""
Summary: Exception hierarchy raised by pathext.
Why: Keep contract violations distinct from the defined empty-result cases.
"""

from __future__ import annotations


class PathExtError(Exception):
    """Base class for every error raised by pathext."""


class UnsupportedPathError(PathExtError, TypeError):
    """Raised when a value cannot be presented as a path at all."""

    value: object

    def __init__(self, value: object) -> None:
        """Initialize the error.

        Args:
            value: The offending value.
        """
        self.value = value
        super().__init__(
            f"Unsupported path-like value of type {type(value).__name__}: {value!r}"
        )


class UnknownPathFlavorError(PathExtError, ValueError):
    """Raised when a path flavor name is not one of native, posix or windows."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown path flavor: {name!r}")


class ConfigError(PathExtError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "PathExtError",
    "UnsupportedPathError",
    "UnknownPathFlavorError",
    "ConfigError",
]
