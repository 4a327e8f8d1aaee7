# Where: pathext.shared.__init__
# What: Provide a concise import surface for shared error types.
# Why: path_like pulls in settings, so it is imported from its own module.

"""Shared cross-cutting definitions exposed at the package level."""

from .errors import ConfigError, PathExtError, UnknownPathFlavorError, UnsupportedPathError

__all__ = ["ConfigError", "PathExtError", "UnknownPathFlavorError", "UnsupportedPathError"]
