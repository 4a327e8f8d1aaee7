"""
Summary: Path predicates over anything convertible to a path.
Why: Offer one import surface for the PathExt wrapper and its free functions.
"""

from .features import (
    contains,
    ends_with_extensions,
    has_component,
    starts_or_ends_with,
    strip_extensions,
    strip_prefix_if_needed,
)
from .path_ext import PathExt, ext
from .shared.errors import ConfigError, PathExtError, UnknownPathFlavorError, UnsupportedPathError
from .shared.path_like import PathInput, as_pure_path, components, text_form

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "PathExt",
    "PathExtError",
    "PathInput",
    "UnknownPathFlavorError",
    "UnsupportedPathError",
    "__version__",
    "as_pure_path",
    "components",
    "contains",
    "ends_with_extensions",
    "ext",
    "has_component",
    "starts_or_ends_with",
    "strip_extensions",
    "strip_prefix_if_needed",
    "text_form",
]
