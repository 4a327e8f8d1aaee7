"""
Summary: Export the text and structural path operations.
Why: Provide a stable import surface for the PathExt wrapper and callers.
"""

from .structure import has_component, strip_prefix_if_needed
from .text import contains, ends_with_extensions, starts_or_ends_with, strip_extensions

__all__ = [
    "contains",
    "ends_with_extensions",
    "has_component",
    "starts_or_ends_with",
    "strip_extensions",
    "strip_prefix_if_needed",
]
