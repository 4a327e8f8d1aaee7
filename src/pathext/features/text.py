"""
Summary: Predicates over the textual form of a path.
Why: Answer substring, affix and extension questions that PurePath answers per component only.
"""

from __future__ import annotations

from pathext.shared.path_like import PathInput, text_form


def contains(path: PathInput, pattern: str) -> bool:
    """Check whether ``pattern`` occurs anywhere in the path's text form.

    Args:
        path: Any path-like value.
        pattern: Substring to look for. The empty pattern is always contained.

    Returns:
        bool: ``False`` when the path has no textual form.
    """
    text = text_form(path)
    return text is not None and pattern in text


def starts_or_ends_with(path: PathInput, pattern: str) -> bool:
    """Check whether the path's text form begins or ends with ``pattern``.

    This is a plain string test: ``"/opt/x"`` starts with ``"/opt"`` but not
    with ``"opt"``.
    """
    text = text_form(path)
    return text is not None and (text.startswith(pattern) or text.endswith(pattern))


def ends_with_extensions(path: PathInput, pattern: str) -> bool:
    """Check whether the path's text form ends with ``pattern``.

    Unlike ``PurePath.suffix`` or a component-aware suffix test, this
    recognizes multi-part extensions: ``"archive.tar.gz"`` ends with
    ``".tar.gz"``, ``"tar.gz"``, ``".gz"`` and even ``"z"``.

    Args:
        path: Any path-like value.
        pattern: Trailing characters to match.

    Returns:
        bool: ``False`` when the path has no textual form.
    """
    text = text_form(path)
    return text is not None and text.endswith(pattern)


def strip_extensions(path: PathInput) -> str | None:
    """Return the text form up to, not including, its first ``"."``.

    The whole text form is scanned, directories and leading dots included,
    so ``".stuff"`` yields ``""`` and ``"something.tar.gz"`` yields
    ``"something"``. A text form without a dot is returned unchanged.

    Args:
        path: Any path-like value.

    Returns:
        str | None: A prefix of the text form, or ``None`` when the path has
        no textual form.
    """
    text = text_form(path)
    if text is None:
        return None
    stem, _, _ = text.partition(".")
    return stem


__all__ = [
    "contains",
    "ends_with_extensions",
    "starts_or_ends_with",
    "strip_extensions",
]
