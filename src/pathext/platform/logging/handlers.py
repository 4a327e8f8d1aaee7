"""Rich console handler that renders path queries compactly."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that displays path query records with styled paths."""

    _QUERY_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "matched": ("✅", "green"),
        "unmatched": ("➖", "yellow"),
        "no_text_form": ("⚠️", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with colored separators and ellipsis truncation."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ""
        if anchor:
            display_string = anchor if isinstance(pure_path, PureWindowsPath) else separator
        if truncated:
            display_string = "…" + separator
        display_string += separator.join(body_parts)
        if not display_string:
            display_string = "."
        return self._style_path_string(display_string, separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        separator_chars = {separator}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_query_message(self, record: logging.LogRecord) -> Text | None:
        """Render records carrying ``path_operation`` extras."""

        operation = getattr(record, "path_operation", None)
        if not isinstance(operation, str):
            return None

        outcome = getattr(record, "outcome", None)
        icon, color = self._QUERY_STYLES.get(str(outcome), ("ℹ️", "blue"))

        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        pattern = getattr(record, "pattern", None)
        if pattern is None:
            _ = body.append(f"{operation}()")
        else:
            _ = body.append(f"{operation}({pattern!r})")

        path = getattr(record, "path", None)
        if path is not None:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(path)))
        if outcome:
            _ = body.append(f" [{outcome}]")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path query records."""

        query_text = self._render_query_message(record)
        if query_text is not None:
            return query_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
