"""Rich console handler with compact path rendering for pretti events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Rich handler that styles structured ``format_event`` records."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "discovery.root": ("📁", "cyan"),
        "discovery.changes": ("📝", "blue"),
        "discovery.filtered": ("🔎", "blue"),
        "format.start": ("🚀", "cyan"),
        "format.success": ("✅", "green"),
        "format.error": ("❌", "red"),
    }
    _LEVEL_STYLES: ClassVar[dict[int, str]] = {
        logging.WARNING: "yellow",
        logging.ERROR: "red",
        logging.CRITICAL: "bold red",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with pretti's console defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path relative to ``base`` with coloured separators.

        Paths deeper than the segment limit keep only their last segments,
        prefixed with an ellipsis.
        """
        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative = pure_path.relative_to(base_path)
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                display_path = relative

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        parts = [part for part in display_path.parts if part and part != anchor]

        prefix = anchor.rstrip("\\/") + separator if anchor else ""
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            parts = parts[-self._PATH_SEGMENT_LIMIT:]
            prefix = "…" + separator

        rendered = prefix + separator.join(parts) if parts or prefix else "."

        text = Text()
        for char in rendered:
            accent = char in {separator, "/", "…"}
            _ = text.append(char, style=Style(color="magenta" if accent else "white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_event(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render records that carry a ``format_event`` attribute."""

        event = getattr(record, "format_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))

        path = getattr(record, "path", None)
        if path:
            _ = text.append(" @ ")
            _ = text.append_text(
                self._format_path(str(path), base=getattr(record, "base_path", None))
            )

        count = getattr(record, "count", None)
        if isinstance(count, int):
            _ = text.append(f" [{count}]", style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render events with icons; colour warnings and errors by level."""

        event_text = self._render_event(record, message)
        if event_text is not None:
            return event_text

        color = self._LEVEL_STYLES.get(record.levelno)
        if color is not None:
            return Text(message, style=color)

        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
