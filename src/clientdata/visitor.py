"""Text visitors used to render KWIC fragments of JSON client data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from clientdata.constants import DEFAULT_HIGHLIGHT_CLOSE, DEFAULT_HIGHLIGHT_OPEN, DEFAULT_TRUNCATE_MARKER


@runtime_checkable
class TextVisitor(Protocol):
    """Formatting callbacks invoked by the JSON text walker."""

    def on_plain(self, text: str) -> str:
        """Render a plain text run."""

    def on_highlighted(self, text: str) -> str:
        """Render a fragment matching the user query."""

    def on_truncated(self) -> str:
        """Render the place where the service elided text."""


@dataclass(frozen=True, slots=True)
class BoldTextVisitor:
    """Default visitor: plain text unchanged, matches wrapped in bold markup."""

    open_tag: str = DEFAULT_HIGHLIGHT_OPEN
    close_tag: str = DEFAULT_HIGHLIGHT_CLOSE
    truncate_marker: str = DEFAULT_TRUNCATE_MARKER

    def on_plain(self, text: str) -> str:
        return text

    def on_highlighted(self, text: str) -> str:
        return f"{self.open_tag}{text}{self.close_tag}"

    def on_truncated(self) -> str:
        return self.truncate_marker


@dataclass(frozen=True, slots=True)
class PlainTextVisitor:
    """Render fragments without any decoration."""

    truncate_marker: str = DEFAULT_TRUNCATE_MARKER

    def on_plain(self, text: str) -> str:
        return text

    def on_highlighted(self, text: str) -> str:
        return text

    def on_truncated(self) -> str:
        return self.truncate_marker
