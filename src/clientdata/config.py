"""Runtime configuration for highlight rendering."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping

from clientdata.constants import DEFAULT_HIGHLIGHT_CLOSE, DEFAULT_HIGHLIGHT_OPEN, DEFAULT_TRUNCATE_MARKER
from clientdata.highlight import BoldHighlightFormatter
from clientdata.visitor import BoldTextVisitor, PlainTextVisitor

DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """Validated settings for highlight markup and logging."""

    highlight_open: str = DEFAULT_HIGHLIGHT_OPEN
    highlight_close: str = DEFAULT_HIGHLIGHT_CLOSE
    truncate_marker: str = DEFAULT_TRUNCATE_MARKER
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RenderSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        highlight_open = source.get("CLIENTDATA_HIGHLIGHT_OPEN", DEFAULT_HIGHLIGHT_OPEN)
        highlight_close = source.get("CLIENTDATA_HIGHLIGHT_CLOSE", DEFAULT_HIGHLIGHT_CLOSE)
        truncate_marker = source.get("CLIENTDATA_TRUNCATE_MARKER", DEFAULT_TRUNCATE_MARKER)
        log_level = source.get("CLIENTDATA_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

        if not highlight_open.strip():
            raise ValueError("CLIENTDATA_HIGHLIGHT_OPEN cannot be empty")
        if not highlight_close.strip():
            raise ValueError("CLIENTDATA_HIGHLIGHT_CLOSE cannot be empty")
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"CLIENTDATA_LOG_LEVEL must be one of: {', '.join(sorted(_LOG_LEVELS))}")

        return cls(
            highlight_open=highlight_open,
            highlight_close=highlight_close,
            truncate_marker=truncate_marker,
            log_level=log_level,
        )

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def highlight_formatter(self, *, plain: bool = False) -> BoldHighlightFormatter:
        if plain:
            return BoldHighlightFormatter(open_tag="", close_tag="")
        return BoldHighlightFormatter(open_tag=self.highlight_open, close_tag=self.highlight_close)

    def text_visitor(self, *, plain: bool = False) -> BoldTextVisitor | PlainTextVisitor:
        if plain:
            return PlainTextVisitor(truncate_marker=self.truncate_marker)
        return BoldTextVisitor(
            open_tag=self.highlight_open,
            close_tag=self.highlight_close,
            truncate_marker=self.truncate_marker,
        )
