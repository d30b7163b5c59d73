"""Shared extractor contract for per-format client data helpers."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ClientDataExtractor(Protocol):
    """Protocol that every client data extractor must implement."""

    @property
    def id(self) -> str | None:
        """Identifier of the wrapped client data."""

    def get_text(self, name: str | None = None, formatter: Any = None) -> str:
        """Render the whole client data, or the part selected by ``name``, as text."""
