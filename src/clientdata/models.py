"""Canonical client data record shared by the factory and extractors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from clientdata.errors import MissingFieldError

_MISSING = object()


def _read_field(raw: Any, name: str) -> Any:
    if isinstance(raw, Mapping):
        return raw.get(name, _MISSING)
    return getattr(raw, name, _MISSING)


@dataclass(frozen=True, slots=True)
class ClientDataRecord:
    """One client data entry of a search reply.

    ``contents`` is a raw XML string for XML records and an already
    deserialized JSON value for JSON records.
    """

    id: str | None
    mime_type: str
    contents: Any

    @classmethod
    def from_raw(cls, raw: Any) -> "ClientDataRecord":
        """Build a record from a wire mapping or an attribute-style object."""

        if isinstance(raw, ClientDataRecord):
            return raw

        mime_type = _read_field(raw, "mimeType")
        if mime_type is _MISSING:
            raise MissingFieldError("mime-type")
        contents = _read_field(raw, "contents")
        if contents is _MISSING:
            raise MissingFieldError("content")

        client_data_id = _read_field(raw, "id")
        if client_data_id is _MISSING:
            client_data_id = None
        return cls(id=client_data_id, mime_type=mime_type, contents=contents)
