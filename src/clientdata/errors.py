"""Domain errors raised while building and querying client data extractors."""

from __future__ import annotations

from dataclasses import dataclass


class ClientDataError(Exception):
    """Base class for every client data failure surfaced to callers."""


@dataclass(slots=True)
class MissingFieldError(ClientDataError):
    """A client data record lacks a mandatory field."""

    field: str

    def __str__(self) -> str:
        return f"No {self.field} available for provided client data"


@dataclass(slots=True)
class UnsupportedMimeTypeError(ClientDataError):
    """No extractor is registered for the record mime type."""

    mime_type: str

    def __str__(self) -> str:
        return f"Unmanaged client data type: {self.mime_type}"


@dataclass(slots=True)
class MalformedXmlError(ClientDataError):
    """XML client data could not be parsed, even after highlight repair."""

    client_data_id: str | None
    message: str

    def __str__(self) -> str:
        return f"{self.message} (id={self.client_data_id})"


@dataclass(slots=True)
class InvalidPathError(ClientDataError):
    """An XPath locator is not a valid node-selecting expression."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


@dataclass(slots=True)
class UnknownClientDataIdError(ClientDataError, LookupError):
    """No client data is registered under the requested id."""

    client_data_id: str

    def __str__(self) -> str:
        return f"No client data with id '{self.client_data_id}' found"
