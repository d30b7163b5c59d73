"""Mime-type routing from raw client data records to extractors."""

from __future__ import annotations

from typing import Any, Callable

from clientdata.constants import JSON_MIME_TYPES, XML_MIME_TYPES
from clientdata.errors import UnsupportedMimeTypeError
from clientdata.extractors.base import ClientDataExtractor
from clientdata.extractors.json_extractor import JsonClientDataExtractor
from clientdata.extractors.xml_extractor import XmlClientDataExtractor
from clientdata.models import ClientDataRecord

ExtractorBuilder = Callable[[ClientDataRecord], ClientDataExtractor]


class ClientDataExtractorFactory:
    """Resolve the right extractor for a client data mime type."""

    def __init__(self) -> None:
        self._builders: dict[str, ExtractorBuilder] = {}

    @property
    def mime_types(self) -> frozenset[str]:
        """Mime types with a registered builder."""

        return frozenset(self._builders)

    def register(self, mime_type: str, builder: ExtractorBuilder) -> None:
        """Register an extractor builder by mime type."""

        if not mime_type:
            raise ValueError("Mime type cannot be empty")
        self._builders[mime_type] = builder

    def create(self, record: ClientDataRecord | Any) -> ClientDataExtractor:
        """Build the extractor matching ``record`` mime type."""

        record = ClientDataRecord.from_raw(record)
        builder = self._builders.get(record.mime_type)
        if builder is None:
            raise UnsupportedMimeTypeError(record.mime_type)
        return builder(record)


def build_default_factory() -> ClientDataExtractorFactory:
    """Return a factory handling the XML and JSON mime types."""

    factory = ClientDataExtractorFactory()
    for mime_type in sorted(XML_MIME_TYPES):
        factory.register(mime_type, XmlClientDataExtractor)
    for mime_type in sorted(JSON_MIME_TYPES):
        factory.register(mime_type, JsonClientDataExtractor)
    return factory


_DEFAULT_FACTORY = build_default_factory()


def create(record: ClientDataRecord | Any) -> ClientDataExtractor:
    """Build an extractor with the default XML/JSON routing."""

    return _DEFAULT_FACTORY.create(record)
