"""Text extraction from XML and JSON client data of search replies."""

from clientdata.errors import (
    ClientDataError,
    InvalidPathError,
    MalformedXmlError,
    MissingFieldError,
    UnknownClientDataIdError,
    UnsupportedMimeTypeError,
)
from clientdata.extractors import (
    ClientDataExtractor,
    ClientDataExtractorFactory,
    JsonClientDataExtractor,
    XmlClientDataExtractor,
    build_default_factory,
)
from clientdata.highlight import BoldHighlightFormatter, HighlightFormatter, flatten_text
from clientdata.manager import ClientDataManager
from clientdata.models import ClientDataRecord
from clientdata.visitor import BoldTextVisitor, PlainTextVisitor, TextVisitor
from clientdata.walker import JsonTextWalker

__all__ = [
    "BoldHighlightFormatter",
    "BoldTextVisitor",
    "ClientDataError",
    "ClientDataExtractor",
    "ClientDataExtractorFactory",
    "ClientDataManager",
    "ClientDataRecord",
    "HighlightFormatter",
    "InvalidPathError",
    "JsonClientDataExtractor",
    "JsonTextWalker",
    "MalformedXmlError",
    "MissingFieldError",
    "PlainTextVisitor",
    "TextVisitor",
    "UnknownClientDataIdError",
    "UnsupportedMimeTypeError",
    "XmlClientDataExtractor",
    "build_default_factory",
    "flatten_text",
]
