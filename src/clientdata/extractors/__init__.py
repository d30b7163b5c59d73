"""Client data extractor implementations and contracts."""

from .base import ClientDataExtractor
from .factory import ClientDataExtractorFactory, build_default_factory, create
from .json_extractor import JsonClientDataExtractor
from .xml_extractor import XmlClientDataExtractor

__all__ = [
    "ClientDataExtractor",
    "ClientDataExtractorFactory",
    "JsonClientDataExtractor",
    "XmlClientDataExtractor",
    "build_default_factory",
    "create",
]
