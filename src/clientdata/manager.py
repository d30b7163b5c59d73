"""Entry point mapping client data ids to their extractors."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from clientdata.errors import UnknownClientDataIdError
from clientdata.extractors.base import ClientDataExtractor
from clientdata.extractors.factory import ClientDataExtractorFactory, build_default_factory

logger = logging.getLogger(__name__)


class ClientDataManager:
    """Manage the XML and JSON client data of one reply.

    Extractors are built eagerly, one per record. A later record with an
    already seen id replaces the earlier one.
    """

    def __init__(
        self,
        records: Iterable[Any] = (),
        *,
        factory: ClientDataExtractorFactory | None = None,
    ) -> None:
        factory = factory or build_default_factory()
        extractors: dict[str | None, ClientDataExtractor] = {}
        for record in records:
            extractor = factory.create(record)
            extractors[extractor.id] = extractor
        self._extractors = extractors
        logger.debug("Loaded %d client data entries", len(extractors))

    @classmethod
    def from_reply(
        cls,
        reply: Any,
        *,
        factory: ClientDataExtractorFactory | None = None,
    ) -> "ClientDataManager":
        """Build a manager from a reply carrying a ``clientData`` sequence."""

        if isinstance(reply, Mapping):
            records = reply.get("clientData")
        else:
            records = getattr(reply, "clientData", None)
        return cls(records or (), factory=factory)

    @property
    def ids(self) -> list[str | None]:
        return list(self._extractors)

    def __contains__(self, client_data_id: object) -> bool:
        return client_data_id in self._extractors

    def __len__(self) -> int:
        return len(self._extractors)

    def extractor(self, client_data_id: str) -> ClientDataExtractor:
        """Return the extractor registered under ``client_data_id``."""

        try:
            return self._extractors[client_data_id]
        except KeyError:
            raise UnknownClientDataIdError(client_data_id) from None

    def get_text(self, client_data_id: str, name: str | None = None, formatter: Any = None) -> str:
        """Retrieve text from the client data registered under ``client_data_id``.

        ``name`` is an XPath for XML client data and a field name for JSON
        client data. ``formatter`` is a highlight formatter or a text visitor
        respectively; the extractor default is used when omitted.
        """

        return self.extractor(client_data_id).get_text(name, formatter)
