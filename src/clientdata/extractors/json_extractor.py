"""JSON client data extractor."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from clientdata.models import ClientDataRecord
from clientdata.visitor import BoldTextVisitor, TextVisitor
from clientdata.walker import JsonTextWalker, dump_json

logger = logging.getLogger(__name__)


class JsonClientDataExtractor:
    """Extract formatted text from JSON client data."""

    def __init__(self, record: ClientDataRecord) -> None:
        self._id = record.id
        self._contents = record.contents

    @property
    def id(self) -> str | None:
        return self._id

    def get_text(self, name: str | None = None, visitor: TextVisitor | None = None) -> str:
        """Retrieve text from JSON contents.

        ``name`` selects the first-level field to render. Without it the
        whole contents are returned as compact JSON. When the contents are a
        list, any name (the empty string included) renders the whole list,
        which is how highlighted plain text client data is retrieved.
        Missing fields are logged and yield an empty string.
        """

        if name is None:
            return dump_json(self._contents)

        if isinstance(self._contents, list):
            target = self._contents
        elif isinstance(self._contents, Mapping) and name in self._contents:
            target = self._contents[name]
        else:
            logger.warning("No client data content named %r (id=%s)", name, self._id)
            return ""

        return JsonTextWalker(visitor or BoldTextVisitor()).visit(target)
