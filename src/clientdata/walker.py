"""Recursive walker rendering JSON client data through a text visitor."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from clientdata.constants import (
    KWIC_MATCH,
    KWIC_MATCH_KEY,
    KWIC_STRING,
    KWIC_TEXT_KEY,
    KWIC_TRUNCATE,
    KWIC_TYPE_KEY,
)
from clientdata.visitor import TextVisitor


def _json_default(value: Any) -> Any:
    if hasattr(value, "__dict__"):
        return vars(value)
    return str(value)


def dump_json(value: Any) -> str:
    """Serialize ``value`` as compact JSON, keeping key order as received."""

    return json.dumps(value, separators=(",", ":"), default=_json_default)


class JsonTextWalker:
    """Walk a JSON value and concatenate the visitor output of its fragments."""

    def __init__(self, visitor: TextVisitor) -> None:
        self._visitor = visitor

    def visit(self, value: Any) -> str:
        """Render ``value`` through the visitor.

        ``KwicString`` fragments and plain strings go to ``on_plain``,
        ``KwicMatch`` fragments to ``on_highlighted`` and ``KwicTruncate`` to
        ``on_truncated``. Any other value reaches ``on_plain`` as compact JSON.
        """

        if isinstance(value, list):
            return "".join(self.visit(item) for item in value)
        if isinstance(value, str):
            return self._visitor.on_plain(value)
        if isinstance(value, Mapping):
            kind = value.get(KWIC_TYPE_KEY)
            if kind == KWIC_STRING:
                return self._visitor.on_plain(self._payload(value, KWIC_TEXT_KEY))
            if kind == KWIC_MATCH:
                return self._visitor.on_highlighted(self._payload(value, KWIC_MATCH_KEY))
            if kind == KWIC_TRUNCATE:
                return self._visitor.on_truncated()
        return self._visitor.on_plain(dump_json(value))

    def _payload(self, fragment: Mapping[str, Any], key: str) -> str:
        payload = fragment.get(key, "")
        return payload if isinstance(payload, str) else dump_json(payload)
