"""Highlight formatting for XML client data and DOM text flattening."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from lxml import etree

from clientdata.constants import AFS_NAMESPACE, DEFAULT_HIGHLIGHT_CLOSE, DEFAULT_HIGHLIGHT_OPEN, MATCH_TAG


@runtime_checkable
class HighlightFormatter(Protocol):
    """Strategy applied to every highlight element met while flattening."""

    def matches(self, element: etree._Element) -> bool:
        """Return True when ``element`` is a highlight marker."""

    def render(self, text: str) -> str:
        """Decorate the flattened text of a highlight marker."""


@dataclass(frozen=True, slots=True)
class BoldHighlightFormatter:
    """Wrap matched text in bold markup.

    Elements are matched on local name. Un-namespaced elements match too,
    since the service can emit the bare ``<match>`` marker.
    """

    tag: str = MATCH_TAG
    namespace: str | None = AFS_NAMESPACE
    open_tag: str = DEFAULT_HIGHLIGHT_OPEN
    close_tag: str = DEFAULT_HIGHLIGHT_CLOSE

    def matches(self, element: etree._Element) -> bool:
        if not isinstance(element.tag, str):
            return False
        qname = etree.QName(element)
        return qname.localname == self.tag and qname.namespace in {self.namespace, None}

    def render(self, text: str) -> str:
        return f"{self.open_tag}{text}{self.close_tag}"


def flatten_text(node: etree._Element, formatter: HighlightFormatter | None = None) -> str:
    """Concatenate descendant text of ``node`` in document order.

    Comments and processing instructions are skipped, their tails are kept.
    When ``formatter`` is given, every element it matches is rendered
    through it instead of being flattened inline.
    """

    if not isinstance(node.tag, str):
        return ""
    if formatter is not None and formatter.matches(node):
        return formatter.render(flatten_text(node))

    parts: list[str] = []
    if node.text:
        parts.append(node.text)
    for child in node:
        parts.append(flatten_text(child, formatter))
        if child.tail:
            parts.append(child.tail)
    return "".join(parts)
