"""XML client data extractor with AFS highlight repair."""

from __future__ import annotations

import logging
import re

from lxml import etree

from clientdata.constants import AFS_NAMESPACE, AFS_PREFIX, HIGHLIGHT_MARKERS, NAMESPACE_DECLARATION
from clientdata.errors import InvalidPathError, MalformedXmlError
from clientdata.highlight import BoldHighlightFormatter, HighlightFormatter, flatten_text
from clientdata.models import ClientDataRecord

logger = logging.getLogger(__name__)

_XPATH_NAMESPACES = {AFS_PREFIX: AFS_NAMESPACE}

# Parent of the root element, i.e. the document node.
_DOCUMENT_STEP = "self::node()/../"
_FUNCTION_CALL_RE = re.compile(r"^([A-Za-z_][\w.-]*(?::[A-Za-z_][\w.-]*)?)\s*\(")
_NODE_TYPE_TESTS = frozenset({"node", "text", "comment", "processing-instruction"})


def document_relative(path: str) -> str:
    """Anchor a relative location path on the document node.

    lxml evaluates against the root element, so ``root/title`` would look
    for a ``root`` child of the root. Absolute and grouped expressions are
    left as is, so are function calls and literals.
    """

    stripped = path.lstrip()
    if not stripped or stripped[0] in "/($\"'" or stripped[0].isdigit():
        return path
    call = _FUNCTION_CALL_RE.match(stripped)
    if call and call.group(1) not in _NODE_TYPE_TESTS:
        return path
    return f"{_DOCUMENT_STEP}{stripped}"


def has_highlight_marker(contents: str) -> bool:
    """Return True when raw contents carry a highlight match element."""

    return any(marker in contents for marker in HIGHLIGHT_MARKERS)


def repair_highlight_namespace(contents: str) -> str:
    """Declare the afs prefix on the root element.

    The service emits ``afs:match`` without declaring the prefix. The first
    ``>`` is assumed to close the root start tag, so a prolog or a comment
    before the root element yields an unparsable document.
    """

    root_start, _, _ = contents.partition(">")
    if f"xmlns:{AFS_PREFIX}=" in root_start:
        return contents
    return contents.replace(">", f" {NAMESPACE_DECLARATION}>", 1)


class XmlClientDataExtractor:
    """Extract text from XML client data."""

    def __init__(self, record: ClientDataRecord) -> None:
        self._id = record.id
        self._contents = record.contents
        if not isinstance(self._contents, str):
            raise MalformedXmlError(self._id, "XML client data contents must be a string")

        self._has_highlight = has_highlight_marker(self._contents)
        source = self._contents
        if self._has_highlight:
            source = repair_highlight_namespace(source)
            logger.debug("Declared %s namespace for highlighted client data %s", AFS_PREFIX, self._id)

        parser = etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False, huge_tree=False)
        try:
            self._root = etree.fromstring(source.encode("utf-8"), parser=parser)
        except (etree.XMLSyntaxError, ValueError) as exc:
            raise MalformedXmlError(self._id, f"Invalid XML client data: {exc}") from exc

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def has_highlight_markup(self) -> bool:
        return self._has_highlight

    def get_text(self, path: str | None = None, formatter: HighlightFormatter | None = None) -> str:
        """Retrieve text from the first node selected by ``path``.

        Without ``path`` the original contents are returned untouched. A path
        selecting nothing cannot be told apart from a path selecting an empty
        node: both return an empty string.
        """

        if path is None:
            return self._contents

        try:
            result = self._root.xpath(document_relative(path), namespaces=_XPATH_NAMESPACES)
        except etree.XPathError as exc:
            raise InvalidPathError(path, f"Invalid XPath expression: {exc}") from exc
        if not isinstance(result, list):
            raise InvalidPathError(path, "XPath expression does not select nodes")
        if not result:
            return ""

        node = result[0]
        if not isinstance(node, etree._Element):
            return str(node)
        if self._has_highlight:
            return flatten_text(node, formatter or BoldHighlightFormatter())
        return flatten_text(node)
