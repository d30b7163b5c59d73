"""Wire-format constants for AFS client data payloads."""

from __future__ import annotations

AFS_NAMESPACE = "http://ref.antidot.net/v7/afs#"
AFS_PREFIX = "afs"
MATCH_TAG = "match"

# Raw markers emitted by the search service when a client data match occurs.
HIGHLIGHT_MARKERS: tuple[str, ...] = (f"<{AFS_PREFIX}:{MATCH_TAG}>", f"<{MATCH_TAG}>")
NAMESPACE_DECLARATION = f'xmlns:{AFS_PREFIX}="{AFS_NAMESPACE}"'

KWIC_TYPE_KEY = "afs:t"
KWIC_STRING = "KwicString"
KWIC_MATCH = "KwicMatch"
KWIC_TRUNCATE = "KwicTruncate"
KWIC_TEXT_KEY = "text"
KWIC_MATCH_KEY = "match"

XML_MIME_TYPES: frozenset[str] = frozenset({"text/xml", "application/xml"})
JSON_MIME_TYPES: frozenset[str] = frozenset({"text/json", "application/json"})

DEFAULT_HIGHLIGHT_OPEN = "<b>"
DEFAULT_HIGHLIGHT_CLOSE = "</b>"
DEFAULT_TRUNCATE_MARKER = "..."
