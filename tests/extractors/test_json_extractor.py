from __future__ import annotations

import json
import logging

import pytest

from clientdata.extractors.json_extractor import JsonClientDataExtractor
from clientdata.models import ClientDataRecord
from clientdata.visitor import PlainTextVisitor

_DATA = {"data": [{"afs:t": "KwicString", "text": "some text"}]}
_KWIC = [
    {"afs:t": "KwicString", "text": "The "},
    {"afs:t": "KwicMatch", "match": "quick"},
    {"afs:t": "KwicString", "text": " fox"},
    {"afs:t": "KwicTruncate"},
]


def _extractor(contents: object) -> JsonClientDataExtractor:
    return JsonClientDataExtractor(ClientDataRecord(id="json1", mime_type="application/json", contents=contents))


def test_no_name_returns_compact_json() -> None:
    text = _extractor(_DATA).get_text()

    assert text == '{"data":[{"afs:t":"KwicString","text":"some text"}]}'
    assert json.loads(text) == _DATA


def test_no_name_round_trips_nested_values() -> None:
    contents = {"b": 1, "a": [True, None, 2.5, {"z": "é\"\n"}]}
    text = _extractor(contents).get_text(None)

    assert json.loads(text) == contents
    assert text.startswith('{"b":1,"a":')


def test_named_field_is_walked() -> None:
    assert _extractor(_DATA).get_text("data") == "some text"


def test_list_contents_are_walked_with_empty_name() -> None:
    contents = [{"afs:t": "KwicString", "text": "some text"}]

    assert _extractor(contents).get_text("") == "some text"


def test_list_contents_ignore_the_name_value() -> None:
    assert _extractor(_KWIC).get_text("anything") == "The <b>quick</b> fox..."


def test_custom_visitor_is_used() -> None:
    extractor = _extractor({"abstract": _KWIC})

    assert extractor.get_text("abstract", PlainTextVisitor(truncate_marker="…")) == "The quick fox…"


def test_missing_field_returns_empty_string_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        text = _extractor(_DATA).get_text("missing")

    assert text == ""
    assert "missing" in caplog.text


def test_scalar_contents_have_no_fields() -> None:
    extractor = _extractor("just text")

    assert extractor.get_text("field") == ""
    assert extractor.get_text() == '"just text"'


def test_unrecognized_values_are_rendered_as_json() -> None:
    extractor = _extractor({"meta": {"count": 3, "tags": ["a"]}, "n": 42, "mixed": ["a", 1, None]})

    assert extractor.get_text("meta") == '{"count":3,"tags":["a"]}'
    assert extractor.get_text("n") == "42"
    assert extractor.get_text("mixed") == "a1null"
