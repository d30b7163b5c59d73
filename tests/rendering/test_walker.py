from __future__ import annotations

from clientdata.visitor import BoldTextVisitor, PlainTextVisitor
from clientdata.walker import JsonTextWalker, dump_json


class _RecordingVisitor:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    def on_plain(self, text: str) -> str:
        self.calls.append(("plain", text))
        return text.upper()

    def on_highlighted(self, text: str) -> str:
        self.calls.append(("highlighted", text))
        return f"*{text}*"

    def on_truncated(self) -> str:
        self.calls.append(("truncated", None))
        return "~"


def test_walker_dispatches_kwic_fragments_in_order() -> None:
    visitor = _RecordingVisitor()
    value = [
        {"afs:t": "KwicString", "text": "a "},
        {"afs:t": "KwicMatch", "match": "b"},
        " c",
        {"afs:t": "KwicTruncate"},
    ]

    assert JsonTextWalker(visitor).visit(value) == "A *b* C~"
    assert visitor.calls == [("plain", "a "), ("highlighted", "b"), ("plain", " c"), ("truncated", None)]


def test_walker_flattens_nested_lists_without_separator() -> None:
    assert JsonTextWalker(PlainTextVisitor()).visit(["x", ["y", ["z"]]]) == "xyz"


def test_walker_falls_back_to_json_for_unknown_shapes() -> None:
    walker = JsonTextWalker(BoldTextVisitor())

    assert walker.visit({"afs:t": "Unknown", "text": "t"}) == '{"afs:t":"Unknown","text":"t"}'
    assert walker.visit(False) == "false"
    assert walker.visit(None) == "null"


def test_walker_tolerates_incomplete_fragments() -> None:
    walker = JsonTextWalker(BoldTextVisitor())

    assert walker.visit([{"afs:t": "KwicString"}, {"afs:t": "KwicMatch", "match": 7}]) == "<b>7</b>"


def test_bold_visitor_wraps_highlighted_text_only() -> None:
    visitor = BoldTextVisitor()

    assert visitor.on_plain("a") == "a"
    assert visitor.on_highlighted("a") == "<b>a</b>"
    assert visitor.on_truncated() == "..."


def test_dump_json_is_compact_and_ordered() -> None:
    assert dump_json({"b": [1, 2], "a": "é"}) == '{"b":[1,2],"a":"\\u00e9"}'
