from __future__ import annotations

import logging

import pytest

from clientdata.config import RenderSettings
from clientdata.visitor import BoldTextVisitor, PlainTextVisitor


def test_settings_defaults() -> None:
    settings = RenderSettings.from_env({})

    assert settings.highlight_open == "<b>"
    assert settings.highlight_close == "</b>"
    assert settings.truncate_marker == "..."
    assert settings.logging_level == logging.WARNING


def test_settings_build_formatter_and_visitor() -> None:
    settings = RenderSettings.from_env(
        {
            "CLIENTDATA_HIGHLIGHT_OPEN": "<mark>",
            "CLIENTDATA_HIGHLIGHT_CLOSE": "</mark>",
            "CLIENTDATA_TRUNCATE_MARKER": "[...]",
            "CLIENTDATA_LOG_LEVEL": "debug",
        }
    )

    assert settings.logging_level == logging.DEBUG
    assert settings.highlight_formatter().render("x") == "<mark>x</mark>"
    assert settings.highlight_formatter(plain=True).render("x") == "x"
    visitor = settings.text_visitor()
    assert isinstance(visitor, BoldTextVisitor)
    assert visitor.on_highlighted("x") == "<mark>x</mark>"
    assert visitor.on_truncated() == "[...]"
    assert isinstance(settings.text_visitor(plain=True), PlainTextVisitor)


def test_settings_reject_empty_markup() -> None:
    with pytest.raises(ValueError, match="CLIENTDATA_HIGHLIGHT_OPEN"):
        RenderSettings.from_env({"CLIENTDATA_HIGHLIGHT_OPEN": " "})

    with pytest.raises(ValueError, match="CLIENTDATA_HIGHLIGHT_CLOSE"):
        RenderSettings.from_env({"CLIENTDATA_HIGHLIGHT_CLOSE": ""})


def test_settings_reject_unknown_log_level() -> None:
    with pytest.raises(ValueError, match="CLIENTDATA_LOG_LEVEL"):
        RenderSettings.from_env({"CLIENTDATA_LOG_LEVEL": "chatty"})
