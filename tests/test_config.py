import logging

import pytest

from radixcalc import config
from radixcalc.reader.token import NumberBase


def test_defaults():
    assert config.get_prompt() == ">>> "
    assert config.get_log_level() == logging.WARNING
    assert config.color_enabled() is True
    assert config.get_display_base() is NumberBase.DECIMAL


def test_prompt(monkeypatch):
    monkeypatch.setenv("RADIXCALC_PROMPT", "calc> ")
    assert config.get_prompt() == "calc> "


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (" error ", logging.ERROR),
        ("chatty", logging.WARNING),
    ],
)
def test_log_level(monkeypatch, raw, expected):
    monkeypatch.setenv("RADIXCALC_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


@pytest.mark.parametrize(
    "raw,expected",
    [("0", False), ("false", False), ("Off", False), ("1", True), ("yes", True), ("  ", True)],
)
def test_color_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("RADIXCALC_COLOR", raw)
    assert config.color_enabled() is expected


def test_no_color_wins(monkeypatch):
    monkeypatch.setenv("RADIXCALC_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "")
    assert config.color_enabled() is False


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("hex", NumberBase.HEX),
        ("HEX", NumberBase.HEX),
        ("16", NumberBase.HEX),
        ("bin", NumberBase.BINARY),
        ("octal", NumberBase.OCTAL),
        ("dec", NumberBase.DECIMAL),
        ("ternary", NumberBase.DECIMAL),
        ("", NumberBase.DECIMAL),
    ],
)
def test_display_base(monkeypatch, raw, expected):
    monkeypatch.setenv("RADIXCALC_BASE", raw)
    assert config.get_display_base() is expected


def test_number_base_from_name():
    assert NumberBase.from_name(" Binary ") is NumberBase.BINARY
    with pytest.raises(ValueError):
        NumberBase.from_name("x")


@pytest.mark.parametrize(
    "raw,default,expected",
    [("debug", logging.WARNING, logging.DEBUG), ("bogus", logging.INFO, logging.INFO)],
)
def test_resolve_log_level(raw, default, expected):
    assert config.resolve_log_level(raw, default) == expected
