from __future__ import annotations

import logging

import pytest

from onepage.utils.logging import apply_debug_setting, env_level, env_requests_debug, parse_level


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("15", 15),
        (logging.ERROR, logging.ERROR),
        ("chatty", logging.INFO),
        ("", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_parse_level(value, expected) -> None:
    assert parse_level(value) == expected


def test_env_level_prefers_explicit_level() -> None:
    environ = {"ONEPAGE_LOG_LEVEL": "error", "ONEPAGE_DEBUG": "1"}
    assert env_level(environ) == logging.ERROR


def test_env_level_debug_flags() -> None:
    assert env_level({"ONEPAGE_DEBUG_LOGGING": "yes"}) == logging.DEBUG
    assert env_level({"ONEPAGE_DEBUG": "0"}) is None
    assert env_requests_debug({"ONEPAGE_DEBUG": "on"}) is True
    assert env_requests_debug({}) is False


def test_apply_debug_setting_respects_environment(monkeypatch) -> None:
    root = logging.getLogger()
    previous = root.level
    monkeypatch.delenv("ONEPAGE_DEBUG_LOGGING", raising=False)
    monkeypatch.delenv("ONEPAGE_DEBUG", raising=False)
    try:
        monkeypatch.delenv("ONEPAGE_LOG_LEVEL", raising=False)
        assert apply_debug_setting(True) == logging.DEBUG
        assert apply_debug_setting(False) == logging.INFO

        monkeypatch.setenv("ONEPAGE_LOG_LEVEL", "WARNING")
        assert apply_debug_setting(True) == logging.WARNING
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
