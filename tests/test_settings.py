"""
Tests for `api/settings.py`.

Covers configuration rules:
- LOG_LEVEL defaults to INFO and accepts level names case-insensitively.
- An unknown LOG_LEVEL fails fast with a descriptive RuntimeError.
- LOG_FORMAT falls back to the default format when unset or empty.
"""

from __future__ import annotations

import logging

import pytest

from api.settings import DEFAULT_LOG_FORMAT, configure_logging, get_log_format, get_log_level


def test_log_level_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify an unset LOG_LEVEL resolves to INFO."""

    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert get_log_level() == logging.INFO


def test_log_level_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify lower-case level names are accepted."""

    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_log_level() == logging.DEBUG


def test_unknown_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify an unknown level name is reported rather than silently ignored."""

    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError, match="LOG_LEVEL"):
        get_log_level()


def test_log_format_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify empty and unset LOG_FORMAT use the default format."""

    monkeypatch.delenv("LOG_FORMAT", raising=False)
    assert get_log_format() == DEFAULT_LOG_FORMAT
    monkeypatch.setenv("LOG_FORMAT", "")
    assert get_log_format() == DEFAULT_LOG_FORMAT
    monkeypatch.setenv("LOG_FORMAT", "%(message)s")
    assert get_log_format() == "%(message)s"


def test_configure_logging_applies_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify configure_logging passes the configured level and format to basicConfig."""

    calls = []
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_FORMAT", "%(message)s")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging()

    assert calls == [{"level": logging.WARNING, "format": "%(message)s"}]
