# topmark:header:start
#
#   project      : ShellArgs
#   file         : test_logging.py
#   file_relpath : tests/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TRACE level, environment log level and handler setup."""

from __future__ import annotations

import logging as std_logging

import pytest

from shellargs.config import logging
from shellargs.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    ("raw", "expected"),
    [
        ("trace", logging.TRACE_LEVEL),
        (" Debug ", std_logging.DEBUG),
        ("WARN", std_logging.WARNING),
        ("10", 10),
        ("loud", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """Level names and numbers are accepted; anything else is ignored."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert logging.resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable there is no level."""
    assert logging.resolve_env_log_level() is None


def test_trace_level_name() -> None:
    """TRACE sits below DEBUG and has its own name."""
    assert logging.TRACE_LEVEL < std_logging.DEBUG
    assert std_logging.getLevelName(logging.TRACE_LEVEL) == "TRACE"


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Module loggers can emit TRACE records."""
    logger = logging.get_logger("shellargs.test")
    assert isinstance(logger, logging.ShellargsLogger)
    with caplog.at_level(logging.TRACE_LEVEL):
        logger.trace("key %r", "old-gen-heap-size")
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert caplog.records[0].getMessage() == "key 'old-gen-heap-size'"


def test_setup_logging_replaces_handlers() -> None:
    """Repeated setup keeps a single colored stderr handler."""
    try:
        logging.setup_logging(level=std_logging.INFO)
        logging.setup_logging(level=std_logging.INFO)
        root = std_logging.getLogger()
        assert root.level == std_logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, logging.ChalkFormatter)
    finally:
        logging.setup_logging(level=logging.TRACE_LEVEL)


def test_setup_logging_defaults_to_critical() -> None:
    """Without a level or environment variable only critical records pass."""
    try:
        logging.setup_logging()
        assert std_logging.getLogger().level == std_logging.CRITICAL
    finally:
        logging.setup_logging(level=logging.TRACE_LEVEL)


def test_formatter_keeps_message() -> None:
    """Coloring wraps the formatted text without altering it."""
    record = std_logging.LogRecord("x", std_logging.WARNING, __file__, 1, "careful", None, None)
    text: str = logging.ChalkFormatter(logging.LOG_FORMAT).format(record)
    assert "[WARNING] careful" in text
