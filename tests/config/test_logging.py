# topmark:header:start
#
#   project      : DiffStyle
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Tests for environment-driven log level resolution."""

from __future__ import annotations

import logging

import pytest

from diffstyle.config.logging import TRACE_LEVEL, get_logger, resolve_env_log_level


@pytest.mark.parametrize(
    ("env_value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        ("warn", logging.WARNING),
        ("20", 20),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    env_value: str, expected: int | None, monkeypatch: pytest.MonkeyPatch
) -> None:
    """DIFFSTYLE_LOG_LEVEL accepts level names (any case) and numbers."""
    monkeypatch.setenv("DIFFSTYLE_LOG_LEVEL", env_value)

    assert resolve_env_log_level() == expected


def test_unset_env_means_no_level() -> None:
    """Without the variable, callers fall back to their own default."""
    assert resolve_env_log_level() is None


def test_loggers_support_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Project loggers expose ``trace()`` below DEBUG."""
    logger = get_logger("diffstyle.tests")

    with caplog.at_level(TRACE_LEVEL, logger="diffstyle.tests"):
        logger.trace("resolved %s", "minus-style")

    assert [r.levelno for r in caplog.records] == [TRACE_LEVEL]
    assert caplog.records[0].getMessage() == "resolved minus-style"
