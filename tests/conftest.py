# topmark:header:start
#
#   project      : DiffStyle
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Pytest configuration for the DiffStyle test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests build config sources from TOML text (`make_source`) so every scenario
    states its config the way a user would write it.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

from diffstyle.config import logging
from diffstyle.config.source import TomlConfigSource

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of test runs.

    Clears ``DIFFSTYLE_LOG_LEVEL`` and points ``HOME``/``XDG_CONFIG_HOME`` at an
    empty temporary directory so no user config file is discovered.

    Args:
        tmp_path (Path): Pytest-provided temporary directory.
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv("DIFFSTYLE_LOG_LEVEL", raising=False)
    home: Path = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_source(text: str) -> TomlConfigSource:
    """Return a config source parsed from dedented TOML text.

    Args:
        text (str): TOML document; leading indentation is removed.

    Returns:
        TomlConfigSource: The parsed source.
    """
    return TomlConfigSource.from_text(textwrap.dedent(text).lstrip("\n"))


def write_config(path: Path, content: str) -> Path:
    """Write dedented TOML content to ``path``, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path
