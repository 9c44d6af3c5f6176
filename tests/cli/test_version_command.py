# topmark:header:start
#
#   project      : DiffStyle
#   file         : test_version_command.py
#   file_relpath : tests/cli/test_version_command.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

import pytest
from packaging.version import InvalidVersion, Version

from diffstyle.constants import DIFFSTYLE_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_pep440_version() -> None:
    """It should output the PEP 440 version string (exact match)."""
    result = run_cli(
        [
            "--no-color",  # Disable color mode for exact matching
            "version",
        ]
    )

    assert_SUCCESS(result)

    out: str = result.output.strip()
    assert out == DIFFSTYLE_VERSION

    try:
        Version(out)  # raises InvalidVersion if not PEP 440
    except InvalidVersion as exc:
        pytest.fail(f"Not a valid PEP 440 version: {out!r} ({exc})")


def test_version_json_format() -> None:
    """`version --format json` returns parseable JSON with the version value."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": DIFFSTYLE_VERSION}


def test_no_subcommand_prints_help() -> None:
    """Invoking the group alone prints a hint and the help text."""
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "Hint:" in result.output
    assert "show" in result.output
    assert "presets" in result.output
