# topmark:header:start
#
#   project      : DiffStyle
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""CLI test helpers for invoking DiffStyle through Click's test runner.

The session-wide `isolate_environment` fixture (see ``tests/conftest.py``)
points the user config location at an empty directory, so commands only see
the config files a test passes with ``--config``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from diffstyle.cli.exit_codes import ExitCode
from diffstyle.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI and return Click's result.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["show"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def run_show(config: Path | None, *args: str) -> Result:
    """Invoke ``--no-color show`` with an explicit config file (or ``--no-config``)."""
    argv: list[str] = ["--no-color", "show"]
    argv += ["--config", str(config)] if config is not None else ["--no-config"]
    argv += list(args)
    return run_cli(argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def parse_listing(output: str) -> dict[str, str]:
    """Parse the ``name = value`` lines printed by ``show``.

    Comment lines (``# ...``) are skipped.
    """
    values: dict[str, str] = {}
    for line in output.splitlines():
        if not line or line.startswith("#"):
            continue
        name, _, value = line.partition(" = ")
        values[name.strip()] = value
    return values
