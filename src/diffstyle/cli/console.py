# topmark:header:start
#
#   project      : DiffStyle
#   file         : console.py
#   file_relpath : src/diffstyle/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""User-facing output for DiffStyle commands.

Resolved option listings go to stdout through a console object stored in
``ctx.obj["console"]``; diagnostics go through `logging` (stderr). Commands
never call `print()` directly, so color handling lives in one place.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What a command needs from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the error stream."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` with ANSI styling, when color is enabled."""
        ...


class ClickConsole:
    """Console writing through `click.echo`.

    Streams are looked up when writing (not when constructing) so that Click's
    test runner, which swaps ``sys.stdout``/``sys.stderr``, captures the output.

    Args:
        enable_color (bool): Emit ANSI styles; when False, `styled()` is a no-op.
        out (TextIO | None): Output stream override (default: ``sys.stdout``).
        err (TextIO | None): Error stream override (default: ``sys.stderr``).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self._out: TextIO | None = out
        self._err: TextIO | None = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self._out or sys.stdout, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(
            text, nl=nl, file=self._err or sys.stderr, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Style ``text`` with `click.style` keyword arguments (``bold=True``, ``fg=...``)."""
        return click.style(text, **style_kwargs) if self.enable_color else text
