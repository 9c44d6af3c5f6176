# topmark:header:start
#
#   project      : DiffStyle
#   file         : version.py
#   file_relpath : src/diffstyle/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""DiffStyle `version` command.

Prints the current DiffStyle version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from diffstyle.cli.cli_types import OutputFormat
from diffstyle.cli.options import format_option
from diffstyle.constants import DIFFSTYLE_VERSION

if TYPE_CHECKING:
    from diffstyle.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DiffStyle.",
)
@format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of DiffStyle.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": DIFFSTYLE_VERSION}))
    else:
        console.print(console.styled(DIFFSTYLE_VERSION, bold=True))
