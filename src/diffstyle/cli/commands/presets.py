# topmark:header:start
#
#   project      : DiffStyle
#   file         : presets.py
#   file_relpath : src/diffstyle/cli/commands/presets.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""DiffStyle `presets` command.

Lists the builtin presets, the options each defines and the config keys
those options consult first.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from diffstyle.cli.cli_types import OutputFormat
from diffstyle.cli.options import format_option
from diffstyle.presets.registry import BUILTIN_PRESETS

if TYPE_CHECKING:
    from diffstyle.cli.console import ConsoleLike


@click.command(
    name="presets",
    help="List the builtin presets.",
)
@format_option
def presets_command(*, output_format: OutputFormat | None = None) -> None:
    """List the builtin presets.

    Args:
        output_format (OutputFormat | None): Output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        payload: list[dict[str, Any]] = [
            {
                "name": meta.name,
                "options": list(meta.options),
                "config_keys": dict(meta.config_keys),
            }
            for meta in BUILTIN_PRESETS.iter_meta()
        ]
        console.print(json.dumps(payload, indent=2))
        return

    for meta in BUILTIN_PRESETS.iter_meta():
        console.print(console.styled(meta.name, bold=True))
        for option in meta.options:
            key: str | None = meta.config_keys.get(option)
            suffix: str = f"  (config: {key})" if key else ""
            console.print(f"    {option}{suffix}")
