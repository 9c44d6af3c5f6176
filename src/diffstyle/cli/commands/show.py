# topmark:header:start
#
#   project      : DiffStyle
#   file         : show.py
#   file_relpath : src/diffstyle/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""DiffStyle `show` command.

Resolves every option from defaults, config, presets and explicit flags, and
prints the result.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import click

from diffstyle.cli.config_resolver import resolve_config_source
from diffstyle.cli.cli_types import OutputFormat
from diffstyle.cli.options import (
    collect_explicit_values,
    config_selection_options,
    format_option,
    option_value_flags,
)
from diffstyle.config.logging import get_logger
from diffstyle.constants import VALUE_NOT_SET
from diffstyle.resolver import parse_preset_names, resolve_options

if TYPE_CHECKING:
    from pathlib import Path

    from diffstyle.cli.console import ConsoleLike
    from diffstyle.config.logging import DiffStyleLogger
    from diffstyle.config.source import TomlConfigSource
    from diffstyle.options.snapshot import OptionSnapshot
    from diffstyle.options.types import OptionValue

logger: DiffStyleLogger = get_logger(__name__)


def _render_value(value: OptionValue) -> str:
    if value is None:
        return VALUE_NOT_SET
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@click.command(
    name="show",
    help="Resolve and print every option.",
)
@config_selection_options
@format_option
@option_value_flags()
@click.pass_context
def show_command(
    ctx: click.Context,
    *,
    presets: str | None,
    config_path: Path | None,
    no_config: bool,
    output_format: OutputFormat | None,
    **option_params: Any,
) -> None:
    """Resolve and print every option.

    Args:
        ctx (click.Context): Current Click context.
        presets (str | None): Whitespace-separated preset list from ``--presets``.
        config_path (Path | None): Explicit config file from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
        output_format (OutputFormat | None): Output format.
        **option_params (Any): One parsed value per ``--<option>`` flag.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: TomlConfigSource | None = resolve_config_source(
        config_path=config_path, no_config=no_config
    )
    explicit: dict[str, OptionValue] = collect_explicit_values(ctx, option_params)
    snapshot: OptionSnapshot = resolve_options(
        cli_values=explicit,
        preset_names=parse_preset_names(presets) if presets is not None else None,
        config=config,
    )

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps(snapshot.as_dict(), indent=2))
        return

    # -v: say where values came from before listing them
    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        source: str = str(config.path) if config is not None and config.path else VALUE_NOT_SET
        console.print(f"# config : {source}")
        console.print(f"# presets: {presets if presets is not None else VALUE_NOT_SET}")

    width: int = max((len(name) for name in snapshot), default=0)
    for name, value in snapshot.items():
        text: str = _render_value(value)
        if name in explicit:
            text = console.styled(text, bold=True)
        console.print(f"{name.ljust(width)} = {text}")
