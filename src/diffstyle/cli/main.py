# topmark:header:start
#
#   project      : DiffStyle
#   file         : main.py
#   file_relpath : src/diffstyle/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Click entry point for the DiffStyle CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from diffstyle.cli.commands.presets import presets_command
from diffstyle.cli.commands.show import show_command
from diffstyle.cli.commands.version import version_command
from diffstyle.cli.console import ClickConsole
from diffstyle.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from diffstyle.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from diffstyle.cli.console import ConsoleLike
    from diffstyle.config.logging import DiffStyleLogger

logger: DiffStyleLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env, independent of -v/-q
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DiffStyle CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the DiffStyle CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'diffstyle show --presets diff-so-fancy' to resolve options.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(show_command)

cli.add_command(presets_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
