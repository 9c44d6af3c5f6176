# topmark:header:start
#
#   project      : DiffStyle
#   file         : options.py
#   file_relpath : src/diffstyle/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config selection,
presets and one flag per cataloged option) and their resolution logic, so
commands and groups can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from diffstyle.cli.cli_types import EnumChoiceParam, OutputFormat
from diffstyle.cli.errors import DiffStyleUsageError
from diffstyle.config.logging import TRACE_LEVEL, get_logger
from diffstyle.options.catalog import OPTION_SPECS
from diffstyle.options.types import OptionType

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from diffstyle.config.logging import DiffStyleLogger
    from diffstyle.options.types import OptionSpec, OptionValue

P = ParamSpec("P")
R = TypeVar("R")

logger: DiffStyleLogger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The level as a logging-style integer.

    Raises:
        DiffStyleUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DiffStyleUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --no-color flag to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --format option to a listing command."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def config_selection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --presets, --config and --no-config to a command."""
    f = click.option(
        "--presets",
        "presets",
        type=str,
        default=None,
        help=(
            "Whitespace-separated list of presets to apply, in order; later presets "
            "override earlier ones. Defaults to the 'presets' entry of the config file."
        ),
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Read configuration from this TOML file instead of the user config.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Ignore all configuration files.",
    )(f)
    return f


_CLICK_TYPES: dict[OptionType, click.ParamType] = {
    OptionType.STRING: click.STRING,
    OptionType.BOOL: click.BOOL,
    OptionType.INTEGER: click.INT,
    OptionType.UNSIGNED_INTEGER: click.IntRange(min=0),
    OptionType.FLOAT: click.FLOAT,
    OptionType.OPTIONAL_STRING: click.STRING,
}


def option_value_flags(
    specs: Sequence[OptionSpec] = OPTION_SPECS,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Return a decorator adding one ``--<option> VALUE`` flag per option spec.

    Flags take a value for every type (``--light true``) so that an explicit
    value can always be told apart from an omitted flag.

    Args:
        specs (Sequence[OptionSpec]): Options to expose.

    Returns:
        Callable[[Callable[P, R]], Callable[P, R]]: The decorator.
    """

    def _decorator(f: Callable[P, R]) -> Callable[P, R]:
        for spec in reversed(specs):
            f = click.option(
                spec.flag,
                spec.param_name,
                type=_CLICK_TYPES[spec.option_type],
                default=None,
                show_default=False,
                help=f"{spec.help} [{spec.option_type.value}, default: {spec.default!r}]",
            )(f)
        return f

    return _decorator


def collect_explicit_values(
    ctx: click.Context,
    params: Mapping[str, object],
    specs: Sequence[OptionSpec] = OPTION_SPECS,
) -> dict[str, OptionValue]:
    """Return the option values given explicitly on the command line.

    Args:
        ctx (click.Context): Current Click context.
        params (Mapping[str, object]): Parsed parameters of the command.
        specs (Sequence[OptionSpec]): Options exposed as flags.

    Returns:
        dict[str, OptionValue]: ``option name -> value`` for flags whose source is
            the command line.
    """
    explicit: dict[str, OptionValue] = {}
    for spec in specs:
        if ctx.get_parameter_source(spec.param_name) is not ParameterSource.COMMANDLINE:
            continue
        value: OptionValue = spec.option_type.coerce(params.get(spec.param_name))
        if value is None:
            raise DiffStyleUsageError(
                f"Invalid value for '{spec.flag}': expected {spec.option_type.value}."
            )
        explicit[spec.name] = value
    logger.debug("Explicit command-line values: %s", explicit)
    return explicit
