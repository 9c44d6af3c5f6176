# topmark:header:start
#
#   project      : DiffStyle
#   file         : catalog.py
#   file_relpath : src/diffstyle/options/catalog.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Catalog of the options DiffStyle resolves.

Exports:
    OPTION_SPECS: All option declarations, in resolution order.

Notes:
    - The catalog order is the resolution order. A *base* option (e.g.
      ``minus-style``) must precede every *derived* option whose preset fallback
      reads it (``minus-non-emph-style``, ``minus-emph-style``).
    - Defaults are plain style strings; rendering them is left to the pager.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from diffstyle.options.types import OptionSpec, OptionType

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from diffstyle.options.types import OptionValue

OPTION_SPECS: tuple[OptionSpec, ...] = (
    # Removed lines
    OptionSpec(
        name="minus-style",
        option_type=OptionType.STRING,
        default="normal 52",
        help="Style for removed lines.",
    ),
    OptionSpec(
        name="minus-non-emph-style",
        option_type=OptionType.STRING,
        default="normal 52",
        help="Style for non-emphasized sections of removed lines that have an emphasized section.",
    ),
    OptionSpec(
        name="minus-emph-style",
        option_type=OptionType.STRING,
        default="normal 124",
        help="Style for emphasized sections of removed lines.",
    ),
    # Unchanged lines
    OptionSpec(
        name="zero-style",
        option_type=OptionType.STRING,
        default="syntax",
        help="Style for unchanged lines.",
    ),
    # Added lines
    OptionSpec(
        name="plus-style",
        option_type=OptionType.STRING,
        default="syntax 22",
        help="Style for added lines.",
    ),
    OptionSpec(
        name="plus-non-emph-style",
        option_type=OptionType.STRING,
        default="syntax 22",
        help="Style for non-emphasized sections of added lines that have an emphasized section.",
    ),
    OptionSpec(
        name="plus-emph-style",
        option_type=OptionType.STRING,
        default="syntax 28",
        help="Style for emphasized sections of added lines.",
    ),
    # Sections
    OptionSpec(
        name="commit-style",
        option_type=OptionType.STRING,
        default="raw",
        help="Style for the commit hash line.",
    ),
    OptionSpec(
        name="commit-decoration-style",
        option_type=OptionType.STRING,
        default="",
        help="Decoration (box, underline, overline) around the commit hash line.",
    ),
    OptionSpec(
        name="file-style",
        option_type=OptionType.STRING,
        default="blue",
        help="Style for the file section.",
    ),
    OptionSpec(
        name="file-decoration-style",
        option_type=OptionType.STRING,
        default="blue ul",
        help="Decoration around the file section.",
    ),
    OptionSpec(
        name="hunk-header-style",
        option_type=OptionType.STRING,
        default="syntax",
        help="Style for the hunk-header.",
    ),
    OptionSpec(
        name="hunk-header-decoration-style",
        option_type=OptionType.STRING,
        default="blue box",
        help="Decoration around the hunk-header.",
    ),
    # Behavior and layout
    OptionSpec(
        name="paging",
        option_type=OptionType.STRING,
        default="auto",
        help="Whether to use a pager: always, never or auto.",
    ),
    OptionSpec(
        name="light",
        option_type=OptionType.BOOL,
        default=False,
        help="Use default colors appropriate for a light terminal background.",
    ),
    OptionSpec(
        name="dark",
        option_type=OptionType.BOOL,
        default=False,
        help="Use default colors appropriate for a dark terminal background.",
    ),
    OptionSpec(
        name="line-numbers",
        option_type=OptionType.BOOL,
        default=False,
        help="Display line numbers next to the diff.",
    ),
    OptionSpec(
        name="tabs",
        option_type=OptionType.UNSIGNED_INTEGER,
        default=4,
        help="Number of spaces to replace a tab with (0 keeps tabs).",
    ),
    OptionSpec(
        name="max-line-length",
        option_type=OptionType.UNSIGNED_INTEGER,
        default=512,
        help="Truncate lines longer than this (0 disables truncation).",
    ),
    OptionSpec(
        name="max-line-distance",
        option_type=OptionType.FLOAT,
        default=0.6,
        help="Maximum edit distance between a removed and an added line to pair them.",
    ),
    OptionSpec(
        name="syntax-theme",
        option_type=OptionType.OPTIONAL_STRING,
        default=None,
        help="Syntax-highlighting theme.",
    ),
    OptionSpec(
        name="width",
        option_type=OptionType.OPTIONAL_STRING,
        default=None,
        help="Width of decorations and backgrounds ('variable' or a number).",
    ),
)

_SPECS_BY_NAME: Mapping[str, OptionSpec] = MappingProxyType(
    {spec.name: spec for spec in OPTION_SPECS}
)


def get_option_spec(name: str) -> OptionSpec | None:
    """Return the spec of option ``name``, or ``None`` if it is not in the catalog."""
    return _SPECS_BY_NAME.get(name)


def option_names() -> tuple[str, ...]:
    """Return all option names in resolution order."""
    return tuple(spec.name for spec in OPTION_SPECS)


def default_values(specs: Iterable[OptionSpec] = OPTION_SPECS) -> dict[str, OptionValue]:
    """Return a fresh ``name -> default`` dict for ``specs`` (the whole catalog by default)."""
    return {spec.name: spec.default for spec in specs}
