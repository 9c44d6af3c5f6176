# topmark:header:start
#
#   project      : DiffStyle
#   file         : __init__.py
#   file_relpath : src/diffstyle/options/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Option declarations and snapshots of resolved option values."""

from __future__ import annotations

from .catalog import OPTION_SPECS, default_values, get_option_spec, option_names
from .snapshot import (
    BaseOptionSnapshot,
    MutableOptionSnapshot,
    OptionSnapshot,
    UnresolvedOptionError,
)
from .types import OptionSpec, OptionType, OptionValue

__all__ = [
    "OPTION_SPECS",
    "BaseOptionSnapshot",
    "MutableOptionSnapshot",
    "OptionSnapshot",
    "OptionSpec",
    "OptionType",
    "OptionValue",
    "UnresolvedOptionError",
    "default_values",
    "get_option_spec",
    "option_names",
]
