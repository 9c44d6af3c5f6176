# topmark:header:start
#
#   project      : DiffStyle
#   file         : types.py
#   file_relpath : src/diffstyle/options/types.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Option types and option specifications.

Every option has a stable name and a declared [`OptionType`][diffstyle.options.types.OptionType].
The type drives coercion of raw config and command-line values, and decides
whether builtin presets may supply a value for the option (see
[`diffstyle.presets.lookup`][]).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from diffstyle.config.getters import (
    coerce_bool,
    coerce_float,
    coerce_int,
    coerce_string,
    coerce_uint,
)

if TYPE_CHECKING:
    from collections.abc import Callable

OptionValue = Union[str, bool, int, float, None]


class OptionType(str, Enum):
    """Declared semantic type of an option."""

    STRING = "string"
    BOOL = "bool"
    INTEGER = "int"
    UNSIGNED_INTEGER = "uint"
    FLOAT = "float"
    OPTIONAL_STRING = "optional-string"

    @property
    def is_optional(self) -> bool:
        """Return True if ``None`` is a legal resolved value for this type."""
        return self is OptionType.OPTIONAL_STRING

    def coerce(self, value: Any | None) -> OptionValue:
        """Coerce a raw value to this type.

        Args:
            value (Any | None): Raw value from a TOML table or the command line.

        Returns:
            OptionValue: The coerced value, or ``None`` when absent or not coercible.
        """
        return _COERCERS[self](value)


_COERCERS: dict[OptionType, Callable[[Any | None], OptionValue]] = {
    OptionType.STRING: coerce_string,
    OptionType.BOOL: coerce_bool,
    OptionType.INTEGER: coerce_int,
    OptionType.UNSIGNED_INTEGER: coerce_uint,
    OptionType.FLOAT: coerce_float,
    OptionType.OPTIONAL_STRING: coerce_string,
}


@dataclass(frozen=True)
class OptionSpec:
    """Declaration of a single option.

    Attributes:
        name: Stable option name, also used as the config key and CLI flag.
        option_type: Declared semantic type.
        default: Value used when no other source provides one.
        help: One-line description shown by the CLI.
    """

    name: str
    option_type: OptionType
    default: OptionValue
    help: str = ""

    @property
    def flag(self) -> str:
        """Return the command-line flag for this option."""
        return f"--{self.name}"

    @property
    def param_name(self) -> str:
        """Return the Python identifier Click uses for this option."""
        return self.name.replace("-", "_")
