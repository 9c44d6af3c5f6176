# topmark:header:start
#
#   project      : DiffStyle
#   file         : lookup.py
#   file_relpath : src/diffstyle/presets/lookup.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Type-gated access to builtin preset value functions.

Builtin presets only supply values for string-typed options today. Rather
than branching on the option type at every call site, each
[`OptionType`][diffstyle.options.types.OptionType] is bound to one
[`TypedPresetLookup`][diffstyle.presets.lookup.TypedPresetLookup]:

- the base class answers ``None`` ("no builtin value, fall through to other
  sources") for every option;
- [`StringPresetLookup`][diffstyle.presets.lookup.StringPresetLookup] performs
  the real lookup into the preset.

Making another type sourceable from builtin presets only takes a new lookup
subclass and one `register_lookup()` call; neither the registry nor the
preset definitions change.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from diffstyle.config.logging import get_logger
from diffstyle.options.types import OptionType

if TYPE_CHECKING:
    from diffstyle.config.logging import DiffStyleLogger
    from diffstyle.presets.base import Preset, ValueFunction

logger: DiffStyleLogger = get_logger(__name__)

T = TypeVar("T")


class TypedPresetLookup(Generic[T]):
    """Lookup of builtin preset value functions for options of one type.

    The default implementation never finds anything.
    """

    def get_value_function(
        self,
        option_name: str,
        preset: Preset,
    ) -> ValueFunction[T] | None:
        """Return the value function for ``option_name``, if this type is sourceable.

        Args:
            option_name (str): Option to look up.
            preset (Preset): Builtin preset to search.

        Returns:
            ValueFunction[T] | None: Always ``None`` for the base class.
        """
        return None


class StringPresetLookup(TypedPresetLookup[str]):
    """Lookup for string-typed options: the only type builtin presets supply."""

    def get_value_function(
        self,
        option_name: str,
        preset: Preset,
    ) -> ValueFunction[str] | None:
        """Return the preset's value function for ``option_name``, if defined."""
        return preset.get(option_name)


_UNSOURCEABLE: TypedPresetLookup[Any] = TypedPresetLookup()

_LOOKUPS: dict[OptionType, TypedPresetLookup[Any]] = {
    option_type: _UNSOURCEABLE for option_type in OptionType
}


def register_lookup(option_type: OptionType, lookup: TypedPresetLookup[Any]) -> None:
    """Bind ``lookup`` to ``option_type``, replacing the current binding.

    Args:
        option_type (OptionType): Declared option type.
        lookup (TypedPresetLookup[Any]): Lookup answering for that type.
    """
    logger.debug("Binding %s to %s", option_type.value, type(lookup).__name__)
    _LOOKUPS[option_type] = lookup


def lookup_for(option_type: OptionType) -> TypedPresetLookup[Any]:
    """Return the lookup bound to ``option_type``."""
    return _LOOKUPS[option_type]


def get_value_function(
    option_type: OptionType,
    option_name: str,
    preset: Preset,
) -> ValueFunction[Any] | None:
    """Return the builtin value function for an option of a given type.

    Args:
        option_type (OptionType): Declared type of the option.
        option_name (str): Option name.
        preset (Preset): Builtin preset to search.

    Returns:
        ValueFunction[Any] | None: The value function, or ``None`` when the type
            is not sourceable from builtin presets or the preset does not define
            the option.
    """
    return lookup_for(option_type).get_value_function(option_name, preset)


register_lookup(OptionType.STRING, StringPresetLookup())
