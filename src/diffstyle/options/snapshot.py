# topmark:header:start
#
#   project      : DiffStyle
#   file         : snapshot.py
#   file_relpath : src/diffstyle/options/snapshot.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Snapshots of resolved option values.

A snapshot maps option names to the values resolved so far. Preset value
functions receive it read-only and may read *other* options from it.

Two flavors follow the usual immutable/mutable split:

- [`MutableOptionSnapshot`][diffstyle.options.snapshot.MutableOptionSnapshot]
  is the draft the resolver writes into while it layers sources.
- [`OptionSnapshot`][diffstyle.options.snapshot.OptionSnapshot] is the frozen
  result. Call `thaw()` to obtain an editable copy.

Reading an option that has not been resolved raises
[`UnresolvedOptionError`][diffstyle.options.snapshot.UnresolvedOptionError]:
resolution order must guarantee that base options resolve before the options
whose fallbacks read them.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from diffstyle.options.types import OptionValue


class UnresolvedOptionError(KeyError):
    """Raised when reading an option that has no value in the snapshot yet."""

    def __init__(self, option_name: str) -> None:
        super().__init__(option_name)
        self.option_name = option_name

    def __str__(self) -> str:
        return f"Option '{self.option_name}' has not been resolved yet"


class BaseOptionSnapshot(Mapping[str, "OptionValue"]):
    """Read-only view of option values shared by both snapshot flavors."""

    _values: Mapping[str, OptionValue]

    def __getitem__(self, name: str) -> OptionValue:
        try:
            return self._values[name]
        except KeyError:
            raise UnresolvedOptionError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get_str(self, name: str) -> str:
        """Return the value of a string-typed option.

        Args:
            name (str): Option name.

        Returns:
            str: The resolved value.

        Raises:
            UnresolvedOptionError: If ``name`` has not been resolved.
            TypeError: If the resolved value is not a string.
        """
        value: OptionValue = self[name]
        if not isinstance(value, str):
            raise TypeError(f"Option '{name}' holds {type(value).__name__}, expected str")
        return value

    def as_dict(self) -> dict[str, OptionValue]:
        """Return a shallow, mutable copy of the values."""
        return dict(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._values)!r})"


class OptionSnapshot(BaseOptionSnapshot):
    """Immutable snapshot of resolved option values."""

    def __init__(self, values: Mapping[str, OptionValue] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    def thaw(self) -> MutableOptionSnapshot:
        """Return an editable copy of this snapshot."""
        return MutableOptionSnapshot(self._values)


class MutableOptionSnapshot(BaseOptionSnapshot):
    """Draft snapshot written by the resolver."""

    _values: dict[str, OptionValue]

    def __init__(self, values: Mapping[str, OptionValue] | None = None) -> None:
        self._values = dict(values or {})

    def set(self, name: str, value: OptionValue) -> None:
        """Store ``value`` for ``name``, overwriting any earlier value."""
        self._values[name] = value

    def update(self, values: Mapping[str, OptionValue]) -> None:
        """Store several values at once, overwriting earlier ones."""
        self._values.update(values)

    def freeze(self) -> OptionSnapshot:
        """Return an immutable copy of this draft."""
        return OptionSnapshot(self._values)
