# topmark:header:start
#
#   project      : DiffStyle
#   file         : registry.py
#   file_relpath : src/diffstyle/presets/registry.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Registry of builtin presets.

The registry is built once, at import time, and is read-only afterwards:
there are no mutation hooks and no locking, because nothing changes after
construction.

Typical usage:
    ```python
    from diffstyle.presets.registry import BUILTIN_PRESETS

    preset = BUILTIN_PRESETS.lookup("diff-so-fancy")
    if preset is not None:
        value = preset["file-style"](snapshot, config)
    ```

Unknown preset names are not errors: `lookup()` returns ``None`` and the
caller skips the name.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from diffstyle.presets.builtins import make_builtin_presets

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from diffstyle.presets.base import Preset


@dataclass(frozen=True)
class PresetMeta:
    """Stable, serializable metadata about a builtin preset.

    Attributes:
        name: Preset name.
        options: Option names the preset defines (sorted).
        config_keys: ``option name -> config key`` for options that consult
            the config source first.
    """

    name: str
    options: tuple[str, ...]
    config_keys: Mapping[str, str]


class BuiltinPresetRegistry:
    """Immutable ``preset name -> preset`` mapping."""

    _presets: Mapping[str, Preset]

    def __init__(self, presets: Mapping[str, Preset]) -> None:
        self._presets = MappingProxyType(dict(presets))

    @classmethod
    def from_builtins(cls) -> BuiltinPresetRegistry:
        """Build the registry holding the builtin presets."""
        return cls(make_builtin_presets())

    def lookup(self, preset_name: str) -> Preset | None:
        """Return a preset by name.

        Args:
            preset_name (str): Case-sensitive preset name.

        Returns:
            Preset | None: The preset if registered, else None.
        """
        return self._presets.get(preset_name)

    def names(self) -> tuple[str, ...]:
        """Return all registered preset names (sorted)."""
        return tuple(sorted(self._presets))

    def as_mapping(self) -> Mapping[str, Preset]:
        """Return a read-only ``name -> preset`` mapping.

        Notes:
            The returned mapping is a `MappingProxyType` and must not be mutated.
        """
        return self._presets

    def iter_meta(self) -> Iterator[PresetMeta]:
        """Iterate over metadata for registered presets, sorted by name.

        Yields:
            PresetMeta: Serializable metadata about each preset.
        """
        for name in self.names():
            preset: Preset = self._presets[name]
            yield PresetMeta(
                name=name,
                options=tuple(sorted(preset)),
                config_keys=MappingProxyType(
                    {
                        option: value.config_key
                        for option, value in sorted(preset.items())
                        if value.config_key is not None
                    }
                ),
            )

    def __contains__(self, preset_name: object) -> bool:
        return preset_name in self._presets

    def __len__(self) -> int:
        return len(self._presets)


BUILTIN_PRESETS: BuiltinPresetRegistry = BuiltinPresetRegistry.from_builtins()
