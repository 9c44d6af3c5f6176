# topmark:header:start
#
#   project      : DiffStyle
#   file         : base.py
#   file_relpath : src/diffstyle/presets/base.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Value functions and the declarative preset builder.

A *preset* is a named set of ``option -> value function`` pairs. A value
function computes one option's value from the snapshot of options resolved so
far and an optional external config source:

```python
value = preset["minus-emph-style"](snapshot, config)
```

Builtin presets are declared as plain data, a sequence of
[`PresetEntry`][diffstyle.presets.base.PresetEntry] triples
``(option_name, config_key, fallback)``, and turned into a preset by
[`make_preset`][diffstyle.presets.base.make_preset]. Each resulting
[`PresetValue`][diffstyle.presets.base.PresetValue] honors the same contract:

1. If a config source is supplied **and** a config key is declared, the source
   is queried for that key as a string.
2. A present config value is returned as is; the fallback is **not** evaluated.
3. Otherwise the fallback is evaluated against the snapshot.

Fallbacks receive the snapshot as an explicit argument instead of capturing
other options' values, so a derived option (``minus-emph-style``) reads its
base option (``minus-style``) at call time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Generic, NamedTuple, Optional, Protocol, TypeVar

from diffstyle.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diffstyle.config.logging import DiffStyleLogger
    from diffstyle.config.source import ConfigSource
    from diffstyle.options.snapshot import BaseOptionSnapshot

logger: DiffStyleLogger = get_logger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Fallback = Callable[["BaseOptionSnapshot"], T]


class ValueFunction(Protocol[T_co]):
    """Callable computing one option's value."""

    def __call__(
        self,
        snapshot: BaseOptionSnapshot,
        config: ConfigSource | None = None,
    ) -> T_co:
        """Return the option value for ``snapshot`` and ``config``."""
        ...


@dataclass(frozen=True)
class PresetValue(Generic[T]):
    """Config-or-fallback value function for a single option.

    Attributes:
        option_name: Option this function produces a value for.
        config_key: Dotted config key consulted first, or ``None`` for a pure
            fallback that ignores the config source.
        fallback: Callable evaluated against the snapshot when the config source
            has no value.
    """

    option_name: str
    config_key: str | None
    fallback: Fallback[T]

    def __call__(
        self,
        snapshot: BaseOptionSnapshot,
        config: ConfigSource | None = None,
    ) -> T | str:
        if config is not None and self.config_key is not None:
            configured: str | None = config.get_string(self.config_key)
            if configured is not None:
                logger.trace(
                    "%s: using config %s = %r", self.option_name, self.config_key, configured
                )
                return configured
        value: T = self.fallback(snapshot)
        logger.trace("%s: using fallback value %r", self.option_name, value)
        return value


class PresetEntry(NamedTuple):
    """Declarative ``(option_name, config_key, fallback)`` triple."""

    option_name: str
    config_key: Optional[str]
    fallback: Fallback[str]


# Currently all builtin preset values are strings.
Preset = Mapping[str, PresetValue[str]]


def make_preset(entries: Iterable[PresetEntry]) -> Preset:
    """Build a read-only preset from declarative entries.

    Entries are applied in order with *define or overwrite* semantics: when two
    entries name the same option, the later one wins. This keeps extending a
    base preset (as ``diff-so-fancy`` extends ``diff-highlight``) safe.

    Args:
        entries (Iterable[PresetEntry]): Option declarations.

    Returns:
        Preset: Read-only ``option name -> value function`` mapping.
    """
    values: dict[str, PresetValue[str]] = {}
    for entry in entries:
        if entry.option_name in values:
            logger.debug("Preset entry for %s overrides an earlier entry", entry.option_name)
        values[entry.option_name] = PresetValue(
            option_name=entry.option_name,
            config_key=entry.config_key,
            fallback=entry.fallback,
        )
    return MappingProxyType(values)


def constant(value: T) -> Fallback[T]:
    """Return a fallback that ignores the snapshot and yields ``value``."""

    def _fallback(_snapshot: BaseOptionSnapshot) -> T:
        return value

    return _fallback


def copy_of(option_name: str) -> Fallback[str]:
    """Return a fallback that yields the current value of ``option_name``."""

    def _fallback(snapshot: BaseOptionSnapshot) -> str:
        return snapshot.get_str(option_name)

    return _fallback


def with_modifier(option_name: str, modifier: str) -> Fallback[str]:
    """Return a fallback that appends ``modifier`` to the value of ``option_name``."""

    def _fallback(snapshot: BaseOptionSnapshot) -> str:
        return f"{snapshot.get_str(option_name)} {modifier}"

    return _fallback
