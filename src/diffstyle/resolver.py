# topmark:header:start
#
#   project      : DiffStyle
#   file         : resolver.py
#   file_relpath : src/diffstyle/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Layered resolution of option values.

Resolution order (lowest → highest precedence):
  1. **Catalog defaults** ([`OPTION_SPECS`][diffstyle.options.catalog.OPTION_SPECS]).
  2. **Main config section**: ``[diffstyle]`` entries named after options.
  3. **Presets**, in the order requested. A later preset overwrites options set
     by an earlier one. For each preset and option:
       - a value from the config-defined preset table ``[diffstyle.<preset>]``
         wins;
       - otherwise the builtin preset's value function is used, when the
         option's type is sourceable from builtin presets.
     A name that is neither a builtin preset nor a config table is skipped.
  4. **Explicit command-line values**. They seed the snapshot before presets
     run (so preset fallbacks can read them) and are never overwritten.

Within each preset, options are evaluated in catalog order, so a derived
option's fallback (``minus-emph-style``) sees the base value
(``minus-style``) written by the same preset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diffstyle.config.keys import Sections, main_key, preset_key, preset_table_key
from diffstyle.config.logging import get_logger
from diffstyle.options.catalog import OPTION_SPECS, default_values
from diffstyle.options.snapshot import MutableOptionSnapshot, OptionSnapshot
from diffstyle.presets.lookup import get_value_function
from diffstyle.presets.registry import BUILTIN_PRESETS

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from diffstyle.config.logging import DiffStyleLogger
    from diffstyle.config.source import ConfigSource
    from diffstyle.options.types import OptionSpec, OptionValue
    from diffstyle.presets.base import Preset, ValueFunction
    from diffstyle.presets.registry import BuiltinPresetRegistry

logger: DiffStyleLogger = get_logger(__name__)


def parse_preset_names(text: str | None) -> list[str]:
    """Split a whitespace-separated preset list (``"decorations diff-so-fancy"``)."""
    if not text:
        return []
    return text.split()


def config_preset_names(config: ConfigSource | None) -> list[str]:
    """Return the preset list declared as ``presets`` in the main config section."""
    if config is None:
        return []
    return parse_preset_names(config.get_string(main_key(Sections.KEY_PRESETS)))


def _read_config_option(config: ConfigSource, key: str, spec: OptionSpec) -> OptionValue:
    raw: object | None = config.get_value(key)
    if raw is None:
        return None
    value: OptionValue = spec.option_type.coerce(raw)
    if value is None:
        logger.warning(
            "Ignoring config value %s = %r: not a valid %s", key, raw, spec.option_type.value
        )
    return value


def apply_main_section(
    snapshot: MutableOptionSnapshot,
    config: ConfigSource,
    *,
    specs: Sequence[OptionSpec] = OPTION_SPECS,
) -> None:
    """Overlay option values from the main config section onto ``snapshot``."""
    for spec in specs:
        value: OptionValue = _read_config_option(config, main_key(spec.name), spec)
        if value is not None:
            logger.trace("%s: main section -> %r", spec.name, value)
            snapshot.set(spec.name, value)


def apply_preset(
    snapshot: MutableOptionSnapshot,
    preset_name: str,
    *,
    config: ConfigSource | None,
    registry: BuiltinPresetRegistry = BUILTIN_PRESETS,
    explicit: frozenset[str] = frozenset(),
    specs: Sequence[OptionSpec] = OPTION_SPECS,
) -> bool:
    """Apply one preset to ``snapshot``, overwriting earlier values.

    Args:
        snapshot (MutableOptionSnapshot): Draft written in place.
        preset_name (str): Builtin preset name or config-defined preset table.
        config (ConfigSource | None): External config source, if any.
        registry (BuiltinPresetRegistry): Builtin presets to consult.
        explicit (frozenset[str]): Options set on the command line; left untouched.
        specs (Sequence[OptionSpec]): Options to resolve, in resolution order.

    Returns:
        bool: True if the preset is known (builtin or defined in config),
            False if it was skipped.
    """
    builtin: Preset | None = registry.lookup(preset_name)
    in_config: bool = config is not None and config.has_table(preset_table_key(preset_name))
    if builtin is None and not in_config:
        logger.debug("Skipping unknown preset: %s", preset_name)
        return False

    logger.debug(
        "Applying preset %s (builtin=%s, config=%s)", preset_name, builtin is not None, in_config
    )
    for spec in specs:
        if spec.name in explicit:
            continue
        value: OptionValue = None
        if in_config and config is not None:
            value = _read_config_option(config, preset_key(preset_name, spec.name), spec)
        if value is None and builtin is not None:
            fn: ValueFunction[OptionValue] | None = get_value_function(
                spec.option_type, spec.name, builtin
            )
            if fn is None:
                continue
            value = fn(snapshot, config)
        if value is not None:
            logger.trace("%s: preset %s -> %r", spec.name, preset_name, value)
            snapshot.set(spec.name, value)
    return True


def resolve_options(
    *,
    cli_values: Mapping[str, OptionValue] | None = None,
    preset_names: Sequence[str] | None = None,
    config: ConfigSource | None = None,
    registry: BuiltinPresetRegistry = BUILTIN_PRESETS,
    specs: Sequence[OptionSpec] = OPTION_SPECS,
) -> OptionSnapshot:
    """Resolve every option from defaults, config, presets and explicit values.

    Args:
        cli_values (Mapping[str, OptionValue] | None): Options given explicitly
            on the command line (already coerced to their declared types).
        preset_names (Sequence[str] | None): Presets to apply, in order. When
            ``None``, the ``presets`` entry of the main config section is used.
        config (ConfigSource | None): External config source, if any.
        registry (BuiltinPresetRegistry): Builtin presets to consult.
        specs (Sequence[OptionSpec]): Options to resolve, in resolution order.

    Returns:
        OptionSnapshot: The resolved values of every option in ``specs``.
    """
    explicit_values: dict[str, OptionValue] = dict(cli_values or {})

    # (1) defaults
    snapshot = MutableOptionSnapshot(default_values(specs))

    # (2) main config section
    if config is not None:
        apply_main_section(snapshot, config, specs=specs)

    # (4) explicit values seed the snapshot so preset fallbacks can read them
    snapshot.update(explicit_values)

    # (3) presets, later ones win
    names: Sequence[str] = (
        preset_names if preset_names is not None else config_preset_names(config)
    )
    logger.debug("Preset order: %s", list(names))
    explicit: frozenset[str] = frozenset(explicit_values)
    for name in names:
        apply_preset(
            snapshot,
            name,
            config=config,
            registry=registry,
            explicit=explicit,
            specs=specs,
        )

    return snapshot.freeze()
