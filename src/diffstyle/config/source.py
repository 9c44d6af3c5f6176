# topmark:header:start
#
#   project      : DiffStyle
#   file         : source.py
#   file_relpath : src/diffstyle/config/source.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""External key-value config sources queried by dotted key.

A config source answers ``get_string("color.diff.old")`` with the configured
value, or ``None`` when the key is unset. Absence is a normal outcome, never an
error: callers fall back to their own defaults.

[`TomlConfigSource`][diffstyle.config.source.TomlConfigSource] is the concrete
implementation used by the CLI. It walks nested TOML tables, so the TOML
document

```toml
[color.diff]
old = "red bold"
```

answers ``get_string("color.diff.old") == "red bold"``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

from diffstyle.config.getters import coerce_string
from diffstyle.config.keys import split_key
from diffstyle.config.loaders import load_toml_dict, parse_toml_text
from diffstyle.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from diffstyle.config.logging import DiffStyleLogger
    from diffstyle.config.loaders import TomlTable

logger: DiffStyleLogger = get_logger(__name__)


class ConfigSource(Protocol):
    """Read-only key-value store addressed by dotted keys."""

    def get_value(self, key: str) -> Any | None:
        """Return the raw value stored under ``key``, or ``None`` if unset."""
        ...

    def get_string(self, key: str) -> str | None:
        """Return the value under ``key`` as a string, or ``None`` if unset."""
        ...

    def has_table(self, key: str) -> bool:
        """Return True if ``key`` names a (sub)section."""
        ...


class TomlConfigSource:
    """Config source backed by a parsed TOML document.

    Attributes:
        path (Path | None): File the data was loaded from, if any.
    """

    _data: Mapping[str, Any]
    path: Path | None

    def __init__(self, data: Mapping[str, Any], *, path: Path | None = None) -> None:
        self._data = MappingProxyType(_copy_tables(data))
        self.path = path

    @classmethod
    def from_path(cls, path: Path) -> TomlConfigSource:
        """Load a source from a TOML file (unreadable files yield an empty source)."""
        logger.info("Loading config: %s", path)
        return cls(load_toml_dict(path), path=path)

    @classmethod
    def from_text(cls, text: str) -> TomlConfigSource:
        """Build a source from TOML text.

        Raises:
            tomlkit.exceptions.ParseError: If ``text`` is not valid TOML.
        """
        return cls(parse_toml_text(text))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TomlConfigSource:
        """Build a source from a nested mapping or from flat dotted keys.

        Flat keys such as ``{"color.diff.old": "red"}`` are expanded into nested
        tables, so tests and API callers can state config values the way they
        are looked up. ``data`` itself is never modified.

        Raises:
            ValueError: If a key is used both as a value and as a table
                (``{"diffstyle.presets": "a", "diffstyle.presets.x": "b"}``).
        """
        nested: TomlTable = {}
        for key, value in data.items():
            _merge_into(nested, split_key(key), value, key)
        return cls(nested)

    def _lookup(self, key: str) -> Any | None:
        node: Any = self._data
        for part in split_key(key):
            if not isinstance(node, Mapping):
                return None
            node = node.get(part)
            if node is None:
                return None
        return node

    def get_value(self, key: str) -> Any | None:
        """Return the raw scalar value stored under ``key``.

        Tables are not values: a key naming a section returns ``None``.

        Args:
            key (str): Dotted key, e.g. ``"color.diff-highlight.oldNormal"``.

        Returns:
            Any | None: The stored value, or ``None`` if unset.
        """
        value: Any | None = self._lookup(key)
        if isinstance(value, Mapping):
            return None
        return value

    def get_string(self, key: str) -> str | None:
        """Return the value under ``key`` coerced to ``str``.

        Args:
            key (str): Dotted key.

        Returns:
            str | None: The string value, or ``None`` when unset or not coercible.
        """
        value: str | None = coerce_string(self.get_value(key))
        logger.trace("Config %s -> %r", key, value)
        return value

    def has_table(self, key: str) -> bool:
        """Return True if ``key`` names a table in the document."""
        return isinstance(self._lookup(key), Mapping)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r})"


def _copy_tables(data: Mapping[str, Any]) -> TomlTable:
    """Return ``data`` with every nested table copied into a fresh ``dict``."""
    return {
        key: _copy_tables(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }


def _merge_into(table: TomlTable, parts: list[str], value: Any, key: str) -> None:
    """Store ``value`` under the dotted path ``parts`` of ``table``, merging tables.

    Args:
        table (TomlTable): Table built by `TomlConfigSource.from_mapping`; modified in place.
        parts (list[str]): Key segments below ``table``.
        value (Any): Scalar or (nested) mapping to store.
        key (str): Full dotted key, for error messages.

    Raises:
        ValueError: If a segment already holds a scalar where a table is needed,
            or a table where a scalar is given.
    """
    node: TomlTable = table
    for part in parts[:-1]:
        child: Any = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise ValueError(f"Config key {key!r}: {part!r} is a value, not a table")
        node = child

    last: str = parts[-1]
    existing: Any = node.get(last)
    if isinstance(value, Mapping):
        if existing is None:
            node[last] = _copy_tables(value)
            return
        if not isinstance(existing, dict):
            raise ValueError(f"Config key {key!r} is both a value and a table")
        for sub_key, sub_value in value.items():
            _merge_into(existing, [sub_key], sub_value, f"{key}.{sub_key}")
        return
    if isinstance(existing, dict):
        raise ValueError(f"Config key {key!r} is both a table and a value")
    node[last] = value
