# topmark:header:start
#
#   project      : DiffStyle
#   file         : keys.py
#   file_relpath : src/diffstyle/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Dotted config keys and section names.

Keys follow the git config layout ``<section>.<subsection?>.<name>``. In a
DiffStyle TOML file, a section with a subsection becomes a nested table:
``color.diff-highlight.oldNormal`` lives under ``[color.diff-highlight]``.
"""

from __future__ import annotations

from typing import Final

KEY_SEPARATOR: Final[str] = "."


class ConfigKeys:
    """Well-known config keys consulted by the builtin presets."""

    # [color.diff]
    COLOR_DIFF_OLD: Final[str] = "color.diff.old"
    COLOR_DIFF_NEW: Final[str] = "color.diff.new"
    COLOR_DIFF_META: Final[str] = "color.diff.meta"
    COLOR_DIFF_FRAG: Final[str] = "color.diff.frag"

    # [color.diff-highlight]
    COLOR_DIFF_HIGHLIGHT_OLD_NORMAL: Final[str] = "color.diff-highlight.oldNormal"
    COLOR_DIFF_HIGHLIGHT_OLD_HIGHLIGHT: Final[str] = "color.diff-highlight.oldHighlight"
    COLOR_DIFF_HIGHLIGHT_NEW_NORMAL: Final[str] = "color.diff-highlight.newNormal"
    COLOR_DIFF_HIGHLIGHT_NEW_HIGHLIGHT: Final[str] = "color.diff-highlight.newHighlight"


class Sections:
    """Section names owned by DiffStyle itself."""

    # Main section: option values and the default preset list
    MAIN: Final[str] = "diffstyle"
    # Key inside the main section holding a whitespace-separated preset list
    KEY_PRESETS: Final[str] = "presets"


def join_key(*parts: str) -> str:
    """Join key segments into a dotted config key.

    Args:
        *parts (str): Key segments, e.g. ``("diffstyle", "my-preset", "minus-style")``.

    Returns:
        str: The dotted key.
    """
    return KEY_SEPARATOR.join(parts)


def split_key(key: str) -> list[str]:
    """Split a dotted config key into its segments."""
    return key.split(KEY_SEPARATOR)


def main_key(option_name: str) -> str:
    """Return the main-section key for ``option_name``."""
    return join_key(Sections.MAIN, option_name)


def preset_table_key(preset_name: str) -> str:
    """Return the key of the config table defining preset ``preset_name``."""
    return join_key(Sections.MAIN, preset_name)


def preset_key(preset_name: str, option_name: str) -> str:
    """Return the key of ``option_name`` inside a config-defined preset table."""
    return join_key(Sections.MAIN, preset_name, option_name)
