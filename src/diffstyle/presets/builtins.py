# topmark:header:start
#
#   project      : DiffStyle
#   file         : builtins.py
#   file_relpath : src/diffstyle/presets/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Builtin preset definitions.

Exports:
    DIFF_HIGHLIGHT: Name of the preset emulating git's ``diff-highlight`` script.
    DIFF_SO_FANCY: Name of the preset emulating ``diff-so-fancy``.
    make_builtin_presets: Build ``preset name -> preset`` for both presets.

Notes:
    - Both presets honor the user's git-style color settings
      (``color.diff.*``, ``color.diff-highlight.*``) before falling back to
      their own values.
    - ``diff-so-fancy`` is the *bold* ``diff-highlight`` preset plus decoration
      settings; the emph = base + ``reverse`` wiring is declared once in
      [`diff_highlight_entries`][diffstyle.presets.builtins.diff_highlight_entries].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from diffstyle.config.keys import ConfigKeys
from diffstyle.presets.base import PresetEntry, constant, copy_of, make_preset, with_modifier

if TYPE_CHECKING:
    from diffstyle.presets.base import Preset

DIFF_HIGHLIGHT: Final[str] = "diff-highlight"
DIFF_SO_FANCY: Final[str] = "diff-so-fancy"

REVERSE: Final[str] = "reverse"


def diff_highlight_entries(*, bold: bool) -> list[PresetEntry]:
    """Return the ``diff-highlight`` option declarations.

    Args:
        bold (bool): If True, the base removed/added styles are ``bold red`` and
            ``bold green`` instead of ``red`` and ``green``.

    Returns:
        list[PresetEntry]: Seven entries; base options precede derived ones.
    """
    return [
        PresetEntry(
            "minus-style",
            ConfigKeys.COLOR_DIFF_OLD,
            constant("bold red" if bold else "red"),
        ),
        PresetEntry(
            "minus-non-emph-style",
            ConfigKeys.COLOR_DIFF_HIGHLIGHT_OLD_NORMAL,
            copy_of("minus-style"),
        ),
        PresetEntry(
            "minus-emph-style",
            ConfigKeys.COLOR_DIFF_HIGHLIGHT_OLD_HIGHLIGHT,
            with_modifier("minus-style", REVERSE),
        ),
        PresetEntry(
            "zero-style",
            None,
            constant("normal"),
        ),
        PresetEntry(
            "plus-style",
            ConfigKeys.COLOR_DIFF_NEW,
            constant("bold green" if bold else "green"),
        ),
        PresetEntry(
            "plus-non-emph-style",
            ConfigKeys.COLOR_DIFF_HIGHLIGHT_NEW_NORMAL,
            copy_of("plus-style"),
        ),
        PresetEntry(
            "plus-emph-style",
            ConfigKeys.COLOR_DIFF_HIGHLIGHT_NEW_HIGHLIGHT,
            with_modifier("plus-style", REVERSE),
        ),
    ]


DIFF_SO_FANCY_EXTRA_ENTRIES: Final[tuple[PresetEntry, ...]] = (
    PresetEntry("commit-style", None, constant("bold yellow")),
    PresetEntry("commit-decoration-style", None, constant("none")),
    PresetEntry("file-style", ConfigKeys.COLOR_DIFF_META, constant("11")),
    PresetEntry("file-decoration-style", None, constant("bold yellow ul ol")),
    PresetEntry("hunk-header-style", ConfigKeys.COLOR_DIFF_FRAG, constant("bold syntax")),
    PresetEntry("hunk-header-decoration-style", None, constant("magenta box")),
)


def make_diff_highlight_preset() -> Preset:
    """Return the ``diff-highlight`` preset (non-bold variant)."""
    return make_preset(diff_highlight_entries(bold=False))


def make_diff_so_fancy_preset() -> Preset:
    """Return the ``diff-so-fancy`` preset (bold ``diff-highlight`` plus decorations)."""
    return make_preset([*diff_highlight_entries(bold=True), *DIFF_SO_FANCY_EXTRA_ENTRIES])


def make_builtin_presets() -> dict[str, Preset]:
    """Construct ``preset name -> preset`` for every builtin preset."""
    return {
        DIFF_HIGHLIGHT: make_diff_highlight_preset(),
        DIFF_SO_FANCY: make_diff_so_fancy_preset(),
    }
