# topmark:header:start
#
#   project      : DiffStyle
#   file         : test_builtin_presets.py
#   file_relpath : tests/presets/test_builtin_presets.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Tests for the ``diff-highlight`` and ``diff-so-fancy`` builtin presets.

Each value function is evaluated against the catalog defaults, after the
base options it depends on have been written, the same way the resolver
evaluates them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from diffstyle.options.catalog import OPTION_SPECS, default_values
from diffstyle.options.snapshot import MutableOptionSnapshot
from diffstyle.presets.builtins import (
    DIFF_HIGHLIGHT,
    DIFF_SO_FANCY,
    make_builtin_presets,
)
from tests.conftest import make_source

if TYPE_CHECKING:
    from diffstyle.config.source import ConfigSource
    from diffstyle.options.types import OptionValue
    from diffstyle.presets.base import Preset


def evaluate(preset: Preset, config: ConfigSource | None = None) -> dict[str, OptionValue]:
    """Evaluate ``preset`` in catalog order and return the values it produced."""
    snapshot = MutableOptionSnapshot(default_values())
    produced: dict[str, OptionValue] = {}
    for spec in OPTION_SPECS:
        if spec.name in preset:
            value = preset[spec.name](snapshot, config)
            snapshot.set(spec.name, value)
            produced[spec.name] = value
    return produced


PRESETS: dict[str, Preset] = make_builtin_presets()

DIFF_HIGHLIGHT_OPTIONS: list[str] = [
    "minus-style",
    "minus-non-emph-style",
    "minus-emph-style",
    "zero-style",
    "plus-style",
    "plus-non-emph-style",
    "plus-emph-style",
]


def test_exactly_two_builtin_presets() -> None:
    """The registry source defines diff-highlight and diff-so-fancy only."""
    assert sorted(PRESETS) == [DIFF_HIGHLIGHT, DIFF_SO_FANCY]


def test_diff_highlight_defaults() -> None:
    """Without config, diff-highlight uses red/green and reverse-video emphasis."""
    assert evaluate(PRESETS[DIFF_HIGHLIGHT]) == {
        "minus-style": "red",
        "minus-non-emph-style": "red",
        "minus-emph-style": "red reverse",
        "zero-style": "normal",
        "plus-style": "green",
        "plus-non-emph-style": "green",
        "plus-emph-style": "green reverse",
    }


def test_diff_highlight_respects_config() -> None:
    """Git-style color settings win over every fallback they are declared for."""
    config = make_source(
        """
        [color.diff]
        old = "red bold"
        new = "green bold"

        [color.diff-highlight]
        oldNormal = "ul red bold"
        oldHighlight = "red bold 52"
        newNormal = "ul green bold"
        newHighlight = "green bold 22"
        """
    )

    assert evaluate(PRESETS[DIFF_HIGHLIGHT], config) == {
        "minus-style": "red bold",
        "minus-non-emph-style": "ul red bold",
        "minus-emph-style": "red bold 52",
        "zero-style": "normal",
        "plus-style": "green bold",
        "plus-non-emph-style": "ul green bold",
        "plus-emph-style": "green bold 22",
    }


def test_emph_style_derives_from_configured_base() -> None:
    """With only ``color.diff.old`` set, emphasis appends reverse to the configured base."""
    config = make_source(
        """
        [color.diff]
        old = "red bold"
        """
    )

    values = evaluate(PRESETS[DIFF_HIGHLIGHT], config)

    assert values["minus-style"] == "red bold"
    assert values["minus-non-emph-style"] == "red bold"
    assert values["minus-emph-style"] == "red bold reverse"
    assert values["plus-emph-style"] == "green reverse"


def test_diff_so_fancy_defaults() -> None:
    """diff-so-fancy is bold diff-highlight plus decoration settings."""
    assert evaluate(PRESETS[DIFF_SO_FANCY]) == {
        "minus-style": "bold red",
        "minus-non-emph-style": "bold red",
        "minus-emph-style": "bold red reverse",
        "zero-style": "normal",
        "plus-style": "bold green",
        "plus-non-emph-style": "bold green",
        "plus-emph-style": "bold green reverse",
        "commit-style": "bold yellow",
        "commit-decoration-style": "none",
        "file-style": "11",
        "file-decoration-style": "bold yellow ul ol",
        "hunk-header-style": "bold syntax",
        "hunk-header-decoration-style": "magenta box",
    }


def test_diff_so_fancy_respects_config() -> None:
    """Only options with a declared config key pick up git-style colors."""
    config = make_source(
        """
        [color.diff]
        meta = 11
        frag = "magenta bold"
        commit = "yellow bold"
        old = "red bold"
        new = "green bold"
        whitespace = "red reverse"
        """
    )

    values = evaluate(PRESETS[DIFF_SO_FANCY], config)

    assert values["file-style"] == "11"
    assert values["hunk-header-style"] == "magenta bold"
    assert values["minus-style"] == "red bold"
    assert values["plus-style"] == "green bold"
    # No config key declared for these: fallbacks stand
    assert values["commit-style"] == "bold yellow"
    assert values["commit-decoration-style"] == "none"
    assert values["file-decoration-style"] == "bold yellow ul ol"
    assert values["hunk-header-decoration-style"] == "magenta box"


@pytest.mark.parametrize("preset_name", [DIFF_HIGHLIGHT, DIFF_SO_FANCY])
def test_shared_options_have_same_config_keys(preset_name: str) -> None:
    """Both presets wire the diff-highlight options to the same config keys."""
    preset: Preset = PRESETS[preset_name]
    reference: Preset = PRESETS[DIFF_HIGHLIGHT]

    for option in DIFF_HIGHLIGHT_OPTIONS:
        assert preset[option].config_key == reference[option].config_key
    assert reference["zero-style"].config_key is None
