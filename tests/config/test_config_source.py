# topmark:header:start
#
#   project      : DiffStyle
#   file         : test_config_source.py
#   file_relpath : tests/config/test_config_source.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Tests for dotted-key lookups in TOML config sources."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

import pytest
from tomlkit.exceptions import ParseError

from diffstyle.config.loaders import discover_user_config_file, load_toml_dict
from diffstyle.config.source import TomlConfigSource
from tests.conftest import make_source, write_config

if TYPE_CHECKING:
    from pathlib import Path


GIT_COLORS = """
[color.diff]
old = "red bold"
new = "green bold"
meta = 11

[color.diff-highlight]
oldNormal = "ul red bold"
"""


def test_get_string_walks_nested_tables() -> None:
    """Section and subsection segments map onto nested TOML tables."""
    source: TomlConfigSource = make_source(GIT_COLORS)

    assert source.get_string("color.diff.old") == "red bold"
    assert source.get_string("color.diff-highlight.oldNormal") == "ul red bold"


def test_get_string_coerces_scalars() -> None:
    """A numeric TOML value such as ``meta = 11`` reads back as a string."""
    source: TomlConfigSource = make_source(GIT_COLORS)

    assert source.get_value("color.diff.meta") == 11
    assert source.get_string("color.diff.meta") == "11"


@pytest.mark.parametrize(
    "key",
    [
        "color.diff.frag",
        "color.diff-highlight.newNormal",
        "missing.section.key",
        "color.diff.old.deeper",
    ],
)
def test_absent_keys_return_none(key: str) -> None:
    """Unset keys are a normal outcome, not an error."""
    assert make_source(GIT_COLORS).get_string(key) is None


def test_table_is_not_a_value() -> None:
    """A key naming a section has no scalar value, but is a table."""
    source: TomlConfigSource = make_source(GIT_COLORS)

    assert source.get_value("color.diff") is None
    assert source.has_table("color.diff")
    assert not source.has_table("color.diff.old")
    assert not source.has_table("color.nope")


def test_from_mapping_expands_dotted_keys() -> None:
    """Flat dotted keys and nested dicts describe the same document."""
    flat = TomlConfigSource.from_mapping(
        {"color.diff.old": "red", "color.diff.new": "green", "diffstyle.tabs": 8}
    )
    nested = TomlConfigSource.from_mapping({"color": {"diff": {"old": "red", "new": "green"}}})

    assert flat.get_string("color.diff.old") == nested.get_string("color.diff.old") == "red"
    assert flat.get_string("color.diff.new") == "green"
    assert flat.get_value("diffstyle.tabs") == 8


def test_from_mapping_leaves_argument_untouched() -> None:
    """Merging dotted keys into nested tables never writes to the caller's dicts."""
    data: dict[str, object] = {"color": {"diff": {"old": "red"}}, "color.diff.new": "green"}
    before: dict[str, object] = copy.deepcopy(data)

    source = TomlConfigSource.from_mapping(data)

    assert data == before
    assert source.get_string("color.diff.old") == "red"
    assert source.get_string("color.diff.new") == "green"


def test_source_is_detached_from_its_input() -> None:
    """Later edits to the input mapping do not show through the source."""
    diff: dict[str, object] = {"old": "red"}
    source = TomlConfigSource({"color": {"diff": diff}})

    diff["old"] = "blue"
    diff["new"] = "green"

    assert source.get_string("color.diff.old") == "red"
    assert source.get_string("color.diff.new") is None


@pytest.mark.parametrize(
    "data",
    [
        {"diffstyle.presets": "a", "diffstyle.presets.x": "b"},
        {"diffstyle.presets.x": "b", "diffstyle.presets": "a"},
        {"diffstyle": {"presets": "a"}, "diffstyle.presets": {"x": "b"}},
    ],
)
def test_from_mapping_rejects_value_table_conflicts(data: dict[str, object]) -> None:
    """A key cannot name both a value and a table."""
    with pytest.raises(ValueError, match="diffstyle.presets"):
        TomlConfigSource.from_mapping(data)


def test_from_text_rejects_invalid_toml() -> None:
    """Parsing TOML text directly surfaces syntax errors."""
    with pytest.raises(ParseError):
        TomlConfigSource.from_text("[color.diff\nold = ")


def test_from_path_reads_file(tmp_path: Path) -> None:
    """Sources loaded from disk remember their path."""
    path: Path = write_config(tmp_path / "diffstyle.toml", GIT_COLORS)

    source = TomlConfigSource.from_path(path)

    assert source.path == path
    assert source.get_string("color.diff.new") == "green bold"


def test_unreadable_files_yield_empty_tables(tmp_path: Path) -> None:
    """Missing or malformed files are logged and treated as empty."""
    broken: Path = write_config(tmp_path / "broken.toml", "[color.diff\nold = ")

    assert load_toml_dict(tmp_path / "missing.toml") == {}
    assert load_toml_dict(broken) == {}
    assert TomlConfigSource.from_path(broken).get_string("color.diff.old") is None


def test_discover_user_config_prefers_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The XDG location wins over the legacy dotfile."""
    home: Path = tmp_path / "user"
    xdg: Path = tmp_path / "xdg"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))

    assert discover_user_config_file() is None

    legacy: Path = write_config(home / ".diffstyle.toml", "[diffstyle]\n")
    assert discover_user_config_file() == legacy

    preferred: Path = write_config(xdg / "diffstyle" / "diffstyle.toml", "[diffstyle]\n")
    assert discover_user_config_file() == preferred
