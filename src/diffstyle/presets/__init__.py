# topmark:header:start
#
#   project      : DiffStyle
#   file         : __init__.py
#   file_relpath : src/diffstyle/presets/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Builtin presets and the machinery to evaluate them.

This package exposes:

* [`diffstyle.presets.BUILTIN_PRESETS`][] – the process-wide registry of
  builtin presets (``diff-highlight``, ``diff-so-fancy``).
* [`diffstyle.presets.get_value_function`][] – type-gated access to a
  preset's value function for one option.
* [`diffstyle.presets.make_preset`][] – the declarative builder used to
  define presets.

```python
from diffstyle.options import OptionType
from diffstyle.presets import BUILTIN_PRESETS, get_value_function

preset = BUILTIN_PRESETS.lookup("diff-highlight")
fn = get_value_function(OptionType.STRING, "minus-style", preset)
```
"""

from __future__ import annotations

from .base import Preset, PresetEntry, PresetValue, ValueFunction, make_preset
from .builtins import DIFF_HIGHLIGHT, DIFF_SO_FANCY, make_builtin_presets
from .lookup import (
    StringPresetLookup,
    TypedPresetLookup,
    get_value_function,
    lookup_for,
    register_lookup,
)
from .registry import BUILTIN_PRESETS, BuiltinPresetRegistry, PresetMeta

__all__ = [
    "BUILTIN_PRESETS",
    "DIFF_HIGHLIGHT",
    "DIFF_SO_FANCY",
    "BuiltinPresetRegistry",
    "Preset",
    "PresetEntry",
    "PresetMeta",
    "PresetValue",
    "StringPresetLookup",
    "TypedPresetLookup",
    "ValueFunction",
    "get_value_function",
    "lookup_for",
    "make_builtin_presets",
    "make_preset",
    "register_lookup",
]
