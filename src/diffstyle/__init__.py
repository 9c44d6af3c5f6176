# topmark:header:start
#
#   project      : DiffStyle
#   file         : __init__.py
#   file_relpath : src/diffstyle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""DiffStyle package.

DiffStyle resolves the options of a diff pager (styles, decorations and a few
layout settings) from layered sources: built-in defaults, a TOML config file,
named presets and explicit command-line values. It ships two builtin presets
(``diff-highlight`` and ``diff-so-fancy``) and exposes both a CLI and a small
typed API.
"""

from __future__ import annotations
