# topmark:header:start
#
#   project      : DiffStyle
#   file         : __init__.py
#   file_relpath : src/diffstyle/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Configuration layer: logging, config keys, TOML loading and config sources.

Most callers only need:

```python
from diffstyle.config import TomlConfigSource

source = TomlConfigSource.from_path(Path("diffstyle.toml"))
source.get_string("color.diff.old")
```
"""

from __future__ import annotations

from .keys import ConfigKeys, Sections
from .loaders import discover_user_config_file, load_toml_dict
from .source import ConfigSource, TomlConfigSource

__all__ = [
    "ConfigKeys",
    "ConfigSource",
    "Sections",
    "TomlConfigSource",
    "discover_user_config_file",
    "load_toml_dict",
]
