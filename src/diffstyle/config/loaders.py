# topmark:header:start
#
#   project      : DiffStyle
#   file         : loaders.py
#   file_relpath : src/diffstyle/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading DiffStyle configuration from an
explicit path or from the user-scoped config file. Parsing is done with
`tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from diffstyle.config.logging import get_logger
from diffstyle.constants import (
    LEGACY_USER_CONFIG_FILE_NAME,
    USER_CONFIG_DIR_NAME,
    USER_CONFIG_FILE_NAME,
)

if TYPE_CHECKING:
    from diffstyle.config.logging import DiffStyleLogger

TomlTable = dict[str, Any]

logger: DiffStyleLogger = get_logger(__name__)


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.

    Returns:
        TomlTable: The parsed content.

    Raises:
        tomlkit.exceptions.ParseError: If ``text`` is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``diffstyle.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        return parse_toml_text(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def discover_user_config_file() -> Path | None:
    """Return a user-scoped config path if it exists.

    Looks under XDG config (``$XDG_CONFIG_HOME/diffstyle/diffstyle.toml``) and a legacy
    fallback (``~/.diffstyle.toml``). The first existing path is returned.
    """
    xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
    base: Path = Path(xdg) if xdg else Path.home() / ".config"
    xdg_path: Path = base / USER_CONFIG_DIR_NAME / USER_CONFIG_FILE_NAME
    legacy: Path = Path.home() / LEGACY_USER_CONFIG_FILE_NAME
    for p in (xdg_path, legacy):
        if p.exists() and p.is_file():
            return p
    return None
