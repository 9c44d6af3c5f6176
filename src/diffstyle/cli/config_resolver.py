# topmark:header:start
#
#   project      : DiffStyle
#   file         : config_resolver.py
#   file_relpath : src/diffstyle/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Select the external config source from Click parameters.

Selection order:
  1. ``--no-config``: no config source at all (presets use their fallbacks).
  2. ``--config PATH``: that file; a missing file is a config error.
  3. The user config file, if one exists
     (``$XDG_CONFIG_HOME/diffstyle/diffstyle.toml`` or ``~/.diffstyle.toml``).
  4. Otherwise no config source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diffstyle.cli.errors import DiffStyleConfigError
from diffstyle.config.loaders import discover_user_config_file
from diffstyle.config.logging import get_logger
from diffstyle.config.source import TomlConfigSource

if TYPE_CHECKING:
    from pathlib import Path

    from diffstyle.config.logging import DiffStyleLogger

logger: DiffStyleLogger = get_logger(__name__)


def resolve_config_source(
    *,
    config_path: Path | None,
    no_config: bool,
) -> TomlConfigSource | None:
    """Return the config source selected by the CLI flags.

    Args:
        config_path (Path | None): Explicit ``--config`` path.
        no_config (bool): Whether ``--no-config`` was passed.

    Returns:
        TomlConfigSource | None: The selected source, or None when no config applies.

    Raises:
        DiffStyleConfigError: If ``config_path`` does not exist.
    """
    if no_config:
        logger.debug("Config disabled by --no-config")
        return None

    if config_path is not None:
        if not config_path.is_file():
            raise DiffStyleConfigError(f"Config file not found: {config_path}")
        return TomlConfigSource.from_path(config_path)

    user_cfg_path: Path | None = discover_user_config_file()
    if user_cfg_path is None:
        logger.debug("No user config found")
        return None
    return TomlConfigSource.from_path(user_cfg_path)
