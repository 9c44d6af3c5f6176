# topmark:header:start
#
#   project      : DiffStyle
#   file         : constants.py
#   file_relpath : src/diffstyle/constants.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""DiffStyle Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DIFFSTYLE_VERSION: str = get_version("diffstyle")

# Environment variable consulted by `diffstyle.config.logging.resolve_env_log_level`:
LOG_LEVEL_ENV_VAR: str = "DIFFSTYLE_LOG_LEVEL"

# User-scoped config file locations (XDG first, then the legacy dotfile):
USER_CONFIG_DIR_NAME: str = "diffstyle"
USER_CONFIG_FILE_NAME: str = "diffstyle.toml"
LEGACY_USER_CONFIG_FILE_NAME: str = ".diffstyle.toml"

VALUE_NOT_SET: str = "<not set>"
