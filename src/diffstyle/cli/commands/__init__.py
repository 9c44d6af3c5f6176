# topmark:header:start
#
#   project      : DiffStyle
#   file         : __init__.py
#   file_relpath : src/diffstyle/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""DiffStyle CLI subcommands."""
