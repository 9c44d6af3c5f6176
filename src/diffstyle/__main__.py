# topmark:header:start
#
#   project      : DiffStyle
#   file         : __main__.py
#   file_relpath : src/diffstyle/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Module entry point for running DiffStyle via ``python -m diffstyle``.

It delegates directly to :func:`diffstyle.cli.main.cli`, so the module and the
``diffstyle`` console script share a single entry point.

Examples:
    Show the options resolved with the ``diff-so-fancy`` preset::

        python -m diffstyle show --presets diff-so-fancy
"""

from __future__ import annotations

from diffstyle.cli.main import cli

if __name__ == "__main__":
    cli()
