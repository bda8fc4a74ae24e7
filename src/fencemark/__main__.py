# topmark:header:start
#
#   project      : FenceMark
#   file         : __main__.py
#   file_relpath : src/fencemark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FenceMark via ``python -m fencemark``.

Equivalent to running the ``fencemark`` console script; it delegates to
:func:`fencemark.cli.main.cli`.

Examples:
    Verify that the README is up to date::

        python -m fencemark --verify README.md
"""

from __future__ import annotations

from fencemark.cli.main import cli

if __name__ == "__main__":
    cli()
