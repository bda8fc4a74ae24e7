# topmark:header:start
#
#   project      : FenceMark
#   file         : console.py
#   file_relpath : src/fencemark/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Use `ClickConsole` for messages intended for end users, and reserve `logging`
for internal diagnostics. When color is disabled, `click.echo` strips the ANSI
styles that yachalk adds, so callers may always pass colored text.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, ANSI color codes are kept in the output.
        out (TextIO | None): Stream for program output (defaults to `sys.stdout`).
        err (TextIO | None): Stream for errors (defaults to `sys.stderr`).
        diagnostics_to_err (bool): Send diagnostics to ``err`` instead of ``out``;
            used when a document is emitted on stdout.
        silent (bool): Drop diagnostics entirely (errors are still shown).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
        diagnostics_to_err: bool = False,
        silent: bool = False,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.diagnostics_to_err = diagnostics_to_err
        self.silent = silent

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output (e.g. a transformed document) to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def diagnostic(self, text: str, *, nl: bool = True) -> None:
        """Write a diagnostic line unless silenced."""
        if self.silent:
            return
        stream: TextIO = self.err if self.diagnostics_to_err else self.out
        click.echo(text, nl=nl, file=stream, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")
