# topmark:header:start
#
#   project      : FenceMark
#   file         : errors.py
#   file_relpath : src/fencemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FenceMark CLI.

Raise these in CLI code to abort the run with a standardized message and exit
code. The embedding engine never raises them.
"""

from __future__ import annotations

from typing import IO, Any

import click

from fencemark.cli.exit_codes import ExitCode


class FencemarkError(click.ClickException):
    """Base class for all FenceMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class FencemarkUsageError(FencemarkError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class FencemarkConfigError(FencemarkError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class FencemarkFileNotFoundError(FencemarkError):
    """Error when no input document can be found."""

    exit_code = ExitCode.FILE_NOT_FOUND
