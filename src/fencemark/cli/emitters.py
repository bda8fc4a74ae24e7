# topmark:header:start
#
#   project      : FenceMark
#   file         : emitters.py
#   file_relpath : src/fencemark/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable rendering of document and block reports.

Each fence yields one line::

       docs/README.md#L12-L18 Embedded 5 lines from file ./src/a.py

The location is gray; the message uses the color of the block's `EmbedStatus`.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from yachalk import chalk

from fencemark.pipeline.outcomes import describe
from fencemark.pipeline.status import EmbedStatus

if TYPE_CHECKING:
    from pathlib import Path

    from fencemark.cli.console import ClickConsole
    from fencemark.pipeline.outcomes import BlockReport, DocumentResult


def display_path(path: Path) -> str:
    """Return ``path`` relative to the current working directory when possible."""
    try:
        return os.path.relpath(path)
    except ValueError:  # different drive on Windows
        return str(path)


def format_block_report(path: Path, report: BlockReport, *, verify: bool = False) -> str:
    """Format one block report as a colored diagnostic line.

    In verify mode a replacement is drift, so it is shown in yellow.
    """
    location: str = chalk.gray(f"   {display_path(path)}#L{report.start_line}-L{report.end_line}")
    status: EmbedStatus = report.outcome.status
    message: str = describe(report.outcome)
    if verify and status == EmbedStatus.REPLACED:
        return f"{location} {chalk.yellow(message)}"
    return f"{location} {status.styled(message)}"


def emit_document_report(
    console: ClickConsole,
    path: Path,
    result: DocumentResult,
    *,
    verify: bool = False,
) -> None:
    """Emit the analysis banner and one line per fence of a document."""
    console.diagnostic(chalk.magenta(f"  Analysing {chalk.underline(display_path(path))}..."))
    for report in result.blocks:
        console.diagnostic(format_block_report(path, report, verify=verify))


def emit_summary(console: ClickConsole, *, documents: int, changed: int, verify: bool) -> None:
    """Emit the closing summary line."""
    if verify:
        if changed:
            console.diagnostic(
                chalk.red(f"Diff detected in {changed} of {documents} document(s).")
            )
        else:
            console.diagnostic(chalk.green(f"All {documents} document(s) up to date."))
        return
    console.diagnostic(chalk.green(f"Processed {documents} document(s), {changed} changed."))
