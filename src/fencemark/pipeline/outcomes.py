# topmark:header:start
#
#   project      : FenceMark
#   file         : outcomes.py
#   file_relpath : src/fencemark/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-fence outcomes and per-document results.

This module owns the data the engine hands back to its callers:

- `ReplacementOutcome`: what happened to one fence (an `EmbedStatus` plus the
  text to emit for that fence and the facts needed to explain it).
- `BlockReport`: an outcome paired with its diagnostic line span.
- `DocumentResult`: the transformed document plus every block report.

It is presentation-free: `describe` builds plain message text, and coloring is
layered on top by the CLI using `EmbedStatus.color`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fencemark.filetypes.registry import supported_extensions
from fencemark.pipeline.status import EmbedStatus

if TYPE_CHECKING:
    from pathlib import Path

    from fencemark.pipeline.directive import EmbedDirective


class BlockSkipped(Exception):
    """Signal that a fence must be left unchanged.

    Raised by the directive, extraction and rendering stages and caught by the
    scanner, which turns it into an unchanged `ReplacementOutcome`. It never
    escapes `fencemark.pipeline.scanner.DocumentScanner.scan`.

    Attributes:
        status (EmbedStatus): Why the block is skipped.
        directive (EmbedDirective | None): The directive, when one was parsed.
        resolved_path (Path | None): The resolved target path, when known.
        target (str | None): The raw path token, when the directive itself
            could not be built from it.
    """

    def __init__(
        self,
        status: EmbedStatus,
        *,
        directive: EmbedDirective | None = None,
        resolved_path: Path | None = None,
        target: str | None = None,
    ) -> None:
        super().__init__(status.value)
        self.status = status
        self.directive = directive
        self.resolved_path = resolved_path
        self.target = target


@dataclass(frozen=True)
class ReplacementOutcome:
    """Result of processing a single fenced block.

    Attributes:
        status (EmbedStatus): The outcome tag.
        text (str): The text to emit for this block (original or replacement).
        extension (str): The fence extension tag ("" when absent).
        directive (EmbedDirective | None): The parsed directive, if any.
        resolved_path (Path | None): The resolved source file, if any.
        target (str | None): The raw path token when no directive could be built.
        line_count (int): Number of source lines embedded (0 unless replaced).
        comment_omitted (bool): Whether the comment line was left out of the render.
    """

    status: EmbedStatus
    text: str
    extension: str = ""
    directive: EmbedDirective | None = None
    resolved_path: Path | None = None
    target: str | None = None
    line_count: int = 0
    comment_omitted: bool = False

    @property
    def changed(self) -> bool:
        """Whether the block was replaced."""
        return self.status.changed

    @classmethod
    def skipped(cls, exc: BlockSkipped, *, text: str, extension: str) -> ReplacementOutcome:
        """Build an unchanged outcome from a `BlockSkipped` signal."""
        return cls(
            status=exc.status,
            text=text,
            extension=extension,
            directive=exc.directive,
            resolved_path=exc.resolved_path,
            target=exc.target,
        )


@dataclass(frozen=True)
class BlockReport:
    """A block outcome with its 1-based diagnostic line span.

    Attributes:
        start_line (int): First line of the block.
        end_line (int): Last line of the emitted block text.
        outcome (ReplacementOutcome): What happened to the block.
    """

    start_line: int
    end_line: int
    outcome: ReplacementOutcome


@dataclass(frozen=True)
class DocumentResult:
    """The transformed document together with all block reports.

    Attributes:
        text (str): The output document.
        line_ending (str): The detected line ending (``"\\n"`` or ``"\\r\\n"``).
        blocks (tuple[BlockReport, ...]): One report per matched fence, in order.
    """

    text: str
    line_ending: str
    blocks: tuple[BlockReport, ...]

    @property
    def replaced_count(self) -> int:
        """Number of fences that were replaced."""
        return sum(1 for report in self.blocks if report.outcome.changed)


def _target_name(outcome: ReplacementOutcome) -> str:
    if outcome.directive is not None:
        return outcome.directive.target_path
    return outcome.target or ""


def describe(outcome: ReplacementOutcome) -> str:
    """Return a human-readable, uncolored message for an outcome.

    Args:
        outcome (ReplacementOutcome): The outcome to explain.

    Returns:
        str: The diagnostic message.
    """
    status: EmbedStatus = outcome.status
    if status == EmbedStatus.IGNORED:
        return '"Ignore next" comment detected, skipping code block...'
    if status == EmbedStatus.NO_EXTENSION:
        return "No code extension detected, skipping code block..."
    if status == EmbedStatus.EMPTY_BLOCK:
        return "Code block is empty & no preceding embed directive, skipping..."
    if status == EmbedStatus.UNSUPPORTED_EXTENSION:
        return (
            f"Unsupported file extension [{outcome.extension}], supported extensions are "
            f"{', '.join(supported_extensions())}, skipping code block"
        )
    if status == EmbedStatus.FAMILY_UNRESOLVED:
        return (
            f"File extension {outcome.extension} marked as supported, but comment family "
            "could not be determined. Please report this issue."
        )
    if status == EmbedStatus.NO_DIRECTIVE:
        return f"No comment detected in first line for block with extension {outcome.extension}"
    if status == EmbedStatus.MALFORMED_RANGE:
        return (
            f"Incorrectly formatted line numbering string {_target_name(outcome)}, "
            "Expecting Github formatting e.g. #L10-L20"
        )
    if status == EmbedStatus.FILE_NOT_FOUND:
        return (
            f"Found filename {_target_name(outcome)} in comment in first line, "
            f"but file does not exist at {outcome.resolved_path}!"
        )
    if status == EmbedStatus.UNREADABLE:
        return f"Cannot read {outcome.resolved_path} as UTF-8 text, skipping code block"
    if status == EmbedStatus.FENCE_COLLISION:
        return (
            f"Output snippet for file {_target_name(outcome)} contains a code fence. "
            "Refusing to embed as that would break the document"
        )
    if status == EmbedStatus.UP_TO_DATE:
        return "No changes required, already up to date"
    display: str = outcome.directive.display if outcome.directive is not None else ""
    suffix: str = " without comment line" if outcome.comment_omitted else ""
    return f"Embedded {outcome.line_count} lines{suffix} from file {display}"
