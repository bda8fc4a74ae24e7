# topmark:header:start
#
#   project      : FenceMark
#   file         : extractor.py
#   file_relpath : src/fencemark/pipeline/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Snippet extraction: load, slice, dedent and validate embedded source.

Paths resolve against ``cwd / source_root`` when a source root is configured,
otherwise against the directory of the document being processed. The file is
read with its native newlines and split on the *document's* line ending;
stray carriage returns are dropped so a snippet only uses that line ending.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from fencemark.config.logging import get_logger
from fencemark.constants import FENCE
from fencemark.pipeline.outcomes import BlockSkipped
from fencemark.pipeline.status import EmbedStatus

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fencemark.config.logging import FencemarkLogger
    from fencemark.pipeline.directive import EmbedDirective

logger: FencemarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class Snippet:
    """Dedented source text ready to be rendered into a fence.

    Attributes:
        text (str): The snippet body, joined with the document line ending and trimmed.
        line_count (int): Number of source lines selected (before trimming).
        path (Path): The resolved source file.
    """

    text: str
    line_count: int
    path: Path


def resolve_target(target_path: str, document_path: Path, source_root: Path | None) -> Path:
    """Resolve a directive path to an absolute filesystem path.

    Args:
        target_path (str): Path as written in the directive.
        document_path (Path): The document being processed.
        source_root (Path | None): Configured source root, if any.

    Returns:
        Path: The absolute target path.
    """
    if source_root is not None:
        return (Path.cwd() / source_root / target_path).resolve()
    return (Path.cwd() / document_path).parent.joinpath(target_path).resolve()


def leading_whitespace(line: str) -> int:
    """Return the number of leading whitespace characters in ``line``."""
    return len(line) - len(line.lstrip())


def minimum_indent(lines: Sequence[str]) -> int:
    """Return the common indentation of ``lines``.

    Empty lines impose no constraint, and a line without leading whitespace
    pins the result to zero. When every line is empty the result is zero.
    """
    minimum: int | None = None
    for line in lines:
        if minimum == 0:
            return 0
        if not line:
            continue
        indent: int = leading_whitespace(line)
        minimum = indent if minimum is None else min(minimum, indent)
    return minimum or 0


def dedent(lines: Sequence[str]) -> list[str]:
    """Strip the common indentation from every line."""
    width: int = minimum_indent(lines)
    return [line[width:] for line in lines]


def read_source_lines(path: Path, line_ending: str) -> list[str]:
    """Read ``path`` as UTF-8 with native newlines and split on ``line_ending``.

    A leading byte order mark is dropped. When ``line_ending`` is LF, a trailing
    CR is removed from every line so CRLF sources embed cleanly in LF documents.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with path.open("r", encoding="utf-8-sig", newline="") as fh:
        content: str = fh.read()
    lines: list[str] = content.split(line_ending)
    if line_ending == "\n":
        lines = [line.removesuffix("\r") for line in lines]
    return lines


def extract_snippet(
    directive: EmbedDirective,
    *,
    document_path: Path,
    source_root: Path | None,
    line_ending: str,
) -> Snippet:
    """Load and normalize the source region a directive points at.

    Args:
        directive (EmbedDirective): What to embed.
        document_path (Path): The document being processed.
        source_root (Path | None): Configured source root, if any.
        line_ending (str): The document's line ending.

    Returns:
        Snippet: The dedented, trimmed snippet.

    Raises:
        BlockSkipped: `EmbedStatus.FILE_NOT_FOUND` if the target does not exist,
            `EmbedStatus.UNREADABLE` if it cannot be read as UTF-8 text, and
            `EmbedStatus.FENCE_COLLISION` if the snippet contains a code fence.
    """
    path: Path = resolve_target(directive.target_path, document_path, source_root)
    if not path.exists():
        raise BlockSkipped(EmbedStatus.FILE_NOT_FOUND, directive=directive, resolved_path=path)

    try:
        lines: list[str] = read_source_lines(path, line_ending)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        raise BlockSkipped(
            EmbedStatus.UNREADABLE, directive=directive, resolved_path=path
        ) from exc

    if directive.line_range is not None:
        lines = directive.line_range.select(lines)
    logger.trace("Selected %d line(s) from %s", len(lines), path)

    text: str = line_ending.join(dedent(lines)).strip()
    if FENCE in text:
        raise BlockSkipped(EmbedStatus.FENCE_COLLISION, directive=directive, resolved_path=path)
    return Snippet(text=text, line_count=len(lines), path=path)
