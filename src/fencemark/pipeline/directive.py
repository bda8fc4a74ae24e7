# topmark:header:start
#
#   project      : FenceMark
#   file         : directive.py
#   file_relpath : src/fencemark/pipeline/directive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive parsing: which file (and which lines) a fence should embed.

A fence gets its directive from one of two places:

1. A document-level directive in the literal text preceding the fence:

   * ``<!-- embed-directive path/to/file.py#L3-L8 -->`` overrides the in-fence
     comment and also suppresses the comment line in the rendered fence.
   * ``<!-- embed-directive ignore-next -->`` (or ``embed-directive-ignore-next``)
     leaves the next fence untouched.

   The keyword ``embedme`` is accepted as an alias of ``embed-directive``.

2. A comment on the fence's first content line, written in the comment syntax
   of the fence's extension tag (``// ./a.js``, ``# ./a.py#L1-L4``, ...).

Path tokens may carry a GitHub-style range suffix ``#L<start>-L<end>`` (1-based,
inclusive). Any other ``#`` inside the path is a malformed range.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from fencemark.config.logging import get_logger
from fencemark.constants import DIRECTIVE_KEYWORD, LEGACY_DIRECTIVE_KEYWORD
from fencemark.filetypes.registry import comment_family_of, is_supported
from fencemark.pipeline.comments import read_comment_token
from fencemark.pipeline.outcomes import BlockSkipped
from fencemark.pipeline.status import EmbedStatus

if TYPE_CHECKING:
    from fencemark.config.logging import FencemarkLogger
    from fencemark.filetypes.registry import CommentFamily
    from fencemark.pipeline.fence import FenceBlock

logger: FencemarkLogger = get_logger(__name__)

_KEYWORD: Final[str] = f"(?:{re.escape(DIRECTIVE_KEYWORD)}|{re.escape(LEGACY_DIRECTIVE_KEYWORD)})"

OVERRIDE_PATTERN: Final[re.Pattern[str]] = re.compile(rf"<!--\s*?{_KEYWORD}[ ]+?(\S+?)\s*?-->")
IGNORE_NEXT_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"<!--\s*?{_KEYWORD}[ -]ignore-next\s*?-->"
)
TARGET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\s?(\S+?)((#L(\d+)-L(\d+))|$)",
    re.MULTILINE,
)


@dataclass(frozen=True)
class LineRange:
    """Inclusive, 1-based line range taken from a ``#L<start>-L<end>`` suffix."""

    start: int
    end: int

    def select(self, lines: list[str]) -> list[str]:
        """Return the selected lines using plain slice semantics (no bounds errors)."""
        return lines[self.start - 1 : self.end]

    def __str__(self) -> str:
        return f"#L{self.start}-L{self.end}"


@dataclass(frozen=True)
class EmbedDirective:
    """Reference to the file region a fence should embed.

    Attributes:
        target_path (str): Path of the file to embed (without range suffix).
        line_range (LineRange | None): Optional inclusive line range.
        display_override (str | None): Set when a document-level override
            directive supplied the path; used for display instead of the token.
        ignore_next (bool): Leave the following fence untouched.
        token (str): The raw directive token as written in the document.
    """

    target_path: str
    line_range: LineRange | None = None
    display_override: str | None = None
    ignore_next: bool = False
    token: str = ""

    @property
    def is_override(self) -> bool:
        """Whether the path came from a document-level override directive."""
        return self.display_override is not None

    @property
    def display(self) -> str:
        """The string used to name the embedded file in diagnostics."""
        return self.display_override or self.token or self.target_path


def read_preceding_directive(literal: str) -> EmbedDirective | None:
    """Look for a document-level directive in the text preceding a fence.

    An ignore-next directive wins over an override directive in the same span.

    Args:
        literal (str): The untouched text between the previous fence and this one.

    Returns:
        EmbedDirective | None: An ignore-next marker, an unparsed override
            directive (``target_path`` still holds the raw token), or ``None``.
    """
    if IGNORE_NEXT_PATTERN.search(literal):
        return EmbedDirective(target_path="", ignore_next=True)
    match = OVERRIDE_PATTERN.search(literal)
    if match is None:
        return None
    token: str = match.group(1)
    return EmbedDirective(target_path=token, display_override=token, token=token)


def parse_target(token: str, *, display_override: str | None = None) -> EmbedDirective:
    """Parse a directive token into path and optional line range.

    Args:
        token (str): The raw token, e.g. ``"./src/a.py#L3-L10"``.
        display_override (str | None): Display string when the token came from
            an override directive.

    Returns:
        EmbedDirective: The parsed directive.

    Raises:
        BlockSkipped: With `EmbedStatus.NO_DIRECTIVE` if the token holds no path,
            or `EmbedStatus.MALFORMED_RANGE` if the path keeps an unconsumed ``#``.
    """
    match = TARGET_PATTERN.search(token)
    if match is None:
        raise BlockSkipped(EmbedStatus.NO_DIRECTIVE, target=token)
    filename: str = match.group(1)
    if "#" in filename:
        raise BlockSkipped(EmbedStatus.MALFORMED_RANGE, target=filename)
    line_range: LineRange | None = None
    if match.group(3):
        line_range = LineRange(start=int(match.group(4)), end=int(match.group(5)))
    return EmbedDirective(
        target_path=filename,
        line_range=line_range,
        display_override=display_override,
        token=token,
    )


def resolve_directive(block: FenceBlock, preceding: EmbedDirective | None) -> EmbedDirective:
    """Decide which directive applies to ``block``.

    Checks run in a fixed order and the first failure wins: ignore-next,
    override directive, extension present, first line present, extension
    supported, comment family known, comment token present, token parseable.

    Args:
        block (FenceBlock): The fence being processed.
        preceding (EmbedDirective | None): Result of `read_preceding_directive`
            for the literal text before the fence.

    Returns:
        EmbedDirective: The directive to embed.

    Raises:
        BlockSkipped: When the block must be left unchanged.
    """
    if preceding is not None and preceding.ignore_next:
        raise BlockSkipped(EmbedStatus.IGNORED)

    if preceding is not None:
        logger.debug("Override directive found: %s", preceding.token)
        return parse_target(preceding.token, display_override=preceding.display_override)

    if not block.extension:
        raise BlockSkipped(EmbedStatus.NO_EXTENSION)
    if not block.first_line:
        raise BlockSkipped(EmbedStatus.EMPTY_BLOCK)
    if not is_supported(block.extension):
        raise BlockSkipped(EmbedStatus.UNSUPPORTED_EXTENSION)
    family: CommentFamily | None = comment_family_of(block.extension)
    if family is None:
        raise BlockSkipped(EmbedStatus.FAMILY_UNRESOLVED)

    token: str | None = read_comment_token(block.first_line, family)
    logger.trace("extension=%s family=%s token=%r", block.extension, family.name, token)
    if not token:
        raise BlockSkipped(EmbedStatus.NO_DIRECTIVE)
    return parse_target(token)
