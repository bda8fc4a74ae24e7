# topmark:header:start
#
#   project      : FenceMark
#   file         : comments.py
#   file_relpath : src/fencemark/pipeline/comments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment readers: extract the directive token from a fence's first line.

One reader exists per `CommentFamily`:

* Line-comment families (``//``, ``#``, ``'``, ``%%``, ``--``) use
  `LineCommentReader`: the marker, at most one whitespace character, then the
  non-whitespace token running to the end of the line.
* The XML family uses `XmlCommentReader`: ``<!--`` token ``-->`` anywhere in the
  line.
* `CommentFamily.NONE` has no comment syntax and never yields a token.

The table is fixed; `read_comment_token` dispatches through it.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from fencemark.filetypes.registry import CommentFamily

if TYPE_CHECKING:
    from collections.abc import Mapping


class CommentReader:
    """Base reader for a comment family that has no comment syntax."""

    def read(self, line: str) -> str | None:
        """Return the directive token carried by ``line``, or ``None``."""
        return None


class LineCommentReader(CommentReader):
    """Reader for line-comment families such as ``# path`` or ``// path``.

    Args:
        line_prefix (str): The comment introducer, e.g. ``"#"`` or ``"//"``.
    """

    def __init__(self, line_prefix: str) -> None:
        self.line_prefix = line_prefix
        self._pattern: re.Pattern[str] = re.compile(rf"{re.escape(line_prefix)}\s?(\S*?)$")

    def read(self, line: str) -> str | None:
        """Return the token following the comment prefix, or ``None``."""
        match = self._pattern.search(line)
        if match is None or not match.group(1):
            return None
        return match.group(1)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.line_prefix!r})"


class XmlCommentReader(CommentReader):
    """Reader for ``<!-- path -->`` comments (HTML, XML, Markdown)."""

    _pattern: Final[re.Pattern[str]] = re.compile(r"<!--\s*?(\S*?)\s*?-->")

    def read(self, line: str) -> str | None:
        """Return the token wrapped in an XML comment, or ``None``."""
        match = self._pattern.search(line)
        if match is None or not match.group(1):
            return None
        return match.group(1)


COMMENT_READERS: Final[Mapping[CommentFamily, CommentReader]] = MappingProxyType(
    {
        CommentFamily.NONE: CommentReader(),
        CommentFamily.C: LineCommentReader("//"),
        CommentFamily.XML: XmlCommentReader(),
        CommentFamily.HASH: LineCommentReader("#"),
        CommentFamily.SINGLE_QUOTE: LineCommentReader("'"),
        CommentFamily.DOUBLE_PERCENT: LineCommentReader("%%"),
        CommentFamily.DOUBLE_HYPHENS: LineCommentReader("--"),
    }
)


def read_comment_token(line: str, family: CommentFamily) -> str | None:
    """Extract the directive token from ``line`` using ``family``'s syntax.

    Args:
        line (str): The first content line of a fence.
        family (CommentFamily): The comment family of the fence's extension.

    Returns:
        str | None: The token, or ``None`` if the line carries no comment token.
    """
    return COMMENT_READERS[family].read(line)
