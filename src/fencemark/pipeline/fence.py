# topmark:header:start
#
#   project      : FenceMark
#   file         : fence.py
#   file_relpath : src/fencemark/pipeline/fence.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fence location and the `FenceBlock` value object.

A fence runs from an opening ```` ``` ```` (with the indentation preceding it on
its line) through the first later line that starts with optional spaces or tabs
followed by ```` ``` ````. Blocks without a closing delimiter never match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

FENCE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"([ \t]*?)```([\s\S]*?)^[ \t]*?```",
    re.MULTILINE,
)
_EXTENSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"```([^\r\n]*)")
_CRLF: Final[str] = "\r\n"
_LF: Final[str] = "\n"


def detect_line_ending(text: str) -> str:
    """Return ``"\\r\\n"`` if the text contains any CRLF, else ``"\\n"``."""
    return _CRLF if _CRLF in text else _LF


def line_number_at_end(text: str, line_ending: str) -> int:
    """Return the 1-based number of the line on which ``text`` ends."""
    return text.count(line_ending) + 1


@dataclass(frozen=True)
class FenceBlock:
    """A matched fenced block.

    Attributes:
        leading_indent (str): Spaces/tabs before the opening delimiter.
        extension (str): Text after the opening delimiter on its line ("" if none).
        first_line (str | None): First content line; ``None`` unless the block
            has at least one content line plus its closing line.
        raw_text (str): Full matched text including both delimiters.
        offset (int): Character offset of the match in the source document.
    """

    leading_indent: str
    extension: str
    first_line: str | None
    raw_text: str
    offset: int

    @property
    def end(self) -> int:
        """Character offset just past the closing delimiter."""
        return self.offset + len(self.raw_text)

    @classmethod
    def from_match(cls, match: re.Match[str], line_ending: str) -> FenceBlock:
        """Build a block from a `FENCE_PATTERN` match."""
        raw: str = match.group(0)
        extension_match = _EXTENSION_PATTERN.search(raw)
        lines: list[str] = raw.split(line_ending)
        return cls(
            leading_indent=match.group(1),
            extension=extension_match.group(1) if extension_match else "",
            first_line=lines[1] if len(lines) >= 3 else None,
            raw_text=raw,
            offset=match.start(),
        )


def iter_fences(text: str, line_ending: str) -> Iterator[FenceBlock]:
    """Yield the non-overlapping fenced blocks of ``text`` from left to right."""
    for match in FENCE_PATTERN.finditer(text):
        yield FenceBlock.from_match(match, line_ending)
