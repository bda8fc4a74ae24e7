# topmark:header:start
#
#   project      : FenceMark
#   file         : status.py
#   file_relpath : src/fencemark/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enum for a single fenced block.

Every fence processed by the scanner ends in exactly one `EmbedStatus`. All
statuses except `EmbedStatus.REPLACED` leave the block byte-identical.

Values are human-readable strings used in diagnostics; compare with ``==``.
"""

from __future__ import annotations

from yachalk import chalk

from fencemark.rendering.colored_enum import ColoredStrEnum


class EmbedStatus(ColoredStrEnum):
    """Outcome of processing one fenced block."""

    # Value format: (description: str, color_renderer: ChalkBuilder)
    IGNORED = ("ignored by directive", chalk.blue)
    NO_EXTENSION = ("no code extension", chalk.blue)
    EMPTY_BLOCK = ("empty block without directive", chalk.blue)
    UNSUPPORTED_EXTENSION = ("unsupported extension", chalk.yellow)
    FAMILY_UNRESOLVED = ("comment family unresolved", chalk.red)
    NO_DIRECTIVE = ("no directive in first line", chalk.gray)
    MALFORMED_RANGE = ("malformed line range", chalk.red)
    FILE_NOT_FOUND = ("file not found", chalk.red)
    UNREADABLE = ("file unreadable", chalk.red)
    FENCE_COLLISION = ("snippet contains a code fence", chalk.red)
    UP_TO_DATE = ("already up to date", chalk.gray)
    REPLACED = ("embedded", chalk.green)

    @property
    def changed(self) -> bool:
        """Whether this status means the block text was replaced."""
        return self is EmbedStatus.REPLACED
