# topmark:header:start
#
#   project      : FenceMark
#   file         : renderer.py
#   file_relpath : src/fencemark/pipeline/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fence rendering: rebuild a fenced block around an embedded snippet.

The rendered block is::

    ```<ext>
    <comment line>

    <snippet>
    ```

The comment line and the blank separator after it are omitted when an override
directive supplied the path, or when `Config.strip_embed_comment` is set. The
fence's original indentation is prefixed to every rendered line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fencemark.constants import FENCE
from fencemark.pipeline.outcomes import ReplacementOutcome
from fencemark.pipeline.status import EmbedStatus

if TYPE_CHECKING:
    from fencemark.pipeline.directive import EmbedDirective
    from fencemark.pipeline.extractor import Snippet
    from fencemark.pipeline.fence import FenceBlock


def render_fence(
    *,
    extension: str,
    comment_line: str | None,
    body: str,
    line_ending: str,
    leading_indent: str = "",
) -> str:
    """Render a fenced block.

    Args:
        extension (str): Extension tag for the opening delimiter.
        comment_line (str | None): The directive comment, or ``None`` to omit it.
        body (str): The snippet body.
        line_ending (str): Line ending used between rendered lines.
        leading_indent (str): Indentation prefixed to every line.

    Returns:
        str: The fence text, without a trailing line ending.
    """
    lines: list[str] = [f"{FENCE}{extension}"]
    if comment_line is not None:
        lines.extend((comment_line.strip(), ""))
    lines.extend((body, FENCE))
    rendered: str = line_ending.join(lines)
    if leading_indent:
        rendered = line_ending.join(leading_indent + line for line in rendered.split(line_ending))
    return rendered


def render_replacement(
    block: FenceBlock,
    directive: EmbedDirective,
    snippet: Snippet,
    *,
    line_ending: str,
    strip_embed_comment: bool,
) -> ReplacementOutcome:
    """Render ``snippet`` into ``block`` and compare with the original text.

    Args:
        block (FenceBlock): The fence being replaced.
        directive (EmbedDirective): The directive that selected the snippet.
        snippet (Snippet): The extracted snippet.
        line_ending (str): The document's line ending.
        strip_embed_comment (bool): Omit the comment line even for in-fence directives.

    Returns:
        ReplacementOutcome: `EmbedStatus.UP_TO_DATE` with the original text when
            the render is byte-identical, otherwise `EmbedStatus.REPLACED`.
    """
    omit_comment: bool = directive.is_override or strip_embed_comment
    rendered: str = render_fence(
        extension=block.extension,
        comment_line=None if omit_comment else (block.first_line or ""),
        body=snippet.text,
        line_ending=line_ending,
        leading_indent=block.leading_indent,
    )
    if rendered == block.raw_text:
        return ReplacementOutcome(
            status=EmbedStatus.UP_TO_DATE,
            text=block.raw_text,
            extension=block.extension,
            directive=directive,
            resolved_path=snippet.path,
        )
    return ReplacementOutcome(
        status=EmbedStatus.REPLACED,
        text=rendered,
        extension=block.extension,
        directive=directive,
        resolved_path=snippet.path,
        line_count=snippet.line_count,
        comment_omitted=strip_embed_comment,
    )
