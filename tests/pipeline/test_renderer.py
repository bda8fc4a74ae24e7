# topmark:header:start
#
#   project      : FenceMark
#   file         : test_renderer.py
#   file_relpath : tests/pipeline/test_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for rendering snippets back into fenced blocks."""

from __future__ import annotations

from pathlib import Path

from fencemark.pipeline.directive import parse_target
from fencemark.pipeline.extractor import Snippet
from fencemark.pipeline.fence import iter_fences
from fencemark.pipeline.renderer import render_fence, render_replacement
from fencemark.pipeline.status import EmbedStatus
from tests.conftest import mark_pipeline


@mark_pipeline
def test_render_fence_with_comment() -> None:
    """The comment line is followed by a blank separator line."""
    rendered: str = render_fence(
        extension="py",
        comment_line="  # ./a.py ",
        body="x = 1",
        line_ending="\n",
    )
    assert rendered == "```py\n# ./a.py\n\nx = 1\n```"


@mark_pipeline
def test_render_fence_without_comment() -> None:
    """Omitting the comment also drops the separator line."""
    rendered: str = render_fence(extension="py", comment_line=None, body="x", line_ending="\r\n")
    assert rendered == "```py\r\nx\r\n```"


@mark_pipeline
def test_render_fence_indents_every_line() -> None:
    """The fence's leading indentation prefixes every rendered line."""
    rendered: str = render_fence(
        extension="js",
        comment_line="// a.js",
        body="a();\nb();",
        line_ending="\n",
        leading_indent="  ",
    )
    assert rendered == "  ```js\n  // a.js\n  \n  a();\n  b();\n  ```"


@mark_pipeline
def test_render_replacement_reports_replaced_then_up_to_date() -> None:
    """A stale block is replaced; rendering the result again is a no-op."""
    directive = parse_target("a.js")
    snippet = Snippet(text="run();", line_count=1, path=Path("/src/a.js"))

    (stale,) = iter_fences("```js\n// a.js\nold();\n```", "\n")
    outcome = render_replacement(
        stale, directive, snippet, line_ending="\n", strip_embed_comment=False
    )
    assert outcome.status == EmbedStatus.REPLACED
    assert outcome.changed
    assert outcome.line_count == 1
    assert outcome.text == "```js\n// a.js\n\nrun();\n```"

    (fresh,) = iter_fences(outcome.text, "\n")
    again = render_replacement(
        fresh, directive, snippet, line_ending="\n", strip_embed_comment=False
    )
    assert again.status == EmbedStatus.UP_TO_DATE
    assert again.text == fresh.raw_text
    assert not again.changed


@mark_pipeline
def test_render_replacement_strips_comment_when_configured() -> None:
    """`strip_embed_comment` drops the comment line and is recorded on the outcome."""
    directive = parse_target("a.js")
    snippet = Snippet(text="run();", line_count=1, path=Path("/src/a.js"))
    (block,) = iter_fences("```js\n// a.js\n```", "\n")
    outcome = render_replacement(
        block, directive, snippet, line_ending="\n", strip_embed_comment=True
    )
    assert outcome.text == "```js\nrun();\n```"
    assert outcome.comment_omitted


@mark_pipeline
def test_render_replacement_override_omits_comment() -> None:
    """Override directives never render a comment line."""
    directive = parse_target("a.py", display_override="a.py")
    snippet = Snippet(text="pass", line_count=1, path=Path("/src/a.py"))
    (block,) = iter_fences("```py\n# b.py\n```", "\n")
    outcome = render_replacement(
        block, directive, snippet, line_ending="\n", strip_embed_comment=False
    )
    assert outcome.text == "```py\npass\n```"
    assert not outcome.comment_omitted
