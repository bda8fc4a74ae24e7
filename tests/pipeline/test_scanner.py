# topmark:header:start
#
#   project      : FenceMark
#   file         : test_scanner.py
#   file_relpath : tests/pipeline/test_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for `DocumentScanner` on in-memory documents.

Source files are written under ``tmp_path``; documents are transformed as text
with ``tmp_path / "README.md"`` as their path, so relative embed paths resolve
against ``tmp_path``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fencemark.pipeline.outcomes import describe
from fencemark.pipeline.scanner import DocumentScanner, transform
from fencemark.pipeline.status import EmbedStatus
from tests.conftest import make_config, mark_pipeline, write_text

if TYPE_CHECKING:
    from pathlib import Path

    from fencemark.pipeline.outcomes import DocumentResult


def _statuses(result: DocumentResult) -> list[EmbedStatus]:
    return [report.outcome.status for report in result.blocks]


@mark_pipeline
def test_embeds_javascript_file(tmp_path: Path) -> None:
    """A stale block is replaced with the file content, then stays stable."""
    write_text(tmp_path / "a.js", "console.log(1);")
    doc: str = "```js\n// ./a.js\n\noldbody\n```"

    first: str = transform(doc, tmp_path / "README.md")
    assert first == "```js\n// ./a.js\n\nconsole.log(1);\n```"

    second: str = transform(first, tmp_path / "README.md")
    assert second == first


@mark_pipeline
def test_transform_is_idempotent_across_mixed_blocks(tmp_path: Path) -> None:
    """Running twice over a document with several kinds of fence is a no-op."""
    write_text(tmp_path / "a.js", "one();\ntwo();\n")
    write_text(tmp_path / "b.py", "    x = 1\n    y = 2\n")
    doc: str = (
        "# Title\n\n"
        "```js\n// a.js\n```\n\n"
        "```toml\n# a.toml\n```\n\n"
        "```py\n# b.py#L2-L2\nstale\n```\n\n"
        "```\nplain\n```\n"
    )
    scanner = DocumentScanner(tmp_path / "README.md")
    first: DocumentResult = scanner.scan(doc)
    assert _statuses(first) == [
        EmbedStatus.REPLACED,
        EmbedStatus.UNSUPPORTED_EXTENSION,
        EmbedStatus.REPLACED,
        EmbedStatus.NO_EXTENSION,
    ]
    assert first.replaced_count == 2
    assert "```py\n# b.py#L2-L2\n\ny = 2\n```" in first.text

    second: DocumentResult = scanner.scan(first.text)
    assert second.text == first.text
    assert _statuses(second)[0] == EmbedStatus.UP_TO_DATE
    assert second.replaced_count == 0


@mark_pipeline
def test_crlf_document_stays_crlf(tmp_path: Path) -> None:
    """Rendered fences use the document's CRLF line ending throughout."""
    write_text(tmp_path / "a.js", "a();\r\nb();\r\n")
    doc: str = "Intro\r\n\r\n```js\r\n// a.js\r\n```\r\n"

    result: DocumentResult = DocumentScanner(tmp_path / "README.md").scan(doc)

    assert result.line_ending == "\r\n"
    assert result.text == "Intro\r\n\r\n```js\r\n// a.js\r\n\r\na();\r\nb();\r\n```\r\n"
    assert "\n" not in result.text.replace("\r\n", "")


@mark_pipeline
def test_crlf_source_in_lf_document_is_idempotent(tmp_path: Path) -> None:
    """Embedding a CRLF source keeps an LF document LF, so a second run is a no-op."""
    (tmp_path / "crlf.txt").write_bytes(b"a\r\nb\r\n")
    doc: str = "<!-- embed-directive crlf.txt -->\n```txt\nold\n```\n"

    once: str = transform(doc, tmp_path / "README.md")
    assert once == "<!-- embed-directive crlf.txt -->\n```txt\na\nb\n```\n"

    twice: str = transform(once, tmp_path / "README.md")
    assert twice == once


@mark_pipeline
def test_unsupported_extension_left_byte_identical(tmp_path: Path) -> None:
    """A fence tagged with an unknown extension is never touched."""
    write_text(tmp_path / "a.toml", "x = 1\n")
    doc: str = "```toml\n# a.toml\nold\n```\n"
    result: DocumentResult = DocumentScanner(tmp_path / "README.md").scan(doc)
    assert result.text == doc
    assert _statuses(result) == [EmbedStatus.UNSUPPORTED_EXTENSION]
    assert "toml" in describe(result.blocks[0].outcome)


@mark_pipeline
def test_fence_collision_leaves_block_unchanged(tmp_path: Path) -> None:
    """A snippet containing a fence is refused and the document stays valid."""
    write_text(tmp_path / "guide.md", "Use:\n```sh\nmake\n```\n")
    doc: str = "```md\n<!-- guide.md -->\n```\n"
    result: DocumentResult = DocumentScanner(tmp_path / "README.md").scan(doc)
    assert result.text == doc
    assert _statuses(result) == [EmbedStatus.FENCE_COLLISION]


@mark_pipeline
def test_override_directive_replaces_python_block(tmp_path: Path) -> None:
    """An override supplies the path when the first line holds no comment."""
    write_text(tmp_path / "a.py", "x = 1\n")
    doc: str = "<!-- embed-directive ./a.py -->\n```py\nold = True\n```\n"

    result: DocumentResult = DocumentScanner(tmp_path / "README.md").scan(doc)

    assert result.text == "<!-- embed-directive ./a.py -->\n```py\nx = 1\n```\n"
    outcome = result.blocks[0].outcome
    assert outcome.status == EmbedStatus.REPLACED
    assert describe(outcome) == "Embedded 2 lines from file ./a.py"
    assert transform(result.text, tmp_path / "README.md") == result.text


@mark_pipeline
def test_override_applies_to_next_fence_only(tmp_path: Path) -> None:
    """A directive only affects the fence that directly follows it."""
    write_text(tmp_path / "a.py", "x = 1\n")
    write_text(tmp_path / "b.py", "y = 2\n")
    doc: str = "<!-- embedme ./a.py -->\n```py\n```\n\n```py\n# b.py\n```\n"
    result: DocumentResult = DocumentScanner(tmp_path / "README.md").scan(doc)
    assert result.text == (
        "<!-- embedme ./a.py -->\n```py\nx = 1\n```\n\n```py\n# b.py\n\ny = 2\n```\n"
    )


@mark_pipeline
def test_ignore_next_directive(tmp_path: Path) -> None:
    """An ignore-next directive protects the following fence."""
    write_text(tmp_path / "a.js", "run();\n")
    doc: str = "<!-- embed-directive ignore-next -->\n```js\n// a.js\nkeep();\n```\n"
    result: DocumentResult = DocumentScanner(tmp_path / "README.md").scan(doc)
    assert result.text == doc
    assert _statuses(result) == [EmbedStatus.IGNORED]


@mark_pipeline
def test_missing_file_does_not_stop_other_blocks(tmp_path: Path) -> None:
    """Failures are block-local; later fences are still processed."""
    write_text(tmp_path / "b.sh", "echo hi\n")
    doc: str = "```js\n// missing.js\n```\n\n```sh\n# b.sh\n```\n"
    result: DocumentResult = DocumentScanner(tmp_path / "README.md").scan(doc)
    assert _statuses(result) == [EmbedStatus.FILE_NOT_FOUND, EmbedStatus.REPLACED]
    assert result.text.startswith("```js\n// missing.js\n```\n")
    assert "missing.js" in describe(result.blocks[0].outcome)


@mark_pipeline
def test_unclosed_fence_is_never_matched(tmp_path: Path) -> None:
    """Without a closing delimiter there is no block to replace."""
    write_text(tmp_path / "a.js", "run();\n")
    doc: str = "```js\n// a.js\nrun();\n"
    result: DocumentResult = DocumentScanner(tmp_path / "README.md").scan(doc)
    assert result.text == doc
    assert result.blocks == ()


@mark_pipeline
def test_indented_fence_keeps_indentation(tmp_path: Path) -> None:
    """Fences nested in list items keep their indentation on every line."""
    write_text(tmp_path / "a.js", "f();\n")
    doc: str = "- item\n\n  ```js\n  // a.js\n  ```\n"
    first: str = transform(doc, tmp_path / "README.md")
    assert first == "- item\n\n  ```js\n  // a.js\n  \n  f();\n  ```\n"
    assert transform(first, tmp_path / "README.md") == first


@mark_pipeline
def test_strip_embed_comment(tmp_path: Path) -> None:
    """With `strip_embed_comment`, the path comment is dropped on render."""
    write_text(tmp_path / "a.js", "f();\n")
    config = make_config(strip_embed_comment=True)
    result: DocumentResult = DocumentScanner(tmp_path / "README.md", config).scan(
        "```js\n// a.js\n```\n"
    )
    assert result.text == "```js\nf();\n```\n"
    assert describe(result.blocks[0].outcome) == (
        "Embedded 2 lines without comment line from file a.js"
    )


@mark_pipeline
def test_source_root_overrides_document_directory(tmp_path: Path) -> None:
    """With a source root, embed paths ignore the document location."""
    write_text(tmp_path / "examples" / "a.js", "fromRoot();\n")
    write_text(tmp_path / "docs" / "a.js", "fromDocs();\n")
    config = make_config(source_root=tmp_path / "examples")
    doc: str = "```js\n// a.js\n```"
    assert transform(doc, tmp_path / "docs" / "README.md", config) == (
        "```js\n// a.js\n\nfromRoot();\n```"
    )
    assert transform(doc, tmp_path / "docs" / "README.md") == "```js\n// a.js\n\nfromDocs();\n```"


_LINE_DOC: str = "# Title\n\n```js\n// a.js\n```\n\ntext\n\n```py\n# b.py\n```\n"


def _line_spans(tmp_path: Path, **overrides: bool) -> list[tuple[int, int]]:
    write_text(tmp_path / "a.js", "one();\ntwo();\n")
    write_text(tmp_path / "b.py", "x = 1\n")
    scanner = DocumentScanner(tmp_path / "README.md", make_config(**overrides))
    return [(r.start_line, r.end_line) for r in scanner.scan(_LINE_DOC).blocks]


@mark_pipeline
def test_line_numbers_in_write_mode_follow_output(tmp_path: Path) -> None:
    """In-place runs report lines of the document as it will be written."""
    assert _line_spans(tmp_path) == [(3, 8), (12, 16)]


@mark_pipeline
def test_line_numbers_in_read_only_modes_follow_input(tmp_path: Path) -> None:
    """Dry-run, stdout and verify runs report lines of the input document."""
    expected: list[tuple[int, int]] = [(3, 8), (9, 13)]
    assert _line_spans(tmp_path, dry_run=True) == expected
    assert _line_spans(tmp_path, stdout=True) == expected
    assert _line_spans(tmp_path, verify=True) == expected
