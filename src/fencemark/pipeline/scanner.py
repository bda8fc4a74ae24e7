# topmark:header:start
#
#   project      : FenceMark
#   file         : scanner.py
#   file_relpath : src/fencemark/pipeline/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document scanner: thread every fence of a document through the pipeline.

For each fence, left to right, the scanner:

1. reads document-level directives from the literal text since the previous fence,
2. resolves the fence's directive (`fencemark.pipeline.directive`),
3. extracts the snippet (`fencemark.pipeline.extractor`),
4. renders and compares the replacement (`fencemark.pipeline.renderer`),

and concatenates untouched text with the resulting block text. Any
`BlockSkipped` raised by a stage leaves only that fence unchanged.

Diagnostic line numbers depend on the run mode: read-only runs (dry-run,
stdout, verify) report lines of the *input* document; in-place runs report
lines of the *output* document, since earlier replacements may shift them.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fencemark.config import Config, MutableConfig
from fencemark.config.logging import get_logger
from fencemark.pipeline.directive import read_preceding_directive, resolve_directive
from fencemark.pipeline.extractor import extract_snippet
from fencemark.pipeline.fence import detect_line_ending, iter_fences, line_number_at_end
from fencemark.pipeline.outcomes import (
    BlockReport,
    BlockSkipped,
    DocumentResult,
    ReplacementOutcome,
)
from fencemark.pipeline.renderer import render_replacement

if TYPE_CHECKING:
    from fencemark.config.logging import FencemarkLogger
    from fencemark.pipeline.directive import EmbedDirective
    from fencemark.pipeline.extractor import Snippet
    from fencemark.pipeline.fence import FenceBlock

logger: FencemarkLogger = get_logger(__name__)


class DocumentScanner:
    """Transform one document.

    The scanner holds no state between calls to `scan`; one instance may be
    reused for several texts of the same document path.

    Args:
        document_path (Path | str): Path of the document (used to resolve
            relative embed paths when no source root is configured).
        config (Config | None): Run options; defaults when ``None``.
    """

    def __init__(self, document_path: Path | str, config: Config | None = None) -> None:
        self.document_path = Path(document_path)
        self.config: Config = config or MutableConfig.from_defaults().freeze()

    def process_block(
        self,
        block: FenceBlock,
        preceding_text: str,
        line_ending: str,
    ) -> ReplacementOutcome:
        """Run a single fence through directive, extraction and rendering.

        Args:
            block (FenceBlock): The fence.
            preceding_text (str): Literal text between the previous fence and this one.
            line_ending (str): The document's line ending.

        Returns:
            ReplacementOutcome: The block outcome; never raises `BlockSkipped`.
        """
        try:
            directive: EmbedDirective = resolve_directive(
                block, read_preceding_directive(preceding_text)
            )
            snippet: Snippet = extract_snippet(
                directive,
                document_path=self.document_path,
                source_root=self.config.source_root,
                line_ending=line_ending,
            )
        except BlockSkipped as exc:
            logger.debug("Block at offset %d left unchanged: %s", block.offset, exc.status.value)
            return ReplacementOutcome.skipped(exc, text=block.raw_text, extension=block.extension)
        return render_replacement(
            block,
            directive,
            snippet,
            line_ending=line_ending,
            strip_embed_comment=self.config.strip_embed_comment,
        )

    def scan(self, source_text: str) -> DocumentResult:
        """Transform ``source_text`` and report on every fence.

        Args:
            source_text (str): The document contents.

        Returns:
            DocumentResult: The output document and one report per fence.
        """
        line_ending: str = detect_line_ending(source_text)
        logger.debug(
            "Scanning %s (line ending %r, write mode %s)",
            self.document_path,
            line_ending,
            self.config.write_mode,
        )

        parts: list[str] = []
        reports: list[BlockReport] = []
        previous_end: int = 0
        for block in iter_fences(source_text, line_ending):
            preceding: str = source_text[previous_end : block.offset]

            if self.config.write_mode:
                start_line: int = line_number_at_end("".join(parts) + preceding, line_ending)
            else:
                start_line = line_number_at_end(source_text[: block.offset], line_ending)

            outcome: ReplacementOutcome = self.process_block(block, preceding, line_ending)
            end_line: int = start_line + outcome.text.count(line_ending)
            reports.append(BlockReport(start_line=start_line, end_line=end_line, outcome=outcome))

            parts.append(preceding)
            parts.append(outcome.text)
            previous_end = block.end

        parts.append(source_text[previous_end:])
        return DocumentResult(
            text="".join(parts),
            line_ending=line_ending,
            blocks=tuple(reports),
        )


def transform(source_text: str, document_path: Path | str, config: Config | None = None) -> str:
    """Return ``source_text`` with every embeddable fence synchronized.

    Args:
        source_text (str): The document contents.
        document_path (Path | str): Path of the document.
        config (Config | None): Run options; defaults when ``None``.

    Returns:
        str: The transformed document (identical to the input when nothing changed).
    """
    return DocumentScanner(document_path, config).scan(source_text).text
