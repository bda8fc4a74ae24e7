# topmark:header:start
#
#   project      : FenceMark
#   file         : api.py
#   file_relpath : src/fencemark/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public FenceMark API (stable surface).

Thin, typed wrappers around `fencemark.pipeline.scanner` for integrations that
want to synchronize documents without going through the CLI.

Configuration contract
----------------------
Functions accept either a frozen `fencemark.config.Config` or a plain mapping
using the CLI parameter names (``source_root``, ``strip_embed_comment``,
``dry_run``, ``stdout``, ``verify``, ``silent``):

```python
from fencemark import api

text = api.transform(doc, "README.md", config={"source_root": "examples"})
```

Nothing in this module writes files; `process_file` only reads and reports.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fencemark.config import Config, MutableConfig
from fencemark.config.logging import FencemarkLogger, get_logger
from fencemark.pipeline.outcomes import DocumentResult
from fencemark.pipeline.scanner import DocumentScanner

logger: FencemarkLogger = get_logger(__name__)

ConfigLike = Config | Mapping[str, Any] | None


@dataclass(frozen=True)
class FileResult:
    """Result of processing one document on disk.

    Attributes:
        path (Path): The document.
        original (str): Contents as read (native newlines preserved).
        result (DocumentResult): The transformed document and block reports.
    """

    path: Path
    original: str
    result: DocumentResult

    @property
    def changed(self) -> bool:
        """Whether the transformed text differs from the original."""
        return self.result.text != self.original


def ensure_config(config: ConfigLike) -> Config:
    """Normalize a `Config`, mapping or ``None`` into a frozen `Config`."""
    if isinstance(config, Config):
        return config
    draft: MutableConfig = MutableConfig.from_defaults()
    if config:
        draft.apply_cli_args(config)
    return draft.freeze()


def scan(source_text: str, document_path: Path | str, config: ConfigLike = None) -> DocumentResult:
    """Transform a document and return per-fence reports.

    Args:
        source_text (str): The document contents.
        document_path (Path | str): Path of the document.
        config (ConfigLike): Run options.

    Returns:
        DocumentResult: The output text plus one `BlockReport` per fence.
    """
    return DocumentScanner(document_path, ensure_config(config)).scan(source_text)


def transform(source_text: str, document_path: Path | str, config: ConfigLike = None) -> str:
    """Return the document with every embeddable fence synchronized.

    Args:
        source_text (str): The document contents.
        document_path (Path | str): Path of the document.
        config (ConfigLike): Run options.

    Returns:
        str: The transformed document.
    """
    return scan(source_text, document_path, config).text


def read_document(path: Path) -> str:
    """Read a document as UTF-8 text, preserving its native newlines."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def write_document(path: Path, text: str) -> None:
    """Write a document as UTF-8 text without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


def process_file(path: Path | str, config: ConfigLike = None) -> FileResult:
    """Read and transform a document on disk without writing it.

    Args:
        path (Path | str): The document.
        config (ConfigLike): Run options.

    Returns:
        FileResult: The original text and the transformation result.

    Raises:
        OSError: If the document cannot be read.
        UnicodeDecodeError: If the document is not valid UTF-8.
    """
    doc_path = Path(path)
    original: str = read_document(doc_path)
    logger.debug("Processing %s", doc_path)
    return FileResult(path=doc_path, original=original, result=scan(original, doc_path, config))
