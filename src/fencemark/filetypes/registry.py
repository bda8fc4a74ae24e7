# topmark:header:start
#
#   project      : FenceMark
#   file         : registry.py
#   file_relpath : src/fencemark/filetypes/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of fence extension tags and their comment families.

The set of supported extension tags is closed: a fence tagged with anything not
listed in `SupportedFileType` is left alone. Each supported tag belongs to
exactly one `CommentFamily`, which decides how the path directive is read from
the first line of the fence.

Notes:
    * The partition table is validated and indexed once at import time; the
      resulting lookup is exposed as a read-only `MappingProxyType`.
    * A tag that is supported but missing from every family bucket resolves to
      ``None`` in `comment_family_of`. Callers report that as an internal
      configuration error, distinct from an unsupported tag.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from fencemark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fencemark.config.logging import FencemarkLogger

logger: FencemarkLogger = get_logger(__name__)


class SupportedFileType(str, Enum):
    """Extension tags recognized after an opening fence (e.g. ```` ```py ````)."""

    PLAIN_TEXT = "txt"
    TYPESCRIPT = "ts"
    JAVASCRIPT = "js"
    REASON = "re"
    SCSS = "scss"
    RUST = "rust"
    JAVA = "java"
    CPP = "cpp"
    C = "c"
    HTML = "html"
    XML = "xml"
    MARKDOWN = "md"
    YAML = "yaml"
    JSON = "json"
    JSON_5 = "json5"
    PYTHON = "py"
    BASH = "bash"
    SHELL = "sh"
    GOLANG = "go"
    OBJECTIVE_C = "objectivec"
    PHP = "php"
    C_SHARP = "cs"
    SWIFT = "swift"
    RUBY = "rb"
    KOTLIN = "kotlin"
    SCALA = "scala"
    CRYSTAL = "cr"
    PLANT_UML = "puml"
    MERMAID = "mermaid"
    CMAKE = "cmake"
    PROTOBUF = "proto"
    SQL = "sql"
    HASKELL = "hs"
    ARDUINO = "ino"
    JSX = "jsx"
    TSX = "tsx"


class CommentFamily(Enum):
    """Single-line comment syntax families.

    Attributes:
        NONE: The language has no comment syntax (paths only via an override directive).
        C: ``// path``
        XML: ``<!-- path -->``
        HASH: ``# path``
        SINGLE_QUOTE: ``' path``
        DOUBLE_PERCENT: ``%% path``
        DOUBLE_HYPHENS: ``-- path``
    """

    NONE = "none"
    C = "c"
    XML = "xml"
    HASH = "hash"
    SINGLE_QUOTE = "single-quote"
    DOUBLE_PERCENT = "double-percent"
    DOUBLE_HYPHENS = "double-hyphens"


FAMILY_MEMBERS: Final[Mapping[CommentFamily, tuple[SupportedFileType, ...]]] = MappingProxyType(
    {
        CommentFamily.NONE: (SupportedFileType.JSON,),
        CommentFamily.C: (
            SupportedFileType.PLAIN_TEXT,
            SupportedFileType.C,
            SupportedFileType.TYPESCRIPT,
            SupportedFileType.REASON,
            SupportedFileType.JAVASCRIPT,
            SupportedFileType.RUST,
            SupportedFileType.CPP,
            SupportedFileType.JAVA,
            SupportedFileType.GOLANG,
            SupportedFileType.OBJECTIVE_C,
            SupportedFileType.SCSS,
            SupportedFileType.PHP,
            SupportedFileType.C_SHARP,
            SupportedFileType.SWIFT,
            SupportedFileType.KOTLIN,
            SupportedFileType.SCALA,
            SupportedFileType.JSON_5,
            SupportedFileType.PROTOBUF,
            SupportedFileType.ARDUINO,
            SupportedFileType.JSX,
            SupportedFileType.TSX,
        ),
        CommentFamily.XML: (
            SupportedFileType.HTML,
            SupportedFileType.MARKDOWN,
            SupportedFileType.XML,
        ),
        CommentFamily.HASH: (
            SupportedFileType.PYTHON,
            SupportedFileType.BASH,
            SupportedFileType.SHELL,
            SupportedFileType.YAML,
            SupportedFileType.RUBY,
            SupportedFileType.CRYSTAL,
            SupportedFileType.CMAKE,
        ),
        CommentFamily.SINGLE_QUOTE: (SupportedFileType.PLANT_UML,),
        CommentFamily.DOUBLE_PERCENT: (SupportedFileType.MERMAID,),
        CommentFamily.DOUBLE_HYPHENS: (SupportedFileType.SQL, SupportedFileType.HASKELL),
    }
)


class RegistryConsistencyError(RuntimeError):
    """Raised when the family table assigns one extension tag to two families."""


def build_family_index(
    members: Mapping[CommentFamily, tuple[SupportedFileType, ...]],
) -> dict[str, CommentFamily]:
    """Invert the family table into an extension-tag → family index.

    Args:
        members (Mapping[CommentFamily, tuple[SupportedFileType, ...]]): Family buckets.

    Returns:
        dict[str, CommentFamily]: Index keyed by extension tag value.

    Raises:
        RegistryConsistencyError: If a tag appears in more than one bucket.
    """
    index: dict[str, CommentFamily] = {}
    for family, file_types in members.items():
        for file_type in file_types:
            previous: CommentFamily | None = index.get(file_type.value)
            if previous is not None and previous is not family:
                raise RegistryConsistencyError(
                    f"Extension '{file_type.value}' is listed under both "
                    f"{previous.name} and {family.name}"
                )
            index[file_type.value] = family
    return index


_SUPPORTED: Final[tuple[str, ...]] = tuple(ft.value for ft in SupportedFileType)
_FAMILY_BY_EXTENSION: Final[Mapping[str, CommentFamily]] = MappingProxyType(
    build_family_index(FAMILY_MEMBERS)
)

for _tag in sorted(set(_SUPPORTED) - set(_FAMILY_BY_EXTENSION)):
    logger.warning("Supported extension '%s' has no comment family", _tag)


def supported_extensions() -> tuple[str, ...]:
    """Return every supported extension tag, in declaration order."""
    return _SUPPORTED


def is_supported(extension: str) -> bool:
    """Return True if ``extension`` is a supported fence tag."""
    return extension in _SUPPORTED


def comment_family_of(extension: str) -> CommentFamily | None:
    """Return the comment family for a supported extension tag.

    Args:
        extension (str): The fence extension tag (e.g. ``"py"``).

    Returns:
        CommentFamily | None: The family, or ``None`` if the tag is not indexed.
    """
    return _FAMILY_BY_EXTENSION.get(extension)


class FileTypeRegistry:
    """Read-only facade over the extension/comment-family table."""

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all supported extension tags (sorted)."""
        return tuple(sorted(_SUPPORTED))

    @classmethod
    def as_mapping(cls) -> Mapping[str, CommentFamily]:
        """Return the extension → family index as a read-only mapping."""
        return _FAMILY_BY_EXTENSION

    @classmethod
    def extensions_of(cls, family: CommentFamily) -> tuple[str, ...]:
        """Return the extension tags belonging to ``family``."""
        return tuple(ft.value for ft in FAMILY_MEMBERS.get(family, ()))
