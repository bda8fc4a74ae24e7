# topmark:header:start
#
#   project      : FenceMark
#   file         : file_resolver.py
#   file_relpath : src/fencemark/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the documents FenceMark should process.

Positional arguments are literal files, directories (searched recursively for
Markdown files) or glob patterns (``**`` supported), expanded relative to the
current working directory. Exclude patterns use gitignore semantics and are
matched against cwd-relative POSIX paths. The result is a sorted, de-duplicated
list of files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from fencemark.config.logging import FencemarkLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: FencemarkLogger = get_logger(__name__)

_GLOB_CHARS: tuple[str, ...] = ("*", "?", "[")
_MARKDOWN_GLOB: str = "*.md"


def _is_glob(pattern: str) -> bool:
    return any(ch in pattern for ch in _GLOB_CHARS)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def expand_pattern(pattern: str) -> list[Path]:
    """Expand one positional argument into candidate files.

    Args:
        pattern (str): A file, a directory or a glob pattern.

    Returns:
        list[Path]: The matching files (possibly empty).
    """
    if _is_glob(pattern):
        path = Path(pattern)
        if path.is_absolute():
            anchor = Path(path.anchor)
            matches = anchor.glob(str(path.relative_to(anchor)))
        else:
            matches = Path(".").glob(pattern)
        return [p for p in matches if p.is_file()]
    path = Path(pattern)
    if path.is_dir():
        return [p for p in path.rglob(_MARKDOWN_GLOB) if p.is_file()]
    if path.is_file():
        return [path]
    return []


def resolve_file_list(
    patterns: Iterable[str],
    exclude_patterns: Iterable[str] = (),
    *,
    base: Path | None = None,
) -> list[Path]:
    """Return the sorted list of documents to process.

    Args:
        patterns (Iterable[str]): Positional files, directories or globs.
        exclude_patterns (Iterable[str]): Gitignore-style exclusions.
        base (Path | None): Directory exclusions are evaluated against
            (defaults to the current working directory).

    Returns:
        list[Path]: Sorted, de-duplicated files that survived exclusion.
    """
    root: Path = base or Path.cwd()
    candidates: set[Path] = set()
    for pattern in patterns:
        expanded: list[Path] = expand_pattern(pattern)
        if not expanded:
            logger.warning("No matches for: %s", pattern)
        candidates.update(expanded)

    excludes: list[str] = list(exclude_patterns)
    if excludes:
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, excludes)
        before: int = len(candidates)
        candidates = {p for p in candidates if not spec.match_file(_rel_for_match(p, root))}
        logger.debug("Excluded %d file(s) via %s", before - len(candidates), excludes)

    return sorted(candidates)
