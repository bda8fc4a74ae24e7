# topmark:header:start
#
#   project      : FenceMark
#   file         : __init__.py
#   file_relpath : src/fencemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration management for FenceMark.

Run options are collected in a `MutableConfig` builder (defaults, a discovered
``fencemark.toml`` / ``pyproject.toml``, then CLI overrides) and frozen into an
immutable `Config` snapshot that the engine consumes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fencemark.config.io import (
    extract_fencemark_table,
    get_bool_value_or_none,
    get_string_list,
    get_string_value_or_none,
    load_toml_dict,
)
from fencemark.config.logging import FencemarkLogger, get_logger
from fencemark.constants import FENCEMARK_TOML_NAME, PYPROJECT_TOML_NAME

# ArgsLike: generic mapping accepted by config loaders (CLI parameters or API dicts).
ArgsLike = Mapping[str, Any]

logger: FencemarkLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for a FenceMark run.

    Attributes:
        source_root (Path | None): Base directory for resolving embed paths. When
            ``None``, paths resolve against the directory of the processed document.
        strip_embed_comment (bool): Omit the first-line comment from rendered fences.
        dry_run (bool): Never write documents back.
        stdout (bool): Emit the transformed document on stdout instead of writing it.
        verify (bool): Report drift without writing (non-zero exit on drift).
        silent (bool): Suppress per-fence diagnostics.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns removed from the
            discovered input documents.
        config_files (tuple[Path | str, ...]): Provenance of the merged settings.
    """

    source_root: Path | None
    strip_embed_comment: bool
    dry_run: bool
    stdout: bool
    verify: bool
    silent: bool
    exclude_patterns: tuple[str, ...]
    config_files: tuple[Path | str, ...]

    @property
    def write_mode(self) -> bool:
        """Whether documents will be written back in place."""
        return not (self.dry_run or self.stdout or self.verify)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            source_root=self.source_root,
            strip_embed_comment=self.strip_embed_comment,
            dry_run=self.dry_run,
            stdout=self.stdout,
            verify=self.verify,
            silent=self.silent,
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` on a boolean field means "inherit"; `freeze` maps it to ``False``.
    """

    source_root: Path | None = None
    strip_embed_comment: bool | None = None
    dry_run: bool | None = None
    stdout: bool | None = None
    verify: bool | None = None
    silent: bool | None = None
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze the draft into an immutable `Config` snapshot."""
        return Config(
            source_root=self.source_root,
            strip_embed_comment=bool(self.strip_embed_comment),
            dry_run=bool(self.dry_run),
            stdout=bool(self.stdout),
            verify=bool(self.verify),
            silent=bool(self.silent),
            exclude_patterns=tuple(self.exclude_patterns),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding FenceMark's built-in defaults."""
        return cls(
            strip_embed_comment=False,
            dry_run=False,
            stdout=False,
            verify=False,
            silent=False,
        )

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any], *, config_file: Path | None) -> MutableConfig:
        """Build a draft from a FenceMark settings table.

        A relative ``source-root`` is resolved against the directory holding
        ``config_file`` (or the current working directory when ``None``).

        Args:
            data (Mapping[str, Any]): The settings table.
            config_file (Path | None): The file the table came from.

        Returns:
            MutableConfig: The populated draft.
        """
        table: dict[str, Any] = dict(data)
        draft = cls(
            strip_embed_comment=get_bool_value_or_none(table, "strip-embed-comment"),
            exclude_patterns=get_string_list(table, "exclude"),
        )
        source_root: str | None = get_string_value_or_none(table, "source-root")
        if source_root is not None:
            base: Path = config_file.parent if config_file is not None else Path.cwd()
            draft.source_root = (base / source_root).resolve()
        unknown: set[str] = set(table) - {"strip-embed-comment", "exclude", "source-root"}
        for key in sorted(unknown):
            logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Args:
            path (Path): Path to ``fencemark.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The draft, or ``None`` when a ``pyproject.toml``
                carries no ``[tool.fencemark]`` section.

        Raises:
            ConfigParseError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table = extract_fencemark_table(path, load_toml_dict(path))
        if table is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(table, config_file=path)
        draft.config_files = [path]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_file(cls, start: Path) -> Path | None:
        """Return the config file that applies to the directory ``start``.

        ``fencemark.toml`` wins over a ``pyproject.toml`` in the same directory;
        a ``pyproject.toml`` only counts when it has a ``[tool.fencemark]`` table
        (in any TOML spelling: section, dotted keys or inline table).

        Raises:
            ConfigParseError: If the ``pyproject.toml`` cannot be read or parsed.
        """
        fencemark_toml: Path = start / FENCEMARK_TOML_NAME
        if fencemark_toml.is_file():
            return fencemark_toml
        pyproject: Path = start / PYPROJECT_TOML_NAME
        if not pyproject.is_file():
            return None
        if extract_fencemark_table(pyproject, load_toml_dict(pyproject)) is None:
            return None
        return pyproject

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values from ``other`` override this draft."""
        return MutableConfig(
            source_root=other.source_root if other.source_root is not None else self.source_root,
            strip_embed_comment=other.strip_embed_comment
            if other.strip_embed_comment is not None
            else self.strip_embed_comment,
            dry_run=other.dry_run if other.dry_run is not None else self.dry_run,
            stdout=other.stdout if other.stdout is not None else self.stdout,
            verify=other.verify if other.verify is not None else self.verify,
            silent=other.silent if other.silent is not None else self.silent,
            exclude_patterns=self.exclude_patterns + other.exclude_patterns,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Flags are only applied when truthy so an unset CLI flag never overrides a
        value from a config file. ``source_root`` is resolved against the current
        working directory.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append("<CLI overrides>")

        for key in ("strip_embed_comment", "dry_run", "stdout", "verify", "silent"):
            if args.get(key):
                setattr(self, key, True)
        source_root: str | None = args.get("source_root")
        if source_root:
            self.source_root = Path(source_root).resolve()
        self.exclude_patterns.extend(args.get("exclude_patterns") or ())
        return self
