# topmark:header:start
#
#   project      : FenceMark
#   file         : main.py
#   file_relpath : src/fencemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FenceMark command-line entry point.

Synchronizes fenced code blocks in one or more Markdown documents with the
source files they reference.

Examples:
  Update documents in place:

    $ fencemark README.md "docs/**/*.md"

  Fail in CI when a document is out of date:

    $ fencemark --verify README.md

  Print the transformed document instead of writing it:

    $ fencemark --stdout README.md > README.out.md
"""

from __future__ import annotations

from pathlib import Path

import click

from fencemark.api import FileResult, process_file, write_document
from fencemark.cli.console import ClickConsole
from fencemark.cli.emitters import display_path, emit_document_report, emit_summary
from fencemark.cli.errors import (
    FencemarkConfigError,
    FencemarkFileNotFoundError,
    FencemarkUsageError,
)
from fencemark.cli.exit_codes import ExitCode
from fencemark.config import Config, MutableConfig
from fencemark.config.io import ConfigParseError
from fencemark.config.logging import get_logger, setup_logging
from fencemark.constants import FENCEMARK_VERSION
from fencemark.file_resolver import resolve_file_list

logger = get_logger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def build_config(
    *,
    config_path: Path | None,
    no_config: bool,
    cli_args: dict[str, object],
) -> Config:
    """Merge defaults, the config file and CLI overrides into a frozen `Config`.

    Raises:
        FencemarkConfigError: If the config file cannot be parsed.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if not no_config:
        try:
            path: Path | None = config_path or MutableConfig.discover_local_config_file(
                Path.cwd()
            )
            loaded: MutableConfig | None = (
                MutableConfig.from_toml_file(path) if path is not None else None
            )
        except ConfigParseError as exc:
            raise FencemarkConfigError(str(exc)) from exc
        if loaded is not None:
            draft = draft.merge_with(loaded)
    return draft.apply_cli_args(cli_args).freeze()


@click.command(
    name="fencemark",
    context_settings=CONTEXT_SETTINGS,
    help="Embed source files into fenced code blocks of Markdown documents.",
    epilog="""\
A fence is synchronized when its first line is a comment naming a file, e.g.
'// ./src/app.js' or '# ./tool.py#L10-L20', or when it is preceded by
'<!-- embed-directive path/to/file -->'. Use
'<!-- embed-directive ignore-next -->' to leave the next fence alone.
""",
)
@click.argument("files", nargs=-1, required=True)
@click.option(
    "--verify",
    is_flag=True,
    help="Check that no fence would change; exit 2 on drift. Useful in CI.",
)
@click.option("--dry-run", is_flag=True, help="Run without writing results back to any files.")
@click.option(
    "--stdout",
    is_flag=True,
    help="Write the result to stdout instead of rewriting the document (single file only).",
)
@click.option("--silent", is_flag=True, help="No diagnostic output.")
@click.option(
    "--source-root",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory embed paths are resolved against (default: each document's directory).",
)
@click.option(
    "--strip-embed-comment",
    is_flag=True,
    help="Omit the path comment line from embedded fences.",
)
@click.option(
    "--exclude",
    "exclude_patterns",
    multiple=True,
    metavar="PATTERN",
    help="Gitignore-style pattern of documents to skip (repeatable).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of fencemark.toml/pyproject.toml.",
)
@click.option("--no-config", is_flag=True, help="Ignore configuration files.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.version_option(FENCEMARK_VERSION, "--version", prog_name="fencemark")
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    verify: bool,
    dry_run: bool,
    stdout: bool,
    silent: bool,
    source_root: str | None,
    strip_embed_comment: bool,
    exclude_patterns: tuple[str, ...],
    config_path: Path | None,
    no_config: bool,
    no_color: bool,
) -> None:
    """Entry point for the FenceMark CLI."""
    setup_logging()
    ctx.obj = ctx.obj or {}

    config: Config = build_config(
        config_path=config_path,
        no_config=no_config,
        cli_args={
            "verify": verify,
            "dry_run": dry_run,
            "stdout": stdout,
            "silent": silent,
            "source_root": source_root,
            "strip_embed_comment": strip_embed_comment,
            "exclude_patterns": exclude_patterns,
        },
    )
    logger.debug("Effective config: %s", config)

    console = ClickConsole(
        enable_color=not no_color,
        diagnostics_to_err=config.stdout,
        silent=config.silent,
    )
    ctx.obj["console"] = console

    paths: list[Path] = resolve_file_list(files, config.exclude_patterns)
    if not paths:
        raise FencemarkFileNotFoundError(f"No documents found matching: {' '.join(files)}")
    if config.stdout and len(paths) > 1:
        raise FencemarkUsageError(
            f"--stdout can only be used with a single document, got {len(paths)}"
        )

    failed: int = 0
    drifted: list[Path] = []
    changed: int = 0
    for path in paths:
        try:
            file_result: FileResult = process_file(path, config)
        except (OSError, UnicodeDecodeError) as exc:
            console.error(f"Cannot read {display_path(path)}: {exc}")
            failed += 1
            continue

        emit_document_report(console, path, file_result.result, verify=config.verify)
        if file_result.changed:
            changed += 1

        if config.verify:
            if file_result.changed:
                drifted.append(path)
        elif config.stdout:
            console.print(file_result.result.text, nl=False)
        elif file_result.changed and not config.dry_run:
            try:
                write_document(path, file_result.result.text)
            except OSError as exc:
                console.error(f"Cannot write {display_path(path)}: {exc}")
                failed += 1

    if not config.stdout:
        emit_summary(console, documents=len(paths), changed=changed, verify=config.verify)

    if failed:
        ctx.exit(ExitCode.FAILURE)
    if drifted:
        for path in drifted:
            console.error(f"Out of date: {display_path(path)}")
        ctx.exit(ExitCode.WOULD_CHANGE)
