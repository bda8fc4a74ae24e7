# topmark:header:start
#
#   project      : FenceMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FenceMark test suite.

Sets up global fixtures and TRACE-level logging for test runs, and provides
small helpers to build configs and write fixture files with exact newlines.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from fencemark.config import Config, MutableConfig, logging
from fencemark.constants import LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


@pytest.fixture(autouse=True)
def silence_fencemark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failing tests show the full pipeline trace."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_text(path: Path, content: str) -> Path:
    """Write ``content`` to ``path`` verbatim (no newline translation)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    return path


def read_text(path: Path) -> str:
    """Read ``path`` verbatim (no newline translation)."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and attribute overrides."""
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an isolated project directory.

    Returns:
        Path: The temporary working directory (``tmp_path / "proj"``).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
