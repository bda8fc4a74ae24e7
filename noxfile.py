# topmark:header:start
#
#   project      : FenceMark
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FenceMark project automation via Nox.

Sessions:
  - `lint`: Ruff lint on the whole tree.
  - `format_check`: Verify formatting with Ruff.
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s property_test`
"""

from __future__ import annotations

import nox

# Keep in sync with the classifiers in pyproject.toml.
PYTHONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]

DEV_EXTRAS: str = ".[test,dev]"


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("-e", DEV_EXTRAS)
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check code formatting."""
    session.install("-e", DEV_EXTRAS)
    session.run("ruff", "format", "--check", ".")


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.install("-e", DEV_EXTRAS)

    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    session.install("-e", DEV_EXTRAS)
    session.run("pytest", "-vv", "-m", "hypothesis_slow", "tests/pipeline")
