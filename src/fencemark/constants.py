# topmark:header:start
#
#   project      : FenceMark
#   file         : constants.py
#   file_relpath : src/fencemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FenceMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    FENCEMARK_VERSION: str = get_version("fencemark")
except PackageNotFoundError:  # running from a source checkout
    FENCEMARK_VERSION = "0.0.0"

# Markdown code fence delimiter
FENCE: str = "```"

# Keyword used by document-level directives (`<!-- embed-directive path -->`).
DIRECTIVE_KEYWORD: str = "embed-directive"
# Keyword accepted for compatibility with documents written for `embedme`.
LEGACY_DIRECTIVE_KEYWORD: str = "embedme"

# Config file names looked up in the current working directory
FENCEMARK_TOML_NAME: str = "fencemark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Environment variable controlling the internal log level
LOG_LEVEL_ENV_VAR: str = "FENCEMARK_LOG_LEVEL"
