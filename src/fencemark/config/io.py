# topmark:header:start
#
#   project      : FenceMark
#   file         : io.py
#   file_relpath : src/fencemark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

FenceMark reads its settings from ``fencemark.toml`` (top-level keys) or from the
``[tool.fencemark]`` table of ``pyproject.toml``. Parsing is done with `tomlkit`
and returned as plain `dict` structures; the typed getters below coerce values
the way the config layer expects them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from fencemark.config.logging import get_logger
from fencemark.constants import PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from fencemark.config.logging import FencemarkLogger

TomlTable = dict[str, Any]

logger: FencemarkLogger = get_logger(__name__)


class ConfigParseError(ValueError):
    """Raised when a configuration file exists but cannot be parsed.

    Attributes:
        path (Path): The offending configuration file.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot parse configuration file {path}: {reason}")
        self.path = path


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigParseError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigParseError(path, str(e)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigParseError(path, str(e)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_fencemark_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the FenceMark settings table from a parsed config document.

    For ``pyproject.toml`` this is ``[tool.fencemark]``; any other file is taken
    to hold the settings at the top level.

    Args:
        path (Path): The path the document was loaded from.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable | None: The settings table, or ``None`` when a ``pyproject.toml``
            has no ``[tool.fencemark]`` section.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get("fencemark") if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.fencemark] section in %s", path)
        return None
    return cast("TomlTable", section)


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for '%s', got %r; ignoring", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Integers are coerced via ``bool(value)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.warning("Expected a boolean for '%s', got %r; ignoring", key, value)
    return None


def get_string_list(table: TomlTable, key: str) -> list[str]:
    """Extract a list of strings from a TOML table.

    Non-string items are dropped with a warning.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[str]: The string items, or an empty list when absent or not a list.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Expected a list for '%s', got %r; ignoring", key, value)
        return []
    items: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            items.append(item)
        else:
            logger.warning("Ignoring non-string entry %r in '%s'", item, key)
    return items
