# topmark:header:start
#
#   project      : LineSort
#   file         : io.py
#   file_relpath : src/linesort/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

Parsing and rendering are done with `tomlkit`; parsed documents are returned as
plain ``dict`` structures. The value getters validate the expected shape and
record a warning in a `DiagnosticLog` when a user value is ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from linesort.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from linesort.config.logging import LinesortLogger
    from linesort.core.diagnostics import DiagnosticLog

logger: LinesortLogger = get_logger(__name__)

TomlTable = dict[str, Any]

#: Dedicated config file name (top-level tables).
LINESORT_TOML: Final[str] = "linesort.toml"
#: Project file name (``[tool.linesort]`` table).
PYPROJECT_TOML: Final[str] = "pyproject.toml"


def load_toml_dict(path: Path, diagnostics: DiagnosticLog | None = None) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``linesort.toml`` or ``pyproject.toml``).
        diagnostics (DiagnosticLog | None): Log receiving an error entry on failure.

    Returns:
        TomlTable: The parsed TOML content, or an empty dict on failure.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        message = f"Error loading TOML from {path}: {e}"
    except TomlkitParseError as e:
        message = f"Error decoding TOML from {path}: {e}"
    logger.error(message)
    if diagnostics is not None:
        diagnostics.add_error(message)
    return {}


def extract_linesort_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the LineSort section of a parsed document.

    ``pyproject.toml`` keeps its settings under ``[tool.linesort]``; any other
    file is a LineSort config file in its own right.

    Returns:
        TomlTable | None: The section, or ``None`` if ``pyproject.toml`` has none.
    """
    if path.name != PYPROJECT_TOML:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get("linesort") if isinstance(tool, Mapping) else None
    if not isinstance(section, dict):
        logger.debug("[tool.linesort] section missing in %s", path)
        return None
    return cast("TomlTable", section)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` (an empty dict when missing or not a table)."""
    value: Any = table.get(key)
    return cast("TomlTable", value) if isinstance(value, dict) else {}


def get_string_value_checked(
    table: TomlTable, key: str, *, where: str, diagnostics: DiagnosticLog
) -> str | None:
    """Return ``table[key]`` if it is a string, else None (recording a warning)."""
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    message = f"{where}.{key}: expected a string, got {type(value).__name__} (ignored)"
    logger.warning(message)
    diagnostics.add_warning(message)
    return None


def get_bool_value_checked(
    table: TomlTable, key: str, *, where: str, diagnostics: DiagnosticLog
) -> bool | None:
    """Return ``table[key]`` if it is a bool, else None (recording a warning)."""
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    message = f"{where}.{key}: expected a boolean, got {type(value).__name__} (ignored)"
    logger.warning(message)
    diagnostics.add_warning(message)
    return None


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists (TOML has no ``null``)."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return tomlkit.dumps(cast("Mapping[str, Any]", cleaned))
