# topmark:header:start
#
#   project      : ApiMark
#   file         : io.py
#   file_relpath : src/apimark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads ApiMark settings from on-disk TOML files (`apimark.toml`,
or the ``[tool.apimark]`` table of `pyproject.toml`). Parsing is done with
`tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from apimark.config.logging import get_logger
from apimark.constants import PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from apimark.config.logging import ApimarkLogger
    from apimark.diagnostics import DiagnosticLog

TomlTable = dict[str, Any]

logger: ApimarkLogger = get_logger(__name__)


class ConfigLoadError(Exception):
    """Raised when a configuration file exists but cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load configuration from {path}: {reason}")
        self.path = path
        self.reason = reason


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``apimark.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        logger.error("Cannot read TOML file %s: %s", path, exc)
        raise ConfigLoadError(path, str(exc)) from exc
    except TomlkitParseError as exc:
        logger.error("Invalid TOML in %s: %s", path, exc)
        raise ConfigLoadError(path, str(exc)) from exc

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_pyproject_table(data: TomlTable) -> TomlTable:
    """Return the ``[tool.apimark]`` table of a parsed `pyproject.toml` (or ``{}``)."""
    tool: Any = data.get("tool")
    if not isinstance(tool, dict):
        return {}
    table: Any = tool.get(PYPROJECT_TOOL_TABLE)
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def get_string_value_or_none(
    table: TomlTable,
    key: str,
    *,
    diagnostics: DiagnosticLog | None = None,
) -> str | None:
    """Extract an optional string value from a TOML table.

    A missing key yields ``None``. A present value of the wrong type is reported
    as a warning (logged and, when given, recorded in ``diagnostics``) and also
    yields ``None``.

    Args:
        table: Table to query.
        key: Key to extract.
        diagnostics: Optional log receiving a warning for malformed values.

    Returns:
        The string value, or ``None``.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    message: str = f"Ignoring non-string value for '{key}': {value!r}"
    logger.warning(message)
    if diagnostics is not None:
        diagnostics.add_warning(message)
    return None
