# topmark:header:start
#
#   project      : ApiMark
#   file         : loader.py
#   file_relpath : src/apimark/reflection/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read the generator inputs.

Two inputs are read with different failure policies:

- the reflection tree (``type-info.json``) is required: a missing or malformed
  file raises `ReflectionLoadError` and aborts the run;
- the test report (``test-report.json``) is optional: a missing or malformed
  file is reported as a warning and generation continues without test data.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from apimark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from apimark.config.logging import ApimarkLogger
    from apimark.diagnostics import DiagnosticLog
    from apimark.reflection.model import Node

logger: ApimarkLogger = get_logger(__name__)


class ReflectionLoadError(Exception):
    """Raised when the reflection tree cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load type information from {path}: {reason}")
        self.path = path
        self.reason = reason


class ReflectionNotFoundError(ReflectionLoadError):
    """Raised when the reflection tree file does not exist."""


def load_type_info(path: Path) -> Node:
    """Load the reflection tree from ``path``.

    Args:
        path: Location of the JSON reflection tree.

    Returns:
        The decoded root node.

    Raises:
        ReflectionNotFoundError: If the file does not exist.
        ReflectionLoadError: If the file cannot be read, is not JSON, or its root
            is not an object.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ReflectionNotFoundError(path, "file not found") from exc
    except OSError as exc:
        raise ReflectionLoadError(path, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ReflectionLoadError(path, f"not UTF-8 text ({exc})") from exc

    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReflectionLoadError(path, f"invalid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise ReflectionLoadError(path, "the root value is not a JSON object")
    logger.debug("Loaded type information from %s", path)
    return data


def load_test_report(path: Path, diagnostics: DiagnosticLog) -> dict[str, Any] | None:
    """Load the test report from ``path``, or return ``None`` when it is unusable.

    A missing, unreadable or malformed report never fails the run: a warning is
    logged and recorded in ``diagnostics``.

    Args:
        path: Location of the JSON test report.
        diagnostics: Receives a warning when the report cannot be used.

    Returns:
        The report mapping, or ``None``.
    """
    if not path.is_file():
        message: str = (
            f"Could not find test report {path}, generating documentation without test data"
        )
        logger.warning(message)
        diagnostics.add_warning(message)
        return None

    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        message = (
            f"Could not read test report {path} ({exc}), "
            "generating documentation without test data"
        )
        logger.warning(message)
        diagnostics.add_warning(message)
        return None

    if not isinstance(data, dict):
        message = (
            f"Test report {path} is not a JSON object, "
            "generating documentation without test data"
        )
        logger.warning(message)
        diagnostics.add_warning(message)
        return None
    logger.debug("Loaded %d test report entries from %s", len(data), path)
    return data
