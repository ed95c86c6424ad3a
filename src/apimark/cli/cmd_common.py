# topmark:header:start
#
#   project      : ApiMark
#   file         : cmd_common.py
#   file_relpath : src/apimark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the generator commands.

They translate library-level failures into CLI errors with exit codes, build
the effective configuration, and print diagnostics through the console.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from apimark.cli.errors import (
    ApimarkConfigError,
    ApimarkFileNotFoundError,
    ApimarkInputFormatError,
    ApimarkIOError,
)
from apimark.config.io import ConfigLoadError
from apimark.config.logging import get_logger
from apimark.config.model import MutableConfig
from apimark.diagnostics import DiagnosticLevel
from apimark.reflection.loader import ReflectionLoadError, ReflectionNotFoundError

if TYPE_CHECKING:
    from apimark.cli.console import ClickConsole
    from apimark.config.logging import ApimarkLogger
    from apimark.config.model import Config
    from apimark.diagnostics import Diagnostic, DiagnosticLog

logger: ApimarkLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the root context."""
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` default, ``>0`` verbose)."""
    return int((ctx.obj or {}).get("verbosity_level", 0))


def build_config(ctx: click.Context, overrides: Mapping[str, Any]) -> Config:
    """Merge config files and CLI ``overrides`` into a frozen `Config`.

    Raises:
        ApimarkConfigError: If a config file is malformed or missing.
    """
    extra: str | None = (ctx.obj or {}).get("config_file")
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config=Path(extra) if extra else None,
            overrides=overrides,
        )
    except ConfigLoadError as exc:
        raise ApimarkConfigError(str(exc)) from exc
    return draft.freeze()


@contextmanager
def generation_errors() -> Iterator[None]:
    """Map loader and filesystem failures to CLI errors."""
    try:
        yield
    except ReflectionNotFoundError as exc:
        raise ApimarkFileNotFoundError(str(exc)) from exc
    except ReflectionLoadError as exc:
        raise ApimarkInputFormatError(str(exc)) from exc
    except OSError as exc:
        raise ApimarkIOError(f"Cannot write output: {exc}") from exc


def emit_diagnostics(
    console: ClickConsole,
    diagnostics: DiagnosticLog | tuple[Diagnostic, ...],
    *,
    verbosity: int,
) -> None:
    """Print diagnostics; warnings and infos are hidden in quiet mode."""
    emitters: dict[DiagnosticLevel, Callable[[str], None]] = {
        DiagnosticLevel.ERROR: console.error,
        DiagnosticLevel.WARNING: console.warn,
        DiagnosticLevel.INFO: console.print,
    }
    for diagnostic in diagnostics:
        if verbosity < 0 and diagnostic.level is not DiagnosticLevel.ERROR:
            continue
        if diagnostic.level is DiagnosticLevel.INFO and verbosity < 1:
            continue
        emitters[diagnostic.level](f"[{diagnostic.level.value}] {diagnostic.message}")
