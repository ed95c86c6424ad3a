# topmark:header:start
#
#   project      : ApiMark
#   file         : errors.py
#   file_relpath : src/apimark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ApiMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from apimark.cli.exit_codes import ExitCode


class ApimarkError(click.ClickException):
    """Base class for all ApiMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ApimarkUsageError(ApimarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ApimarkConfigError(ApimarkError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ApimarkFileNotFoundError(ApimarkError):
    """Error when the reflection tree file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ApimarkIOError(ApimarkError):
    """Error for I/O errors writing output files."""

    exit_code = ExitCode.IO_ERROR


class ApimarkInputFormatError(ApimarkError):
    """Error for a reflection tree that cannot be decoded."""

    exit_code = ExitCode.INPUT_FORMAT_ERROR
