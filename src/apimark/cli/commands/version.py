# topmark:header:start
#
#   project      : ApiMark
#   file         : version.py
#   file_relpath : src/apimark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ApiMark `version` command.

Prints the current ApiMark version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apimark.cli.cmd_common import get_console, get_effective_verbosity
from apimark.constants import APIMARK_VERSION

if TYPE_CHECKING:
    from apimark.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of ApiMark.",
)
def version_command() -> None:
    """Show the current version of ApiMark."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled(f"ApiMark version {APIMARK_VERSION}", bold=True))
    else:
        console.print(APIMARK_VERSION)
