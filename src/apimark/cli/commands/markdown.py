# topmark:header:start
#
#   project      : ApiMark
#   file         : markdown.py
#   file_relpath : src/apimark/cli/commands/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ApiMark `markdown` command.

Renders one markdown page per documented type (with test badges) and the
``docs.html`` navigation page into the output directory.

Exit codes:
    0 on success; 4 when the reflection file is missing; 6 when it is not
    valid JSON; 5 when one or more pages could not be written (the remaining
    pages are still written).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apimark.cli.cmd_common import (
    build_config,
    emit_diagnostics,
    generation_errors,
    get_console,
    get_effective_verbosity,
)
from apimark.cli.errors import ApimarkIOError
from apimark.cli.options import infile_option, namespace_option
from apimark.config.logging import get_logger
from apimark.diagnostics import DiagnosticLog
from apimark.markdown.generate import generate_markdown

if TYPE_CHECKING:
    from apimark.cli.console import ClickConsole
    from apimark.config.logging import ApimarkLogger
    from apimark.config.model import Config
    from apimark.markdown.generate import MarkdownResult

logger: ApimarkLogger = get_logger(__name__)


@click.command(
    name="markdown",
    help="Generate markdown API pages and the docs.html navigation page.",
)
@infile_option
@click.option(
    "-t",
    "--testfile",
    type=click.Path(dir_okay=False),
    default=None,
    help="Test report file [default: test-report.json].",
)
@click.option(
    "-o",
    "--outdir",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory [default: docs].",
)
@namespace_option
@click.option(
    "--base-url",
    "base_url",
    type=str,
    default=None,
    help="Base URL used by the docs.html navigation links.",
)
def markdown_command(
    *,
    infile: str | None,
    testfile: str | None,
    outdir: str | None,
    namespace: str | None,
    base_url: str | None,
) -> None:
    """Generate the markdown documentation set."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config(
        ctx,
        {
            "infile": infile,
            "testfile": testfile,
            "outdir": outdir,
            "namespace": namespace,
            "base_url": base_url,
        },
    )
    emit_diagnostics(console, config.diagnostics, verbosity=vlevel)

    diagnostics = DiagnosticLog()
    with generation_errors():
        result: MarkdownResult = generate_markdown(config, diagnostics)
    emit_diagnostics(console, diagnostics, verbosity=vlevel)

    summary = result.summary
    if vlevel > 0:
        for path in summary.written:
            console.print(f"  wrote {path}")
    if vlevel >= 0:
        console.print(
            console.styled(
                f"Wrote {len(summary.written)} file(s) to {config.outdir}", fg="green"
            )
        )
    if summary.failed:
        raise ApimarkIOError(f"Could not write {len(summary.failed)} file(s).")
