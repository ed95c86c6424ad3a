# topmark:header:start
#
#   project      : ApiMark
#   file         : html.py
#   file_relpath : src/apimark/cli/commands/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ApiMark `html` command.

Renders the whole API as a single HTML page with YAML front matter.
Test results are merged only when ``--testfile`` (or the ``testfile``
config key) is given.
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
from apimark.cli.options import infile_option, namespace_option
from apimark.diagnostics import DiagnosticLog
from apimark.transform.generate import generate_html

if TYPE_CHECKING:
    from apimark.cli.console import ClickConsole
    from apimark.config.model import Config
    from apimark.transform.generate import HtmlResult


@click.command(
    name="html",
    help="Generate a single HTML API page.",
)
@infile_option
@click.option(
    "-t",
    "--testfile",
    type=click.Path(dir_okay=False),
    default=None,
    help="Test report file; test results are omitted when not given.",
)
@click.option(
    "-o",
    "--outfile",
    type=click.Path(),
    default=None,
    help="Output file, or a directory to write api.html into [default: .].",
)
@namespace_option
def html_command(
    *,
    infile: str | None,
    testfile: str | None,
    outfile: str | None,
    namespace: str | None,
) -> None:
    """Generate the HTML API page."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config(
        ctx,
        {
            "infile": infile,
            "testfile": testfile,
            "outfile": outfile,
            "namespace": namespace,
        },
    )
    emit_diagnostics(console, config.diagnostics, verbosity=vlevel)

    diagnostics = DiagnosticLog()
    with generation_errors():
        result: HtmlResult = generate_html(config, diagnostics)
    emit_diagnostics(console, diagnostics, verbosity=vlevel)

    if vlevel > 0:
        for doc_type in result.types:
            console.print(f"  {doc_type.category.value:<9} {doc_type.name}")
        console.print(f"  merged {result.merged} test result(s)")
    if vlevel >= 0:
        console.print(
            console.styled(
                f"Wrote {len(result.types)} type(s) to {result.path}", fg="green"
            )
        )
