# topmark:header:start
#
#   project      : ApiMark
#   file         : main.py
#   file_relpath : src/apimark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ApiMark command-line entry point.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- Subcommands build their configuration from config files and their own options.
"""

from __future__ import annotations

import click

from apimark.cli.commands.html import html_command
from apimark.cli.commands.markdown import markdown_command
from apimark.cli.commands.version import version_command
from apimark.cli.console import ClickConsole
from apimark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from apimark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: str | None,
) -> None:
    """Initialize shared state (verbosity, color and config file) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (str | None): Extra config file passed with ``--config``.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_file"] = config_file


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ApiMark: API documentation from TypeDoc reflection data and test reports.",
)
@common_verbose_options
@common_color_options
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Extra TOML config file, merged after pyproject.toml and apimark.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: str | None,
) -> None:
    """Entry point for the ApiMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_file=config_file,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'apimark markdown' or 'apimark html' to generate docs.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(markdown_command)

cli.add_command(html_command)

if __name__ == "__main__":
    cli()
