# topmark:header:start
#
#   project      : ApiMark
#   file         : test_version_command.py
#   file_relpath : tests/cli/test_version_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command and group help."""

from __future__ import annotations

from apimark.constants import APIMARK_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == APIMARK_VERSION


@mark_cli
def test_version_verbose() -> None:
    """With -v the version is labelled."""
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == f"ApiMark version {APIMARK_VERSION}"


@mark_cli
def test_no_command_shows_help() -> None:
    """Without a subcommand the group prints a hint and its help."""
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "apimark markdown" in result.output
    for command in ("markdown", "html", "version"):
        assert command in result.output


@mark_cli
def test_short_help_option() -> None:
    """``-h`` is an alias of ``--help``."""
    result = run_cli(["-h"])
    assert_SUCCESS(result)
    assert "Usage:" in result.output
