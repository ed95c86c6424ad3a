# topmark:header:start
#
#   project      : ApiMark
#   file         : test_generate_commands.py
#   file_relpath : tests/cli/test_generate_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `markdown` and `html` commands, including exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from apimark.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_markdown_defaults(project_dir: Path) -> None:
    """Default locations are resolved against the working directory."""
    result = run_cli_in(project_dir, ["--no-color", "markdown"])
    assert_SUCCESS(result)
    docs = project_dir / "docs"
    assert sorted(p.name for p in docs.iterdir()) == [
        "IShowEvent.md",
        "IWindow.md",
        "Window.md",
        "docs.html",
    ]
    assert "Wrote 4 file(s)" in result.output


@mark_cli
def test_markdown_options(project_dir: Path) -> None:
    """Explicit options override defaults."""
    (project_dir / "type-info.json").rename(project_dir / "types.json")
    result = run_cli_in(
        project_dir,
        [
            "--no-color",
            "markdown",
            "--infile",
            "types.json",
            "--outdir",
            "site",
            "--base-url",
            "/x",
        ],
    )
    assert_SUCCESS(result)
    nav = (project_dir / "site" / "docs.html").read_text(encoding="utf-8")
    assert 'href="/x/Window"' in nav


@mark_cli
def test_markdown_missing_report_warns(tmp_path: Path, sample_tree: dict[str, object]) -> None:
    """A missing test report is a warning, not a failure."""
    (tmp_path / "type-info.json").write_text(json.dumps(sample_tree), encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "markdown"])
    assert_SUCCESS(result)
    assert "Could not find test report" in result.output


@mark_cli
def test_quiet_hides_warnings(tmp_path: Path, sample_tree: dict[str, object]) -> None:
    """``-q`` suppresses warnings and the summary."""
    (tmp_path / "type-info.json").write_text(json.dumps(sample_tree), encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "-q", "markdown"])
    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_markdown_missing_infile(tmp_path: Path) -> None:
    """A missing reflection tree exits with FILE_NOT_FOUND."""
    result = run_cli_in(tmp_path, ["--no-color", "markdown"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)
    assert "type-info.json" in result.output


@mark_cli
def test_markdown_invalid_infile(tmp_path: Path) -> None:
    """A reflection tree that is not JSON exits with INPUT_FORMAT_ERROR."""
    (tmp_path / "type-info.json").write_text("{nope", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "markdown"])
    assert_exit(result, ExitCode.INPUT_FORMAT_ERROR)


@mark_cli
def test_markdown_write_failure(project_dir: Path) -> None:
    """Unwritable pages exit with IO_ERROR after writing the others."""
    (project_dir / "docs" / "Window.md").mkdir(parents=True)
    result = run_cli_in(project_dir, ["--no-color", "markdown"])
    assert_exit(result, ExitCode.IO_ERROR)
    assert (project_dir / "docs" / "IWindow.md").is_file()
    assert (project_dir / "docs" / "docs.html").is_file()


@mark_cli
def test_html_to_directory(project_dir: Path) -> None:
    """By default the page is written as api.html in the working directory."""
    result = run_cli_in(project_dir, ["--no-color", "html"])
    assert_SUCCESS(result)
    html = (project_dir / "api.html").read_text(encoding="utf-8")
    assert html.startswith("---\nlayout: api\n")
    assert "test-results" not in html


@mark_cli
def test_html_with_testfile(project_dir: Path) -> None:
    """A test file merges results and reports unmatched keys."""
    result = run_cli_in(
        project_dir,
        ["--no-color", "html", "--testfile", "test-report.json", "--outfile", "page.html"],
    )
    assert_SUCCESS(result)
    assert "unable to find ssf.Missing.thing" in result.output
    assert "test-results" in (project_dir / "page.html").read_text(encoding="utf-8")


@mark_cli
def test_html_verbose_lists_types(project_dir: Path) -> None:
    """``-v`` lists every documented type."""
    result = run_cli_in(project_dir, ["--no-color", "-v", "html"])
    assert_SUCCESS(result)
    assert "ShowEvent" in result.output
    assert "merged 0 test result(s)" in result.output


@mark_cli
def test_html_unwritable_outfile(project_dir: Path) -> None:
    """An output path inside a missing directory exits with IO_ERROR."""
    result = run_cli_in(project_dir, ["--no-color", "html", "--outfile", "missing/api.html"])
    assert_exit(result, ExitCode.IO_ERROR)


@mark_cli
def test_config_file_namespace(project_dir: Path) -> None:
    """``apimark.toml`` in the working directory is honored."""
    (project_dir / "apimark.toml").write_text('namespace = "other"\n', encoding="utf-8")
    result = run_cli_in(project_dir, ["--no-color", "markdown"])
    assert_SUCCESS(result)
    window = (project_dir / "docs" / "Window.md").read_text(encoding="utf-8")
    assert "%2F" not in window


@mark_cli
def test_html_namespace_option(project_dir: Path) -> None:
    """``html --namespace`` merges only the report keys of that namespace."""
    args = ["--no-color", "-v", "html", "-t", "test-report.json", "--namespace", "other"]
    result = run_cli_in(project_dir, args)
    assert_SUCCESS(result)
    assert "merged 0 test result(s)" in result.output
    assert "test-results" not in (project_dir / "api.html").read_text(encoding="utf-8")


@mark_cli
def test_bad_config_file(project_dir: Path) -> None:
    """A malformed config file exits with CONFIG_ERROR."""
    (project_dir / "bad.toml").write_text("namespace = \n", encoding="utf-8")
    result = run_cli_in(project_dir, ["--no-color", "--config", "bad.toml", "markdown"])
    assert_exit(result, ExitCode.CONFIG_ERROR)


@mark_cli
def test_verbose_and_quiet_conflict(project_dir: Path) -> None:
    """``-v`` and ``-q`` together are a usage error."""
    result = run_cli_in(project_dir, ["-v", "-q", "markdown"])
    assert_exit(result, ExitCode.USAGE_ERROR)
