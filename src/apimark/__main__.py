# topmark:header:start
#
#   project      : ApiMark
#   file         : __main__.py
#   file_relpath : src/apimark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ApiMark via ``python -m apimark``.

This module delegates directly to :func:`apimark.cli.main.cli`, so the console
script and module execution share a single CLI entry point.

Examples:
    Generate the markdown pages::

        python -m apimark markdown --infile type-info.json
"""

from __future__ import annotations

from apimark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
