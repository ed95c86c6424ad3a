# topmark:header:start
#
#   project      : ApiMark
#   file         : __init__.py
#   file_relpath : src/apimark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ApiMark CLI subcommands."""

from __future__ import annotations
