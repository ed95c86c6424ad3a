# topmark:header:start
#
#   project      : ApiMark
#   file         : __init__.py
#   file_relpath : src/apimark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ApiMark package.

ApiMark generates API reference documentation from a TypeDoc reflection tree.
It ships two generators (per-type markdown pages and a single HTML page),
merges cross-environment test reports into the output, and exposes both a CLI
and the underlying functions for automation.
"""

from __future__ import annotations
