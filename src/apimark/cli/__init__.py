# topmark:header:start
#
#   project      : ApiMark
#   file         : __init__.py
#   file_relpath : src/apimark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for ApiMark."""

from __future__ import annotations
