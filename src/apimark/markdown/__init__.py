# topmark:header:start
#
#   project      : ApiMark
#   file         : __init__.py
#   file_relpath : src/apimark/markdown/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown generator: one page per class and interface, with test badges."""

from __future__ import annotations
