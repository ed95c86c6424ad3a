# topmark:header:start
#
#   project      : ApiMark
#   file         : __init__.py
#   file_relpath : src/apimark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ApiMark configuration: layered TOML settings, CLI overrides and logging setup.

Import the concrete modules directly (`apimark.config.model`,
`apimark.config.io`, `apimark.config.logging`); this package does not
re-export them so that `apimark.config.logging` stays importable from
everywhere without cycles.
"""

from __future__ import annotations
