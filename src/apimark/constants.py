# topmark:header:start
#
#   project      : ApiMark
#   file         : constants.py
#   file_relpath : src/apimark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ApiMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

APIMARK_VERSION: str = get_version("apimark")

# Configuration sources
CONFIG_FILE_NAME: str = "apimark.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "apimark"
LOG_LEVEL_ENV_VAR: str = "APIMARK_LOG_LEVEL"

# Default input/output locations
DEFAULT_INFILE: str = "type-info.json"
DEFAULT_TESTFILE: str = "test-report.json"
DEFAULT_OUTDIR: str = "docs"
DEFAULT_OUTFILE: str = "."
DEFAULT_HTML_FILE_NAME: str = "api.html"
NAV_FILE_NAME: str = "docs.html"

# Rendering defaults
DEFAULT_NAMESPACE: str = "ssf"
DEFAULT_BASE_URL: str = "/ContainerJS/docs"

IGNORE_TAG: str = "ignore"
EVENT_SUFFIX: str = "Event"

# Test environments in display order: (report key, label)
ENVIRONMENTS: tuple[tuple[str, str], ...] = (
    ("electron", "Electron"),
    ("openfin", "OpenFin"),
    ("browser", "Browser"),
)
