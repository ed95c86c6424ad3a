# topmark:header:start
#
#   project      : ApiMark
#   file         : badges.py
#   file_relpath : src/apimark/markdown/badges.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""shields.io test badges for the markdown pages.

Each documented method or constructor shows one badge per test environment,
in a fixed order (Electron, OpenFin, Browser). The badge color is banded by
pass percentage: the color of the largest boundary not above the percentage
is used, and a badge with no test runs is light grey.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from apimark.constants import ENVIRONMENTS
from apimark.reflection.report import EnvironmentResult, largest_boundary_at_most

SHIELDS_URL: Final[str] = "https://img.shields.io/badge"
NO_DATA_COLOR: Final[str] = "lightgrey"

# Colors are the named colors of http://shields.io badges
BADGE_COLORS: Final[dict[int, str]] = {
    0: NO_DATA_COLOR,
    10: "red",
    25: "yellow",
    50: "yellowgreen",
    75: "green",
    100: "brightgreen",
}


def badge_color(passed: int, total: int) -> str:
    """Return the badge color for ``passed`` out of ``total`` test runs.

    The percentage is banded unrounded, so 74.5% is still ``yellowgreen``.
    """
    if total <= 0:
        return NO_DATA_COLOR
    percentage: float = passed * 100 / total
    boundary: int | None = largest_boundary_at_most(percentage, tuple(BADGE_COLORS))
    return NO_DATA_COLOR if boundary is None else BADGE_COLORS[boundary]


def shield(alt: str, label: str, message: str, color: str) -> str:
    """Return the markdown image of a single badge."""
    return f"![{alt}]({SHIELDS_URL}/{label}-{message}-{color}.svg)"


def default_shields(alt: str) -> str:
    """Return the "no test data" badge set for all environments."""
    return " ".join(
        shield(alt, label, "no_test_data", NO_DATA_COLOR) for _key, label in ENVIRONMENTS
    )


def result_shields(alt: str, entry: Mapping[str, Any]) -> str:
    """Return the badge set for a test report entry.

    An environment missing from the entry is shown as ``0/0``.
    """
    badges: list[str] = []
    for key, label in ENVIRONMENTS:
        result = EnvironmentResult.from_json(entry.get(key)) or EnvironmentResult()
        message: str = f"{result.passed}%2F{result.total}"
        badges.append(shield(alt, label, message, badge_color(result.passed, result.total)))
    return " ".join(badges)
