# topmark:header:start
#
#   project      : ApiMark
#   file         : report.py
#   file_relpath : src/apimark/reflection/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Test report model and the merge of test results into the reflection tree.

A test report maps a dotted member path to per-environment results::

    {
        "ssf.Window.focus": {
            "electron": {"passed": 3, "total": 4},
            "openfin": {"passed": 0, "total": 0},
            "browser": {"passed": 4, "total": 4}
        }
    }

`merge_test_report` annotates the matching Method, Property or Constructor
node with a ``results`` field holding the per-environment results plus their
``combined`` sum. Entries that match nothing are dropped with a warning.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from apimark.config.logging import get_logger
from apimark.constants import DEFAULT_NAMESPACE, ENVIRONMENTS
from apimark.reflection.model import Kind, children_of, signatures_of
from apimark.reflection.query import Selector

if TYPE_CHECKING:
    from apimark.config.logging import ApimarkLogger
    from apimark.diagnostics import DiagnosticLog
    from apimark.reflection.model import Node

logger: ApimarkLogger = get_logger(__name__)

COMBINED_KEY: str = "combined"
CONSTRUCTOR_SUFFIX: str = "()"


def _is_count(value: Any) -> bool:
    # bool is an int subclass but never a count
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class EnvironmentResult:
    """Pass/total counts of one environment (or of the combined run)."""

    passed: int = 0
    total: int = 0

    @classmethod
    def from_json(cls, value: Any) -> EnvironmentResult | None:
        """Decode ``{"passed": n, "total": m}``; return ``None`` when absent or malformed."""
        if value is None:
            return None
        if not isinstance(value, Mapping):
            logger.warning("Discarding malformed environment result: %r", value)
            return None
        passed: Any = value.get("passed", 0)
        total: Any = value.get("total", 0)
        if not _is_count(passed) or not _is_count(total):
            logger.warning("Discarding environment result with non-integer counts: %r", value)
            return None
        return cls(passed=passed, total=total)

    @property
    def percentage(self) -> int | None:
        """Pass percentage rounded half-up, or ``None`` when nothing ran."""
        return pass_percentage(self.passed, self.total)

    def to_dict(self) -> dict[str, int]:
        """Return the JSON shape of this result."""
        return {"passed": self.passed, "total": self.total}


def pass_percentage(passed: int, total: int) -> int | None:
    """Return ``passed / total`` as a percentage rounded half-up (``None`` if total is 0).

    Half-up rounding keeps ``87.5`` → ``88`` and ``62.5`` → ``63``.
    """
    if total <= 0:
        return None
    return math.floor(passed * 100 / total + 0.5)


def largest_boundary_at_most(value: float, boundaries: tuple[int, ...]) -> int | None:
    """Return the largest boundary ``<= value`` (``None`` if every boundary is larger)."""
    eligible: list[int] = [b for b in boundaries if b <= value]
    return max(eligible) if eligible else None


def combine_results(entry: Mapping[str, Any]) -> dict[str, Any]:
    """Return the per-environment results of ``entry`` plus their ``combined`` sum.

    Environments missing from the entry are kept absent in the output but count
    as ``0/0`` in the sum.
    """
    results: dict[str, Any] = {}
    passed: int = 0
    total: int = 0
    for key, _label in ENVIRONMENTS:
        result: EnvironmentResult | None = EnvironmentResult.from_json(entry.get(key))
        if result is None:
            continue
        results[key] = result.to_dict()
        passed += result.passed
        total += result.total
    results[COMBINED_KEY] = EnvironmentResult(passed=passed, total=total).to_dict()
    return results


@dataclass(frozen=True)
class ReportKey:
    """A test report key split into its parts."""

    namespace: str
    type_name: str
    member_name: str | None

    @classmethod
    def parse(cls, key: str) -> ReportKey:
        """Split ``"ns.Type.member"`` (or ``"ns.Type()"`` for constructors)."""
        parts: list[str] = key.split(".")
        namespace: str = parts[0]
        type_name: str = parts[1] if len(parts) > 1 else ""
        member_name: str | None = parts[2] if len(parts) > 2 and parts[2] else None
        if member_name is None and type_name.endswith(CONSTRUCTOR_SUFFIX):
            type_name = type_name[: -len(CONSTRUCTOR_SUFFIX)]
        return cls(namespace=namespace, type_name=type_name, member_name=member_name)


def find_member(tree: Node, type_name: str, kind: Kind, member_name: str | None) -> Node | None:
    """Return the first ``kind`` child of a Class/Interface named ``type_name``.

    When ``member_name`` is ``None`` any child of the right kind matches.
    """
    member: Selector = Selector.self_(kind, name=member_name)
    for owner in Selector.deep_(Kind.CLASS, Kind.INTERFACE, name=type_name).select(tree):
        for child in children_of(owner):
            if member.accepts(child):
                return child
    return None


def resolve_target(tree: Node, key: ReportKey) -> Node | None:
    """Return the node a parsed report key refers to, or ``None``.

    Members are looked up as a Method first, then as a Property; keys without
    a member name refer to the type's Constructor.
    """
    if key.member_name is None:
        return find_member(tree, key.type_name, Kind.CONSTRUCTOR, None)
    method: Node | None = find_member(tree, key.type_name, Kind.METHOD, key.member_name)
    if method is not None:
        return method
    return find_member(tree, key.type_name, Kind.PROPERTY, key.member_name)


def merge_test_report(
    tree: Node,
    report: Mapping[str, Any],
    diagnostics: DiagnosticLog,
    *,
    namespace: str = DEFAULT_NAMESPACE,
) -> int:
    """Attach test results from ``report`` to the matching nodes of ``tree``.

    Method and Constructor results are also attached to the first signature,
    which is the one the HTML generator renders. Keys outside ``namespace``
    match nothing.

    Args:
        tree: Root of the reflection tree; annotated in place.
        report: Test report mapping.
        diagnostics: Receives a warning for each key that matches nothing.
        namespace: First segment a key must carry to be merged.

    Returns:
        The number of report entries merged.
    """
    merged: int = 0
    for key, entry in report.items():
        if not isinstance(entry, Mapping):
            message: str = f"Ignoring malformed test report entry {key}"
            logger.warning(message)
            diagnostics.add_warning(message)
            continue

        parsed: ReportKey = ReportKey.parse(key)
        target: Node | None = (
            resolve_target(tree, parsed) if parsed.namespace == namespace else None
        )
        if target is None:
            message = f"unable to find {key} within the typescript documentation"
            logger.warning(message)
            diagnostics.add_warning(message)
            continue

        results: dict[str, Any] = combine_results(entry)
        target["results"] = results
        if Kind.of(target) is not Kind.PROPERTY:
            signatures: list[Node] = signatures_of(target)
            if signatures:
                signatures[0]["results"] = results
        merged += 1

    logger.info("Merged %d of %d test report entries", merged, len(report))
    return merged
