# topmark:header:start
#
#   project      : ApiMark
#   file         : test_engine.py
#   file_relpath : tests/transform/test_engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the rule-based transform engine."""

from __future__ import annotations

from typing import Any

from apimark.reflection.model import Kind
from apimark.reflection.query import Selector
from apimark.transform.engine import MatchContext, Rule, dispatch


def test_collect_class_names(sample_tree: dict[str, Any]) -> None:
    """A deep rule delegates to a self rule through the runner."""
    rules = [
        Rule(Selector.deep_(Kind.CLASS), lambda ctx: ctx.runner()),
        Rule(Selector.self_(Kind.CLASS), lambda ctx: ctx.match["name"]),
    ]
    assert dispatch(sample_tree, rules) == ["Window"]


def test_first_matching_rule_wins() -> None:
    """Only the first rule whose selector matches is applied."""
    rules = [
        Rule(Selector.self_(Kind.CLASS), lambda ctx: "first"),
        Rule(Selector.self_(Kind.CLASS), lambda ctx: "second"),
    ]
    assert dispatch({"name": "A", "kindString": "Class"}, rules) == ["first"]


def test_unmatched_node_produces_nothing() -> None:
    """A node no rule matches yields an empty result."""
    rules = [Rule(Selector.self_(Kind.CLASS), lambda ctx: "x")]
    assert dispatch({"name": "p", "kindString": "Property"}, rules) == []
    assert dispatch(None, rules) == []


def test_deep_match_is_a_list(sample_tree: dict[str, Any]) -> None:
    """Deep selectors hand the generator every matched node."""
    seen: list[Any] = []

    def record(ctx: MatchContext) -> None:
        seen.append(ctx.match)

    dispatch(sample_tree, [Rule(Selector.deep_(Kind.PROPERTY), record)])
    assert len(seen) == 1
    assert [p["name"] for p in seen[0]] == ["id", "title", "target"]


def test_runner_on_explicit_subtree() -> None:
    """The runner accepts any sub-tree, including an empty one."""
    node = {
        "name": "A",
        "kindString": "Class",
        "children": [
            {"name": "x", "kindString": "Property"},
            {"name": "y", "kindString": "Property"},
        ],
    }
    rules = [
        Rule(
            Selector.self_(Kind.CLASS),
            lambda ctx: [ctx.runner(ctx.match["children"]), ctx.runner(None)],
        ),
        Rule(Selector.self_(Kind.PROPERTY), lambda ctx: ctx.match["name"].upper()),
    ]
    assert dispatch(node, rules) == ["X", "Y"]


def test_none_results_are_dropped() -> None:
    """Generators returning ``None`` contribute nothing."""
    rules = [Rule(Selector.self_(Kind.CLASS), lambda ctx: [None, "kept", None])]
    assert dispatch([{"kindString": "Class"}, {"kindString": "Class"}], rules) == ["kept", "kept"]
