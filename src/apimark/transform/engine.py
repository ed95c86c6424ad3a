# topmark:header:start
#
#   project      : ApiMark
#   file         : engine.py
#   file_relpath : src/apimark/transform/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule-based tree transform engine.

A transform is a list of `Rule` objects, each pairing a `Selector` with a
generator. `dispatch` applies the rule list to a sub-tree:

- a list is dispatched element by element and the results concatenated;
- for a single node, rules are tried in order and the first rule whose
  selector matches wins;
- a node that no rule matches produces nothing.

The winning generator receives a `MatchContext`. Its ``match`` is the node
itself (self selectors) or the list of matched descendants (deep selectors).
``runner()`` re-dispatches the same rule list, on the match by default or on
any other sub-tree. Generators recurse through ``runner`` rather than calling
each other, so a cascade of rules can be extended or reordered freely.

Example:
    Collect the names of every class::

        rules = [
            Rule(Selector.deep_(Kind.CLASS), lambda ctx: ctx.runner()),
            Rule(Selector.self_(Kind.CLASS), lambda ctx: ctx.match["name"]),
        ]
        names = dispatch(tree, rules)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from apimark.config.logging import get_logger
from apimark.reflection.query import Selector
from apimark.transform.elements import flatten

if TYPE_CHECKING:
    from apimark.config.logging import ApimarkLogger

logger: ApimarkLogger = get_logger(__name__)

# Marks "no sub-tree given" so that ``runner(None)`` can mean an empty sub-tree.
_MATCH: Final[object] = object()

Generator = Callable[["MatchContext"], Any]


@dataclass(frozen=True)
class Rule:
    """A selector and the generator invoked with its matches."""

    selector: Selector
    generator: Generator


@dataclass(frozen=True)
class MatchContext:
    """What a generator sees: the match and a way to recurse.

    Attributes:
        match (Any): The matched node (self selector) or matched nodes (deep selector).
        rules (Sequence[Rule]): The active rule list, reused by `runner`.
    """

    match: Any
    rules: Sequence[Rule]

    def runner(self, subtree: Any = _MATCH) -> list[Any]:
        """Dispatch the rule list on ``subtree`` (the match itself when omitted)."""
        return dispatch(self.match if subtree is _MATCH else subtree, self.rules)


def dispatch(tree: Any, rules: Sequence[Rule]) -> list[Any]:
    """Apply ``rules`` to ``tree`` and return the flattened generator output.

    Args:
        tree: A reflection node, a list of nodes, or ``None``.
        rules: Rules tried in order for each node.

    Returns:
        The generated values; ``None`` results are dropped.
    """
    if tree is None:
        return []
    if isinstance(tree, list):
        results: list[Any] = []
        for item in tree:
            results.extend(dispatch(item, rules))
        return results

    for rule in rules:
        matches: list[Any] = rule.selector.select(tree)
        if not matches:
            continue
        match: Any = matches if rule.selector.deep else matches[0]
        logger.trace(
            "Rule %s matched %d node(s) under %r",
            sorted(k.value for k in rule.selector.kinds),
            len(matches),
            tree.get("name") if isinstance(tree, dict) else tree,
        )
        return flatten(rule.generator(MatchContext(match=match, rules=rules)))
    return []
