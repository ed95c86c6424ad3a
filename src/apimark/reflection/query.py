# topmark:header:start
#
#   project      : ApiMark
#   file         : query.py
#   file_relpath : src/apimark/reflection/query.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural selectors over the reflection tree.

A `Selector` is an explicit predicate over a node's kind, name and boolean
flags, paired with a search scope:

- a *self* selector tests the node it is applied to;
- a *deep* selector tests every node found in a ``children`` list anywhere
  below the node it is applied to, in document order.

Nodes carrying an ``@ignore`` tag never match, and a deep search does not
descend through them, unless the selector opts out with ``skip_ignored=False``.

Examples:
    Find the class named ``Window`` anywhere in the tree::

        Selector.deep_(Kind.CLASS, name="Window").select(tree)

    Keep only instance methods of a class::

        Selector.self_(Kind.METHOD, flags={"isStatic": False})
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from apimark.reflection.model import Kind, Node, has_flag, is_ignored


@dataclass(frozen=True)
class Selector:
    """Predicate plus search scope used to match reflection nodes.

    Attributes:
        kinds (frozenset[Kind]): Accepted node kinds.
        name (str | None): Exact name to match, or ``None`` for any name.
        flags (Mapping[str, bool]): Required flag values. A flag required to be
            ``False`` also matches when it is absent.
        deep (bool): Search descendants (``children`` lists at any depth) instead
            of the node itself.
        skip_ignored (bool): Exclude ``@ignore``-tagged nodes and their subtrees.
    """

    kinds: frozenset[Kind]
    name: str | None = None
    flags: Mapping[str, bool] = field(default_factory=lambda: {})
    deep: bool = False
    skip_ignored: bool = True

    @classmethod
    def self_(
        cls,
        *kinds: Kind,
        name: str | None = None,
        flags: Mapping[str, bool] | None = None,
    ) -> Selector:
        """Build a selector testing the node it is applied to."""
        return cls(kinds=frozenset(kinds), name=name, flags=dict(flags or {}))

    @classmethod
    def deep_(
        cls,
        *kinds: Kind,
        name: str | None = None,
        flags: Mapping[str, bool] | None = None,
    ) -> Selector:
        """Build a selector searching all descendant ``children`` entries."""
        return cls(kinds=frozenset(kinds), name=name, flags=dict(flags or {}), deep=True)

    def accepts(self, node: Any) -> bool:
        """Return True if ``node`` satisfies the predicate (scope not considered)."""
        kind: Kind | None = Kind.of(node)
        if kind is None or kind not in self.kinds:
            return False
        if self.name is not None and node.get("name") != self.name:
            return False
        if self.skip_ignored and is_ignored(node):
            return False
        return all(has_flag(node, flag) == wanted for flag, wanted in self.flags.items())

    def select(self, tree: Any) -> list[Node]:
        """Return the nodes of ``tree`` matched by this selector, in document order."""
        if not self.deep:
            return [tree] if self.accepts(tree) else []
        entries: Iterator[Node] = iter_children_entries(tree, self.skip_ignored)
        return [node for node in entries if self.accepts(node)]


def iter_children_entries(tree: Any, prune_ignored: bool = True) -> Iterator[Node]:
    """Yield every entry of every ``children`` list below ``tree`` (pre-order).

    All mapping values and list items are searched, so children nested under
    signatures or type declarations are found too.
    """
    if isinstance(tree, list):
        for item in tree:
            yield from iter_children_entries(item, prune_ignored)
        return
    if not isinstance(tree, dict):
        return
    for key, value in tree.items():
        if key == "children" and isinstance(value, list):
            for child in value:
                if prune_ignored and isinstance(child, dict) and is_ignored(child):
                    continue
                yield child
                yield from iter_children_entries(child, prune_ignored)
        elif isinstance(value, (dict, list)):
            yield from iter_children_entries(value, prune_ignored)
