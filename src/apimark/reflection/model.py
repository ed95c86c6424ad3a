# topmark:header:start
#
#   project      : ApiMark
#   file         : model.py
#   file_relpath : src/apimark/reflection/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Accessors for the TypeDoc reflection tree.

The reflection tree is kept as the plain JSON structure produced by the
reflection tool (nested ``dict``/``list`` values). This module names the node
kinds and provides small, tolerant accessors so the generators never have to
guard against missing optional fields themselves.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from apimark.constants import EVENT_SUFFIX, IGNORE_TAG

# A reflection node (or type) as decoded from JSON.
Node = dict[str, Any]


class Kind(str, Enum):
    """Values of the ``kindString`` discriminator used by the generators."""

    MODULE = "Module"
    CLASS = "Class"
    INTERFACE = "Interface"
    METHOD = "Method"
    PROPERTY = "Property"
    CONSTRUCTOR = "Constructor"
    CALL_SIGNATURE = "Call signature"
    CONSTRUCTOR_SIGNATURE = "Constructor signature"
    PARAMETER = "Parameter"
    TYPE_LITERAL = "Type literal"

    @classmethod
    def of(cls, node: Any) -> Kind | None:
        """Return the kind of ``node``, or ``None`` for unknown kinds and non-nodes."""
        if not isinstance(node, dict):
            return None
        try:
            return cls(node.get("kindString"))
        except ValueError:
            return None


def children_of(node: Node) -> list[Node]:
    """Return the ``children`` of a node (empty when absent)."""
    return list(node.get("children") or [])


def signatures_of(node: Node) -> list[Node]:
    """Return the ``signatures`` of a node (empty when absent)."""
    return list(node.get("signatures") or [])


def parameters_of(node: Node) -> list[Node]:
    """Return the ``parameters`` of a signature (empty when absent)."""
    return list(node.get("parameters") or [])


def has_flag(node: Node, flag: str) -> bool:
    """Return True if the boolean flag (``isStatic``, ``isOptional``...) is set."""
    flags: Any = node.get("flags") or {}
    return bool(flags.get(flag, False))


def comment_of(node: Node) -> dict[str, Any]:
    """Return the structured comment of a node (empty when absent)."""
    comment: Any = node.get("comment")
    return comment if isinstance(comment, dict) else {}


def is_ignored(node: Node) -> bool:
    """Return True if the node carries an ``@ignore`` comment tag (exact tag name)."""
    tags: Any = comment_of(node).get("tags") or []
    return any(isinstance(t, dict) and t.get("tag") == IGNORE_TAG for t in tags)


def is_event_name(name: str) -> bool:
    """Return True for interface names documented as events (``...Event``)."""
    return name.endswith(EVENT_SUFFIX)
