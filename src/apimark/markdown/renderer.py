# topmark:header:start
#
#   project      : ApiMark
#   file         : renderer.py
#   file_relpath : src/apimark/markdown/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reflection-tree renderer producing one markdown document per type.

`render` walks the reflection tree and dispatches on ``kindString``:

- Module: recurse into its children;
- Class: start the document ``ClassName`` and recurse with it as context;
- Interface: start the document ``IName`` and recurse with it as context;
- Method / Constructor: heading with test badges, then every signature;
- Call signature: signature line, short comment and return description;
- Property: name, type and short comment.

Every handler skips nodes tagged ``@ignore``; unknown kinds are skipped. The
accumulated documents live in a `DocumentSet` that is passed through the walk
and returned, so rendering has no module-level state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from apimark.config.logging import get_logger
from apimark.constants import DEFAULT_NAMESPACE
from apimark.markdown.badges import default_shields, result_shields
from apimark.markdown.types import format_parameters, format_type
from apimark.reflection.model import (
    Kind,
    children_of,
    comment_of,
    has_flag,
    is_ignored,
    signatures_of,
)

if TYPE_CHECKING:
    from apimark.config.logging import ApimarkLogger
    from apimark.reflection.model import Node

logger: ApimarkLogger = get_logger(__name__)

INTERFACE_PREFIX: str = "I"


@dataclass
class DocumentSet:
    """Markdown documents keyed by type name, in creation order."""

    documents: dict[str, str] = field(default_factory=lambda: {})

    def start(self, key: str, text: str) -> None:
        """Create (or restart) the document ``key`` with ``text``."""
        self.documents[key] = text

    def append(self, key: str | None, text: str) -> None:
        """Append ``text`` to the document ``key``; dropped when there is no such document."""
        if key is None or key not in self.documents:
            logger.debug("No document %r to append to, dropping %r", key, text)
            return
        self.documents[key] += text

    def keys(self) -> list[str]:
        """Return the document keys in creation order."""
        return list(self.documents)

    def __getitem__(self, key: str) -> str:
        return self.documents[key]

    def __contains__(self, key: object) -> bool:
        return key in self.documents

    def __iter__(self) -> Iterator[str]:
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)


@dataclass(frozen=True)
class RenderOptions:
    """Inputs shared by every handler during one rendering walk.

    Attributes:
        namespace (str): First segment of test report keys.
        report (Mapping[str, Any] | None): The raw test report, if any.
    """

    namespace: str = DEFAULT_NAMESPACE
    report: Mapping[str, Any] | None = None

    def lookup(self, key: str) -> Mapping[str, Any] | None:
        """Return the report entry for ``namespace.key``, or ``None``."""
        if not self.report:
            return None
        entry: Any = self.report.get(f"{self.namespace}.{key}")
        return entry if isinstance(entry, Mapping) else None


Handler = Callable[["Node", "str | None", DocumentSet, RenderOptions], None]


def render(
    node: Node,
    context: str | None = None,
    documents: DocumentSet | None = None,
    *,
    options: RenderOptions | None = None,
) -> DocumentSet:
    """Render ``node`` (and its descendants) into ``documents``.

    Args:
        node: Reflection node to render.
        context: Key of the document the node belongs to (its class or interface).
        documents: Accumulator to extend; a new one is created when omitted.
        options: Namespace and test report used for badges.

    Returns:
        The accumulator, extended with the rendered markdown.
    """
    documents = documents if documents is not None else DocumentSet()
    options = options or RenderOptions()
    kind: Kind | None = Kind.of(node)
    handler: Handler | None = _HANDLERS.get(kind) if kind is not None else None
    if handler is None:
        logger.trace("Skipping node %r", node.get("name") if isinstance(node, dict) else node)
        return documents
    if is_ignored(node):
        logger.debug("Skipping ignored %s %s", kind.value, node.get("name"))
        return documents
    handler(node, context, documents, options)
    return documents


def render_tree(tree: Node, *, options: RenderOptions | None = None) -> DocumentSet:
    """Render every top-level child of the reflection root."""
    documents = DocumentSet()
    for child in children_of(tree):
        render(child, None, documents, options=options)
    return documents


def _render_module(
    node: Node, context: str | None, documents: DocumentSet, options: RenderOptions
) -> None:
    for child in children_of(node):
        render(child, None, documents, options=options)


def _render_class(
    node: Node, context: str | None, documents: DocumentSet, options: RenderOptions
) -> None:
    name: str = str(node.get("name", ""))
    documents.start(name, f"# {name}  \n")
    for child in children_of(node):
        render(child, name, documents, options=options)


def _render_interface(
    node: Node, context: str | None, documents: DocumentSet, options: RenderOptions
) -> None:
    name: str = str(node.get("name", ""))
    key: str = INTERFACE_PREFIX + name
    documents.start(key, f"# {name} (Interface)  \n")
    for child in children_of(node):
        render(child, key, documents, options=options)


def _render_method(
    node: Node, context: str | None, documents: DocumentSet, options: RenderOptions
) -> None:
    name: str = str(node.get("name", ""))
    static: str = " (static)" if has_flag(node, "isStatic") else ""
    entry: Mapping[str, Any] | None = options.lookup(f"{context}.{name}")
    badges: str = result_shields(name, entry) if entry is not None else default_shields(name)
    documents.append(context, f"#### {name}{static}  {badges}\n")
    for signature in signatures_of(node):
        _render_call_signature(signature, context, documents, options)


def _render_constructor(
    node: Node, context: str | None, documents: DocumentSet, options: RenderOptions
) -> None:
    name: str = str(node.get("name", ""))
    entry: Mapping[str, Any] | None = options.lookup(f"{context}()")
    badges: str = result_shields(name, entry) if entry is not None else default_shields(name)
    documents.append(context, f"#### {name}  {badges}\n")
    for signature in signatures_of(node):
        _render_call_signature(signature, context, documents, options)


def _render_call_signature(
    node: Node, context: str | None, documents: DocumentSet, options: RenderOptions
) -> None:
    if is_ignored(node):
        return
    returns: str = format_type(node.get("type"))
    params: str = ", ".join(format_parameters(node))
    documents.append(context, f"`{node.get('name', '')}({params}) => {returns}`  \n")
    comment: dict[str, Any] = comment_of(node)
    if comment.get("shortText"):
        documents.append(context, f"{comment['shortText']}  \n")
    if comment.get("returns"):
        documents.append(context, f"**Returns:** `{returns}` - {comment['returns']}  \n")


def _render_property(
    node: Node, context: str | None, documents: DocumentSet, options: RenderOptions
) -> None:
    optional: str = "?" if has_flag(node, "isOptional") else ""
    type_text: str = format_type(node.get("type"))
    documents.append(context, f"**{node.get('name', '')}{optional}**: `{type_text}`  \n")
    short_text: Any = comment_of(node).get("shortText")
    if short_text:
        documents.append(context, f"{short_text}  \n")


_HANDLERS: dict[Kind, Handler] = {
    Kind.MODULE: _render_module,
    Kind.CLASS: _render_class,
    Kind.INTERFACE: _render_interface,
    Kind.METHOD: _render_method,
    Kind.CONSTRUCTOR: _render_constructor,
    Kind.CALL_SIGNATURE: _render_call_signature,
    Kind.PROPERTY: _render_property,
}
