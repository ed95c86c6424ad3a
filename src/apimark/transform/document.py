# topmark:header:start
#
#   project      : ApiMark
#   file         : document.py
#   file_relpath : src/apimark/transform/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule cascade documenting one class, interface or event interface.

The entry rule deep-matches the node of the documented type. From there the
rules render, in order:

- the type section: heading, description, then Static Methods,
  Constructors (classes only), Properties (Events for event interfaces)
  and Methods, each omitted when the type has no such members;
- a method or constructor: its FIRST signature only;
- a signature: name, test results, description, arguments and return value;
- a property: name, test results and description;
- a parameter: a ``dt``/``dd`` pair.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from apimark.reflection.model import Kind, children_of, comment_of, parameters_of, signatures_of
from apimark.reflection.query import Selector
from apimark.transform.elements import dd, dl, dt, h2, h3, h4, h5, p, section
from apimark.transform.engine import MatchContext, Rule, dispatch
from apimark.transform.formatting import (
    Category,
    combined_results_markup,
    format_comment,
    format_type,
)

if TYPE_CHECKING:
    from apimark.reflection.model import Node
    from apimark.transform.elements import Markup
    from apimark.transform.formatting import DocumentedType, TypeIndex


class TypeDocumenter:
    """Build and run the rule list for one documented type.

    Args:
        doc_type (DocumentedType): The type to document.
        index (TypeIndex): Documented types, used to link type names.
    """

    def __init__(self, doc_type: DocumentedType, index: TypeIndex) -> None:
        self.doc_type = doc_type
        self.index = index

    @property
    def rules(self) -> list[Rule]:
        """The rule list, entry rule first."""
        return [
            Rule(Selector.deep_(self.doc_type.kind, name=self.doc_type.name), self._entry),
            Rule(Selector.self_(Kind.CLASS), self._class),
            Rule(Selector.self_(Kind.INTERFACE), self._interface),
            Rule(Selector.self_(Kind.METHOD, Kind.CONSTRUCTOR), self._method),
            Rule(Selector.self_(Kind.PROPERTY), self._property),
            Rule(Selector.self_(Kind.CALL_SIGNATURE, Kind.CONSTRUCTOR_SIGNATURE), self._signature),
            Rule(Selector.self_(Kind.PARAMETER), self._parameter),
        ]

    def document(self, tree: Node) -> list[Markup]:
        """Return the markup documenting the type found in ``tree``."""
        return dispatch(tree, self.rules)

    # --- rule generators ---

    def _entry(self, ctx: MatchContext) -> list[Any]:
        return ctx.runner()

    def _members(
        self,
        ctx: MatchContext,
        kind: Kind,
        title: str,
        flags: Mapping[str, bool] | None = None,
    ) -> list[Any]:
        # Heading and section only when the type has matching members
        selector: Selector = Selector.self_(kind, flags=flags)
        members: list[Node] = [c for c in children_of(ctx.match) if selector.accepts(c)]
        if not members:
            return []
        return [h3(title), section(ctx.runner(members), {"class": title.lower()})]

    def _static_methods(self, ctx: MatchContext) -> list[Any]:
        return self._members(ctx, Kind.METHOD, "Static Methods", {"isStatic": True})

    def _constructors(self, ctx: MatchContext) -> list[Any]:
        return self._members(ctx, Kind.CONSTRUCTOR, "Constructors")

    def _properties(self, ctx: MatchContext) -> list[Any]:
        title: str = "Events" if self.doc_type.category is Category.EVENT else "Properties"
        return self._members(ctx, Kind.PROPERTY, title)

    def _methods(self, ctx: MatchContext) -> list[Any]:
        return self._members(ctx, Kind.METHOD, "Methods", {"isStatic": False})

    def _class(self, ctx: MatchContext) -> Any:
        return section(
            [
                h2(ctx.match.get("name")),
                p(format_comment(ctx.match.get("comment"))),
                *self._static_methods(ctx),
                *self._constructors(ctx),
                *self._properties(ctx),
                *self._methods(ctx),
            ],
            {"id": self.doc_type.anchor, "class": "docs-title"},
        )

    def _interface(self, ctx: MatchContext) -> Any:
        return section(
            [
                h2(ctx.match.get("name")),
                p(format_comment(ctx.match.get("comment"))),
                *self._static_methods(ctx),
                *self._properties(ctx),
                *self._methods(ctx),
            ],
            {"id": self.doc_type.anchor, "class": "docs-title"},
        )

    def _method(self, ctx: MatchContext) -> Any:
        # Only the first signature documents the member
        signatures: list[Node] = signatures_of(ctx.match)
        first: Node | None = signatures[0] if signatures else None
        return section(ctx.runner(first), {"class": "method"})

    def _property(self, ctx: MatchContext) -> Any:
        node: Node = ctx.match
        results: Any = node.get("results")
        return section(
            [
                h4(node.get("name"), {"class": "property-name"}),
                results and combined_results_markup(results),
                p(format_comment(node.get("comment"))),
            ],
            {"class": "property", "id": node.get("name")},
        )

    def _signature(self, ctx: MatchContext) -> Any:
        node: Node = ctx.match
        name: Any = node.get("name")
        results: Any = node.get("results")
        parameters: list[Node] = parameters_of(node)
        return section(
            [
                h4(name, {"class": "method-name", "id": f"{self.doc_type.name}-{name}"}),
                results and combined_results_markup(results),
                p(format_comment(node.get("comment"))),
                parameters and h5("Arguments"),
                parameters and dl(ctx.runner(parameters)),
                h5("Returns"),
                dl(
                    [
                        dt(
                            format_type(node.get("type"), self.index),
                            {"class": "code return-value"},
                        ),
                        dd(comment_of(node).get("returns") or ""),
                    ]
                ),
            ]
        )

    def _parameter(self, ctx: MatchContext) -> list[Any]:
        node: Node = ctx.match
        return [
            dt(
                f"{node.get('name')} [{format_type(node.get('type'), self.index)}]",
                {"class": "code argument"},
            ),
            dd(format_comment(node.get("comment"))),
        ]
