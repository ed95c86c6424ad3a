# topmark:header:start
#
#   project      : ApiMark
#   file         : elements.py
#   file_relpath : src/apimark/transform/elements.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic markup tree and its HTML serialization.

Rule generators build `Element` and `Text` nodes with the small factories
below; `to_html` turns the resulting tree into markup. Text is emitted
verbatim, because formatted type strings and comments already carry markup
(links, ``<br/>``, Liquid tags). Attribute values are escaped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from html import escape
from typing import Any, Union


@dataclass
class Text:
    """A text leaf."""

    text: str


@dataclass
class Element:
    """A markup element with ordered attributes and children."""

    tag: str
    attributes: dict[str, str | None] = field(default_factory=lambda: {})
    children: list[Markup] = field(default_factory=lambda: [])


Markup = Union[Element, Text]


def flatten(items: Any) -> list[Any]:
    """Flatten nested lists/tuples, dropping ``None`` and ``False`` entries."""
    if items is None or items is False:
        return []
    if not isinstance(items, (list, tuple)):
        return [items]
    flat: list[Any] = []
    for item in items:
        flat.extend(flatten(item))
    return flat


def text(value: str | None) -> Text:
    """Return a text node (``None`` becomes an empty string)."""
    return Text("" if value is None else str(value))


def element(
    tag: str,
    children: Any = None,
    attributes: Mapping[str, str | None] | None = None,
) -> Element:
    """Return an element; ``children`` may be a node, a nested list, or ``None``."""
    kids: list[Markup] = [c for c in flatten(children) if isinstance(c, (Element, Text))]
    return Element(tag=tag, attributes=dict(attributes or {}), children=kids)


def text_element(tag: str) -> Callable[..., Element]:
    """Return a factory for elements hosting a single text node."""

    def make(body: str | None, attributes: Mapping[str, str | None] | None = None) -> Element:
        return element(tag, text(body), attributes)

    return make


def parent_element(tag: str) -> Callable[..., Element]:
    """Return a factory for elements hosting several children."""

    def make(children: Any, attributes: Mapping[str, str | None] | None = None) -> Element:
        return element(tag, children, attributes)

    return make


h2 = text_element("h2")
h3 = text_element("h3")
h4 = text_element("h4")
h5 = text_element("h5")
p = text_element("p")
dt = text_element("dt")
dd = text_element("dd")
span = text_element("span")

section = parent_element("section")
dl = parent_element("dl")


def to_html(nodes: Markup | Iterable[Markup]) -> str:
    """Serialize a node, or a sequence of sibling nodes, to markup."""
    if isinstance(nodes, Text):
        return nodes.text
    if isinstance(nodes, Element):
        attrs: str = "".join(
            f' {name}="{escape(value, quote=True)}"'
            for name, value in nodes.attributes.items()
            if value is not None
        )
        inner: str = "".join(to_html(child) for child in nodes.children)
        return f"<{nodes.tag}{attrs}>{inner}</{nodes.tag}>"
    return "".join(to_html(node) for node in nodes)
