# topmark:header:start
#
#   project      : ApiMark
#   file         : formatting.py
#   file_relpath : src/apimark/transform/formatting.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML formatting helpers for the API page: types, comments and test results."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from apimark.constants import ENVIRONMENTS
from apimark.reflection.model import Kind, is_event_name, parameters_of, signatures_of
from apimark.reflection.report import (
    COMBINED_KEY,
    EnvironmentResult,
    largest_boundary_at_most,
)
from apimark.transform.elements import Element, h5, section, span

COLOR_BOUNDARIES: Final[tuple[int, ...]] = (0, 10, 25, 50, 75, 100)
UNKNOWN_TYPE: Final[str] = "UNKNOWN"

_PRE_OPEN: Final[str] = "<pre>"
_PRE_CLOSE: Final[str] = "</pre>"
_PARAGRAPH_BREAK = re.compile(r"\n\n")


class Category(Enum):
    """How a documented type is presented."""

    CLASS = "class"
    INTERFACE = "interface"
    EVENT = "event"


@dataclass(frozen=True)
class DocumentedType:
    """A class, interface or event interface that gets its own API section."""

    name: str
    category: Category

    @classmethod
    def for_interface(cls, name: str) -> DocumentedType:
        """Classify an interface as an event (``...Event``) or a plain interface."""
        return cls(name, Category.EVENT if is_event_name(name) else Category.INTERFACE)

    @property
    def kind(self) -> Kind:
        """Reflection kind of the documented node."""
        return Kind.CLASS if self.category is Category.CLASS else Kind.INTERFACE

    @property
    def anchor(self) -> str:
        """Section id: ``Name``, ``Name-interface`` or ``Name-event``."""
        if self.category is Category.CLASS:
            return self.name
        return f"{self.name}-{self.category.value}"


class TypeIndex:
    """Lookup of documented types by name; the first registration of a name wins.

    Classes are registered before interfaces, so a name shared by a class and
    an interface (``Window``) links to the class.
    """

    def __init__(self, types: Sequence[DocumentedType] = ()) -> None:
        self._by_name: dict[str, DocumentedType] = {}
        for doc_type in types:
            self._by_name.setdefault(doc_type.name, doc_type)

    def lookup(self, name: str) -> DocumentedType | None:
        """Return the documented type named ``name``, if any."""
        return self._by_name.get(name)


def format_type(type_: Any, index: TypeIndex) -> str:
    """Render a reflection type as HTML, linking documented type names.

    Args:
        type_: Reflection type (``intrinsic``, ``reference``, ``union`` or ``reflection``).
        index: Documented types that get internal links.

    Returns:
        The formatted type, or ``UNKNOWN`` for unsupported types.
    """
    kind: Any = type_.get("type") if isinstance(type_, dict) else None
    if kind in ("intrinsic", "reference"):
        name: str = str(type_.get("name", ""))
        type_name: str = name
        type_arguments: Any = type_.get("typeArguments")
        if type_arguments is not None:
            args: str = ", ".join(format_type(arg, index) for arg in type_arguments)
            type_name += f"&lt;{args}&gt;"
        documented: DocumentedType | None = index.lookup(name)
        if documented is None:
            return type_name
        # Event interfaces are rendered under Name-event, so link there
        return f'<a href="#{documented.anchor}">{type_name}</a>'
    if kind == "union":
        return " | ".join(format_type(t, index) for t in type_.get("types") or [])
    if kind == "reflection":
        signatures = signatures_of(type_.get("declaration") or {})
        if not signatures:
            return UNKNOWN_TYPE
        params: str = ",".join(
            f"{param.get('name', '')}: {format_type(param.get('type'), index)}"
            for param in parameters_of(signatures[0])
        )
        return f"({params}) => {format_type(signatures[0].get('type'), index)}"
    return UNKNOWN_TYPE


def break_text(value: str | None) -> str | None:
    """Join comment paragraphs with ``<br/>`` and turn ``<pre>`` blocks into highlight tags.

    Returns ``None`` for empty input.
    """
    if not value:
        return None
    formatted: str = ""
    index: int = 0
    while index < len(value):
        code_start: int = value.find(_PRE_OPEN, index)
        code_end: int = (
            value.find(_PRE_CLOSE, code_start + len(_PRE_OPEN)) if code_start != -1 else -1
        )
        comment_end: int = code_start if code_end != -1 else len(value)
        paragraphs = _PARAGRAPH_BREAK.split(value[index:comment_end])
        formatted += "<br/>".join(t for t in paragraphs if t.strip())

        if code_end != -1:
            code: str = value[code_start + len(_PRE_OPEN) : code_end]
            formatted += f"{{% highlight javascript %}}{code}{{% endhighlight %}}"
            index = code_end + len(_PRE_CLOSE)
        else:
            index = comment_end
    return formatted


def format_comment(comment: Any) -> str:
    """Return the short and long comment text as HTML (empty without a comment)."""
    if not isinstance(comment, Mapping):
        return ""
    parts = (break_text(comment.get("shortText")), break_text(comment.get("text")))
    return "<br />".join(part for part in parts if part)


def result_color_class(passed: int, total: int) -> str:
    """Return ``test-color-<B>`` for the largest boundary ``B`` <= the pass percentage.

    Returns an empty string when no test ran.
    """
    percentage: int | None = EnvironmentResult(passed=passed, total=total).percentage
    if percentage is None:
        return ""
    boundary: int | None = largest_boundary_at_most(percentage, COLOR_BOUNDARIES)
    return "" if boundary is None else f"test-color-{boundary}"


def result_markup(title: str, value: Any) -> list[Element]:
    """Title and ``passed/total`` count for one result (nothing when absent)."""
    result: EnvironmentResult | None = EnvironmentResult.from_json(value)
    if result is None:
        return []
    css: str = result_color_class(result.passed, result.total)
    return [
        h5(title, {"class": "test-result-title"}),
        span(f"{result.passed}/{result.total}", {"class": f"test-result {css}"}),
    ]


def result_pip(value: Any) -> list[Element]:
    """Small colored marker for one environment (nothing when absent)."""
    result: EnvironmentResult | None = EnvironmentResult.from_json(value)
    if result is None:
        return []
    css: str = result_color_class(result.passed, result.total)
    return [span("", {"class": f"test-pip test-result {css}"})]


def combined_results_markup(results: Mapping[str, Any]) -> Element:
    """Combined count, per-environment pips and a collapsible per-environment breakdown."""
    pips: list[Element] = [
        pip for key, _label in ENVIRONMENTS for pip in result_pip(results.get(key))
    ]
    details: list[Element] = [
        node for key, label in ENVIRONMENTS for node in result_markup(label, results.get(key))
    ]
    return section(
        [
            *result_markup("Tests", results.get(COMBINED_KEY)),
            *pips,
            section([section(details, {"class": "test-content"})], {"class": "test-collapsible"}),
        ],
        {"class": "test-results"},
    )
