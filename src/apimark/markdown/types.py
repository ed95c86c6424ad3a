# topmark:header:start
#
#   project      : ApiMark
#   file         : types.py
#   file_relpath : src/apimark/markdown/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text type signatures for the markdown pages."""

from __future__ import annotations

from typing import Any

from apimark.reflection.model import Kind, Node, parameters_of, signatures_of


def format_type(type_: Node | None) -> str:
    """Render a reflection type as a plain signature string.

    - union types join their members with ``|``;
    - reflection (inline function) types render as ``(p: T, ...) => R``;
    - types with type arguments render as ``Name<A, B>``;
    - everything else renders its bare name, and a missing type renders as ``""``.
    """
    if not type_:
        return ""

    kind: Any = type_.get("type")
    if kind == "union":
        return "|".join(format_type(t) for t in type_.get("types") or [])
    if kind == "reflection":
        return _format_reflection(type_)

    name: str = str(type_.get("name", ""))
    type_arguments: Any = type_.get("typeArguments")
    if type_arguments:
        return name + "<" + ", ".join(format_type(arg) for arg in type_arguments) + ">"
    return name


def format_parameters(signature: Node) -> list[str]:
    """Return ``["name: Type", ...]`` for the parameters of a signature."""
    return [
        f"{param.get('name', '')}: {format_type(param.get('type'))}"
        for param in parameters_of(signature)
    ]


def _format_reflection(type_: Node) -> str:
    declaration: Any = type_.get("declaration") or {}
    if Kind.of(declaration) is not Kind.TYPE_LITERAL:
        return ""
    return "".join(
        f"({', '.join(format_parameters(sig))}) => {format_type(sig.get('type'))}"
        for sig in signatures_of(declaration)
        if Kind.of(sig) is Kind.CALL_SIGNATURE
    )
