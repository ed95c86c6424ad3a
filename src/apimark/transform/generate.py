# topmark:header:start
#
#   project      : ApiMark
#   file         : generate.py
#   file_relpath : src/apimark/transform/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the HTML generator end to end (CLI-free).

Steps:
    1. load the reflection tree (fatal on failure);
    2. merge the test report into the tree, when a test file is configured;
    3. list the documented types: classes, then interfaces, then event
       interfaces, each alphabetically;
    4. write the front matter once, then one HTML fragment per type.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from apimark.config.logging import get_logger
from apimark.constants import DEFAULT_HTML_FILE_NAME
from apimark.reflection.loader import load_test_report, load_type_info
from apimark.reflection.model import Kind, is_event_name
from apimark.reflection.query import Selector
from apimark.reflection.report import merge_test_report
from apimark.transform.document import TypeDocumenter
from apimark.transform.elements import to_html
from apimark.transform.engine import Rule, dispatch
from apimark.transform.formatting import Category, DocumentedType, TypeIndex

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apimark.config.logging import ApimarkLogger
    from apimark.config.model import Config
    from apimark.diagnostics import DiagnosticLog
    from apimark.reflection.model import Node

logger: ApimarkLogger = get_logger(__name__)

FRONT_MATTER: dict[str, str] = {"layout": "api", "sectionid": "docs", "class": "docs"}


def list_type_names(tree: Node, kind: Kind) -> list[str]:
    """Return the sorted, distinct names of all nodes of ``kind`` in ``tree``."""
    names: list[Any] = dispatch(
        tree,
        [
            Rule(Selector.deep_(kind), lambda ctx: ctx.runner()),
            Rule(Selector.self_(kind), lambda ctx: ctx.match.get("name")),
        ],
    )
    return sorted({str(name) for name in names})


def documented_types(tree: Node) -> list[DocumentedType]:
    """Return classes, then plain interfaces, then event interfaces (each sorted)."""
    classes: list[str] = list_type_names(tree, Kind.CLASS)
    interfaces: list[str] = list_type_names(tree, Kind.INTERFACE)
    return [
        *(DocumentedType(name, Category.CLASS) for name in classes),
        *(DocumentedType(n, Category.INTERFACE) for n in interfaces if not is_event_name(n)),
        *(DocumentedType(n, Category.EVENT) for n in interfaces if is_event_name(n)),
    ]


def front_matter() -> str:
    """Return the YAML front-matter block of the API page."""
    body: str = yaml.safe_dump(FRONT_MATTER, sort_keys=False, default_flow_style=False)
    return f"---\n{body}---\n"


def render_type(tree: Node, doc_type: DocumentedType, index: TypeIndex) -> str:
    """Return the HTML fragment documenting ``doc_type``."""
    return to_html(TypeDocumenter(doc_type, index).document(tree))


def render_fragments(tree: Node, types: Sequence[DocumentedType] | None = None) -> list[str]:
    """Return one HTML fragment per documented type, in documentation order."""
    types = documented_types(tree) if types is None else types
    index = TypeIndex(types)
    return [render_type(tree, doc_type, index) for doc_type in types]


def resolve_outfile(outfile: Path, cwd: Path | None = None) -> Path:
    """Resolve ``outfile`` against ``cwd``; a directory gets the default file name."""
    target: Path = (cwd or Path.cwd()) / outfile
    if target.is_dir():
        target = target / DEFAULT_HTML_FILE_NAME
    return target


@dataclass(frozen=True)
class HtmlResult:
    """Outcome of an HTML generation run."""

    path: Path
    types: tuple[DocumentedType, ...]
    merged: int


def generate_html(config: Config, diagnostics: DiagnosticLog) -> HtmlResult:
    """Generate the API page for ``config.infile`` into ``config.outfile``.

    Raises:
        ReflectionLoadError: If the reflection tree cannot be loaded.
        OSError: If the output file cannot be written.
    """
    tree: Node = load_type_info(config.infile)

    merged: int = 0
    if config.testfile is not None:
        report: dict[str, Any] | None = load_test_report(config.testfile, diagnostics)
        if report is not None:
            merged = merge_test_report(
                tree, report, diagnostics, namespace=config.namespace
            )

    types: list[DocumentedType] = documented_types(tree)
    index = TypeIndex(types)
    target: Path = resolve_outfile(config.outfile)

    with target.open("w", encoding="utf-8") as fh:
        fh.write(front_matter())
        for doc_type in types:
            logger.debug("Documenting %s %s", doc_type.category.value, doc_type.name)
            fh.write(render_type(tree, doc_type, index))

    logger.info("Wrote %d documented types to %s", len(types), target)
    return HtmlResult(path=target, types=tuple(types), merged=merged)
