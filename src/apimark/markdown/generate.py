# topmark:header:start
#
#   project      : ApiMark
#   file         : generate.py
#   file_relpath : src/apimark/markdown/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the markdown generator end to end (CLI-free)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from apimark.config.logging import get_logger
from apimark.constants import DEFAULT_TESTFILE
from apimark.markdown.renderer import DocumentSet, RenderOptions, render_tree
from apimark.markdown.writer import WriteSummary, write_documents
from apimark.reflection.loader import load_test_report, load_type_info

if TYPE_CHECKING:
    from apimark.config.logging import ApimarkLogger
    from apimark.config.model import Config
    from apimark.diagnostics import DiagnosticLog
    from apimark.reflection.model import Node

logger: ApimarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class MarkdownResult:
    """Outcome of a markdown generation run."""

    documents: DocumentSet
    summary: WriteSummary


def generate_markdown(config: Config, diagnostics: DiagnosticLog) -> MarkdownResult:
    """Render the reflection tree of ``config.infile`` into ``config.outdir``.

    The test report defaults to ``test-report.json`` when none is configured;
    a missing report only produces a warning.

    Raises:
        ReflectionLoadError: If the reflection tree cannot be loaded.
        OSError: If the output directory cannot be created.
    """
    tree: Node = load_type_info(config.infile)
    testfile: Path = config.testfile or Path(DEFAULT_TESTFILE)
    report: dict[str, Any] | None = load_test_report(testfile, diagnostics)

    options = RenderOptions(namespace=config.namespace, report=report)
    documents: DocumentSet = render_tree(tree, options=options)
    logger.info("Rendered %d markdown documents", len(documents))

    summary: WriteSummary = write_documents(
        documents, config.outdir, diagnostics, base_url=config.base_url
    )
    return MarkdownResult(documents=documents, summary=summary)
