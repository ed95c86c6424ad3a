# topmark:header:start
#
#   project      : ApiMark
#   file         : writer.py
#   file_relpath : src/apimark/markdown/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Write the markdown pages and the navigation template.

Every document becomes ``<Key>.md`` with a Jekyll front-matter block; the
navigation page ``docs.html`` lists one link per document plus the test matrix.
Writes are independent: a failed write is logged and recorded, and the other
files are still written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from apimark.config.logging import get_logger
from apimark.constants import DEFAULT_BASE_URL, NAV_FILE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from apimark.config.logging import ApimarkLogger
    from apimark.diagnostics import DiagnosticLog
    from apimark.markdown.renderer import DocumentSet

logger: ApimarkLogger = get_logger(__name__)


def pages_header(key: str) -> str:
    """Return the front-matter block of the page for ``key``."""
    return (
        "---  \n"
        f"id: {key}Api\n"
        f"title: {key} Api\n"
        f"permalink: docs/{key}.html\n"
        "layout: docs\n"
        "sectionid: docs\n"
        "---  \n\n"
    )


def _nav_link(page_id: str, href: str, label: str) -> str:
    return (
        f"<a {{% if page.id == '{page_id}' %}} class=\"list-group-item active\" "
        f"{{% else %}} class=\"list-group-item\" {{% endif %}} href=\"{href}\">{label}</a>"
    )


def docs_template(keys: Iterable[str], base_url: str = DEFAULT_BASE_URL) -> str:
    """Return the navigation template listing ``keys`` and the test matrix."""
    metadata: str = "---\nlayout: default\nsectionid: docs\n---\n\n"
    pre_list: str = '<section class="content row mr-0 ml-0">\n<div class="list-group col-3">\n'
    links: str = "\n".join(
        _nav_link(f"{key}Api", f"{base_url}/{key}", f"{key} API") for key in keys
    )
    test_matrix: str = _nav_link("testMatrix", f"{base_url}/test-matrix", "Test Matrix") + "\n"
    post_list: str = (
        '</div>\n<div class="doc-body pl-2 pt-2 col-9">\n{{ content }}\n</div>\n</section>'
    )
    return f"{metadata}{pre_list}{links}{test_matrix}{post_list}"


@dataclass
class WriteSummary:
    """Files written (and failed) by `write_documents`."""

    written: list[Path] = field(default_factory=lambda: [])
    failed: list[Path] = field(default_factory=lambda: [])


def _write_one(path: Path, text: str, summary: WriteSummary, diagnostics: DiagnosticLog) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        message: str = f"Cannot write {path}: {exc}"
        logger.error(message)
        diagnostics.add_error(message)
        summary.failed.append(path)
        return
    logger.debug("Wrote %s", path)
    summary.written.append(path)


def write_documents(
    documents: DocumentSet,
    outdir: Path,
    diagnostics: DiagnosticLog,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> WriteSummary:
    """Write one page per document and the navigation page into ``outdir``.

    Args:
        documents: Rendered markdown documents.
        outdir: Output directory; created if missing.
        diagnostics: Receives an error for each failed write.
        base_url: Link prefix used in the navigation page.

    Returns:
        The written and failed paths.

    Raises:
        OSError: If ``outdir`` cannot be created.
    """
    outdir.mkdir(parents=True, exist_ok=True)
    summary = WriteSummary()
    for key in documents:
        _write_one(outdir / f"{key}.md", pages_header(key) + documents[key], summary, diagnostics)
    nav: str = docs_template(documents.keys(), base_url)
    _write_one(outdir / NAV_FILE_NAME, nav, summary, diagnostics)
    return summary
