# topmark:header:start
#
#   project      : ApiMark
#   file         : test_document.py
#   file_relpath : tests/transform/test_document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the rule cascade documenting one type."""

from __future__ import annotations

from typing import Any

import pytest

from apimark.diagnostics import DiagnosticLog
from apimark.reflection.report import merge_test_report
from apimark.transform.formatting import Category, DocumentedType, TypeIndex
from apimark.transform.generate import documented_types, render_type

WINDOW = DocumentedType("Window", Category.CLASS)
IWINDOW = DocumentedType("Window", Category.INTERFACE)
SHOW_EVENT = DocumentedType("ShowEvent", Category.EVENT)
INDEX = TypeIndex([WINDOW, IWINDOW, SHOW_EVENT])


@pytest.fixture
def merged_tree(sample_tree: dict[str, Any], sample_report: dict[str, Any]) -> dict[str, Any]:
    """Return the sample tree with the sample report merged in."""
    merge_test_report(sample_tree, sample_report, DiagnosticLog())
    return sample_tree


def test_minimal_class() -> None:
    """A class with one method renders a single Methods section."""
    tree = {
        "children": [
            {
                "name": "Clock",
                "kindString": "Class",
                "children": [
                    {
                        "name": "now",
                        "kindString": "Method",
                        "signatures": [
                            {
                                "name": "now",
                                "kindString": "Call signature",
                                "type": {"type": "intrinsic", "name": "number"},
                            }
                        ],
                    }
                ],
            }
        ]
    }
    html = render_type(tree, DocumentedType("Clock", Category.CLASS), TypeIndex())
    assert html == (
        '<section id="Clock" class="docs-title"><h2>Clock</h2><p></p>'
        '<h3>Methods</h3><section class="methods"><section class="method"><section>'
        '<h4 class="method-name" id="Clock-now">now</h4><p></p>'
        '<h5>Returns</h5><dl><dt class="code return-value">number</dt><dd></dd></dl>'
        "</section></section></section></section>"
    )


def test_class_section_order(merged_tree: dict[str, Any]) -> None:
    """Static methods, constructors, properties and methods appear in that order."""
    html = render_type(merged_tree, WINDOW, INDEX)
    assert html.startswith('<section id="Window" class="docs-title"><h2>Window</h2>')
    assert "<p>A desktop window.<br />Created by the container.</p>" in html
    headings = ["Static Methods", "Constructors", "Properties", "Methods"]
    positions = [html.index(f"<h3>{h}</h3>") for h in headings]
    assert positions == sorted(positions)
    assert "internalHandle" not in html


def test_only_first_signature_is_documented(merged_tree: dict[str, Any]) -> None:
    """An overloaded method shows its first signature and its results."""
    html = render_type(merged_tree, WINDOW, INDEX)
    assert html.count('id="Window-focus"') == 1
    assert "Focus the window." in html
    assert "Focus, optionally forcing it." not in html
    assert '<span class="test-result test-color-75">7/8</span>' in html


def test_signature_arguments_and_returns(merged_tree: dict[str, Any]) -> None:
    """Parameters render as a definition list; returns link documented types."""
    html = render_type(merged_tree, WINDOW, INDEX)
    assert (
        '<dt class="code argument">listener '
        '[(ev: <a href="#ShowEvent-event">ShowEvent</a>) => void]</dt><dd></dd>'
    ) in html
    assert (
        '<h5>Returns</h5><dl><dt class="code return-value"><a href="#Window">Window</a></dt>'
        "<dd>The current window.</dd></dl>"
    ) in html
    assert '<dt class="code argument">options [WindowOptions]</dt><dd>Options.</dd>' in html


def test_signature_without_parameters_has_no_arguments() -> None:
    """The Arguments heading only appears for signatures with parameters."""
    tree = {
        "children": [
            {
                "name": "Clock",
                "kindString": "Class",
                "children": [
                    {
                        "name": "now",
                        "kindString": "Method",
                        "signatures": [{"name": "now", "kindString": "Call signature"}],
                    }
                ],
            }
        ]
    }
    html = render_type(tree, DocumentedType("Clock", Category.CLASS), TypeIndex())
    assert "Arguments" not in html
    assert '<dt class="code return-value">UNKNOWN</dt>' in html


def test_property_section(merged_tree: dict[str, Any]) -> None:
    """Properties carry their name as id, results and description."""
    html = render_type(merged_tree, WINDOW, INDEX)
    assert (
        '<section class="property" id="id"><h4 class="property-name">id</h4>'
        '<section class="test-results">'
    ) in html
    assert "<p>The window id.</p></section>" in html


def test_interface_has_no_constructors(merged_tree: dict[str, Any]) -> None:
    """Interfaces use the ``-interface`` anchor and omit empty categories."""
    html = render_type(merged_tree, IWINDOW, INDEX)
    assert html.startswith('<section id="Window-interface" class="docs-title">')
    assert "<h3>Constructors</h3>" not in html
    assert "<h3>Static Methods</h3>" not in html
    assert "<h3>Properties</h3>" in html
    assert '<dt class="code return-value">Promise&lt;void&gt;</dt>' in html


def test_event_properties_are_titled_events(merged_tree: dict[str, Any]) -> None:
    """Event interfaces list their properties under Events."""
    html = render_type(merged_tree, SHOW_EVENT, INDEX)
    assert html.startswith('<section id="ShowEvent-event" class="docs-title">')
    assert '<h3>Events</h3><section class="events">' in html
    assert "<h3>Properties</h3>" not in html
    assert "<h3>Methods</h3>" not in html


def test_documented_types_order(sample_tree: dict[str, Any]) -> None:
    """Classes come first, then interfaces, then events; ignored classes are skipped."""
    assert documented_types(sample_tree) == [WINDOW, IWINDOW, SHOW_EVENT]
