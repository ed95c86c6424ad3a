# topmark:header:start
#
#   project      : ApiMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ApiMark test suite.

This file sets up global fixtures, the sample reflection tree shared by the
generator tests, and the logging configuration for test runs.

Notes:
    Reflection trees are plain JSON structures and the generators annotate
    them in place (test results). Fixtures therefore return a fresh deep copy
    for every test.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from apimark.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_apimark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ApiMark's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    APIMARK_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("APIMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Sample reflection tree ---


def intrinsic(name: str) -> dict[str, Any]:
    """Return an intrinsic type (``string``, ``void``...)."""
    return {"type": "intrinsic", "name": name}


def reference(name: str, *type_arguments: dict[str, Any]) -> dict[str, Any]:
    """Return a reference type, with type arguments when given."""
    ref: dict[str, Any] = {"type": "reference", "name": name}
    if type_arguments:
        ref["typeArguments"] = list(type_arguments)
    return ref


def parameter(name: str, type_: dict[str, Any], text: str | None = None) -> dict[str, Any]:
    """Return a Parameter node."""
    node: dict[str, Any] = {"name": name, "kindString": "Parameter", "type": type_}
    if text is not None:
        node["comment"] = {"text": text}
    return node


IGNORE_COMMENT: dict[str, Any] = {"tags": [{"tag": "ignore", "text": "\n"}]}

SAMPLE_TREE: dict[str, Any] = {
    "id": 0,
    "name": "containerjs",
    "kind": 0,
    "flags": {},
    "children": [
        {
            "name": '"api"',
            "kindString": "Module",
            "flags": {"isExported": True},
            "children": [
                {
                    "name": "Window",
                    "kindString": "Class",
                    "comment": {
                        "shortText": "A desktop window.",
                        "text": "Created by the container.",
                    },
                    "children": [
                        {
                            "name": "constructor",
                            "kindString": "Constructor",
                            "signatures": [
                                {
                                    "name": "new Window",
                                    "kindString": "Constructor signature",
                                    "parameters": [
                                        parameter("options", reference("WindowOptions"), "Options.")
                                    ],
                                    "type": reference("Window"),
                                }
                            ],
                        },
                        {
                            "name": "getCurrentWindow",
                            "kindString": "Method",
                            "flags": {"isStatic": True},
                            "signatures": [
                                {
                                    "name": "getCurrentWindow",
                                    "kindString": "Call signature",
                                    "comment": {
                                        "shortText": "Gets the current window.",
                                        "returns": "The current window.",
                                    },
                                    "type": reference("Window"),
                                }
                            ],
                        },
                        {
                            "name": "id",
                            "kindString": "Property",
                            "comment": {"shortText": "The window id."},
                            "type": intrinsic("string"),
                        },
                        {
                            "name": "addListener",
                            "kindString": "Method",
                            "flags": {},
                            "signatures": [
                                {
                                    "name": "addListener",
                                    "kindString": "Call signature",
                                    "parameters": [
                                        parameter("event", intrinsic("string")),
                                        parameter(
                                            "listener",
                                            {
                                                "type": "reflection",
                                                "declaration": {
                                                    "name": "__type",
                                                    "kindString": "Type literal",
                                                    "signatures": [
                                                        {
                                                            "name": "__call",
                                                            "kindString": "Call signature",
                                                            "parameters": [
                                                                parameter(
                                                                    "ev", reference("ShowEvent")
                                                                )
                                                            ],
                                                            "type": intrinsic("void"),
                                                        }
                                                    ],
                                                },
                                            },
                                        ),
                                    ],
                                    "type": intrinsic("void"),
                                }
                            ],
                        },
                        {
                            "name": "focus",
                            "kindString": "Method",
                            "signatures": [
                                {
                                    "name": "focus",
                                    "kindString": "Call signature",
                                    "comment": {"shortText": "Focus the window."},
                                    "type": intrinsic("void"),
                                },
                                {
                                    "name": "focus",
                                    "kindString": "Call signature",
                                    "comment": {"shortText": "Focus, optionally forcing it."},
                                    "parameters": [parameter("force", intrinsic("boolean"))],
                                    "type": intrinsic("void"),
                                },
                            ],
                        },
                        {
                            "name": "internalHandle",
                            "kindString": "Method",
                            "comment": IGNORE_COMMENT,
                            "signatures": [
                                {
                                    "name": "internalHandle",
                                    "kindString": "Call signature",
                                    "type": intrinsic("number"),
                                }
                            ],
                        },
                    ],
                },
                {
                    "name": "Window",
                    "kindString": "Interface",
                    "children": [
                        {
                            "name": "title",
                            "kindString": "Property",
                            "flags": {"isOptional": True},
                            "type": {
                                "type": "union",
                                "types": [intrinsic("string"), intrinsic("undefined")],
                            },
                        },
                        {
                            "name": "close",
                            "kindString": "Method",
                            "signatures": [
                                {
                                    "name": "close",
                                    "kindString": "Call signature",
                                    "type": reference("Promise", intrinsic("void")),
                                }
                            ],
                        },
                    ],
                },
                {
                    "name": "ShowEvent",
                    "kindString": "Interface",
                    "children": [
                        {
                            "name": "target",
                            "kindString": "Property",
                            "comment": {"shortText": "The window being shown."},
                            "type": reference("Window"),
                        }
                    ],
                },
                {
                    "name": "Hidden",
                    "kindString": "Class",
                    "comment": IGNORE_COMMENT,
                    "children": [
                        {
                            "name": "reveal",
                            "kindString": "Method",
                            "signatures": [
                                {
                                    "name": "reveal",
                                    "kindString": "Call signature",
                                    "type": intrinsic("void"),
                                }
                            ],
                        }
                    ],
                },
            ],
        }
    ],
}

SAMPLE_REPORT: dict[str, Any] = {
    "ssf.Window.focus": {
        "electron": {"passed": 3, "total": 4},
        "openfin": {"passed": 0, "total": 0},
        "browser": {"passed": 4, "total": 4},
    },
    "ssf.Window.id": {"electron": {"passed": 1, "total": 2}},
    "ssf.Window()": {
        "electron": {"passed": 1, "total": 1},
        "openfin": {"passed": 1, "total": 1},
        "browser": {"passed": 0, "total": 1},
    },
    "ssf.Missing.thing": {"electron": {"passed": 1, "total": 1}},
}


@pytest.fixture
def sample_tree() -> dict[str, Any]:
    """Return a fresh copy of the sample reflection tree."""
    return copy.deepcopy(SAMPLE_TREE)


@pytest.fixture
def sample_report() -> dict[str, Any]:
    """Return a fresh copy of the sample test report."""
    return copy.deepcopy(SAMPLE_REPORT)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return a directory holding ``type-info.json`` and ``test-report.json``."""
    (tmp_path / "type-info.json").write_text(json.dumps(SAMPLE_TREE), encoding="utf-8")
    (tmp_path / "test-report.json").write_text(json.dumps(SAMPLE_REPORT), encoding="utf-8")
    return tmp_path
