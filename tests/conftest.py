"""Test setup for richtext2html."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def text(value: str, fmt: int = 0) -> dict[str, Any]:
    """Build a text node."""
    node: dict[str, Any] = {"type": "text", "text": value}
    if fmt:
        node["format"] = fmt
    return node


def doc(*children: dict[str, Any]) -> dict[str, Any]:
    """Wrap nodes in editor state, the shape stored by the content store."""
    return {"root": {"type": "root", "children": list(children)}}


@pytest.fixture
def setup_document() -> dict[str, Any]:
    """Heading followed by a paragraph containing a link."""
    return doc(
        {"type": "heading", "tag": "h2", "children": [text("Setup")]},
        {
            "type": "paragraph",
            "children": [
                text("Run "),
                {"type": "link", "url": "https://x.io", "children": [text("this")]},
            ],
        },
    )


@pytest.fixture
def article_document() -> dict[str, Any]:
    """Longer document with nested headings, lists and formatted text."""
    return doc(
        {"type": "heading", "tag": "h1", "children": [text("Launch Guide")]},
        {"type": "paragraph", "children": [text("Intro & overview")]},
        {"type": "heading", "tag": "h2", "children": [text("Getting Started: Part 1!")]},
        {
            "type": "list",
            "listType": "bullet",
            "children": [
                {
                    "type": "listitem",
                    "children": [
                        {
                            "type": "heading",
                            "tag": "h3",
                            "children": [text("Install "), text("deps", 1)],
                        }
                    ],
                },
                {"type": "listitem", "children": [text("Configure")]},
            ],
        },
        {"type": "heading", "tag": "h3", "children": [text("  Spaced  Out  ")]},
        {"type": "heading", "tag": "h2", "children": [text("FAQ")]},
    )
