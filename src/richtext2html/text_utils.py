"""Shared text utilities for slugs, escaping and plain-text extraction."""

from __future__ import annotations

import re
from typing import Any, Mapping

from richtext2html.nodes import NodeType, iter_children, node_type

_SLUG_DISALLOWED_RE = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")

# Ampersand must come first so entities produced later are not re-escaped.
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(value: str) -> str:
    """Escape text for use in HTML content and double-quoted attributes."""
    for char, entity in _HTML_ESCAPES:
        value = value.replace(char, entity)
    return value


def slugify(value: str) -> str:
    """Turn heading text into an anchor id.

    >>> slugify("Getting Started: Part 1!")
    'getting-started-part-1'
    """
    slug = _SLUG_DISALLOWED_RE.sub("", value.lower()).strip()
    slug = _WHITESPACE_RE.sub("-", slug)
    return _HYPHENS_RE.sub("-", slug)


def get_text(node: Mapping[str, Any] | None) -> str:
    """Concatenate the payload of every text node under ``node``, ignoring markup."""
    if not node:
        return ""
    if node_type(node) is NodeType.TEXT:
        text = node.get("text")
        return text if isinstance(text, str) else ""
    return "".join(get_text(child) for child in iter_children(node))
