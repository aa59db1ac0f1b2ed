"""Heading extraction and table-of-contents outline building."""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from richtext2html.config import RICHTEXT2HTML_DEFAULT_HEADING_LEVEL
from richtext2html.nodes import NodeType, get_root, iter_children, node_type
from richtext2html.schemas import HeadingItem, OutlineNode
from richtext2html.text_utils import get_text, slugify

# Longer digit runs are not heading levels and would overflow int() limits.
_LEVEL_RE = re.compile(r"^\D*(\d{1,3})(?!\d)")
_MIN_LEVEL = 1
_MAX_LEVEL = 6


def heading_level(
    tag: Any, default: int = RICHTEXT2HTML_DEFAULT_HEADING_LEVEL
) -> int:
    """Parse a heading tag such as ``"h3"`` into its level.

    The non-digit prefix is stripped and the digits are returned as-is. A
    missing tag, a digitless tag, or one with an implausibly long number
    yields ``default``.
    """
    if not isinstance(tag, str):
        return default
    match = _LEVEL_RE.match(tag)
    if not match:
        return default
    return int(match.group(1))


def html_heading_level(level: int) -> int:
    """Clamp a heading level to the range HTML supports (1-6)."""
    return min(max(level, _MIN_LEVEL), _MAX_LEVEL)


def extract_headings(
    content: Any, *, default_level: int = RICHTEXT2HTML_DEFAULT_HEADING_LEVEL
) -> list[HeadingItem]:
    """Collect the headings of a document in document order.

    Every node's children are visited, so headings nested inside other
    containers are found too. Headings whose text is blank are skipped.

    Args:
        content: Editor state (``{"root": ...}``), a bare root node, or None.
        default_level: Level used when a heading has no usable ``tag``.

    Returns:
        The headings, each with a slug id, trimmed text and level.
    """
    root = get_root(content)
    if root is None:
        return []

    headings: list[HeadingItem] = []

    def _walk(node: Mapping[str, Any]) -> None:
        if node_type(node) is NodeType.HEADING:
            text = get_text(node)
            if text.strip():
                headings.append(
                    HeadingItem(
                        id=slugify(text),
                        text=text.strip(),
                        level=heading_level(node.get("tag"), default_level),
                    )
                )
        for child in iter_children(node):
            _walk(child)

    _walk(root)
    return headings


def heading_id_map(headings: Iterable[HeadingItem]) -> dict[str, str]:
    """Map heading text to anchor id. Later duplicates overwrite earlier ones."""
    return {heading.text: heading.id for heading in headings}


def build_outline(headings: Iterable[HeadingItem]) -> list[OutlineNode]:
    """Nest a flat heading list under the nearest preceding shallower heading."""
    outline: list[OutlineNode] = []
    stack: list[OutlineNode] = []

    for heading in headings:
        node = OutlineNode(id=heading.id, text=heading.text, level=heading.level)

        while stack and stack[-1].level >= heading.level:
            stack.pop()

        if stack:
            stack[-1].children.append(node)
        else:
            outline.append(node)

        stack.append(node)

    return outline
