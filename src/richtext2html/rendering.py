"""Render a stored document into HTML plus its heading outline."""

from __future__ import annotations

import json
from typing import Any

from richtext2html.exceptions import ParseError
from richtext2html.headings import extract_headings, heading_id_map
from richtext2html.nodes import get_root
from richtext2html.reading_time import reading_time
from richtext2html.schemas import RenderedDocument
from richtext2html.serializer import RenderOptions, serialize_node


def parse_document(raw: str | bytes) -> dict[str, Any]:
    """Decode a JSON document payload from the content store.

    Args:
        raw: JSON text or UTF-8 bytes.

    Returns:
        The decoded document object.

    Raises:
        ParseError: If the payload is not valid JSON or not a JSON object.
    """
    try:
        document = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ParseError(f"Invalid document JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise ParseError(
            f"Document must be a JSON object, got {type(document).__name__}"
        )
    return document


def render_document(
    content: Any, options: RenderOptions | None = None
) -> RenderedDocument:
    """Render the body HTML and extract the outline in a single heading pass.

    Args:
        content: Editor state (``{"root": ...}``), a bare root node, or None.
        options: Rendering options. Uses defaults if None.

    Returns:
        RenderedDocument whose heading ids match the rendered anchors, with
        the estimated reading time of the body.
    """
    opts = options or RenderOptions()
    root = get_root(content)
    if root is None:
        return RenderedDocument(html="", headings=[])

    headings = extract_headings(content, default_level=opts.default_heading_level)
    html = serialize_node(root, heading_ids=heading_id_map(headings), options=opts)
    return RenderedDocument(
        html=html, headings=headings, reading_time=reading_time(html)
    )
