"""Serialize a rich-text document tree into HTML."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from richtext2html.config import (
    RICHTEXT2HTML_DEFAULT_CODE_LANGUAGE,
    RICHTEXT2HTML_DEFAULT_HEADING_LEVEL,
    RICHTEXT2HTML_DEFAULT_LINK_HREF,
)
from richtext2html.exceptions import InvalidNodeError
from richtext2html.headings import (
    extract_headings,
    heading_id_map,
    heading_level,
    html_heading_level,
)
from richtext2html.nodes import (
    NodeType,
    TextFormat,
    get_root,
    iter_children,
    node_type,
    text_format,
)
from richtext2html.text_utils import escape_html, get_text, slugify

logger = logging.getLogger(__name__)

# Wrapping order is significant: each tag encloses the previous result.
_FORMAT_TAGS = (
    (TextFormat.BOLD, "strong"),
    (TextFormat.ITALIC, "em"),
    (TextFormat.UNDERLINE, "u"),
    (TextFormat.STRIKETHROUGH, "s"),
)

_WRAPPER_TAGS = {
    NodeType.PARAGRAPH: "p",
    NodeType.LIST_ITEM: "li",
    NodeType.QUOTE: "blockquote",
}


@dataclass
class RenderOptions:
    """Options for HTML rendering.

    Attributes:
        default_heading_level: Level used for headings without a usable tag.
        default_code_language: Language class used for highlighted code
            blocks without a ``language``.
        default_link_href: ``href`` used for links without a ``url``.
        pre_class: Optional CSS class for ``<pre>`` code block wrappers.
        figure_class: Optional CSS class for upload ``<figure>`` elements.
        image_class: Optional CSS class for upload ``<img>`` elements.
        figcaption_class: Optional CSS class for upload captions.
        strict: If True, raise InvalidNodeError on unrecognized node types
            instead of rendering their children.
    """

    default_heading_level: int = RICHTEXT2HTML_DEFAULT_HEADING_LEVEL
    default_code_language: str = RICHTEXT2HTML_DEFAULT_CODE_LANGUAGE
    default_link_href: str = RICHTEXT2HTML_DEFAULT_LINK_HREF
    pre_class: str | None = None
    figure_class: str | None = None
    image_class: str | None = None
    figcaption_class: str | None = None
    strict: bool = False


def render_html(content: Any, options: RenderOptions | None = None) -> str:
    """Render a document tree into an HTML fragment.

    Heading ids are taken from the same extraction pass that feeds the table
    of contents, so anchors in the body match the outline.

    Args:
        content: Editor state (``{"root": ...}``), a bare root node, or None.
        options: Rendering options. Uses defaults if None.

    Returns:
        The HTML fragment, or an empty string when there is no root.

    Raises:
        InvalidNodeError: Only when ``options.strict`` is set and an
            unrecognized node type is encountered.
    """
    opts = options or RenderOptions()
    root = get_root(content)
    if root is None:
        return ""
    heading_ids = heading_id_map(
        extract_headings(content, default_level=opts.default_heading_level)
    )
    return serialize_node(root, heading_ids=heading_ids, options=opts)


def serialize_node(
    node: Mapping[str, Any],
    *,
    heading_ids: Mapping[str, str],
    options: RenderOptions,
) -> str:
    """Serialize a single node and its descendants."""
    kind = node_type(node)

    if kind is NodeType.ROOT:
        return _serialize_children(node, heading_ids=heading_ids, options=options)

    if kind in _WRAPPER_TAGS:
        tag = _WRAPPER_TAGS[kind]
        inner = _serialize_children(node, heading_ids=heading_ids, options=options)
        return f"<{tag}>{inner}</{tag}>"

    if kind is NodeType.HEADING:
        return _serialize_heading(node, heading_ids=heading_ids, options=options)

    if kind is NodeType.LIST:
        tag = "ol" if node.get("listType") == "number" else "ul"
        inner = _serialize_children(node, heading_ids=heading_ids, options=options)
        return f"<{tag}>{inner}</{tag}>"

    if kind is NodeType.LINK:
        return _serialize_link(node, heading_ids=heading_ids, options=options)

    if kind is NodeType.LINE_BREAK:
        return "<br />"

    if kind is NodeType.TEXT:
        return wrap_text_formatting(_string_field(node, "text"), text_format(node))

    if kind is NodeType.CODE:
        return _serialize_code(node, language=None, options=options)

    if kind is NodeType.CODE_HIGHLIGHT:
        language = _string_field(node, "language") or options.default_code_language
        return _serialize_code(node, language=language, options=options)

    if kind is NodeType.UPLOAD:
        return _serialize_upload(node, options=options)

    if options.strict:
        raise InvalidNodeError(f"Unsupported node type: {node.get('type')!r}")
    logger.debug("Rendering children of unknown node type %r", node.get("type"))
    return _serialize_children(node, heading_ids=heading_ids, options=options)


def wrap_text_formatting(text: str, fmt: TextFormat | int = 0) -> str:
    """Escape ``text`` and wrap it in the tags selected by the format bitmask."""
    output = escape_html(text)
    for flag, tag in _FORMAT_TAGS:
        if fmt & flag:
            output = f"<{tag}>{output}</{tag}>"
    return output


def _serialize_children(
    node: Mapping[str, Any],
    *,
    heading_ids: Mapping[str, str],
    options: RenderOptions,
) -> str:
    return "".join(
        serialize_node(child, heading_ids=heading_ids, options=options)
        for child in iter_children(node)
    )


def _serialize_heading(
    node: Mapping[str, Any],
    *,
    heading_ids: Mapping[str, str],
    options: RenderOptions,
) -> str:
    level = html_heading_level(
        heading_level(node.get("tag"), options.default_heading_level)
    )
    text = get_text(node)
    anchor = heading_ids.get(text.strip())
    if anchor is None:
        anchor = slugify(text)
    inner = _serialize_children(node, heading_ids=heading_ids, options=options)
    return f'<h{level} id="{escape_html(anchor)}">{inner}</h{level}>'


def _serialize_link(
    node: Mapping[str, Any],
    *,
    heading_ids: Mapping[str, str],
    options: RenderOptions,
) -> str:
    href = _string_field(node, "url") or options.default_link_href
    new_tab = bool(node.get("newTab"))
    target = "_blank" if new_tab else "_self"
    rel = "noopener noreferrer" if new_tab else "noopener"
    inner = _serialize_children(node, heading_ids=heading_ids, options=options)
    return (
        f'<a href="{escape_html(href)}" target="{target}" rel="{rel}">{inner}</a>'
    )


def _serialize_code(
    node: Mapping[str, Any], *, language: str | None, options: RenderOptions
) -> str:
    code = escape_html(_string_field(node, "code"))
    code_attrs = f' class="language-{escape_html(language)}"' if language else ""
    return f"<pre{_class_attr(options.pre_class)}><code{code_attrs}>{code}</code></pre>"


def _serialize_upload(node: Mapping[str, Any], *, options: RenderOptions) -> str:
    value = node.get("value")
    if not isinstance(value, Mapping):
        return ""
    url = _string_field(value, "url")
    if not url:
        return ""
    alt = _string_field(value, "alt")
    caption = _string_field(value, "caption")

    parts = [
        f"<figure{_class_attr(options.figure_class)}>",
        f'<img src="{escape_html(url)}" alt="{escape_html(alt)}"'
        f"{_class_attr(options.image_class)} />",
    ]
    if caption:
        parts.append(
            f"<figcaption{_class_attr(options.figcaption_class)}>"
            f"{escape_html(caption)}</figcaption>"
        )
    parts.append("</figure>")
    return "".join(parts)


def _string_field(node: Mapping[str, Any], key: str) -> str:
    value = node.get(key)
    return value if isinstance(value, str) else ""


def _class_attr(value: str | None) -> str:
    return f' class="{escape_html(value)}"' if value else ""
