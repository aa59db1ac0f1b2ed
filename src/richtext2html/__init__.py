"""richtext2html: render rich-text document trees into HTML."""

from richtext2html.exceptions import InvalidNodeError, ParseError, RichText2HtmlError
from richtext2html.headings import build_outline, extract_headings, heading_id_map
from richtext2html.nodes import NodeType, TextFormat
from richtext2html.reading_time import reading_time
from richtext2html.rendering import parse_document, render_document
from richtext2html.schemas import HeadingItem, OutlineNode, RenderedDocument
from richtext2html.serializer import RenderOptions, render_html
from richtext2html.text_utils import escape_html, slugify

__all__ = [
    "HeadingItem",
    "InvalidNodeError",
    "NodeType",
    "OutlineNode",
    "ParseError",
    "RenderOptions",
    "RenderedDocument",
    "RichText2HtmlError",
    "TextFormat",
    "build_outline",
    "escape_html",
    "extract_headings",
    "heading_id_map",
    "parse_document",
    "reading_time",
    "render_document",
    "render_html",
    "slugify",
]
