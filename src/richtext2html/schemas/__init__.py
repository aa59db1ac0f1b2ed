"""Shared schemas for richtext2html."""

from richtext2html.schemas.document import RenderedDocument
from richtext2html.schemas.headings import HeadingItem, OutlineNode

__all__ = ["HeadingItem", "OutlineNode", "RenderedDocument"]
