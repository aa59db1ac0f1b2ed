"""Heading outline models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HeadingItem(BaseModel):
    """A heading found in a document, in document order.

    Attributes:
        id: Anchor identifier rendered on the matching heading tag.
        text: Trimmed plain text of the heading.
        level: Heading level taken from the node's tag (``h3`` -> 3).
    """

    id: str
    text: str
    level: int


class OutlineNode(BaseModel):
    """A hierarchical table-of-contents entry."""

    id: str
    text: str
    level: int
    children: list["OutlineNode"] = Field(default_factory=list)
