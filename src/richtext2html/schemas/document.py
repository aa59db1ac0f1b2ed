"""Render output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from richtext2html.schemas.headings import HeadingItem


class RenderedDocument(BaseModel):
    """HTML body plus the heading outline extracted from the same tree.

    Attributes:
        html: Rendered HTML fragment.
        headings: Heading outline in document order.
        reading_time: Estimated reading time of the body in minutes.
    """

    html: str
    headings: list[HeadingItem] = Field(default_factory=list)
    reading_time: int = Field(default=0, ge=0)
