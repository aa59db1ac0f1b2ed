"""Estimate reading time for rendered HTML."""

from __future__ import annotations

import math
import re

from richtext2html.config import RICHTEXT2HTML_WORDS_PER_MINUTE

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
# Decoded in this order; &amp; before the others so "&amp;lt;" stays "&lt;".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def html_to_text(html: str) -> str:
    """Strip tags, decode the entities the serializer emits and collapse whitespace."""
    text = _TAG_RE.sub(" ", html)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return _WHITESPACE_RE.sub(" ", text).strip()


def reading_time(
    html: str, *, words_per_minute: int = RICHTEXT2HTML_WORDS_PER_MINUTE
) -> int:
    """Estimate minutes needed to read an HTML fragment.

    Args:
        html: Rendered HTML (plain text works too).
        words_per_minute: Reading speed.

    Returns:
        Whole minutes, rounded up, at least 1 when there is any text and 0
        when there is none.
    """
    if not html:
        return 0
    text = html_to_text(html)
    if not text:
        return 0
    word_count = len(text.split(" "))
    return max(1, math.ceil(word_count / words_per_minute))
