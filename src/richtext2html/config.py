"""Local configuration for richtext2html."""

from __future__ import annotations

import os


DEFAULT_HEADING_LEVEL = 2
DEFAULT_CODE_LANGUAGE = "text"
DEFAULT_LINK_HREF = "#"

# Fallbacks applied when a node omits the corresponding field.
RICHTEXT2HTML_DEFAULT_HEADING_LEVEL = int(
    os.getenv("RICHTEXT2HTML_DEFAULT_HEADING_LEVEL", str(DEFAULT_HEADING_LEVEL))
)
RICHTEXT2HTML_DEFAULT_CODE_LANGUAGE = os.getenv(
    "RICHTEXT2HTML_DEFAULT_CODE_LANGUAGE", DEFAULT_CODE_LANGUAGE
)
RICHTEXT2HTML_DEFAULT_LINK_HREF = os.getenv(
    "RICHTEXT2HTML_DEFAULT_LINK_HREF", DEFAULT_LINK_HREF
)

DEFAULT_WORDS_PER_MINUTE = 200

# Reading speed used for reading-time estimates.
RICHTEXT2HTML_WORDS_PER_MINUTE = int(
    os.getenv("RICHTEXT2HTML_WORDS_PER_MINUTE", str(DEFAULT_WORDS_PER_MINUTE))
)
