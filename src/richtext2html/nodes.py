"""Document tree node types and accessors."""

from __future__ import annotations

import logging
from enum import Enum, IntFlag
from typing import Any, Iterator, Mapping

logger = logging.getLogger(__name__)


class NodeType(str, Enum):
    """Node tags understood by the serializer.

    Tags outside this set resolve to ``UNKNOWN`` and render as their children.
    """

    ROOT = "root"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    LIST_ITEM = "listitem"
    QUOTE = "quote"
    LINK = "link"
    LINE_BREAK = "linebreak"
    TEXT = "text"
    CODE = "code"
    CODE_HIGHLIGHT = "codehighlight"
    UPLOAD = "upload"
    UNKNOWN = "unknown"


class TextFormat(IntFlag):
    """Bits of a text node's ``format`` field."""

    BOLD = 1
    ITALIC = 2
    STRIKETHROUGH = 4
    UNDERLINE = 8


_KNOWN_FORMAT_BITS = (
    TextFormat.BOLD | TextFormat.ITALIC | TextFormat.STRIKETHROUGH | TextFormat.UNDERLINE
)


def node_type(node: Mapping[str, Any]) -> NodeType:
    """Resolve the ``type`` tag of a node, falling back to ``UNKNOWN``."""
    value = node.get("type")
    if not isinstance(value, str):
        return NodeType.UNKNOWN
    try:
        return NodeType(value)
    except ValueError:
        return NodeType.UNKNOWN


def iter_children(node: Mapping[str, Any]) -> Iterator[Mapping[str, Any]]:
    """Yield the child nodes of ``node``, skipping anything that is not a node."""
    children = node.get("children")
    if not isinstance(children, (list, tuple)):
        return
    for child in children:
        if isinstance(child, Mapping):
            yield child


def get_root(content: Any) -> Mapping[str, Any] | None:
    """Locate the root node of a document.

    Accepts the editor state wrapper (``{"root": {...}}``) as stored by the
    content store, or a bare ``root`` node. Anything else yields ``None``.
    """
    if content is None:
        return None
    if not isinstance(content, Mapping):
        logger.debug("Ignoring non-mapping document content: %s", type(content).__name__)
        return None
    root = content.get("root")
    if isinstance(root, Mapping):
        return root
    if content.get("type") == NodeType.ROOT.value:
        return content
    return None


def text_format(node: Mapping[str, Any]) -> TextFormat:
    """Return the known formatting bits of a text node; unknown bits are dropped."""
    value = node.get("format")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return TextFormat(0)
    return TextFormat(value & _KNOWN_FORMAT_BITS)
