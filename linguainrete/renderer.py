"""Conversion of a parsed subtree into terminal-styled text.

The rule table is deliberately small: bold and italic become ANSI emphasis,
``<br>`` and ``<p>`` become line breaks, ``<sup>`` (footnote numbers and
reference markers) disappears together with its content, and every other tag
is transparent. Links keep their visible text only.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from bs4 import NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from .config import LookupConfig
from .exceptions import MalformedDocumentError
from .text_stream import Style, TextStream


class NodeKind(Enum):
    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    LINE_BREAK = "line_break"
    PARAGRAPH = "paragraph"
    SUPERSCRIPT = "superscript"
    LINK = "link"
    GENERIC = "generic"
    IGNORED = "ignored"  # comments, doctype, CDATA


def _tag_kinds() -> Dict[str, NodeKind]:
    markup = LookupConfig.markup()
    kinds = {
        "br": NodeKind.LINE_BREAK,
        "p": NodeKind.PARAGRAPH,
        "sup": NodeKind.SUPERSCRIPT,
        "a": NodeKind.LINK,
        "span": NodeKind.GENERIC,
    }
    kinds.update({name: NodeKind.BOLD for name in markup['bold_tags']})
    kinds.update({name: NodeKind.ITALIC for name in markup['italic_tags']})
    return kinds


def classify(node: PageElement, kinds: Optional[Dict[str, NodeKind]] = None) -> NodeKind:
    if isinstance(node, NavigableString):
        if isinstance(node, PreformattedString):
            return NodeKind.IGNORED
        return NodeKind.TEXT
    if isinstance(node, Tag):
        kinds = kinds if kinds is not None else _tag_kinds()
        return kinds.get((node.name or "").lower(), NodeKind.GENERIC)
    raise MalformedDocumentError(f"Cannot render a {type(node).__name__}")


def render(node: PageElement) -> TextStream:
    """Render ``node`` and its descendants into a new :class:`TextStream`."""
    if not isinstance(node, (Tag, NavigableString)):
        raise MalformedDocumentError(f"Cannot render a {type(node).__name__}")
    stream = TextStream()
    _render_into(node, stream, _tag_kinds())
    return stream


def render_text(node: PageElement) -> str:
    return render(node).flatten()


def _render_children(node: Tag, stream: TextStream, kinds: Dict[str, NodeKind]) -> None:
    for child in node.children:
        _render_into(child, stream, kinds)


def _render_into(node: PageElement, stream: TextStream, kinds: Dict[str, NodeKind]) -> None:
    kind = classify(node, kinds)

    if kind is NodeKind.TEXT:
        stream.append(str(node))
    elif kind is NodeKind.BOLD:
        with stream.styled(Style.BOLD):
            _render_children(node, stream, kinds)
    elif kind is NodeKind.ITALIC:
        with stream.styled(Style.ITALIC):
            _render_children(node, stream, kinds)
    elif kind is NodeKind.LINE_BREAK:
        stream.newline()
    elif kind is NodeKind.PARAGRAPH:
        _render_children(node, stream, kinds)
        stream.newline()
    elif kind in (NodeKind.SUPERSCRIPT, NodeKind.IGNORED):
        return
    else:
        # LINK and GENERIC: keep visible text, drop the wrapper
        _render_children(node, stream, kinds)
