"""Removal of back-reference noise from entry paragraphs.

Treccani wraps its internal cross-links in bold tags, e.g.
``<strong><a id="link2" href="#...">↑</a></strong>``. Those anchors must never
reach the terminal. Everything else passes through untouched; footnote
superscripts are left alone here and elided by the renderer instead.
"""

from __future__ import annotations

import copy
import logging
from typing import Optional, Sequence

from bs4 import NavigableString, Tag

from .config import LookupConfig
from .exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)


def is_backlink_wrapper(tag: Tag, backlink_id: str, bold_tags: Sequence[str]) -> bool:
    """True when ``tag`` is a bold element holding a back-reference anchor at any depth."""
    if tag.name not in bold_tags:
        return False
    return tag.find("a", attrs={"id": backlink_id}) is not None


def strip_noise(node: Tag, backlink_id: Optional[str] = None) -> Tag:
    """Return a cleaned copy of ``node``; the caller's tree is never modified."""
    if isinstance(node, NavigableString):
        return copy.copy(node)
    if not isinstance(node, Tag):
        raise MalformedDocumentError(f"Cannot strip noise from a {type(node).__name__}")

    markup = LookupConfig.markup()
    backlink_id = backlink_id or markup['backlink_id']
    bold_tags = list(markup['bold_tags'])

    working = copy.copy(node)
    doomed = [
        tag for tag in working.find_all(bold_tags)
        if is_backlink_wrapper(tag, backlink_id, bold_tags)
    ]
    for tag in doomed:
        tag.extract()

    if doomed:
        logger.debug("Removed %d back-reference wrapper(s)", len(doomed))
    return working
