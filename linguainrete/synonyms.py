"""Synonym, antonym and "see also" listings from sinonimi.it pages.

Two tiers:

1. Structured: each group is read from the links of a known block, found
   through its own :class:`~linguainrete.locator.FallbackChain`.
2. Text fallback: when no group yields anything, the whole container is
   rendered and the listing is recovered by splitting the text on the page's
   fixed phrases ("Sinonimo di", "Contrario di", "Vedi anche:").
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from bs4 import Tag

from .config import LookupConfig
from .exceptions import MalformedDocumentError
from .locator import (
    ClassQuery,
    FallbackChain,
    HeadingListQuery,
    LinksQuery,
    Query,
    WithinQuery,
    locate_synonym_container,
)
from .renderer import render

logger = logging.getLogger(__name__)

SEPARATOR = ", "


class SynonymLabel(Enum):
    SYNONYMS = "Sinonimi"
    ANTONYMS = "Contrari"
    SEE_ALSO = "Vedi anche"


_GROUP_KEYS = {
    SynonymLabel.SYNONYMS: 'synonyms',
    SynonymLabel.ANTONYMS: 'antonyms',
    SynonymLabel.SEE_ALSO: 'see_also',
}


@dataclass(slots=True)
class SynonymGroup:
    label: SynonymLabel
    items: List[str] = field(default_factory=list)

    def format(self) -> str:
        return f"{self.label.value}: {SEPARATOR.join(self.items)}"


def capitalize_word(word: str) -> str:
    """First character upper case, the rest lower case."""
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


def unique_in_order(items: Iterable[str]) -> List[str]:
    """Trim, drop empties and de-duplicate case-insensitively; first one wins."""
    result: List[str] = []
    seen: set[str] = set()
    for item in items:
        item = item.strip()
        if not item:
            continue
        key = item.lower()
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def anchor_texts(anchors: Iterable[Tag]) -> List[str]:
    return unique_in_order(a.get_text() for a in anchors)


def group_chain(label: SynonymLabel) -> FallbackChain:
    markup = LookupConfig.markup()
    group = markup['synonym_groups'][_GROUP_KEYS[label]]

    queries: List[Query] = [
        HeadingListQuery(group['heading'], group['keyword'], tuple(markup['synonym_list_tags'])),
        LinksQuery(ClassQuery("p", (group['class_token'],))),
    ]
    if group.get('wrapper_token'):
        queries.append(LinksQuery(WithinQuery(ClassQuery("p", ()), ClassQuery("div", (group['wrapper_token'],)))))
    return FallbackChain(_GROUP_KEYS[label], queries)


def extract_groups(container: Tag) -> List[SynonymGroup]:
    """All three groups, in output order; some may be empty."""
    return [
        SynonymGroup(label, anchor_texts(group_chain(label).first_match(container)))
        for label in SynonymLabel
    ]


def split_fallback_text(text: str, word: str) -> List[str]:
    """Recover a flat word list from rendered synonym-page text."""
    head_word = capitalize_word(word)
    output = re.sub("Sinonimo di " + re.escape(head_word), "", text)
    output = re.sub("Contrario di " + re.escape(head_word) + ".*?Vedi anche:", SEPARATOR, output)
    output = output.replace("Vedi anche:", SEPARATOR)
    return unique_in_order(output.split(SEPARATOR))


def format_groups(word: str, groups: List[SynonymGroup]) -> Optional[str]:
    lines = [group.format() for group in groups if group.items]
    if not lines:
        return None
    return "\n".join([capitalize_word(word)] + lines)


def extract_synonyms(tree: Tag, word: str) -> Optional[str]:
    """Synonym listing for ``word``, or ``None`` when the page has none."""
    if not isinstance(tree, Tag):
        raise MalformedDocumentError("Synonym extraction needs a parsed document")

    container = locate_synonym_container(tree)

    structured = format_groups(word, extract_groups(container))
    if structured is not None:
        logger.debug("Synonyms for '%s' read from structured markup", word)
        return structured

    logger.debug("No structured synonym groups for '%s'; splitting rendered text", word)
    items = split_fallback_text(render(container).plain_text(), word)
    if not items:
        return None
    return f"{capitalize_word(word)}:\n{SEPARATOR.join(items)}"
