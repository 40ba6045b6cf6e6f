"""Locating the entry content inside a fetched page.

Both reference sites have shipped several incompatible layouts over time, so
no single selector is trusted. Each lookup mode is described as a
:class:`FallbackChain` of small query objects; the chain evaluates them in
order and stops at the first one that returns anything.

A query is any callable taking the search root and returning a list of
elements from inside that root, in document order. Queries never build new
nodes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Union

from bs4 import Tag

from .config import LookupConfig
from .exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)

Query = Callable[[Tag], List[Tag]]


class LookupMode(Enum):
    DICTIONARY = "vocabolario"
    ENCYCLOPEDIA = "enciclopedia"
    SYNONYM = "sinonimo"


def class_string(tag: Tag) -> str:
    value = tag.get("class")
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def normalize_space(text: str) -> str:
    return " ".join(text.split())


@dataclass(frozen=True)
class ClassQuery:
    """Elements named ``tag`` whose class attribute contains the given tokens.

    Tokens are matched as substrings of the whole class string, so
    ``Term_termContent`` also finds hashed CSS-module names such as
    ``Term_termContent__x1y2``. By default every token must be present;
    with ``any_token`` one is enough.
    """

    tag: Optional[str]
    tokens: Tuple[str, ...]
    any_token: bool = False

    def matches(self, node: Tag) -> bool:
        if self.tag is not None and node.name != self.tag:
            return False
        classes = class_string(node)
        if self.any_token:
            return any(token in classes for token in self.tokens)
        return all(token in classes for token in self.tokens)

    def __call__(self, root: Tag) -> List[Tag]:
        return root.find_all(self.matches)


@dataclass(frozen=True)
class WithinQuery:
    """Matches of ``target`` that sit inside an element matching ``wrapper``.

    ``root`` itself counts as a possible wrapper.
    """

    target: Query
    wrapper: ClassQuery

    def _inside_wrapper(self, node: Tag, root: Tag) -> bool:
        for parent in node.parents:
            if self.wrapper.matches(parent):
                return True
            if parent is root:
                break
        return False

    def __call__(self, root: Tag) -> List[Tag]:
        return [node for node in self.target(root) if self._inside_wrapper(node, root)]


@dataclass(frozen=True)
class NthQuery:
    """The ``index``-th match of ``query`` as a single-element list."""

    query: Query
    index: int

    def __call__(self, root: Tag) -> List[Tag]:
        matches = self.query(root)
        if len(matches) > self.index:
            return [matches[self.index]]
        return []


@dataclass(frozen=True)
class LinksQuery:
    """Anchors found under the matches of ``query``, without duplicates."""

    query: Query

    def __call__(self, root: Tag) -> List[Tag]:
        links: List[Tag] = []
        seen: set[int] = set()
        for container in self.query(root):
            for anchor in container.find_all("a"):
                if id(anchor) not in seen:
                    seen.add(id(anchor))
                    links.append(anchor)
        return links


@dataclass(frozen=True)
class HeadingListQuery:
    """Links of the list that follows a heading mentioning ``keyword``.

    The heading text is compared case-insensitively after whitespace
    normalisation. Only the first list-like sibling after each heading is read.
    """

    heading: str
    keyword: str
    list_tags: Tuple[str, ...] = ("p",)

    def matches_heading(self, node: Tag) -> bool:
        if node.name != self.heading:
            return False
        text = normalize_space(node.get_text(" ")).lower()
        return self.keyword.lower() in text

    def __call__(self, root: Tag) -> List[Tag]:
        links: List[Tag] = []
        for heading in root.find_all(self.matches_heading):
            sibling = heading.find_next_sibling(list(self.list_tags))
            if sibling is not None:
                links.extend(sibling.find_all("a"))
        return links


@dataclass
class FallbackChain:
    """Ordered queries evaluated until one returns a non-empty result."""

    name: str
    queries: Sequence[Query] = field(default_factory=list)

    def evaluate(self, root: Tag) -> Tuple[int, List[Tag]]:
        """Return ``(index, matches)`` of the first successful query, or ``(-1, [])``."""
        for index, query in enumerate(self.queries):
            matches = query(root)
            if matches:
                logger.debug("%s: query %d matched %d node(s)", self.name, index, len(matches))
                return index, matches
        logger.debug("%s: no query matched", self.name)
        return -1, []

    def first_match(self, root: Tag) -> List[Tag]:
        return self.evaluate(root)[1]


# ---------------------------------------------------------------------------
# Chains built from the configured markup tokens


def body_paragraph_query() -> ClassQuery:
    return ClassQuery("p", tuple(LookupConfig.markup()['body_text_tokens']))


def container_chain(mode: LookupMode) -> FallbackChain:
    """Chain for the dictionary/encyclopedia entry container."""
    markup = LookupConfig.markup()
    queries: List[Query] = [ClassQuery("div", (token,)) for token in markup['content_containers']]
    if mode is LookupMode.DICTIONARY:
        queries.append(NthQuery(body_paragraph_query(), int(markup['dictionary_fallback_index'])))
    return FallbackChain(f"{mode.value}-container", queries)


def paragraph_chain() -> FallbackChain:
    """Chain for the definition paragraphs inside a located container."""
    wrappers = ClassQuery("div", tuple(LookupConfig.markup()['paragraph_wrappers']), any_token=True)
    body = body_paragraph_query()
    return FallbackChain("paragraphs", [WithinQuery(body, wrappers), body])


def synonym_container_chain() -> FallbackChain:
    tokens = LookupConfig.markup()['synonym_containers']
    return FallbackChain("sinonimo-container", [ClassQuery("div", (token,)) for token in tokens])


# ---------------------------------------------------------------------------
# Public entry points


def locate_paragraphs(tree: Tag, mode: LookupMode) -> List[Tag]:
    """Definition paragraphs for dictionary or encyclopedia pages.

    When the container chain falls through to the body-paragraph fallback the
    matched node already is the paragraph, and it is returned as is.
    """
    index, matches = container_chain(mode).evaluate(tree)
    if not matches:
        return []

    container = matches[0]
    if index == len(LookupConfig.markup()['content_containers']):
        return [container]

    paragraphs = paragraph_chain().first_match(container)
    logger.debug("Located %d paragraph(s) for %s", len(paragraphs), mode.value)
    return paragraphs


def locate_synonym_container(tree: Tag) -> Tag:
    """The synonym listing container, or the whole document in degraded mode."""
    matches = synonym_container_chain().first_match(tree)
    if matches:
        return matches[0]
    logger.warning("Synonym container not found; using the whole document")
    return tree


def locate(tree: Tag, mode: LookupMode) -> Union[Tag, List[Tag]]:
    """Content node(s) for ``mode``.

    Dictionary and encyclopedia lookups yield a (possibly empty) list of
    paragraphs; synonym lookups yield a single container node.
    """
    if not isinstance(tree, Tag):
        raise MalformedDocumentError(f"Expected a parsed document, got {type(tree).__name__}")
    if mode is LookupMode.SYNONYM:
        return locate_synonym_container(tree)
    return locate_paragraphs(tree, mode)
