#!/usr/bin/env python3
"""
Entry Lookup
Fetch a reference page, locate the entry and render it as terminal text.

``extract_entry`` is the pure part of the pipeline and works on an already
parsed document; ``lookup_word`` adds the HTTP round trip around it.
"""

from __future__ import annotations

import logging
from typing import List, Optional
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup, Tag

from .config import LookupConfig
from .exceptions import FetchError, MalformedDocumentError
from .locator import LookupMode, locate_paragraphs
from .noise import strip_noise
from .renderer import render
from .sanitizer import sanitize
from .synonyms import extract_synonyms

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"


def normalize_word(word: str) -> str:
    """Trim and hyphenate multi-word queries the way both sites spell their URLs."""
    return word.strip().replace(" ", "-")


def build_url(word: str, mode: LookupMode) -> str:
    template = LookupConfig.get_source_url(mode.value)
    return template.format(word=quote(normalize_word(word)))


def fetch_html(url: str, session: Optional[requests.Session] = None) -> Optional[str]:
    """Fetch a page; ``None`` when the site answers 404 (unknown word)."""
    headers = {"User-Agent": LookupConfig.get_user_agent()}
    client = session or requests
    logger.debug("GET %s", url)
    try:
        resp = client.get(url, headers=headers, timeout=LookupConfig.get_timeout())
        if resp.status_code == 404:
            logger.debug("404 for %s", url)
            return None
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e
    return resp.text


def parse_document(html_text: str) -> BeautifulSoup:
    return BeautifulSoup(html_text, "html.parser")


def render_paragraphs(paragraphs: List[Tag]) -> Optional[str]:
    rendered = [render(strip_noise(p)).flatten().strip() for p in paragraphs]
    text = PARAGRAPH_SEPARATOR.join(rendered).strip()
    if not text:
        return None
    return sanitize(text)


def extract_entry(document: Tag, mode: LookupMode, word: str) -> Optional[str]:
    """Rendered entry for ``word`` from a parsed page, or ``None`` if absent."""
    if not isinstance(document, Tag):
        raise MalformedDocumentError(f"Expected a parsed document, got {type(document).__name__}")

    if mode is LookupMode.SYNONYM:
        return extract_synonyms(document, normalize_word(word))

    paragraphs = locate_paragraphs(document, mode)
    if not paragraphs:
        return None
    return render_paragraphs(paragraphs)


def lookup_word(word: str, mode: LookupMode, session: Optional[requests.Session] = None) -> Optional[str]:
    """Fetch and extract the entry for ``word`` in one call."""
    url = build_url(word, mode)
    html_text = fetch_html(url, session=session)
    if html_text is None:
        return None
    return extract_entry(parse_document(html_text), mode, word)
