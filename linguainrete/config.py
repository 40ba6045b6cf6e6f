#!/usr/bin/env python3
"""
Centralized Configuration for the Lookup Pipeline
Reference sources, HTTP settings, markup tokens and logging defaults
"""

import os
from typing import Dict, List

from .exceptions import ConfigurationError


class LookupConfig:
    """Centralized configuration for dictionary, encyclopedia and synonym lookups"""

    # Reference sources, keyed by LookupMode value
    SOURCES = {
        'vocabolario': 'https://www.treccani.it/vocabolario/{word}',
        'enciclopedia': 'https://www.treccani.it/enciclopedia/{word}',
        'sinonimo': 'https://sinonimi.it/{word}',
    }

    # HTTP Settings
    HTTP = {
        'user_agent': 'Mozilla/5.0 (compatible; LinguaInRete/1.0)',
        'timeout': 30,
    }

    # Markup tokens. The sites rename their CSS classes from time to time, so
    # every token lives here rather than in the matching code.
    MARKUP = {
        # Dictionary / encyclopedia entry container, tried in order
        'content_containers': ['term-content', 'Term_termContent'],
        # A paragraph must carry every one of these tokens to count as body text
        'body_text_tokens': ['MuiTypography-root', 'MuiTypography-bodyL'],
        # Wrappers that hold the real definition paragraphs inside the container
        'paragraph_wrappers': ['term-paragraph', 'Term_elTermParagraph', 'paywall'],
        # The first body paragraph is a teaser; the definition is the next one
        'dictionary_fallback_index': 1,

        # Back-reference anchors wrapped in bold tags are noise
        'backlink_id': 'link2',

        'bold_tags': ['strong', 'b'],
        'italic_tags': ['em', 'i'],

        # Synonym page
        'synonym_containers': ['bg-[#EFF2F1]', 'contenuto'],
        'synonym_list_tags': ['p', 'ul', 'ol'],
        'synonym_groups': {
            'synonyms': {'heading': 'h3', 'keyword': 'sinonim', 'class_token': 'sinonimi',
                         'wrapper_token': 'bg-[#EFF2F1]'},
            'antonyms': {'heading': 'h3', 'keyword': 'contrari', 'class_token': 'contrari'},
            'see_also': {'heading': 'h4', 'keyword': 'vedi', 'class_token': 'vedianche'},
        },
    }

    # Logging Configuration
    LOGGING = {
        'level': 'WARNING',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    @classmethod
    def get_source_url(cls, mode_value: str) -> str:
        """Get the URL template for a lookup mode"""
        env = os.getenv(f'LINGUAINRETE_URL_{mode_value.upper()}')
        if env:
            return env
        return cls.SOURCES[mode_value]

    @classmethod
    def get_user_agent(cls) -> str:
        return os.getenv('LINGUAINRETE_USER_AGENT') or cls.HTTP['user_agent']

    @classmethod
    def get_timeout(cls) -> float:
        env = os.getenv('LINGUAINRETE_TIMEOUT')
        if env:
            try:
                return float(env)
            except ValueError:
                pass
        return float(cls.HTTP['timeout'])

    @classmethod
    def get_log_level(cls) -> str:
        return (os.getenv('LINGUAINRETE_LOG_LEVEL') or cls.LOGGING['level']).upper()

    @classmethod
    def markup(cls) -> Dict:
        """Get the markup token table"""
        return cls.MARKUP


def validate_config() -> bool:
    """Validate configuration settings"""
    errors: List[str] = []

    for mode_value, template in LookupConfig.SOURCES.items():
        if '{word}' not in template:
            errors.append(f"Source URL for '{mode_value}' has no {{word}} placeholder")

    if LookupConfig.get_timeout() <= 0:
        errors.append("HTTP timeout must be positive")

    markup = LookupConfig.MARKUP
    for key in ('content_containers', 'body_text_tokens', 'synonym_containers'):
        if not markup.get(key):
            errors.append(f"Missing markup tokens: {key}")
    if int(markup.get('dictionary_fallback_index', -1)) < 0:
        errors.append("dictionary_fallback_index must be >= 0")

    if errors:
        raise ConfigurationError(f"Configuration validation failed: {', '.join(errors)}")

    return True
