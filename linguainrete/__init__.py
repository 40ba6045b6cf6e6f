"""
Lingua in Rete: Italian dictionary, encyclopedia and synonym lookups for the terminal.

This package contains the extraction and rendering pipeline:
- Content location with ordered fallback chains (site layouts drift)
- Back-reference noise removal and styled text rendering
- Synonym/antonym listing extraction with a plain-text fallback
- Fetching, configuration and the command line front end
"""

from .config import LookupConfig, validate_config
from .exceptions import ConfigurationError, FetchError, LinguaError, MalformedDocumentError
from .locator import LookupMode, locate
from .lookup import extract_entry, lookup_word
from .noise import strip_noise
from .renderer import render, render_text
from .sanitizer import sanitize
from .synonyms import SynonymGroup, SynonymLabel, extract_synonyms
from .text_stream import Style, StyleRun, TextStream

__version__ = "1.0.0"

__all__ = [
    'LookupConfig',
    'validate_config',
    'LinguaError',
    'MalformedDocumentError',
    'FetchError',
    'ConfigurationError',
    'LookupMode',
    'locate',
    'extract_entry',
    'lookup_word',
    'strip_noise',
    'render',
    'render_text',
    'sanitize',
    'SynonymGroup',
    'SynonymLabel',
    'extract_synonyms',
    'Style',
    'StyleRun',
    'TextStream',
]
