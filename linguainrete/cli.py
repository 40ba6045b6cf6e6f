#!/usr/bin/env python3
"""
Lingua in Rete command line

Look up a word in the Treccani dictionary or encyclopedia, or list its
synonyms from sinonimi.it, and print the entry with terminal styling.

Usage:
  linguainrete <word> --vocabolario
  linguainrete <word> --enciclopedia
  linguainrete <word> --sinonimo [--plain] [--debug]
  python -m linguainrete <word> -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import LookupConfig
from .console import safe_print, setup_console
from .exceptions import LinguaError
from .locator import LookupMode
from .lookup import lookup_word

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Error: Definition not found"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linguainrete",
        description="Cerca definizioni di parole oppure i loro sinonimi",
    )
    parser.add_argument("word", help="La parola da cercare")
    parser.add_argument(
        "--vocabolario", "-v", "-voc",
        action="store_true",
        help="Cerca nel vocabolario Treccani",
    )
    parser.add_argument(
        "--sinonimo", "-s", "-sin",
        action="store_true",
        help="Cerca sinonimi su sinonimi.it",
    )
    parser.add_argument(
        "--enciclopedia", "-e", "-enc",
        action="store_true",
        help="Cerca nell'enciclopedia di Treccani",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print without bold/italic escape sequences.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log matching decisions to stderr.",
    )
    return parser


def resolve_mode(args: argparse.Namespace) -> Optional[LookupMode]:
    """Encyclopedia wins over dictionary, dictionary over synonyms."""
    if args.enciclopedia:
        return LookupMode.ENCYCLOPEDIA
    if args.vocabolario:
        return LookupMode.DICTIONARY
    if args.sinonimo:
        return LookupMode.SYNONYM
    return None


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else getattr(logging, LookupConfig.get_log_level(), logging.WARNING)
    logging.basicConfig(level=level, format=LookupConfig.LOGGING['format'])


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)
    setup_console()

    mode = resolve_mode(args)
    if mode is None:
        logger.debug("No lookup mode selected")
        print(NOT_FOUND_MESSAGE, file=sys.stderr)
        return 1

    try:
        entry = lookup_word(args.word, mode)
    except LinguaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not entry or not entry.strip():
        print(NOT_FOUND_MESSAGE, file=sys.stderr)
        return 1

    safe_print(entry, use_ansi=False if args.plain else None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
