#!/usr/bin/env python3
"""
Console helpers: UTF-8 output on Windows and ANSI-aware printing
"""

import os
import sys
from typing import Optional, TextIO

from .text_stream import strip_styles


def setup_console():
    """
    Setup the Windows console for accented text and ANSI escape sequences
    """
    if sys.platform.startswith('win'):
        if hasattr(sys.stdout, 'reconfigure'):
            sys.stdout.reconfigure(encoding='utf-8', errors='replace')
            sys.stderr.reconfigure(encoding='utf-8', errors='replace')

        os.environ['PYTHONIOENCODING'] = 'utf-8:replace'
        # An empty shell call switches cmd.exe into VT processing mode
        os.system('')


def supports_ansi(stream: Optional[TextIO] = None) -> bool:
    stream = stream or sys.stdout
    if os.getenv('NO_COLOR'):
        return False
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def safe_print(text: str, use_ansi: Optional[bool] = None, stream: Optional[TextIO] = None):
    """
    Print text, dropping emphasis markers when the target is not a terminal
    """
    stream = stream or sys.stdout
    if use_ansi is None:
        use_ansi = supports_ansi(stream)
    if not use_ansi:
        text = strip_styles(text)

    try:
        print(text, file=stream)
    except UnicodeEncodeError:
        encoding = getattr(stream, 'encoding', None) or 'ascii'
        print(text.encode(encoding, errors='replace').decode(encoding), file=stream)
