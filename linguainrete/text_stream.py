"""Styled text accumulator used by the renderer.

A :class:`TextStream` is an ordered list of tokens: text runs and style
markers. Markers are only ever added in on/off pairs through
:meth:`TextStream.styled`, so a flattened stream is always balanced, even when
the styled region is empty or rendering of the region raises.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Union

BOLD_ON = "\x1b[1m"
BOLD_OFF = "\x1b[22m"
ITALIC_ON = "\x1b[3m"
ITALIC_OFF = "\x1b[23m"

ANSI_PATTERN = re.compile(r"\x1b\[\d+m")


class Style(Enum):
    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"


_MARKERS = {
    Style.BOLD: (BOLD_ON, BOLD_OFF),
    Style.ITALIC: (ITALIC_ON, ITALIC_OFF),
}


@dataclass(frozen=True, slots=True)
class StyleRun:
    """A span of text together with the innermost emphasis active over it."""

    text: str
    style: Style = Style.PLAIN


@dataclass(frozen=True, slots=True)
class StyleMarker:
    style: Style
    on: bool

    @property
    def code(self) -> str:
        on_code, off_code = _MARKERS[self.style]
        return on_code if self.on else off_code


Token = Union[StyleRun, StyleMarker]


@dataclass
class TextStream:
    tokens: List[Token] = field(default_factory=list)
    _active: List[Style] = field(default_factory=list, repr=False)

    def append(self, text: str) -> None:
        if text:
            style = self._active[-1] if self._active else Style.PLAIN
            self.tokens.append(StyleRun(text, style))

    def newline(self) -> None:
        self.append("\n")

    @contextmanager
    def styled(self, style: Style) -> Iterator["TextStream"]:
        """Bracket everything appended inside the block with ``style`` markers."""
        if style is Style.PLAIN:
            yield self
            return
        self.tokens.append(StyleMarker(style, True))
        self._active.append(style)
        try:
            yield self
        finally:
            self._active.pop()
            self.tokens.append(StyleMarker(style, False))

    @property
    def runs(self) -> List[StyleRun]:
        return [t for t in self.tokens if isinstance(t, StyleRun)]

    @property
    def markers(self) -> List[StyleMarker]:
        return [t for t in self.tokens if isinstance(t, StyleMarker)]

    def flatten(self) -> str:
        """Join the stream into one string with ANSI escape markers."""
        parts = []
        for token in self.tokens:
            if isinstance(token, StyleMarker):
                parts.append(token.code)
            else:
                parts.append(token.text)
        return "".join(parts)

    def plain_text(self) -> str:
        return "".join(run.text for run in self.runs)

    def __str__(self) -> str:
        return self.flatten()


def strip_styles(text: str) -> str:
    """Remove ANSI emphasis markers from already flattened text."""
    return ANSI_PATTERN.sub("", text)
