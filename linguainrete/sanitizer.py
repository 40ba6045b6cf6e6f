"""Final cosmetic cleanup of rendered entry text."""

import re

# Emotion/MUI pages sometimes inline their generated stylesheet next to the
# content, which surfaces as ".css-1x2y3z{color:red;...}" in the text.
STYLE_LEAK_PATTERN = re.compile(r"\.css-[\w-]*[\w\-.#:>+~\[\]()= ,]*\{[^}\n]*\}")


def sanitize(text: str) -> str:
    """Remove leaked inline stylesheet fragments; other text is left alone."""
    if not text:
        return text
    return STYLE_LEAK_PATTERN.sub("", text)
