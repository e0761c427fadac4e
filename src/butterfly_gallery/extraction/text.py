"""Text helpers shared by the coordinate parser and the record extractor."""

from __future__ import annotations

import html
import re

# A line break inside a gallery title: <br>, a closing paragraph tag
# (galleries use </p>, </p4>, ...) or a literal newline.
BREAK = r"(?:<br\s*/?>|</p\d*>|\n)"

_WHITESPACE = re.compile(r"\s+")


def decode_entities(text: str | None) -> str:
    """Resolve HTML entities (``&lt;``, ``&amp;``, ``&#176;`` ...) to characters."""
    if not text:
        return ""
    return html.unescape(text)


def clean(text: str) -> str:
    """Collapse runs of whitespace and trim."""
    return _WHITESPACE.sub(" ", text).strip()
