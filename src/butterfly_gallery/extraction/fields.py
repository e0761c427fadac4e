"""Field extractors for decoded gallery titles.

A typical title (after entity decoding) looks like::

    <p4><i>Danaus plexippus</i> - Monarch</a></p4> Somewhere, TX
    (34°30'0''N 112°0'0''W) 2021/05/04 © J. Smith

Each field has an ordered list of patterns; the first match wins.
"""

from __future__ import annotations

import re

from butterfly_gallery.extraction.text import BREAK, clean

_DASH = r"[-–—]"
_TAG = re.compile(r"<[^>]+>")

SPECIES_PATTERNS: tuple[re.Pattern[str], ...] = (
    # <i>Species</i> - Common</a>
    re.compile(r"<i>\s*([^<]+?)\s*</i>\s*" + _DASH + r"\s*([^<]+?)\s*</a>", re.IGNORECASE),
    # <i>Species</i> - Common<...
    re.compile(r"<i>\s*([^<]+?)\s*</i>\s*" + _DASH + r"\s*([^<]+?)\s*(?=<|$)", re.IGNORECASE),
    # <i>Species</i> ... - Common text up to a break
    re.compile(
        r"<i>\s*(.+?)\s*</i>.*?" + _DASH + r"\s*(.+?)\s*(?:" + BREAK + "|$)", re.IGNORECASE
    ),
)

LOCATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    # text before "(<number>"
    re.compile(BREAK + r"\s*([^<\n]+?)\s*\(\s*[-+]?\d", re.IGNORECASE),
    # text running to the end of the title
    re.compile(BREAK + r"\s*([^<\n]+?)\s*$", re.IGNORECASE),
    # text before a YYYY/MM/DD date
    re.compile(BREAK + r"\s*([^<\n]+?)\s*\d{4}/\d{2}/\d{2}", re.IGNORECASE),
)

DATE_PATTERN = re.compile(r"\d{4}/\d{2}/\d{2}")
PHOTOGRAPHER_PATTERN = re.compile(r"(?:©|\(c\))\s*([^&<\n]+)", re.IGNORECASE)


def strip_tags(text: str) -> str:
    return clean(_TAG.sub(" ", text))


def extract_names(title: str) -> tuple[str | None, str | None]:
    """Return ``(species, common_name)``, or ``(None, None)`` if unparseable."""
    for pattern in SPECIES_PATTERNS:
        match = pattern.search(title)
        if match:
            species = strip_tags(match.group(1))
            common_name = strip_tags(match.group(2))
            return (species or None, common_name or None)
    return (None, None)


def extract_location(title: str) -> str:
    for pattern in LOCATION_PATTERNS:
        match = pattern.search(title)
        if match:
            return clean(match.group(1))
    return ""


def extract_date(title: str) -> str:
    match = DATE_PATTERN.search(title)
    return match.group(0) if match else ""


def extract_photographer(title: str) -> str:
    match = PHOTOGRAPHER_PATTERN.search(title)
    return clean(match.group(1)) if match else ""
