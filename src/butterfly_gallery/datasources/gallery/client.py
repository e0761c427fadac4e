"""Gallery page fetching and parsing.

Pages are plain HTML photo galleries; anything else (JSON error bodies,
empty responses, proxy interstitials) is rejected before extraction.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from butterfly_gallery.services.http import session

PARSER = "html.parser"

_HTML_MARKER = re.compile(r"<\s*(?:!doctype\s+html|html|body|a|img|div|table)\b", re.IGNORECASE)


class GalleryContentError(Exception):
    """Fetched content is not an HTML page."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


def looks_like_html(text: str | None) -> bool:
    """Cheap check that a body is an HTML document and not e.g. a JSON error."""
    if not text or not text.strip():
        return False
    return _HTML_MARKER.search(text[:4096]) is not None


def parse_document(text: str) -> BeautifulSoup:
    return BeautifulSoup(text, PARSER)


def fetch_page(url: str) -> str:
    """
    Download a gallery page.

    Raises:
        requests.HTTPError: Non-2xx response after retries.
        GalleryContentError: The body is not HTML.
    """
    resp = session.get(url)
    resp.raise_for_status()
    text = resp.text
    if not looks_like_html(text):
        raise GalleryContentError(url, "response is not HTML")
    return text
