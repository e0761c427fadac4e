"""Gallery page -> observation records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from butterfly_gallery.datasources.gallery import client
from butterfly_gallery.extraction import extract_observations

if TYPE_CHECKING:
    from pathlib import Path

    from butterfly_gallery.schemas import GalleryObservation


def fetch_gallery_observations(url: str) -> list[GalleryObservation]:
    """Fetch one gallery page and extract its geolocated observations."""
    text = client.fetch_page(url)
    return extract_observations(client.parse_document(text), url)


def load_gallery_file(path: Path, source_url: str | None = None) -> list[GalleryObservation]:
    """
    Extract observations from a saved gallery page.

    Args:
        path: Local HTML file.
        source_url: URL to record on each observation (defaults to a file URI).

    Raises:
        GalleryContentError: The file does not contain HTML.
    """
    text = path.read_text(encoding="utf-8", errors="replace")
    source = source_url or path.resolve().as_uri()
    if not client.looks_like_html(text):
        raise client.GalleryContentError(source, "file is not HTML")
    return extract_observations(client.parse_document(text), source)
