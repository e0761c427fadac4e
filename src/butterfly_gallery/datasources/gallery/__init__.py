"""Photo-gallery pages that embed sighting metadata in image titles.

Public API:
  - client: fetch_page, parse_document, looks_like_html, GalleryContentError
  - pages: fetch_gallery_observations, load_gallery_file
"""

from butterfly_gallery.datasources.gallery.client import (
    GalleryContentError,
    fetch_page,
    looks_like_html,
    parse_document,
)
from butterfly_gallery.datasources.gallery.pages import (
    fetch_gallery_observations,
    load_gallery_file,
)

__all__ = [
    "GalleryContentError",
    "fetch_gallery_observations",
    "fetch_page",
    "load_gallery_file",
    "looks_like_html",
    "parse_document",
]
