"""Observation records from gallery page HTML.

Gallery pages wrap each photo in
``<a href="full.jpg" data-title="..."><img src="thumb.jpg"></a>`` (lightbox
style) or use a plain ``title`` attribute. The caption carries the
(entity-encoded) species, place, coordinates, date and photographer. Only
anchors with both a caption and an image are considered, and only
captions with a parseable coordinate become records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bs4 import BeautifulSoup
from loguru import logger

from butterfly_gallery.extraction.coordinates import parse_coordinates
from butterfly_gallery.extraction.fields import (
    extract_date,
    extract_location,
    extract_names,
    extract_photographer,
)
from butterfly_gallery.extraction.text import decode_entities
from butterfly_gallery.schemas import GalleryObservation

if TYPE_CHECKING:
    from bs4 import Tag


def observation_from_title(
    title: str,
    *,
    image_url: str = "",
    full_image_url: str = "",
    source_url: str = "",
) -> GalleryObservation | None:
    """Build a record from one raw title. Returns None if it has no coordinates."""
    decoded = decode_entities(title)

    species, common_name = extract_names(decoded)
    coordinates = parse_coordinates(decoded)
    if coordinates is None:
        logger.debug("No coordinates in title, skipping: {!r}", decoded[:80])
        return None

    return GalleryObservation(
        species=species,
        common_name=common_name,
        coordinates=coordinates,
        location=extract_location(decoded),
        date=extract_date(decoded),
        photographer=extract_photographer(decoded),
        image_url=image_url,
        full_image_url=full_image_url,
        source_url=source_url,
        original_title=decoded,
    )


def _attr(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _title(anchor: Tag) -> str:
    """Lightbox galleries put the caption in ``data-title``; plain ones use ``title``."""
    return _attr(anchor, "data-title") or _attr(anchor, "title")


def extract_observations(
    document: BeautifulSoup | Tag | str, source_url: str
) -> list[GalleryObservation]:
    """
    Extract all geolocated observations from a gallery page.

    Args:
        document: Parsed page (or raw HTML, parsed with ``html.parser``).
        source_url: URL the page was fetched from, stored on each record.

    Returns:
        Observations in document order; empty if nothing qualified.
    """
    if isinstance(document, str):
        document = BeautifulSoup(document, "html.parser")

    observations: list[GalleryObservation] = []
    candidates = 0
    for anchor in document.find_all("a"):
        image = anchor.find("img")
        title = _title(anchor)
        if image is None or not title:
            continue
        candidates += 1

        observation = observation_from_title(
            title,
            image_url=_attr(image, "src"),
            full_image_url=_attr(anchor, "href"),
            source_url=source_url,
        )
        if observation is not None:
            observations.append(observation)

    logger.debug(
        "Extracted {} of {} titled images from {}", len(observations), candidates, source_url
    )
    return observations
