"""Observation extraction from gallery HTML.

Pure functions, no I/O: a parsed page plus its URL in, a list of
``GalleryObservation`` records out. Safe to call concurrently on
independent pages.

Public API:
  - coordinates: parse_coordinates, dms_to_decimal, classify_group_count
  - records: extract_observations, observation_from_title
  - text: decode_entities
"""

from butterfly_gallery.extraction.coordinates import (
    COORDINATE_PATTERNS,
    PatternKind,
    classify_group_count,
    dms_to_decimal,
    parse_coordinates,
)
from butterfly_gallery.extraction.records import extract_observations, observation_from_title
from butterfly_gallery.extraction.text import decode_entities

__all__ = [
    "COORDINATE_PATTERNS",
    "PatternKind",
    "classify_group_count",
    "decode_entities",
    "dms_to_decimal",
    "extract_observations",
    "observation_from_title",
    "parse_coordinates",
]
