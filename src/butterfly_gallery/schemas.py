"""
Domain models for butterfly gallery sightings.

Pydantic models for records extracted from gallery pages and for the
summaries derived from them. These define the canonical schema - the
extraction pipeline produces them, renderers and the store consume them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_SPECIES = "Unknown Species"
UNKNOWN_COMMON_NAME = "Unknown"


# =============================================================================
# Core
# =============================================================================


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None


# =============================================================================
# Geographic
# =============================================================================


class GeoCoordinate(BaseModel):
    """A (latitude, longitude) pair in decimal degrees.

    Bounds are not enforced here: DMS and hemisphere matches are taken
    as written, only plain decimal pairs are range checked by the parser.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


class BoundingBox(BaseModel):
    """Geographic bounding box for a set of sightings."""

    south: float = Field(..., ge=-90, le=90)
    west: float = Field(..., ge=-180, le=180)
    north: float = Field(..., ge=-90, le=90)
    east: float = Field(..., ge=-180, le=180)


# =============================================================================
# Observations
# =============================================================================


class QualityGrade(StrEnum):
    """How complete an extracted record is."""

    RESEARCH = "research"
    NEEDS_ID = "needs_id"
    CASUAL = "casual"


class GalleryObservation(BaseModel):
    """A butterfly sighting scraped from a gallery image title.

    ``species`` and ``common_name`` are ``None`` when the title could not
    be parsed, which keeps "failed to parse" apart from a blank field.
    Use the ``*_label`` properties for display text.
    """

    model_config = ConfigDict(frozen=True)

    species: str | None = None
    common_name: str | None = None
    coordinates: GeoCoordinate
    location: str = ""
    date: str = ""
    photographer: str = ""
    image_url: str = ""
    full_image_url: str = ""
    source_url: str = ""
    original_title: str = ""

    @property
    def is_resolved(self) -> bool:
        """Whether a species name was parsed from the title."""
        return self.species is not None

    @property
    def species_label(self) -> str:
        return self.species if self.species is not None else UNKNOWN_SPECIES

    @property
    def common_name_label(self) -> str:
        return self.common_name if self.common_name is not None else UNKNOWN_COMMON_NAME

    @property
    def display_name(self) -> str:
        if self.common_name:
            return f"{self.common_name} ({self.species_label})"
        return self.species_label

    def reparse_coordinates(self) -> GeoCoordinate | None:
        """Re-derive coordinates from the retained title text."""
        from butterfly_gallery.extraction.coordinates import parse_coordinates

        return parse_coordinates(self.original_title)
