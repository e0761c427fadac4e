"""In-memory sightings state for the rendering side.

The extraction pipeline is stateless; whatever displays the records owns
one ``SightingsState`` and swaps its contents wholesale on each reload.
Records are never updated or removed individually.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from butterfly_gallery.analysis.summary import (
    SightingsSummary,
    bounding_box,
    filter_observations,
    summarize,
)
from butterfly_gallery.schemas import BoundingBox, GalleryObservation


@dataclass
class SightingsState:
    """Ordered observations plus the active filter query."""

    observations: list[GalleryObservation] = field(default_factory=list)
    query: str = ""
    sources: list[str] = field(default_factory=list)

    def replace(
        self, observations: list[GalleryObservation], sources: list[str] | None = None
    ) -> None:
        """Discard the current records and take ownership of a new set."""
        self.observations = list(observations)
        self.sources = list(sources) if sources is not None else _unique_sources(observations)

    def set_query(self, query: str | None) -> None:
        self.query = (query or "").strip()

    def filtered(self) -> list[GalleryObservation]:
        return filter_observations(self.observations, self.query)

    def summary(self) -> SightingsSummary:
        """Counts over the filtered view."""
        return summarize(self.filtered())

    def bounds(self) -> BoundingBox | None:
        return bounding_box(self.filtered())

    def __len__(self) -> int:
        return len(self.observations)


def _unique_sources(observations: list[GalleryObservation]) -> list[str]:
    seen: dict[str, None] = {}
    for obs in observations:
        seen.setdefault(obs.source_url, None)
    return list(seen)
