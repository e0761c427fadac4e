"""Filtering, summary counts, and bounds for a set of observations."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from butterfly_gallery.analysis.quality import grade_observation
from butterfly_gallery.extraction.coordinates import in_range
from butterfly_gallery.schemas import BoundingBox, GalleryObservation, QualityGrade


@dataclass
class SightingsSummary:
    """Counts shown alongside the sightings table."""

    total: int = 0
    species_count: int = 0
    unresolved: int = 0
    by_grade: dict[str, int] = field(default_factory=dict)
    by_source: dict[str, int] = field(default_factory=dict)
    first_date: str | None = None
    last_date: str | None = None

    @property
    def date_range(self) -> str:
        """Human-readable date span, e.g. '2019/06/01 – 2021/05/04'."""
        if not self.first_date or not self.last_date:
            return "unknown dates"
        if self.first_date == self.last_date:
            return self.first_date
        return f"{self.first_date} – {self.last_date}"


def filter_observations(
    observations: list[GalleryObservation], query: str | None
) -> list[GalleryObservation]:
    """Case-insensitive substring match on species, common name, and location.

    A blank query returns every observation. Order is preserved.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(observations)

    def _matches(obs: GalleryObservation) -> bool:
        haystack = f"{obs.species or ''} {obs.common_name or ''} {obs.location}"
        return needle in haystack.lower()

    return [obs for obs in observations if _matches(obs)]


def summarize(observations: list[GalleryObservation]) -> SightingsSummary:
    """Count records, distinct species, grades, and sources."""
    grades: Counter[str] = Counter({grade.value: 0 for grade in QualityGrade})
    sources: Counter[str] = Counter()
    species: set[str] = set()
    dates: list[str] = []
    unresolved = 0

    for obs in observations:
        grades[grade_observation(obs).value] += 1
        sources[obs.source_url] += 1
        if obs.species is None:
            unresolved += 1
        else:
            species.add(obs.species)
        if obs.date:
            dates.append(obs.date)

    return SightingsSummary(
        total=len(observations),
        species_count=len(species),
        unresolved=unresolved,
        by_grade=dict(grades),
        by_source=dict(sources),
        first_date=min(dates) if dates else None,
        last_date=max(dates) if dates else None,
    )


def bounding_box(observations: list[GalleryObservation]) -> BoundingBox | None:
    """Smallest box containing every in-range observation, or None if empty.

    DMS and hemisphere coordinates are not range checked at parse time,
    so out-of-range points are skipped here.
    """
    points = [
        obs.coordinates
        for obs in observations
        if in_range(obs.coordinates.latitude, obs.coordinates.longitude)
    ]
    if not points:
        return None
    return BoundingBox(
        south=min(p.latitude for p in points),
        west=min(p.longitude for p in points),
        north=max(p.latitude for p in points),
        east=max(p.longitude for p in points),
    )
