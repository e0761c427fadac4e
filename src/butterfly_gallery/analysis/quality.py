"""Data-completeness grading for extracted records."""

from __future__ import annotations

from butterfly_gallery.schemas import GalleryObservation, QualityGrade


def grade_observation(obs: GalleryObservation) -> QualityGrade:
    """Grade a record by how much of its title could be parsed.

    Research = species resolved and both location and date present.
    Needs ID = species resolved but location or date missing.
    Casual   = species could not be read from the title.
    """
    if obs.is_resolved and obs.location and obs.date:
        return QualityGrade.RESEARCH
    if obs.is_resolved:
        return QualityGrade.NEEDS_ID
    return QualityGrade.CASUAL
