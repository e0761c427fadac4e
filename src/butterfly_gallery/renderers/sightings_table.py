"""Sightings table with summary counts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from butterfly_gallery.analysis.quality import grade_observation
from butterfly_gallery.renderers import render_template

if TYPE_CHECKING:
    from butterfly_gallery.collection import SightingsState

_GRADE_LABELS = {
    "research": "Complete",
    "needs_id": "Partial",
    "casual": "Unidentified",
}


def build_sightings_table_html(state: SightingsState) -> str:
    """Render the filtered observations as a table preceded by summary counts."""
    observations = state.filtered()
    summary = state.summary()

    rows: list[dict[str, Any]] = []
    for obs in observations:
        grade = grade_observation(obs).value
        rows.append(
            {
                "species": obs.species_label,
                "common_name": obs.common_name_label,
                "resolved": obs.is_resolved,
                "location": obs.location,
                "date": obs.date,
                "photographer": obs.photographer,
                "lat": f"{obs.coordinates.latitude:.4f}",
                "lon": f"{obs.coordinates.longitude:.4f}",
                "image_url": obs.image_url,
                "full_image_url": obs.full_image_url,
                "grade": grade,
                "grade_label": _GRADE_LABELS[grade],
            }
        )

    return render_template(
        "sightings_table.html.j2",
        rows=rows,
        summary=summary,
        query=state.query,
        grade_labels=_GRADE_LABELS,
    )
