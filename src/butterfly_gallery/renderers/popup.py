"""Marker popup content for a single observation."""

from __future__ import annotations

from butterfly_gallery.renderers import render_template
from butterfly_gallery.schemas import GalleryObservation


def build_popup_html(obs: GalleryObservation) -> str:
    """Species, common name, thumbnail, and details for a map popup."""
    return render_template(
        "popup.html.j2",
        species=obs.species_label,
        common_name=obs.common_name_label,
        image_url=obs.image_url,
        full_image_url=obs.full_image_url,
        location=obs.location,
        date=obs.date,
        photographer=obs.photographer,
    )
