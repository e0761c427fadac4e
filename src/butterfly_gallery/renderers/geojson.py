"""GeoJSON export of observations for an external map layer."""

from __future__ import annotations

from typing import Any

from butterfly_gallery.analysis.quality import grade_observation
from butterfly_gallery.renderers.popup import build_popup_html
from butterfly_gallery.schemas import GalleryObservation


def observation_feature(obs: GalleryObservation) -> dict[str, Any]:
    """One GeoJSON Point feature. Note GeoJSON order is [lon, lat]."""
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": [obs.coordinates.longitude, obs.coordinates.latitude],
        },
        "properties": {
            "species": obs.species_label,
            "common_name": obs.common_name_label,
            "resolved": obs.is_resolved,
            "location": obs.location,
            "date": obs.date,
            "photographer": obs.photographer,
            "image_url": obs.image_url,
            "full_image_url": obs.full_image_url,
            "source_url": obs.source_url,
            "grade": grade_observation(obs).value,
            "popup_html": build_popup_html(obs),
        },
    }


def build_feature_collection(observations: list[GalleryObservation]) -> dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [observation_feature(obs) for obs in observations],
    }
