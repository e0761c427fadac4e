"""Tests for popup, GeoJSON, and sightings table renderers."""

from __future__ import annotations

import json
from typing import Any

from butterfly_gallery.collection import SightingsState
from butterfly_gallery.renderers.geojson import build_feature_collection, observation_feature
from butterfly_gallery.renderers.popup import build_popup_html
from butterfly_gallery.renderers.sightings_table import build_sightings_table_html
from butterfly_gallery.schemas import GalleryObservation, GeoCoordinate


def make_obs(**kwargs: Any) -> GalleryObservation:
    fields: dict[str, Any] = {
        "species": "Danaus plexippus",
        "common_name": "Monarch",
        "coordinates": GeoCoordinate(latitude=34.5, longitude=-112.0),
        "location": "Somewhere, TX",
        "date": "2021/05/04",
        "photographer": "J. Smith",
        "image_url": "thumbs/m.jpg",
        "full_image_url": "photos/m.jpg",
        "source_url": "https://example.org/g.html",
    }
    fields.update(kwargs)
    return GalleryObservation(**fields)


# =============================================================================
# Popup
# =============================================================================


class TestBuildPopupHtml:
    def test_contains_fields(self) -> None:
        html = build_popup_html(make_obs())
        assert "Danaus plexippus" in html
        assert "Monarch" in html
        assert "Somewhere, TX" in html
        assert "2021/05/04" in html
        assert "J. Smith" in html

    def test_image_links_full_size(self) -> None:
        html = build_popup_html(make_obs())
        assert 'src="thumbs/m.jpg"' in html
        assert 'href="photos/m.jpg"' in html

    def test_image_link_falls_back_to_thumbnail(self) -> None:
        html = build_popup_html(make_obs(full_image_url=""))
        assert 'href="thumbs/m.jpg"' in html

    def test_no_image(self) -> None:
        assert "<img" not in build_popup_html(make_obs(image_url="", full_image_url=""))

    def test_missing_details_omitted(self) -> None:
        html = build_popup_html(make_obs(location="", date="", photographer=""))
        assert "popup-location" not in html
        assert "popup-date" not in html
        assert "popup-photographer" not in html

    def test_unresolved_labels(self) -> None:
        html = build_popup_html(make_obs(species=None, common_name=None))
        assert "Unknown Species" in html
        assert "Unknown" in html

    def test_escapes_text(self) -> None:
        html = build_popup_html(make_obs(location="<script>alert(1)</script>"))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


# =============================================================================
# GeoJSON
# =============================================================================


class TestObservationFeature:
    def test_point_is_lon_lat(self) -> None:
        feature = observation_feature(make_obs())
        assert feature["type"] == "Feature"
        assert feature["geometry"] == {"type": "Point", "coordinates": [-112.0, 34.5]}

    def test_properties(self) -> None:
        props = observation_feature(make_obs())["properties"]
        assert props["species"] == "Danaus plexippus"
        assert props["common_name"] == "Monarch"
        assert props["resolved"] is True
        assert props["grade"] == "research"
        assert props["source_url"] == "https://example.org/g.html"
        assert "Danaus plexippus" in props["popup_html"]

    def test_unresolved(self) -> None:
        props = observation_feature(make_obs(species=None, common_name=None))["properties"]
        assert props["species"] == "Unknown Species"
        assert props["common_name"] == "Unknown"
        assert props["resolved"] is False
        assert props["grade"] == "casual"


class TestBuildFeatureCollection:
    def test_collection(self) -> None:
        fc = build_feature_collection([make_obs(), make_obs(date="")])
        assert fc["type"] == "FeatureCollection"
        assert len(fc["features"]) == 2
        assert fc["features"][1]["properties"]["grade"] == "needs_id"

    def test_empty(self) -> None:
        assert build_feature_collection([]) == {"type": "FeatureCollection", "features": []}

    def test_json_serializable(self) -> None:
        text = json.dumps(build_feature_collection([make_obs()]))
        assert '"FeatureCollection"' in text


# =============================================================================
# Sightings table
# =============================================================================


class TestBuildSightingsTableHtml:
    def _state(self, *observations: GalleryObservation) -> SightingsState:
        state = SightingsState()
        state.replace(list(observations))
        return state

    def test_rows_and_summary(self) -> None:
        state = self._state(
            make_obs(),
            make_obs(
                species="Vanessa cardui",
                common_name="Painted Lady",
                coordinates=GeoCoordinate(latitude=44.05, longitude=-121.31),
                date="",
            ),
        )
        html = build_sightings_table_html(state)

        assert "sightings-table" in html
        assert html.count('<tr class="grade-') == 2
        assert "Painted Lady" in html
        assert "44.0500" in html
        assert "-121.3100" in html
        assert "<strong>2</strong> observations" in html
        assert "<strong>2</strong> species" in html
        assert "Complete: 1" in html
        assert "Partial: 1" in html

    def test_unresolved_row_marked(self) -> None:
        html = build_sightings_table_html(self._state(make_obs(species=None, common_name=None)))
        assert "species unresolved" in html
        assert "Unknown Species" in html
        assert "Unidentified: 1" in html

    def test_empty_message(self) -> None:
        html = build_sightings_table_html(SightingsState())
        assert "No observations with coordinates found." in html
        assert "<table" not in html

    def test_query_filters_rows(self) -> None:
        state = self._state(
            make_obs(),
            make_obs(species="Vanessa cardui", common_name="Painted Lady"),
        )
        state.set_query("painted")
        html = build_sightings_table_html(state)

        assert "Painted Lady" in html
        assert "Monarch" not in html
        assert "painted" in html

    def test_query_without_matches(self) -> None:
        state = self._state(make_obs())
        state.set_query("Morpho")
        assert "No observations with coordinates found." in build_sightings_table_html(state)
