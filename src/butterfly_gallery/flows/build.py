"""
Prefect flow for building the static sightings site from cached data.

Writes ``index.html`` (summary + table) and ``observations.geojson``
(one point per sighting, popup HTML included) for a map front-end.

Run locally:
    python -m butterfly_gallery.flows.build
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from prefect import flow, task

from butterfly_gallery.collection import SightingsState
from butterfly_gallery.config import get_settings
from butterfly_gallery.renderers import render_template
from butterfly_gallery.renderers.geojson import build_feature_collection
from butterfly_gallery.renderers.sightings_table import build_sightings_table_html
from butterfly_gallery.store import DataStore

store = DataStore(get_settings().data_dir)
SITE_DIR = store.derived / "site"

# Path matching what fetch.py writes
OBSERVATIONS_PATH = Path("live/observations.json")


def _format_updated(fetched_at: str) -> str:
    if not fetched_at:
        return "unknown"
    dt = datetime.fromisoformat(fetched_at)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).strftime("%Y-%m-%d %H:%M UTC")


@task(name="load-observations")
def load_observations() -> SightingsState | None:
    """Load cached observations into a fresh sightings state."""
    observations = store.read_observations(OBSERVATIONS_PATH)
    if observations is None:
        return None
    meta = (store.read_raw(OBSERVATIONS_PATH) or {}).get("meta", {})
    state = SightingsState()
    state.replace(observations, sources=meta.get("sources"))
    return state


@task(name="build-html")
def build_html(state: SightingsState, updated: str) -> str:
    """Build the site page from the sightings state."""
    return render_template(
        "base.html.j2",
        updated=updated,
        sightings_table=build_sightings_table_html(state),
        sources=state.sources,
    )


@task(name="build-geojson")
def build_geojson(state: SightingsState) -> dict[str, Any]:
    return build_feature_collection(state.filtered())


@task(name="write-site")
def write_site(html: str, geojson: dict[str, Any]) -> Path:
    """Write HTML and GeoJSON to the site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    with (SITE_DIR / "observations.geojson").open("w", encoding="utf-8") as f:
        json.dump(geojson, f, ensure_ascii=False)
    return output_path


@flow(name="build-site", log_prints=True)
def build_all(query: str = "") -> dict[str, Any]:
    """
    Build the static site from cached observations.

    Args:
        query: Optional species/location filter applied to the output.
    """
    print("Loading observations...")
    state = load_observations()
    if state is None:
        print("No observations found. Run fetch flow first.")
        return {"error": "no data"}

    state.set_query(query)
    raw = store.read_raw(OBSERVATIONS_PATH) or {}
    updated = _format_updated(raw.get("meta", {}).get("fetched_at", ""))

    print(f"Building HTML for {len(state.filtered())} of {len(state)} observations...")
    html = build_html(state, updated)
    geojson = build_geojson(state)

    print("Writing site...")
    output_path = write_site(html, geojson)

    print(f"Site built: {output_path}")
    return {
        "pages": 1,
        "observations": len(geojson["features"]),
        "output": str(output_path),
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
